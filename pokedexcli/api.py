"""Fetching location areas and pokemon from the PokeAPI, through a cache."""

from __future__ import annotations

import json
import urllib.error
import urllib.request
from typing import Any

from pokedexcli.models import Config, LocationArea, Pokemon

LOCATION_URL = "https://pokeapi.co/api/v2/location-area/"
POKEMON_URL = "https://pokeapi.co/api/v2/pokemon/"


class ApiError(Exception):
    """A request failed or its response could not be decoded."""


def _download(url: str) -> bytes:
    try:
        with urllib.request.urlopen(url, timeout=30) as resp:
            if resp.status != 200:
                raise ApiError(f"unexpected status: {resp.status} {resp.reason}")
            return resp.read()
    except urllib.error.HTTPError as exc:
        raise ApiError(f"unexpected status: {exc.code} {exc.reason}") from exc
    except OSError as exc:
        raise ApiError(f"request to {url} failed: {getattr(exc, 'reason', exc)}") from exc


def fetch_json(url: str, cache: Any) -> Any:
    """Return the decoded JSON at ``url``, from ``cache`` when it holds it."""
    data = cache.get(url)
    if data is not None:
        print("LOG --- Cache hit")
    else:
        print("LOG --- Cache miss")
        data = _download(url)
        cache.add(url, data)
    try:
        return json.loads(data)
    except ValueError as exc:
        raise ApiError(f"invalid JSON from {url}: {exc}") from exc


def get_location_areas(url: str, cache: Any) -> Config:
    """Return the page of location areas at ``url``."""
    return Config.from_dict(fetch_json(url, cache))


def get_area_pokemon(location: str, cache: Any) -> LocationArea:
    """Return the location area called ``location`` with its encounters."""
    return LocationArea.from_dict(fetch_json(f"{LOCATION_URL}{location}/", cache))


def get_pokemon(name: str, cache: Any) -> Pokemon:
    """Return the pokemon called ``name``."""
    return Pokemon.from_dict(fetch_json(POKEMON_URL + name, cache))