"""Data shapes returned by the location-area and pokemon endpoints."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any


def _obj(data: Any) -> dict:
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"expected a JSON object, got {data!r}")
    return data


def _get(obj: dict, key: str, kind: type) -> Any:
    """Return ``obj[key]`` as ``kind``; missing or null gives its zero value."""
    value = obj.get(key)
    if value is None:
        return kind()
    if isinstance(value, bool) or not isinstance(value, kind):
        raise ValueError(f"field {key!r}: expected {kind.__name__}, got {value!r}")
    return value


def _items(obj: dict, key: str, parse: Callable[[Any], Any]) -> list:
    return [parse(item) for item in _get(obj, key, list)]


@dataclass
class NamedAPIResource:
    name: str = ""
    url: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> NamedAPIResource:
        obj = _obj(data)
        return cls(_get(obj, "name", str), _get(obj, "url", str))


@dataclass
class EncounterVersionDetail:
    version: NamedAPIResource = field(default_factory=NamedAPIResource)
    rarity: int = 0

    @classmethod
    def from_dict(cls, data: Any) -> EncounterVersionDetail:
        obj = _obj(data)
        return cls(NamedAPIResource.from_dict(obj.get("version")), _get(obj, "rarity", int))


@dataclass
class PokemonEncounter:
    pokemon: NamedAPIResource = field(default_factory=NamedAPIResource)
    version_details: list[EncounterVersionDetail] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> PokemonEncounter:
        obj = _obj(data)
        return cls(
            NamedAPIResource.from_dict(obj.get("pokemon")),
            _items(obj, "version_details", EncounterVersionDetail.from_dict),
        )


@dataclass
class LocationArea:
    id: int = 0
    name: str = ""
    pokemon_encounters: list[PokemonEncounter] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> LocationArea:
        obj = _obj(data)
        return cls(
            _get(obj, "id", int),
            _get(obj, "name", str),
            _items(obj, "pokemon_encounters", PokemonEncounter.from_dict),
        )


@dataclass
class Config:
    """One page of location areas; a null link is the empty string."""

    next: str = ""
    previous: str = ""
    results: list[LocationArea] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> Config:
        obj = _obj(data)
        return cls(
            _get(obj, "next", str),
            _get(obj, "previous", str),
            _items(obj, "results", LocationArea.from_dict),
        )


@dataclass
class Command:
    name: str
    description: str
    callback: Callable[[list[str]], None]


@dataclass
class PokemonStat:
    type: NamedAPIResource = field(default_factory=NamedAPIResource)
    base_stat: int = 0

    @classmethod
    def from_dict(cls, data: Any) -> PokemonStat:
        obj = _obj(data)
        return cls(NamedAPIResource.from_dict(obj.get("stat")), _get(obj, "base_stat", int))


@dataclass
class PokemonType:
    type: NamedAPIResource = field(default_factory=NamedAPIResource)

    @classmethod
    def from_dict(cls, data: Any) -> PokemonType:
        return cls(NamedAPIResource.from_dict(_obj(data).get("type")))


@dataclass
class Pokemon:
    id: int = 0
    name: str = ""
    base_experience: int = 0
    height: int = 0
    weight: int = 0
    stats: list[PokemonStat] = field(default_factory=list)
    types: list[PokemonType] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> Pokemon:
        obj = _obj(data)
        return cls(
            _get(obj, "id", int),
            _get(obj, "name", str),
            _get(obj, "base_experience", int),
            _get(obj, "height", int),
            _get(obj, "weight", int),
            _items(obj, "stats", PokemonStat.from_dict),
            _items(obj, "types", PokemonType.from_dict),
        )