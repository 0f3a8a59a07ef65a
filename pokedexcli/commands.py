"""The commands of the interactive Pokedex shell."""

from __future__ import annotations

import random
import sys
from datetime import timedelta
from typing import TextIO

from pokedexcli.api import (
    LOCATION_URL,
    get_area_pokemon,
    get_location_areas,
    get_pokemon,
)
from pokedexcli.catchrate import simulate_catch
from pokedexcli.models import Command, Pokemon
from pokedexcli.pokecache import Cache

CACHE_INTERVAL = timedelta(minutes=3)


class ExitRequested(Exception):
    """Raised by the exit command to end the shell."""


class Session:
    """State of one shell: map paging, caught pokemon and the response cache."""

    def __init__(
        self,
        cache: Cache | None = None,
        out: TextIO | None = None,
        rng: random.Random | None = None,
    ) -> None:
        self.cache = cache if cache is not None else Cache(CACHE_INTERVAL)
        self.out = out
        self.rng = rng
        self.next_url = LOCATION_URL
        self.previous_url = ""
        self.pokedex: dict[str, Pokemon] = {}
        self._commands = {
            cmd.name: cmd
            for cmd in (
                Command("exit", "Exit the Pokedex", self.command_exit),
                Command("help", "Displays a help message", self.command_help),
                Command("map", "Displays the names of 20 location areas", self.command_map),
                Command("mapb", "Displays the previous 20 location areas", self.command_mapb),
                Command(
                    "explore",
                    "Lists all the possible pokemon encounters in a location area",
                    self.command_explore,
                ),
                Command("catch", "Give the user a chance to catch a Pokemon", self.command_catch),
                Command(
                    "inspect", "Lets the user observe caught pokemon's stats", self.command_inspect
                ),
                Command("pokedex", "Lists the all caught pokemon", self.command_pokedex),
            )
        }

    def commands(self) -> dict[str, Command]:
        """Return the commands by name."""
        return dict(self._commands)

    def _say(self, *parts: object) -> None:
        print(*parts, file=self.out if self.out is not None else sys.stdout)

    def _show_page(self, url: str) -> None:
        page = get_location_areas(url, self.cache)
        self.next_url = page.next
        self.previous_url = page.previous
        for area in page.results:
            self._say(area.name)

    def command_exit(self, args: list[str]) -> None:
        self._say("Closing the Pokedex... Goodbye!")
        raise ExitRequested

    def command_help(self, args: list[str]) -> None:
        self._say("Usage:")
        self._say()
        for name, cmd in self._commands.items():
            self._say(f"{name}: {cmd.description}")

    def command_map(self, args: list[str]) -> None:
        self._show_page(self.next_url)

    def command_mapb(self, args: list[str]) -> None:
        if not self.previous_url:
            self._say("no previous URL")
            return
        self._show_page(self.previous_url)

    def command_explore(self, args: list[str]) -> None:
        if not args:
            self._say("No location provided for explore command")
            return
        location = args[0]
        area = get_area_pokemon(location, self.cache)
        self._say(f"Exploring {location}...")
        self._say("Found Pokemon:")
        for encounter in area.pokemon_encounters:
            self._say(f"- {encounter.pokemon.name}")

    def command_catch(self, args: list[str]) -> None:
        if not args:
            self._say("Specify pokemon to catch")
            return
        name = args[0]
        self._say(f"Throwing a Pokeball at {name}...")
        wild = get_pokemon(name, self.cache)
        if simulate_catch(wild.base_experience, self.rng):
            self._say(f"{name} was caught!")
            self._say("You may now inspect it with the inspect command.")
            self.pokedex[name] = wild
        else:
            self._say(f"{name} escaped!")

    def command_inspect(self, args: list[str]) -> None:
        if not args:
            self._say("Specify pokemon to inspect")
            return
        pokemon = self.pokedex.get(args[0])
        if pokemon is None:
            self._say("you have not caught that pokemon")
            return
        self._say(f"Name: {pokemon.name}")
        self._say(f"Height: {pokemon.height}")
        self._say(f"Weight: {pokemon.weight}")
        self._say("Stats:")
        for stat in pokemon.stats:
            self._say(f"  -{stat.type.name}: {stat.base_stat}")
        self._say("Types:")
        for slot in pokemon.types:
            self._say(f"  - {slot.type.name}")

    def command_pokedex(self, args: list[str]) -> None:
        self._say("Your Pokedex:")
        for name in self.pokedex:
            self._say(f" - {name}")