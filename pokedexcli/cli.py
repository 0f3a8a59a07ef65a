"""The interactive Pokedex shell."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Sequence
from typing import TextIO

from pokedexcli.api import ApiError
from pokedexcli.commands import ExitRequested, Session

PROMPT = "Pokedex > "


def repl(session: Session, lines: Iterable[str], out: TextIO | None = None) -> int:
    """Run commands from ``lines``; return 0 on exit or end of input, 1 on failure."""
    out = out or sys.stdout
    print("Welcome to the Pokedex!", file=out)
    commands = session.commands()
    source = iter(lines)
    while True:
        out.write(PROMPT)
        out.flush()
        line = next(source, None)
        if line is None:
            print("\nGoodbye", file=out)
            return 0

        fields = line.split()
        if not fields:
            print("Please provide an argument", file=out)
            continue

        command = commands.get(fields[0])
        if command is None:
            print("Unknown command:", fields[0], file=out)
            continue

        try:
            command.callback(fields[1:])
        except ExitRequested:
            return 0
        except (ApiError, ValueError) as exc:
            print("Issue with callback:", exc, file=out)
            return 1


def main(argv: Sequence[str] | None = None) -> int:
    """Start the shell on standard input and output."""
    return repl(Session(), sys.stdin, sys.stdout)