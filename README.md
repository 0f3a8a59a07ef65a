# pokedexcli

An interactive command-line Pokedex. Page through the location areas of the
Pokemon world, see which Pokemon can be met in each one, try to catch them,
and look up the stats of the ones you have caught. Data comes from the public
PokeAPI. Responses are kept in an in-memory cache whose entries are dropped
after about three minutes, so repeated lookups do not go back to the network.

## Installing

```
pip install .
```

No third-party libraries are needed at run time.

## Running

```
pokedexcli
```

The command takes no options. You are greeted with a prompt:

```
Welcome to the Pokedex!
Pokedex > 
```

Type a command and its arguments, then press Enter. Only the first argument
of a command is used.

## Commands

| Command             | What it does                                              |
|---------------------|-----------------------------------------------------------|
| `help`              | Lists the available commands                              |
| `map`               | Shows the next page of location areas                     |
| `mapb`              | Shows the previous page of location areas                 |
| `explore <area>`    | Lists the Pokemon that can be encountered in an area      |
| `catch <pokemon>`   | Throws a Pokeball; the chance depends on base experience  |
| `inspect <pokemon>` | Shows name, height, weight, stats and types of a catch    |
| `pokedex`           | Lists every Pokemon you have caught, in the order caught  |
| `exit`              | Closes the Pokedex                                        |

`mapb` before any earlier page has been seen prints `no previous URL`.
`inspect` on a Pokemon you have not caught prints
`you have not caught that pokemon`.

Catching is more likely for Pokemon with little base experience (95% at 0
or below) and gets harder as base experience grows, down to 5% at 600 and
above. The rate is rounded to one decimal place.

Every lookup prints a line `LOG --- Cache hit` or `LOG --- Cache miss`,
telling whether the answer came from the cache or the network.

An example session:

```
Pokedex > map
LOG --- Cache miss
canalave-city-area
eterna-city-area
...
Pokedex > explore pastoria-city-area
LOG --- Cache miss
Exploring pastoria-city-area...
Found Pokemon:
- tentacool
- magikarp
...
Pokedex > catch magikarp
Throwing a Pokeball at magikarp...
LOG --- Cache miss
magikarp was caught!
You may now inspect it with the inspect command.
Pokedex > inspect magikarp
Name: magikarp
Height: ...
Weight: ...
Stats:
  -hp: ...
Types:
  - water
Pokedex > exit
Closing the Pokedex... Goodbye!
```

An unknown command or an empty line is reported and the prompt returns.
A network failure, an HTTP status other than 200, or a response that cannot
be decoded ends the session with `Issue with callback:` and the reason, and
the command exits with status 1. `exit` or the end of input ends it with
status 0.

## Using it from Python

- `pokedexcli.cli.repl(session, lines, out)` runs the shell over any
  iterable of lines and writes to any text stream; it returns the exit status.
- `pokedexcli.commands.Session` holds the paging position, the caught
  Pokemon (`pokedex`) and the cache; it accepts its own `Cache`, output
  stream and `random.Random`.
- `pokedexcli.api` offers `get_location_areas`, `get_area_pokemon`,
  `get_pokemon` and `fetch_json`, raising `ApiError` on failure.
- `pokedexcli.catchrate` offers `calculate_catch_rate` and `simulate_catch`.
- `pokedexcli.pokecache.Cache` is a thread-safe expiring store with `add`,
  `get` and `close`, usable as a context manager.

## What it does not do

Caught Pokemon live only for the session: the Pokedex is not saved to disk
and is empty each time the program starts. Nothing is cached between runs
either.

## Running the tests

```
pip install ".[test]"
pytest
```