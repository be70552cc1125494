# pokedex

An interactive command-line Pokedex. You can page through the game's location areas and list the Pokemon you can meet in each one. You can try to catch them, and look at the height, weight, stats and types of the ones you caught.

The data comes from the public PokeAPI. Each response body is kept in an in-memory cache. A background thread clears the cache every five seconds, so a command you repeat right away does not fetch its data again.

## Installation

```
pip install .
```

No third-party libraries are needed at run time.

## Usage

Start the prompt:

```
pokedex
```

`pokedex --help` shows a short usage message. The program takes no other options.

Type commands at the `Pokedex >` prompt. Input is lower-cased and split on whitespace, so `CATCH  Pikachu` is the same as `catch pikachu`. An empty line prints `Please type a command.` and an unknown word prints `Unknown command`. When a command fails, for example on a network error, an HTTP status above 299 or a missing argument, the prompt prints `Error executing command: ...` and keeps running.

| Command             | What it does                                                  |
|---------------------|---------------------------------------------------------------|
| `exit`              | Prints a goodbye message and ends the program                 |
| `help`              | Lists every command with a short description                  |
| `map`               | Shows the next 20 location areas                              |
| `mapb`              | Shows the previous 20 location areas                          |
| `explore <area>`    | Lists the Pokemon that can be encountered in an area          |
| `catch <pokemon>`   | Throws a Pokeball; the Pokemon is either caught or escapes    |
| `inspect <pokemon>` | Shows name, height, weight, stats and types of a caught one   |
| `pokedex`           | Lists every Pokemon caught in this session                    |

The prompt also ends when standard input runs out.

Example session (output shortened):

```
Pokedex > map
canalave-city-area
eterna-city-area
...
Pokedex > explore canalave-city-area
Exploring canalave-city-area...
Found Pokemon:
 - tentacool
 - tentacruel
...
Pokedex > catch tentacool
Throwing a Pokeball at tentacool...
tentacool was caught!
You may now inspect it with the inspect command.
Pokedex > pokedex
Your Pokedex:
  - tentacool
```

The chance of a catch is computed from the Pokemon's base experience. It is 80% at base experience 50 and falls in a straight line to 10% at 300 (`pokedex.commands.catch_chance`).

## Using it from Python

The pieces the prompt uses can be called directly:

```python
import random

from pokedex.cache import Cache
from pokedex.cli import run_repl
from pokedex.commands import Config, clean_input

clean_input("  Catch PIKACHU ")   # ['catch', 'pikachu']

with Cache(5.0) as cache:
    cache.add("key", b"value")
    cache.get("key")              # b'value' until the reaper removes it, then None

config = Config(rng=random.Random(1))
run_repl(config, ["help", "pokedex"])
config.cache.close()
```

- `pokedex.cache.Cache(interval)` is a thread-safe store of bytes. Its background thread drops all older entries every `interval` seconds. `close()` or leaving the `with` block stops that thread.
- `pokedex.commands.Config` holds one session's state: the next and previous page URLs, the caught Pokemon (`pokedex`), the `cache` and the random source `rng` used for catches.
- `pokedex.commands.get_registry()` returns every `Command` by name. Each command function raises `CommandError` when it cannot finish.
- `pokedex.models` decodes the API responses into `LocationBatch`, `LocationArea`, `Pokemon`, `PokemonStat` and `NamedResource`. Each has a `from_json(data)` that accepts a mapping, a string or bytes, and raises `ValueError` on a malformed response.
- `pokedex.cli.run_repl(config, lines)` runs the command loop over any iterable of input lines.

## What it does not do

Caught Pokemon are kept in memory only. The Pokedex is not saved anywhere and is empty each time the program starts. The cache is in memory too, and nothing is stored on disk.

## Development

```
pip install -e ".[test]"
pytest
```