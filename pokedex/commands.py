"""Pokédex commands, the command registry and the helpers they share."""

from __future__ import annotations

import random
import urllib.error
import urllib.request
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Protocol

from pokedex.cache import Cache
from pokedex.models import LocationArea, LocationBatch, Pokemon

API_BASE = "https://pokeapi.co/api/v2"
FIRST_PAGE_URL = f"{API_BASE}/location-area?offset=0&limit=20"
CACHE_INTERVAL = 5.0

MAX_CATCH_CHANCE = 0.8
MIN_CATCH_CHANCE = 0.1


class CommandError(Exception):
    """Raised when a command cannot be carried out."""


class _RandomSource(Protocol):
    def random(self) -> float: ...


@dataclass
class Config:
    """State shared by the commands of one Pokédex session."""

    next: str = FIRST_PAGE_URL
    previous: str = ""
    pokedex: dict[str, Pokemon] = field(default_factory=dict)
    cache: Cache = field(default_factory=lambda: Cache(CACHE_INTERVAL))
    rng: _RandomSource = field(default_factory=random.Random)


@dataclass(frozen=True)
class Command:
    """A named command with its help text and the function that runs it."""

    name: str
    description: str
    callback: Callable[..., None]


def clean_input(text: str) -> list[str]:
    """Lower-case ``text`` and split it into whitespace-separated words."""
    return text.lower().split()


def location_area_url(location: str) -> str:
    return f"{API_BASE}/location-area/{location}"


def pokemon_url(name: str) -> str:
    return f"{API_BASE}/pokemon/{name}"


def fetch(cache: Cache, url: str) -> bytes:
    """Return the body at ``url``, from ``cache`` when it holds it."""
    cached = cache.get(url)
    if cached is not None:
        return cached
    try:
        with urllib.request.urlopen(url) as response:
            status = response.status
            if status > 299:
                raise CommandError(f"response failed with status code: {status}")
            return response.read()
    except urllib.error.HTTPError as err:
        raise CommandError(f"response failed with status code: {err.code}") from err
    except urllib.error.URLError as err:
        raise CommandError(f"request to {url} failed: {err.reason}") from err
    except OSError as err:
        raise CommandError(f"request to {url} failed: {err}") from err


def _fetch_cached(config: Config, url: str) -> bytes:
    data = fetch(config.cache, url)
    if config.cache.get(url) is None:
        config.cache.add(url, data)
    return data


def catch_chance(exp: int) -> float:
    """Chance of catching a Pokémon with base experience ``exp``."""
    return MAX_CATCH_CHANCE - ((exp - 50) / 250.0) * (MAX_CATCH_CHANCE - MIN_CATCH_CHANCE)


def try_catch_pokemon(exp: int, rng: _RandomSource) -> bool:
    """Roll ``rng`` once and report whether the catch succeeded."""
    return rng.random() < catch_chance(exp)


def command_exit(config: Config, *args: str) -> None:
    """Say goodbye, stop the session's cache and end the program."""
    print("Closing the Pokedex... Goodbye!")
    config.cache.close()
    raise SystemExit(0)


def command_help(config: Config, *args: str) -> None:
    print("Welcome to the Pokedex!\nUsage:\n")
    for name, command in get_registry().items():
        print(f"{name}: {command.description}")


def command_map_next(config: Config, *args: str) -> None:
    if not config.next:
        print("you're on the last page")
        return
    _show_locations(config, config.next)


def command_map_previous(config: Config, *args: str) -> None:
    if not config.previous:
        print("you're on the first page")
        return
    _show_locations(config, config.previous)


def _show_locations(config: Config, url: str) -> None:
    data = _fetch_cached(config, url)
    try:
        batch = LocationBatch.from_json(data)
    except ValueError as err:
        raise CommandError(str(err)) from err
    for location in batch.results:
        print(location.name)
    config.next = batch.next
    config.previous = batch.previous


def command_explore(config: Config, *args: str) -> None:
    if not args:
        raise CommandError("please specify a location to explore")
    location = args[0]
    data = _fetch_cached(config, location_area_url(location))
    try:
        area = LocationArea.from_json(data)
    except ValueError as err:
        raise CommandError(str(err)) from err
    print(f"Exploring {location}...\nFound Pokemon:")
    for name in area.pokemon_names():
        print(f" - {name}")


def command_catch(config: Config, *args: str) -> None:
    if not args:
        raise CommandError("please specify a pokemon to catch")
    name = args[0]
    data = _fetch_cached(config, pokemon_url(name))
    try:
        pokemon = Pokemon.from_json(data)
    except ValueError as err:
        raise CommandError(str(err)) from err
    print(f"Throwing a Pokeball at {name}...")
    if try_catch_pokemon(pokemon.base_experience, config.rng):
        print(f"{name} was caught!\nYou may now inspect it with the inspect command.")
        config.pokedex[name] = pokemon
    else:
        print(f"{name} escaped!")


def command_inspect(config: Config, *args: str) -> None:
    if not args:
        raise CommandError("please specify a pokemon to catch")
    pokemon = config.pokedex.get(args[0])
    if pokemon is None:
        print("you have not caught that pokemon")
        return
    print(f"Name: {pokemon.name}")
    print(f"Height: {pokemon.height}")
    print(f"Weight: {pokemon.weight}")
    print("Stats:")
    for stat in pokemon.stats:
        print(f"  -{stat.name}: {stat.base_stat}")
    print("Types:")
    for kind in pokemon.types:
        print(f"  - {kind.name}")


def command_pokedex(config: Config, *args: str) -> None:
    print("Your Pokedex:")
    for name in config.pokedex:
        print(f"  - {name}")


def get_registry() -> dict[str, Command]:
    """All commands the Pokédex understands, keyed by name."""
    commands = [
        Command("exit", "Exit the Pokedex", command_exit),
        Command("help", "Displays a help message", command_help),
        Command("map", "Displays the next 20 locations", command_map_next),
        Command("mapb", "Displays the previous 20 locations", command_map_previous),
        Command(
            "explore",
            "Explore an area.  Pass the name of the area as an argument.",
            command_explore,
        ),
        Command(
            "catch",
            "Catch a pokemon.  Pass the name of the pokemon as an argument.",
            command_catch,
        ),
        Command("inspect", "Inspect a pokemon's stats.", command_inspect),
        Command(
            "pokedex",
            "Display a list of all the pokemon you've caught.",
            command_pokedex,
        ),
    ]
    return {command.name: command for command in commands}