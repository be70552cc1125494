"""Data types decoded from the location and Pokémon API responses."""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any


def _decode(data: Any) -> Mapping[str, Any]:
    if isinstance(data, (bytes, bytearray, str)):
        data = json.loads(data)
    if not isinstance(data, Mapping):
        raise ValueError(f"expected a JSON object, got {type(data).__name__}")
    return data


def _str(data: Mapping[str, Any], key: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"field {key!r} must be a string, got {type(value).__name__}")
    return value


def _int(data: Mapping[str, Any], key: str) -> int:
    value = data.get(key)
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"field {key!r} must be an integer, got {type(value).__name__}")
    return value


def _bool(data: Mapping[str, Any], key: str) -> bool:
    value = data.get(key)
    if value is None:
        return False
    if not isinstance(value, bool):
        raise ValueError(f"field {key!r} must be a boolean, got {type(value).__name__}")
    return value


def _obj(data: Mapping[str, Any], key: str) -> Mapping[str, Any]:
    value = data.get(key)
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ValueError(f"field {key!r} must be an object, got {type(value).__name__}")
    return value


def _list(data: Mapping[str, Any], key: str) -> list[Any]:
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise ValueError(f"field {key!r} must be an array, got {type(value).__name__}")
    return value


@dataclass
class NamedResource:
    """A name together with the URL of the resource it names."""

    name: str = ""
    url: str = ""

    @classmethod
    def from_json(cls, data: Any) -> NamedResource:
        obj = _decode(data)
        return cls(name=_str(obj, "name"), url=_str(obj, "url"))


@dataclass
class LocationBatch:
    """One page of location areas."""

    count: int = 0
    next: str = ""
    previous: str = ""
    results: list[NamedResource] = field(default_factory=list)

    @classmethod
    def from_json(cls, data: Any) -> LocationBatch:
        obj = _decode(data)
        return cls(
            count=_int(obj, "count"),
            next=_str(obj, "next"),
            previous=_str(obj, "previous"),
            results=[NamedResource.from_json(item) for item in _list(obj, "results")],
        )


@dataclass
class LocationArea:
    """A location area and the Pokémon that can be met there."""

    id: int = 0
    name: str = ""
    game_index: int = 0
    location: NamedResource = field(default_factory=NamedResource)
    pokemon_encounters: list[NamedResource] = field(default_factory=list)

    @classmethod
    def from_json(cls, data: Any) -> LocationArea:
        obj = _decode(data)
        encounters = []
        for item in _list(obj, "pokemon_encounters"):
            if not isinstance(item, Mapping):
                raise ValueError("pokemon encounter must be an object")
            encounters.append(NamedResource.from_json(_obj(item, "pokemon")))
        return cls(
            id=_int(obj, "id"),
            name=_str(obj, "name"),
            game_index=_int(obj, "game_index"),
            location=NamedResource.from_json(_obj(obj, "location")),
            pokemon_encounters=encounters,
        )

    def pokemon_names(self) -> list[str]:
        """Names of the encountered Pokémon, in response order."""
        return [encounter.name for encounter in self.pokemon_encounters]


@dataclass
class PokemonStat:
    """One base stat of a Pokémon."""

    name: str = ""
    base_stat: int = 0
    effort: int = 0

    @classmethod
    def from_json(cls, data: Any) -> PokemonStat:
        obj = _decode(data)
        return cls(
            name=_str(_obj(obj, "stat"), "name"),
            base_stat=_int(obj, "base_stat"),
            effort=_int(obj, "effort"),
        )


@dataclass
class Pokemon:
    """The parts of a Pokémon record the Pokédex uses."""

    id: int = 0
    name: str = ""
    base_experience: int = 0
    height: int = 0
    weight: int = 0
    order: int = 0
    is_default: bool = False
    species: NamedResource = field(default_factory=NamedResource)
    abilities: list[NamedResource] = field(default_factory=list)
    stats: list[PokemonStat] = field(default_factory=list)
    types: list[NamedResource] = field(default_factory=list)

    @classmethod
    def from_json(cls, data: Any) -> Pokemon:
        obj = _decode(data)
        abilities = []
        for item in _list(obj, "abilities"):
            if not isinstance(item, Mapping):
                raise ValueError("ability entry must be an object")
            abilities.append(NamedResource.from_json(_obj(item, "ability")))
        types = []
        for item in _list(obj, "types"):
            if not isinstance(item, Mapping):
                raise ValueError("type entry must be an object")
            types.append(NamedResource.from_json(_obj(item, "type")))
        return cls(
            id=_int(obj, "id"),
            name=_str(obj, "name"),
            base_experience=_int(obj, "base_experience"),
            height=_int(obj, "height"),
            weight=_int(obj, "weight"),
            order=_int(obj, "order"),
            is_default=_bool(obj, "is_default"),
            species=NamedResource.from_json(_obj(obj, "species")),
            abilities=abilities,
            stats=[PokemonStat.from_json(item) for item in _list(obj, "stats")],
            types=types,
        )