"""Records decoded from PokeAPI JSON responses."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Callable, TypeVar

T = TypeVar("T")


def _as_object(data: Any, what: str) -> Mapping[str, Any]:
    if data is None:
        return {}
    if not isinstance(data, Mapping):
        raise ValueError(f"{what}: expected a JSON object, got {type(data).__name__}")
    return data


def _mismatch(key: str, expected: str, value: Any) -> ValueError:
    return ValueError(f"field {key!r}: expected {expected}, got {type(value).__name__}")


def _int(data: Mapping[str, Any], key: str) -> int:
    value = data.get(key)
    if value is None:
        return 0
    if isinstance(value, bool) or not isinstance(value, int):
        raise _mismatch(key, "integer", value)
    return value


def _bool(data: Mapping[str, Any], key: str) -> bool:
    value = data.get(key)
    if value is None:
        return False
    if not isinstance(value, bool):
        raise _mismatch(key, "boolean", value)
    return value


def _str(data: Mapping[str, Any], key: str) -> str:
    value = data.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise _mismatch(key, "string", value)
    return value


def _optional_str(data: Mapping[str, Any], key: str) -> str | None:
    value = data.get(key)
    if value is not None and not isinstance(value, str):
        raise _mismatch(key, "string or null", value)
    return value


def _raw_list(data: Mapping[str, Any], key: str) -> list[Any]:
    value = data.get(key)
    if value is None:
        return []
    if not isinstance(value, list):
        raise _mismatch(key, "array", value)
    return list(value)


def _raw_object(data: Mapping[str, Any], key: str) -> dict[str, Any]:
    return dict(_as_object(data.get(key), f"field {key!r}"))


def _objects(
    data: Mapping[str, Any], key: str, decode: Callable[[Any], T]
) -> list[T]:
    return [decode(item) for item in _raw_list(data, key)]


def _resource(data: Mapping[str, Any], key: str) -> NamedResource:
    return NamedResource.from_dict(data.get(key))


@dataclass(frozen=True)
class NamedResource:
    """A name paired with the API URL that describes it."""

    name: str = ""
    url: str = ""

    @classmethod
    def from_dict(cls, data: Any) -> NamedResource:
        obj = _as_object(data, "named resource")
        return cls(name=_str(obj, "name"), url=_str(obj, "url"))


@dataclass(frozen=True)
class LocationPage:
    """One page of location areas, with links to its neighbours."""

    count: int = 0
    next: str | None = None
    previous: str | None = None
    results: list[NamedResource] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> LocationPage:
        obj = _as_object(data, "location page")
        return cls(
            count=_int(obj, "count"),
            next=_optional_str(obj, "next"),
            previous=_optional_str(obj, "previous"),
            results=_objects(obj, "results", NamedResource.from_dict),
        )


def _encounter(data: Any) -> NamedResource:
    obj = _as_object(data, "pokemon encounter")
    return _resource(obj, "pokemon")


@dataclass(frozen=True)
class AreaPokemon:
    """A location area and the Pokemon that can be encountered there."""

    id: int = 0
    name: str = ""
    pokemon_encounters: list[NamedResource] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Any) -> AreaPokemon:
        obj = _as_object(data, "location area")
        return cls(
            id=_int(obj, "id"),
            name=_str(obj, "name"),
            pokemon_encounters=_objects(obj, "pokemon_encounters", _encounter),
        )


@dataclass(frozen=True)
class PokemonStat:
    base_stat: int = 0
    effort: int = 0
    stat: NamedResource = field(default_factory=NamedResource)

    @classmethod
    def from_dict(cls, data: Any) -> PokemonStat:
        obj = _as_object(data, "stat")
        return cls(
            base_stat=_int(obj, "base_stat"),
            effort=_int(obj, "effort"),
            stat=_resource(obj, "stat"),
        )


@dataclass(frozen=True)
class PokemonType:
    slot: int = 0
    type: NamedResource = field(default_factory=NamedResource)

    @classmethod
    def from_dict(cls, data: Any) -> PokemonType:
        obj = _as_object(data, "type")
        return cls(slot=_int(obj, "slot"), type=_resource(obj, "type"))


@dataclass(frozen=True)
class PokemonAbility:
    ability: NamedResource = field(default_factory=NamedResource)
    is_hidden: bool = False
    slot: int = 0

    @classmethod
    def from_dict(cls, data: Any) -> PokemonAbility:
        obj = _as_object(data, "ability")
        return cls(
            ability=_resource(obj, "ability"),
            is_hidden=_bool(obj, "is_hidden"),
            slot=_int(obj, "slot"),
        )


@dataclass(frozen=True)
class Pokemon:
    """Full details of a single Pokemon.

    Deeply nested sections (moves, sprites, game indices and the like) are
    kept as the decoded JSON values.
    """

    id: int = 0
    name: str = ""
    base_experience: int = 0
    height: int = 0
    weight: int = 0
    order: int = 0
    is_default: bool = False
    location_area_encounters: str = ""
    species: NamedResource = field(default_factory=NamedResource)
    abilities: list[PokemonAbility] = field(default_factory=list)
    forms: list[NamedResource] = field(default_factory=list)
    stats: list[PokemonStat] = field(default_factory=list)
    types: list[PokemonType] = field(default_factory=list)
    game_indices: list[Any] = field(default_factory=list)
    held_items: list[Any] = field(default_factory=list)
    moves: list[Any] = field(default_factory=list)
    past_types: list[Any] = field(default_factory=list)
    sprites: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, data: Any) -> Pokemon:
        obj = _as_object(data, "pokemon")
        return cls(
            id=_int(obj, "id"),
            name=_str(obj, "name"),
            base_experience=_int(obj, "base_experience"),
            height=_int(obj, "height"),
            weight=_int(obj, "weight"),
            order=_int(obj, "order"),
            is_default=_bool(obj, "is_default"),
            location_area_encounters=_str(obj, "location_area_encounters"),
            species=_resource(obj, "species"),
            abilities=_objects(obj, "abilities", PokemonAbility.from_dict),
            forms=_objects(obj, "forms", NamedResource.from_dict),
            stats=_objects(obj, "stats", PokemonStat.from_dict),
            types=_objects(obj, "types", PokemonType.from_dict),
            game_indices=_raw_list(obj, "game_indices"),
            held_items=_raw_list(obj, "held_items"),
            moves=_raw_list(obj, "moves"),
            past_types=_raw_list(obj, "past_types"),
            sprites=_raw_object(obj, "sprites"),
        )