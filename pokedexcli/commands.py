"""The commands understood by the Pokedex prompt."""

from __future__ import annotations

import random
import sys
from dataclasses import dataclass, field
from typing import Callable

from .client import PokeAPIClient
from .types import LocationPage, Pokemon


class CommandError(Exception):
    """A command could not be carried out; the message is meant for the user."""


@dataclass
class Config:
    """State shared by all commands during a session."""

    client: PokeAPIClient
    next_locations_url: str | None = None
    prev_locations_url: str | None = None
    pokemons: dict[str, Pokemon] = field(default_factory=dict)
    rng: random.Random = field(default_factory=random.Random)


@dataclass(frozen=True)
class CliCommand:
    name: str
    description: str
    callback: Callable[..., None]


def command_exit(cfg: Config, *args: str) -> None:
    """Say goodbye and leave the program."""
    print("Closing the Pokedex... Goodbye!")
    sys.exit(0)


def command_help(cfg: Config, *args: str) -> None:
    """List every command with its description."""
    print("Welcome to the Pokedex!\nUsage:\n")
    for command in get_commands().values():
        print(f"{command.name}: {command.description}")


def _show_page(cfg: Config, page: LocationPage) -> None:
    cfg.next_locations_url = page.next
    cfg.prev_locations_url = page.previous
    for location in page.results:
        print(location.name)


def command_map(cfg: Config, *args: str) -> None:
    """Show the next page of location areas."""
    _show_page(cfg, cfg.client.list_locations(cfg.next_locations_url))


def command_mapb(cfg: Config, *args: str) -> None:
    """Show the previous page of location areas."""
    if cfg.prev_locations_url is None:
        raise CommandError("You are on the first page")
    _show_page(cfg, cfg.client.list_locations(cfg.prev_locations_url))


def command_explore(cfg: Config, *args: str) -> None:
    """List the Pokemon that can be met in the named area."""
    if not args:
        raise CommandError("You need to provide a city name to explore")
    area_name = args[0]
    print(f"Exploring {area_name}...")
    area = cfg.client.list_pokemons(area_name)
    print("Found Pokemon:")
    for pokemon in area.pokemon_encounters:
        print(f" - {pokemon.name}")


def command_catch(cfg: Config, *args: str) -> None:
    """Throw a Pokeball; the higher the base experience, the likelier it escapes."""
    if not args:
        raise CommandError("You need to provide a Pokemon name to capture")
    pokemon_name = args[0]
    print(f"Throwing a Pokeball at {pokemon_name}...")
    pokemon = cfg.client.detail_pokemon(pokemon_name)
    if cfg.rng.randrange(pokemon.base_experience) < 50:
        print(f"{pokemon_name} was caught!")
        cfg.pokemons[pokemon.name] = pokemon
    else:
        print(f"{pokemon_name} escaped!")


def command_inspect(cfg: Config, *args: str) -> None:
    """Show the details of a Pokemon already caught."""
    if not args:
        raise CommandError("You need to provide a Pokemon name to inspect")
    pokemon = cfg.pokemons.get(args[0])
    if pokemon is None:
        raise CommandError("You have not caught that pokemon")

    print(f"Name: {pokemon.name}")
    print(f"Height: {pokemon.height}")
    print(f"Weight: {pokemon.weight}")
    print("Stats:")
    for stat in pokemon.stats:
        print(f"   -{stat.stat.name}: {stat.base_stat}")
    print("Types:")
    for pokemon_type in pokemon.types:
        print(f"   -{pokemon_type.type.name}")


def command_pokedex(cfg: Config, *args: str) -> None:
    """List every Pokemon caught so far."""
    if not cfg.pokemons:
        raise CommandError("Your pokedex is empty.")
    print("Your pokedex:")
    for name in cfg.pokemons:
        print(f" - {name}")


def get_commands() -> dict[str, CliCommand]:
    """Return the supported commands keyed by name."""
    commands = [
        CliCommand("help", "Displays a help message", command_help),
        CliCommand("exit", "Exit the Pokedex", command_exit),
        CliCommand("map", "Get the next page of locations", command_map),
        CliCommand("mapb", "Get the previous page of locations", command_mapb),
        CliCommand("explore", "Get the list of Pokemon located here", command_explore),
        CliCommand("catch", "Try to catch the mentionned pokemon", command_catch),
        CliCommand("inspect", "Inspect the pokemon you caught", command_inspect),
        CliCommand(
            "pokedex", "List all the pokemon you have caught so far", command_pokedex
        ),
    ]
    return {command.name: command for command in commands}