import pytest

from pokedexcli.commands import (
    CliCommand,
    CommandError,
    Config,
    command_catch,
    command_exit,
    command_explore,
    command_help,
    command_inspect,
    command_map,
    command_mapb,
    command_pokedex,
    get_commands,
)
from pokedexcli.types import (
    AreaPokemon,
    LocationPage,
    NamedResource,
    Pokemon,
    PokemonStat,
    PokemonType,
)


class FakeClient:
    def __init__(self, pages=None, areas=None, pokemons=None):
        self.pages = pages or {}
        self.areas = areas or {}
        self.pokemons = pokemons or {}
        self.requested = []

    def list_locations(self, page_url=None):
        self.requested.append(page_url)
        return self.pages[page_url]

    def list_pokemons(self, area_name):
        return self.areas[area_name]

    def detail_pokemon(self, pokemon_name):
        return self.pokemons[pokemon_name]


class FixedRng:
    def __init__(self, value):
        self.value = value
        self.stops = []

    def randrange(self, stop):
        self.stops.append(stop)
        return self.value


def _page(names, next_url=None, previous=None):
    return LocationPage(
        count=len(names),
        next=next_url,
        previous=previous,
        results=[NamedResource(name=n, url="") for n in names],
    )


def _pokemon(name="pikachu", base_experience=112):
    return Pokemon(
        name=name,
        base_experience=base_experience,
        height=4,
        weight=60,
        stats=[
            PokemonStat(base_stat=35, stat=NamedResource(name="hp")),
            PokemonStat(base_stat=55, stat=NamedResource(name="attack")),
        ],
        types=[PokemonType(slot=1, type=NamedResource(name="electric"))],
    )


def test_get_commands_names_match_keys():
    commands = get_commands()
    assert list(commands) == [
        "help", "exit", "map", "mapb", "explore", "catch", "inspect", "pokedex",
    ]
    for key, command in commands.items():
        assert isinstance(command, CliCommand)
        assert command.name == key


def test_help_lists_every_command(capsys):
    command_help(Config(client=FakeClient()))
    out = capsys.readouterr().out
    assert out.startswith("Welcome to the Pokedex!\nUsage:\n\n")
    for command in get_commands().values():
        assert f"{command.name}: {command.description}\n" in out


def test_exit_prints_goodbye_and_exits(capsys):
    with pytest.raises(SystemExit) as info:
        command_exit(Config(client=FakeClient()))
    assert info.value.code == 0
    assert capsys.readouterr().out == "Closing the Pokedex... Goodbye!\n"


def test_map_walks_pages_forward_and_back(capsys):
    pages = {
        None: _page(["canalave-city-area", "eterna-city-area"], next_url="page2"),
        "page2": _page(["pastoria-city-area"], next_url="page3", previous="page1"),
        "page1": _page(["canalave-city-area", "eterna-city-area"], next_url="page2"),
    }
    client = FakeClient(pages=pages)
    cfg = Config(client=client)

    command_map(cfg)
    assert capsys.readouterr().out == "canalave-city-area\neterna-city-area\n"
    assert cfg.next_locations_url == "page2"
    assert cfg.prev_locations_url is None

    command_map(cfg)
    assert capsys.readouterr().out == "pastoria-city-area\n"
    assert cfg.next_locations_url == "page3"
    assert cfg.prev_locations_url == "page1"

    command_mapb(cfg)
    assert capsys.readouterr().out == "canalave-city-area\neterna-city-area\n"
    assert cfg.prev_locations_url is None
    assert client.requested == [None, "page2", "page1"]


def test_mapb_on_first_page_fails():
    client = FakeClient()
    with pytest.raises(CommandError, match="You are on the first page"):
        command_mapb(Config(client=client))
    assert client.requested == []


def test_explore_requires_area():
    with pytest.raises(CommandError, match="provide a city name"):
        command_explore(Config(client=FakeClient()))


def test_explore_lists_encounters(capsys):
    area = AreaPokemon(
        name="pastoria-city-area",
        pokemon_encounters=[NamedResource(name="tentacool"), NamedResource(name="magikarp")],
    )
    cfg = Config(client=FakeClient(areas={"pastoria-city-area": area}))
    command_explore(cfg, "pastoria-city-area")
    assert capsys.readouterr().out == (
        "Exploring pastoria-city-area...\n"
        "Found Pokemon:\n"
        " - tentacool\n"
        " - magikarp\n"
    )


def test_catch_requires_name():
    with pytest.raises(CommandError, match="provide a Pokemon name to capture"):
        command_catch(Config(client=FakeClient()))


def test_catch_success_stores_pokemon(capsys):
    pokemon = _pokemon()
    rng = FixedRng(49)
    cfg = Config(client=FakeClient(pokemons={"pikachu": pokemon}), rng=rng)
    command_catch(cfg, "pikachu")
    assert capsys.readouterr().out == (
        "Throwing a Pokeball at pikachu...\npikachu was caught!\n"
    )
    assert cfg.pokemons == {"pikachu": pokemon}
    assert rng.stops == [pokemon.base_experience]


def test_catch_escape_leaves_pokedex_empty(capsys):
    cfg = Config(client=FakeClient(pokemons={"pikachu": _pokemon()}), rng=FixedRng(50))
    command_catch(cfg, "pikachu")
    assert capsys.readouterr().out.endswith("pikachu escaped!\n")
    assert cfg.pokemons == {}


def test_catch_with_zero_experience_raises():
    cfg = Config(client=FakeClient(pokemons={"ditto": _pokemon("ditto", 0)}))
    with pytest.raises(ValueError):
        command_catch(cfg, "ditto")
    assert cfg.pokemons == {}


def test_inspect_errors():
    cfg = Config(client=FakeClient())
    with pytest.raises(CommandError, match="provide a Pokemon name to inspect"):
        command_inspect(cfg)
    with pytest.raises(CommandError, match="You have not caught that pokemon"):
        command_inspect(cfg, "pikachu")


def test_inspect_shows_details(capsys):
    cfg = Config(client=FakeClient(), pokemons={"pikachu": _pokemon()})
    command_inspect(cfg, "pikachu")
    assert capsys.readouterr().out == (
        "Name: pikachu\n"
        "Height: 4\n"
        "Weight: 60\n"
        "Stats:\n"
        "   -hp: 35\n"
        "   -attack: 55\n"
        "Types:\n"
        "   -electric\n"
    )


def test_pokedex_empty_raises():
    with pytest.raises(CommandError, match="Your pokedex is empty."):
        command_pokedex(Config(client=FakeClient()))


def test_pokedex_lists_caught(capsys):
    cfg = Config(
        client=FakeClient(),
        pokemons={"pikachu": _pokemon(), "bulbasaur": _pokemon("bulbasaur")},
    )
    command_pokedex(cfg)
    assert capsys.readouterr().out == "Your pokedex:\n - pikachu\n - bulbasaur\n"