# pokedexcli

An interactive Pokedex for the terminal. You can page through the location
areas of the Pokemon world, see which Pokemon live in an area, try to catch
them, and inspect the ones you have caught. Data comes from the public
PokeAPI. Response bodies are kept in a short-lived in-memory cache, so going
back and forth between pages within a few seconds does not fetch the same
data twice.

## Installation

```
pip install .
```

## Usage

Start the prompt:

```
pokedexcli
```

Type commands at the `Pokedex > ` prompt. Input is lower-cased before it is
read, and extra spaces are ignored. The session ends on `exit` or at the end
of input (Ctrl-D). If a command fails, its error message is printed and the
prompt comes back.

| Command             | What it does                                        |
|---------------------|-----------------------------------------------------|
| `help`              | Displays a help message                             |
| `exit`              | Exit the Pokedex                                    |
| `map`               | Get the next page of locations                      |
| `mapb`              | Get the previous page of locations                  |
| `explore <area>`    | Get the list of Pokemon located in an area          |
| `catch <pokemon>`   | Try to catch the named Pokemon                      |
| `inspect <pokemon>` | Show height, weight, stats and types of a catch     |
| `pokedex`           | List all the Pokemon you have caught so far         |

Example session:

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
Pokedex > inspect tentacool
Name: tentacool
Height: 9
Weight: 455
Stats:
   -hp: 40
   ...
Types:
   -water
   -poison
```

A catch succeeds when a random number below the Pokemon's base experience
is under 50, so Pokemon with a higher base experience are harder to catch.

## What it does not do

Your Pokedex is held in memory only: nothing is saved to disk, and caught
Pokemon are gone when the session ends. There is no command history or line
editing beyond what the terminal itself provides.

## Using it as a library

The pieces that make up the command-line tool can be used on their own:

```python
from pokedexcli.client import PokeAPIClient

with PokeAPIClient(timeout=5.0, cache_interval=5.0) as client:
    page = client.list_locations(None)
    for location in page.results:
        print(location.name)

    area = client.list_pokemons("canalave-city-area")
    print([encounter.name for encounter in area.pokemon_encounters])

    pikachu = client.detail_pokemon("pikachu")
    print(pikachu.base_experience, [t.type.name for t in pikachu.types])
```

- `pokedexcli.client.PokeAPIClient` fetches pages of location areas
  (`list_locations`), the Pokemon of an area (`list_pokemons`) and the full
  record of a Pokemon (`detail_pokemon`). Network failures raise `requests`
  exceptions; bodies that are not valid JSON of the expected shape raise
  `ValueError` and are not cached.
- `pokedexcli.types` holds the records these calls return: `LocationPage`,
  `AreaPokemon`, `Pokemon`, `PokemonStat`, `PokemonType`, `PokemonAbility`
  and `NamedResource`, each with a `from_dict` constructor for decoded JSON.
- `pokedexcli.pokecache.Cache` is a thread-safe cache of bytes keyed by
  string. A background thread removes entries once they are older than the
  interval; call `close()` (or use it as a context manager) to stop it.
- `pokedexcli.commands` holds the prompt's commands (`get_commands()`), the
  session state `Config` and `CommandError`; `pokedexcli.repl` holds
  `clean_input`, `start_repl` and `main`.

## Running the tests

```
pip install ".[test]"
pytest
```