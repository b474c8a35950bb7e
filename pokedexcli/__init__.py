"""An interactive command-line Pokedex backed by the PokeAPI, with a caching API client."""

__version__ = "0.1.0"