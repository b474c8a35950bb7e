"""HTTP client for PokeAPI with response caching."""

from __future__ import annotations

import json
from typing import Any, Callable, TypeVar

import requests

from .pokecache import Cache
from .types import AreaPokemon, LocationPage, Pokemon

BASE_URL = "https://pokeapi.co/api/v2"

T = TypeVar("T")


class PokeAPIClient:
    """Fetches locations and Pokemon, caching raw response bodies by URL.

    Network failures propagate as ``requests`` exceptions; bodies that are
    not valid JSON of the expected shape raise ``ValueError`` and are not
    cached.
    """

    def __init__(self, timeout: float = 5.0, cache_interval: float = 5.0) -> None:
        self.timeout = timeout
        self._session = requests.Session()
        self._cache = Cache(cache_interval)

    def list_locations(self, page_url: str | None = None) -> LocationPage:
        """Return a page of location areas; the first page if no URL is given."""
        url = page_url if page_url is not None else f"{BASE_URL}/location-area"
        return self._fetch(url, LocationPage.from_dict)

    def list_pokemons(self, area_name: str) -> AreaPokemon:
        """Return the Pokemon that can be encountered in a location area."""
        return self._fetch(f"{BASE_URL}/location-area/{area_name}", AreaPokemon.from_dict)

    def detail_pokemon(self, pokemon_name: str) -> Pokemon:
        """Return the full record of a Pokemon."""
        return self._fetch(f"{BASE_URL}/pokemon/{pokemon_name}", Pokemon.from_dict)

    def close(self) -> None:
        self._cache.close()
        self._session.close()

    def __enter__(self) -> PokeAPIClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def _fetch(self, url: str, decode: Callable[[Any], T]) -> T:
        cached = self._cache.get(url)
        if cached is not None:
            return decode(json.loads(cached))

        response = self._session.get(url, timeout=self.timeout)
        body = response.content
        result = decode(json.loads(body))
        self._cache.add(url, body)
        return result