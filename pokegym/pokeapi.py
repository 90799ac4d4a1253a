"""
PokeAPI client - looks up Pokemon species by name or id.

Responses are cached in memory for the life of the process, keyed by the
resolved lookup URL. The catalog is finite and read-mostly, so the cache is
never evicted. Failed lookups are never cached.
"""
import logging
import threading
from typing import Optional

import requests
from pydantic import BaseModel

from pokegym.config import POKEAPI_BASE_URL, POKEAPI_TIMEOUT
from pokegym.errors import PokemonLookupFailed

logger = logging.getLogger(__name__)

USER_AGENT = "PokeGym-API/1.0.0"


class CreatureData(BaseModel):
    id: int
    name: str
    types: list[str]

    @classmethod
    def from_payload(cls, payload: dict) -> "CreatureData":
        """Build from a raw /pokemon/{id} response, types in slot order."""
        slots = sorted(payload["types"], key=lambda t: t.get("slot", 0))
        return cls(
            id=payload["id"],
            name=payload["name"],
            types=[t["type"]["name"] for t in slots],
        )


class PokeAPIClient:
    def __init__(
        self,
        base_url: str = POKEAPI_BASE_URL,
        timeout: float = POKEAPI_TIMEOUT,
        session: Optional[requests.Session] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({"User-Agent": USER_AGENT})
        self._cache: dict[str, dict] = {}
        self._lock = threading.Lock()

    def pokemon_url(self, identifier: str | int) -> str:
        return f"{self.base_url}/pokemon/{str(identifier).strip().lower()}"

    def get_pokemon(self, identifier: str | int) -> CreatureData:
        """
        Fetch a Pokemon by name or catalog id.

        Raises PokemonLookupFailed on timeout, non-2xx status, or a payload
        that is not a Pokemon.
        """
        url = self.pokemon_url(identifier)

        with self._lock:
            cached = self._cache.get(url)
        if cached is not None:
            return CreatureData.from_payload(cached)

        try:
            response = self.session.get(url, timeout=self.timeout)
            response.raise_for_status()
            payload = response.json()
        except requests.RequestException as e:
            logger.warning("PokeAPI request failed for %s: %s", url, e)
            raise PokemonLookupFailed(str(identifier), str(e)) from e
        except ValueError as e:
            logger.warning("PokeAPI returned invalid JSON for %s", url)
            raise PokemonLookupFailed(str(identifier), "invalid JSON") from e

        try:
            creature = CreatureData.from_payload(payload)
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            logger.warning("PokeAPI returned a malformed payload for %s", url)
            raise PokemonLookupFailed(str(identifier), "malformed response") from e

        # Concurrent misses for the same URL may both write; values are identical
        with self._lock:
            self._cache[url] = payload
        return creature

    @property
    def cache_size(self) -> int:
        with self._lock:
            return len(self._cache)

    def clear_cache(self) -> None:
        with self._lock:
            self._cache.clear()


_client: Optional[PokeAPIClient] = None
_client_lock = threading.Lock()


def get_pokeapi_client() -> PokeAPIClient:
    """Return the process-wide client, building it on first use."""
    global _client
    with _client_lock:
        if _client is None:
            _client = PokeAPIClient()
        return _client
