"""In-memory cache for football data.

Four independent collections, each mapping a normalized key to the list of
records from the most recent live fetch:

    countries   -> "countries"
    leagues     -> "leagues-<country_id>"
    teams       -> "teams-<league_id>"
    standings   -> "standings-<league_id>"

Entries live for the process lifetime and are replaced wholesale on the
next write for the same key. There is no expiry.
"""

import logging
import threading
from collections.abc import Iterable
from datetime import UTC, datetime
from typing import Generic, TypeVar

from standarr.core import Country, League, Standing, Team

logger = logging.getLogger(__name__)

T = TypeVar("T")

KEY_SEPARATOR = "-"


def make_cache_key(*parts: str) -> str:
    """Build a normalized cache key: parts joined with '-' and lower-cased."""
    return KEY_SEPARATOR.join(parts).lower()


class CacheCollection(Generic[T]):
    """Lock-guarded key -> list mapping for one record type.

    Values are stored as tuples so a caller holding a returned list cannot
    mutate the cached entry. get() returns None for a missing key, which is
    distinct from a cached empty list.
    """

    def __init__(self, name: str):
        self.name = name
        self._entries: dict[str, tuple[T, ...]] = {}
        self._updated_at: dict[str, datetime] = {}
        self._lock = threading.Lock()

    def key(self, identifier: str | None = None) -> str:
        if identifier is None:
            return make_cache_key(self.name)
        return make_cache_key(self.name, identifier)

    def get(self, identifier: str | None = None) -> list[T] | None:
        key = self.key(identifier)
        with self._lock:
            entry = self._entries.get(key)
        if entry is None:
            logger.debug("[CACHE] Miss: %s", key)
            return None
        return list(entry)

    def put(self, values: Iterable[T], identifier: str | None = None) -> None:
        key = self.key(identifier)
        snapshot = tuple(values)
        with self._lock:
            self._entries[key] = snapshot
            self._updated_at[key] = datetime.now(UTC)
        logger.debug("[CACHE] Stored %d %s under %s", len(snapshot), self.name, key)

    def keys(self) -> list[str]:
        with self._lock:
            return sorted(self._entries)

    def stats(self) -> dict:
        with self._lock:
            last_update = max(self._updated_at.values(), default=None)
            return {
                "entries": len(self._entries),
                "records": sum(len(v) for v in self._entries.values()),
                "last_updated": last_update.isoformat() if last_update else None,
            }

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)


class CacheStore:
    """The four cache collections used by the offline strategy."""

    def __init__(self):
        self.countries: CacheCollection[Country] = CacheCollection("countries")
        self.leagues: CacheCollection[League] = CacheCollection("leagues")
        self.teams: CacheCollection[Team] = CacheCollection("teams")
        self.standings: CacheCollection[Standing] = CacheCollection("standings")

    def collections(self) -> list[CacheCollection]:
        return [self.countries, self.leagues, self.teams, self.standings]

    def stats(self) -> dict:
        """Get cache statistics per collection."""
        return {c.name: c.stats() for c in self.collections()}
