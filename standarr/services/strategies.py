"""Data retrieval strategies.

Two interchangeable ways to answer the same four queries:

- LiveFetchStrategy: ask the external provider every time (online mode)
- CacheReadStrategy: answer from the CacheStore only (offline mode)

StrategySelector picks one of them from the current mode. Both strategies
are built once and reused for every request.
"""

import logging
from abc import ABC, abstractmethod
from typing import Protocol

from standarr.core import Country, FootballDataError, League, Standing, Team
from standarr.services.cache_store import CacheStore

logger = logging.getLogger(__name__)


class FootballDataSource(Protocol):
    """External collaborator used by the live strategy."""

    def fetch_countries(self) -> list[Country]: ...

    def fetch_leagues(self, country_id: str) -> list[League]: ...

    def fetch_teams(self, league_id: str) -> list[Team]: ...

    def fetch_standings(self, league_id: str) -> list[Standing]: ...


class DataRetrievalStrategy(ABC):
    """One way of retrieving football data."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Strategy identifier, for logging."""

    @abstractmethod
    def get_all_countries(self) -> list[Country]: ...

    @abstractmethod
    def get_leagues_by_country(self, country_id: str) -> list[League]: ...

    @abstractmethod
    def get_teams_by_league(self, league_id: str) -> list[Team]: ...

    @abstractmethod
    def get_standings(self, league_id: str) -> list[Standing]: ...


class LiveFetchStrategy(DataRetrievalStrategy):
    """Fetch fresh data from the external provider on every call.

    Countries are catalog data: a failed fetch degrades to an empty list.
    Leagues, teams and standings failures propagate as SourceUnavailableError
    or ParseFailureError so callers can tell "no matches" from "source down".
    """

    def __init__(self, source: FootballDataSource):
        self._source = source

    @property
    def name(self) -> str:
        return "online"

    def get_all_countries(self) -> list[Country]:
        try:
            return self._source.fetch_countries()
        except FootballDataError as e:
            logger.error("[LIVE] Error while fetching countries, returning none: %s", e)
            return []

    def get_leagues_by_country(self, country_id: str) -> list[League]:
        return self._source.fetch_leagues(country_id)

    def get_teams_by_league(self, league_id: str) -> list[Team]:
        return self._source.fetch_teams(league_id)

    def get_standings(self, league_id: str) -> list[Standing]:
        return self._source.fetch_standings(league_id)


class CacheReadStrategy(DataRetrievalStrategy):
    """Serve whatever the cache currently holds.

    A key that was never populated yields an empty list, never an error.
    """

    def __init__(self, store: CacheStore):
        self._store = store

    @property
    def name(self) -> str:
        return "offline"

    def get_all_countries(self) -> list[Country]:
        return self._store.countries.get() or []

    def get_leagues_by_country(self, country_id: str) -> list[League]:
        return self._store.leagues.get(country_id) or []

    def get_teams_by_league(self, league_id: str) -> list[Team]:
        return self._store.teams.get(league_id) or []

    def get_standings(self, league_id: str) -> list[Standing]:
        return self._store.standings.get(league_id) or []


class StrategySelector:
    """Map the offline flag to a strategy."""

    def __init__(self, live: DataRetrievalStrategy, cache: DataRetrievalStrategy):
        self._live = live
        self._cache = cache

    def select(self, is_offline: bool) -> DataRetrievalStrategy:
        return self._cache if is_offline else self._live
