"""Football data service.

Single entry point used by the API layer. For every query it:

1. Reads the offline flag once
2. Asks the StrategySelector for the matching strategy
3. Runs the query on that strategy
4. If the flag read in step 1 was online, stores the result in the cache
   (even an empty result - the last live fetch wins)
5. Returns the result

The cache write is gated on the mode seen when the call started. A toggle
that lands mid-call does not change what this call does.
"""

import logging
from collections.abc import Callable
from typing import TypeVar

from standarr import config
from standarr.core import Country, League, Standing, Team, TeamNotFoundError
from standarr.providers import ApiFootballClient, ApiFootballProvider
from standarr.services.cache_store import CacheCollection, CacheStore
from standarr.services.mode import ModeState
from standarr.services.strategies import (
    CacheReadStrategy,
    DataRetrievalStrategy,
    FootballDataSource,
    LiveFetchStrategy,
    StrategySelector,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


class FootballService:
    """Mode-aware football data retrieval with opportunistic caching."""

    def __init__(
        self,
        mode: ModeState,
        selector: StrategySelector,
        store: CacheStore,
        on_close: Callable[[], None] | None = None,
    ):
        self._mode = mode
        self._selector = selector
        self._store = store
        self._on_close = on_close

    @property
    def store(self) -> CacheStore:
        return self._store

    def _retrieve(
        self,
        query: Callable[[DataRetrievalStrategy], list[T]],
        collection: CacheCollection[T],
        identifier: str | None = None,
    ) -> list[T]:
        offline = self._mode.is_offline()
        strategy = self._selector.select(offline)
        result = query(strategy)
        logger.debug(
            "[SERVICE] %s %s via %s strategy: %d items",
            collection.name,
            identifier or "",
            strategy.name,
            len(result),
        )
        if not offline:
            collection.put(result, identifier)
        return result

    def get_all_countries(self) -> list[Country]:
        return self._retrieve(lambda s: s.get_all_countries(), self._store.countries)

    def get_leagues_by_country(self, country_id: str) -> list[League]:
        return self._retrieve(
            lambda s: s.get_leagues_by_country(country_id), self._store.leagues, country_id
        )

    def get_teams_by_league(self, league_id: str) -> list[Team]:
        return self._retrieve(
            lambda s: s.get_teams_by_league(league_id), self._store.teams, league_id
        )

    def get_standings(self, league_id: str) -> list[Standing]:
        return self._retrieve(
            lambda s: s.get_standings(league_id), self._store.standings, league_id
        )

    def get_team_standing(self, country: str, league_id: str, team: str) -> Standing:
        """Find one team's row in a league's standings.

        Standings are cached per league, so this fetches (or reads) the
        whole table and scans it. Team and country names match
        case-insensitively.

        Raises:
            TeamNotFoundError: no row matches both names
        """
        team_key = team.casefold()
        country_key = country.casefold()
        for standing in self.get_standings(league_id):
            if (
                standing.team_name is not None
                and standing.country_name is not None
                and standing.team_name.casefold() == team_key
                and standing.country_name.casefold() == country_key
            ):
                return standing
        raise TeamNotFoundError(country, league_id, team)

    def set_offline_mode(self, enabled: bool) -> None:
        self._mode.set_offline(enabled)

    def is_offline_mode(self) -> bool:
        return self._mode.is_offline()

    def close(self) -> None:
        """Release provider resources (HTTP connections)."""
        if self._on_close:
            self._on_close()


def build_service(
    source: FootballDataSource,
    mode: ModeState | None = None,
    store: CacheStore | None = None,
    on_close: Callable[[], None] | None = None,
) -> FootballService:
    """Wire a FootballService around any football data source."""
    store = store or CacheStore()
    selector = StrategySelector(
        live=LiveFetchStrategy(source),
        cache=CacheReadStrategy(store),
    )
    return FootballService(mode or ModeState(), selector, store, on_close=on_close)


def create_default_service(
    api_key: str | None = None,
    offline: bool | None = None,
) -> FootballService:
    """Create a FootballService backed by apifootball.com.

    Args:
        api_key: apifootball key (default: APIFOOTBALL_KEY)
        offline: Initial mode (default: STANDARR_OFFLINE_MODE)
    """
    client = ApiFootballClient(api_key=api_key)
    if not client.has_api_key:
        logger.warning("[SERVICE] APIFOOTBALL_KEY is not set - live requests will be rejected")
    provider = ApiFootballProvider(client)
    start_offline = config.START_OFFLINE if offline is None else offline
    return build_service(provider, mode=ModeState(start_offline), on_close=provider.close)


# Singleton instance - initialized by app startup
_football_service: FootballService | None = None


def init_football_service(service: FootballService | None = None) -> FootballService:
    """Initialize the global football service.

    Called during app startup.
    """
    global _football_service
    _football_service = service or create_default_service()
    return _football_service


def get_football_service() -> FootballService:
    """Get the global football service.

    Raises RuntimeError if not initialized.
    """
    if _football_service is None:
        raise RuntimeError(
            "FootballService not initialized. Call init_football_service() first."
        )
    return _football_service


def shutdown_football_service() -> None:
    """Close and forget the global football service."""
    global _football_service
    if _football_service is not None:
        _football_service.close()
        _football_service = None
