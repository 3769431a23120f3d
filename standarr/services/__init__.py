"""Service layer."""

from standarr.services.cache_store import CacheCollection, CacheStore, make_cache_key
from standarr.services.football import (
    FootballService,
    build_service,
    create_default_service,
    get_football_service,
    init_football_service,
    shutdown_football_service,
)
from standarr.services.mode import ModeState
from standarr.services.strategies import (
    CacheReadStrategy,
    DataRetrievalStrategy,
    FootballDataSource,
    LiveFetchStrategy,
    StrategySelector,
)

__all__ = [
    "CacheCollection",
    "CacheReadStrategy",
    "CacheStore",
    "DataRetrievalStrategy",
    "FootballDataSource",
    "FootballService",
    "LiveFetchStrategy",
    "ModeState",
    "StrategySelector",
    "build_service",
    "create_default_service",
    "get_football_service",
    "init_football_service",
    "make_cache_key",
    "shutdown_football_service",
]
