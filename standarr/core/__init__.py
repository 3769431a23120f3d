"""Core types and errors."""

from standarr.core.exceptions import (
    FootballDataError,
    ParseFailureError,
    SourceUnavailableError,
    TeamNotFoundError,
)
from standarr.core.types import Country, League, Standing, Team

__all__ = [
    "Country",
    "FootballDataError",
    "League",
    "ParseFailureError",
    "SourceUnavailableError",
    "Standing",
    "Team",
    "TeamNotFoundError",
]
