"""External football data providers."""

from standarr.providers.apifootball import ApiFootballClient, ApiFootballProvider

__all__ = ["ApiFootballClient", "ApiFootballProvider"]
