"""apifootball.com data provider package."""

from standarr.providers.apifootball.client import ApiFootballClient
from standarr.providers.apifootball.provider import ApiFootballProvider

__all__ = ["ApiFootballClient", "ApiFootballProvider"]
