"""apifootball.com data provider.

Fetches data through ApiFootballClient and normalizes it into our dataclass
format. This is the external collaborator behind the live-fetch strategy.
"""

import logging
from collections.abc import Callable
from typing import TypeVar

from standarr.core import Country, League, ParseFailureError, Standing, Team
from standarr.providers.apifootball.client import ApiFootballClient

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _text(data: dict, key: str) -> str | None:
    """Read a field as an opaque string (None when absent)."""
    value = data.get(key)
    if value is None:
        return None
    return value if isinstance(value, str) else str(value)


class ApiFootballProvider:
    """apifootball.com implementation of the football data source."""

    def __init__(self, client: ApiFootballClient | None = None):
        self._client = client or ApiFootballClient()

    @property
    def name(self) -> str:
        return "apifootball"

    def fetch_countries(self) -> list[Country]:
        """Get all countries."""
        return self._parse_all(self._client.get_countries(), self._parse_country, "countries")

    def fetch_leagues(self, country_id: str) -> list[League]:
        """Get leagues for a country."""
        return self._parse_all(
            self._client.get_leagues(country_id), self._parse_league, "leagues", country_id
        )

    def fetch_teams(self, league_id: str) -> list[Team]:
        """Get teams for a league."""
        return self._parse_all(
            self._client.get_teams(league_id), self._parse_team, "teams", league_id
        )

    def fetch_standings(self, league_id: str) -> list[Standing]:
        """Get the standings table for a league."""
        return self._parse_all(
            self._client.get_standings(league_id), self._parse_standing, "standings", league_id
        )

    def close(self) -> None:
        self._client.close()

    def _parse_all(
        self,
        items: list,
        parser: Callable[[dict], T],
        resource: str,
        identifier: str | None = None,
    ) -> list[T]:
        """Parse every item of a raw list, preserving upstream order.

        Raises ParseFailureError if any item is not a JSON object.
        """
        parsed = []
        for item in items:
            if not isinstance(item, dict):
                logger.error(
                    "[APIFOOTBALL] Unexpected %s item type %s", resource, type(item).__name__
                )
                raise ParseFailureError(resource, identifier)
            parsed.append(parser(item))
        return parsed

    def _parse_country(self, data: dict) -> Country:
        return Country(
            id=_text(data, "country_id"),
            name=_text(data, "country_name"),
            logo_url=_text(data, "country_logo"),
        )

    def _parse_league(self, data: dict) -> League:
        return League(
            id=_text(data, "league_id"),
            name=_text(data, "league_name"),
            country_id=_text(data, "country_id"),
            country_name=_text(data, "country_name"),
            season=_text(data, "league_season"),
            logo_url=_text(data, "league_logo"),
        )

    def _parse_team(self, data: dict) -> Team:
        # Players and coaches are ignored
        return Team(
            key=_text(data, "team_key"),
            name=_text(data, "team_name"),
            country=_text(data, "team_country"),
            founded=_text(data, "team_founded"),
            badge_url=_text(data, "team_badge"),
        )

    def _parse_standing(self, data: dict) -> Standing:
        """Parse an overall standings row.

        "overall_league_payed" is apifootball's own spelling.
        """
        return Standing(
            country_name=_text(data, "country_name"),
            league_id=_text(data, "league_id"),
            league_name=_text(data, "league_name"),
            team_id=_text(data, "team_id"),
            team_name=_text(data, "team_name"),
            position=_text(data, "overall_league_position"),
            played=_text(data, "overall_league_payed"),
            wins=_text(data, "overall_league_W"),
            draws=_text(data, "overall_league_D"),
            losses=_text(data, "overall_league_L"),
            goals_for=_text(data, "overall_league_GF"),
            goals_against=_text(data, "overall_league_GA"),
            points=_text(data, "overall_league_PTS"),
            badge_url=_text(data, "team_badge"),
        )
