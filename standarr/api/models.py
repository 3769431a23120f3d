"""Pydantic models for API responses.

Record fields keep the apifootball.com JSON names so clients of the upstream
API can read our payloads unchanged. Every record and collection carries
hypermedia links under "_links".
"""

from datetime import datetime

from pydantic import BaseModel, Field

from standarr.core import Country, League, Standing, Team

# =============================================================================
# Links
# =============================================================================


class Link(BaseModel):
    """A hypermedia link."""

    href: str


Links = dict[str, Link]


def links_field():
    return Field(default_factory=dict, serialization_alias="_links")


# =============================================================================
# Records
# =============================================================================


class CountryModel(BaseModel):
    """A country."""

    country_id: str | None
    country_name: str | None
    country_logo: str | None = None
    links: Links = links_field()

    @classmethod
    def from_record(cls, country: Country, links: Links) -> "CountryModel":
        return cls(
            country_id=country.id,
            country_name=country.name,
            country_logo=country.logo_url,
            links=links,
        )


class LeagueModel(BaseModel):
    """A league."""

    league_id: str | None
    league_name: str | None
    country_id: str | None = None
    country_name: str | None = None
    league_season: str | None = None
    league_logo: str | None = None
    links: Links = links_field()

    @classmethod
    def from_record(cls, league: League, links: Links) -> "LeagueModel":
        return cls(
            league_id=league.id,
            league_name=league.name,
            country_id=league.country_id,
            country_name=league.country_name,
            league_season=league.season,
            league_logo=league.logo_url,
            links=links,
        )


class TeamModel(BaseModel):
    """A team."""

    team_key: str | None
    team_name: str | None
    team_country: str | None = None
    team_founded: str | None = None
    team_badge: str | None = None
    links: Links = links_field()

    @classmethod
    def from_record(cls, team: Team, links: Links) -> "TeamModel":
        return cls(
            team_key=team.key,
            team_name=team.name,
            team_country=team.country,
            team_founded=team.founded,
            team_badge=team.badge_url,
            links=links,
        )


class StandingModel(BaseModel):
    """A league table row. Counts and points stay strings, as upstream sends them."""

    country_name: str | None
    league_id: str | None
    league_name: str | None
    team_id: str | None
    team_name: str | None
    overall_league_position: str | None = None
    overall_league_payed: str | None = None
    overall_league_W: str | None = None
    overall_league_D: str | None = None
    overall_league_L: str | None = None
    overall_league_GF: str | None = None
    overall_league_GA: str | None = None
    overall_league_PTS: str | None = None
    team_badge: str | None = None
    links: Links = links_field()

    @classmethod
    def from_record(cls, standing: Standing, links: Links) -> "StandingModel":
        return cls(
            country_name=standing.country_name,
            league_id=standing.league_id,
            league_name=standing.league_name,
            team_id=standing.team_id,
            team_name=standing.team_name,
            overall_league_position=standing.position,
            overall_league_payed=standing.played,
            overall_league_W=standing.wins,
            overall_league_D=standing.draws,
            overall_league_L=standing.losses,
            overall_league_GF=standing.goals_for,
            overall_league_GA=standing.goals_against,
            overall_league_PTS=standing.points,
            team_badge=standing.badge_url,
            links=links,
        )


# =============================================================================
# Collections
# =============================================================================


class CountryList(BaseModel):
    count: int
    countries: list[CountryModel]
    links: Links = links_field()


class LeagueList(BaseModel):
    count: int
    leagues: list[LeagueModel]
    links: Links = links_field()


class TeamList(BaseModel):
    count: int
    teams: list[TeamModel]
    links: Links = links_field()


class StandingList(BaseModel):
    count: int
    standings: list[StandingModel]
    links: Links = links_field()


# =============================================================================
# Mode, cache, errors
# =============================================================================


class ModeResponse(BaseModel):
    """Current retrieval mode."""

    offline_mode: bool
    message: str


class CacheStatusResponse(BaseModel):
    """Cache statistics per collection."""

    offline_mode: bool
    collections: dict[str, dict]


class ErrorResponse(BaseModel):
    """Error body returned by the exception handlers."""

    timestamp: datetime
    status: int
    error: str
    message: str
    path: str
