"""Football data endpoints.

- GET /countries - All countries
- GET /leagues/{country_id} - Leagues in a country
- GET /teams/{league_id} - Teams in a league
- GET /standings/{league_id} - League table
- GET /team-standing/{country}/{league_id}/{team} - One team's row

Answers come from the live API or the cache depending on the offline mode.
Domain errors are mapped to HTTP responses by the handlers in api.app.
"""

import logging

from fastapi import APIRouter, Depends

from standarr.api.models import (
    CountryList,
    CountryModel,
    LeagueList,
    LeagueModel,
    StandingList,
    StandingModel,
    TeamList,
    TeamModel,
)
from standarr.api.routes import link
from standarr.services import FootballService, get_football_service

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/countries", response_model=CountryList)
def get_countries(service: FootballService = Depends(get_football_service)):
    """Get all available countries."""
    logger.info("Request received for getting all countries")
    countries = service.get_all_countries()

    return CountryList(
        count=len(countries),
        countries=[
            CountryModel.from_record(
                country,
                {
                    "self": link("countries"),
                    "leagues": link("leagues", country.id),
                },
            )
            for country in countries
        ],
        links={"self": link("countries")},
    )


@router.get("/leagues/{country_id}", response_model=LeagueList)
def get_leagues(country_id: str, service: FootballService = Depends(get_football_service)):
    """Get leagues by country ID."""
    logger.info("Request received for getting leagues for country: %s", country_id)
    leagues = service.get_leagues_by_country(country_id)

    return LeagueList(
        count=len(leagues),
        leagues=[
            LeagueModel.from_record(
                league,
                {
                    "self": link("leagues", country_id),
                    "teams": link("teams", league.id),
                    "standings": link("standings", league.id),
                },
            )
            for league in leagues
        ],
        links={"self": link("leagues", country_id)},
    )


@router.get("/teams/{league_id}", response_model=TeamList)
def get_teams(league_id: str, service: FootballService = Depends(get_football_service)):
    """Get teams by league ID."""
    logger.info("Request received for getting teams for league: %s", league_id)
    teams = service.get_teams_by_league(league_id)

    return TeamList(
        count=len(teams),
        teams=[TeamModel.from_record(team, {"self": link("teams", league_id)}) for team in teams],
        links={"self": link("teams", league_id)},
    )


@router.get("/standings/{league_id}", response_model=StandingList)
def get_standings(league_id: str, service: FootballService = Depends(get_football_service)):
    """Get standings for a league."""
    logger.info("Request received for getting standings for league: %s", league_id)
    standings = service.get_standings(league_id)

    return StandingList(
        count=len(standings),
        standings=[
            StandingModel.from_record(
                standing,
                {
                    "self": link("standings", league_id),
                    "team-details": link(
                        "team-standing",
                        standing.country_name,
                        standing.league_id,
                        standing.team_name,
                    ),
                },
            )
            for standing in standings
        ],
        links={"self": link("standings", league_id)},
    )


@router.get("/team-standing/{country}/{league_id}/{team}", response_model=StandingModel)
def get_team_standing(
    country: str,
    league_id: str,
    team: str,
    service: FootballService = Depends(get_football_service),
):
    """Get a specific team's standing.

    Returns 404 if the team is not in the league table for that country.
    """
    logger.info("Request received for team standing: %s/%s/%s", country, league_id, team)
    standing = service.get_team_standing(country, league_id, team)

    return StandingModel.from_record(
        standing,
        {
            "self": link("team-standing", country, league_id, team),
            "league-standings": link("standings", standing.league_id),
        },
    )
