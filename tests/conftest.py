"""Shared fixtures for Standarr tests."""

import os
import tempfile
import threading

# Keep log files out of the working tree (config reads LOG_DIR at import)
os.environ.setdefault("LOG_DIR", tempfile.mkdtemp(prefix="standarr-logs-"))

import pytest  # noqa: E402

from standarr.core import Country, League, Standing, Team  # noqa: E402
from standarr.services import CacheStore, ModeState, build_service  # noqa: E402


class FakeFootballSource:
    """In-memory stand-in for the apifootball provider.

    Set `error` to make every fetch raise it. Set `on_fetch` to run a hook
    in the middle of a fetch (before the result is returned).
    """

    def __init__(self):
        self.countries: list[Country] = []
        self.leagues: dict[str, list[League]] = {}
        self.teams: dict[str, list[Team]] = {}
        self.standings: dict[str, list[Standing]] = {}
        self.error: Exception | None = None
        self.on_fetch = None
        self.calls: list[tuple[str, str | None]] = []
        self._lock = threading.Lock()

    def _fetch(self, resource: str, identifier: str | None, data):
        with self._lock:
            self.calls.append((resource, identifier))
        if self.on_fetch:
            self.on_fetch()
        if self.error:
            raise self.error
        return list(data)

    def fetch_countries(self) -> list[Country]:
        return self._fetch("countries", None, self.countries)

    def fetch_leagues(self, country_id: str) -> list[League]:
        return self._fetch("leagues", country_id, self.leagues.get(country_id, []))

    def fetch_teams(self, league_id: str) -> list[Team]:
        return self._fetch("teams", league_id, self.teams.get(league_id, []))

    def fetch_standings(self, league_id: str) -> list[Standing]:
        return self._fetch("standings", league_id, self.standings.get(league_id, []))


def make_standing(team_name: str, country_name: str = "England", position: str = "1") -> Standing:
    return Standing(
        country_name=country_name,
        league_id="148",
        league_name="Premier League",
        team_id=f"id-{team_name.lower().replace(' ', '-')}",
        team_name=team_name,
        position=position,
        played="38",
        wins="26",
        draws="6",
        losses="6",
        goals_for="88",
        goals_against="43",
        points="84",
        badge_url=f"https://apiv3.apifootball.com/badges/{team_name}.png",
    )


@pytest.fixture
def countries() -> list[Country]:
    return [
        Country(id="44", name="England", logo_url="https://apiv3.apifootball.com/badges/logo_country/44_england.png"),
        Country(id="6", name="Spain", logo_url="https://apiv3.apifootball.com/badges/logo_country/6_spain.png"),
    ]


@pytest.fixture
def leagues() -> list[League]:
    return [
        League(
            id="148",
            name="Premier League",
            country_id="44",
            country_name="England",
            season="2024/2025",
            logo_url="https://apiv3.apifootball.com/badges/logo_leagues/148_premier-league.png",
        ),
        League(
            id="149",
            name="Championship",
            country_id="44",
            country_name="England",
            season="2024/2025",
        ),
    ]


@pytest.fixture
def teams() -> list[Team]:
    return [
        Team(key="141", name="Arsenal", country="England", founded="1886"),
        Team(key="80", name="Chelsea", country="England", founded="1905"),
    ]


@pytest.fixture
def standings() -> list[Standing]:
    return [
        make_standing("Liverpool", position="1"),
        make_standing("Arsenal", position="2"),
        make_standing("Manchester City", position="3"),
    ]


@pytest.fixture
def source(countries, leagues, teams, standings) -> FakeFootballSource:
    fake = FakeFootballSource()
    fake.countries = countries
    fake.leagues = {"44": leagues}
    fake.teams = {"148": teams}
    fake.standings = {"148": standings}
    return fake


@pytest.fixture
def mode() -> ModeState:
    return ModeState()


@pytest.fixture
def store() -> CacheStore:
    return CacheStore()


@pytest.fixture
def service(source, mode, store):
    return build_service(source, mode=mode, store=store)
