"""Tests for the apifootball.com client and provider.

HTTP is served by httpx.MockTransport; no network access.
"""

import httpx
import pytest

from standarr.core import Country, League, ParseFailureError, SourceUnavailableError, Team
from standarr.providers import ApiFootballClient, ApiFootballProvider
from standarr.services import LiveFetchStrategy

BASE_URL = "https://apifootball.test"


def make_client(handler, api_key: str = "secret-key") -> ApiFootballClient:
    return ApiFootballClient(
        api_key=api_key,
        base_url=BASE_URL,
        timeout=1.0,
        transport=httpx.MockTransport(handler),
    )


def json_handler(payload, status_code: int = 200, seen: list | None = None):
    def handler(request: httpx.Request) -> httpx.Response:
        if seen is not None:
            seen.append(request)
        return httpx.Response(status_code, json=payload)

    return handler


# =============================================================================
# CLIENT
# =============================================================================


class TestApiFootballClient:
    """Request construction and error mapping."""

    def test_sends_action_identifier_and_key(self):
        seen: list[httpx.Request] = []
        client = make_client(json_handler([], seen=seen))

        client.get_leagues("44")

        params = seen[0].url.params
        assert seen[0].url.host == "apifootball.test"
        assert params["action"] == "get_leagues"
        assert params["country_id"] == "44"
        assert params["APIkey"] == "secret-key"

    @pytest.mark.parametrize(
        "method, args, action, param",
        [
            ("get_countries", (), "get_countries", None),
            ("get_teams", ("148",), "get_teams", "league_id"),
            ("get_standings", ("148",), "get_standings", "league_id"),
        ],
    )
    def test_actions(self, method, args, action, param):
        seen: list[httpx.Request] = []
        client = make_client(json_handler([{"x": "1"}], seen=seen))

        assert getattr(client, method)(*args) == [{"x": "1"}]
        assert seen[0].url.params["action"] == action
        if param:
            assert seen[0].url.params[param] == args[0]

    def test_no_data_error_payload_is_empty_result(self):
        client = make_client(json_handler({"error": 404, "message": "No league found!"}))
        assert client.get_standings("999") == []

    def test_other_error_payload_is_source_unavailable(self):
        client = make_client(json_handler({"error": 401, "message": "Authentification failed!"}))

        with pytest.raises(SourceUnavailableError) as exc_info:
            client.get_teams("148")

        assert exc_info.value.identifier == "148"
        assert "401" in exc_info.value.message

    def test_http_error_is_source_unavailable(self):
        client = make_client(json_handler({"detail": "boom"}, status_code=500))

        with pytest.raises(SourceUnavailableError) as exc_info:
            client.get_standings("148")

        assert exc_info.value.resource == "standings"
        assert exc_info.value.identifier == "148"

    def test_transport_error_is_source_unavailable(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(SourceUnavailableError):
            make_client(handler).get_leagues("44")

    def test_timeout_is_source_unavailable(self):
        def handler(request):
            raise httpx.ReadTimeout("timed out", request=request)

        with pytest.raises(SourceUnavailableError):
            make_client(handler).get_teams("148")

    def test_non_json_body_is_parse_failure(self):
        client = make_client(lambda request: httpx.Response(200, text="<html>oops</html>"))

        with pytest.raises(ParseFailureError) as exc_info:
            client.get_leagues("44")

        assert exc_info.value.identifier == "44"

    def test_unexpected_json_shape_is_parse_failure(self):
        client = make_client(json_handler({"result": []}))

        with pytest.raises(ParseFailureError):
            client.get_standings("148")

    def test_api_key_is_not_logged(self, caplog):
        client = make_client(json_handler([]))

        with caplog.at_level("DEBUG"):
            client.get_teams("148")

        assert "secret-key" not in caplog.text

    def test_close_is_idempotent(self):
        client = make_client(json_handler([]))
        client.get_countries()
        client.close()
        client.close()


# =============================================================================
# PROVIDER
# =============================================================================


class TestApiFootballProvider:
    """Parsing raw payloads into records."""

    def test_parses_countries(self):
        payload = [
            {"country_id": "44", "country_name": "England", "country_logo": "https://x/44.png"},
        ]
        provider = ApiFootballProvider(make_client(json_handler(payload)))

        assert provider.fetch_countries() == [
            Country(id="44", name="England", logo_url="https://x/44.png")
        ]

    def test_parses_leagues(self):
        payload = [
            {
                "country_id": "44",
                "country_name": "England",
                "league_id": "148",
                "league_name": "Premier League",
                "league_season": "2024/2025",
                "league_logo": "https://x/148.png",
                "country_logo": "https://x/44.png",
            }
        ]
        provider = ApiFootballProvider(make_client(json_handler(payload)))

        assert provider.fetch_leagues("44") == [
            League(
                id="148",
                name="Premier League",
                country_id="44",
                country_name="England",
                season="2024/2025",
                logo_url="https://x/148.png",
            )
        ]

    def test_parses_teams_ignoring_players(self):
        payload = [
            {
                "team_key": "141",
                "team_name": "Arsenal",
                "team_country": "England",
                "team_founded": "1886",
                "team_badge": "https://x/141.png",
                "players": [{"player_name": "Someone"}],
                "coaches": [],
            }
        ]
        provider = ApiFootballProvider(make_client(json_handler(payload)))

        assert provider.fetch_teams("148") == [
            Team(
                key="141",
                name="Arsenal",
                country="England",
                founded="1886",
                badge_url="https://x/141.png",
            )
        ]

    def test_parses_standings_as_strings(self):
        payload = [
            {
                "country_name": "England",
                "league_id": "148",
                "league_name": "Premier League",
                "team_id": "141",
                "team_name": "Arsenal",
                "overall_league_position": "2",
                "overall_league_payed": "38",
                "overall_league_W": "26",
                "overall_league_D": "6",
                "overall_league_L": "6",
                "overall_league_GF": "88",
                "overall_league_GA": 43,
                "overall_league_PTS": "84",
                "team_badge": "https://x/141.png",
            }
        ]
        provider = ApiFootballProvider(make_client(json_handler(payload)))

        [standing] = provider.fetch_standings("148")

        assert standing.team_name == "Arsenal"
        assert standing.played == "38"
        assert standing.points == "84"
        assert standing.goals_against == "43"  # numbers are carried as text

    def test_missing_fields_become_none(self):
        provider = ApiFootballProvider(make_client(json_handler([{"team_key": "1"}])))

        [team] = provider.fetch_teams("148")

        assert team.key == "1"
        assert team.name is None
        assert team.badge_url is None

    def test_preserves_upstream_order(self):
        payload = [{"country_id": str(i), "country_name": f"C{i}"} for i in (3, 1, 2)]
        provider = ApiFootballProvider(make_client(json_handler(payload)))

        assert [c.id for c in provider.fetch_countries()] == ["3", "1", "2"]

    def test_non_object_items_are_parse_failures(self):
        provider = ApiFootballProvider(make_client(json_handler(["not", "objects"])))

        with pytest.raises(ParseFailureError) as exc_info:
            provider.fetch_standings("148")

        assert exc_info.value.identifier == "148"

    def test_countries_failure_is_lenient_through_live_strategy(self):
        """Only countries degrade to an empty list on upstream failure."""
        provider = ApiFootballProvider(make_client(json_handler({}, status_code=503)))
        live = LiveFetchStrategy(provider)

        assert live.get_all_countries() == []
        with pytest.raises(SourceUnavailableError):
            live.get_leagues_by_country("44")

    def test_name(self):
        assert ApiFootballProvider(make_client(json_handler([]))).name == "apifootball"
