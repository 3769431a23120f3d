"""apifootball.com API HTTP client.

Handles raw HTTP requests to the apifootball.com v3 endpoint.
No data transformation - just fetch and return decoded JSON lists.

Every call is an ``action`` on the same base URL:
    get_countries, get_leagues, get_teams, get_standings

Configuration via environment variables (see standarr.config):
    APIFOOTBALL_URL: Base URL (default: https://apiv3.apifootball.com)
    APIFOOTBALL_KEY: API key
    APIFOOTBALL_TIMEOUT: Request timeout in seconds (default: 10)
    APIFOOTBALL_MAX_CONNECTIONS: Connection pool size (default: 10)
"""

import logging
import threading

import httpx

from standarr import config
from standarr.core import ParseFailureError, SourceUnavailableError

logger = logging.getLogger(__name__)

# apifootball answers "no data for this query" with {"error": 404, "message": ...}
NO_DATA_ERROR_CODE = 404


class ApiFootballClient:
    """Low-level apifootball.com API client.

    API key resolution order:
    1. Explicit api_key parameter
    2. APIFOOTBALL_KEY environment variable

    The key is sent as a query parameter and never logged.
    """

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str | None = None,
        timeout: float | None = None,
        max_connections: int | None = None,
        transport: httpx.BaseTransport | None = None,
    ):
        self._explicit_key = api_key
        self._base_url = (base_url or config.APIFOOTBALL_URL).rstrip("/")
        self._timeout = timeout if timeout is not None else config.APIFOOTBALL_TIMEOUT
        self._max_connections = (
            max_connections if max_connections is not None else config.APIFOOTBALL_MAX_CONNECTIONS
        )
        self._transport = transport
        self._client: httpx.Client | None = None
        self._lock = threading.Lock()

    @property
    def _api_key(self) -> str:
        """Resolve API key from available sources."""
        if self._explicit_key:
            return self._explicit_key
        return config.APIFOOTBALL_KEY

    @property
    def has_api_key(self) -> bool:
        return bool(self._api_key)

    def _get_client(self) -> httpx.Client:
        if self._client is None:
            with self._lock:
                # Double-check after acquiring lock
                if self._client is None:
                    self._client = httpx.Client(
                        timeout=self._timeout,
                        limits=httpx.Limits(
                            max_connections=self._max_connections,
                            max_keepalive_connections=self._max_connections,
                        ),
                        transport=self._transport,
                    )
        return self._client

    def _request(
        self,
        action: str,
        resource: str,
        identifier: str | None = None,
        params: dict | None = None,
    ) -> list:
        """Run one apifootball action and return the decoded JSON list.

        Raises:
            SourceUnavailableError: transport failure, non-2xx status, or an
                API error payload other than "no data found"
            ParseFailureError: body is not JSON or not a list
        """
        query = {"action": action, **(params or {})}
        logger.info("[APIFOOTBALL] GET %s/?%s", self._base_url, httpx.QueryParams(query))

        try:
            response = self._get_client().get(
                f"{self._base_url}/", params={**query, "APIkey": self._api_key}
            )
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            logger.warning("[APIFOOTBALL] HTTP %d for action=%s", e.response.status_code, action)
            raise SourceUnavailableError(resource, identifier) from e
        except httpx.RequestError as e:
            logger.warning("[APIFOOTBALL] Request failed for action=%s: %s", action, e)
            raise SourceUnavailableError(resource, identifier) from e

        try:
            data = response.json()
        except ValueError as e:
            logger.error("[APIFOOTBALL] Non-JSON response for action=%s", action)
            raise ParseFailureError(resource, identifier) from e

        if isinstance(data, dict) and "error" in data:
            if str(data.get("error")) == str(NO_DATA_ERROR_CODE):
                logger.debug("[APIFOOTBALL] No data for action=%s: %s", action, data.get("message"))
                return []
            logger.warning(
                "[APIFOOTBALL] API error %s for action=%s: %s",
                data.get("error"),
                action,
                data.get("message"),
            )
            raise SourceUnavailableError(
                resource, identifier, message=f"API error {data.get('error')}: {data.get('message')}"
            )

        if not isinstance(data, list):
            logger.error(
                "[APIFOOTBALL] Expected a list for action=%s, got %s", action, type(data).__name__
            )
            raise ParseFailureError(resource, identifier)

        logger.debug("[APIFOOTBALL] action=%s returned %d items", action, len(data))
        return data

    def get_countries(self) -> list:
        """Fetch all countries.

        Returns:
            Raw list of country dicts
        """
        return self._request("get_countries", "countries")

    def get_leagues(self, country_id: str) -> list:
        """Fetch leagues for a country.

        Args:
            country_id: apifootball country ID

        Returns:
            Raw list of league dicts
        """
        return self._request("get_leagues", "leagues", country_id, {"country_id": country_id})

    def get_teams(self, league_id: str) -> list:
        """Fetch teams for a league.

        Args:
            league_id: apifootball league ID

        Returns:
            Raw list of team dicts (players and coaches included)
        """
        return self._request("get_teams", "teams", league_id, {"league_id": league_id})

    def get_standings(self, league_id: str) -> list:
        """Fetch the standings table for a league.

        Args:
            league_id: apifootball league ID

        Returns:
            Raw list of standing dicts
        """
        return self._request("get_standings", "standings", league_id, {"league_id": league_id})

    def close(self) -> None:
        """Close the HTTP client."""
        with self._lock:
            if self._client:
                self._client.close()
                self._client = None
