"""Error taxonomy for football data retrieval.

SourceUnavailableError and ParseFailureError come from the live data source
and are surfaced to API callers as "service unavailable". TeamNotFoundError
comes from the standings lookup and is surfaced as "not found".
"""

from typing import Any


class FootballDataError(Exception):
    """Base exception for all Standarr data errors.

    Attributes:
        message: Human-readable error description
        details: Additional context as a dictionary
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to dict for logging/serialization."""
        return {
            "error_type": self.__class__.__name__,
            "message": self.message,
            "details": self.details,
        }


class SourceUnavailableError(FootballDataError):
    """Raised when the external football API cannot be reached or refuses a request."""

    def __init__(self, resource: str, identifier: str | None = None, message: str | None = None):
        self.resource = resource
        self.identifier = identifier
        if message is None:
            message = f"Failed to fetch {resource}"
            if identifier is not None:
                message += f" for '{identifier}'"
        super().__init__(message, {"resource": resource, "identifier": identifier})


class ParseFailureError(FootballDataError):
    """Raised when the external football API returns a malformed response."""

    def __init__(self, resource: str, identifier: str | None = None, message: str | None = None):
        self.resource = resource
        self.identifier = identifier
        if message is None:
            message = f"Malformed response while fetching {resource}"
            if identifier is not None:
                message += f" for '{identifier}'"
        super().__init__(message, {"resource": resource, "identifier": identifier})


class TeamNotFoundError(FootballDataError):
    """Raised when no standing matches a team/country pair in a league."""

    def __init__(self, country: str, league_id: str, team: str):
        self.country = country
        self.league_id = league_id
        self.team = team
        super().__init__(
            f"Team '{team}' not found in leagueId '{league_id}' for country '{country}'",
            {"country": country, "league_id": league_id, "team": team},
        )
