"""Core data types for Standarr.

All records are frozen dataclasses with attribute access. Every field is
carried as the string the upstream API emits; counts and points are never
converted to numbers.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Country:
    """A country that has football competitions."""

    id: str | None
    name: str | None
    logo_url: str | None = None


@dataclass(frozen=True)
class League:
    """A competition within a country."""

    id: str | None
    name: str | None
    country_id: str | None = None
    country_name: str | None = None
    season: str | None = None  # e.g. "2024/2025"
    logo_url: str | None = None


@dataclass(frozen=True)
class Team:
    """A team playing in a league."""

    key: str | None
    name: str | None
    country: str | None = None
    founded: str | None = None
    badge_url: str | None = None


@dataclass(frozen=True)
class Standing:
    """One row of a league table (overall standings)."""

    country_name: str | None
    league_id: str | None
    league_name: str | None
    team_id: str | None
    team_name: str | None
    position: str | None = None
    played: str | None = None
    wins: str | None = None
    draws: str | None = None
    losses: str | None = None
    goals_for: str | None = None
    goals_against: str | None = None
    points: str | None = None
    badge_url: str | None = None
