"""Offline mode endpoints.

- POST /offline-mode/{enabled} - Switch between live API and cache-only
- GET /offline-mode - Current mode
"""

import logging

from fastapi import APIRouter, Depends

from standarr.api.models import ModeResponse
from standarr.services import FootballService, get_football_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/offline-mode")


def _mode_response(offline: bool) -> ModeResponse:
    return ModeResponse(
        offline_mode=offline,
        message="Offline mode enabled" if offline else "Online mode enabled",
    )


@router.get("", response_model=ModeResponse)
def get_offline_mode(service: FootballService = Depends(get_football_service)):
    """Get the current retrieval mode."""
    return _mode_response(service.is_offline_mode())


@router.post("/{enabled}", response_model=ModeResponse)
def toggle_offline_mode(enabled: bool, service: FootballService = Depends(get_football_service)):
    """Toggle offline mode.

    Offline: every query is answered from the cache only.
    Online: every query hits the live API and refreshes the cache.
    """
    logger.info("Request received to toggle offline mode: %s", enabled)
    service.set_offline_mode(enabled)
    return _mode_response(enabled)
