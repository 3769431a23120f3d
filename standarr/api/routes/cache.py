"""Cache status endpoint.

- GET /cache/status - Entry and record counts per collection
"""

from fastapi import APIRouter, Depends

from standarr.api.models import CacheStatusResponse
from standarr.services import FootballService, get_football_service

router = APIRouter(prefix="/cache")


@router.get("/status", response_model=CacheStatusResponse)
def get_cache_status(service: FootballService = Depends(get_football_service)):
    """Get cache statistics.

    Returns:
        Current mode plus, per collection, the number of keys, the number
        of cached records and the time of the last write
    """
    return CacheStatusResponse(
        offline_mode=service.is_offline_mode(),
        collections=service.store.stats(),
    )
