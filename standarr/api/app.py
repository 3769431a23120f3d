"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager
from datetime import datetime

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from standarr.api.models import ErrorResponse
from standarr.api.routes import cache, football, health, mode
from standarr.config import APP_DESCRIPTION, APP_NAME, VERSION
from standarr.core import ParseFailureError, SourceUnavailableError, TeamNotFoundError
from standarr.utilities.logging import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan handler - runs on startup and shutdown."""
    from standarr.services import init_football_service, shutdown_football_service

    # Startup
    setup_logging()
    logger.info("Starting %s...", APP_NAME)

    service = init_football_service()
    logger.info("Retrieval mode: %s", "offline" if service.is_offline_mode() else "online")

    logger.info("%s ready", APP_NAME)

    yield

    # Shutdown
    logger.info("Shutting down %s...", APP_NAME)
    shutdown_football_service()
    logger.info("%s stopped", APP_NAME)


def _error_response(request: Request, status_code: int, error: str, message: str) -> JSONResponse:
    body = ErrorResponse(
        timestamp=datetime.now(),
        status=status_code,
        error=error,
        message=message,
        path=request.url.path,
    )
    return JSONResponse(status_code=status_code, content=body.model_dump(mode="json"))


async def team_not_found_handler(request: Request, exc: TeamNotFoundError) -> JSONResponse:
    return _error_response(request, status.HTTP_404_NOT_FOUND, "Team Not Found", exc.message)


async def source_unavailable_handler(
    request: Request, exc: SourceUnavailableError | ParseFailureError
) -> JSONResponse:
    logger.warning("Upstream failure on %s: %s", request.url.path, exc.message)
    return _error_response(
        request, status.HTTP_503_SERVICE_UNAVAILABLE, "Service Unavailable", exc.message
    )


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return _error_response(
        request, status.HTTP_400_BAD_REQUEST, "Validation Error", "Invalid input parameters"
    )


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title=f"{APP_NAME} API",
        description=APP_DESCRIPTION,
        version=VERSION,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
        lifespan=lifespan,
    )

    app.add_exception_handler(TeamNotFoundError, team_not_found_handler)
    app.add_exception_handler(SourceUnavailableError, source_unavailable_handler)
    app.add_exception_handler(ParseFailureError, source_unavailable_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)

    app.include_router(health.router, tags=["Health"])
    app.include_router(football.router, tags=["Football"])
    app.include_router(mode.router, tags=["Offline Mode"])
    app.include_router(cache.router, tags=["Cache"])

    return app


app = create_app()
