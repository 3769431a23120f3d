"""Standarr configuration.

Settings are read from environment variables at import time, with defaults
suitable for local development.
"""

import os

VERSION = "1.0.0"

APP_NAME = "Standarr"
APP_DESCRIPTION = "Football standings service with online/offline data retrieval"

# apifootball.com v3
APIFOOTBALL_URL = os.environ.get("APIFOOTBALL_URL", "https://apiv3.apifootball.com")
APIFOOTBALL_KEY = os.environ.get("APIFOOTBALL_KEY", "")
APIFOOTBALL_TIMEOUT = float(os.environ.get("APIFOOTBALL_TIMEOUT", 10.0))
APIFOOTBALL_MAX_CONNECTIONS = int(os.environ.get("APIFOOTBALL_MAX_CONNECTIONS", 10))

# Logging
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
LOG_DIR = os.environ.get("LOG_DIR") or ("/app/data/logs" if os.path.exists("/app/data") else "logs")

DEFAULT_PORT = 9195


def env_flag(name: str, default: bool = False) -> bool:
    """Parse a boolean environment variable ("1", "true", "yes", "on")."""
    raw = os.environ.get(name, "").strip().lower()
    if not raw:
        return default
    return raw in ("1", "true", "yes", "on")


# Initial retrieval mode - operators can still toggle it at runtime
START_OFFLINE = env_flag("STANDARR_OFFLINE_MODE")
