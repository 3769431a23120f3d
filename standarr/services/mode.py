"""Online/offline retrieval mode.

ModeState is an explicitly owned state holder passed to FootballService at
construction, so tests and embedders can run isolated instances.
"""

import logging
import threading

logger = logging.getLogger(__name__)


class ModeState:
    """Thread-safe holder for the offline-mode flag (default: online)."""

    def __init__(self, offline: bool = False):
        self._offline = offline
        self._lock = threading.Lock()

    def set_offline(self, enabled: bool) -> None:
        """Overwrite the current mode."""
        with self._lock:
            self._offline = enabled
        logger.info("[MODE] %s mode enabled", "Offline" if enabled else "Online")

    def is_offline(self) -> bool:
        with self._lock:
            return self._offline
