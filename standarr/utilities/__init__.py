"""Utilities - logging."""

from standarr.utilities.logging import setup_logging

__all__ = ["setup_logging"]
