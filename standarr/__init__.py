"""Standarr - football standings service with online/offline data retrieval."""

from standarr.config import VERSION

__version__ = VERSION
