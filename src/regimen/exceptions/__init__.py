"""Shared exception hierarchy for Regimen."""

from __future__ import annotations

from .base import RegimenError
from .catalog import CatalogError, CatalogUnavailableError
from .config import ConfigError
from .parsing import FindingsParseError
from .rating import InvalidRatingConfigError

__all__ = [
    "CatalogError",
    "CatalogUnavailableError",
    "ConfigError",
    "FindingsParseError",
    "InvalidRatingConfigError",
    "RegimenError",
]
