"""Configuration-related exceptions."""

from __future__ import annotations

from regimen.exceptions.base import RegimenError


class ConfigError(RegimenError, ValueError):
    """Raised when engine configuration is invalid."""
