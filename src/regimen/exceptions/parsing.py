"""Parsing-related exceptions."""

from __future__ import annotations

from regimen.exceptions.base import RegimenError


class FindingsParseError(RegimenError, ValueError):
    """Raised when an analysis findings payload cannot be parsed."""
