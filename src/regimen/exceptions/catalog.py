"""Catalog store exceptions."""

from __future__ import annotations

from regimen.exceptions.base import RegimenError


class CatalogError(RegimenError, ValueError):
    """Raised when a catalog document or an admin catalog write is invalid."""


class CatalogUnavailableError(RegimenError, RuntimeError):
    """Raised by a catalog store when a read cannot be served."""
