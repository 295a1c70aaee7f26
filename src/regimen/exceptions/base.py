"""Root exception for Regimen."""

from __future__ import annotations


class RegimenError(Exception):
    """Base class for all errors raised by Regimen."""
