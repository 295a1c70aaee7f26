"""Catalog store interface consumed by the recommendation engine."""

from __future__ import annotations

from abc import ABC, abstractmethod

from regimen.model import Parameter, Product, RatingConfig


class CatalogStore(ABC):
    """Read side of the administrator-managed catalog.

    Implementations raise :class:`regimen.exceptions.CatalogUnavailableError`
    when a read cannot be served. The engine never writes through this
    interface.
    """

    @abstractmethod
    def list_parameters(self) -> list[Parameter]:
        """Return active parameters ordered by display order."""

    @abstractmethod
    def list_products(self, parameter_id: str, severity_level: str) -> list[Product]:
        """Return active products for exactly one (parameter, severity level) pair."""

    def get_rating_config(self) -> RatingConfig | None:
        """Return the stored rating config, or ``None`` when none was saved."""
        return None
