"""Core data models for Regimen."""

from __future__ import annotations

from dataclasses import dataclass

from regimen.constants.rating import (
    DEFAULT_HIGH_MAX,
    DEFAULT_HIGH_MIN,
    DEFAULT_LOW_MAX,
    DEFAULT_LOW_MIN,
    DEFAULT_MEDIUM_MAX,
    DEFAULT_MEDIUM_MIN,
    RATING_TIERS,
)
from regimen.constants.reporting import CATALOG_UNAVAILABLE_MESSAGE, NO_PRODUCTS_MESSAGE
from regimen.constants.severity import DEFAULT_SEVERITY_LEVELS
from regimen.types import JsonObject


@dataclass(frozen=True)
class Parameter:
    """An administrator-configured analysis dimension."""

    id: str
    name: str
    category: str = ""
    severity_levels: tuple[str, ...] = DEFAULT_SEVERITY_LEVELS
    display_order: int = 0
    is_active: bool = True
    description: str = ""

    def to_dict(self) -> JsonObject:
        return {
            "id": self.id,
            "name": self.name,
            "category": self.category,
            "severity_levels": list(self.severity_levels),
            "display_order": self.display_order,
            "is_active": self.is_active,
            "description": self.description,
        }


@dataclass(frozen=True)
class Product:
    """A product scoped to one (parameter, severity level) pair."""

    id: str
    parameter_id: str
    severity_level: str
    name: str
    description: str = ""
    link: str = ""
    image: str = ""
    display_order: int = 0
    is_primary: bool = False
    is_active: bool = True

    def to_dict(self) -> JsonObject:
        return {
            "id": self.id,
            "parameter_id": self.parameter_id,
            "severity_level": self.severity_level,
            "name": self.name,
            "description": self.description,
            "link": self.link,
            "image": self.image,
            "display_order": self.display_order,
            "is_primary": self.is_primary,
            "is_active": self.is_active,
        }


@dataclass(frozen=True)
class RatingConfig:
    """Inclusive 1-10 rating ranges for the Low, Medium and High buckets."""

    low_min: int = DEFAULT_LOW_MIN
    low_max: int = DEFAULT_LOW_MAX
    medium_min: int = DEFAULT_MEDIUM_MIN
    medium_max: int = DEFAULT_MEDIUM_MAX
    high_min: int = DEFAULT_HIGH_MIN
    high_max: int = DEFAULT_HIGH_MAX

    def tiers(self) -> tuple[tuple[str, int, int], ...]:
        """Return ``(bucket, min, max)`` triples in ascending order."""
        return tuple((bucket, getattr(self, low), getattr(self, high)) for bucket, low, high in RATING_TIERS)

    def to_dict(self) -> dict[str, int]:
        return {
            "low_min": self.low_min,
            "low_max": self.low_max,
            "medium_min": self.medium_min,
            "medium_max": self.medium_max,
            "high_min": self.high_min,
            "high_max": self.high_max,
        }


@dataclass(frozen=True)
class Finding:
    """One analysis dimension reported by the upstream analysis step.

    ``severity`` holds a named bucket (either vocabulary) or ``"N/A"``.
    ``rating`` is the 1-10 score and is only consulted when no severity
    was reported.
    """

    category: str
    severity: str | None = None
    rating: float | None = None

    def to_dict(self) -> JsonObject:
        return {"category": self.category, "severity": self.severity, "rating": self.rating}


@dataclass(frozen=True)
class Attribution:
    """Which finding justified a recommended product, and at what severity."""

    category: str
    severity: str

    def to_dict(self) -> JsonObject:
        return {"category": self.category, "severity": self.severity}


@dataclass(frozen=True)
class RecommendedProduct:
    """A product together with the findings that led to it."""

    product: Product
    attributions: tuple[Attribution, ...]

    @property
    def id(self) -> str:
        return self.product.id

    @property
    def is_primary(self) -> bool:
        return self.product.is_primary

    @property
    def display_order(self) -> int:
        return self.product.display_order

    def to_dict(self) -> JsonObject:
        payload = self.product.to_dict()
        payload["matched_parameters"] = [attribution.to_dict() for attribution in self.attributions]
        return payload


@dataclass(frozen=True)
class RecommendationResult:
    """Outcome of one recommendation computation."""

    products: tuple[RecommendedProduct, ...] = ()
    catalog_error: str | None = None
    fallback_used: bool = False
    unmatched_categories: tuple[str, ...] = ()
    warnings: tuple[str, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.products

    @property
    def message(self) -> str | None:
        """User-facing notice for an error or empty result, else ``None``."""
        if self.catalog_error is not None:
            return CATALOG_UNAVAILABLE_MESSAGE
        if not self.products:
            return NO_PRODUCTS_MESSAGE
        return None

    def to_dict(self) -> JsonObject:
        return {
            "products": [product.to_dict() for product in self.products],
            "total_products": len(self.products),
            "catalog_error": self.catalog_error,
            "fallback_used": self.fallback_used,
            "unmatched_categories": list(self.unmatched_categories),
            "warnings": list(self.warnings),
            "message": self.message,
        }
