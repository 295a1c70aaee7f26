"""Core data models for Regimen."""

from .entities import (
    Attribution,
    Finding,
    Parameter,
    Product,
    RatingConfig,
    RecommendationResult,
    RecommendedProduct,
)

__all__ = [
    "Attribution",
    "Finding",
    "Parameter",
    "Product",
    "RatingConfig",
    "RecommendationResult",
    "RecommendedProduct",
]
