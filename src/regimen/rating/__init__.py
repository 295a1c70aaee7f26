"""Rating classification and rating config validation."""

from __future__ import annotations

from regimen.rating.classifier import DEFAULT_RATING_CONFIG, classify_rating
from regimen.rating.validator import ensure_valid_rating_config, rating_config_from_mapping, validate_rating_config

__all__ = [
    "DEFAULT_RATING_CONFIG",
    "classify_rating",
    "ensure_valid_rating_config",
    "rating_config_from_mapping",
    "validate_rating_config",
]
