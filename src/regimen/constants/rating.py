"""Rating scale bounds and default bucket ranges."""

from __future__ import annotations

RATING_SCALE_MIN: int = 1
RATING_SCALE_MAX: int = 10

RATING_FIELDS: tuple[str, ...] = (
    "low_min",
    "low_max",
    "medium_min",
    "medium_max",
    "high_min",
    "high_max",
)

# Tier name -> (min field, max field), in ascending order.
RATING_TIERS: tuple[tuple[str, str, str], ...] = (
    ("Low", "low_min", "low_max"),
    ("Medium", "medium_min", "medium_max"),
    ("High", "high_min", "high_max"),
)

DEFAULT_LOW_MIN: int = 1
DEFAULT_LOW_MAX: int = 3
DEFAULT_MEDIUM_MIN: int = 4
DEFAULT_MEDIUM_MAX: int = 7
DEFAULT_HIGH_MIN: int = 8
DEFAULT_HIGH_MAX: int = 10
