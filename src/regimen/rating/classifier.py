"""Map 1-10 ratings onto named severity buckets."""

from __future__ import annotations

from typing import cast

from regimen.constants.severity import NOT_APPLICABLE
from regimen.model import RatingConfig
from regimen.types import RatingBucket

DEFAULT_RATING_CONFIG: RatingConfig = RatingConfig()


def classify_rating(rating: float, config: RatingConfig | None = None) -> RatingBucket:
    """Map a rating to ``Low``/``Medium``/``High`` using inclusive configured ranges.

    A rating that falls between configured tiers, or outside the 1-10
    scale, belongs to no bucket and yields ``"N/A"``.
    """
    if isinstance(rating, bool) or not isinstance(rating, (int, float)):
        raise TypeError(f"rating must be a number, got {type(rating).__name__}")

    resolved = config if config is not None else DEFAULT_RATING_CONFIG
    for bucket, low, high in resolved.tiers():
        if low <= rating <= high:
            return cast(RatingBucket, bucket)
    return cast(RatingBucket, NOT_APPLICABLE)
