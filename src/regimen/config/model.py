"""Config data model for Regimen."""

from __future__ import annotations

from dataclasses import dataclass

from regimen.constants.config import DEFAULT_FALLBACK_ENABLED, DEFAULT_MAX_WORKERS
from regimen.model import RatingConfig


@dataclass(frozen=True)
class RegimenConfig:
    """Resolved engine config.

    ``rating`` overrides the rating ranges stored in the catalog when set.
    """

    rating: RatingConfig | None = None
    max_workers: int = DEFAULT_MAX_WORKERS
    fallback: bool = DEFAULT_FALLBACK_ENABLED
