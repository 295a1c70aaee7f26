"""Recommendation engine package."""

from __future__ import annotations

from typing import Any

__all__ = ["compute_recommendations", "recommend"]


def __getattr__(name: str) -> Any:
    """Lazily expose engine APIs to avoid import cycles at package import time."""
    if name == "compute_recommendations":
        from .aggregator import compute_recommendations

        return compute_recommendations
    if name == "recommend":
        from .aggregator import recommend

        return recommend
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
