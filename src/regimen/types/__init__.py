"""Shared type aliases for Regimen."""

from .common import JsonObject, JsonScalar, JsonValue, MatchTier, RatingBucket

__all__ = [
    "JsonObject",
    "JsonScalar",
    "JsonValue",
    "MatchTier",
    "RatingBucket",
]
