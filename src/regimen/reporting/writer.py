"""JSON writer for recommendation results."""

from __future__ import annotations

from pathlib import Path

from regimen.constants.reporting import SCHEMA_VERSION
from regimen.io import write_json_atomic
from regimen.model import RecommendationResult
from regimen.types import JsonObject


def build_payload(result: RecommendationResult) -> JsonObject:
    """Return the serialisable report payload for *result*."""
    payload: JsonObject = {"schema_version": SCHEMA_VERSION}
    payload.update(result.to_dict())
    return payload


def write_recommendations(path: Path, result: RecommendationResult) -> None:
    """Write *result* as JSON to *path* atomically."""
    write_json_atomic(path, build_payload(result))
