"""Parser for findings produced by the skin/hair analysis step.

Accepted payload shapes::

    [{"category": "Dandruff", "severity": "Severe", "rating": 8}, ...]
    {"parameters": [...]}
    {"result": {"parameters": [...]}}
    {"parameters": {"Dandruff": {"severity": "Severe", "rating": 8}, ...}}
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from regimen.exceptions import FindingsParseError
from regimen.io import load_json_file
from regimen.model import Finding


def load_findings(path: Path) -> list[Finding]:
    """Read a findings JSON file from disk."""
    return parse_findings(load_json_file(path, kind="Findings", error=FindingsParseError))


def parse_findings(payload: object) -> list[Finding]:
    """Convert a decoded analysis payload into findings, preserving order."""
    entries = _extract_entries(payload)
    findings: list[Finding] = []
    if isinstance(entries, dict):
        for name, value in entries.items():
            key_name = f"parameters.{name}"
            findings.append(_parse_entry({**_ensure_mapping(value, key_name), "category": name}, key_name))
        return findings

    for index, entry in enumerate(entries):
        key_name = f"parameters[{index}]"
        findings.append(_parse_entry(_ensure_mapping(entry, key_name), key_name))
    return findings


def _extract_entries(payload: object) -> list[Any] | dict[str, Any]:
    if isinstance(payload, list):
        return payload
    if not isinstance(payload, dict):
        raise FindingsParseError(f"Findings payload must be a list or mapping, got {type(payload).__name__}")

    body: dict[str, Any] = payload
    if isinstance(body.get("result"), dict):
        body = body["result"]
    entries = body.get("parameters")
    if entries is None:
        return []
    if not isinstance(entries, (list, dict)):
        raise FindingsParseError("parameters must be a list or mapping")
    return entries


def _ensure_mapping(value: Any, key_name: str) -> dict[str, Any]:
    if not isinstance(value, dict):
        raise FindingsParseError(f"{key_name} must be a mapping")
    return value


def _parse_entry(entry: dict[str, Any], key_name: str) -> Finding:
    category = entry.get("category", entry.get("name"))
    if not isinstance(category, str) or not category.strip():
        raise FindingsParseError(f"{key_name}.category must be a non-empty string")

    severity = entry.get("severity")
    if severity is not None and not isinstance(severity, str):
        raise FindingsParseError(f"{key_name}.severity must be a string")

    rating = entry.get("rating")
    if rating is not None and (isinstance(rating, bool) or not isinstance(rating, (int, float))):
        raise FindingsParseError(f"{key_name}.rating must be a number")

    return Finding(category=category.strip(), severity=severity, rating=rating)
