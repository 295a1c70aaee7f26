"""Config file validation for Regimen."""

from __future__ import annotations

import difflib
from pathlib import Path
from typing import Any

import yaml

from regimen.constants.config import CONFIG_FILENAME, MAX_WORKERS_LIMIT
from regimen.constants.validation import (
    ALLOWED_CONFIG_KEYS,
    ALLOWED_RATING_KEYS,
    CFG001,
    CFG002,
    CFG003,
    CFG004,
    CFG005,
    CFG006,
    CFG007,
    RAT004,
)
from regimen.exceptions import ConfigError
from regimen.exceptions.validation import ValidationError, sort_errors
from regimen.io import read_text_file
from regimen.model import RatingConfig
from regimen.rating import validate_rating_config


def validate_config_file(
    root: Path,
    config_path: Path | None = None,
    *,
    config_explicit: bool = False,
) -> list[ValidationError]:
    """Validate a regimen.yaml file and return all validation errors.

    This is the collect-all entry point used by ``regimen validate-config``.
    It never raises; all problems are returned as :class:`ValidationError`
    instances.
    """
    errors: list[ValidationError] = []
    root = root.resolve()
    path = config_path.resolve() if config_path else (root / CONFIG_FILENAME)
    path_str = str(path)

    if not path.exists():
        if config_explicit:
            errors.append(
                ValidationError(
                    code=CFG001,
                    path=path_str,
                    field="",
                    message=f"config file not found: {path}",
                )
            )
        return errors

    try:
        text = read_text_file(path, kind="Config", error=ConfigError)
    except ConfigError as exc:
        errors.append(
            ValidationError(
                code=CFG006,
                path=path_str,
                field="",
                message=str(exc),
            )
        )
        return errors

    try:
        raw = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        errors.append(
            ValidationError(
                code=CFG002,
                path=path_str,
                field="",
                message=f"invalid YAML: {exc}",
            )
        )
        return errors

    if raw is None:
        return errors

    if not isinstance(raw, dict):
        errors.append(
            ValidationError(
                code=CFG003,
                path=path_str,
                field="",
                message=f"config must be a YAML mapping, got {type(raw).__name__}",
            )
        )
        return errors

    for key in sorted(raw.keys(), key=str):
        if key not in ALLOWED_CONFIG_KEYS:
            errors.append(
                ValidationError(
                    code=CFG004,
                    path=path_str,
                    field=str(key),
                    message=f"unknown key `{key}`",
                    hint=_suggest_key(str(key), ALLOWED_CONFIG_KEYS),
                )
            )

    if "max_workers" in raw:
        val = raw["max_workers"]
        if isinstance(val, bool) or not isinstance(val, int):
            errors.append(
                ValidationError(
                    code=CFG005,
                    path=path_str,
                    field="max_workers",
                    message="invalid type for `max_workers`",
                    hint="expected a positive integer",
                )
            )
        elif not 0 < val <= MAX_WORKERS_LIMIT:
            errors.append(
                ValidationError(
                    code=CFG007,
                    path=path_str,
                    field="max_workers",
                    message=f"`max_workers` must be between 1 and {MAX_WORKERS_LIMIT}, got {val}",
                )
            )

    if "fallback" in raw and not isinstance(raw["fallback"], bool):
        errors.append(
            ValidationError(
                code=CFG005,
                path=path_str,
                field="fallback",
                message="invalid type for `fallback`",
                hint="expected true or false",
            )
        )

    if "rating" in raw:
        errors.extend(_validate_rating_block(raw["rating"], path_str))

    return sort_errors(errors)


def _validate_rating_block(value: Any, path_str: str) -> list[ValidationError]:
    """Validate the ``rating`` mapping, reporting field-level range problems."""
    if not isinstance(value, dict):
        return [
            ValidationError(
                code=CFG005,
                path=path_str,
                field="rating",
                message="invalid type for `rating`",
                hint="expected a mapping of low_min/low_max/medium_min/medium_max/high_min/high_max",
            )
        ]

    errors: list[ValidationError] = []
    for key in sorted(value.keys(), key=str):
        if key not in ALLOWED_RATING_KEYS:
            errors.append(
                ValidationError(
                    code=CFG004,
                    path=path_str,
                    field=f"rating.{key}",
                    message=f"unknown key `rating.{key}`",
                    hint=_suggest_key(str(key), ALLOWED_RATING_KEYS),
                )
            )

    defaults = RatingConfig().to_dict()
    values: dict[str, Any] = {}
    type_errors: list[ValidationError] = []
    for name in sorted(ALLOWED_RATING_KEYS):
        val = value.get(name, defaults[name])
        if isinstance(val, bool) or not isinstance(val, int):
            type_errors.append(
                ValidationError(
                    code=RAT004,
                    path=path_str,
                    field=f"rating.{name}",
                    message=f"`rating.{name}` must be an integer, got {val!r}",
                )
            )
        values[name] = val
    if type_errors:
        return errors + type_errors

    for error in validate_rating_config(RatingConfig(**values), path=path_str):
        errors.append(
            ValidationError(
                code=error.code,
                path=error.path,
                field=f"rating.{error.field}",
                message=error.message,
                hint=error.hint,
            )
        )
    return errors


def _suggest_key(unknown: str, allowed: frozenset[str]) -> str:
    """Return a 'did you mean ...' hint for a close key match, or empty string."""
    matches = difflib.get_close_matches(unknown, sorted(allowed), n=1, cutoff=0.6)
    if matches:
        return f"did you mean `{matches[0]}`?"
    return ""
