"""Config loading and normalization for Regimen."""

from __future__ import annotations

from pathlib import Path

import yaml

from regimen.config.model import RegimenConfig
from regimen.constants.config import (
    CONFIG_FILENAME,
    DEFAULT_FALLBACK_ENABLED,
    DEFAULT_MAX_WORKERS,
    MAX_WORKERS_LIMIT,
)
from regimen.exceptions import ConfigError, InvalidRatingConfigError
from regimen.io import read_text_file
from regimen.rating import rating_config_from_mapping


def load_config(root: Path, config_path: Path | None = None) -> RegimenConfig:
    """Load and validate engine config from ``regimen.yaml`` or an explicit path."""
    root = root.resolve()
    path = config_path.resolve() if config_path else (root / CONFIG_FILENAME)
    if not path.exists():
        if config_path is not None:
            raise ConfigError(f"Config file not found: {path}")
        return RegimenConfig()

    text = read_text_file(path, kind="Config", error=ConfigError)
    try:
        raw = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML config file at {path}: {exc}") from exc

    if raw is None:
        raw = {}
    if not isinstance(raw, dict):
        raise ConfigError(f"Config file at {path} must be a YAML mapping")

    rating_raw = raw.get("rating")
    rating = None
    if rating_raw is not None:
        if not isinstance(rating_raw, dict):
            raise ConfigError("rating must be a mapping")
        try:
            rating = rating_config_from_mapping(rating_raw)
        except InvalidRatingConfigError as exc:
            raise ConfigError(f"Invalid rating ranges in {path}:\n{exc}") from exc

    max_workers = raw.get("max_workers", DEFAULT_MAX_WORKERS)
    if isinstance(max_workers, bool) or not isinstance(max_workers, int) or max_workers <= 0:
        raise ConfigError("max_workers must be a positive integer")
    if max_workers > MAX_WORKERS_LIMIT:
        raise ConfigError(f"max_workers must be at most {MAX_WORKERS_LIMIT}")

    fallback = raw.get("fallback", DEFAULT_FALLBACK_ENABLED)
    if not isinstance(fallback, bool):
        raise ConfigError("fallback must be a boolean")

    return RegimenConfig(rating=rating, max_workers=max_workers, fallback=fallback)
