"""Configuration defaults and filenames."""

from __future__ import annotations

CONFIG_FILENAME: str = "regimen.yaml"

DEFAULT_MAX_WORKERS: int = 4
MAX_WORKERS_LIMIT: int = 64
DEFAULT_FALLBACK_ENABLED: bool = True

LOG_FORMAT: str = "%(levelname)s %(message)s"
