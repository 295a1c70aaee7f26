"""Configuration loading and validation for Regimen.

This package facade re-exports all public names so that
``from regimen.config import ...`` works for every config helper.
"""

from __future__ import annotations

from regimen.config.loader import load_config
from regimen.config.model import RegimenConfig
from regimen.config.validator import _suggest_key, validate_config_file

__all__ = [
    "RegimenConfig",
    "_suggest_key",
    "load_config",
    "validate_config_file",
]
