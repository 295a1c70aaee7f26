"""Stable validation error codes and allowed-key sets for config and rating validation."""

from __future__ import annotations

from regimen.constants.rating import RATING_FIELDS

CFG001: str = "CFG001"  # config file not found (explicit --config)
CFG002: str = "CFG002"  # invalid YAML parse
CFG003: str = "CFG003"  # top-level value is not a mapping
CFG004: str = "CFG004"  # unknown key
CFG005: str = "CFG005"  # invalid value type
CFG006: str = "CFG006"  # config file unreadable
CFG007: str = "CFG007"  # value out of range

RAT001: str = "RAT001"  # bound outside the rating scale
RAT002: str = "RAT002"  # tier min greater than tier max
RAT003: str = "RAT003"  # overlapping tiers
RAT004: str = "RAT004"  # bound is not an integer

ALL_CFG_CODES: tuple[str, ...] = (CFG001, CFG002, CFG003, CFG004, CFG005, CFG006, CFG007)
ALL_RATING_CODES: tuple[str, ...] = (RAT001, RAT002, RAT003, RAT004)

ALLOWED_CONFIG_KEYS: frozenset[str] = frozenset({"rating", "max_workers", "fallback"})
ALLOWED_RATING_KEYS: frozenset[str] = frozenset(RATING_FIELDS)

RATING_CONFIG_PATH: str = "rating"
