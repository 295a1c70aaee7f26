"""Constants for category-to-parameter matching."""

from __future__ import annotations

from regimen.types import MatchTier

MATCH_TIER_NAME: MatchTier = "name"
MATCH_TIER_CATEGORY: MatchTier = "category"
MATCH_TIER_SUBSTRING: MatchTier = "substring"
MATCH_TIER_WORDS: MatchTier = "words"

AMPERSAND_REPLACEMENT: str = "and"
APOSTROPHES: tuple[str, ...] = ("'", "’", "‘", "`")
