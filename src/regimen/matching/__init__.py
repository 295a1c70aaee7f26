"""Category-to-parameter matching."""

from __future__ import annotations

from regimen.matching.matcher import ParameterMatch, explain_match, match_parameter
from regimen.matching.normalize import normalize_text

__all__ = ["ParameterMatch", "explain_match", "match_parameter", "normalize_text"]
