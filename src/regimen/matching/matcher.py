"""Resolve free-text analysis categories to catalog parameters.

Tiers run strictly in order over the whole catalog; the first tier with a
qualifying parameter wins, and within a tier the earliest parameter in
catalog display order wins:

1. normalized parameter name equals the input
2. normalized category tag equals the input
3. name contains the input, or the input contains the name
4. every word of the name is a substring of some word of the input
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass

from regimen.constants.matching import (
    MATCH_TIER_CATEGORY,
    MATCH_TIER_NAME,
    MATCH_TIER_SUBSTRING,
    MATCH_TIER_WORDS,
)
from regimen.matching.normalize import normalize_text, normalized_words
from regimen.model import Parameter
from regimen.types import MatchTier


@dataclass(frozen=True)
class ParameterMatch:
    """A resolved parameter and the tier that resolved it."""

    parameter: Parameter
    tier: MatchTier


@dataclass(frozen=True)
class _Candidate:
    parameter: Parameter
    name: str
    category: str
    words: tuple[str, ...]


def _matches_name(candidate: _Candidate, query: str, _query_words: tuple[str, ...]) -> bool:
    return candidate.name == query


def _matches_category(candidate: _Candidate, query: str, _query_words: tuple[str, ...]) -> bool:
    return bool(candidate.category) and candidate.category == query


def _matches_substring(candidate: _Candidate, query: str, _query_words: tuple[str, ...]) -> bool:
    if not candidate.name:
        return False
    return query in candidate.name or candidate.name in query


def _matches_words(candidate: _Candidate, _query: str, query_words: tuple[str, ...]) -> bool:
    if not candidate.words:
        return False
    return all(any(word in query_word for query_word in query_words) for word in candidate.words)


_TIERS: tuple[tuple[MatchTier, Callable[[_Candidate, str, tuple[str, ...]], bool]], ...] = (
    (MATCH_TIER_NAME, _matches_name),
    (MATCH_TIER_CATEGORY, _matches_category),
    (MATCH_TIER_SUBSTRING, _matches_substring),
    (MATCH_TIER_WORDS, _matches_words),
)


def explain_match(category: str, parameters: Sequence[Parameter]) -> ParameterMatch | None:
    """Return the matched parameter with its tier, or ``None`` when nothing qualifies."""
    query = normalize_text(category)
    if not query:
        return None
    query_words = normalized_words(query)

    candidates = []
    for parameter in parameters:
        name = normalize_text(parameter.name)
        candidates.append(
            _Candidate(
                parameter=parameter,
                name=name,
                category=normalize_text(parameter.category),
                words=normalized_words(name),
            )
        )

    for tier, predicate in _TIERS:
        for candidate in candidates:
            if predicate(candidate, query, query_words):
                return ParameterMatch(parameter=candidate.parameter, tier=tier)
    return None


def match_parameter(category: str, parameters: Sequence[Parameter]) -> Parameter | None:
    """Resolve *category* to at most one parameter from *parameters*."""
    match = explain_match(category, parameters)
    return match.parameter if match is not None else None
