"""Text normalization shared by both sides of category matching."""

from __future__ import annotations

import re

from regimen.constants.matching import AMPERSAND_REPLACEMENT, APOSTROPHES

_WHITESPACE_RE = re.compile(r"\s+")
_APOSTROPHE_RE = re.compile("[" + re.escape("".join(APOSTROPHES)) + "]")


def normalize_text(text: str) -> str:
    """Lowercase, trim, collapse whitespace, spell out ``&`` and drop apostrophes.

    ``"Crow's Feet"`` and ``"crows  feet"`` normalize to the same string;
    ``"Lines&Wrinkles"`` becomes ``"lines and wrinkles"``.
    """
    lowered = _APOSTROPHE_RE.sub("", text.lower())
    spaced = lowered.replace("&", f" {AMPERSAND_REPLACEMENT} ")
    return _WHITESPACE_RE.sub(" ", spaced).strip()


def normalized_words(text: str) -> tuple[str, ...]:
    """Split already-normalized text into words."""
    return tuple(text.split(" ")) if text else ()
