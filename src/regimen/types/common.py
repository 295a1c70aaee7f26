"""Cross-module type aliases."""

from __future__ import annotations

from typing import Literal, TypeAlias

RatingBucket: TypeAlias = Literal["Low", "Medium", "High", "N/A"]
MatchTier: TypeAlias = Literal["name", "category", "substring", "words"]

JsonScalar: TypeAlias = str | int | float | bool | None
JsonValue: TypeAlias = JsonScalar | list["JsonValue"] | dict[str, "JsonValue"]
JsonObject: TypeAlias = dict[str, JsonValue]
