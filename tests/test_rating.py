"""Tests for rating classification and rating config validation."""

from __future__ import annotations

import pytest

from regimen.constants.validation import RAT001, RAT002, RAT003, RAT004
from regimen.exceptions import InvalidRatingConfigError
from regimen.model import RatingConfig
from regimen.rating import (
    classify_rating,
    ensure_valid_rating_config,
    rating_config_from_mapping,
    validate_rating_config,
)


@pytest.mark.parametrize(
    ("rating", "expected"),
    [
        (1, "Low"),
        (3, "Low"),
        (4, "Medium"),
        (5, "Medium"),
        (7, "Medium"),
        (8, "High"),
        (10, "High"),
        (0, "N/A"),
        (11, "N/A"),
        (-2, "N/A"),
    ],
    ids=["one", "low-max", "medium-min", "five", "medium-max", "high-min", "ten", "zero", "eleven", "negative"],
)
def test_classify_rating_default_ranges(rating: int, expected: str) -> None:
    assert classify_rating(rating) == expected


def test_classify_rating_bounds_are_inclusive_for_custom_config() -> None:
    config = RatingConfig(low_min=1, low_max=2, medium_min=3, medium_max=6, high_min=7, high_max=10)

    assert classify_rating(2, config) == "Low"
    assert classify_rating(3, config) == "Medium"
    assert classify_rating(6, config) == "Medium"
    assert classify_rating(7, config) == "High"


def test_classify_rating_in_gap_is_not_applicable() -> None:
    config = RatingConfig(low_min=1, low_max=3, medium_min=5, medium_max=7, high_min=9, high_max=10)

    assert classify_rating(4, config) == "N/A"
    assert classify_rating(8, config) == "N/A"


def test_classify_rating_fractional_value_between_tiers() -> None:
    assert classify_rating(3.5) == "N/A"
    assert classify_rating(7.0) == "Medium"


@pytest.mark.parametrize("value", ["5", None, True], ids=["string", "none", "bool"])
def test_classify_rating_rejects_non_numeric(value: object) -> None:
    with pytest.raises(TypeError):
        classify_rating(value)  # type: ignore[arg-type]


class TestValidateRatingConfig:
    def test_default_config_is_valid(self) -> None:
        assert validate_rating_config(RatingConfig()) == []

    def test_gaps_between_tiers_are_allowed(self) -> None:
        config = RatingConfig(low_min=1, low_max=2, medium_min=5, medium_max=6, high_min=9, high_max=10)

        assert validate_rating_config(config) == []

    def test_low_max_equal_to_medium_min_is_overlap(self) -> None:
        config = RatingConfig(low_max=4, medium_min=4)

        errors = validate_rating_config(config)

        assert [e.code for e in errors] == [RAT003]
        assert errors[0].field == "medium_min"

    def test_medium_high_overlap(self) -> None:
        config = RatingConfig(medium_max=9, high_min=8)

        errors = validate_rating_config(config)

        assert [(e.code, e.field) for e in errors] == [(RAT003, "high_min")]

    def test_empty_tier(self) -> None:
        config = RatingConfig(medium_min=7, medium_max=5, high_min=8)

        errors = validate_rating_config(config)

        assert (RAT002, "medium_min") in [(e.code, e.field) for e in errors]

    @pytest.mark.parametrize(
        ("field_name", "value"),
        [("low_min", 0), ("high_max", 11), ("medium_min", -1)],
        ids=["below-scale", "above-scale", "negative"],
    )
    def test_out_of_scale_bound(self, field_name: str, value: int) -> None:
        config = RatingConfig(**{field_name: value})

        errors = validate_rating_config(config)

        assert [(e.code, e.field) for e in errors] == [(RAT001, field_name)]

    def test_non_integer_bound(self) -> None:
        config = RatingConfig(low_max=3.5)  # type: ignore[arg-type]

        errors = validate_rating_config(config)

        assert [(e.code, e.field) for e in errors] == [(RAT004, "low_max")]

    def test_reports_every_problem(self) -> None:
        config = RatingConfig(low_min=0, high_max=12)

        errors = validate_rating_config(config)

        assert {e.field for e in errors} == {"low_min", "high_max"}


class TestEnsureValidRatingConfig:
    def test_returns_valid_config(self) -> None:
        config = RatingConfig()

        assert ensure_valid_rating_config(config) is config

    def test_raises_with_field_errors(self) -> None:
        with pytest.raises(InvalidRatingConfigError) as exc_info:
            ensure_valid_rating_config(RatingConfig(low_max=5))

        assert exc_info.value.fields == ("medium_min",)
        assert "RAT003" in str(exc_info.value)

    def test_is_a_value_error(self) -> None:
        with pytest.raises(ValueError):
            ensure_valid_rating_config(RatingConfig(high_max=20))


class TestRatingConfigFromMapping:
    def test_missing_fields_take_defaults(self) -> None:
        config = rating_config_from_mapping({"high_min": 9, "medium_max": 8})

        assert config == RatingConfig(medium_max=8, high_min=9)

    def test_non_integer_values_are_reported(self) -> None:
        with pytest.raises(InvalidRatingConfigError) as exc_info:
            rating_config_from_mapping({"low_min": "one", "high_max": True})

        assert {e.code for e in exc_info.value.errors} == {RAT004}
        assert set(exc_info.value.fields) == {"low_min", "high_max"}

    def test_invalid_ranges_are_rejected(self) -> None:
        with pytest.raises(InvalidRatingConfigError):
            rating_config_from_mapping({"low_max": 8})
