"""Write-time validation for rating configurations."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from regimen.constants.rating import RATING_FIELDS, RATING_SCALE_MAX, RATING_SCALE_MIN, RATING_TIERS
from regimen.constants.validation import RAT001, RAT002, RAT003, RAT004, RATING_CONFIG_PATH
from regimen.exceptions import InvalidRatingConfigError
from regimen.exceptions.validation import ValidationError, sort_errors
from regimen.model import RatingConfig


def validate_rating_config(config: RatingConfig, *, path: str = RATING_CONFIG_PATH) -> list[ValidationError]:
    """Return every range violation in *config*; an empty list means it may be saved.

    Gaps between tiers are allowed. Overlaps are not.
    """
    errors: list[ValidationError] = []

    for name in RATING_FIELDS:
        value = getattr(config, name)
        if isinstance(value, bool) or not isinstance(value, int):
            errors.append(
                ValidationError(
                    code=RAT004,
                    path=path,
                    field=name,
                    message=f"`{name}` must be an integer, got {value!r}",
                )
            )
        elif not RATING_SCALE_MIN <= value <= RATING_SCALE_MAX:
            errors.append(
                ValidationError(
                    code=RAT001,
                    path=path,
                    field=name,
                    message=f"`{name}` must be between {RATING_SCALE_MIN} and {RATING_SCALE_MAX}, got {value}",
                )
            )
    if errors:
        return sort_errors(errors)

    for bucket, min_field, max_field in RATING_TIERS:
        low = getattr(config, min_field)
        high = getattr(config, max_field)
        if low > high:
            errors.append(
                ValidationError(
                    code=RAT002,
                    path=path,
                    field=min_field,
                    message=f"{bucket} range is empty: `{min_field}` ({low}) is greater than `{max_field}` ({high})",
                )
            )

    for (lower, _, lower_max), (upper, upper_min, _) in zip(RATING_TIERS, RATING_TIERS[1:]):
        lower_value = getattr(config, lower_max)
        upper_value = getattr(config, upper_min)
        if lower_value >= upper_value:
            errors.append(
                ValidationError(
                    code=RAT003,
                    path=path,
                    field=upper_min,
                    message=(
                        f"{lower} and {upper} ranges overlap: `{lower_max}` ({lower_value}) "
                        f"must be less than `{upper_min}` ({upper_value})"
                    ),
                )
            )

    return sort_errors(errors)


def ensure_valid_rating_config(config: RatingConfig, *, path: str = RATING_CONFIG_PATH) -> RatingConfig:
    """Return *config* unchanged, or raise :class:`InvalidRatingConfigError`."""
    errors = validate_rating_config(config, path=path)
    if errors:
        raise InvalidRatingConfigError(errors)
    return config


def rating_config_from_mapping(raw: Mapping[str, Any], *, path: str = RATING_CONFIG_PATH) -> RatingConfig:
    """Build a validated :class:`RatingConfig` from a stored mapping.

    Missing fields take their defaults. Unknown keys are ignored here;
    config-file validation reports them separately.
    """
    defaults = RatingConfig().to_dict()
    values: dict[str, Any] = {name: raw.get(name, defaults[name]) for name in RATING_FIELDS}

    errors: list[ValidationError] = []
    for name, value in values.items():
        if isinstance(value, bool) or not isinstance(value, int):
            errors.append(
                ValidationError(
                    code=RAT004,
                    path=path,
                    field=name,
                    message=f"`{name}` must be an integer, got {value!r}",
                )
            )
    if errors:
        raise InvalidRatingConfigError(errors)

    return ensure_valid_rating_config(RatingConfig(**values), path=path)
