"""Rating configuration exceptions."""

from __future__ import annotations

from regimen.exceptions.base import RegimenError
from regimen.exceptions.validation import ValidationError, format_errors, sort_errors


class InvalidRatingConfigError(RegimenError, ValueError):
    """Raised when a rating config violates the range invariants.

    Carries the individual field-level errors so an admin form can attach
    each message to the offending input.
    """

    def __init__(self, errors: list[ValidationError]) -> None:
        self.errors: tuple[ValidationError, ...] = tuple(sort_errors(errors))
        super().__init__(format_errors(list(self.errors)))

    @property
    def fields(self) -> tuple[str, ...]:
        """Names of the offending fields, in error order."""
        return tuple(error.field for error in self.errors)
