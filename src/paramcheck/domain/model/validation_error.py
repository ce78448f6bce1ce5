"""Validation error value object."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

ERROR_SEPARATOR = "; "


@dataclass(frozen=True, slots=True)
class ValidationError:
    """One failed rule.

    Immutable, compared and hashed by value. Created once per failed check.

    Attributes:
        field: Name of the checked parameter. None for anonymous checks
            and free-form assertions.
        message: What was required (never empty).
    """

    field: str | None
    message: str

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.message:
            raise ValueError("message must not be empty")

    def __str__(self) -> str:
        """Format as "'field' message" or bare "message"."""
        if self.field is not None:
            return f"'{self.field}' {self.message}"
        return self.message


def join_errors(errors: Iterable[ValidationError]) -> str:
    """Join formatted errors with "; " in the given order.

    Args:
        errors: Errors to join

    Returns:
        Joined text, empty string for no errors
    """
    return ERROR_SEPARATOR.join(str(e) for e in errors)
