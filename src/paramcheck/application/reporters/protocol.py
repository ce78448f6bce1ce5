"""Reporter protocol: contract for all reporters."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from collections.abc import Sequence

    from paramcheck.domain.model.validation_error import ValidationError


class ReporterProtocol(Protocol):
    """Protocol for validation error reporters.

    Output is str, not print(). Caller decides destination.
    """

    def report(self, errors: Sequence[ValidationError]) -> str:
        """Format errors as string.

        Args:
            errors: Errors in accumulation order (ValidationFailedError.errors,
                BatchValidator.errors).

        Returns:
            Formatted string representation.
        """
        ...
