"""JSON reporter: errors → JSON string for API responses."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from paramcheck.application.reporters.grouping import group_by_field
from paramcheck.domain.model.validation_error import join_errors

if TYPE_CHECKING:
    from collections.abc import Sequence

    from paramcheck.domain.model.validation_error import ValidationError


class JsonReporter:
    """JSON reporter: outputs machine-readable JSON.

    Schema:
        {
          "valid": false,
          "message": "'name' must not be null; 'age' must be positive",
          "errors": [{"field": "name", "message": "must not be null"}, ...],
          "by_field": {"name": ["must not be null"], ...}
        }
    """

    def __init__(self, *, indent: int | None = 2) -> None:
        """Initialize reporter.

        Args:
            indent: JSON indentation. None for compact output.
        """
        self._indent = indent

    def report(self, errors: Sequence[ValidationError]) -> str:
        """Format errors as JSON string."""
        return json.dumps(errors_to_dict(errors), indent=self._indent)


def errors_to_dict(errors: Sequence[ValidationError]) -> dict[str, object]:
    """Convert errors to JSON-ready dict."""
    return {
        "valid": not errors,
        "message": join_errors(errors),
        "errors": [_error_to_dict(e) for e in errors],
        "by_field": group_by_field(errors),
    }


def _error_to_dict(error: ValidationError) -> dict[str, object]:
    """Convert ValidationError to dict."""
    return {
        "field": error.field,
        "message": error.message,
    }
