"""Plain text reporter.

Stdlib-only reporter: one numbered line per error.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Sequence

    from paramcheck.domain.model.validation_error import ValidationError


class PlainTextReporter:
    """Plain text reporter.

    Example output:
        2 validation error(s):
          1. 'name' must not be null
          2. 'age' must be positive
    """

    def report(self, errors: Sequence[ValidationError]) -> str:
        """Format errors as numbered list."""
        if not errors:
            return "No validation errors"
        lines = [f"{len(errors)} validation error(s):"]
        lines.extend(f"  {i}. {error}" for i, error in enumerate(errors, start=1))
        return "\n".join(lines)
