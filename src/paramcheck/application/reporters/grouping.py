"""Group errors by field for API responses."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from paramcheck.domain.model.validation_error import ValidationError


def group_by_field(errors: Iterable[ValidationError]) -> dict[str, list[str]]:
    """Map field name to its messages, both in accumulation order.

    Errors without a field (assertions, anonymous checks) are skipped.
    """
    grouped: dict[str, list[str]] = {}
    for error in errors:
        if error.field is None:
            continue
        grouped.setdefault(error.field, []).append(error.message)
    return grouped
