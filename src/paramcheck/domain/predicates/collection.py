"""Collection predicates: bounded size, membership."""

from __future__ import annotations

from collections.abc import Collection, Iterable, Sized
from typing import Any

from paramcheck.domain.exceptions import InvalidRuleError
from paramcheck.domain.model.rule import Rule
from paramcheck.domain.predicates.base import require_ordered_bounds


def has_size(min_size: int, max_size: int) -> Rule[Sized]:
    """Create rule: min_size <= len(value) <= max_size.

    Works for any Sized value: list, tuple, set, dict, etc.

    Raises:
        InvalidRuleError: If a bound is None or min_size > max_size
    """
    require_ordered_bounds(min_size, max_size, "min_size", "max_size")
    between = f"size between {min_size} and {max_size}"
    return Rule(
        name="has_size",
        test=lambda value: min_size <= len(value) <= max_size,
        requirement=f"have {between}",
        optional_requirement=f"have {between}",
    )


def one_of(choices: Iterable[Any] | None) -> Rule[Any]:
    """Create rule: value is one of choices.

    Choices are snapshotted in iteration order; the message lists them
    in that order.

    Raises:
        InvalidRuleError: If choices is None or empty
    """
    if choices is None:
        raise InvalidRuleError("choices cannot be None")
    allowed: Collection[Any] = tuple(choices)
    if not allowed:
        raise InvalidRuleError("choices cannot be empty")

    listed = ", ".join(repr(c) for c in allowed)
    return Rule(
        name="one_of",
        test=lambda value: value in allowed,
        requirement=f"be one of [{listed}]",
        optional_requirement=f"one of [{listed}]",
    )
