"""Numeric predicates: bounded range, single bound, sign.

Values are compared with their native ordering, so int, float, Decimal
and Fraction all work, and bounds may be of any mutually comparable type.
"""

from __future__ import annotations

import operator
from typing import TYPE_CHECKING, Any

from paramcheck.domain.exceptions import InvalidRuleError
from paramcheck.domain.model.rule import Rule
from paramcheck.domain.predicates.base import require_ordered_bounds

if TYPE_CHECKING:
    from collections.abc import Callable


def in_range(min_value: Any, max_value: Any) -> Rule[Any]:
    """Create rule: min_value <= value <= max_value.

    Args:
        min_value: Inclusive lower bound
        max_value: Inclusive upper bound

    Returns:
        Range rule

    Raises:
        InvalidRuleError: If a bound is None or min_value > max_value
    """
    require_ordered_bounds(min_value, max_value, "min", "max")

    between = f"between {min_value} and {max_value}"
    return Rule(
        name="in_range",
        test=lambda value: min_value <= value <= max_value,
        requirement=f"be {between}",
        optional_requirement=between,
    )


def at_least(min_value: Any) -> Rule[Any]:
    """Create rule: value >= min_value.

    Raises:
        InvalidRuleError: If min_value is None
    """
    if min_value is None:
        raise InvalidRuleError("min_value cannot be None")
    return Rule(
        name="at_least",
        test=lambda value: value >= min_value,
        requirement=f"be at least {min_value}",
        optional_requirement=f"at least {min_value}",
    )


def at_most(max_value: Any) -> Rule[Any]:
    """Create rule: value <= max_value.

    Raises:
        InvalidRuleError: If max_value is None
    """
    if max_value is None:
        raise InvalidRuleError("max_value cannot be None")
    return Rule(
        name="at_most",
        test=lambda value: value <= max_value,
        requirement=f"be at most {max_value}",
        optional_requirement=f"at most {max_value}",
    )


def _compared_to_zero(name: str, compare: Callable[[Any, int], bool], sign: str) -> Rule[Any]:
    """Create sign rule: compare(value, 0) holds."""
    return Rule(
        name=name,
        test=lambda value: compare(value, 0),
        requirement=f"be {sign}",
        optional_requirement=sign,
    )


def positive() -> Rule[Any]:
    """Create rule: value > 0."""
    return _compared_to_zero("positive", operator.gt, "positive")


def negative() -> Rule[Any]:
    """Create rule: value < 0."""
    return _compared_to_zero("negative", operator.lt, "negative")


def non_negative() -> Rule[Any]:
    """Create rule: value >= 0."""
    return _compared_to_zero("non_negative", operator.ge, "non-negative")


def non_positive() -> Rule[Any]:
    """Create rule: value <= 0."""
    return _compared_to_zero("non_positive", operator.le, "non-positive")
