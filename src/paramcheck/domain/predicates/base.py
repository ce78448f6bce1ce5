"""Shared precondition checks for rule factories."""

from typing import Any

from paramcheck.domain.exceptions import InvalidRuleError


def require_ordered_bounds(lower: Any, upper: Any, lower_name: str, upper_name: str) -> None:
    """Check that both bounds are present and lower <= upper.

    Args:
        lower: Lower bound
        upper: Upper bound
        lower_name: Bound name used in the error message
        upper_name: Bound name used in the error message

    Raises:
        InvalidRuleError: If a bound is None or lower > upper
    """
    if lower is None or upper is None:
        raise InvalidRuleError(f"{lower_name} and {upper_name} cannot be None")
    if lower > upper:
        raise InvalidRuleError(f"{lower_name} cannot be greater than {upper_name}")
