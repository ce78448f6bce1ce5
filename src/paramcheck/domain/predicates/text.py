"""String predicates: bounded length, pattern match."""

from __future__ import annotations

from typing import TYPE_CHECKING

from paramcheck.domain.exceptions import InvalidRuleError
from paramcheck.domain.model.rule import Rule
from paramcheck.domain.predicates.base import require_ordered_bounds

if TYPE_CHECKING:
    import re


def has_length(min_length: int, max_length: int) -> Rule[str]:
    """Create rule: min_length <= len(value) <= max_length.

    Raises:
        InvalidRuleError: If a bound is None or min_length > max_length
    """
    require_ordered_bounds(min_length, max_length, "min_length", "max_length")
    between = f"length between {min_length} and {max_length}"
    return Rule(
        name="has_length",
        test=lambda value: min_length <= len(value) <= max_length,
        requirement=f"have {between}",
        optional_requirement=f"have {between}",
    )


def matches(pattern: re.Pattern[str] | None) -> Rule[str]:
    """Create rule: value fully matches compiled pattern.

    Pattern source text is resolved to a compiled pattern by the caller
    (see paramcheck.infrastructure.pattern_cache).

    Args:
        pattern: Compiled regex

    Returns:
        Full-match rule

    Raises:
        InvalidRuleError: If pattern is None
    """
    if pattern is None:
        raise InvalidRuleError("regex pattern cannot be None")
    requirement = f"match pattern '{pattern.pattern}'"
    return Rule(
        name="matches",
        test=lambda value: pattern.fullmatch(value) is not None,
        requirement=requirement,
        optional_requirement=requirement,
    )
