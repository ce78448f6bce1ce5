"""Rule value object: one instantiated predicate shape."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, replace


@dataclass(frozen=True, slots=True)
class Rule[T]:
    """Predicate plus its message template.

    Created by the factories in paramcheck.domain.predicates, which check
    the rule's own arguments before the rule exists.

    Attributes:
        name: Shape name (e.g. "in_range"), for diagnostics
        test: Predicate applied to present (non-None) values only
        requirement: Template body, e.g. "be between 1 and 10"
        optional_requirement: Body used by the null-tolerant variant,
            e.g. "between 1 and 10" -> "must be null or between 1 and 10"
        shows_value: Whether failure messages may display the value.
            Property of the shape, never of configuration.
        absent_passes: Result for None values
    """

    name: str
    test: Callable[[T], bool]
    requirement: str
    optional_requirement: str
    shows_value: bool = True
    absent_passes: bool = False

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.name:
            raise ValueError("name must not be empty")
        if not callable(self.test):
            raise TypeError(f"test must be callable, got {type(self.test).__name__}")
        if not self.requirement:
            raise ValueError("requirement must not be empty")
        if not self.optional_requirement:
            raise ValueError("optional_requirement must not be empty")

    def passes(self, value: T | None) -> bool:
        """Evaluate rule against value."""
        if value is None:
            return self.absent_passes
        return self.test(value)

    def describe(self) -> str:
        """Default message template: "must <requirement>"."""
        return f"must {self.requirement}"


def optional[T](rule: Rule[T]) -> Rule[T]:
    """Create null-tolerant variant of rule.

    Absent values pass; present values are checked by the same test.

    Args:
        rule: Rule to relax

    Returns:
        New rule named "null_or_<name>"
    """
    if rule.absent_passes:
        return rule
    return replace(
        rule,
        name=f"null_or_{rule.name}",
        requirement=f"be null or {rule.optional_requirement}",
        absent_passes=True,
    )
