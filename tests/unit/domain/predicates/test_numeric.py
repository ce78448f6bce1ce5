"""Tests for domain/predicates/numeric.py."""

from decimal import Decimal
from fractions import Fraction

import pytest

from paramcheck.domain.exceptions import InvalidRuleError
from paramcheck.domain.model.rule import optional
from paramcheck.domain.predicates import (
    at_least,
    at_most,
    in_range,
    negative,
    non_negative,
    non_positive,
    positive,
)


class TestInRange:
    """Tests for in_range()."""

    @pytest.mark.parametrize("value", [1, 5, 10])
    def test_inclusive_bounds(self, value: int) -> None:
        assert in_range(1, 10).passes(value)

    @pytest.mark.parametrize("value", [0, 11, -5])
    def test_outside_fails(self, value: int) -> None:
        assert not in_range(1, 10).passes(value)

    def test_absent_fails(self) -> None:
        assert not in_range(1, 10).passes(None)

    def test_equal_bounds(self) -> None:
        rule = in_range(5, 5)
        assert rule.passes(5)
        assert not rule.passes(4)

    def test_mixed_numeric_types(self) -> None:
        assert in_range(0, 1).passes(0.5)
        assert in_range(Decimal("0.1"), Decimal("0.9")).passes(Decimal("0.5"))
        assert in_range(Fraction(1, 3), Fraction(2, 3)).passes(Fraction(1, 2))

    def test_message(self) -> None:
        assert in_range(1, 10).describe() == "must be between 1 and 10"

    def test_optional_message(self) -> None:
        assert optional(in_range(1, 10)).describe() == "must be null or between 1 and 10"

    def test_min_greater_than_max_raises(self) -> None:
        with pytest.raises(InvalidRuleError, match="min cannot be greater than max"):
            in_range(10, 1)

    @pytest.mark.parametrize(("low", "high"), [(None, 10), (1, None), (None, None)])
    def test_missing_bound_raises(self, low: int | None, high: int | None) -> None:
        with pytest.raises(InvalidRuleError, match="min and max cannot be None"):
            in_range(low, high)


class TestSingleBound:
    """Tests for at_least() and at_most()."""

    def test_at_least(self) -> None:
        rule = at_least(18)
        assert rule.passes(18)
        assert rule.passes(40)
        assert not rule.passes(17)
        assert rule.describe() == "must be at least 18"

    def test_at_most(self) -> None:
        rule = at_most(100)
        assert rule.passes(100)
        assert not rule.passes(101)
        assert rule.describe() == "must be at most 100"

    def test_at_least_missing_bound_raises(self) -> None:
        with pytest.raises(InvalidRuleError, match="min_value cannot be None"):
            at_least(None)

    def test_at_most_missing_bound_raises(self) -> None:
        with pytest.raises(InvalidRuleError, match="max_value cannot be None"):
            at_most(None)


class TestSign:
    """Tests for sign rules."""

    @pytest.mark.parametrize(
        ("factory", "passing", "failing"),
        [
            (positive, [1, 0.001], [0, -1]),
            (negative, [-1, -0.5], [0, 1]),
            (non_negative, [0, 1], [-1]),
            (non_positive, [0, -1], [1]),
        ],
    )
    def test_boundaries(self, factory, passing: list[float], failing: list[float]) -> None:
        rule = factory()
        assert all(rule.passes(v) for v in passing)
        assert not any(rule.passes(v) for v in failing)

    @pytest.mark.parametrize(
        ("factory", "expected"),
        [
            (positive, "must be positive"),
            (negative, "must be negative"),
            (non_negative, "must be non-negative"),
            (non_positive, "must be non-positive"),
        ],
    )
    def test_messages(self, factory, expected: str) -> None:
        assert factory().describe() == expected

    def test_optional_message(self) -> None:
        assert optional(non_negative()).describe() == "must be null or non-negative"

    def test_absent_fails(self) -> None:
        assert not positive().passes(None)

    def test_decimal(self) -> None:
        assert positive().passes(Decimal("0.01"))
        assert not positive().passes(Decimal("0"))
