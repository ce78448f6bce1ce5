"""Tests for domain/predicates/collection.py."""

import pytest

from paramcheck.domain.exceptions import InvalidRuleError
from paramcheck.domain.model.rule import optional
from paramcheck.domain.predicates import has_size, one_of


class TestHasSize:
    """Tests for has_size()."""

    @pytest.mark.parametrize("value", [[1], [1, 2, 3], (1, 2), {1, 2}, {"a": 1, "b": 2}])
    def test_within_bounds(self, value: object) -> None:
        assert has_size(1, 3).passes(value)

    @pytest.mark.parametrize("value", [[], [1, 2, 3, 4], {}])
    def test_outside_fails(self, value: object) -> None:
        assert not has_size(1, 3).passes(value)

    def test_absent_fails(self) -> None:
        assert not has_size(0, 3).passes(None)

    def test_message(self) -> None:
        assert has_size(1, 5).describe() == "must have size between 1 and 5"

    def test_optional_message(self) -> None:
        assert optional(has_size(1, 5)).describe() == "must be null or have size between 1 and 5"

    def test_min_greater_than_max_raises(self) -> None:
        with pytest.raises(InvalidRuleError, match="min_size cannot be greater than max_size"):
            has_size(5, 1)

    @pytest.mark.parametrize(("low", "high"), [(None, 5), (1, None), (None, None)])
    def test_missing_bound_raises(self, low: int | None, high: int | None) -> None:
        with pytest.raises(InvalidRuleError, match="min_size and max_size cannot be None"):
            has_size(low, high)  # type: ignore[arg-type]


class TestOneOf:
    """Tests for one_of()."""

    def test_membership(self) -> None:
        rule = one_of(["admin", "user"])
        assert rule.passes("admin")
        assert not rule.passes("guest")

    def test_absent_fails(self) -> None:
        assert not one_of(["a"]).passes(None)

    def test_message_lists_choices_in_order(self) -> None:
        assert one_of(["b", "a", 3]).describe() == "must be one of ['b', 'a', 3]"

    def test_choices_snapshotted(self) -> None:
        choices = ["a"]
        rule = one_of(choices)
        choices.append("b")
        assert not rule.passes("b")

    def test_accepts_generator(self) -> None:
        rule = one_of(x for x in (1, 2))
        assert rule.passes(2)
        assert rule.passes(2)

    def test_none_choices_raises(self) -> None:
        with pytest.raises(InvalidRuleError, match="choices cannot be None"):
            one_of(None)

    def test_empty_choices_raises(self) -> None:
        with pytest.raises(InvalidRuleError, match="choices cannot be empty"):
            one_of([])
