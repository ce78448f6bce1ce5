"""Design compliance tests.

Tests verifying cross-cutting guarantees:
- FAIL-FIRST validation of value objects
- Immutability of value objects and configuration
- Validation failures and programming errors stay disjoint
"""

from __future__ import annotations

import dataclasses

import pytest

from paramcheck import (
    InvalidRuleError,
    ParamCheck,
    ParamCheckError,
    Rule,
    ValidationError,
    ValidationFailedError,
    ValidatorConfig,
)
from paramcheck.application.reporters import ConsoleConfig
from paramcheck.domain import predicates

# =============================================================================
# FAIL-FIRST Validation
# =============================================================================


class TestFailFirstValidation:
    """Invalid objects are rejected at construction, never repaired later."""

    def test_validation_error_empty_message_raises(self) -> None:
        with pytest.raises(ValueError, match="message"):
            ValidationError("field", "")

    def test_failure_without_errors_raises(self) -> None:
        with pytest.raises(ValueError, match="at least one error"):
            ValidationFailedError(())

    def test_config_bad_factory_raises(self) -> None:
        with pytest.raises(TypeError):
            ValidatorConfig(failure_factory=object())  # type: ignore[arg-type]

    def test_rule_bounds_checked_before_value(self) -> None:
        """Malformed rule raises even when the value would pass."""
        with pytest.raises(InvalidRuleError):
            ParamCheck.check().null_or_has_length(None, 5, 1, "x")


# =============================================================================
# Immutability
# =============================================================================


class TestImmutability:
    """Value objects are frozen, slotted dataclasses."""

    @pytest.mark.parametrize(
        "obj",
        [
            ValidationError("f", "m"),
            ValidatorConfig(),
            predicates.not_null(),
            ConsoleConfig(),
        ],
        ids=["ValidationError", "ValidatorConfig", "Rule", "ConsoleConfig"],
    )
    def test_frozen(self, obj: object) -> None:
        first_field = dataclasses.fields(obj)[0].name
        with pytest.raises(dataclasses.FrozenInstanceError):
            setattr(obj, first_field, None)

    @pytest.mark.parametrize("cls", [ValidationError, ValidatorConfig, Rule, ConsoleConfig])
    def test_slotted(self, cls: type) -> None:
        assert "__slots__" in vars(cls)

    def test_failure_errors_immutable(self) -> None:
        with pytest.raises(ValidationFailedError) as exc_info:
            ParamCheck.require().not_null(None, "x")
        assert isinstance(exc_info.value.errors, tuple)


# =============================================================================
# Error Category Distinction
# =============================================================================


class TestErrorCategoryDistinction:
    """Invalid input and invalid rule usage are separate exception types."""

    def test_both_are_paramcheck_errors(self) -> None:
        assert issubclass(InvalidRuleError, ParamCheckError)
        assert issubclass(ValidationFailedError, ParamCheckError)

    def test_disjoint(self) -> None:
        assert not issubclass(InvalidRuleError, ValidationFailedError)
        assert not issubclass(ValidationFailedError, InvalidRuleError)
        assert not issubclass(ValidationFailedError, ValueError)

    def test_caught_separately(self) -> None:
        """except ValidationFailedError does not swallow programming errors."""
        with pytest.raises(InvalidRuleError):
            try:
                ParamCheck.require().in_range(5, 10, 1, "x")
            except ValidationFailedError:
                pytest.fail("programming error caught as validation failure")
