"""Entry points: preconfigured validators.

Example:
    ParamCheck.require().not_null(name, "name").has_length(name, 1, 50, "name")

    (
        ParamCheck.check()
        .not_blank(name, "name")
        .is_positive(age, "age")
        .validate()
    )

SafeParamCheck offers the same presets with values redacted from messages,
for validating secrets and personal data.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from paramcheck.application.validators import BatchValidator, Validator
from paramcheck.domain.model.configuration import ValidatorConfig

if TYPE_CHECKING:
    from paramcheck.application.formatting import MessageSource
    from paramcheck.domain.model.configuration import FailureFactory

REQUIRE = ValidatorConfig()
CHECK = ValidatorConfig(fail_fast=False)
SAFE_REQUIRE = ValidatorConfig(redact_values=True)
SAFE_REQUIRE_FAST = ValidatorConfig(redact_values=True, fill_stack_trace=False)
SAFE_CHECK = ValidatorConfig(redact_values=True, fail_fast=False)
SAFE_CHECK_FAST = ValidatorConfig(redact_values=True, fail_fast=False, fill_stack_trace=False)


class ParamCheck:
    """Validators that show offending values in messages."""

    @staticmethod
    def require() -> Validator:
        """Fail-fast validator: raises on the first failed check."""
        return Validator(REQUIRE)

    @staticmethod
    def check() -> BatchValidator:
        """Batch validator: collects errors until validate()."""
        return BatchValidator(CHECK)

    @staticmethod
    def require_with(failure_factory: FailureFactory) -> Validator:
        """Fail-fast validator raising failure_factory's exception.

        Args:
            failure_factory: Builds the exception from collected errors

        Returns:
            Fail-fast validator
        """
        return Validator(ValidatorConfig(failure_factory=failure_factory))

    @staticmethod
    def check_with(failure_factory: FailureFactory) -> BatchValidator:
        """Batch validator raising failure_factory's exception."""
        return BatchValidator(ValidatorConfig(fail_fast=False, failure_factory=failure_factory))

    @staticmethod
    def require_not_null(value: object, name: str | None = None) -> None:
        """Raise if value is None."""
        ParamCheck.require().not_null(value, name)

    @staticmethod
    def assert_true(condition: bool, message: MessageSource) -> None:
        """Raise with message if condition is False."""
        ParamCheck.require().assert_true(condition, message)


class SafeParamCheck:
    """Validators that never show values in messages.

    The *_fast presets raise FastValidationFailedError, which skips stack
    capture, for hot paths where failures are routine.
    """

    @staticmethod
    def require() -> Validator:
        return Validator(SAFE_REQUIRE)

    @staticmethod
    def require_fast() -> Validator:
        return Validator(SAFE_REQUIRE_FAST)

    @staticmethod
    def check() -> BatchValidator:
        return BatchValidator(SAFE_CHECK)

    @staticmethod
    def check_fast() -> BatchValidator:
        return BatchValidator(SAFE_CHECK_FAST)

    @staticmethod
    def require_not_null(value: object, name: str | None = None) -> None:
        """Raise if value is None."""
        SafeParamCheck.require().not_null(value, name)

    @staticmethod
    def assert_true(condition: bool, message: MessageSource) -> None:
        """Raise with message if condition is False."""
        SafeParamCheck.require().assert_true(condition, message)
