"""BatchValidator: collect-all evaluation with composition.

Example:
    (
        BatchValidator()
        .not_blank(user.name, "name")
        .is_positive(user.age, "age")
        .when(user.email is not None, lambda v: v.matches(user.email, EMAIL, "email"))
        .validate()
    )
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Self

from paramcheck.application.validators.validator import Validator
from paramcheck.domain.model.configuration import ValidatorConfig

if TYPE_CHECKING:
    from collections.abc import Callable

    from paramcheck.domain.model.validation_error import ValidationError


class BatchValidator(Validator):
    """Validator that never raises before validate().

    Errors accumulate in call order; validate() raises once with all of
    them. Inspection (errors, is_valid) never raises.
    """

    def __init__(self, config: ValidatorConfig | None = None) -> None:
        """Initialize batch validator.

        Args:
            config: Validator configuration. fail_fast is forced to False.
        """
        base = config if config is not None else ValidatorConfig()
        super().__init__(base.as_batch())

    @property
    def errors(self) -> tuple[ValidationError, ...]:
        """Errors collected so far, in call order."""
        return tuple(self._errors)

    def is_valid(self) -> bool:
        """Check if no errors were collected."""
        return not self._errors

    def include(self, other: BatchValidator) -> Self:
        """Append copies of other's errors, in other's order.

        other is left unchanged.

        Args:
            other: Validator whose errors to merge

        Returns:
            self for chaining
        """
        if other is None:
            raise TypeError("other must not be None")
        self._errors.extend(other.errors)
        return self

    def when(self, condition: bool, rules: Callable[[Self], object]) -> Self:
        """Apply rules only if condition holds.

        When condition is False, rules is never called, so none of its
        checks (or their message producers) run.

        Args:
            condition: Gate
            rules: Receives this validator for further checks

        Returns:
            self for chaining
        """
        if condition:
            rules(self)
        return self
