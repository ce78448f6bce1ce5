"""Validator configuration.

Set once when a validator is created, never mutated.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, replace

from paramcheck.domain.model.validation_error import ValidationError

type FailureFactory = Callable[[tuple[ValidationError, ...]], BaseException]
"""Builds the exception raised for collected errors."""


@dataclass(frozen=True, slots=True)
class ValidatorConfig:
    """Validator configuration DTO.

    Immutable configuration object with FAIL-FIRST validation.

    Attributes:
        redact_values: Never show offending values in messages.
        fail_fast: Raise on the first failed check. False = collect all
            errors until validate() is called.
        fill_stack_trace: Capture construction stack in the default
            failure. Ignored when failure_factory is set.
        failure_factory: Custom failure construction. None = default
            ValidationFailedError / FastValidationFailedError.
    """

    redact_values: bool = False
    fail_fast: bool = True
    fill_stack_trace: bool = True
    failure_factory: FailureFactory | None = None

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if self.failure_factory is not None and not callable(self.failure_factory):
            raise TypeError(
                f"failure_factory must be callable, got {type(self.failure_factory).__name__}"
            )

    def as_batch(self) -> ValidatorConfig:
        """Same configuration with fail_fast disabled."""
        if not self.fail_fast:
            return self
        return replace(self, fail_fast=False)
