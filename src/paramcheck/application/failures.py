"""Failure construction strategies.

A failure factory turns the collected errors into the exception that a
validator raises. The validator never inspects what the factory returns
beyond checking that it can be raised.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from paramcheck.domain.exceptions import FastValidationFailedError, ValidationFailedError

if TYPE_CHECKING:
    from paramcheck.domain.model.configuration import FailureFactory, ValidatorConfig


def default_failure_factory(*, fill_stack_trace: bool = True) -> FailureFactory:
    """Default strategy: errors joined with "; " into one message.

    Args:
        fill_stack_trace: False = FastValidationFailedError, which skips
            stack capture and exception chaining.

    Returns:
        Factory building ValidationFailedError or FastValidationFailedError
    """
    if fill_stack_trace:
        return ValidationFailedError
    return FastValidationFailedError


def resolve_failure_factory(config: ValidatorConfig) -> FailureFactory:
    """Custom factory from config, or default one for its fill_stack_trace."""
    if config.failure_factory is not None:
        return config.failure_factory
    return default_failure_factory(fill_stack_trace=config.fill_stack_trace)
