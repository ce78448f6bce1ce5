"""Domain model: value objects."""

from paramcheck.domain.model.configuration import FailureFactory, ValidatorConfig
from paramcheck.domain.model.rule import Rule, optional
from paramcheck.domain.model.validation_error import ERROR_SEPARATOR, ValidationError, join_errors

__all__ = [
    "ERROR_SEPARATOR",
    "FailureFactory",
    "Rule",
    "ValidationError",
    "ValidatorConfig",
    "join_errors",
    "optional",
]
