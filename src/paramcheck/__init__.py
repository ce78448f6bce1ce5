"""paramcheck - fluent parameter validation with fail-fast and batch evaluation."""

__version__ = "0.1.0"

from paramcheck.application.failures import default_failure_factory
from paramcheck.application.validators import BatchValidator, Validator
from paramcheck.domain.exceptions import (
    FastValidationFailedError,
    InvalidFailureError,
    InvalidRuleError,
    ParamCheckError,
    ValidationFailedError,
)
from paramcheck.domain.model import Rule, ValidationError, ValidatorConfig, join_errors, optional
from paramcheck.presentation.api import ParamCheck, SafeParamCheck

__all__ = [
    "BatchValidator",
    "FastValidationFailedError",
    "InvalidFailureError",
    "InvalidRuleError",
    "ParamCheck",
    "ParamCheckError",
    "Rule",
    "SafeParamCheck",
    "ValidationError",
    "ValidationFailedError",
    "Validator",
    "ValidatorConfig",
    "__version__",
    "default_failure_factory",
    "join_errors",
    "optional",
]
