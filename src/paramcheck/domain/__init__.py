"""paramcheck domain layer.

Pure domain logic with no external dependencies.
Only imports: typing, dataclasses, collections.abc, operator, traceback
"""

from paramcheck.domain.exceptions import (
    FastValidationFailedError,
    InvalidFailureError,
    InvalidRuleError,
    ParamCheckError,
    ValidationFailedError,
)
from paramcheck.domain.model import (
    FailureFactory,
    Rule,
    ValidationError,
    ValidatorConfig,
    join_errors,
    optional,
)

__all__ = [
    # Exceptions
    "ParamCheckError",
    "InvalidRuleError",
    "InvalidFailureError",
    "ValidationFailedError",
    "FastValidationFailedError",
    # Value objects
    "ValidationError",
    "Rule",
    "ValidatorConfig",
    "FailureFactory",
    # Functions
    "join_errors",
    "optional",
]
