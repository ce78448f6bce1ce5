"""paramcheck application layer: rule engine, failure strategy, reporters."""

from paramcheck.application.failures import default_failure_factory, resolve_failure_factory
from paramcheck.application.formatting import (
    ANONYMOUS_NAME,
    MAX_DISPLAYED_VALUE_LENGTH,
    MessageSource,
    describe_failure,
    render_value,
)
from paramcheck.application.validators import BatchValidator, PatternSource, Validator

__all__ = [
    "ANONYMOUS_NAME",
    "MAX_DISPLAYED_VALUE_LENGTH",
    "BatchValidator",
    "MessageSource",
    "PatternSource",
    "Validator",
    "default_failure_factory",
    "describe_failure",
    "render_value",
    "resolve_failure_factory",
]
