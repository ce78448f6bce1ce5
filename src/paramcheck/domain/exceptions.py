"""Domain exceptions: all public errors of paramcheck.

Two disjoint categories:
    - validation failures (ValidationFailedError): invalid input data,
      collected by a validator and raised per its evaluation strategy;
    - programming errors (InvalidRuleError): a malformed rule invocation,
      raised immediately and never collected.
"""

from __future__ import annotations

import traceback
from typing import TYPE_CHECKING, ClassVar

from paramcheck.domain.model.validation_error import join_errors

if TYPE_CHECKING:
    from collections.abc import Sequence

    from paramcheck.domain.model.validation_error import ValidationError


class ParamCheckError(Exception):
    """Base for all paramcheck exceptions.

    Allows: except ParamCheckError to catch all library errors.
    """


class InvalidRuleError(ParamCheckError, ValueError):
    """Rule invoked with malformed arguments.

    Signals a bug in the calling code (min > max, missing bound, missing
    pattern), not invalid input data. Raised immediately regardless of
    fail-fast or batch evaluation.

    Inherits ValueError for semantic correctness (bad argument value).
    """


class InvalidFailureError(ParamCheckError, TypeError):
    """Failure factory returned something that cannot be raised.

    Attributes:
        got: Actual type returned by the factory.
    """

    def __init__(self, got: type) -> None:
        """Initialize with the returned type."""
        self.got = got
        super().__init__(f"failure factory must return an exception, got {got.__name__}")


class ValidationFailedError(ParamCheckError):
    """One or more validation rules failed.

    Default failure raised by validators. Message is the joined text of
    all errors ("; " separated) unless an explicit message is given.

    Attributes:
        errors: Failed rules in accumulation order (read-only).
        creation_stack: Stack at construction site. Empty for fast failures.
    """

    capture_stack: ClassVar[bool] = True

    def __init__(self, errors: Sequence[ValidationError], message: str | None = None) -> None:
        """Initialize with collected errors.

        Args:
            errors: Collected validation errors (at least one).
            message: Explicit message. None = joined errors.

        Raises:
            ValueError: If errors is empty.
        """
        if not errors:
            raise ValueError(f"{type(self).__name__} requires at least one error")

        self.errors: tuple[ValidationError, ...] = tuple(errors)
        self.creation_stack = traceback.StackSummary.from_list(
            traceback.extract_stack()[:-1] if self.capture_stack else []
        )
        super().__init__(message if message is not None else join_errors(self.errors))

    def __reduce__(self) -> tuple[object, ...]:
        """Pickle by constructor arguments; the stack travels as plain tuples."""
        frames = [(f.filename, f.lineno, f.name, f.line) for f in self.creation_stack]
        return (type(self), (self.errors, str(self)), {"creation_stack": frames})

    def __setstate__(self, state: dict[str, list[tuple[str, int, str, str]]]) -> None:
        """Restore the construction-site stack recorded when pickled."""
        self.creation_stack = traceback.StackSummary.from_list(state["creation_stack"])

    @property
    def messages(self) -> tuple[str, ...]:
        """Plain-string view: each error formatted as "'field' message"."""
        return tuple(str(e) for e in self.errors)


class FastValidationFailedError(ValidationFailedError):
    """ValidationFailedError that skips stack capture.

    For high-frequency validation paths where failures are expected and
    the construction stack is not needed. Validators raise it with
    exception chaining suppressed.
    """

    capture_stack: ClassVar[bool] = False
