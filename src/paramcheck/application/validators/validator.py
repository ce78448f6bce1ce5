"""Validator: the rule engine.

Holds configuration and the ordered list of collected errors. Every check
funnels through one primitive (_record), which appends an error on
failure and, in fail-fast mode, raises right away.

Example:
    Validator().not_null(name, "name").has_length(name, 1, 50, "name")

Call forms, shared by every check:
    check(value, ..., "field")                  default template, field set
    check(value, ..., message="text")           custom message (str or callable)
    check(value, ...)                           "parameter must ..."
"""

from __future__ import annotations

import logging
import re
from typing import TYPE_CHECKING, Any, Self

from paramcheck.application.failures import resolve_failure_factory
from paramcheck.application.formatting import MessageSource, describe_failure, resolve_message
from paramcheck.domain import predicates
from paramcheck.domain.exceptions import FastValidationFailedError, InvalidFailureError
from paramcheck.domain.model.configuration import ValidatorConfig
from paramcheck.domain.model.rule import Rule, optional
from paramcheck.domain.model.validation_error import ValidationError
from paramcheck.infrastructure.pattern_cache import resolve_pattern

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable, Sized

logger = logging.getLogger(__name__)

type PatternSource = str | re.Pattern[str]


class Validator:
    """Rule engine with configurable evaluation strategy.

    fail_fast=True: raises on the first failed check, so a raised failure
    always carries exactly one error.
    fail_fast=False: collects errors until validate() is called
    (see BatchValidator).

    Not thread-safe: one validator belongs to one caller.
    """

    def __init__(self, config: ValidatorConfig | None = None) -> None:
        """Initialize validator.

        Args:
            config: Validator configuration. Uses defaults if None
                (fail-fast, values shown, default failure).
        """
        self._config = config if config is not None else ValidatorConfig()
        self._failure_factory = resolve_failure_factory(self._config)
        self._errors: list[ValidationError] = []

    @property
    def config(self) -> ValidatorConfig:
        """Configuration this validator was created with."""
        return self._config

    # =========================================================================
    # Core
    # =========================================================================

    def _record(self, failed: bool, build_error: Callable[[], ValidationError]) -> Self:
        """Append error if check failed. The only path that adds errors.

        build_error runs only on failure, so message construction costs
        nothing on the success path. In fail-fast mode the error list is
        emptied once the failure is raised, so a reused validator reports
        only its next failure.
        """
        if failed:
            self._errors.append(build_error())
            if self._config.fail_fast:
                try:
                    self.validate()
                finally:
                    self._errors.clear()
        return self

    def validate(self) -> None:
        """Raise failure if any errors were collected.

        Raises:
            ValidationFailedError: (or custom factory's exception) if errors exist
            InvalidFailureError: If custom factory returned a non-exception
        """
        if not self._errors:
            return

        failure = self._failure_factory(tuple(self._errors))
        if not isinstance(failure, BaseException):
            raise InvalidFailureError(type(failure))

        logger.debug(
            "validation failed with %d error(s), raising %s",
            len(self._errors),
            type(failure).__name__,
        )
        if isinstance(failure, FastValidationFailedError):
            raise failure from None
        raise failure

    def satisfies(
        self,
        value: Any,
        rule: Rule[Any],
        name: str | None = None,
        *,
        message: MessageSource | None = None,
    ) -> Self:
        """Check value against rule.

        Generic form behind every named check; also the extension point
        for custom rules.

        Args:
            value: Value to check
            rule: Rule to apply
            name: Parameter name for the default message
            message: Custom message replacing the default template

        Returns:
            self for chaining
        """
        return self._record(
            not rule.passes(value),
            lambda: self._error_for(rule, value, name, message),
        )

    def _error_for(
        self,
        rule: Rule[Any],
        value: Any,
        name: str | None,
        message: MessageSource | None,
    ) -> ValidationError:
        if message is not None:
            return ValidationError(name, resolve_message(message))
        return describe_failure(rule, value, name, redact_values=self._config.redact_values)

    # =========================================================================
    # Assertions
    # =========================================================================

    def assert_true(self, condition: bool, message: MessageSource) -> Self:
        """Check that condition holds.

        Args:
            condition: Condition to check
            message: Failure message (callable = produced only on failure)

        Returns:
            self for chaining
        """
        return self._record(not condition, lambda: ValidationError(None, resolve_message(message)))

    def assert_false(self, condition: bool, message: MessageSource) -> Self:
        """Check that condition does not hold."""
        return self.assert_true(not condition, message)

    # =========================================================================
    # Nullness
    # =========================================================================

    def not_null(
        self, value: object, name: str | None = None, *, message: MessageSource | None = None
    ) -> Self:
        """Check value is not None."""
        return self.satisfies(value, predicates.not_null(), name, message=message)

    def is_null(
        self, value: object, name: str | None = None, *, message: MessageSource | None = None
    ) -> Self:
        """Check value is None."""
        return self.satisfies(value, predicates.is_null(), name, message=message)

    # =========================================================================
    # Emptiness / blankness
    # =========================================================================

    def not_empty(
        self, value: Sized | None, name: str | None = None, *, message: MessageSource | None = None
    ) -> Self:
        """Check string, collection or mapping is present and non-empty.

        The value is never shown in the message.
        """
        return self.satisfies(value, predicates.not_empty(), name, message=message)

    def null_or_not_empty(
        self, value: Sized | None, name: str | None = None, *, message: MessageSource | None = None
    ) -> Self:
        return self.satisfies(value, optional(predicates.not_empty()), name, message=message)

    def not_blank(
        self, value: str | None, name: str | None = None, *, message: MessageSource | None = None
    ) -> Self:
        """Check string has a non-whitespace character. Value never shown."""
        return self.satisfies(value, predicates.not_blank(), name, message=message)

    def null_or_not_blank(
        self, value: str | None, name: str | None = None, *, message: MessageSource | None = None
    ) -> Self:
        return self.satisfies(value, optional(predicates.not_blank()), name, message=message)

    # =========================================================================
    # Numeric range
    # =========================================================================

    def in_range(
        self,
        value: Any,
        min_value: Any,
        max_value: Any,
        name: str | None = None,
        *,
        message: MessageSource | None = None,
    ) -> Self:
        """Check min_value <= value <= max_value.

        Raises:
            InvalidRuleError: If a bound is None or min_value > max_value
        """
        rule = predicates.in_range(min_value, max_value)
        return self.satisfies(value, rule, name, message=message)

    def null_or_in_range(
        self,
        value: Any,
        min_value: Any,
        max_value: Any,
        name: str | None = None,
        *,
        message: MessageSource | None = None,
    ) -> Self:
        rule = optional(predicates.in_range(min_value, max_value))
        return self.satisfies(value, rule, name, message=message)

    def at_least(
        self,
        value: Any,
        min_value: Any,
        name: str | None = None,
        *,
        message: MessageSource | None = None,
    ) -> Self:
        """Check value >= min_value."""
        return self.satisfies(value, predicates.at_least(min_value), name, message=message)

    def null_or_at_least(
        self,
        value: Any,
        min_value: Any,
        name: str | None = None,
        *,
        message: MessageSource | None = None,
    ) -> Self:
        rule = optional(predicates.at_least(min_value))
        return self.satisfies(value, rule, name, message=message)

    def at_most(
        self,
        value: Any,
        max_value: Any,
        name: str | None = None,
        *,
        message: MessageSource | None = None,
    ) -> Self:
        """Check value <= max_value."""
        return self.satisfies(value, predicates.at_most(max_value), name, message=message)

    def null_or_at_most(
        self,
        value: Any,
        max_value: Any,
        name: str | None = None,
        *,
        message: MessageSource | None = None,
    ) -> Self:
        rule = optional(predicates.at_most(max_value))
        return self.satisfies(value, rule, name, message=message)

    # =========================================================================
    # Sign
    # =========================================================================

    def is_positive(
        self, value: Any, name: str | None = None, *, message: MessageSource | None = None
    ) -> Self:
        """Check value > 0."""
        return self.satisfies(value, predicates.positive(), name, message=message)

    def null_or_is_positive(
        self, value: Any, name: str | None = None, *, message: MessageSource | None = None
    ) -> Self:
        return self.satisfies(value, optional(predicates.positive()), name, message=message)

    def is_negative(
        self, value: Any, name: str | None = None, *, message: MessageSource | None = None
    ) -> Self:
        """Check value < 0."""
        return self.satisfies(value, predicates.negative(), name, message=message)

    def null_or_is_negative(
        self, value: Any, name: str | None = None, *, message: MessageSource | None = None
    ) -> Self:
        return self.satisfies(value, optional(predicates.negative()), name, message=message)

    def is_non_negative(
        self, value: Any, name: str | None = None, *, message: MessageSource | None = None
    ) -> Self:
        """Check value >= 0."""
        return self.satisfies(value, predicates.non_negative(), name, message=message)

    def null_or_is_non_negative(
        self, value: Any, name: str | None = None, *, message: MessageSource | None = None
    ) -> Self:
        return self.satisfies(value, optional(predicates.non_negative()), name, message=message)

    def is_non_positive(
        self, value: Any, name: str | None = None, *, message: MessageSource | None = None
    ) -> Self:
        """Check value <= 0."""
        return self.satisfies(value, predicates.non_positive(), name, message=message)

    def null_or_is_non_positive(
        self, value: Any, name: str | None = None, *, message: MessageSource | None = None
    ) -> Self:
        return self.satisfies(value, optional(predicates.non_positive()), name, message=message)

    # =========================================================================
    # Length / size
    # =========================================================================

    def has_length(
        self,
        value: str | None,
        min_length: int,
        max_length: int,
        name: str | None = None,
        *,
        message: MessageSource | None = None,
    ) -> Self:
        """Check min_length <= len(value) <= max_length.

        Raises:
            InvalidRuleError: If a bound is None or min_length > max_length
        """
        rule = predicates.has_length(min_length, max_length)
        return self.satisfies(value, rule, name, message=message)

    def null_or_has_length(
        self,
        value: str | None,
        min_length: int,
        max_length: int,
        name: str | None = None,
        *,
        message: MessageSource | None = None,
    ) -> Self:
        rule = optional(predicates.has_length(min_length, max_length))
        return self.satisfies(value, rule, name, message=message)

    def has_size(
        self,
        value: Sized | None,
        min_size: int,
        max_size: int,
        name: str | None = None,
        *,
        message: MessageSource | None = None,
    ) -> Self:
        """Check collection or mapping has min_size..max_size elements.

        Raises:
            InvalidRuleError: If a bound is None or min_size > max_size
        """
        rule = predicates.has_size(min_size, max_size)
        return self.satisfies(value, rule, name, message=message)

    def null_or_has_size(
        self,
        value: Sized | None,
        min_size: int,
        max_size: int,
        name: str | None = None,
        *,
        message: MessageSource | None = None,
    ) -> Self:
        rule = optional(predicates.has_size(min_size, max_size))
        return self.satisfies(value, rule, name, message=message)

    # =========================================================================
    # Pattern / membership
    # =========================================================================

    def matches(
        self,
        value: str | None,
        pattern: PatternSource | None,
        name: str | None = None,
        *,
        message: MessageSource | None = None,
    ) -> Self:
        """Check value fully matches pattern.

        Source text is compiled once per process through the pattern cache.

        Raises:
            InvalidRuleError: If pattern is None or not a valid regex
        """
        rule = predicates.matches(resolve_pattern(pattern))
        return self.satisfies(value, rule, name, message=message)

    def null_or_matches(
        self,
        value: str | None,
        pattern: PatternSource | None,
        name: str | None = None,
        *,
        message: MessageSource | None = None,
    ) -> Self:
        rule = optional(predicates.matches(resolve_pattern(pattern)))
        return self.satisfies(value, rule, name, message=message)

    def one_of(
        self,
        value: Any,
        choices: Iterable[Any],
        name: str | None = None,
        *,
        message: MessageSource | None = None,
    ) -> Self:
        """Check value is one of choices.

        Raises:
            InvalidRuleError: If choices is None or empty
        """
        return self.satisfies(value, predicates.one_of(choices), name, message=message)

    def null_or_one_of(
        self,
        value: Any,
        choices: Iterable[Any],
        name: str | None = None,
        *,
        message: MessageSource | None = None,
    ) -> Self:
        return self.satisfies(value, optional(predicates.one_of(choices)), name, message=message)
