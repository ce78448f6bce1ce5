"""Message formatting and value redaction.

Failure text format:
    "'<field>' must <requirement>[, but it was <value>]"
    "parameter must <requirement>[, but it was <value>]"   (anonymous check)

The value suffix is added only when the validator does not redact values,
the rule's shape displays values, and the value is present.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from paramcheck.domain.exceptions import InvalidRuleError
from paramcheck.domain.model.validation_error import ValidationError

if TYPE_CHECKING:
    from paramcheck.domain.model.rule import Rule

MAX_DISPLAYED_VALUE_LENGTH = 100
ELLIPSIS = "..."
ANONYMOUS_NAME = "parameter"

type MessageSource = str | Callable[[], str]
"""Failure message: literal text, or a zero-argument producer called only on failure."""


def render_value(value: object) -> str:
    """Render value for a failure message.

    Strings are quoted. Text longer than MAX_DISPLAYED_VALUE_LENGTH is cut
    to MAX_DISPLAYED_VALUE_LENGTH - 3 characters plus "..." (before quoting).

    Args:
        value: Value to render

    Returns:
        Display text
    """
    text = str(value)
    if len(text) > MAX_DISPLAYED_VALUE_LENGTH:
        text = text[: MAX_DISPLAYED_VALUE_LENGTH - len(ELLIPSIS)] + ELLIPSIS
    if isinstance(value, str):
        return f"'{text}'"
    return text


def resolve_message(message: MessageSource) -> str:
    """Produce message text, invoking producer if callable.

    Raises:
        InvalidRuleError: If the literal or produced text is empty
    """
    text = message() if callable(message) else message
    if not text:
        raise InvalidRuleError("message must not be empty")
    return text


def describe_failure(
    rule: Rule[Any],
    value: object,
    name: str | None,
    *,
    redact_values: bool,
) -> ValidationError:
    """Build default-template error for a failed rule.

    Args:
        rule: Failed rule
        value: Checked value
        name: Parameter name. None = anonymous ("parameter must ...")
        redact_values: Validator's redaction policy

    Returns:
        ValidationError with templated message
    """
    message = rule.describe() if name is not None else f"{ANONYMOUS_NAME} {rule.describe()}"
    if not redact_values and rule.shows_value and value is not None:
        message = f"{message}, but it was {render_value(value)}"
    return ValidationError(name, message)
