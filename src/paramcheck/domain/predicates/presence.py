"""Presence predicates: nullness, emptiness, blankness."""

from collections.abc import Sized

from paramcheck.domain.model.rule import Rule


def not_null() -> Rule[object]:
    """Create rule: value is present."""
    return Rule(
        name="not_null",
        test=lambda _: True,
        requirement="not be null",
        optional_requirement="not null",
    )


def is_null() -> Rule[object]:
    """Create rule: value is absent."""
    return Rule(
        name="is_null",
        test=lambda _: False,
        requirement="be null",
        optional_requirement="null",
        absent_passes=True,
    )


def not_empty() -> Rule[Sized]:
    """Create rule: string, collection or mapping has at least one element.

    Absent values fail. Never displays the value: it is often the
    sensitive payload itself.
    """
    return Rule(
        name="not_empty",
        test=lambda value: len(value) > 0,
        requirement="not be null or empty",
        optional_requirement="not empty",
        shows_value=False,
    )


def not_blank() -> Rule[str]:
    """Create rule: string has at least one non-whitespace character.

    Never displays the value.
    """
    return Rule(
        name="not_blank",
        test=lambda value: bool(value.strip()),
        requirement="not be blank",
        optional_requirement="not blank",
        shows_value=False,
    )
