"""Domain predicates: rule factories for every predicate shape."""

from paramcheck.domain.predicates.base import require_ordered_bounds
from paramcheck.domain.predicates.collection import has_size, one_of
from paramcheck.domain.predicates.numeric import (
    at_least,
    at_most,
    in_range,
    negative,
    non_negative,
    non_positive,
    positive,
)
from paramcheck.domain.predicates.presence import is_null, not_blank, not_empty, not_null
from paramcheck.domain.predicates.text import has_length, matches

__all__ = [
    # Preconditions
    "require_ordered_bounds",
    # Presence
    "not_null",
    "is_null",
    "not_empty",
    "not_blank",
    # Numeric
    "in_range",
    "at_least",
    "at_most",
    "positive",
    "negative",
    "non_negative",
    "non_positive",
    # Text
    "has_length",
    "matches",
    # Collection
    "has_size",
    "one_of",
]
