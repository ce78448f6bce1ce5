"""Process-wide cache of compiled regular expressions.

Every validator resolves pattern source text through PATTERN_CACHE, so a
given pattern is compiled at most once per process no matter how many
validators use it. Entries are never evicted: keys are the finite set of
literal patterns written into calling code.

Thread-safe: lookup is lock-free on hit, compile-and-insert runs under a
lock with a second lookup, so concurrent first uses compile once.
"""

from __future__ import annotations

import logging
import re
import threading
from collections.abc import Callable
from dataclasses import dataclass, field

from paramcheck.domain.exceptions import InvalidRuleError

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class PatternCache:
    """Thread-safe source text → compiled pattern mapping.

    NOT frozen because it's a mutable cache.
    Thread-safety via Lock.

    Attributes:
        _compile: Compiler used on cache miss (injectable for instrumentation)
        _patterns: source → compiled pattern
        _lock: Guards compile-and-insert
    """

    _compile: Callable[[str], re.Pattern[str]] = re.compile
    _patterns: dict[str, re.Pattern[str]] = field(default_factory=dict)
    _lock: threading.Lock = field(default_factory=threading.Lock)

    def get(self, source: str | None) -> re.Pattern[str]:
        """Return compiled pattern for source, compiling on first use.

        Args:
            source: Regex source text

        Returns:
            Compiled pattern (same object for every call with same source)

        Raises:
            InvalidRuleError: If source is None or not a valid regex
        """
        if source is None:
            raise InvalidRuleError("regex pattern cannot be None")

        pattern = self._patterns.get(source)
        if pattern is not None:
            return pattern

        with self._lock:
            pattern = self._patterns.get(source)
            if pattern is None:
                try:
                    pattern = self._compile(source)
                except re.error as e:
                    raise InvalidRuleError(f"invalid regex pattern '{source}': {e}") from e
                self._patterns[source] = pattern
                logger.debug("compiled pattern %r (%d cached)", source, len(self._patterns))
        return pattern

    def __contains__(self, source: object) -> bool:
        """Check if source is already compiled."""
        return source in self._patterns

    def __len__(self) -> int:
        """Number of compiled patterns."""
        return len(self._patterns)


PATTERN_CACHE = PatternCache()
"""Shared by all validators for the process lifetime."""


def resolve_pattern(pattern: str | re.Pattern[str] | None) -> re.Pattern[str]:
    """Resolve pattern argument to compiled form.

    Source text goes through PATTERN_CACHE; compiled patterns pass through.

    Raises:
        InvalidRuleError: If pattern is None or invalid
    """
    if isinstance(pattern, re.Pattern):
        return pattern
    return PATTERN_CACHE.get(pattern)
