"""Infrastructure layer: shared process-wide resources."""

from paramcheck.infrastructure.pattern_cache import PATTERN_CACHE, PatternCache, resolve_pattern

__all__ = [
    "PATTERN_CACHE",
    "PatternCache",
    "resolve_pattern",
]
