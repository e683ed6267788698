"""Match engine package: listing, fragment filtering, and ignore globs."""

from __future__ import annotations

from .cache import SessionCache
from .engine import MatchEngine, match_fragment
from .fuzzy import fuzzy_filter, fuzzy_score
from .ignore import IgnoreFilter, IgnorePattern, clear_ignore_pattern_cache, compile_ignore_pattern

__all__ = [
    "IgnoreFilter",
    "IgnorePattern",
    "MatchEngine",
    "SessionCache",
    "clear_ignore_pattern_cache",
    "compile_ignore_pattern",
    "fuzzy_filter",
    "fuzzy_score",
    "match_fragment",
]
