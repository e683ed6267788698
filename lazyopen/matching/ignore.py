"""Glob-based filename hiding for directory listings.

Compiled patterns are cached for the process lifetime keyed by glob text,
since the configured patterns rarely change between picker sessions.
"""

from __future__ import annotations

import fnmatch
import re
from collections.abc import Iterable
from dataclasses import dataclass

_COMPILED_PATTERN_CACHE: dict[str, IgnorePattern] = {}


def clear_ignore_pattern_cache() -> None:
    """Clear compiled glob patterns."""
    _COMPILED_PATTERN_CACHE.clear()


@dataclass(frozen=True)
class IgnorePattern:
    """One compiled glob matched against bare filenames.

    Wildcards do not match a leading dot unless the glob itself starts with
    one, so ``*`` hides ``notes.txt`` but not ``.env``.
    """

    glob: str
    regex: re.Pattern[str]

    def matches(self, filename: str) -> bool:
        if filename.startswith(".") and not self.glob.startswith("."):
            return False
        return self.regex.match(filename) is not None


def compile_ignore_pattern(glob: str) -> IgnorePattern:
    """Return the cached compiled form of ``glob``."""
    cached = _COMPILED_PATTERN_CACHE.get(glob)
    if cached is not None:
        return cached
    pattern = IgnorePattern(glob=glob, regex=re.compile(fnmatch.translate(glob)))
    _COMPILED_PATTERN_CACHE[glob] = pattern
    return pattern


class IgnoreFilter:
    """Filter filenames against a fixed set of ignore globs."""

    def __init__(self, globs: Iterable[str] = ()) -> None:
        self.patterns: tuple[IgnorePattern, ...] = tuple(
            compile_ignore_pattern(glob) for glob in globs if glob
        )

    def is_ignored(self, filename: str) -> bool:
        """Return whether any pattern matches ``filename``."""
        return any(pattern.matches(filename) for pattern in self.patterns)

    def filter(self, filenames: Iterable[str]) -> list[str]:
        """Return ``filenames`` without ignored names, order preserved."""
        return [name for name in filenames if not self.is_ignored(name)]
