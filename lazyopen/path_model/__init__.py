"""Pure path model for typed picker input.

This package has no filesystem access apart from resolving relative input
against the working directory:
- :class:`InputPath` parsing, parent/root/shortcut semantics, common prefixes
- :class:`PathResolver` for the absolute form of typed text
- separator detection helpers
"""

from __future__ import annotations

from .path import InputPath, InvalidArgumentError
from .resolver import PathResolver
from .separators import dirname, flavour_for, preferred_separator_for, with_trailing_separator

__all__ = [
    "InputPath",
    "InvalidArgumentError",
    "PathResolver",
    "dirname",
    "flavour_for",
    "preferred_separator_for",
    "with_trailing_separator",
]
