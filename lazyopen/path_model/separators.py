"""Separator detection and path-flavour helpers for typed path strings.

Typed input is plain text, so the separator is inferred from the text itself
instead of trusting the host platform.
"""

from __future__ import annotations

import ntpath
import os
import posixpath
from types import ModuleType

def preferred_separator_for(text: str) -> str:
    """Return the separator used by ``text``.

    The first ``/`` or ``\\`` found wins. Strings without either fall back to
    the host separator.
    """
    forward_index = text.find("/")
    back_index = text.find("\\")
    if forward_index < 0 and back_index < 0:
        return os.sep
    if forward_index < 0:
        return "\\"
    if back_index < 0:
        return "/"
    return "/" if forward_index < back_index else "\\"


def flavour_for(sep: str) -> ModuleType:
    """Return the ``os.path``-like module matching ``sep``."""
    return ntpath if sep == "\\" else posixpath


def dirname(text: str, sep: str) -> str:
    """Return the dirname of ``text`` ignoring trailing separators.

    Root strings are their own dirname, and strings without a directory part
    yield ``"."``.
    """
    flavour = flavour_for(sep)
    stripped = text.rstrip(sep)
    if not stripped:
        return text[:1] if text else "."
    head = flavour.dirname(stripped)
    return head if head else "."


def with_trailing_separator(text: str, sep: str) -> str:
    """Append ``sep`` unless ``text`` already ends with it."""
    return text if text.endswith(sep) else text + sep
