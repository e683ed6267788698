"""File-kind labels for candidate rows, looked up in the Pygments lexer registry."""

from __future__ import annotations

from functools import lru_cache

from pygments.lexers import find_lexer_class_for_filename
from pygments.util import ClassNotFound


@lru_cache(maxsize=1024)
def file_kind_label(filename: str) -> str:
    """Return a short language label for ``filename`` (``""`` when unknown)."""
    try:
        lexer_class = find_lexer_class_for_filename(filename)
    except ClassNotFound:
        return ""
    if lexer_class is None:
        return ""
    return lexer_class.name
