"""Absolute-path resolution for typed input paths.

Relative input is resolved against the primary project folder, ``~`` expands
to the home directory, and rooted input is returned unchanged.
"""

from __future__ import annotations

import os
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

from .separators import flavour_for, preferred_separator_for


def _no_project_paths() -> list[str]:
    return []


@dataclass(frozen=True)
class PathResolver:
    """Resolve typed path strings to absolute paths.

    ``project_paths`` is called on every lookup so folders registered while
    the picker is open are honoured immediately.
    """

    home_directory: str
    project_paths: Callable[[], list[str]] = field(default=_no_project_paths)
    working_directory: Callable[[], str] = field(default=os.getcwd)

    @classmethod
    def from_environment(cls, project_paths: Callable[[], list[str]] | None = None) -> PathResolver:
        """Build a resolver bound to the user's home directory."""
        return cls(
            home_directory=str(Path.home()),
            project_paths=project_paths if project_paths is not None else _no_project_paths,
        )

    def project_path(self) -> str | None:
        """Return the primary (first) project folder, or ``None``."""
        paths = self.project_paths()
        return paths[0] if paths else None

    def absolute(self, text: str) -> str:
        """Return the absolute form of ``text``."""
        sep = preferred_separator_for(text)
        if text.startswith("~" + sep):
            return self.home_directory + sep + text[2:]

        flavour = flavour_for(sep)
        if text.startswith(sep) or flavour.isabs(text):
            return text

        base = self.project_path() or self.working_directory()
        return flavour.normpath(flavour.join(base, text))

    def canonical(self, text: str) -> str:
        """Return the absolute form of ``text`` without trailing separators."""
        absolute = self.absolute(text)
        return flavour_for(preferred_separator_for(absolute)).normpath(absolute)

    def is_project_directory(self, absolute_path: str) -> bool:
        """Return whether ``absolute_path`` is a registered project folder."""
        flavour = flavour_for(preferred_separator_for(absolute_path))
        target = flavour.normpath(absolute_path)
        return any(flavour.normpath(project) == target for project in self.project_paths())
