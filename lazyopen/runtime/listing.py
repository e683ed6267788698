"""Visible list construction for the picker's candidate pane."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from ..matching import MatchEngine
from ..path_model import InputPath

PARENT_LABEL = ".."


@dataclass(frozen=True)
class ListEntry:
    """One row of the visible candidate list."""

    path: InputPath
    is_directory: bool
    is_parent: bool = False
    is_project: bool = False

    @property
    def label(self) -> str:
        if self.is_parent:
            return PARENT_LABEL
        return self.path.fragment

    @property
    def can_add_project(self) -> bool:
        """Whether the row offers the add-as-project-folder action."""
        return self.is_directory and not self.is_parent and not self.is_project


def build_entries(
    current: InputPath,
    matches: Sequence[InputPath],
    engine: MatchEngine,
    *,
    preserve_match_order: bool = False,
) -> list[ListEntry]:
    """Build visible rows for ``matches`` of ``current``.

    A leading ``..`` row points at the parent directory whenever there is at
    least one match and ``current`` is not root. Matches that no longer exist
    are dropped. Directories come first, then files, each in display order,
    unless ``preserve_match_order`` keeps fuzzy relevance order.
    """
    if not matches:
        return []

    resolver = engine.resolver
    entries: list[ListEntry] = []
    if not current.is_root(resolver):
        entries.append(ListEntry(path=current.parent(resolver), is_directory=True, is_parent=True))

    directories: list[ListEntry] = []
    files: list[ListEntry] = []
    ordered = list(matches) if preserve_match_order else sorted(matches, key=InputPath.sort_key)
    for path in ordered:
        is_directory = engine.is_directory(path)
        if is_directory is None:
            continue
        entry = ListEntry(
            path=path,
            is_directory=is_directory,
            is_project=is_directory and path.is_project_directory(resolver),
        )
        if preserve_match_order or not is_directory:
            files.append(entry)
        else:
            directories.append(entry)

    entries.extend(directories)
    entries.extend(files)
    return entries
