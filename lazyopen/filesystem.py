"""Filesystem collaborator used by the match engine and open/create flow.

Read operations never raise: an unreadable path is reported as absent and an
unreadable directory as an empty listing plus the scan error. Write
operations raise ``OSError`` so callers can surface the failure to the user.
"""

from __future__ import annotations

import logging
import os
from stat import S_ISDIR
from dataclasses import dataclass

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PathStat:
    """Kind of an existing filesystem entry."""

    is_directory: bool


@dataclass(frozen=True)
class DirectoryChild:
    """One entry of a directory listing."""

    name: str
    is_directory: bool
    exists: bool = True


class FileSystem:
    """Thin wrapper over ``os`` calls with picker-friendly error handling."""

    def stat(self, absolute_path: str) -> PathStat | None:
        """Return the kind of ``absolute_path`` or ``None`` when it cannot be stat'ed."""
        try:
            result = os.stat(absolute_path)
        except (OSError, ValueError):
            return None
        return PathStat(is_directory=S_ISDIR(result.st_mode))

    def list_directory(self, absolute_directory: str) -> tuple[list[DirectoryChild], Exception | None]:
        """List ``absolute_directory`` in ``os.scandir`` order.

        Each child is stat'ed through symlinks; a child whose stat fails
        (a dangling link, say) is reported with ``exists=False``.

        Returns ``(children, scan_error)``; ``scan_error`` is set and
        ``children`` is empty when the directory cannot be read.
        """
        children: list[DirectoryChild] = []
        try:
            with os.scandir(absolute_directory) as entries:
                for entry in entries:
                    try:
                        result = entry.stat()
                    except OSError:
                        children.append(DirectoryChild(name=entry.name, is_directory=False, exists=False))
                        continue
                    children.append(DirectoryChild(name=entry.name, is_directory=S_ISDIR(result.st_mode)))
        except (OSError, ValueError) as exc:
            logger.debug("Cannot list %s: %s", absolute_directory, exc)
            return [], exc
        return children, None

    def create_directories_for(self, absolute_directory: str) -> None:
        """Create ``absolute_directory`` and its parents; existing trees are fine.

        A component vanishing mid-creation (``FileNotFoundError``) is a
        harmless race and is ignored.
        """
        try:
            os.makedirs(absolute_directory, exist_ok=True)
        except FileNotFoundError:
            logger.debug("Ignoring transient missing component while creating %s", absolute_directory)

    def create_empty_file(self, absolute_path: str) -> None:
        """Create an empty file unless something already exists at ``absolute_path``."""
        try:
            fd = os.open(absolute_path, os.O_WRONLY | os.O_CREAT | os.O_EXCL, 0o666)
        except FileExistsError:
            return
        os.close(fd)
