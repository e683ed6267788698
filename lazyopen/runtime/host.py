"""Host-editor collaborator contract plus the terminal implementation."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Protocol

logger = logging.getLogger(__name__)


class EditorHost(Protocol):
    """Operations the picker needs from the editor hosting it."""

    def active_document_path(self) -> str | None: ...

    def project_paths(self) -> list[str]: ...

    def add_project_path(self, absolute_path: str) -> None: ...

    def open_path(self, absolute_path: str) -> None: ...

    def beep(self) -> None: ...

    def notify_success(self, title: str, detail: str) -> None: ...

    def notify_error(self, title: str, detail: str) -> None: ...

    def close_picker(self) -> None: ...


@dataclass(frozen=True)
class Notification:
    """One user-visible notification."""

    level: str
    title: str
    detail: str

    def format(self) -> str:
        return f"{self.title}: {self.detail}"


@dataclass
class TerminalHost:
    """Editor host for the terminal picker.

    Opening a path only records it; the CLI hands recorded paths to
    ``$EDITOR`` (or prints them) once the terminal is restored.
    """

    document_path: str | None = None
    projects: list[str] = field(default_factory=list)
    opened_paths: list[str] = field(default_factory=list)
    notifications: list[Notification] = field(default_factory=list)
    beeps: int = 0
    closed: bool = False

    def active_document_path(self) -> str | None:
        return self.document_path

    def project_paths(self) -> list[str]:
        return list(self.projects)

    def add_project_path(self, absolute_path: str) -> None:
        if absolute_path not in self.projects:
            self.projects.append(absolute_path)

    def open_path(self, absolute_path: str) -> None:
        self.opened_paths.append(absolute_path)

    def beep(self) -> None:
        self.beeps += 1

    def notify_success(self, title: str, detail: str) -> None:
        logger.info("%s: %s", title, detail)
        self.notifications.append(Notification("success", title, detail))

    def notify_error(self, title: str, detail: str) -> None:
        logger.error("%s: %s", title, detail)
        self.notifications.append(Notification("error", title, detail))

    def close_picker(self) -> None:
        self.closed = True

    def latest_notification(self) -> Notification | None:
        return self.notifications[-1] if self.notifications else None
