"""Picker controller: binds commands to navigation and host side effects.

The controller owns one picker session (navigation state, match engine, and
session cache) and performs the open/create flow against the filesystem and
host collaborators.
"""

from __future__ import annotations

import logging
from collections.abc import Callable

from ..filesystem import FileSystem
from ..matching import IgnoreFilter, MatchEngine, SessionCache
from ..path_model import InputPath, PathResolver
from .config import PickerConfig
from .events import PickerEvents
from .host import EditorHost
from .navigation import NavigationState
from .prefetch import ListingScheduler

logger = logging.getLogger(__name__)

COMMAND_PREFIX = "lazyopen:"


class PickerController:
    """State-bound picker operations used by key handlers and the app loop."""

    def __init__(
        self,
        config: PickerConfig,
        host: EditorHost,
        *,
        filesystem: FileSystem | None = None,
        resolver: PathResolver | None = None,
        events: PickerEvents | None = None,
        background_listing: bool = False,
    ) -> None:
        self.config = config
        self.host = host
        self.events = events if events is not None else PickerEvents()
        self.filesystem = filesystem if filesystem is not None else FileSystem()
        self.resolver = resolver if resolver is not None else PathResolver.from_environment(host.project_paths)
        self.cache = SessionCache()
        self.engine = MatchEngine(
            self.filesystem,
            self.resolver,
            self.cache,
            fuzzy_match=config.fuzzy_match,
            ignore_filter=IgnoreFilter(config.ignored_patterns),
        )
        self.scheduler = ListingScheduler(self.engine.get_matching_paths) if background_listing else None
        self.navigation = NavigationState(
            self.engine,
            config,
            self.initial_path,
            request_listing=self.scheduler.schedule if self.scheduler is not None else None,
        )
        self.attached = False
        self.commands: dict[str, Callable[[], None]] = {
            "confirm": self.confirm,
            "cancel": self.detach,
            "autocomplete": self.autocomplete,
            "undo": self.undo,
            "move-cursor-down": self.move_cursor_down,
            "move-cursor-up": self.move_cursor_up,
            "move-cursor-top": self.move_cursor_top,
            "move-cursor-bottom": self.move_cursor_bottom,
            "confirm-selected-or-first": self.confirm_selected_or_first,
            "delete-path-component": self.delete_path_component,
            "add-project-folder": self.add_selected_project_folder,
        }

    @property
    def current_path(self) -> InputPath:
        return self.navigation.current_path

    def initial_path(self) -> InputPath:
        return InputPath.initial(self.config, self.host)

    # lifecycle
    def attach(self) -> None:
        """Open a fresh session at the initial path."""
        if self.attached:
            return
        self._start_generation()
        self.attached = True
        self.navigation.reset()

    def detach(self) -> None:
        """Close the session; caches and history do not survive it."""
        if not self.attached:
            return
        self.attached = False
        self._start_generation()
        self.navigation.history.clear()
        self.host.close_picker()

    def _start_generation(self) -> None:
        self.cache.clear()
        if self.scheduler is not None:
            self.scheduler.advance_generation()

    def toggle(self) -> None:
        if self.attached:
            self.detach()
        else:
            self.attach()

    def dispatch(self, command: str) -> bool:
        """Run a named command (``"autocomplete"`` or ``"lazyopen:autocomplete"``)."""
        if command.startswith(COMMAND_PREFIX):
            command = command[len(COMMAND_PREFIX):]
        handler = self.commands.get(command)
        if handler is None:
            return False
        handler()
        return True

    def drain_listings(self) -> bool:
        """Apply finished background listings; returns whether the list changed."""
        if self.scheduler is None:
            return False
        changed = False
        for result in self.scheduler.drain_results():
            if self.navigation.apply_matches(result.request.path, result.matches):
                changed = True
        return changed

    def reject(self) -> None:
        self.host.beep()

    def _check(self, accepted: bool) -> None:
        if not accepted:
            self.reject()

    # input
    def path_change(self, new_path: InputPath) -> None:
        """Handle a user edit of the path input."""
        self.navigation.path_change(new_path)

    def select_path(self, path: InputPath) -> None:
        """Navigate into directories; open (or create) anything else."""
        if self.engine.is_directory(path):
            self.navigation.update_path(path.as_directory())
        else:
            self.open_path(path)

    def click_path(self, text: str) -> None:
        self.select_path(InputPath(text))

    # open/create
    def open_path(self, path: InputPath) -> None:
        """Open an existing file, or create the file/directory ``path`` names."""
        absolute = path.absolute(self.resolver)
        if self.engine.exists(path):
            if self.engine.is_file(path):
                self.host.open_path(absolute)
                self.events.emit_did_open_path(absolute)
                logger.info("Opened %s", absolute)
                self.detach()
            else:
                self.reject()
        elif path.fragment:
            try:
                self.filesystem.create_directories_for(path.absolute_directory(self.resolver))
                if self.config.create_file_instantly:
                    self.filesystem.create_empty_file(absolute)
                    self.events.emit_did_create_path(absolute)
                    logger.info("Created %s", absolute)
                self.host.open_path(absolute)
                self.events.emit_did_open_path(absolute)
                logger.info("Opened %s", absolute)
            except OSError as exc:
                logger.error("Could not open %s: %s", absolute, exc)
                self.host.notify_error("Could not open file", f"{absolute}: {exc}")
            finally:
                self.detach()
        elif self.config.create_directories:
            try:
                self.filesystem.create_directories_for(absolute)
                self.host.notify_success("Directory created", f'Created directory "{path.full}".')
                self.events.emit_did_create_path(absolute)
                logger.info("Created directory %s", absolute)
            except OSError as exc:
                logger.error("Could not create directory %s: %s", absolute, exc)
                self.host.notify_error("Could not create directory", f"{absolute}: {exc}")
            finally:
                self.detach()
        else:
            self.reject()

    # project folders
    def add_project_folder(self, path: InputPath) -> None:
        """Register ``path`` as a project folder when it is a new directory."""
        if self.engine.is_directory(path) and not path.is_project_directory(self.resolver):
            self.host.add_project_path(self.resolver.canonical(path.full))
            self.host.notify_success("Added project folder", f'Added "{path.full}" as a project folder.')
            self.navigation.refresh_project_flags()
        else:
            self.reject()

    def click_add_project_folder(self, text: str) -> None:
        self.add_project_folder(InputPath(text))

    def add_selected_project_folder(self) -> None:
        selected = self.navigation.selected_path()
        current = self.navigation.current_path
        if selected is None and self.engine.is_directory(current):
            self.add_project_folder(current)
        elif selected is not None and not selected.equals(current.parent(self.resolver)):
            self.add_project_folder(selected)
        else:
            self.reject()

    # navigation commands
    def autocomplete(self) -> None:
        self._check(self.navigation.autocomplete())

    def undo(self) -> None:
        self._check(self.navigation.undo())

    def delete_path_component(self) -> None:
        self._check(self.navigation.delete_path_component())

    def move_cursor_down(self) -> None:
        self.navigation.move_cursor_down()

    def move_cursor_up(self) -> None:
        self.navigation.move_cursor_up()

    def move_cursor_top(self) -> None:
        self.navigation.move_cursor_to_top()

    def move_cursor_bottom(self) -> None:
        self.navigation.move_cursor_to_bottom()

    def confirm(self) -> None:
        """Act on the selected row, or on the typed path when nothing is selected."""
        selected = self.navigation.selected_path()
        self.select_path(selected if selected is not None else self.navigation.current_path)

    def confirm_selected_or_first(self) -> None:
        selected = self.navigation.selected_path()
        if selected is None:
            selected = self.navigation.first_path()
        self.select_path(selected if selected is not None else self.navigation.current_path)
