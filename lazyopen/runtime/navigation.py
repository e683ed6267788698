"""Navigation state machine: current path, undo history, and list cursor.

Transitions return ``True`` when they changed state and ``False`` for a
reject; the controller turns rejects into a beep. This module has no host
or UI concerns.
"""

from __future__ import annotations

import os
from collections.abc import Callable
from dataclasses import replace

from ..matching import MatchEngine
from ..path_model import InputPath, PathResolver
from .config import PickerConfig
from .listing import ListEntry, build_entries

MAX_PATH_HISTORY = 256


class PathHistory:
    """Bounded undo stack of previously committed paths."""

    def __init__(self, max_entries: int = MAX_PATH_HISTORY) -> None:
        self.max_entries = max(1, max_entries)
        self.entries: list[InputPath] = []

    def push(self, path: InputPath) -> None:
        self.entries.append(path)
        overflow = len(self.entries) - self.max_entries
        if overflow > 0:
            del self.entries[:overflow]

    def pop(self) -> InputPath | None:
        if not self.entries:
            return None
        return self.entries.pop()

    def clear(self) -> None:
        self.entries.clear()

    def __len__(self) -> int:
        return len(self.entries)


class NavigationState:
    """Picker session state driven by user transitions.

    ``request_listing`` lets the owner compute matches off the UI thread;
    results come back through :meth:`apply_matches`. Without it listings are
    computed synchronously.
    """

    def __init__(
        self,
        engine: MatchEngine,
        config: PickerConfig,
        initial_path: Callable[[], InputPath],
        *,
        request_listing: Callable[[InputPath], None] | None = None,
    ) -> None:
        self.engine = engine
        self.config = config
        self.initial_path = initial_path
        self.request_listing = request_listing
        self.current_path = InputPath("")
        self.history = PathHistory()
        self.cursor_index: int | None = None
        self.entries: list[ListEntry] = []
        self.listing_pending = False

    @property
    def resolver(self) -> PathResolver:
        return self.engine.resolver

    def reset(self) -> None:
        """Start a fresh session at the initial path."""
        self.history.clear()
        self.update_path(self.initial_path(), save_history=False)

    # path transitions
    def update_path(self, new_path: InputPath, save_history: bool = True) -> None:
        """Make ``new_path`` current, optionally recording the old one for undo."""
        if save_history:
            self.history.push(self.current_path)
        self.current_path = new_path
        self.cursor_index = None
        self.refresh()

    def shortcut_target(self, new_path: InputPath) -> InputPath | None:
        """Return the jump target for a typed ``//``, ``~/`` or ``:/`` shortcut."""
        if not self.config.helm_dir_switch:
            return None
        if new_path.has_shortcut(""):
            return new_path.root(self.resolver)
        if new_path.has_shortcut("~"):
            return InputPath(self.resolver.home_directory + os.sep)
        if new_path.has_shortcut(":"):
            project_path = self.resolver.project_path()
            if project_path:
                return InputPath(project_path + new_path.sep)
        return None

    def path_change(self, new_path: InputPath) -> bool:
        """Apply text typed by the user.

        Shortcut jumps are committed to history; plain typing is transient so
        undo steps over whole jumps rather than single keystrokes. Returns
        whether a shortcut replaced the typed text.
        """
        target = self.shortcut_target(new_path)
        if target is None:
            self.update_path(new_path, save_history=False)
            return False
        self.update_path(target, save_history=True)
        return True

    def delete_path_component(self) -> bool:
        if self.current_path.is_root(self.resolver):
            return False
        self.update_path(self.current_path.parent(self.resolver))
        return True

    def autocomplete(self) -> bool:
        """Complete the input to the longest common prefix of its matches."""
        matches = self.engine.get_matching_paths(self.current_path)
        if not matches:
            return False
        if len(matches) == 1 or self.engine.fuzzy_match:
            new_path = matches[0]
            if self.engine.is_directory(new_path):
                new_path = new_path.as_directory()
            self.update_path(new_path)
            return True

        new_path = InputPath.common_prefix(matches)
        if new_path.equals(self.current_path):
            return False
        self.update_path(new_path)
        return True

    def undo(self) -> bool:
        previous = self.history.pop()
        if previous is not None:
            self.update_path(previous, save_history=False)
            return True
        initial = self.initial_path()
        if self.current_path.equals(initial):
            return False
        self.update_path(initial, save_history=False)
        return True

    # listing
    def refresh(self) -> None:
        """Recompute the visible list for the current path."""
        self.cursor_index = None
        if self.request_listing is None:
            self.listing_pending = False
            self.apply_matches(self.current_path, self.engine.get_matching_paths(self.current_path))
            return
        self.entries = []
        self.listing_pending = True
        self.request_listing(self.current_path)

    def apply_matches(self, path: InputPath, matches: list[InputPath]) -> bool:
        """Install matches computed for ``path``; stale results are dropped."""
        if not path.equals(self.current_path):
            return False
        preserve_order = self.engine.fuzzy_match and bool(path.fragment)
        self.entries = build_entries(path, matches, self.engine, preserve_match_order=preserve_order)
        self.cursor_index = None
        self.listing_pending = False
        return True

    # cursor
    def set_cursor_index(self, index: int | None) -> None:
        if index is None or index < 0 or index >= len(self.entries):
            index = None
        self.cursor_index = index

    def move_cursor(self, direction: int) -> bool:
        """Move the cursor one row, wrapping at both ends."""
        count = len(self.entries)
        if count == 0:
            self.cursor_index = None
            return False
        index = self.cursor_index
        if direction > 0:
            index = 0 if index is None or index >= count - 1 else index + 1
        else:
            index = count - 1 if index is None or index <= 0 else index - 1
        self.set_cursor_index(index)
        return True

    def move_cursor_down(self) -> bool:
        return self.move_cursor(1)

    def move_cursor_up(self) -> bool:
        return self.move_cursor(-1)

    def move_cursor_to_top(self) -> bool:
        self.set_cursor_index(0)
        return self.cursor_index is not None

    def move_cursor_to_bottom(self) -> bool:
        self.set_cursor_index(len(self.entries) - 1)
        return self.cursor_index is not None

    def selected_entry(self) -> ListEntry | None:
        if self.cursor_index is None or self.cursor_index >= len(self.entries):
            return None
        return self.entries[self.cursor_index]

    def selected_path(self) -> InputPath | None:
        entry = self.selected_entry()
        return entry.path if entry is not None else None

    def first_path(self) -> InputPath | None:
        """Return the first candidate, skipping the parent-directory row."""
        for entry in self.entries:
            if not entry.is_parent:
                return entry.path
        return None

    def refresh_project_flags(self) -> None:
        """Re-evaluate project-folder markers without touching the cursor."""
        self.entries = [
            replace(
                entry,
                is_project=entry.is_directory
                and not entry.is_parent
                and entry.path.is_project_directory(self.resolver),
            )
            for entry in self.entries
        ]
