"""Frame composition for the picker overlay.

The overlay is a prompt row, a window of candidate rows, a divider, and a
status row. Rendering is pure: it reads navigation state and returns the
lines plus the geometry mouse handling needs to map clicks back to entries.
"""

from __future__ import annotations

from dataclasses import dataclass

from .ansi import clip_ansi_line, clip_left, display_width
from .file_kinds import file_kind_label
from .runtime.listing import ListEntry
from .runtime.navigation import NavigationState
from .ui_theme import UITheme

PROMPT_PREFIX = "> "
ADD_PROJECT_MARKER = "+"
PROJECT_MARKER = "*"
MARKER_COLS = 2
# prompt row above the list, divider and status rows below it
CHROME_ROWS = 3


@dataclass(frozen=True)
class PickerLayout:
    """Screen geometry of one rendered frame (rows and columns are 1-based)."""

    width: int
    overlay_rows: int
    list_top_row: int
    list_rows: int
    list_start: int
    entry_count: int
    marker_cols: int = MARKER_COLS

    def contains(self, col: int, row: int) -> bool:
        return 1 <= row <= self.overlay_rows and 1 <= col <= self.width

    def entry_index_at(self, row: int) -> int | None:
        """Return the entry index drawn on screen ``row``, if any."""
        offset = row - self.list_top_row
        if offset < 0 or offset >= self.list_rows:
            return None
        index = self.list_start + offset
        if index >= self.entry_count:
            return None
        return index

    def is_marker_column(self, col: int) -> bool:
        return 1 <= col <= self.marker_cols


def list_capacity(height: int) -> int:
    return max(1, height - CHROME_ROWS)


def ensure_cursor_visible(cursor_index: int | None, list_start: int, list_rows: int, entry_count: int) -> int:
    """Return a list offset that keeps ``cursor_index`` inside the window."""
    max_start = max(0, entry_count - list_rows)
    if cursor_index is None:
        return max(0, min(list_start, max_start))
    if cursor_index < list_start:
        return cursor_index
    if cursor_index >= list_start + list_rows:
        return cursor_index - list_rows + 1
    return max(0, min(list_start, max_start))


def _pad(text: str, width: int) -> str:
    gap = width - display_width(text)
    return text + (" " * gap) if gap > 0 else text


def _render_entry(entry: ListEntry, theme: UITheme, width: int, selected: bool) -> str:
    if entry.can_add_project:
        marker = f"{theme.add_project}{ADD_PROJECT_MARKER}{theme.reset} "
    elif entry.is_project:
        marker = f"{theme.project_marker}{PROJECT_MARKER}{theme.reset} "
    else:
        marker = " " * MARKER_COLS

    if entry.is_parent:
        label = f"{theme.parent_entry}{entry.label}{entry.path.sep}{theme.reset}"
        kind = ""
    elif entry.is_directory:
        label = f"{theme.directory}{entry.label}{entry.path.sep}{theme.reset}"
        kind = ""
    else:
        label = f"{theme.file}{entry.label}{theme.reset}"
        kind = file_kind_label(entry.label)

    body_width = width - MARKER_COLS
    if kind and display_width(entry.label) + len(kind) + 2 <= body_width:
        padding = body_width - display_width(entry.label) - len(kind)
        body = f"{label}{' ' * padding}{theme.kind_label}{kind}{theme.reset}"
    else:
        body = label

    if selected:
        plain_body = _pad(clip_ansi_line(body, body_width), body_width)
        return marker + f"{theme.reverse}{plain_body}{theme.reset}"
    return clip_ansi_line(marker + body, width)


def _status_text(navigation: NavigationState, theme: UITheme, message: str | None, message_is_error: bool) -> str:
    if message:
        color = theme.message_error if message_is_error else theme.message_success
        return f"{color}{message}{theme.reset}"
    if navigation.listing_pending:
        return f"{theme.info}listing…{theme.reset}"
    count = sum(1 for entry in navigation.entries if not entry.is_parent)
    noun = "match" if count == 1 else "matches"
    return f"{theme.info}{count} {noun}  tab complete  ^z undo  ^a add project  esc cancel{theme.reset}"


def render_picker(
    navigation: NavigationState,
    width: int,
    height: int,
    theme: UITheme,
    *,
    list_start: int = 0,
    message: str | None = None,
    message_is_error: bool = False,
) -> tuple[list[str], PickerLayout]:
    """Compose overlay lines for the current navigation state."""
    width = max(MARKER_COLS + 1, width)
    entries = navigation.entries
    capacity = list_capacity(height)
    list_start = ensure_cursor_visible(navigation.cursor_index, list_start, capacity, len(entries))
    window = entries[list_start : list_start + capacity]

    typed = clip_left(navigation.current_path.full, width - len(PROMPT_PREFIX) - 1)
    lines = [f"{theme.prompt}{PROMPT_PREFIX}{theme.reset}{theme.input_text}{typed}{theme.reset}_"]
    for offset, entry in enumerate(window):
        selected = navigation.cursor_index == list_start + offset
        lines.append(_render_entry(entry, theme, width, selected))
    lines.append(f"{theme.divider}{'─' * width}{theme.reset}")
    lines.append(clip_ansi_line(_status_text(navigation, theme, message, message_is_error), width))

    layout = PickerLayout(
        width=width,
        overlay_rows=len(lines),
        list_top_row=2,
        list_rows=len(window),
        list_start=list_start,
        entry_count=len(entries),
    )
    return lines, layout
