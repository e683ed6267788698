"""Key and mouse dispatch for the picker overlay."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

from ..path_model import InputPath

if TYPE_CHECKING:
    from ..render import PickerLayout
    from ..runtime.controller import PickerController

COMMAND_KEYS: tuple[tuple[tuple[str, ...], str], ...] = (
    (("ENTER",), "confirm"),
    (("ESC", "CTRL_C"), "cancel"),
    (("TAB",), "autocomplete"),
    (("CTRL_Z",), "undo"),
    (("DOWN",), "move-cursor-down"),
    (("UP",), "move-cursor-up"),
    (("HOME",), "move-cursor-top"),
    (("END",), "move-cursor-bottom"),
    (("CTRL_O",), "confirm-selected-or-first"),
    (("CTRL_W",), "delete-path-component"),
    (("CTRL_A",), "add-project-folder"),
)


class PickerKeyMap:
    """Dispatch table from key tokens to picker actions.

    Handlers return whether they handled the key; tokens with no binding
    fall through to the caller as ``None`` so it can treat them as text or
    mouse input.
    """

    def __init__(self) -> None:
        self._handlers: dict[str, Callable[[], bool]] = {}

    def bind(self, keys: tuple[str, ...], handler: Callable[[], bool]) -> PickerKeyMap:
        """Bind every token in ``keys`` to ``handler``, replacing older bindings."""
        for key in keys:
            self._handlers[key] = handler
        return self

    def bind_command(self, keys: tuple[str, ...], run: Callable[[str], bool], command: str) -> PickerKeyMap:
        """Bind ``keys`` to a named controller command."""
        return self.bind(keys, lambda: run(command))

    def dispatch(self, key: str) -> bool | None:
        handler = self._handlers.get(key)
        if handler is None:
            return None
        return handler()


def _parse_mouse_col_row(mouse_key: str) -> tuple[int | None, int | None]:
    parts = mouse_key.split(":")
    if len(parts) < 3:
        return None, None
    try:
        return int(parts[1]), int(parts[2])
    except ValueError:
        return None, None


def _edit_input(controller: PickerController, text: str) -> bool:
    controller.path_change(InputPath(text))
    return True


def build_picker_key_map(controller: PickerController) -> PickerKeyMap:
    """Bind command keys and input-editing keys for ``controller``."""
    key_map = PickerKeyMap()
    for keys, command in COMMAND_KEYS:
        key_map.bind_command(keys, controller.dispatch, command)
    key_map.bind(("BACKSPACE",), lambda: _edit_input(controller, controller.current_path.full[:-1]))
    key_map.bind(("CTRL_U",), lambda: _edit_input(controller, ""))
    return key_map


def _handle_mouse_click(controller: PickerController, mouse_key: str, layout: PickerLayout) -> None:
    col, row = _parse_mouse_col_row(mouse_key)
    if col is None or row is None:
        return
    if not layout.contains(col, row):
        controller.detach()
        return
    index = layout.entry_index_at(row)
    if index is None:
        return
    entry = controller.navigation.entries[index]
    if entry.can_add_project and layout.is_marker_column(col):
        controller.click_add_project_folder(entry.path.full)
        return
    controller.click_path(entry.path.full)


def handle_picker_key(
    controller: PickerController,
    key: str,
    layout: PickerLayout | None = None,
    key_map: PickerKeyMap | None = None,
) -> bool:
    """Handle one key token; returns whether the picker session has ended."""
    if not controller.attached:
        return True
    if key_map is None:
        key_map = build_picker_key_map(controller)

    if key_map.dispatch(key) is None:
        if key.startswith("MOUSE_WHEEL_UP:"):
            controller.move_cursor_up()
        elif key.startswith("MOUSE_WHEEL_DOWN:"):
            controller.move_cursor_down()
        elif key.startswith("MOUSE_LEFT_DOWN:"):
            if layout is not None:
                _handle_mouse_click(controller, key, layout)
        elif len(key) == 1 and key.isprintable():
            _edit_input(controller, controller.current_path.full + key)

    return not controller.attached
