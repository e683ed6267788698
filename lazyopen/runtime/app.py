"""Interactive picker session loop.

Coordinates background listing results, rendering, and input dispatch.
Feature logic lives in the controller; this module only wires it to a tty.
"""

from __future__ import annotations

import logging
import shutil
import sys
from dataclasses import dataclass

from ..input import build_picker_key_map, handle_picker_key, read_key
from ..render import PickerLayout, render_picker
from ..terminal import TerminalController
from ..ui_theme import UITheme
from .controller import PickerController
from .host import TerminalHost

logger = logging.getLogger(__name__)

POLL_TIMEOUT_MS = 50


@dataclass
class _FrameState:
    list_start: int = 0
    layout: PickerLayout | None = None
    seen_beeps: int = 0
    size: tuple[int, int] | None = None


def _latest_message(host: TerminalHost) -> tuple[str | None, bool]:
    notification = host.latest_notification()
    if notification is None:
        return None, False
    return notification.format(), notification.level == "error"


def run_picker(
    controller: PickerController,
    host: TerminalHost,
    theme: UITheme,
    *,
    stdin_fd: int | None = None,
    stdout_fd: int | None = None,
) -> None:
    """Attach ``controller`` and drive it from the terminal until it detaches."""
    if stdin_fd is None:
        stdin_fd = sys.stdin.fileno()
    if stdout_fd is None:
        stdout_fd = sys.stdout.fileno()

    terminal = TerminalController(stdin_fd, stdout_fd)
    key_map = build_picker_key_map(controller)
    frame = _FrameState(seen_beeps=host.beeps)
    controller.attach()
    dirty = True
    logger.debug("Picker attached at %r", controller.current_path.full)

    with terminal.raw_mode():
        while controller.attached:
            if controller.drain_listings():
                dirty = True

            term = shutil.get_terminal_size((80, 24))
            if (term.columns, term.lines) != frame.size:
                frame.size = (term.columns, term.lines)
                dirty = True

            if dirty:
                message, is_error = _latest_message(host)
                lines, frame.layout = render_picker(
                    controller.navigation,
                    term.columns,
                    term.lines,
                    theme,
                    list_start=frame.list_start,
                    message=message,
                    message_is_error=is_error,
                )
                frame.list_start = frame.layout.list_start
                terminal.write_frame(lines)
                dirty = False

            key = read_key(stdin_fd, timeout_ms=POLL_TIMEOUT_MS)
            if not key:
                continue

            if handle_picker_key(controller, key, frame.layout, key_map):
                break
            if host.beeps != frame.seen_beeps:
                frame.seen_beeps = host.beeps
                terminal.bell()
            dirty = True

    logger.debug("Picker closed with %d opened path(s)", len(host.opened_paths))
