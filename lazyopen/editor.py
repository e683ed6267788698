"""Editor launch helper for paths opened from the picker.

Runs ``$EDITOR`` once the picker has released the terminal.
Returns an error message string instead of raising for CLI-friendly handling.
"""

from __future__ import annotations

import os
import shlex
import subprocess
from collections.abc import Sequence


def launch_editor(paths: Sequence[str]) -> str | None:
    editor_env = os.environ.get("EDITOR", "").strip()
    if not editor_env:
        return "Cannot edit: $EDITOR is not set."
    cmd = shlex.split(editor_env)
    if not cmd:
        return "Cannot edit: $EDITOR is empty."

    try:
        subprocess.run([*cmd, *paths], check=False)
    except OSError as exc:
        return f"Failed to launch editor: {exc}"
    return None
