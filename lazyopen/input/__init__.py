"""Terminal input decoding and picker key dispatch."""

from __future__ import annotations

from .key_picker import COMMAND_KEYS, PickerKeyMap, build_picker_key_map, handle_picker_key
from .keys import read_key

__all__ = [
    "COMMAND_KEYS",
    "PickerKeyMap",
    "build_picker_key_map",
    "handle_picker_key",
    "read_key",
]
