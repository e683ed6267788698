"""Picker runtime: configuration, navigation state, controller, and TUI loop."""

from __future__ import annotations

from .config import DefaultInputValue, PickerConfig, load_picker_config
from .controller import PickerController
from .events import PickerEvents
from .host import EditorHost, Notification, TerminalHost
from .listing import ListEntry, build_entries
from .navigation import NavigationState, PathHistory
from .prefetch import ListingScheduler

__all__ = [
    "DefaultInputValue",
    "EditorHost",
    "ListEntry",
    "ListingScheduler",
    "NavigationState",
    "Notification",
    "PathHistory",
    "PickerConfig",
    "PickerController",
    "PickerEvents",
    "TerminalHost",
    "build_entries",
    "load_picker_config",
]
