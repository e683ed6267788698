"""Typed picker configuration loaded from a JSON file.

The config file lives under the platform config directory. Loading is
defensive: a missing or malformed file, or a wrongly-typed value, falls back
to the default for that key.
"""

from __future__ import annotations

import enum
import json
import logging
from dataclasses import dataclass, replace
from pathlib import Path

from platformdirs import user_config_dir

logger = logging.getLogger(__name__)

APP_NAME = "lazyopen"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME

DEFAULT_IGNORED_PATTERNS = ("*.pyc", "*.pyo")


class DefaultInputValue(enum.Enum):
    """What the path input shows when the picker opens."""

    ACTIVE_FILE_DIRECTORY = "Active file's directory"
    PROJECT_ROOT = "Project root"
    EMPTY = "Empty"


@dataclass(frozen=True)
class PickerConfig:
    """Settings consumed by the match engine, navigation, and open flow."""

    create_directories: bool = False
    create_file_instantly: bool = False
    helm_dir_switch: bool = False
    default_input_value: DefaultInputValue = DefaultInputValue.ACTIVE_FILE_DIRECTORY
    fuzzy_match: bool = False
    ignored_patterns: tuple[str, ...] = DEFAULT_IGNORED_PATTERNS

    def with_overrides(self, **overrides: object) -> PickerConfig:
        """Return a copy with every non-``None`` override applied."""
        applied = {key: value for key, value in overrides.items() if value is not None}
        return replace(self, **applied)


def load_config_data(config_path: Path | None = None) -> dict[str, object]:
    """Load the raw JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    not a top-level JSON object.
    """
    path = CONFIG_PATH if config_path is None else config_path
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except (OSError, ValueError) as exc:
        logger.warning("Ignoring unreadable config %s: %s", path, exc)
        return {}
    if not isinstance(data, dict):
        logger.warning("Ignoring config %s: top-level value is not an object", path)
        return {}
    return data


def _coerce_bool(value: object, default: bool) -> bool:
    """Accept only real JSON booleans."""
    return value if isinstance(value, bool) else default


def _coerce_default_input(value: object) -> DefaultInputValue:
    """Accept enum values (``"Project root"``) or names (``"PROJECT_ROOT"``)."""
    if isinstance(value, str):
        for choice in DefaultInputValue:
            if value == choice.value or value.upper() == choice.name:
                return choice
    return DefaultInputValue.ACTIVE_FILE_DIRECTORY


def _coerce_patterns(value: object) -> tuple[str, ...]:
    """Keep non-empty string globs; non-list values fall back to defaults."""
    if not isinstance(value, list):
        return DEFAULT_IGNORED_PATTERNS
    return tuple(item for item in value if isinstance(item, str) and item)


def config_from_data(data: dict[str, object]) -> PickerConfig:
    """Build a :class:`PickerConfig` from raw JSON data."""
    return PickerConfig(
        create_directories=_coerce_bool(data.get("createDirectories"), False),
        create_file_instantly=_coerce_bool(data.get("createFileInstantly"), False),
        helm_dir_switch=_coerce_bool(data.get("helmDirSwitch"), False),
        default_input_value=_coerce_default_input(data.get("defaultInputValue")),
        fuzzy_match=_coerce_bool(data.get("fuzzyMatch"), False),
        ignored_patterns=_coerce_patterns(data.get("ignoredPatterns", list(DEFAULT_IGNORED_PATTERNS))),
    )


def load_picker_config(config_path: Path | None = None) -> PickerConfig:
    """Load picker settings from ``config_path`` (default: platform config dir)."""
    return config_from_data(load_config_data(config_path))
