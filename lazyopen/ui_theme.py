"""UI theme definitions and selection helpers.

Themes are ANSI palettes for the picker overlay: prompt, candidate rows,
markers, and notification lines.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by the overlay renderer."""

    name: str
    divider: str
    reverse: str
    reset: str
    info: str
    prompt: str
    input_text: str
    directory: str
    file: str
    parent_entry: str
    kind_label: str
    project_marker: str
    add_project: str
    message_success: str
    message_error: str


DEFAULT_THEME = UITheme(
    name="default",
    divider="\033[2m",
    reverse="\033[7m",
    reset="\033[0m",
    info="\033[2;38;5;250m",
    prompt="\033[1;38;5;81m",
    input_text="\033[38;5;252m",
    directory="\033[1;34m",
    file="\033[38;5;252m",
    parent_entry="\033[2;38;5;250m",
    kind_label="\033[38;5;109m",
    project_marker="\033[38;5;44m",
    add_project="\033[38;5;42m",
    message_success="\033[38;5;42m",
    message_error="\033[1;38;5;203m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    divider="\033[2;38;5;31m",
    reverse="\033[7m",
    reset="\033[0m",
    info="\033[2;38;5;110m",
    prompt="\033[1;38;5;45m",
    input_text="\033[38;5;153m",
    directory="\033[1;38;5;45m",
    file="\033[38;5;252m",
    parent_entry="\033[2;38;5;110m",
    kind_label="\033[38;5;73m",
    project_marker="\033[38;5;39m",
    add_project="\033[38;5;84m",
    message_success="\033[38;5;84m",
    message_error="\033[1;38;5;209m",
)

PLAIN_THEME = UITheme(
    name="plain",
    divider="",
    reverse="",
    reset="",
    info="",
    prompt="",
    input_text="",
    directory="",
    file="",
    parent_entry="",
    kind_label="",
    project_marker="",
    add_project="",
    message_success="",
    message_error="",
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable non-plain theme names."""
    return tuple(sorted(_THEMES.keys()))


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to default."""
    if not name:
        return DEFAULT_THEME.name
    candidate = str(name).strip().lower()
    if candidate in _THEMES:
        return candidate
    return DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]


__all__ = [
    "UITheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
]
