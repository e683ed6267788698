"""Immutable model of the path string typed into the picker.

An :class:`InputPath` splits its text into a ``directory`` (everything up to
and including the last separator) and a ``fragment`` (the segment being
typed). All operations are pure string logic; anything that needs an absolute
path takes a :class:`~lazyopen.path_model.resolver.PathResolver`.
"""

from __future__ import annotations

import os
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from .resolver import PathResolver
from .separators import dirname, flavour_for, preferred_separator_for, with_trailing_separator

if TYPE_CHECKING:
    from ..runtime.config import PickerConfig
    from ..runtime.host import EditorHost

# Last segments that cannot be stripped textually; parents continue from the
# absolute form instead.
_OPAQUE_SEGMENTS = frozenset({"", ".", "..", "~"})


class InvalidArgumentError(ValueError):
    """Raised when a path helper is called with arguments it cannot use."""


@dataclass(frozen=True, init=False)
class InputPath:
    """Typed path split into ``directory`` + ``fragment``.

    ``directory + fragment == full`` always holds, and ``fragment`` is empty
    exactly when ``full`` is empty or ends in ``sep``.
    """

    full: str
    directory: str = field(compare=False)
    fragment: str = field(compare=False)
    sep: str = field(compare=False)

    def __init__(self, full: str = "") -> None:
        sep = preferred_separator_for(full)
        fragment = full.split(sep)[-1]
        object.__setattr__(self, "full", full)
        object.__setattr__(self, "directory", full[: len(full) - len(fragment)])
        object.__setattr__(self, "fragment", fragment)
        object.__setattr__(self, "sep", sep)

    @classmethod
    def parse(cls, text: str) -> InputPath:
        """Parse ``text`` into an :class:`InputPath`."""
        return cls(text)

    def __str__(self) -> str:
        return self.full

    def absolute(self, resolver: PathResolver) -> str:
        """Return the absolute form of this path."""
        return resolver.absolute(self.full)

    def absolute_directory(self, resolver: PathResolver) -> str:
        """Return the absolute form of :attr:`directory`."""
        return resolver.absolute(self.directory)

    def is_root(self, resolver: PathResolver) -> bool:
        """Return whether this path resolves to a filesystem root."""
        absolute = self.absolute(resolver)
        return flavour_for(self.sep).dirname(absolute) == absolute

    def is_project_directory(self, resolver: PathResolver) -> bool:
        return resolver.is_project_directory(self.absolute(resolver))

    def has_case_sensitive_fragment(self) -> bool:
        """Return whether the fragment contains an uppercase character."""
        return self.fragment != "" and self.fragment != self.fragment.lower()

    def as_directory(self) -> InputPath:
        """Return this path with a trailing separator (no-op for directories)."""
        if not self.fragment:
            return self
        return InputPath(self.full + self.sep)

    def parent(self, resolver: PathResolver) -> InputPath:
        """Return the path one component up; root is its own parent."""
        if self.is_root(resolver):
            return self
        if self.fragment:
            return InputPath(self.directory)

        stripped = self.directory.rstrip(self.sep)
        last = stripped.split(self.sep)[-1]
        if last in _OPAQUE_SEGMENTS:
            absolute = self.absolute(resolver)
            return InputPath(with_trailing_separator(dirname(absolute, self.sep), self.sep))
        return InputPath(stripped[: len(stripped) - len(last)])

    def root(self, resolver: PathResolver) -> InputPath:
        """Return the root of the drive/filesystem this path lives on."""
        flavour = flavour_for(self.sep)
        previous = None
        current = self.absolute(resolver)
        while current != previous:
            previous = current
            current = flavour.dirname(current)
        return InputPath(current)

    def has_shortcut(self, token: str) -> bool:
        """Return whether the input ends with the ``token`` directory shortcut.

        ``":/"`` and ``"/foo/bar/:/"`` carry the ``":"`` shortcut, while
        ``"/foo/bar:/"`` and ``"/blah/:"`` do not.
        """
        shortcut = token + self.sep
        return not self.fragment and (
            self.directory.endswith(self.sep + shortcut) or self.directory == shortcut
        )

    def equals(self, other: InputPath) -> bool:
        return self.full == other.full

    def sort_key(self) -> tuple[str, str]:
        """Return a case-insensitive ordering key with a stable tiebreak."""
        return (self.full.casefold(), self.full)

    @staticmethod
    def compare(first: InputPath, second: InputPath) -> int:
        """Three-way comparison of two paths in display order."""
        first_key = first.sort_key()
        second_key = second.sort_key()
        if first_key < second_key:
            return -1
        if first_key > second_key:
            return 1
        return 0

    @staticmethod
    def common_prefix(paths: Sequence[InputPath], case_sensitive: bool = False) -> InputPath:
        """Return the longest common prefix of ``paths``.

        Only the lexicographically first and last strings need comparing,
        since they bound every other string. Case-insensitive prefixes are
        emitted in lowercase where the bounds differ only by case.
        """
        if len(paths) < 2:
            raise InvalidArgumentError("Cannot find common prefix for lists shorter than two elements.")

        texts = sorted(path.full for path in paths)
        first = texts[0]
        last = texts[-1]

        prefix: list[str] = []
        for first_ch, last_ch in zip(first, last):
            if first_ch == last_ch:
                prefix.append(first_ch)
            elif not case_sensitive and first_ch.lower() == last_ch.lower():
                prefix.append(first_ch.lower())
            else:
                break
        return InputPath("".join(prefix))

    @staticmethod
    def initial(config: PickerConfig, host: EditorHost) -> InputPath:
        """Return the path shown in the input when the picker opens."""
        from ..runtime.config import DefaultInputValue

        choice = config.default_input_value
        if choice is DefaultInputValue.ACTIVE_FILE_DIRECTORY:
            document_path = host.active_document_path()
            if document_path:
                return InputPath(os.path.dirname(document_path) + os.sep)
        if choice in (DefaultInputValue.ACTIVE_FILE_DIRECTORY, DefaultInputValue.PROJECT_ROOT):
            project_paths = host.project_paths()
            if project_paths:
                return InputPath(project_paths[0] + os.sep)
        return InputPath("")
