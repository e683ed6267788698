"""Incremental match engine: list a directory and filter it by fragment."""

from __future__ import annotations

import logging

from ..filesystem import DirectoryChild, FileSystem, PathStat
from ..path_model import InputPath, PathResolver
from .cache import SessionCache
from .fuzzy import fuzzy_filter
from .ignore import IgnoreFilter

logger = logging.getLogger(__name__)


def match_fragment(fragment: str, filename: str, case_sensitive: bool = False) -> bool:
    """Return whether ``filename`` starts with ``fragment``."""
    if not case_sensitive:
        fragment = fragment.lower()
        filename = filename.lower()
    return filename.startswith(fragment)


class MatchEngine:
    """Compute candidate paths for typed input.

    Stat lookups, directory listings, and match results are memoised in the
    session cache passed in by the owner.
    """

    def __init__(
        self,
        filesystem: FileSystem,
        resolver: PathResolver,
        cache: SessionCache,
        *,
        fuzzy_match: bool = False,
        ignore_filter: IgnoreFilter | None = None,
    ) -> None:
        self.filesystem = filesystem
        self.resolver = resolver
        self.cache = cache
        self.fuzzy_match = fuzzy_match
        self.ignore_filter = ignore_filter if ignore_filter is not None else IgnoreFilter()

    # stat lookups
    def stat(self, path: InputPath) -> PathStat | None:
        absolute = path.absolute(self.resolver)
        return self.cache.stats.get_or_compute(absolute, lambda: self.filesystem.stat(absolute))

    def exists(self, path: InputPath) -> bool:
        return self.stat(path) is not None

    def is_directory(self, path: InputPath) -> bool | None:
        """Return ``True``/``False`` for existing paths and ``None`` when absent."""
        result = self.stat(path)
        return result.is_directory if result is not None else None

    def is_file(self, path: InputPath) -> bool | None:
        result = self.stat(path)
        return not result.is_directory if result is not None else None

    # listing
    def list_directory(self, path: InputPath) -> list[DirectoryChild] | None:
        """Return the children of ``path.directory`` or ``None`` if unreadable."""
        absolute_directory = path.absolute_directory(self.resolver)
        generation = self.cache.current_generation()

        def load() -> list[DirectoryChild] | None:
            children, scan_error = self.filesystem.list_directory(absolute_directory)
            if scan_error is not None:
                return None
            for child in children:
                child_absolute = self.resolver.absolute(path.directory + child.name)
                stat = PathStat(is_directory=child.is_directory) if child.exists else None
                self.cache.stats.setdefault(child_absolute, stat, generation=generation)
            return children

        return self.cache.listings.get_or_compute(absolute_directory, load)

    def get_matching_paths(self, path: InputPath, case_sensitive: bool | None = None) -> list[InputPath]:
        """Return entries of ``path.directory`` matching ``path.fragment``.

        Prefix matching is case-sensitive only when the fragment holds an
        uppercase letter, unless ``case_sensitive`` overrides it. Fuzzy mode
        returns relevance order; prefix mode keeps listing order. Ignored
        names and children that cannot be stat'ed never appear, and
        unreadable directories yield ``[]``.
        """
        if case_sensitive is None:
            case_sensitive = path.has_case_sensitive_fragment()
        absolute_directory = path.absolute_directory(self.resolver)
        key = (absolute_directory, path.fragment, case_sensitive, self.fuzzy_match)

        def compute() -> list[str]:
            children = self.list_directory(path)
            if children is None:
                logger.debug("No matches for %r: directory unreadable", path.full)
                return []
            names = [child.name for child in children if child.exists]
            if path.fragment:
                if self.fuzzy_match:
                    names = fuzzy_filter(path.fragment, names)
                else:
                    names = [name for name in names if match_fragment(path.fragment, name, case_sensitive)]
            return self.ignore_filter.filter(names)

        names = self.cache.matches.get_or_compute(key, compute)
        return [InputPath(path.directory + name) for name in names]
