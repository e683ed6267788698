"""Session-scoped caches for stat results, listings, and match results.

One :class:`SessionCache` belongs to one picker session. Entries are never
invalidated on external filesystem changes; the whole cache is cleared when
the session closes. Clearing starts a new generation, and values computed
against an older generation are not stored.
"""

from __future__ import annotations

import threading
from collections.abc import Callable
from typing import Generic, TypeVar

from ..filesystem import DirectoryChild, PathStat

K = TypeVar("K")
V = TypeVar("V")

# Distinguishes "cached as None" from "not cached".
_MISSING = object()


class _LockedMap(Generic[K, V]):
    """Dictionary guarded by the owning cache's lock."""

    def __init__(self, owner: SessionCache) -> None:
        self._owner = owner
        self._data: dict[K, V] = {}

    def get_or_compute(self, key: K, compute: Callable[[], V]) -> V:
        with self._owner.lock:
            cached = self._data.get(key, _MISSING)
            generation = self._owner.generation
        if cached is not _MISSING:
            return cached  # type: ignore[return-value]
        value = compute()
        self.setdefault(key, value, generation=generation)
        return value

    def setdefault(self, key: K, value: V, *, generation: int | None = None) -> None:
        """Store ``value`` unless ``key`` is cached or ``generation`` is stale."""
        with self._owner.lock:
            if generation is not None and generation != self._owner.generation:
                return
            self._data.setdefault(key, value)

    def __contains__(self, key: object) -> bool:
        with self._owner.lock:
            return key in self._data

    def __len__(self) -> int:
        with self._owner.lock:
            return len(self._data)

    def _clear(self) -> None:
        self._data.clear()


MatchKey = tuple[str, str, bool, bool]


class SessionCache:
    """Caches shared by the match engine during one picker session.

    - ``stats``: absolute path -> :class:`PathStat` or ``None``
    - ``listings``: absolute directory -> children (``None`` when unreadable)
    - ``matches``: ``(directory, fragment, case_sensitive, fuzzy)`` -> names
    """

    def __init__(self) -> None:
        self.lock = threading.Lock()
        self.generation = 0
        self.stats: _LockedMap[str, PathStat | None] = _LockedMap(self)
        self.listings: _LockedMap[str, list[DirectoryChild] | None] = _LockedMap(self)
        self.matches: _LockedMap[MatchKey, list[str]] = _LockedMap(self)

    def current_generation(self) -> int:
        with self.lock:
            return self.generation

    def clear(self) -> None:
        """Drop every cached entry and start a new generation."""
        with self.lock:
            self.generation += 1
            self.stats._clear()
            self.listings._clear()
            self.matches._clear()
