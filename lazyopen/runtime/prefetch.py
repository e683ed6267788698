"""Background match computation so slow directories never block typing."""

from __future__ import annotations

import logging
import threading
from collections.abc import Callable
from dataclasses import dataclass
from queue import Empty, Queue

from ..path_model import InputPath

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ListingRequest:
    """One match-computation job."""

    request_id: int
    path: InputPath
    generation: int = 0


@dataclass(frozen=True)
class ListingResult:
    """Completed matches for one request."""

    request: ListingRequest
    matches: list[InputPath]


class ListingScheduler:
    """Single-worker latest-request-wins scheduler.

    Requests queued while the worker is busy replace each other, so only the
    most recent path is computed next. Results are drained by the UI thread,
    which still has to discard results for paths that are no longer current.
    Results from before the last :meth:`advance_generation` call are dropped.
    """

    def __init__(self, compute_matches: Callable[[InputPath], list[InputPath]]) -> None:
        self._compute_matches = compute_matches
        self._lock = threading.Lock()
        self._pending: ListingRequest | None = None
        self._running = False
        self._next_request_id = 1
        self._generation = 0
        self._results: Queue[ListingResult] = Queue()

    def _worker(self) -> None:
        while True:
            with self._lock:
                request = self._pending
                self._pending = None
                if request is None:
                    self._running = False
                    return

            try:
                matches = self._compute_matches(request.path)
            except Exception:
                logger.exception("Listing failed for %r", request.path.full)
                matches = []
            self._results.put(ListingResult(request=request, matches=matches))

    def schedule(self, path: InputPath) -> int:
        """Queue (or replace) pending work for ``path`` and return its request id."""
        with self._lock:
            request_id = self._next_request_id
            self._next_request_id += 1
            self._pending = ListingRequest(request_id=request_id, path=path, generation=self._generation)
            if self._running:
                return request_id
            self._running = True

        worker = threading.Thread(
            target=self._worker,
            name="lazyopen-listing",
            daemon=True,
        )
        worker.start()
        return request_id

    def advance_generation(self) -> None:
        """Start a new session: pending work is cancelled and older results are dropped."""
        with self._lock:
            self._generation += 1
            self._pending = None

    def drain_results(self) -> list[ListingResult]:
        """Return completed results of the current generation without blocking."""
        with self._lock:
            generation = self._generation
        out: list[ListingResult] = []
        while True:
            try:
                result = self._results.get_nowait()
            except Empty:
                break
            if result.request.generation != generation:
                logger.debug("Dropping listing for %r from an earlier session", result.request.path.full)
                continue
            out.append(result)
        return out
