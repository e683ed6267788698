"""Outward notifications emitted by a picker session."""

from __future__ import annotations

from collections.abc import Callable

PathCallback = Callable[[str], None]


class PickerEvents:
    """Publish interface hosts subscribe to for open/create notifications.

    Each ``on_*`` method returns a callable that removes the subscription.
    """

    def __init__(self) -> None:
        self._open_callbacks: list[PathCallback] = []
        self._create_callbacks: list[PathCallback] = []

    @staticmethod
    def _subscribe(callbacks: list[PathCallback], callback: PathCallback) -> Callable[[], None]:
        callbacks.append(callback)

        def unsubscribe() -> None:
            if callback in callbacks:
                callbacks.remove(callback)

        return unsubscribe

    def on_did_open_path(self, callback: PathCallback) -> Callable[[], None]:
        return self._subscribe(self._open_callbacks, callback)

    def on_did_create_path(self, callback: PathCallback) -> Callable[[], None]:
        return self._subscribe(self._create_callbacks, callback)

    def emit_did_open_path(self, absolute_path: str) -> None:
        for callback in list(self._open_callbacks):
            callback(absolute_path)

    def emit_did_create_path(self, absolute_path: str) -> None:
        for callback in list(self._create_callbacks):
            callback(absolute_path)
