"""Listener list used by the in-memory stores to announce changes."""

from __future__ import annotations

import logging

from taskshelf.repositories import Listener

logger = logging.getLogger(__name__)


class ChangeNotifier:
    """Explicit subscriber list owned by a single store.

    Listeners are called in subscription order with no arguments. A listener
    that raises is logged and skipped so the others still hear about the
    change; the mutation that triggered it stays applied.
    """

    def __init__(self) -> None:
        self._listeners: list[Listener] = []

    def subscribe(self, listener: Listener) -> None:
        if listener not in self._listeners:
            self._listeners.append(listener)

    def unsubscribe(self, listener: Listener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    @property
    def listener_count(self) -> int:
        return len(self._listeners)

    def notify(self) -> None:
        # Copy so listeners may unsubscribe themselves while being called.
        for listener in list(self._listeners):
            try:
                listener()
            except Exception:
                logger.exception("change listener %r failed", listener)
