"""In-process transition-event bus with per-frame flush semantics."""
from __future__ import annotations

from typing import Callable

from wordfall import Event

_Handler = Callable[[Event], None]

ALL = "*"


class SignalBus:
    """Queues reducer events and dispatches them on ``flush()``.

    Handlers subscribe by signal name (``WordCompleted.signal`` etc.) or to
    ``ALL``. Events published while flushing wait for the next flush.
    """

    def __init__(self) -> None:
        self._subscribers: dict[str, list[_Handler]] = {}
        self._queue: list[Event] = []

    def subscribe(self, signal_name: str, handler: _Handler) -> None:
        self._subscribers.setdefault(signal_name, []).append(handler)

    def unsubscribe(self, signal_name: str, handler: _Handler) -> None:
        handlers = self._subscribers.get(signal_name)
        if handlers is None:
            return
        try:
            handlers.remove(handler)
        except ValueError:
            pass

    def publish(self, event: Event) -> None:
        self._queue.append(event)

    def pending(self) -> int:
        return len(self._queue)

    def flush(self) -> None:
        batch = self._queue
        self._queue = []
        for event in batch:
            for handler in self._subscribers.get(event.signal, []):
                handler(event)
            for handler in self._subscribers.get(ALL, []):
                handler(event)

    def clear(self) -> None:
        self._queue.clear()
