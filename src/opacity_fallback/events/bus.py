"""Synchronous event bus the transform publishes rewrite events to."""

from __future__ import annotations

from collections import Counter
from typing import Any, Callable

Listener = Callable[[Any], None]


class EventBus:
    """Publish-subscribe bus with per-type and catch-all listeners.

    Events are dispatched synchronously: catch-all listeners first, then the
    listeners registered for the event's exact type, each in registration
    order.  The bus also counts emitted events by type name.
    """

    def __init__(self) -> None:
        self._listeners: dict[type, list[Listener]] = {}
        self._global_listeners: list[Listener] = []
        self.counts: Counter[str] = Counter()

    def subscribe(self, event_type: type, callback: Listener) -> None:
        self._listeners.setdefault(event_type, []).append(callback)

    def on_all(self, callback: Listener) -> None:
        self._global_listeners.append(callback)

    def emit(self, event: Any) -> None:
        self.counts[type(event).__name__] += 1
        for cb in self._global_listeners:
            cb(event)
        for cb in self._listeners.get(type(event), []):
            cb(event)


class EventRecorder:
    """Listener that keeps every event it receives, for summaries and tests."""

    def __init__(self, bus: EventBus | None = None) -> None:
        self.events: list[Any] = []
        if bus is not None:
            bus.on_all(self)

    def __call__(self, event: Any) -> None:
        self.events.append(event)

    def of_type(self, event_type: type) -> list[Any]:
        return [e for e in self.events if isinstance(e, event_type)]
