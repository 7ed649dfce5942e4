import logging
from typing import Any, Callable

log = logging.getLogger("calcpad.event_bus")

# Event types
BUTTON_PRESSED = "button_pressed"   # data: {"label": str}
STATE_CHANGED = "state_changed"     # data: {"state": CalculatorState, "label": str}


class EventBus:
    """Synchronous publish/subscribe event system.

    Decouples keypad input from the calculator state and from display
    rendering. Callbacks run in subscription order on the caller's
    thread; an exception in one callback is logged and does not stop
    the others.
    """

    def __init__(self):
        self._subscribers: dict[str, list[Callable]] = {}

    def subscribe(self, event_type: str, callback: Callable) -> None:
        self._subscribers.setdefault(event_type, []).append(callback)
        log.debug("Subscribed to '%s': %s", event_type, _name(callback))

    def unsubscribe(self, event_type: str, callback: Callable) -> None:
        if event_type in self._subscribers:
            self._subscribers[event_type] = [
                cb for cb in self._subscribers[event_type] if cb != callback
            ]

    def publish(self, event_type: str, data: Any = None) -> None:
        # Copy so callbacks may (un)subscribe while we iterate
        for callback in list(self._subscribers.get(event_type, [])):
            try:
                callback(data)
            except Exception:
                log.exception(
                    "Error in event handler for '%s': %s",
                    event_type,
                    _name(callback),
                )

    def subscriber_count(self, event_type: str) -> int:
        return len(self._subscribers.get(event_type, []))


def _name(callback: Callable) -> str:
    return getattr(callback, "__name__", repr(callback))
