"""Application-level calculator state holder."""

import logging

from calc.dispatcher import press
from calc.state import CalculatorState, INITIAL_STATE
from core.event_bus import EventBus, BUTTON_PRESSED, STATE_CHANGED

log = logging.getLogger("calcpad.state_manager")


class StateManager:
    """Owns the current CalculatorState.

    The only writer of calculator state: each button press runs through
    the dispatcher, and the result replaces the held state. Subscribers
    learn about changes via the "state_changed" event.
    """

    def __init__(self, event_bus: EventBus | None = None,
                 initial: CalculatorState = INITIAL_STATE):
        self.event_bus = event_bus
        self._state = initial
        if event_bus is not None:
            event_bus.subscribe(BUTTON_PRESSED, self._on_button_pressed)

    @property
    def state(self) -> CalculatorState:
        return self._state

    def press(self, label: str) -> CalculatorState:
        """Apply one button press and return the new state."""
        old = self._state
        new = press(old, label)
        if new == old:
            log.debug("Press %r: no change", label)
            return old

        self._state = new
        log.debug("Press %r: %s", label, new)
        if self.event_bus:
            self.event_bus.publish(STATE_CHANGED, {"state": new, "label": label})
        return new

    def _on_button_pressed(self, data: dict) -> None:
        self.press(data["label"])
