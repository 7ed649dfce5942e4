"""Calculator state.

The four values the keypad operates on, held as one immutable value.
A button press never edits a state in place: the dispatcher returns
a new one and the state manager swaps it in.
"""

from typing import NamedTuple


class CalculatorState(NamedTuple):
    """Snapshot of the calculator between two button presses."""

    current_text: str = "0"       # what the display shows
    previous_text: str = ""       # left operand, captured at operator press
    operator: str = ""            # pending binary operator, "" if none
    is_new_operation: bool = True  # next digit starts a fresh number

    def evolve(self, **changes) -> "CalculatorState":
        """Return a copy with the given fields replaced."""
        return self._replace(**changes)


INITIAL_STATE = CalculatorState()
