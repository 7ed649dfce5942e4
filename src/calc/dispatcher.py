"""Button press dispatcher.

Maps (state, button label) to the next calculator state. This is the
only place calculator behaviour lives; the UI just feeds it labels and
renders whatever comes back.
"""

import logging
import math

from calc import numbers
from calc.state import CalculatorState

log = logging.getLogger("calcpad.calc.dispatcher")

DIGITS = ("0", "1", "2", "3", "4", "5", "6", "7", "8", "9")
OPERATORS = ("+", "-", "*", "/", "%", "^")

CLEAR = "AC"
DECIMAL_POINT = "."
SQUARE_ROOT = "√"
RECIPROCAL = "1/x"
PI = "π"
EQUALS = "="

ERROR_TEXT = "Error"

ALL_LABELS = frozenset(
    DIGITS + OPERATORS + (CLEAR, DECIMAL_POINT, SQUARE_ROOT, RECIPROCAL, PI, EQUALS)
)


def press(state: CalculatorState, label: str) -> CalculatorState:
    """Return the state that results from pressing `label` in `state`."""
    if label in DIGITS:
        if state.is_new_operation or state.current_text == "0":
            text = label
        else:
            text = state.current_text + label
        return state.evolve(current_text=text, is_new_operation=False)

    if label in OPERATORS:
        # No folding: a second operator just recaptures the same operand
        return state.evolve(
            operator=label,
            previous_text=state.current_text,
            is_new_operation=True,
        )

    if label == CLEAR:
        # Pending operator and left operand are kept
        return state.evolve(current_text="0", is_new_operation=True)

    if label == DECIMAL_POINT:
        text = "" if state.is_new_operation else state.current_text
        if DECIMAL_POINT not in text:
            text += DECIMAL_POINT
        return state.evolve(current_text=text, is_new_operation=False)

    if label == SQUARE_ROOT:
        value = numbers.parse_number(state.current_text)
        if value is None:
            log.debug("√ ignored, not a number: %r", state.current_text)
            return state
        return state.evolve(
            current_text=numbers.format_number(numbers.square_root(value)),
            is_new_operation=True,
        )

    if label == RECIPROCAL:
        value = numbers.parse_number(state.current_text)
        if value is None:
            log.debug("1/x ignored, not a number: %r", state.current_text)
            return state
        if value == 0.0:
            text = ERROR_TEXT
        else:
            text = numbers.format_number(numbers.reciprocal(value))
        return state.evolve(current_text=text, is_new_operation=True)

    if label == PI:
        # Leaves is_new_operation alone, so a following digit appends
        return state.evolve(current_text=numbers.format_number(math.pi))

    if label == EQUALS:
        return _evaluate(state)

    log.debug("Unknown button label: %r", label)
    return state


def _evaluate(state: CalculatorState) -> CalculatorState:
    operand1 = numbers.parse_number(state.previous_text)
    operand2 = numbers.parse_number(state.current_text)
    if operand1 is None or operand2 is None:
        log.debug("= ignored, operands %r %r", state.previous_text, state.current_text)
        return state

    result = numbers.apply_operator(state.operator, operand1, operand2)
    log.debug("%r %s %r = %r", operand1, state.operator or "(none)", operand2, result)
    return state.evolve(
        current_text=numbers.format_number(result),
        is_new_operation=True,
    )


def press_sequence(state: CalculatorState, labels) -> CalculatorState:
    """Apply several presses in order and return the final state."""
    for label in labels:
        state = press(state, label)
    return state
