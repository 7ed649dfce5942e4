"""Number parsing, double-precision arithmetic and display text.

The calculator works on IEEE-754 doubles and shows results in their
default textual form: integral values keep a trailing ".0", very large
or very small magnitudes switch to "1.0E7" style notation, and the
special values render as NaN / Infinity / -Infinity.

Arithmetic goes through numpy float64 so that division by zero,
overflow and domain errors produce Infinity/NaN instead of raising.
"""

import logging
import math
import re
from decimal import Decimal

import numpy as np

log = logging.getLogger("calcpad.calc.numbers")

NAN_TEXT = "NaN"
INFINITY_TEXT = "Infinity"

# Plain decimal notation is used for magnitudes in [1e-3, 1e7)
PLAIN_MIN = 1e-3
PLAIN_MAX = 1e7

_NUMBER_RE = re.compile(
    r"[+-]?(?:NaN|Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)"
)


def parse_number(text: str) -> float | None:
    """Parse display text as a double, or return None if it isn't one.

    Accepts "5", "-2.5", "5.", ".5", "1.0E-4", "NaN" and "Infinity".
    Rejects "", ".", "Error" and anything with whitespace or underscores.
    """
    if not _NUMBER_RE.fullmatch(text):
        return None
    return float(text)


def format_number(value: float) -> str:
    """Render a double the way the display shows it."""
    if math.isnan(value):
        return NAN_TEXT
    if math.isinf(value):
        return INFINITY_TEXT if value > 0 else "-" + INFINITY_TEXT

    magnitude = abs(value)
    if magnitude == 0.0 or PLAIN_MIN <= magnitude < PLAIN_MAX:
        # repr never switches to exponent form inside this range
        return repr(float(value))

    # Shortest round-tripping digits, re-laid out as d.dddE<exp>
    sign, digits, exponent = Decimal(repr(float(value))).normalize().as_tuple()
    digits = "".join(str(d) for d in digits)
    adjusted = exponent + len(digits) - 1
    mantissa = digits[0] + "." + (digits[1:] or "0")
    return f"{'-' if sign else ''}{mantissa}E{adjusted}"


def _f64(value: float) -> np.float64:
    return np.float64(value)


def add(a: float, b: float) -> float:
    with np.errstate(all="ignore"):
        return float(_f64(a) + _f64(b))


def subtract(a: float, b: float) -> float:
    with np.errstate(all="ignore"):
        return float(_f64(a) - _f64(b))


def multiply(a: float, b: float) -> float:
    with np.errstate(all="ignore"):
        return float(_f64(a) * _f64(b))


def divide(a: float, b: float) -> float:
    """a / b; x/0 is signed Infinity and 0/0 is NaN."""
    with np.errstate(all="ignore"):
        return float(np.divide(_f64(a), _f64(b)))


def remainder(a: float, b: float) -> float:
    """Truncated floating remainder, sign follows the dividend."""
    with np.errstate(all="ignore"):
        return float(np.fmod(_f64(a), _f64(b)))


def power(base: float, exponent: float) -> float:
    """base raised to exponent.

    Unlike C pow, a NaN exponent always gives NaN, and so does
    (+/-1) raised to an infinite exponent.
    """
    if math.isnan(exponent):
        return math.nan
    if math.isinf(exponent) and abs(base) == 1.0:
        return math.nan
    with np.errstate(all="ignore"):
        return float(np.power(_f64(base), _f64(exponent)))


def square_root(value: float) -> float:
    """Square root; negative input gives NaN."""
    with np.errstate(all="ignore"):
        return float(np.sqrt(_f64(value)))


def reciprocal(value: float) -> float:
    return divide(1.0, value)


BINARY_OPERATIONS = {
    "*": multiply,
    "/": divide,
    "+": add,
    "-": subtract,
    "^": power,
    "%": remainder,
}


def apply_operator(operator: str, operand1: float, operand2: float) -> float:
    """Apply a pending binary operator.

    An empty or unknown operator leaves the right operand as the result.
    """
    operation = BINARY_OPERATIONS.get(operator)
    if operation is None:
        log.debug("No operator pending (%r), result is right operand", operator)
        return operand2
    return operation(operand1, operand2)
