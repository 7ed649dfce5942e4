"""Keypad layout and tap hit-testing.

Five fixed rows of buttons. Buttons in a row split the row width
evenly, so the two buttons of the last row are wider than the rest.
"""

import logging

log = logging.getLogger("calcpad.ui.keypad")

ROWS = [
    ["AC", ".", "%", "/", "√"],
    ["7", "8", "9", "*", "^"],
    ["4", "5", "6", "+", "1/x"],
    ["1", "2", "3", "-", "π"],
    ["0", "="],
]

KEYPAD_LABELS = [label for row in ROWS for label in row]


class KeypadLayout:
    """Button rectangles for a keypad drawn in a given area.

    Rectangles are (x0, y0, x1, y1) with x1/y1 exclusive, tiling the
    area with no gaps.
    """

    def __init__(self, x: int, y: int, width: int, height: int, rows=None):
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        self.rows = rows or ROWS
        self._rects: dict[str, tuple[int, int, int, int]] = {}
        self._compute()

    def _compute(self) -> None:
        n_rows = len(self.rows)
        for r, row in enumerate(self.rows):
            y0 = self.y + r * self.height // n_rows
            y1 = self.y + (r + 1) * self.height // n_rows
            for c, label in enumerate(row):
                x0 = self.x + c * self.width // len(row)
                x1 = self.x + (c + 1) * self.width // len(row)
                self._rects[label] = (x0, y0, x1, y1)

    def rect(self, label: str) -> tuple[int, int, int, int]:
        return self._rects[label]

    def buttons(self):
        """Iterate (label, rect) in row order."""
        return iter(self._rects.items())

    def label_at(self, px: int, py: int) -> str | None:
        """Label of the button under a tap, or None if the tap missed."""
        for label, (x0, y0, x1, y1) in self._rects.items():
            if x0 <= px < x1 and y0 <= py < y1:
                return label
        log.debug("Tap at (%d, %d) hit no button", px, py)
        return None
