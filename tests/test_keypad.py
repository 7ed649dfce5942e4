"""Tests for the keypad layout."""

import pytest

from calc.dispatcher import ALL_LABELS
from ui.keypad import KeypadLayout, KEYPAD_LABELS, ROWS


class TestKeypadLabels:
    def test_rows(self):
        assert [len(row) for row in ROWS] == [5, 5, 5, 5, 2]
        assert ROWS[0] == ["AC", ".", "%", "/", "√"]
        assert ROWS[-1] == ["0", "="]

    def test_every_label_is_dispatchable(self):
        assert len(KEYPAD_LABELS) == 22
        assert set(KEYPAD_LABELS) == ALL_LABELS


class TestKeypadLayout:
    @pytest.fixture
    def layout(self):
        return KeypadLayout(0, 100, 300, 500)

    def test_each_button_hits_itself(self, layout):
        for label, (x0, y0, x1, y1) in layout.buttons():
            assert layout.label_at((x0 + x1) // 2, (y0 + y1) // 2) == label
            assert layout.label_at(x0, y0) == label
            assert layout.label_at(x1 - 1, y1 - 1) == label

    def test_buttons_in_row_order(self, layout):
        assert [label for label, _ in layout.buttons()] == KEYPAD_LABELS

    def test_grid_geometry(self, layout):
        assert layout.rect("AC") == (0, 100, 60, 200)
        assert layout.rect("√") == (240, 100, 300, 200)
        assert layout.rect("π") == (240, 400, 300, 500)

    def test_last_row_buttons_are_wide(self, layout):
        assert layout.rect("0") == (0, 500, 150, 600)
        assert layout.rect("=") == (150, 500, 300, 600)

    def test_miss_outside_keypad(self, layout):
        assert layout.label_at(10, 50) is None
        assert layout.label_at(150, 600) is None
        assert layout.label_at(300, 150) is None

    def test_uneven_size_has_no_gaps(self):
        layout = KeypadLayout(0, 0, 101, 53)
        for x in range(101):
            for y in range(53):
                assert layout.label_at(x, y) is not None
