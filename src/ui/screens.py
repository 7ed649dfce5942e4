"""Calculator screen rendering.

Draws the whole calculator (title, display, keypad) into a PIL image
from a CalculatorState. The host window only has to show the image.
"""

import logging
from PIL import Image, ImageDraw, ImageFont

from calc.state import CalculatorState
from ui.colors import build_theme
from ui.keypad import KeypadLayout

log = logging.getLogger("calcpad.ui.screens")

DEFAULT_WIDTH = 360
DEFAULT_HEIGHT = 600

# Vertical split of the screen
TITLE_FRACTION = 0.12
DISPLAY_FRACTION = 0.18

DISPLAY_PADDING = 12
DISPLAY_MAX_LINES = 2

FONT_BOLD = "/usr/share/fonts/truetype/dejavu/DejaVuSans-Bold.ttf"
FONT_REGULAR = "/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf"


class CalculatorScreen:
    """Renders the single calculator screen."""

    def __init__(self, width: int = DEFAULT_WIDTH, height: int = DEFAULT_HEIGHT,
                 theme: dict | None = None, title: str = "Calculator"):
        self.width = width
        self.height = height
        self.theme = theme or build_theme()
        self.title = title

        self._title_h = int(height * TITLE_FRACTION)
        self._display_h = int(height * DISPLAY_FRACTION)
        keypad_top = self._title_h + self._display_h
        self.keypad = KeypadLayout(0, keypad_top, width, height - keypad_top)

        self._font_title: ImageFont.FreeTypeFont | None = None
        self._font_display: ImageFont.FreeTypeFont | None = None
        self._font_key: ImageFont.FreeTypeFont | None = None
        self._load_fonts()

    def _load_fonts(self) -> None:
        title_size = max(10, self._title_h // 2)
        display_size = max(10, self._display_h // (DISPLAY_MAX_LINES + 1))
        key_size = max(10, self.keypad.height // 5 // 3)
        try:
            self._font_title = ImageFont.truetype(FONT_BOLD, title_size)
            self._font_display = ImageFont.truetype(FONT_REGULAR, display_size)
            self._font_key = ImageFont.truetype(FONT_BOLD, key_size)
        except OSError:
            log.warning("DejaVu fonts not found, using Pillow default font")
            self._font_title = ImageFont.load_default(title_size)
            self._font_display = ImageFont.load_default(display_size)
            self._font_key = ImageFont.load_default(key_size)

    def label_at(self, x: int, y: int) -> str | None:
        """Keypad label under a point on the rendered image."""
        return self.keypad.label_at(x, y)

    def render(self, state: CalculatorState) -> Image.Image:
        """Render the calculator for the given state."""
        img = Image.new("RGB", (self.width, self.height), self.theme["background"])
        draw = ImageDraw.Draw(img)

        self._draw_title(draw)
        self._draw_display(draw, state.current_text)
        self._draw_keypad(draw)

        return img

    def _draw_title(self, draw: ImageDraw.ImageDraw) -> None:
        _draw_centered(
            draw, (0, 0, self.width, self._title_h), self.title,
            self._font_title, self.theme["title_text"],
        )

    def _draw_display(self, draw: ImageDraw.ImageDraw, text: str) -> None:
        top = self._title_h
        bottom = top + self._display_h
        draw.rectangle([0, top, self.width - 1, bottom - 1], fill=self.theme["display_bg"])

        lines = self.display_lines(draw, text)
        line_h = self._display_h // DISPLAY_MAX_LINES
        # Bottom-aligned, right-aligned
        y = bottom - DISPLAY_PADDING // 2 - line_h * len(lines)
        for line in lines:
            x0, y0, x1, y1 = draw.textbbox((0, 0), line, font=self._font_display)
            x = self.width - DISPLAY_PADDING - (x1 - x0) - x0
            ty = y + (line_h - (y1 - y0)) // 2 - y0
            draw.text((x, ty), line, fill=self.theme["display_text"], font=self._font_display)
            y += line_h

    def display_lines(self, draw: ImageDraw.ImageDraw, text: str) -> list[str]:
        """Split display text into lines that fit the display width.

        At most DISPLAY_MAX_LINES lines are kept; for longer text the
        end of the number stays visible.
        """
        max_w = self.width - 2 * DISPLAY_PADDING
        lines: list[str] = []
        line = ""
        for ch in text:
            if line and draw.textlength(line + ch, font=self._font_display) > max_w:
                lines.append(line)
                line = ch
            else:
                line += ch
        lines.append(line)
        return lines[-DISPLAY_MAX_LINES:]

    def _draw_keypad(self, draw: ImageDraw.ImageDraw) -> None:
        for label, (x0, y0, x1, y1) in self.keypad.buttons():
            draw.rectangle(
                [x0, y0, x1 - 1, y1 - 1],
                fill=self.theme["key_bg"], outline=self.theme["key_border"],
            )
            _draw_centered(
                draw, (x0, y0, x1, y1), label, self._font_key, self.theme["key_text"],
            )


def _draw_centered(draw: ImageDraw.ImageDraw, box: tuple, text: str,
                   font: ImageFont.FreeTypeFont, fill: tuple) -> None:
    """Draw text centred in box (x0, y0, x1, y1)."""
    bx0, by0, bx1, by1 = box
    x0, y0, x1, y1 = draw.textbbox((0, 0), text, font=font)
    x = bx0 + (bx1 - bx0 - (x1 - x0)) // 2 - x0
    y = by0 + (by1 - by0 - (y1 - y0)) // 2 - y0
    draw.text((x, y), text, fill=fill, font=font)
