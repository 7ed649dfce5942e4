"""Tk host window.

Shows the rendered calculator image and turns mouse taps on it into
"button_pressed" events on the application event bus.
"""

import logging
import tkinter as tk

from PIL import Image, ImageTk

from calc.state import CalculatorState
from core.event_bus import EventBus, BUTTON_PRESSED, STATE_CHANGED
from ui.screens import CalculatorScreen

log = logging.getLogger("calcpad.ui.window")

# Tk idles in C; wake the interpreter this often so signal handlers run
SIGNAL_POLL_MS = 200


class CalculatorWindow:
    """Manages the Tk window and its input/output."""

    def __init__(self, event_bus: EventBus, screen: CalculatorScreen,
                 title: str = "Calculator"):
        self.event_bus = event_bus
        self.screen = screen
        self.title = title
        self.root: tk.Tk | None = None
        self._image_label: tk.Label | None = None
        self._photo: ImageTk.PhotoImage | None = None
        self.event_bus.subscribe(STATE_CHANGED, self._on_state_changed)

    def open(self, state: CalculatorState) -> bool:
        """Create the window and show the first frame.

        Returns False if no display is available.
        """
        try:
            log.info("Opening window %dx%d", self.screen.width, self.screen.height)
            self.root = tk.Tk()
        except tk.TclError:
            log.exception("Could not open a window")
            return False

        self.root.title(self.title)
        self.root.resizable(False, False)
        self._image_label = tk.Label(self.root, borderwidth=0, highlightthickness=0)
        self._image_label.pack()
        self._image_label.bind("<Button-1>", self._on_click)
        self.show(state)
        self._poll_signals()
        return True

    def run(self) -> None:
        """Block in the Tk main loop until the window is closed."""
        if self.root is None:
            return
        self.root.mainloop()

    def stop(self) -> None:
        """Leave the main loop from outside a Tk callback (e.g. a signal handler)."""
        if self.root is not None:
            self.root.after(0, self.root.quit)

    def close(self) -> None:
        if self.root is not None:
            try:
                self.root.destroy()
            except tk.TclError:
                log.debug("Window already destroyed")
            self.root = None
            self._image_label = None
            log.info("Window closed")

    def show(self, state: CalculatorState) -> None:
        """Render the state and put the frame on screen."""
        try:
            frame = self.screen.render(state)
        except Exception:
            log.exception("Frame render error")
            return
        self.send_frame(frame)

    def send_frame(self, img: Image.Image) -> None:
        if self._image_label is None:
            return
        # Tk only keeps a weak hold on the image, keep our own reference
        self._photo = ImageTk.PhotoImage(img)
        self._image_label.configure(image=self._photo)

    def _poll_signals(self) -> None:
        if self.root is not None:
            self.root.after(SIGNAL_POLL_MS, self._poll_signals)

    def _on_click(self, event) -> None:
        label = self.screen.label_at(event.x, event.y)
        if label is None:
            return
        log.debug("Button pressed: %s", label)
        self.event_bus.publish(BUTTON_PRESSED, {"label": label})

    def _on_state_changed(self, data: dict) -> None:
        self.show(data["state"])

    @property
    def is_open(self) -> bool:
        return self.root is not None
