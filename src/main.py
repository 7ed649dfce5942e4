#!/usr/bin/env python3
"""calcpad — main entry point.

Wires the calculator together and runs the Tk event loop:
  1. Keypad taps are published as "button_pressed"
  2. The state manager runs each press through the dispatcher
  3. Every "state_changed" re-renders the window
"""

import signal
import sys
import os
import logging

# Add src/ to path so imports work when running directly
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from config import load_config
from core.logging_config import setup_logging
from core.event_bus import EventBus
from core.state_manager import StateManager
from ui.colors import build_theme
from ui.screens import CalculatorScreen
from ui.window import CalculatorWindow

log = logging.getLogger("calcpad.main")


class CalculatorApp:
    """Main application."""

    def __init__(self, config: dict):
        self.config = config
        self.event_bus = EventBus()

        # Calculator state (subscribes to button presses)
        self.state = StateManager(event_bus=self.event_bus)

        window_cfg = config.get("window", {})
        theme_cfg = config.get("theme", {})
        title = window_cfg.get("title", "Calculator")
        self.screen = CalculatorScreen(
            width=window_cfg.get("width", 360),
            height=window_cfg.get("height", 600),
            theme=build_theme(theme_cfg.get("name", "default"), theme_cfg.get("colors")),
            title=title,
        )
        self.window = CalculatorWindow(self.event_bus, self.screen, title=title)

    def run(self) -> int:
        """Open the window and block until it is closed."""
        if not self.window.open(self.state.state):
            log.error("No display available. Is DISPLAY set?")
            return 1

        log.info("Ready!")
        try:
            self.window.run()
        finally:
            self.shutdown()
        return 0

    def shutdown(self) -> None:
        """Clean shutdown."""
        log.info("Shutting down...")
        self.window.close()
        log.info("Shutdown complete")


def main() -> None:
    setup_logging()
    log.info("=== calcpad ===")

    config = load_config()
    app = CalculatorApp(config)

    def signal_handler(signum, frame):
        log.info("Signal received, stopping...")
        app.window.stop()

    for sig in (signal.SIGINT, signal.SIGTERM):
        signal.signal(sig, signal_handler)

    sys.exit(app.run())


if __name__ == "__main__":
    main()
