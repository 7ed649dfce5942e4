import logging
import sys
import os


def setup_logging(level: str = None) -> logging.Logger:
    """Configure logging for the calcpad application."""
    log_level = level or os.environ.get("LOG_LEVEL", "INFO")
    numeric_level = getattr(logging, log_level.upper(), logging.INFO)

    formatter = logging.Formatter(
        fmt="%(asctime)s [%(levelname)-8s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter)

    root = logging.getLogger("calcpad")
    root.setLevel(numeric_level)
    # Calling twice (tests, re-launch) must not stack handlers
    for old in list(root.handlers):
        root.removeHandler(old)
    root.addHandler(handler)
    root.propagate = False

    logging.basicConfig(level=logging.WARNING)

    # Pillow logs every font/plugin lookup at debug
    for name in ("PIL", "PIL.Image", "PIL.PngImagePlugin"):
        logging.getLogger(name).setLevel(logging.WARNING)

    return root
