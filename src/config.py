import os
import logging
from pathlib import Path

import yaml
from dotenv import load_dotenv

log = logging.getLogger("calcpad.config")

# Project root is one level up from src/
PROJECT_ROOT = Path(__file__).resolve().parent.parent
CONFIG_DIR = PROJECT_ROOT / "config"


def load_config(config_path: str = None, env_file: str = None) -> dict:
    """Load configuration from YAML file with .env overrides."""
    load_dotenv(Path(env_file) if env_file else PROJECT_ROOT / ".env")

    yaml_path = Path(config_path) if config_path else CONFIG_DIR / "default.yaml"
    if not yaml_path.exists():
        log.warning("Config file not found: %s — using defaults", yaml_path)
        config = {}
    else:
        with open(yaml_path, encoding="utf-8") as f:
            config = yaml.safe_load(f) or {}

    # Environment variable overrides
    window = config.setdefault("window", {})
    window["title"] = os.environ.get("CALCPAD_TITLE", window.get("title", "Calculator"))
    window["width"] = int(os.environ.get("CALCPAD_WIDTH", window.get("width", 360)))
    window["height"] = int(os.environ.get("CALCPAD_HEIGHT", window.get("height", 600)))
    if window["width"] <= 0 or window["height"] <= 0:
        raise ValueError(
            f"Window size must be positive, got {window['width']}x{window['height']}"
        )

    theme = config.setdefault("theme", {})
    theme["name"] = os.environ.get("CALCPAD_THEME", theme.get("name", "default"))
    theme["colors"] = theme.get("colors") or {}

    log.info(
        "Config loaded — window %dx%d, theme %s",
        window["width"],
        window["height"],
        theme["name"],
    )
    return config
