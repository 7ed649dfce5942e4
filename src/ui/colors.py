"""Calculator colour palettes."""

import logging

log = logging.getLogger("calcpad.ui.colors")

# Roles every palette defines
COLOR_ROLES = (
    "background", "title_text", "display_bg", "display_text",
    "key_bg", "key_border", "key_text",
)

PALETTES = {
    # Cyan keys under a light purple display
    "default": {
        "background": (255, 255, 255),
        "title_text": (33, 33, 33),
        "display_bg": (187, 134, 252),
        "display_text": (33, 33, 33),
        "key_bg": (0, 188, 212),
        "key_border": (44, 47, 50),
        "key_text": (33, 33, 33),
    },
    "dark": {
        "background": (0, 0, 0),
        "title_text": (220, 220, 220),
        "display_bg": (30, 30, 30),
        "display_text": (255, 120, 0),
        "key_bg": (40, 40, 40),
        "key_border": (80, 80, 80),
        "key_text": (220, 220, 220),
    },
}


def parse_hex_color(value: str) -> tuple[int, int, int]:
    """Parse '#RRGGBB' (or 'RRGGBB') into an RGB tuple."""
    text = value.strip().lstrip("#")
    if len(text) != 6:
        raise ValueError(f"Not a #RRGGBB colour: {value!r}")
    try:
        return tuple(int(text[i:i + 2], 16) for i in (0, 2, 4))
    except ValueError:
        raise ValueError(f"Not a #RRGGBB colour: {value!r}") from None


def build_theme(name: str = "default", overrides: dict | None = None) -> dict:
    """Resolve a palette by name and apply per-role hex overrides.

    Unknown palette names fall back to "default"; bad overrides are
    skipped with a warning.
    """
    if name not in PALETTES:
        log.warning("Unknown theme %r, using default", name)
        name = "default"
    theme = dict(PALETTES[name])

    for role, value in (overrides or {}).items():
        if role not in COLOR_ROLES:
            log.warning("Unknown colour role %r in theme overrides", role)
            continue
        try:
            theme[role] = parse_hex_color(str(value))
        except ValueError as e:
            log.warning("%s, keeping palette %s", e, role)

    return theme
