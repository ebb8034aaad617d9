"""Design tokens - single source of truth for all design values.

These tokens define the retro desktop look. They are substituted into the QSS
templates by the theme loader so every widget shares the same values.
"""

# Color Palette - Light Theme (classic grey chrome on a teal desktop)
COLORS_LIGHT = {
    # Surfaces
    "DESKTOP_BG": "#008080",      # Desktop wallpaper
    "FACE": "#c0c0c0",            # Window/taskbar face
    "FACE_LIGHT": "#ffffff",      # Bevel highlight
    "FACE_SHADOW": "#808080",     # Bevel shadow
    "FACE_DARK": "#000000",       # Outer bevel
    "BODY_BG": "#ffffff",         # Window content area

    # Title bars
    "TITLE_ACTIVE_BG": "#000080",
    "TITLE_ACTIVE_TEXT": "#ffffff",
    "TITLE_INACTIVE_BG": "#808080",
    "TITLE_INACTIVE_TEXT": "#c0c0c0",

    # Text
    "TEXT_PRIMARY": "#000000",
    "TEXT_ON_DESKTOP": "#ffffff",
    "TEXT_SELECTED": "#ffffff",

    # Selection
    "SELECTION_BG": "#000080",
}

# Color Palette - Dark Theme (same layout, night-time palette)
COLORS_DARK = {
    "DESKTOP_BG": "#10242c",
    "FACE": "#2b2f36",
    "FACE_LIGHT": "#4a505a",
    "FACE_SHADOW": "#1a1d22",
    "FACE_DARK": "#000000",
    "BODY_BG": "#1d2026",

    "TITLE_ACTIVE_BG": "#2f73e4",
    "TITLE_ACTIVE_TEXT": "#ffffff",
    "TITLE_INACTIVE_BG": "#3a3f48",
    "TITLE_INACTIVE_TEXT": "#8b98ad",

    "TEXT_PRIMARY": "#edf2fb",
    "TEXT_ON_DESKTOP": "#edf2fb",
    "TEXT_SELECTED": "#ffffff",

    "SELECTION_BG": "#2f73e4",
}

# Typography
FONTS = {
    "FAMILY_PRIMARY": "'MS Sans Serif', Tahoma, 'Segoe UI', Arial, sans-serif",
    "FAMILY_MONOSPACE": "'Courier New', Consolas, monospace",
    "SIZE_BODY": "12px",
    "SIZE_SMALL": "11px",
    "WEIGHT_NORMAL": "400",
    "WEIGHT_BOLD": "700",
}

# Chrome metrics (px)
METRICS = {
    "TITLE_BAR_HEIGHT": "22px",
    "STATUS_BAR_HEIGHT": "20px",
    "TASKBAR_HEIGHT": "40px",
    "BEVEL": "2px",
    "CONTROL_SIZE": "16px",
}


def get_tokens(theme: str = "light") -> dict:
    """Get all design tokens for a specific theme.

    Args:
        theme: Theme name ("dark" or "light")

    Returns:
        Dictionary containing all design tokens merged together
    """
    colors = COLORS_DARK if theme == "dark" else COLORS_LIGHT
    return {
        **colors,
        **FONTS,
        **METRICS,
    }
