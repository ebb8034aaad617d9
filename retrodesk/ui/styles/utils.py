"""Stylesheet assembly for the desktop.

``desktop.qss`` carries ``{{TOKEN}}`` placeholders that are filled from
:mod:`tokens` per theme; the result is cached per theme.
"""

import re
import warnings
from pathlib import Path

from .tokens import get_tokens

STYLES_DIR = Path(__file__).parent
DESKTOP_QSS = "desktop.qss"

_TOKEN_PATTERN = re.compile(r"\{\{([A-Z_]+)\}\}")

_qss_cache: dict[str, str] = {}


def load_qss(filename: str) -> str:
    """Read a stylesheet shipped next to this module.

    Raises:
        FileNotFoundError: If there is no such stylesheet
    """
    qss_path = STYLES_DIR / filename
    if not qss_path.exists():
        raise FileNotFoundError(f"QSS file not found: {qss_path}")
    return qss_path.read_text(encoding="utf-8")


def replace_tokens(qss: str, theme: str = "light") -> str:
    """Fill ``{{TOKEN}}`` placeholders for a theme.

    ``"background-color: {{DESKTOP_BG}};"`` becomes
    ``"background-color: #008080;"`` in the light theme. Unknown tokens are
    left in place and reported with a single warning.
    """
    tokens = get_tokens(theme)
    unknown = set()

    def _substitute(match):
        name = match.group(1)
        if name not in tokens:
            unknown.add(name)
            return match.group(0)
        return tokens[name]

    filled = _TOKEN_PATTERN.sub(_substitute, qss)
    if unknown:
        warnings.warn(f"Missing theme tokens: {', '.join(sorted(unknown))}", stacklevel=2)
    return filled


def build_stylesheet(theme: str = "light") -> str:
    """Return the complete desktop stylesheet for a theme (cached)."""
    cached = _qss_cache.get(theme)
    if cached is None:
        cached = _qss_cache[theme] = replace_tokens(load_qss(DESKTOP_QSS), theme)
    return cached


def apply_theme(app, theme: str = "light") -> None:
    """Apply the desktop theme to a QApplication (or any QWidget)."""
    app.setStyleSheet(build_stylesheet(theme))


def clear_cache() -> None:
    _qss_cache.clear()
