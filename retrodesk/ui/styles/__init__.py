"""Theme system for the RetroDesk UI."""
from .utils import apply_theme, build_stylesheet, clear_cache

__all__ = ["apply_theme", "build_stylesheet", "clear_cache"]
