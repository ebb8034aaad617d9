"""Configuration loading for RetroDesk (TOML with built-in defaults)."""
import copy
import os
import sys
import tomllib
from pathlib import Path
from typing import Any, Dict, List, Optional

from .desktop_icon import ICON_HEIGHT, ICON_WIDTH
from .geometry import Size, Viewport
from .window import MIN_HEIGHT, MIN_WIDTH

CONFIG_FILENAME = "config.toml"

DEFAULT_CONFIG: Dict[str, Any] = {
    "viewport": {
        "width": 1920,
        "height": 1080,
    },
    "taskbar": {
        "height": 40,
    },
    "window": {
        "min_width": MIN_WIDTH,
        "min_height": MIN_HEIGHT,
    },
    "icons": {
        "width": ICON_WIDTH,
        "height": ICON_HEIGHT,
    },
    "ui": {
        "theme": "light",
    },
}

VALID_THEMES = {"dark", "light"}


def get_platform_config_dir() -> Path:
    """Return the per-user config directory for this platform."""
    if sys.platform == "win32":
        base = os.environ.get("APPDATA")
        root = Path(base) if base else Path.home() / "AppData" / "Roaming"
    elif sys.platform == "darwin":
        root = Path.home() / "Library" / "Application Support"
    else:
        base = os.environ.get("XDG_CONFIG_HOME")
        root = Path(base) if base else Path.home() / ".config"
    return root / "retrodesk"


def _config_dirs() -> List[Path]:
    """Directories searched for config.toml, in priority order."""
    return [Path.cwd(), get_platform_config_dir()]


def _find_config_path() -> Optional[Path]:
    for directory in _config_dirs():
        candidate = directory / CONFIG_FILENAME
        if candidate.exists():
            return candidate
    return None


def get_config_path() -> Optional[Path]:
    """Return the config file that would be loaded, if any."""
    return _find_config_path()


def _merge_configs(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """Recursively merge ``overrides`` into a copy of ``base``."""
    result = copy.deepcopy(base)
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(result.get(key), dict):
            result[key] = _merge_configs(result[key], value)
        else:
            result[key] = value
    return result


def _validate(config: Dict[str, Any]) -> None:
    for section, key in (
        ("viewport", "width"),
        ("viewport", "height"),
        ("taskbar", "height"),
        ("window", "min_width"),
        ("window", "min_height"),
        ("icons", "width"),
        ("icons", "height"),
    ):
        value = config[section][key]
        if isinstance(value, bool) or not isinstance(value, (int, float)) or value < 0:
            raise ValueError(f"[{section}] {key} must be a non-negative number, got {value!r}")

    theme = config["ui"]["theme"]
    if theme not in VALID_THEMES:
        raise ValueError(f"[ui] theme must be one of {sorted(VALID_THEMES)}, got {theme!r}")


def load_config(
    path: Optional[Path] = None,
    quiet: bool = False,
    raise_on_error: bool = False,
) -> Dict[str, Any]:
    """Load config.toml merged over the defaults.

    Args:
        path: Explicit config file. When None the search directories are used.
        quiet: Suppress the console notices.
        raise_on_error: Propagate parse/validation errors instead of falling
            back to the defaults.
    """
    config_path = Path(path) if path is not None else _find_config_path()
    if config_path is None:
        if not quiet:
            print("[INFO] No config.toml found - using default configuration")
        return copy.deepcopy(DEFAULT_CONFIG)

    try:
        with config_path.open("rb") as fh:
            overrides = tomllib.load(fh)
        config = _merge_configs(DEFAULT_CONFIG, overrides)
        _validate(config)
    except (OSError, tomllib.TOMLDecodeError, TypeError, ValueError) as exc:
        if raise_on_error:
            raise
        if not quiet:
            print(f"[WARN] Failed to load {config_path}: {exc}")
            print("[INFO] Using default configuration")
        return copy.deepcopy(DEFAULT_CONFIG)

    if not quiet:
        print(f"[INFO] Loaded config from {config_path}")
    return config


def viewport_from_config(config: Dict[str, Any]) -> Viewport:
    return Viewport(
        width=config["viewport"]["width"],
        height=config["viewport"]["height"],
        taskbar_height=config["taskbar"]["height"],
    )


def min_window_size_from_config(config: Dict[str, Any]) -> Size:
    return Size(config["window"]["min_width"], config["window"]["min_height"])


def icon_size_from_config(config: Dict[str, Any]) -> Size:
    return Size(config["icons"]["width"], config["icons"]["height"])
