"""Main entry point for RetroDesk."""
import argparse
import signal
import sys
from pathlib import Path
from typing import Optional, Tuple

from .config import (
    icon_size_from_config,
    load_config,
    min_window_size_from_config,
    viewport_from_config,
)


def _parse_size(value: str) -> Tuple[int, int]:
    """Parse ``WIDTHxHEIGHT`` (e.g. ``1280x800``)."""
    try:
        width, height = (int(part) for part in value.lower().split("x", 1))
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected WIDTHxHEIGHT, got {value!r}")
    if width <= 0 or height <= 0:
        raise argparse.ArgumentTypeError(f"size must be positive, got {value!r}")
    return width, height


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="RetroDesk - a retro desktop shell with draggable windows"
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to config.toml (defaults to ./config.toml or the user config dir)"
    )
    parser.add_argument(
        "--theme",
        choices=["dark", "light"],
        default=None,
        help="Override the configured theme"
    )
    parser.add_argument(
        "--size",
        type=_parse_size,
        default=None,
        help="Initial desktop size as WIDTHxHEIGHT"
    )
    return parser


def main(argv: Optional[list] = None) -> None:
    """Main entry point."""
    args = _build_parser().parse_args(argv)

    try:
        config = load_config(path=args.config, raise_on_error=args.config is not None)
    except Exception as e:
        print(f"[ERR] Invalid config: {e}")
        sys.exit(1)

    if args.theme:
        config["ui"]["theme"] = args.theme
    if args.size:
        config["viewport"]["width"], config["viewport"]["height"] = args.size

    try:
        from PySide6.QtCore import QTimer
        from PySide6.QtWidgets import QApplication

        from .desktop import Desktop
        from .ui.desktop_view import DesktopView
        from .ui.styles import apply_theme

        app = QApplication.instance() or QApplication(sys.argv[:1])
        app.setApplicationName("RetroDesk")
        apply_theme(app, config["ui"]["theme"])

        desktop = Desktop(
            viewport=viewport_from_config(config),
            min_window_size=min_window_size_from_config(config),
            icon_size=icon_size_from_config(config),
        )
        view = DesktopView(desktop)
        view.setWindowTitle("RetroDesk")
        view.show()

        # Keep terminal Ctrl+C usable while Qt event loop is running.
        def _handle_signal(*_args):
            app.quit()

        signal.signal(signal.SIGINT, _handle_signal)
        if hasattr(signal, "SIGTERM"):
            signal.signal(signal.SIGTERM, _handle_signal)

        signal_pump = QTimer()
        signal_pump.timeout.connect(lambda: None)
        signal_pump.start(200)

        print("[OK] RetroDesk started")
        exit_code = app.exec()
        sys.exit(exit_code)

    except KeyboardInterrupt:
        print("\n[INFO] Interrupted by user")
    except Exception as e:
        print(f"\n[ERR] Fatal error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
