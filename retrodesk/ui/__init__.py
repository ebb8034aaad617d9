"""PySide6 widgets rendering the desktop, its windows and the taskbar."""
