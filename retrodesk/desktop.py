"""Desktop: icons, live windows and the window manager they report to."""
from typing import Any, Callable, Dict, List, Optional

from PySide6.QtCore import QObject, Signal

from .catalog import Catalog
from .desktop_icon import DEFAULT_ICON_SIZE, DesktopIcon
from .drag import PointerStream
from .geometry import Rect, Size, Viewport, clamp_rect
from .taskbar import TaskbarModel
from .window import DEFAULT_MIN_SIZE, Window
from .window_manager import WindowManager

ContentFactory = Callable[[str], Any]


class Desktop(QObject):
    """Mediates between icons, windows, the taskbar and the window manager.

    Windows and icons never mutate the manager state themselves; their
    callbacks land here and are forwarded to :class:`WindowManager`.
    """

    changed = Signal()

    def __init__(
        self,
        viewport: Viewport,
        catalog: Optional[Catalog] = None,
        min_window_size: Size = DEFAULT_MIN_SIZE,
        icon_size: Size = DEFAULT_ICON_SIZE,
        content_factory: Optional[ContentFactory] = None,
        parent=None,
    ):
        super().__init__(parent)
        self.viewport = viewport
        self.catalog = catalog or Catalog()
        self.min_window_size = min_window_size
        self.content_factory = content_factory
        self.pointer = PointerStream(self)
        self.manager = WindowManager(self)
        self.taskbar = TaskbarModel(self.manager, self.catalog, on_reboot=self.reboot)
        self.selected_icon_id: Optional[str] = None
        self._windows: Dict[str, Window] = {}

        self.icons: List[DesktopIcon] = []
        for record in self.catalog.icons:
            icon = DesktopIcon(record, self.pointer, viewport, size=icon_size)
            icon.on_select = lambda icon_id=record.id: self.select_icon(icon_id)
            icon.on_open = lambda icon_id=record.id: self.open_icon(icon_id)
            icon.on_moved = lambda _position: self.changed.emit()
            self.icons.append(icon)

        self.manager.window_closed.connect(self._drop_window)
        self.manager.state_changed.connect(self.changed.emit)

    # === WINDOWS ===

    def window(self, window_id: str) -> Optional[Window]:
        return self._windows.get(window_id)

    def windows(self) -> List[Window]:
        """Live windows in stacking order (bottom first)."""
        return [self._windows[i] for i in self.manager.open_window_ids if i in self._windows]

    def visible_windows(self) -> List[Window]:
        """Live windows that actually render; minimized windows render nothing."""
        return [w for w in self.windows() if not self.manager.is_minimized(w.id)]

    def is_window_visible(self, window_id: str) -> bool:
        return self.manager.is_open(window_id) and not self.manager.is_minimized(window_id)

    def z_index_of(self, window_id: str) -> int:
        return self.manager.z_index_of(window_id)

    def _create_window(self, window_id: str) -> Optional[Window]:
        spec = self.catalog.window_spec(window_id)
        if spec is None:
            return None
        content = self.content_factory(window_id) if self.content_factory else None
        window = Window(
            id=spec.id,
            title=spec.title,
            icon=spec.icon,
            geometry=spec.initial_geometry,
            viewport=self.viewport,
            stream=self.pointer,
            min_size=self.min_window_size,
            content=content,
            on_close=lambda: self.close_window(window_id),
            on_focus=lambda: self.focus_window(window_id),
            on_minimize=lambda: self.minimize_window(window_id),
            on_geometry_changed=self._on_window_geometry,
        )
        # The default layout is sized for a large screen.
        window.reconcile_to_viewport(self.viewport)
        return window

    def _on_window_geometry(self, _rect: Rect) -> None:
        self.changed.emit()

    def _drop_window(self, window_id: str) -> None:
        window = self._windows.pop(window_id, None)
        if window is not None:
            window.end_interaction()

    def open_window(self, window_id: str) -> None:
        """Open a catalog window, or focus it when it is already open."""
        if window_id not in self._windows:
            window = self._create_window(window_id)
            if window is None:
                print(f"[WARN] Unknown window '{window_id}' - nothing to open")
                return
            self._windows[window_id] = window
        self.manager.open_window(window_id)

    def close_window(self, window_id: str) -> None:
        self.manager.close_window(window_id)

    def focus_window(self, window_id: str) -> None:
        self.manager.focus_window(window_id)

    def minimize_window(self, window_id: str) -> None:
        window = self._windows.get(window_id)
        if window is not None:
            window.end_interaction()
        self.manager.minimize_window(window_id)

    # === ICONS ===

    def icon(self, icon_id: str) -> Optional[DesktopIcon]:
        return next((icon for icon in self.icons if icon.id == icon_id), None)

    def select_icon(self, icon_id: str) -> None:
        """Select one icon exclusively."""
        if self.icon(icon_id) is None or self.selected_icon_id == icon_id:
            return
        self.selected_icon_id = icon_id
        self.changed.emit()

    def clear_selection(self) -> None:
        """Click on the empty desktop surface."""
        if self.selected_icon_id is None:
            return
        self.selected_icon_id = None
        self.changed.emit()

    def open_icon(self, icon_id: str) -> None:
        """Double-click: open the icon's window; decorative icons do nothing."""
        icon = self.icon(icon_id)
        if icon is None or icon.target_window_id is None:
            return
        self.open_window(icon.target_window_id)

    # === VIEWPORT ===

    def resize_viewport(self, width: float, height: float) -> None:
        """Hosting surface resized: pull icons and live windows back on screen."""
        viewport = Viewport(width, height, self.viewport.taskbar_height)
        self.viewport = viewport
        for icon in self.icons:
            icon.viewport = viewport
            icon.commit(clamp_rect(icon.current_geometry(), viewport.usable))
        for window in list(self._windows.values()):
            window.reconcile_to_viewport(viewport)
        self.changed.emit()

    def reboot(self) -> None:
        """Reset to the default layout: no windows, no selection, icons home."""
        print("[INFO] Rebooting desktop")
        for window in list(self._windows.values()):
            window.end_interaction()
        self._windows.clear()
        self.manager.reset()
        for icon in self.icons:
            icon.reset_position()
        self.selected_icon_id = None
        self.taskbar.close_start_menu()
        self.changed.emit()
