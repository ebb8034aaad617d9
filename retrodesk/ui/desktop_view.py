"""Top-level desktop surface hosting icons, window frames and the taskbar."""

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QWidget

from retrodesk.desktop import Desktop
from retrodesk.ui.icon_widget import IconWidget
from retrodesk.ui.taskbar_widget import TaskbarWidget
from retrodesk.ui.window_frame import WindowFrame


class DesktopView(QWidget):
    """Renders a :class:`Desktop` and feeds pointer input back into it.

    The view owns no layout state: after every change it re-reads geometry,
    visibility and stacking order from the model.
    """

    def __init__(self, desktop: Desktop, parent=None):
        super().__init__(parent)
        self.desktop = desktop
        self.pointer_stream = desktop.pointer
        self.setObjectName("Desktop")
        self.setAttribute(Qt.WidgetAttribute.WA_StyledBackground, True)
        self.setMouseTracking(False)

        self.icon_widgets = [IconWidget(icon, self) for icon in desktop.icons]
        self.frames: dict[str, WindowFrame] = {}
        self.taskbar = TaskbarWidget(desktop.taskbar, self)

        viewport = desktop.viewport
        self.resize(int(viewport.width), int(viewport.height))
        desktop.changed.connect(self.refresh)
        self.refresh()

    def refresh(self) -> None:
        """Sync every child widget with the desktop model."""
        desktop = self.desktop
        manager = desktop.manager

        for icon_widget in self.icon_widgets:
            icon_widget.sync(selected=desktop.selected_icon_id == icon_widget.model.id)

        live = {window.id: window for window in desktop.windows()}
        for window_id in list(self.frames):
            if window_id not in live:
                self.frames.pop(window_id).deleteLater()
        for window_id, window in live.items():
            if window_id not in self.frames:
                self.frames[window_id] = WindowFrame(window, self.pointer_stream, self)

        # Raising in z-index order leaves the topmost window last.
        for window_id in sorted(self.frames, key=manager.z_index_of):
            frame = self.frames[window_id]
            frame.sync(active=manager.is_active(window_id))
            frame.setVisible(desktop.is_window_visible(window_id))
            frame.raise_()

        viewport = desktop.viewport
        self.taskbar.setGeometry(
            0,
            int(viewport.height - viewport.taskbar_height),
            int(viewport.width),
            int(viewport.taskbar_height),
        )
        self.taskbar.raise_()
        self.taskbar.sync()

    def resizeEvent(self, event):
        super().resizeEvent(event)
        size = event.size()
        viewport = self.desktop.viewport
        if (size.width(), size.height()) != (viewport.width, viewport.height):
            self.desktop.resize_viewport(size.width(), size.height())
        else:
            self.refresh()

    def mousePressEvent(self, event):
        # Empty surface: deselect icons and dismiss the start menu.
        self.desktop.clear_selection()
        if self.desktop.taskbar.start_menu_open:
            self.desktop.taskbar.close_start_menu()
            self.refresh()
        event.accept()
