"""Desktop icon widget."""

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QLabel, QVBoxLayout, QWidget

from retrodesk.desktop_icon import DesktopIcon
from retrodesk.ui.icons import render_pixmap
from retrodesk.ui.pointer import PointerForwardingMixin, button_code, event_point, set_style_flag


class IconWidget(PointerForwardingMixin, QWidget):
    """Picture plus caption. Press drags, click selects, double-click opens.

    Accepting the mouse events keeps them from reaching the desktop surface,
    whose own press handler clears the selection.
    """

    def __init__(self, icon: DesktopIcon, parent=None):
        super().__init__(parent)
        self.model = icon
        self.pointer_stream = icon.stream
        self.setObjectName("DesktopIcon")
        self.setAttribute(Qt.WidgetAttribute.WA_StyledBackground, True)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(2, 2, 2, 2)
        layout.setSpacing(2)

        picture = QLabel()
        picture.setPixmap(render_pixmap(icon.record.icon, 48))
        picture.setAlignment(Qt.AlignmentFlag.AlignHCenter)
        layout.addWidget(picture)

        caption = QLabel(icon.label)
        caption.setObjectName("IconLabel")
        caption.setAlignment(Qt.AlignmentFlag.AlignHCenter)
        caption.setWordWrap(True)
        layout.addWidget(caption)

        self.sync(selected=False)

    def sync(self, selected: bool) -> None:
        rect = self.model.current_geometry()
        self.setGeometry(int(rect.x), int(rect.y), int(rect.width), int(rect.height))
        set_style_flag(self, "selected", selected)

    def mousePressEvent(self, event):
        self.model.press(event_point(event), button_code(event.button()))
        event.accept()

    def mouseReleaseEvent(self, event):
        super().mouseReleaseEvent(event)
        if event.button() == Qt.MouseButton.LeftButton:
            self.model.click()

    def mouseDoubleClickEvent(self, event):
        self.model.double_click()
        event.accept()
