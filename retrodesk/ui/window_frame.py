"""Window chrome widget: title bar, controls, body and status bar."""

from PySide6.QtCore import QEvent, Qt
from PySide6.QtWidgets import QFrame, QHBoxLayout, QLabel, QPushButton, QVBoxLayout, QWidget

from retrodesk.geometry import in_resize_grip
from retrodesk.window import Window
from retrodesk.ui.icons import render_pixmap
from retrodesk.ui.pointer import PointerForwardingMixin, button_code, event_point, set_style_flag


class _TitleBar(PointerForwardingMixin, QWidget):
    """Press starts a move session; controls are plain buttons on top."""

    def __init__(self, window: Window, pointer_stream, parent=None):
        super().__init__(parent)
        self.model = window
        self.pointer_stream = pointer_stream
        self.setObjectName("TitleBar")
        self.setAttribute(Qt.WidgetAttribute.WA_StyledBackground, True)

        layout = QHBoxLayout(self)
        layout.setContentsMargins(3, 2, 3, 2)
        layout.setSpacing(3)

        if window.icon:
            icon_label = QLabel()
            icon_label.setPixmap(render_pixmap(window.icon, 16))
            layout.addWidget(icon_label)

        self.title_label = QLabel(window.title)
        self.title_label.setObjectName("TitleText")
        layout.addWidget(self.title_label, 1)

        self.minimize_button = QPushButton("_")
        self.minimize_button.setAccessibleName("Minimize")
        self.minimize_button.clicked.connect(window.minimize)
        self.maximize_button = QPushButton("□")
        self.maximize_button.setAccessibleName("Maximize")
        self.maximize_button.clicked.connect(window.toggle_maximize)
        self.close_button = QPushButton("×")
        self.close_button.setAccessibleName("Close")
        self.close_button.clicked.connect(window.close)
        for button in (self.minimize_button, self.maximize_button, self.close_button):
            button.setFocusPolicy(Qt.FocusPolicy.NoFocus)
            layout.addWidget(button)

    def mousePressEvent(self, event):
        self.model.request_focus()
        self.model.begin_move(event_point(event), button_code(event.button()))
        event.accept()


class WindowFrame(PointerForwardingMixin, QFrame):
    """Renders one :class:`Window`; geometry always comes from the model."""

    def __init__(self, window: Window, pointer_stream, parent=None):
        super().__init__(parent)
        self.model = window
        self.setObjectName("WindowFrame")

        layout = QVBoxLayout(self)
        layout.setContentsMargins(2, 2, 2, 2)
        layout.setSpacing(2)

        self.title_bar = _TitleBar(window, pointer_stream, self)
        layout.addWidget(self.title_bar)

        self.body = QWidget()
        self.body.setObjectName("WindowBody")
        self.body.setAttribute(Qt.WidgetAttribute.WA_StyledBackground, True)
        body_layout = QVBoxLayout(self.body)
        body_layout.setContentsMargins(4, 4, 4, 4)
        body_layout.addWidget(self._content_widget(window))
        layout.addWidget(self.body, 1)
        self._watch_for_focus(self.body)

        self.status_bar = QLabel("Ready")
        self.status_bar.setObjectName("StatusBar")
        layout.addWidget(self.status_bar)

        self.pointer_stream = pointer_stream
        self.sync()

    @staticmethod
    def _content_widget(window: Window) -> QWidget:
        # Content is opaque; anything that is not a widget gets a placeholder.
        if isinstance(window.content, QWidget):
            return window.content
        label = QLabel(window.title if window.content is None else str(window.content))
        label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        return label

    def _watch_for_focus(self, widget: QWidget) -> None:
        widget.installEventFilter(self)
        for child in widget.findChildren(QWidget):
            child.installEventFilter(self)

    def eventFilter(self, watched, event):
        # Content widgets accept their own presses; observe without consuming.
        if event.type() == QEvent.Type.MouseButtonPress:
            self.model.request_focus()
        elif event.type() == QEvent.Type.ChildAdded and event.child().isWidgetType():
            self._watch_for_focus(event.child())
        return super().eventFilter(watched, event)

    def sync(self, active: bool = False) -> None:
        """Pull geometry and focus highlight from the model."""
        rect = self.model.geometry
        self.setGeometry(int(rect.x), int(rect.y), int(rect.width), int(rect.height))
        set_style_flag(self.title_bar, "active", active)

    def mousePressEvent(self, event):
        # Any click on the body raises the window; the corner also resizes.
        self.model.request_focus()
        pos = event.position()
        if in_resize_grip(pos.x(), pos.y(), self.width(), self.height()):
            self.model.begin_resize(event_point(event), button_code(event.button()))
        event.accept()
