"""Taskbar widget: start button/menu, minimized-window buttons and a clock."""

from PySide6.QtCore import QSize, QTimer
from PySide6.QtWidgets import QFrame, QHBoxLayout, QLabel, QPushButton, QVBoxLayout, QWidget

from retrodesk.taskbar import TaskbarModel
from retrodesk.ui.icons import render_icon
from retrodesk.ui.pointer import set_style_flag

CLOCK_INTERVAL_MS = 1000


class StartMenu(QFrame):
    """Popup shown above the start button; only offers Reboot."""

    def __init__(self, model: TaskbarModel, parent=None):
        super().__init__(parent)
        self.setObjectName("StartMenu")
        layout = QVBoxLayout(self)
        layout.setContentsMargins(4, 4, 4, 4)
        layout.addStretch(1)

        self.reboot_button = QPushButton(render_icon("computer", 16), "Reboot")
        self.reboot_button.clicked.connect(model.reboot)
        layout.addWidget(self.reboot_button)
        self.resize(180, 240)
        self.hide()


class TaskbarWidget(QWidget):
    """Renders :class:`TaskbarModel`; rebuilt whenever the desktop changes."""

    def __init__(self, model: TaskbarModel, parent=None):
        super().__init__(parent)
        self.model = model
        self.setObjectName("Taskbar")

        layout = QHBoxLayout(self)
        layout.setContentsMargins(4, 4, 4, 4)
        layout.setSpacing(4)

        self.start_button = QPushButton(render_icon("start", 16), "Start")
        self.start_button.setCheckable(True)
        self.start_button.clicked.connect(self._toggle_start_menu)
        layout.addWidget(self.start_button)

        self._buttons_host = QWidget()
        self._buttons_layout = QHBoxLayout(self._buttons_host)
        self._buttons_layout.setContentsMargins(0, 0, 0, 0)
        self._buttons_layout.setSpacing(4)
        layout.addWidget(self._buttons_host, 1)

        self.clock = QLabel()
        self.clock.setObjectName("TaskbarClock")
        layout.addWidget(self.clock)

        self.start_menu = StartMenu(model, parent)
        self.window_buttons: list[QPushButton] = []
        self._last_signature = None

        self._clock_timer = QTimer(self)
        self._clock_timer.timeout.connect(self._update_clock)
        self._clock_timer.start(CLOCK_INTERVAL_MS)
        self._update_clock()

    def _update_clock(self) -> None:
        self.clock.setText(self.model.clock_text())

    def _toggle_start_menu(self) -> None:
        self.model.toggle_start_menu()
        self.sync()

    def sync(self) -> None:
        """Rebuild the minimized-window buttons and the start menu state."""
        entries = self.model.buttons()
        signature = (tuple(entries), self.model.start_menu_open)
        if signature == self._last_signature:
            return
        self._last_signature = signature

        while self._buttons_layout.count():
            item = self._buttons_layout.takeAt(0)
            if item.widget() is not None:
                item.widget().deleteLater()
        self.window_buttons = []

        for entry in self.model.buttons():
            button = QPushButton(entry.title)
            if entry.icon:
                button.setIcon(render_icon(entry.icon, 16))
                button.setIconSize(QSize(16, 16))
            button.setProperty("window_id", entry.window_id)
            set_style_flag(button, "active", entry.active)
            button.clicked.connect(lambda _checked=False, window_id=entry.window_id: self.model.click(window_id))
            self._buttons_layout.addWidget(button)
            self.window_buttons.append(button)
        self._buttons_layout.addStretch(1)

        self.start_button.setChecked(self.model.start_menu_open)
        if self.model.start_menu_open:
            self.start_menu.move(self.x(), self.y() - self.start_menu.height())
            self.start_menu.show()
            self.start_menu.raise_()
        else:
            self.start_menu.hide()
