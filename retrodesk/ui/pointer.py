"""Qt mouse-event glue for the pointer stream."""

from PySide6.QtCore import Qt

from retrodesk.drag import PRIMARY_BUTTON, PointerStream
from retrodesk.geometry import Point

SECONDARY_BUTTON = 2


def button_code(button: Qt.MouseButton) -> int:
    """Map a Qt mouse button to the Qt-agnostic button code used by drags."""
    return PRIMARY_BUTTON if button == Qt.MouseButton.LeftButton else SECONDARY_BUTTON


def event_point(event) -> Point:
    """Pointer position of a mouse event in global coordinates.

    Drags only ever use deltas from the press point, so global coordinates
    work for every widget regardless of nesting.
    """
    pos = event.globalPosition()
    return Point(pos.x(), pos.y())


def set_style_flag(widget, name: str, value: bool) -> None:
    """Set a boolean dynamic property and re-polish so QSS selectors update."""
    if widget.property(name) == value:
        return
    widget.setProperty(name, value)
    widget.style().unpolish(widget)
    widget.style().polish(widget)


class PointerForwardingMixin:
    """Push mouse moves and releases into the desktop's pointer stream.

    Qt grabs the mouse for the widget that took the press, so these handlers
    keep receiving events while the pointer is outside the widget.
    """

    pointer_stream: PointerStream

    def mouseMoveEvent(self, event):
        point = event_point(event)
        self.pointer_stream.move_to(point.x, point.y)
        event.accept()

    def mouseReleaseEvent(self, event):
        point = event_point(event)
        self.pointer_stream.release_at(point.x, point.y)
        event.accept()
