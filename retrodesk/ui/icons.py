"""Programmatic icon rendering for desktop icons, title bars and the taskbar.

Generates pixmaps for each icon kind using QPainter.
No asset files required - all icons drawn programmatically.
"""

from PySide6.QtCore import Qt, QRectF
from PySide6.QtGui import QBrush, QColor, QIcon, QPainter, QPen, QPixmap

ICON_KINDS = {"folder", "folder_2", "editor", "terminal", "bin", "computer", "start"}

_OUTLINE = QColor("#000000")


def render_pixmap(kind: str, size: int = 32) -> QPixmap:
    """Render the pixmap for an icon kind.

    Args:
        kind: One of ICON_KINDS
        size: Edge length in pixels

    Raises:
        ValueError: If kind is not recognized
    """
    if kind not in ICON_KINDS:
        raise ValueError(f"Invalid icon kind '{kind}'. Must be one of {sorted(ICON_KINDS)}")

    pixmap = QPixmap(size, size)
    pixmap.fill(Qt.GlobalColor.transparent)

    painter = QPainter(pixmap)
    painter.setRenderHint(QPainter.RenderHint.Antialiasing)
    painter.setPen(QPen(_OUTLINE, max(1, size // 32)))

    if kind in ("folder", "folder_2"):
        _draw_folder(painter, size, "#f4d35e" if kind == "folder" else "#e9c46a")
    elif kind == "editor":
        _draw_editor(painter, size)
    elif kind == "terminal":
        _draw_terminal(painter, size)
    elif kind == "bin":
        _draw_bin(painter, size)
    elif kind == "computer":
        _draw_computer(painter, size)
    elif kind == "start":
        _draw_start(painter, size)

    painter.end()
    return pixmap


def render_icon(kind: str, size: int = 32) -> QIcon:
    """Render a QIcon for an icon kind (see render_pixmap)."""
    return QIcon(render_pixmap(kind, size))


def _draw_folder(painter: QPainter, size: int, fill: str) -> None:
    """Draw a folder - tab on top, body below."""
    s = size / 32.0
    painter.setBrush(QBrush(QColor(fill)))
    painter.drawRect(QRectF(3 * s, 7 * s, 11 * s, 4 * s))
    painter.drawRect(QRectF(3 * s, 10 * s, 26 * s, 17 * s))


def _draw_editor(painter: QPainter, size: int) -> None:
    """Draw a notepad page with text lines."""
    s = size / 32.0
    painter.setBrush(QBrush(QColor("#ffffff")))
    painter.drawRect(QRectF(7 * s, 3 * s, 18 * s, 26 * s))
    painter.setPen(QPen(QColor("#000080"), max(1, size // 32)))
    for row in range(4):
        y = (9 + row * 5) * s
        painter.drawLine(int(10 * s), int(y), int(22 * s), int(y))


def _draw_terminal(painter: QPainter, size: int) -> None:
    """Draw a black console with a prompt."""
    s = size / 32.0
    painter.setBrush(QBrush(QColor("#000000")))
    painter.drawRect(QRectF(3 * s, 5 * s, 26 * s, 22 * s))
    painter.setPen(QPen(QColor("#c0c0c0"), max(1, size // 16)))
    painter.drawLine(int(7 * s), int(11 * s), int(11 * s), int(14 * s))
    painter.drawLine(int(11 * s), int(14 * s), int(7 * s), int(17 * s))
    painter.drawLine(int(13 * s), int(18 * s), int(19 * s), int(18 * s))


def _draw_bin(painter: QPainter, size: int) -> None:
    """Draw a wastebasket."""
    s = size / 32.0
    painter.setBrush(QBrush(QColor("#c0c0c0")))
    painter.drawRect(QRectF(8 * s, 9 * s, 16 * s, 19 * s))
    painter.drawRect(QRectF(6 * s, 6 * s, 20 * s, 3 * s))
    for column in range(3):
        x = (12 + column * 4) * s
        painter.drawLine(int(x), int(12 * s), int(x), int(25 * s))


def _draw_computer(painter: QPainter, size: int) -> None:
    """Draw a monitor on a stand."""
    s = size / 32.0
    painter.setBrush(QBrush(QColor("#c0c0c0")))
    painter.drawRect(QRectF(4 * s, 4 * s, 24 * s, 18 * s))
    painter.setBrush(QBrush(QColor("#008080")))
    painter.drawRect(QRectF(7 * s, 7 * s, 18 * s, 12 * s))
    painter.setBrush(QBrush(QColor("#c0c0c0")))
    painter.drawRect(QRectF(10 * s, 24 * s, 12 * s, 4 * s))


def _draw_start(painter: QPainter, size: int) -> None:
    """Draw the four-pane start logo."""
    s = size / 32.0
    painter.setPen(Qt.PenStyle.NoPen)
    panes = (
        ("#f25022", 4, 4),
        ("#7fba00", 17, 4),
        ("#00a4ef", 4, 17),
        ("#ffb900", 17, 17),
    )
    for color, x, y in panes:
        painter.setBrush(QBrush(QColor(color)))
        painter.drawRect(QRectF(x * s, y * s, 11 * s, 11 * s))
