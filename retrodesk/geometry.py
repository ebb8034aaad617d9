"""Geometry helpers shared by windows and desktop icons.

This module intentionally stays Qt-agnostic so clamp and hit-test logic can
be unit tested without GUI dependencies.
"""

from dataclasses import dataclass

RESIZE_GRIP_MARGIN = 16


@dataclass(frozen=True)
class Point:
    """Pointer position in surface coordinates."""

    x: float
    y: float

    def __sub__(self, other: "Point") -> "Point":
        return Point(self.x - other.x, self.y - other.y)


@dataclass(frozen=True)
class Size:
    """Width/height pair."""

    width: float
    height: float


@dataclass(frozen=True)
class Rect:
    """Simple immutable rectangle."""

    x: float
    y: float
    width: float
    height: float

    @property
    def position(self) -> Point:
        return Point(self.x, self.y)

    @property
    def size(self) -> Size:
        return Size(self.width, self.height)

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    def moved_to(self, x: float, y: float) -> "Rect":
        return Rect(x, y, self.width, self.height)

    def resized_to(self, width: float, height: float) -> "Rect":
        return Rect(self.x, self.y, width, height)


@dataclass(frozen=True)
class Viewport:
    """Hosting surface size plus the strip reserved for the taskbar."""

    width: float
    height: float
    taskbar_height: float = 40

    @property
    def usable(self) -> Size:
        """Area available to windows and icons (chrome excluded), never negative."""
        return Size(max(0, self.width), max(0, self.height - self.taskbar_height))


def clamp_rect(candidate: Rect, bounds: Size) -> Rect:
    """Clamp a rectangle's position so it stays inside ``bounds``.

    The size is never changed. When ``bounds`` is smaller than the rectangle
    the coordinate falls back to 0 and the rectangle overhangs the far edge.
    """
    max_x = bounds.width - candidate.width
    max_y = bounds.height - candidate.height
    x = max(0, min(candidate.x, max_x))
    y = max(0, min(candidate.y, max_y))
    return candidate.moved_to(x, y)


def clamp_size(candidate: Rect, bounds: Size, min_size: Size) -> Rect:
    """Bound a rectangle's size to ``[min_size, bounds]``.

    The minimum wins when ``bounds`` is smaller than ``min_size``.
    """
    width = max(min_size.width, min(candidate.width, bounds.width))
    height = max(min_size.height, min(candidate.height, bounds.height))
    return candidate.resized_to(width, height)


def fits_within(rect: Rect, bounds: Size) -> bool:
    """Return True when the rectangle lies fully inside ``bounds``."""
    return (
        rect.x >= 0
        and rect.y >= 0
        and rect.right <= bounds.width
        and rect.bottom <= bounds.height
    )


def in_resize_grip(x: float, y: float, width: float, height: float, margin: int = RESIZE_GRIP_MARGIN) -> bool:
    """Return True when a window-local point lies on the bottom-right grip."""
    return width - margin <= x <= width and height - margin <= y <= height
