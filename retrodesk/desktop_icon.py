"""Draggable, selectable desktop icons."""
from dataclasses import dataclass
from typing import Callable, Optional

from .drag import Draggable, PointerStream
from .geometry import Point, Rect, Size, Viewport, clamp_rect

ICON_WIDTH = 80
ICON_HEIGHT = 90
DEFAULT_ICON_SIZE = Size(ICON_WIDTH, ICON_HEIGHT)


@dataclass(frozen=True)
class IconPosition:
    top: float
    left: float


@dataclass(frozen=True)
class IconRecord:
    """Static description of an icon. ``target_window_id`` None = decorative."""

    id: str
    label: str
    icon: str
    position: IconPosition
    target_window_id: Optional[str] = None


class DesktopIcon(Draggable):
    """Live icon: current position plus click/double-click gestures.

    Dragging and clicking are independent; a press-release with no movement is
    still a (zero-length) drag and does not swallow the click that follows.
    """

    def __init__(
        self,
        record: IconRecord,
        stream: PointerStream,
        viewport: Viewport,
        size: Size = DEFAULT_ICON_SIZE,
        on_select: Optional[Callable[[], None]] = None,
        on_open: Optional[Callable[[], None]] = None,
        on_moved: Optional[Callable[[IconPosition], None]] = None,
    ):
        super().__init__(stream)
        self.record = record
        self.viewport = viewport
        self.size = size
        self.position = record.position
        self.on_select = on_select
        self.on_open = on_open
        self.on_moved = on_moved

    @property
    def id(self) -> str:
        return self.record.id

    @property
    def label(self) -> str:
        return self.record.label

    @property
    def target_window_id(self) -> Optional[str]:
        return self.record.target_window_id

    def current_geometry(self) -> Rect:
        return Rect(self.position.left, self.position.top, self.size.width, self.size.height)

    def propose(self, origin: Rect, delta: Point) -> Rect:
        return clamp_rect(origin.moved_to(origin.x + delta.x, origin.y + delta.y), self.viewport.usable)

    def commit(self, rect: Rect) -> None:
        position = IconPosition(top=rect.y, left=rect.x)
        if position == self.position:
            return
        self.position = position
        if self.on_moved:
            self.on_moved(position)

    def click(self) -> bool:
        """Single click selects. Returns True: the click stops here."""
        if self.on_select:
            self.on_select()
        return True

    def double_click(self) -> bool:
        """Double click opens the bound window, if any."""
        if self.on_open:
            self.on_open()
        return True

    def reset_position(self) -> None:
        self.teardown()
        self.position = self.record.position
