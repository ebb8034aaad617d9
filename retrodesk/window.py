"""Per-window geometry: move, resize, maximize/restore and viewport reconciliation."""
from typing import Any, Callable, Optional

from .drag import Draggable, PointerStream
from .geometry import Point, Rect, Size, Viewport, clamp_rect, clamp_size, fits_within

MIN_WIDTH = 400
MIN_HEIGHT = 300
DEFAULT_MIN_SIZE = Size(MIN_WIDTH, MIN_HEIGHT)


def propose_move(origin: Rect, dx: float, dy: float, viewport: Viewport) -> Rect:
    """Shift ``origin`` by a delta and keep it inside the usable viewport."""
    return clamp_rect(origin.moved_to(origin.x + dx, origin.y + dy), viewport.usable)


def propose_resize(origin: Rect, dx: float, dy: float, viewport: Viewport, min_size: Size) -> Rect:
    """Grow or shrink from the bottom-right corner; the top-left stays put.

    The minimum size wins when the viewport leaves less room than that.
    """
    usable = viewport.usable
    max_width = usable.width - origin.x
    max_height = usable.height - origin.y
    width = max(min_size.width, min(origin.width + dx, max_width))
    height = max(min_size.height, min(origin.height + dy, max_height))
    return origin.resized_to(width, height)


class _TitleBarDrag(Draggable):
    def __init__(self, window: "Window", stream: PointerStream):
        super().__init__(stream)
        self.window = window

    def can_start(self) -> bool:
        return not self.window.is_maximized

    def current_geometry(self) -> Rect:
        return self.window.geometry

    def propose(self, origin: Rect, delta: Point) -> Rect:
        return propose_move(origin, delta.x, delta.y, self.window.viewport)

    def commit(self, rect: Rect) -> None:
        self.window._set_geometry(rect)


class _ResizeGripDrag(_TitleBarDrag):
    def propose(self, origin: Rect, delta: Point) -> Rect:
        return propose_resize(origin, delta.x, delta.y, self.window.viewport, self.window.min_size)


class Window:
    """Owns one window's position, size and maximize state.

    Structural events (close, minimize, focus) are reported through callbacks;
    the window never touches the window manager directly. ``content`` is an
    opaque payload supplied by the caller and never inspected.
    """

    def __init__(
        self,
        id: str,
        title: str,
        geometry: Rect,
        viewport: Viewport,
        stream: Optional[PointerStream] = None,
        icon: Optional[str] = None,
        min_size: Size = DEFAULT_MIN_SIZE,
        content: Any = None,
        on_close: Optional[Callable[[], None]] = None,
        on_focus: Optional[Callable[[], None]] = None,
        on_minimize: Optional[Callable[[], None]] = None,
        on_geometry_changed: Optional[Callable[[Rect], None]] = None,
    ):
        self.id = id
        self.title = title
        self.icon = icon
        self.viewport = viewport
        self.min_size = min_size
        self.content = content
        self.geometry = geometry
        self.is_maximized = False
        self.pre_maximize_geometry: Optional[Rect] = None

        self.on_close = on_close
        self.on_focus = on_focus
        self.on_minimize = on_minimize
        self.on_geometry_changed = on_geometry_changed

        stream = stream if stream is not None else PointerStream()
        self._move_drag = _TitleBarDrag(self, stream)
        self._resize_drag = _ResizeGripDrag(self, stream)

    def __repr__(self) -> str:
        return f"Window(id={self.id!r}, geometry={self.geometry!r}, maximized={self.is_maximized})"

    @property
    def is_dragging(self) -> bool:
        return self._move_drag.is_dragging

    @property
    def is_resizing(self) -> bool:
        return self._resize_drag.is_dragging

    def _set_geometry(self, rect: Rect) -> None:
        if rect == self.geometry:
            return
        self.geometry = rect
        if self.on_geometry_changed:
            self.on_geometry_changed(rect)

    # === MOVING / RESIZING ===

    def move(self, dx: float, dy: float) -> None:
        """Shift the window by a pointer delta, clamped to the viewport."""
        if self.is_maximized:
            return
        self._set_geometry(propose_move(self.geometry, dx, dy, self.viewport))

    def resize(self, dx: float, dy: float) -> None:
        """Resize by a pointer delta, anchored at the top-left corner."""
        if self.is_maximized:
            return
        self._set_geometry(propose_resize(self.geometry, dx, dy, self.viewport, self.min_size))

    def begin_move(self, point: Point, button: int = 1) -> bool:
        """Title-bar press: start a move session. Refused while maximized."""
        return self._move_drag.press(point, button)

    def begin_resize(self, point: Point, button: int = 1) -> bool:
        """Grip press: start a resize session. The grip is hidden while maximized."""
        return self._resize_drag.press(point, button)

    def end_interaction(self) -> None:
        """Tear down any move or resize session still in flight."""
        self._move_drag.teardown()
        self._resize_drag.teardown()

    # === WINDOW CONTROLS ===

    def maximize(self) -> bool:
        if self.is_maximized:
            return False
        self.end_interaction()
        self.pre_maximize_geometry = self.geometry
        self.is_maximized = True
        self._set_geometry(self._maximized_geometry())
        return True

    def restore(self) -> bool:
        if not self.is_maximized:
            return False
        previous = self.pre_maximize_geometry
        self.pre_maximize_geometry = None
        self.is_maximized = False
        if previous is not None:
            self._set_geometry(previous)
        return True

    def _maximized_geometry(self) -> Rect:
        # Fill the usable area; the minimum size still wins on a tiny surface.
        usable = self.viewport.usable
        return clamp_size(Rect(0, 0, usable.width, usable.height), usable, self.min_size)

    def toggle_maximize(self) -> None:
        """Maximize button: maximize, or restore when already maximized."""
        if self.is_maximized:
            self.restore()
        else:
            self.maximize()

    def reconcile_to_viewport(self, viewport: Viewport) -> None:
        """Adopt a new viewport size without stranding the window off-screen.

        Maximized windows always fill the new viewport. Other windows are only
        touched when they no longer fit.
        """
        self.viewport = viewport
        usable = viewport.usable
        if self.is_maximized:
            self._set_geometry(self._maximized_geometry())
            return

        if fits_within(self.geometry, usable):
            return
        resized = clamp_size(self.geometry, usable, self.min_size)
        self._set_geometry(clamp_rect(resized, usable))

    def close(self) -> None:
        self.end_interaction()
        if self.on_close:
            self.on_close()

    def minimize(self) -> None:
        # Geometry is left as-is so restoring reproduces the same layout.
        self.end_interaction()
        if self.on_minimize:
            self.on_minimize()

    def request_focus(self) -> None:
        """Body or title-bar interaction (control buttons excluded)."""
        if self.on_focus:
            self.on_focus()
