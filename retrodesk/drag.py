"""Pointer drag sessions shared by windows and desktop icons.

A drag runs ``idle -> dragging -> idle``. While dragging, the session listens
to the surface-wide :class:`PointerStream` rather than the item itself, so the
drag keeps tracking the pointer outside the item's bounds.
"""
from dataclasses import dataclass, field
from typing import Callable, Optional

from PySide6.QtCore import QObject, Signal

from .geometry import Point, Rect

PRIMARY_BUTTON = 1

STATE_IDLE = "idle"
STATE_DRAGGING = "dragging"


@dataclass
class DragSession:
    """Transient state captured on press and discarded on release."""

    pointer_origin: Point
    origin_geometry: Rect
    owner: "Draggable"
    _on_move: Callable[[Point], None] = field(init=False, repr=False)
    _on_release: Callable[[Point], None] = field(init=False, repr=False)

    def __post_init__(self):
        # Keep the exact callables so disconnect() matches what connect() saw.
        self._on_move = self.owner._handle_pointer_move
        self._on_release = self.owner._handle_pointer_release


class PointerStream(QObject):
    """Surface-wide pointer move/release channel.

    The UI pushes every pointer move and release into the stream; at most one
    drag or resize session is subscribed at any time.
    """

    moved = Signal(object)
    released = Signal(object)

    def __init__(self, parent=None):
        super().__init__(parent)
        self._active: Optional[DragSession] = None

    @property
    def active_session(self) -> Optional[DragSession]:
        return self._active

    def begin(self, session: DragSession) -> None:
        """Subscribe a session, ending whichever session was active."""
        if self._active is not None:
            self._active.owner.teardown()
        self.moved.connect(session._on_move)
        self.released.connect(session._on_release)
        self._active = session

    def end(self, session: DragSession) -> None:
        """Unsubscribe a session. Safe to call for an already-ended session."""
        if self._active is not session:
            return
        self.moved.disconnect(session._on_move)
        self.released.disconnect(session._on_release)
        self._active = None

    def move_to(self, x: float, y: float) -> None:
        self.moved.emit(Point(x, y))

    def release_at(self, x: float, y: float) -> None:
        self.released.emit(Point(x, y))


class Draggable:
    """Generic press/move/release behaviour producing an updated rectangle.

    Subclasses supply the current geometry, turn an origin rectangle plus a
    pointer delta into a proposed rectangle, and commit it. Every move commits
    immediately; there is no movement threshold and no cancel path.
    """

    def __init__(self, stream: PointerStream):
        self.stream = stream
        self._session: Optional[DragSession] = None

    @property
    def state(self) -> str:
        return STATE_DRAGGING if self._session is not None else STATE_IDLE

    @property
    def is_dragging(self) -> bool:
        return self._session is not None

    @property
    def session(self) -> Optional[DragSession]:
        return self._session

    def current_geometry(self) -> Rect:
        raise NotImplementedError

    def propose(self, origin: Rect, delta: Point) -> Rect:
        raise NotImplementedError

    def commit(self, rect: Rect) -> None:
        raise NotImplementedError

    def can_start(self) -> bool:
        return True

    def press(self, point: Point, button: int = PRIMARY_BUTTON) -> bool:
        """Start a drag session. Returns False when the press is ignored."""
        if button != PRIMARY_BUTTON or not self.can_start():
            return False
        if self._session is not None:
            self.teardown()
        self._session = DragSession(
            pointer_origin=point,
            origin_geometry=self.current_geometry(),
            owner=self,
        )
        self.stream.begin(self._session)
        return True

    def teardown(self) -> None:
        """End the active session, keeping the last committed geometry."""
        session = self._session
        if session is None:
            return
        self._session = None
        self.stream.end(session)

    def _handle_pointer_move(self, point: Point) -> None:
        session = self._session
        if session is None:
            return
        delta = point - session.pointer_origin
        self.commit(self.propose(session.origin_geometry, delta))

    def _handle_pointer_release(self, _point: Point) -> None:
        self.teardown()
