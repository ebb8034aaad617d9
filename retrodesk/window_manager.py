"""Window membership, focus and stacking order."""
from dataclasses import dataclass, replace
from typing import Optional, Tuple

from PySide6.QtCore import QObject, Signal

BASE_Z_INDEX = 10
UNOPENED_Z_INDEX = 1


@dataclass(frozen=True)
class WindowManagerState:
    """Immutable snapshot of which windows are open, minimized and active.

    ``open_window_ids`` encodes the stacking order: later ids paint above
    earlier ones. ``minimized_window_ids`` keeps insertion order.
    """

    open_window_ids: Tuple[str, ...] = ()
    active_window_id: Optional[str] = None
    minimized_window_ids: Tuple[str, ...] = ()


class WindowManager(QObject):
    """Owns the window manager state and the operations that change it.

    Each operation builds a complete new state and swaps it in with a single
    assignment before any signal fires, so readers never see a half-applied
    update. Operations on ids that are not open are no-ops.
    """

    state_changed = Signal()
    window_opened = Signal(str)
    window_closed = Signal(str)
    window_focused = Signal(str)
    window_minimized = Signal(str)

    def __init__(self, parent=None):
        super().__init__(parent)
        self._state = WindowManagerState()

    @property
    def state(self) -> WindowManagerState:
        return self._state

    @property
    def open_window_ids(self) -> Tuple[str, ...]:
        return self._state.open_window_ids

    @property
    def active_window_id(self) -> Optional[str]:
        return self._state.active_window_id

    @property
    def minimized_window_ids(self) -> Tuple[str, ...]:
        return self._state.minimized_window_ids

    def is_open(self, window_id: str) -> bool:
        return window_id in self._state.open_window_ids

    def is_minimized(self, window_id: str) -> bool:
        return window_id in self._state.minimized_window_ids

    def is_active(self, window_id: str) -> bool:
        return self._state.active_window_id == window_id

    def z_index_of(self, window_id: str) -> int:
        """Stacking index derived from position in the open list."""
        try:
            return BASE_Z_INDEX + self._state.open_window_ids.index(window_id)
        except ValueError:
            return UNOPENED_Z_INDEX

    def _commit(self, new_state: WindowManagerState) -> bool:
        if new_state == self._state:
            return False
        self._state = new_state
        return True

    def open_window(self, window_id: str) -> None:
        """Open a window on top, or focus it when it is already open."""
        if self.is_open(window_id):
            self.focus_window(window_id)
            return

        self._commit(replace(
            self._state,
            open_window_ids=self._state.open_window_ids + (window_id,),
            active_window_id=window_id,
        ))
        self.window_opened.emit(window_id)
        self.state_changed.emit()

    def close_window(self, window_id: str) -> None:
        """Close a window. The active pointer is cleared, not handed on."""
        if not self.is_open(window_id):
            print(f"[WARN] Close ignored: window '{window_id}' is not open")
            return

        state = self._state
        self._commit(WindowManagerState(
            open_window_ids=tuple(i for i in state.open_window_ids if i != window_id),
            active_window_id=None if state.active_window_id == window_id else state.active_window_id,
            minimized_window_ids=tuple(i for i in state.minimized_window_ids if i != window_id),
        ))
        self.window_closed.emit(window_id)
        self.state_changed.emit()

    def focus_window(self, window_id: str) -> None:
        """Restore if minimized, raise to the top and make active."""
        if not self.is_open(window_id):
            print(f"[WARN] Focus ignored: window '{window_id}' is not open")
            return

        state = self._state
        others = tuple(i for i in state.open_window_ids if i != window_id)
        changed = self._commit(WindowManagerState(
            open_window_ids=others + (window_id,),
            active_window_id=window_id,
            minimized_window_ids=tuple(i for i in state.minimized_window_ids if i != window_id),
        ))
        if changed:
            self.window_focused.emit(window_id)
            self.state_changed.emit()

    def minimize_window(self, window_id: str) -> None:
        """Hide a window to the taskbar. Order and active window are untouched."""
        if not self.is_open(window_id):
            print(f"[WARN] Minimize ignored: window '{window_id}' is not open")
            return
        if self.is_minimized(window_id):
            return

        self._commit(replace(
            self._state,
            minimized_window_ids=self._state.minimized_window_ids + (window_id,),
        ))
        self.window_minimized.emit(window_id)
        self.state_changed.emit()

    def reset(self) -> None:
        """Drop every window (used by reboot)."""
        if self._commit(WindowManagerState()):
            self.state_changed.emit()
