"""Taskbar view model: minimized-window buttons, start menu and clock."""
from dataclasses import dataclass
from datetime import datetime
from typing import Callable, List, Optional

from .catalog import Catalog
from .window_manager import WindowManager


@dataclass(frozen=True)
class TaskbarButton:
    window_id: str
    title: str
    icon: Optional[str]
    active: bool


def format_clock(moment: datetime) -> str:
    """Format a time as ``H:MM AM/PM`` (midnight/noon shown as 12)."""
    hours = moment.hour % 12 or 12
    suffix = "PM" if moment.hour >= 12 else "AM"
    return f"{hours}:{moment.minute:02d} {suffix}"


class TaskbarModel:
    """Read-only view over the window manager.

    Renders one button per minimized window and turns clicks into focus
    requests. The only state it owns is whether the start menu is open.
    """

    def __init__(
        self,
        manager: WindowManager,
        catalog: Catalog,
        on_reboot: Optional[Callable[[], None]] = None,
    ):
        self.manager = manager
        self.catalog = catalog
        self.on_reboot = on_reboot
        self.start_menu_open = False

    def buttons(self) -> List[TaskbarButton]:
        state = self.manager.state
        return [
            TaskbarButton(
                window_id=window_id,
                title=self.catalog.title_for(window_id),
                icon=self.catalog.icon_for(window_id),
                active=state.active_window_id == window_id,
            )
            for window_id in state.minimized_window_ids
        ]

    def click(self, window_id: str) -> None:
        self.manager.focus_window(window_id)

    def toggle_start_menu(self) -> bool:
        self.start_menu_open = not self.start_menu_open
        return self.start_menu_open

    def close_start_menu(self) -> None:
        self.start_menu_open = False

    def reboot(self) -> None:
        self.close_start_menu()
        if self.on_reboot:
            self.on_reboot()

    def clock_text(self, now: Optional[datetime] = None) -> str:
        return format_clock(now or datetime.now())
