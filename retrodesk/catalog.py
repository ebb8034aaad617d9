"""Default windows and desktop icons."""
from dataclasses import dataclass
from typing import Dict, List, Optional

from .desktop_icon import IconPosition, IconRecord
from .geometry import Rect


@dataclass(frozen=True)
class WindowSpec:
    """How a window looks the first time it is opened."""

    id: str
    title: str
    icon: str
    initial_geometry: Rect


DEFAULT_WINDOWS = (
    WindowSpec("about", "About Me", "folder", Rect(450, 75, 900, 600)),
    WindowSpec("projects", "Projects", "folder_2", Rect(325, 110, 1000, 700)),
    WindowSpec("contact", "Contact", "editor", Rect(1350, 75, 400, 825)),
    WindowSpec("terminal", "Command Prompt", "terminal", Rect(200, 200, 700, 500)),
)

DEFAULT_ICONS = (
    IconRecord("about", "About Me", "folder", IconPosition(top=20, left=20), "about"),
    IconRecord("projects", "Projects", "folder_2", IconPosition(top=140, left=20), "projects"),
    IconRecord("contact", "Contact", "editor", IconPosition(top=260, left=20), "contact"),
    IconRecord("terminal", "Terminal", "terminal", IconPosition(top=380, left=20), "terminal"),
    IconRecord("bin", "Trash", "bin", IconPosition(top=500, left=20), None),
)


class Catalog:
    """Lookup of known window specs and the icons placed on the desktop."""

    def __init__(self, windows=DEFAULT_WINDOWS, icons=DEFAULT_ICONS):
        self._windows: Dict[str, WindowSpec] = {spec.id: spec for spec in windows}
        self.icons: List[IconRecord] = list(icons)

    def window_spec(self, window_id: str) -> Optional[WindowSpec]:
        return self._windows.get(window_id)

    def title_for(self, window_id: str) -> str:
        spec = self._windows.get(window_id)
        return spec.title if spec else window_id

    def icon_for(self, window_id: str) -> Optional[str]:
        spec = self._windows.get(window_id)
        return spec.icon if spec else None
