"""Widget-level tests for the Qt desktop view (headless)."""
import pytest

from retrodesk.desktop import Desktop
from retrodesk.geometry import Rect, Viewport
from retrodesk.ui.icons import ICON_KINDS, render_icon, render_pixmap


@pytest.fixture
def view(qapp):
    from retrodesk.ui.desktop_view import DesktopView

    desktop = Desktop(Viewport(1280, 800, 40))
    widget = DesktopView(desktop)
    yield widget
    widget.deleteLater()


def test_render_pixmap_for_every_kind(qapp):
    for kind in sorted(ICON_KINDS):
        pixmap = render_pixmap(kind, 24)
        assert pixmap.width() == 24
        assert not render_icon(kind, 16).isNull()


def test_render_pixmap_rejects_unknown_kind(qapp):
    with pytest.raises(ValueError):
        render_pixmap("spreadsheet")


def test_view_builds_icons_and_taskbar(view):
    assert len(view.icon_widgets) == 5
    assert view.frames == {}
    assert view.taskbar.geometry().y() == 760
    assert view.taskbar.geometry().height() == 40


def test_opened_window_frame_follows_model(view):
    view.desktop.open_window("about")
    frame = view.frames["about"]
    geometry = frame.geometry()
    assert (geometry.x(), geometry.y(), geometry.width(), geometry.height()) == (380, 75, 900, 600)
    assert frame.title_bar.property("active") is True

    view.desktop.window("about").move(-80, 10)
    assert frame.geometry().x() == 300
    assert frame.geometry().y() == 85


def test_minimize_hides_frame_and_adds_taskbar_button(view):
    view.desktop.open_window("about")
    view.desktop.open_window("terminal")
    view.frames["about"].title_bar.minimize_button.click()

    assert view.frames["about"].isHidden()
    assert [b.property("window_id") for b in view.taskbar.window_buttons] == ["about"]

    view.taskbar.window_buttons[0].click()
    assert not view.frames["about"].isHidden()
    assert view.taskbar.window_buttons == []
    assert view.desktop.manager.active_window_id == "about"


def test_close_button_removes_frame(view):
    view.desktop.open_window("contact")
    view.frames["contact"].title_bar.close_button.click()
    assert "contact" not in view.frames
    assert view.desktop.manager.open_window_ids == ()


def test_maximize_button_fills_usable_area(view):
    view.desktop.open_window("terminal")
    view.frames["terminal"].title_bar.maximize_button.click()
    geometry = view.frames["terminal"].geometry()
    assert (geometry.x(), geometry.y(), geometry.width(), geometry.height()) == (0, 0, 1280, 760)


def test_icon_selection_is_reflected(view):
    view.desktop.icon("projects").click()
    flags = {w.model.id: w.property("selected") for w in view.icon_widgets}
    assert flags["projects"] is True
    assert flags["about"] is False


def test_start_menu_reboot(view):
    view.desktop.open_window("about")
    view.taskbar.start_button.click()
    assert view.desktop.taskbar.start_menu_open is True
    assert not view.taskbar.start_menu.isHidden()

    view.taskbar.start_menu.reboot_button.click()
    assert view.desktop.taskbar.start_menu_open is False
    assert view.frames == {}


def test_press_inside_interactive_content_raises_window(qapp):
    from PySide6.QtCore import Qt
    from PySide6.QtTest import QTest
    from PySide6.QtWidgets import QLineEdit

    from retrodesk.catalog import Catalog, WindowSpec
    from retrodesk.ui.desktop_view import DesktopView

    catalog = Catalog(
        windows=(
            WindowSpec("notes", "Notes", "editor", Rect(0, 0, 400, 300)),
            WindowSpec("files", "Files", "folder", Rect(600, 0, 400, 300)),
        ),
        icons=(),
    )
    desktop = Desktop(
        Viewport(1280, 800, 40),
        catalog=catalog,
        content_factory=lambda window_id: QLineEdit() if window_id == "notes" else None,
    )
    view = DesktopView(desktop)
    view.show()
    desktop.open_window("notes")
    desktop.open_window("files")

    field = desktop.window("notes").content
    QTest.mouseClick(field, Qt.MouseButton.LeftButton)

    assert desktop.manager.open_window_ids == ("files", "notes")
    assert desktop.manager.active_window_id == "notes"
    assert view.frames["notes"].title_bar.property("active") is True
    view.close()
    view.deleteLater()
