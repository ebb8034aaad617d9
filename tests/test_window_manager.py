"""Tests for window membership, focus and stacking order."""
from retrodesk.window_manager import (
    BASE_Z_INDEX,
    UNOPENED_Z_INDEX,
    WindowManager,
    WindowManagerState,
)


def _manager(*ids):
    manager = WindowManager()
    for window_id in ids:
        manager.open_window(window_id)
    return manager


def test_open_appends_and_activates():
    manager = _manager("about")
    assert manager.open_window_ids == ("about",)
    assert manager.active_window_id == "about"

    manager.open_window("projects")
    assert manager.open_window_ids == ("about", "projects")
    assert manager.active_window_id == "projects"
    assert manager.z_index_of("about") == 10
    assert manager.z_index_of("projects") == 11


def test_focus_raises_and_preserves_relative_order():
    manager = _manager("about", "projects", "contact")
    manager.focus_window("about")
    assert manager.open_window_ids == ("projects", "contact", "about")
    assert manager.active_window_id == "about"


def test_focused_window_is_strictly_topmost():
    manager = _manager("about", "projects", "contact", "terminal")
    for window_id in ("contact", "about", "terminal", "about"):
        manager.focus_window(window_id)
        for other in manager.open_window_ids:
            if other != window_id:
                assert manager.z_index_of(window_id) > manager.z_index_of(other)


def test_open_existing_window_behaves_like_focus():
    manager = _manager("about", "projects")
    opened = []
    manager.window_opened.connect(opened.append)

    manager.open_window("about")
    assert manager.open_window_ids == ("projects", "about")
    assert manager.active_window_id == "about"
    assert opened == []
    assert len(set(manager.open_window_ids)) == len(manager.open_window_ids)


def test_minimize_keeps_order_and_active_window():
    manager = _manager("about", "projects")
    manager.minimize_window("projects")
    assert manager.minimized_window_ids == ("projects",)
    assert manager.open_window_ids == ("about", "projects")
    assert manager.active_window_id == "projects"

    manager.minimize_window("projects")
    assert manager.minimized_window_ids == ("projects",)


def test_focus_restores_minimized_window():
    manager = _manager("about", "projects")
    manager.minimize_window("about")
    manager.focus_window("about")
    assert manager.minimized_window_ids == ()
    assert manager.open_window_ids == ("projects", "about")
    assert manager.active_window_id == "about"


def test_close_active_clears_pointer_without_promoting():
    manager = _manager("about", "projects")
    manager.close_window("projects")
    assert manager.open_window_ids == ("about",)
    assert manager.active_window_id is None


def test_close_inactive_keeps_active_and_drops_minimized():
    manager = _manager("about", "projects")
    manager.minimize_window("about")
    manager.close_window("about")
    assert manager.open_window_ids == ("projects",)
    assert manager.minimized_window_ids == ()
    assert manager.active_window_id == "projects"


def test_invalid_ids_are_noops(capsys):
    manager = _manager("about")
    before = manager.state

    manager.focus_window("ghost")
    manager.minimize_window("ghost")
    manager.close_window("ghost")

    assert manager.state == before
    out = capsys.readouterr().out
    assert out.count("[WARN]") == 3


def test_z_index_for_unopened_window():
    manager = _manager("about")
    assert manager.z_index_of("about") == BASE_Z_INDEX
    assert manager.z_index_of("projects") == UNOPENED_Z_INDEX


def test_state_is_complete_when_signal_fires():
    manager = _manager("about", "projects")
    manager.minimize_window("about")
    seen = []
    manager.state_changed.connect(lambda: seen.append(manager.state))
    manager.focus_window("about")

    assert len(seen) == 1
    state = seen[0]
    assert state.active_window_id == "about"
    assert "about" not in state.minimized_window_ids
    assert state.open_window_ids[-1] == "about"


def test_signals_report_each_operation():
    manager = WindowManager()
    events = []
    manager.window_opened.connect(lambda i: events.append(("opened", i)))
    manager.window_focused.connect(lambda i: events.append(("focused", i)))
    manager.window_minimized.connect(lambda i: events.append(("minimized", i)))
    manager.window_closed.connect(lambda i: events.append(("closed", i)))

    manager.open_window("about")
    manager.open_window("projects")
    manager.minimize_window("about")
    manager.focus_window("about")
    manager.close_window("projects")

    assert events == [
        ("opened", "about"),
        ("opened", "projects"),
        ("minimized", "about"),
        ("focused", "about"),
        ("closed", "projects"),
    ]


def test_reset_returns_to_empty_state():
    manager = _manager("about", "projects")
    manager.minimize_window("about")
    manager.reset()
    assert manager.state == WindowManagerState()
