"""Tests for UI style token and theme utilities."""
import warnings

import pytest

from retrodesk.ui.styles import utils
from retrodesk.ui.styles.tokens import get_tokens


class _FakeApp:
    def __init__(self):
        self.styles = []

    def setStyleSheet(self, value):
        self.styles.append(value)


def test_get_tokens_contains_expected_keys_for_themes():
    dark = get_tokens("dark")
    light = get_tokens("light")
    assert "DESKTOP_BG" in dark and "DESKTOP_BG" in light
    assert dark["DESKTOP_BG"] != light["DESKTOP_BG"]
    assert dark["TITLE_BAR_HEIGHT"] == light["TITLE_BAR_HEIGHT"]


def test_unknown_theme_falls_back_to_light():
    assert get_tokens("sepia") == get_tokens("light")


def test_load_qss_existing_file():
    qss = utils.load_qss("desktop.qss")
    assert "#TitleBar" in qss


def test_load_qss_missing_file_raises():
    with pytest.raises(FileNotFoundError):
        utils.load_qss("nope.qss")


def test_replace_tokens_replaces_known_values():
    out = utils.replace_tokens("background: {{DESKTOP_BG}};", theme="light")
    assert out == "background: #008080;"


def test_replace_tokens_warns_on_missing_token():
    with warnings.catch_warnings(record=True) as caught:
        warnings.simplefilter("always")
        out = utils.replace_tokens("color: {{MISSING_TOKEN}};", theme="light")
    assert "{{MISSING_TOKEN}}" in out
    assert any("Missing theme tokens" in str(w.message) for w in caught)


def test_build_stylesheet_has_no_placeholders_left():
    utils.clear_cache()
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        qss = utils.build_stylesheet("light")
    assert "{{" not in qss
    assert "#008080" in qss


def test_apply_theme_uses_cache(monkeypatch):
    app = _FakeApp()
    calls = {"count": 0}
    utils.clear_cache()

    def fake_load(filename):
        calls["count"] += 1
        return "QWidget { color: {{TEXT_PRIMARY}}; }"

    monkeypatch.setattr(utils, "load_qss", fake_load)
    utils.apply_theme(app, "dark")
    utils.apply_theme(app, "dark")

    assert calls["count"] == 1
    assert len(app.styles) == 2
    assert app.styles[0] == app.styles[1]
    utils.clear_cache()

