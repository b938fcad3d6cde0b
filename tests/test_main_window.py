"""Tests for ui.main_window."""

import json

import pytest
from PyQt5.QtGui import QColor

from services import config
from ui.main_window import MainWindow


@pytest.fixture
def window(qapp):
    w = MainWindow(QColor.fromRgbF(1.0, 0.0, 0.0))
    yield w
    w.deleteLater()


def test_set_view_color_repaints(window):
    window.set_view_color(0.2, 0.4, 0.6)
    c = window.background_color()
    assert (round(c.redF(), 2), round(c.greenF(), 2), round(c.blueF(), 2)) == (0.2, 0.4, 0.6)


def test_editor_is_seeded_from_background(window):
    dialog = window.create_editor()
    try:
        assert dialog.rows["red"].field.text() == "1.00"
        assert dialog.rows["green"].value_label.text() == "0.00"
        assert dialog.rows["blue"].slider.value() == 0
    finally:
        dialog.deleteLater()


def test_editor_round_trip(window):
    dialog = window.create_editor()
    try:
        dialog.rows["red"].slider.setValue(20)
        dialog.rows["green"].slider.setValue(40)
        dialog.rows["blue"].slider.setValue(60)
        dialog.bt_done.click()
    finally:
        dialog.deleteLater()

    assert window.background_color().name() == QColor.fromRgbF(0.2, 0.4, 0.6).name()

    reopened = window.create_editor()
    try:
        assert [reopened.rows[c].field.text() for c in ("red", "green", "blue")] == ["0.20", "0.40", "0.60"]
    finally:
        reopened.deleteLater()


def test_default_background_from_config(qapp, app_home):
    (app_home / "user_settings.json").write_text(json.dumps({"background_color": "#00ff00"}), encoding="utf-8")
    config.load_state()
    w = MainWindow()
    try:
        assert w.background_color().name() == "#00ff00"
    finally:
        w.deleteLater()


def test_close_saves_window_size_only(qapp, app_home):
    w = MainWindow()
    w.show()
    w.resize(500, 700)
    w.set_view_color(0.0, 0.0, 1.0)
    w.close()

    data = json.loads((app_home / "user_settings.json").read_text(encoding="utf-8"))
    assert data["window_width"] == 500
    assert data["window_height"] == 700
    assert data["background_color"] == config.DEFAULT_BACKGROUND


def test_bad_window_size_in_config(qapp, app_home):
    (app_home / "user_settings.json").write_text(json.dumps({"window_width": "wide"}), encoding="utf-8")
    config.load_state()
    w = MainWindow()
    try:
        assert w.width() == 390
    finally:
        w.deleteLater()
