import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PyQt5.QtWidgets import QApplication, QMessageBox

from services import config
from services.app_paths import HOME_ENV


@pytest.fixture(scope="session")
def qapp():
    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture(autouse=True)
def app_home(tmp_path, monkeypatch):
    """Keep user_settings.json and debug.log inside the test's tmp dir."""
    monkeypatch.setenv(HOME_ENV, str(tmp_path))
    monkeypatch.setattr(config, "_state", config.AppState())
    config.load_state()
    return tmp_path


@pytest.fixture
def alerts(monkeypatch):
    shown = []

    def fake_warning(parent, title, message, *args, **kwargs):
        shown.append((title, message))
        return QMessageBox.Ok

    monkeypatch.setattr(QMessageBox, "warning", fake_warning)
    return shown


class RecordingDelegate:
    def __init__(self):
        self.calls = []

    def set_view_color(self, red, green, blue):
        self.calls.append((red, green, blue))


@pytest.fixture
def delegate():
    return RecordingDelegate()
