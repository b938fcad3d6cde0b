from __future__ import annotations

from typing import Optional

from ui.main_window import MainWindow


class AppController:
    """Top-level coordinator that builds and shows the main view."""

    def __init__(self):
        self.window: Optional[MainWindow] = None

    def launch(self) -> MainWindow:
        self.window = MainWindow()
        self.window.show()
        return self.window
