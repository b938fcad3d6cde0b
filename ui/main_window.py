from typing import Optional

from PyQt5.QtGui import QColor, QPalette
from PyQt5.QtWidgets import QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QPushButton

from services import debug_log
from services.config import save_state, state
from ui.color_editor_dialog import ColorEditorDialog
from ui.qt_color import parse_qcolor, value_to_qcolor


class MainWindow(QMainWindow):
    """Single view painted with a background color picked in the editor."""

    def __init__(self, color: Optional[QColor] = None, parent=None):
        super().__init__(parent)
        self.setWindowTitle("Colorized")

        st = state()
        self.resize(st.window_width or 390, st.window_height or 640)

        self.canvas = QWidget()
        self.canvas.setAutoFillBackground(True)
        layout = QVBoxLayout(self.canvas)
        layout.addStretch(1)

        row = QHBoxLayout()
        row.addStretch(1)
        self.bt_edit = QPushButton("Edit Color")
        self.bt_edit.clicked.connect(self.open_editor)
        row.addWidget(self.bt_edit)
        row.addStretch(1)
        layout.addLayout(row)
        self.setCentralWidget(self.canvas)

        self._apply_color(color if color is not None else parse_qcolor(st.background_color))

    def background_color(self) -> QColor:
        return self.canvas.palette().color(QPalette.Window)

    def _apply_color(self, color: QColor):
        pal = self.canvas.palette()
        pal.setColor(QPalette.Window, color)
        self.canvas.setPalette(pal)

    # --- Editor -------------------------------------------------------------
    def create_editor(self) -> ColorEditorDialog:
        return ColorEditorDialog(self.background_color(), delegate=self, parent=self)

    def open_editor(self) -> bool:
        dialog = self.create_editor()
        try:
            return dialog.exec_() == ColorEditorDialog.Accepted
        finally:
            dialog.deleteLater()

    # ColorDelegate
    def set_view_color(self, red: float, green: float, blue: float):
        color = value_to_qcolor(red, green, blue)
        self._apply_color(color)
        debug_log.log(f"main: background set to {color.name()}")

    # --- Close --------------------------------------------------------------
    def closeEvent(self, event):
        st = state()
        st.window_width = self.width()
        st.window_height = self.height()
        save_state()
        super().closeEvent(event)
