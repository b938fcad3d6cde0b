from __future__ import annotations

from typing import Dict, Optional

from PyQt5.QtCore import QEvent, Qt, pyqtSignal
from PyQt5.QtGui import QColor
from PyQt5.QtWidgets import (
    QDialog,
    QFrame,
    QGridLayout,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QMessageBox,
    QPushButton,
    QSlider,
    QVBoxLayout,
    QWidget,
)

from controllers.color_editor_controller import SLIDER_STEPS, ColorDelegate, ColorEditorController
from models.color_value import CHANNELS, format_channel
from services import debug_log
from ui.qt_color import qcolor_to_value, value_to_qcolor


class _ChannelRow(QWidget):
    """Name, value label, slider and text field for one channel."""

    slider_moved = pyqtSignal(str, int)
    edit_started = pyqtSignal(str, str)
    edit_finished = pyqtSignal(str, str)

    def __init__(self, channel: str, parent=None):
        super().__init__(parent)
        self.channel = channel

        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)

        self.name_label = QLabel(channel.capitalize())
        self.name_label.setMinimumWidth(48)
        layout.addWidget(self.name_label)

        self.value_label = QLabel("0.00")
        self.value_label.setMinimumWidth(36)
        layout.addWidget(self.value_label)

        self.slider = QSlider(Qt.Horizontal)
        self.slider.setRange(0, SLIDER_STEPS)
        self.slider.valueChanged.connect(lambda pos: self.slider_moved.emit(self.channel, int(pos)))
        layout.addWidget(self.slider, stretch=1)

        self.field = QLineEdit()
        self.field.setPlaceholderText("0.00")
        self.field.setFixedWidth(56)
        self.field.setAlignment(Qt.AlignRight | Qt.AlignVCenter)
        self.field.installEventFilter(self)
        self.field.editingFinished.connect(lambda: self.edit_finished.emit(self.channel, self.field.text()))
        layout.addWidget(self.field)

    def set_value(self, value: float):
        text = format_channel(value)
        self.value_label.setText(text)
        self.field.setText(text)
        self.slider.blockSignals(True)
        self.slider.setValue(int(round(value * SLIDER_STEPS)))
        self.slider.blockSignals(False)

    def set_text(self, text: str):
        self.field.setText(text)

    def eventFilter(self, obj, event):
        if obj == self.field and event.type() == QEvent.FocusIn:
            self.edit_started.emit(self.channel, self.field.text())
            return False
        return super().eventFilter(obj, event)


class ColorEditorDialog(QDialog):
    def __init__(self, color: QColor, delegate: Optional[ColorDelegate] = None, parent=None):
        super().__init__(parent)
        self.setWindowTitle("Edit Color")
        self.setModal(True)
        self.resize(420, 300)

        self.controller = ColorEditorController(qcolor_to_value(color), delegate, parent=self)
        self._alerting = False
        self._edit_rejected = False

        root = QVBoxLayout(self)

        self.preview = QFrame()
        self.preview.setObjectName("colorPreview")
        self.preview.setMinimumHeight(120)
        root.addWidget(self.preview)

        grid = QGridLayout()
        self.rows: Dict[str, _ChannelRow] = {}
        for i, channel in enumerate(CHANNELS):
            row = _ChannelRow(channel)
            row.slider_moved.connect(self.controller.slider_moved)
            row.edit_started.connect(self.controller.begin_edit)
            row.edit_finished.connect(self._on_edit_finished)
            grid.addWidget(row, i, 0)
            self.rows[channel] = row
        root.addLayout(grid)

        # Bottom row
        bottom = QHBoxLayout()
        bottom.addStretch(1)
        self.bt_cancel = QPushButton("Cancel")
        self.bt_done = QPushButton("Done")
        # Return inside a text field only finishes that edit
        for bt in (self.bt_cancel, self.bt_done):
            bt.setAutoDefault(False)
            bt.setDefault(False)
        bottom.addWidget(self.bt_cancel)
        bottom.addWidget(self.bt_done)
        root.addLayout(bottom)

        self.bt_cancel.clicked.connect(self.reject)
        self.bt_done.clicked.connect(self.on_done)

        self.controller.channel_changed.connect(self._render_channel)
        self.controller.color_changed.connect(self._render_preview)
        self.controller.input_rejected.connect(self._on_input_rejected)
        self.controller.confirmed.connect(lambda *_: self.accept())
        self.controller.refresh()

        r, g, b = self.controller.color()
        debug_log.log(f"editor: opened red={r:.2f} green={g:.2f} blue={b:.2f}")

    # Rendering
    def _render_channel(self, channel: str, value: float):
        self._edit_rejected = False
        self.rows[channel].set_value(value)

    def _render_preview(self, red: float, green: float, blue: float):
        name = value_to_qcolor(red, green, blue).name()
        self.preview.setStyleSheet(
            "#colorPreview {"
            f" background-color: {name};"
            " border-radius: 8px;"
            "}"
        )

    def preview_color(self) -> QColor:
        return value_to_qcolor(*self.controller.color())

    # Editing
    def _on_edit_finished(self, channel: str, text: str):
        # Focus moves to the notification while it is open
        if self._alerting:
            return
        if not self.controller.finish_edit(channel, text):
            self._edit_rejected = True

    def _on_input_rejected(self, channel: str, title: str, message: str, restore_text: str):
        self._alerting = True
        try:
            self.show_alert(title, message)
        finally:
            self._alerting = False
        row = self.rows[channel]
        row.set_text(restore_text)
        if row.field.hasFocus():
            self.controller.begin_edit(channel, restore_text)

    def show_alert(self, title: str, message: str):
        QMessageBox.warning(self, title, message)

    def end_editing(self) -> bool:
        """Finish any edit in progress; False when its text was rejected."""
        focused = self.focusWidget()
        if isinstance(focused, QLineEdit):
            focused.clearFocus()
        rejected, self._edit_rejected = self._edit_rejected, False
        return not rejected

    def mousePressEvent(self, event):
        self.end_editing()
        super().mousePressEvent(event)

    # Buttons
    def on_done(self):
        # Stay open so the user sees the restored value before confirming
        if not self.end_editing():
            return
        self.controller.confirm()
