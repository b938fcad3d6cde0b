from __future__ import annotations

from typing import Dict, Optional, Protocol, Tuple

from PyQt5.QtCore import QObject, pyqtSignal

from models.color_value import CHANNELS, ColorValue, format_channel
from services import debug_log
from services.channel_validator import ChannelValueError, parse_channel_text

SLIDER_STEPS = 100


class ColorDelegate(Protocol):
    """Receives the color confirmed in the editor."""

    def set_view_color(self, red: float, green: float, blue: float) -> None:
        ...


class ColorEditorController(QObject):
    """
    Owns the channel values shown by the color editor.

    Views forward slider moves and finished text edits here and render
    whatever the signals report back. Text edits are validated only when the
    edit completes, never per keystroke.
    """

    channel_changed = pyqtSignal(str, float)
    color_changed = pyqtSignal(float, float, float)
    # channel, title, message, text to restore into the field
    input_rejected = pyqtSignal(str, str, str, str)
    confirmed = pyqtSignal(float, float, float)

    def __init__(self, initial: ColorValue, delegate: Optional[ColorDelegate] = None, parent=None):
        super().__init__(parent)
        self._color = ColorValue.from_floats(*initial.as_tuple())
        self._delegate = delegate
        self._edit_start: Dict[str, str] = {}
        self._delivered = False

    # --- State --------------------------------------------------------------
    def value(self, channel: str) -> float:
        return self._color.get(channel)

    def color(self) -> Tuple[float, float, float]:
        return self._color.as_tuple()

    def text(self, channel: str) -> str:
        return format_channel(self.value(channel))

    def refresh(self) -> None:
        for channel in CHANNELS:
            self.channel_changed.emit(channel, self.value(channel))
        self.color_changed.emit(*self.color())

    # --- Mutations ----------------------------------------------------------
    def set_channel(self, channel: str, value: float) -> None:
        value = self._color.set(channel, value)
        if channel in self._edit_start:
            # Field text is re-rendered, so a later restore must use it
            self._edit_start[channel] = format_channel(value)
        self.channel_changed.emit(channel, value)
        self.color_changed.emit(*self.color())

    def slider_moved(self, channel: str, position: int) -> None:
        self.set_channel(channel, position / SLIDER_STEPS)

    def begin_edit(self, channel: str, text: str) -> None:
        if channel not in CHANNELS:
            raise KeyError(channel)
        self._edit_start[channel] = text

    def finish_edit(self, channel: str, text: str) -> bool:
        restore = self._edit_start.pop(channel, None)
        if restore is None:
            restore = self.text(channel)
        try:
            value = parse_channel_text(text)
        except ChannelValueError as ex:
            debug_log.log(f"editor: rejected {channel}={text!r} ({ex.title})")
            self.input_rejected.emit(channel, ex.title, str(ex), restore)
            return False
        self.set_channel(channel, value)
        return True

    # --- Confirmation -------------------------------------------------------
    def confirm(self) -> bool:
        """Hand the current color to the delegate; only the first call counts."""
        if self._delivered:
            return False
        self._delivered = True
        red, green, blue = self.color()
        debug_log.log(f"editor: confirmed red={red:.2f} green={green:.2f} blue={blue:.2f}")
        if self._delegate is not None:
            self._delegate.set_view_color(red, green, blue)
        self.confirmed.emit(red, green, blue)
        return True
