from PyQt5.QtGui import QColor

from models.color_value import ColorValue


def qcolor_to_value(color: QColor) -> ColorValue:
    if color is None or not color.isValid():
        return ColorValue.from_floats(0.0, 0.0, 0.0)
    return ColorValue.from_floats(color.redF(), color.greenF(), color.blueF())


def value_to_qcolor(red: float, green: float, blue: float) -> QColor:
    return QColor.fromRgbF(
        min(max(float(red), 0.0), 1.0),
        min(max(float(green), 0.0), 1.0),
        min(max(float(blue), 0.0), 1.0),
    )


def parse_qcolor(text: str, fallback: str = "#ffffff") -> QColor:
    color = QColor(text or "")
    if not color.isValid():
        color = QColor(fallback)
    return color
