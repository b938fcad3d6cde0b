from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

CHANNELS = ("red", "green", "blue")


def format_channel(value: float) -> str:
    return f"{value:.2f}"


def _normalize(value: float) -> float:
    return round(min(max(float(value), 0.0), 1.0), 2)


@dataclass
class ColorValue:
    """Editable RGB channels in [0.0, 1.0], kept at two-decimal precision."""

    red: Optional[float] = None
    green: Optional[float] = None
    blue: Optional[float] = None

    @classmethod
    def from_floats(cls, red: float, green: float, blue: float) -> "ColorValue":
        return cls(_normalize(red), _normalize(green), _normalize(blue))

    def get(self, channel: str) -> float:
        if channel not in CHANNELS:
            raise KeyError(channel)
        value = getattr(self, channel)
        return 0.0 if value is None else value

    def set(self, channel: str, value: float) -> float:
        if channel not in CHANNELS:
            raise KeyError(channel)
        value = _normalize(value)
        setattr(self, channel, value)
        return value

    def as_tuple(self) -> Tuple[float, float, float]:
        return self.get("red"), self.get("green"), self.get("blue")
