"""Tests for models.color_value."""

import pytest

from models.color_value import CHANNELS, ColorValue, format_channel


def test_missing_channels_read_as_zero():
    color = ColorValue()
    assert color.as_tuple() == (0.0, 0.0, 0.0)


def test_from_floats_rounds_to_two_decimals():
    color = ColorValue.from_floats(0.2001, 0.456, 0.999)
    assert color.as_tuple() == (0.2, 0.46, 1.0)


def test_set_clamps_into_unit_range():
    color = ColorValue()
    assert color.set("red", 1.7) == 1.0
    assert color.set("green", -0.3) == 0.0
    assert color.get("red") == 1.0
    assert color.get("green") == 0.0


def test_unknown_channel():
    color = ColorValue()
    with pytest.raises(KeyError):
        color.get("alpha")
    with pytest.raises(KeyError):
        color.set("alpha", 0.5)


@pytest.mark.parametrize("value, text", [(0.0, "0.00"), (0.5, "0.50"), (0.07, "0.07"), (1.0, "1.00")])
def test_format_channel(value, text):
    assert format_channel(value) == text


def test_channel_order():
    assert CHANNELS == ("red", "green", "blue")
