"""
Validation of hand-typed channel values.

Accepted text is ``0`` or ``1`` optionally followed by a ``.`` or ``,``
separator and one or two digits, never exceeding ``1.00``.
"""

from __future__ import annotations

import re

CHANNEL_PATTERN = re.compile(r"^(0([.,]\d{1,2})?|1([.,]00?)?)$")


class ChannelValueError(ValueError):
    title = "Invalid value"


class EmptyValueError(ChannelValueError):
    title = "No value"

    def __init__(self, message: str = "Value field cannot be empty"):
        super().__init__(message)


class WrongFormatError(ChannelValueError):
    title = "Wrong format"

    def __init__(
        self,
        message: str = (
            "The value cannot contain letters, special characters "
            "and must be in the range between 0.00 and 1.00."
        ),
    ):
        super().__init__(message)


def parse_channel_text(text: str) -> float:
    """Parse a channel value typed by the user.

    Raises ``EmptyValueError`` for empty input and ``WrongFormatError`` for
    anything the pattern rejects.
    """
    if not text:
        raise EmptyValueError()
    if CHANNEL_PATTERN.fullmatch(text) is None:
        raise WrongFormatError()
    return float(text.replace(",", "."))
