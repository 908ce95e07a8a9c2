"""Thermometer and its text message format."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from homedevices.temperature import Temperature

_TERMOMETER_RE = re.compile(r"^Termometer(\s)+(\d+(\.\d+)?)")


class TermometerParseError(ValueError):
    """Raised when text is not a valid thermometer message."""


@dataclass
class Termometer:
    """A thermometer reporting its temperature."""

    temperature: Temperature = field(default_factory=Temperature)

    @classmethod
    def parse(cls, text: str) -> Termometer:
        """Parse a message such as ``"Termometer 21.5 C"``."""
        match = _TERMOMETER_RE.match(text)
        if match is None:
            raise TermometerParseError("does not look like message from termometer")
        number = match.group(2)
        if not number.isascii():
            raise TermometerParseError("cannot parse float from string")
        return cls(Temperature(float(number)))

    def __str__(self) -> str:
        return f"Termometer {self.temperature}"