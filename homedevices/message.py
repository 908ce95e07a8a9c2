"""Plain-number device messages where zero means the device is off."""

from __future__ import annotations

import re
from dataclasses import dataclass

from homedevices.power import _format_float

_FLOAT_RE = re.compile(
    r"[+-]?(?:inf|infinity|nan|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)",
    re.IGNORECASE,
)
_BYTE_RE = re.compile(r"\+?[0-9]+")


@dataclass(frozen=True)
class ThermometerMessage:
    """A thermometer reading; a value of zero means the thermometer is off."""

    value: float = 0.0

    @classmethod
    def parse(cls, text: str) -> ThermometerMessage:
        """Parse a number, surrounding whitespace allowed."""
        stripped = text.strip()
        if not _FLOAT_RE.fullmatch(stripped):
            raise ValueError(f"invalid float literal: {stripped!r}")
        return cls(float(stripped))

    def is_off(self) -> bool:
        """True when the message switches the thermometer off."""
        return self.value == 0

    def __str__(self) -> str:
        return "0" if self.is_off() else _format_float(self.value)


@dataclass(frozen=True)
class SocketMessage:
    """A socket level from 0 to 255; zero means the socket is off."""

    value: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.value <= 255:
            raise ValueError(f"socket level out of range: {self.value}")

    @classmethod
    def parse(cls, text: str) -> SocketMessage:
        """Parse an unsigned byte, surrounding whitespace allowed."""
        stripped = text.strip()
        if not _BYTE_RE.fullmatch(stripped):
            raise ValueError(f"invalid digit found in string: {stripped!r}")
        number = int(stripped)
        if number > 255:
            raise ValueError(f"number too large to fit in target type: {stripped!r}")
        return cls(number)

    def is_off(self) -> bool:
        """True when the message switches the socket off."""
        return self.value == 0

    def __str__(self) -> str:
        return "0" if self.is_off() else str(self.value)