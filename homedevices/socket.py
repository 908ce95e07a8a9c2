"""Smart socket and its text message format."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from homedevices.power import Power

_SOCKET_RE = re.compile(r"^Socket(\s)+(\d+(\.\d+)?)")


class SocketParseError(ValueError):
    """Raised when text is not a valid socket message."""


@dataclass
class Socket:
    """A smart socket reporting its power draw."""

    power: Power = field(default_factory=Power)

    @classmethod
    def parse(cls, text: str) -> Socket:
        """Parse a message such as ``"Socket 1500 W"``."""
        match = _SOCKET_RE.match(text)
        if match is None:
            raise SocketParseError("does not look like message from socket")
        number = match.group(2)
        if not number.isascii():
            raise SocketParseError("cannot parse float from string")
        return cls(Power(float(number)))

    def __str__(self) -> str:
        return f"Socket {self.power} W"