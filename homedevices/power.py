"""Electrical power reported by a smart socket."""

from __future__ import annotations

import math
from decimal import Decimal


def _format_float(value: float) -> str:
    """Format a float the shortest way, without a trailing '.0' or exponent."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    if value == 0:
        return "-0" if math.copysign(1.0, value) < 0 else "0"
    if value.is_integer():
        return str(int(value))
    text = repr(value)
    if "e" in text or "E" in text:
        text = format(Decimal(text), "f")
    return text


class Power:
    """Power in watts. Updates outside the allowed range are ignored."""

    __slots__ = ("_value",)

    MIN_POWER = 500.0
    MAX_POWER = 2000.0
    GRADUATION = 2.5

    def __init__(self, value: float = 0.0) -> None:
        self._value = float(value)

    @property
    def value(self) -> float:
        """Current power in watts."""
        return self._value

    @value.setter
    def value(self, new_value: float) -> None:
        if self.MIN_POWER <= new_value <= self.MAX_POWER:
            self._value = float(new_value)

    @staticmethod
    def ratio(power: float) -> float:
        """Position of ``power`` on the scale, 0.0 below the minimum."""
        if power >= Power.MIN_POWER:
            return (power - Power.MIN_POWER) / (Power.MAX_POWER - Power.MIN_POWER)
        return 0.0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Power):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash(self._value)

    def __repr__(self) -> str:
        return f"Power({self._value!r})"

    def __str__(self) -> str:
        return _format_float(self._value)