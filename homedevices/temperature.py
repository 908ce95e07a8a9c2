"""Temperature reported by a thermometer."""

from __future__ import annotations


class Temperature:
    """Temperature in degrees Celsius. Updates outside the range are ignored."""

    __slots__ = ("_value",)

    MIN_TEMPERATURE = 0.0
    MAX_TEMPERATURE = 100.0
    GRADUATION = 0.5

    def __init__(self, value: float = 0.0) -> None:
        self._value = float(value)

    @property
    def value(self) -> float:
        """Current temperature in degrees Celsius."""
        return self._value

    @value.setter
    def value(self, new_value: float) -> None:
        if self.MIN_TEMPERATURE <= new_value <= self.MAX_TEMPERATURE:
            self._value = float(new_value)

    @staticmethod
    def ratio(temperature: float) -> float:
        """Position of ``temperature`` on the scale."""
        return (temperature - Temperature.MIN_TEMPERATURE) / (
            Temperature.MAX_TEMPERATURE - Temperature.MIN_TEMPERATURE
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Temperature):
            return NotImplemented
        return self._value == other._value

    def __hash__(self) -> int:
        return hash(self._value)

    def __repr__(self) -> str:
        return f"Temperature({self._value!r})"

    def __str__(self) -> str:
        return f"{self._value:.3f}"