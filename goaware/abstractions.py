"""Core abstractions for the weather pipeline."""
from __future__ import annotations

from typing import Protocol

from .entities import WeatherReading


class WeatherSource(Protocol):
    """Anything able to produce a current-conditions reading for a coordinate."""

    name: str

    def current(self, latitude: float, longitude: float, unit: str = "C") -> WeatherReading:
        """Return a reading in ``unit`` (``"C"`` or ``"F"``)."""
        ...


__all__ = ["WeatherSource"]
