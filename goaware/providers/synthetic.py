from __future__ import annotations

import logging
import random
from typing import Optional, Sequence

from .base import normalize_unit
from ..entities import WeatherReading


GENERIC_CONDITIONS: Sequence[str] = ("sunny", "cloudy", "partly cloudy", "rainy", "clear")

# inclusive bounds
TEMPERATURE_RANGES = {"C": (5, 34), "F": (41, 94)}
HUMIDITY_RANGE = (30, 69)
WIND_SPEED_RANGE = (5, 24)


class SyntheticWeatherProvider:
    """Produce plausible but made-up readings when no real source answers."""

    name = "synthetic"

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self._rng = rng or random.Random()
        self._log = logging.getLogger(self.__class__.__name__)

    def current(self, latitude: float, longitude: float, unit: str = "C") -> WeatherReading:
        unit = normalize_unit(unit)
        low, high = TEMPERATURE_RANGES[unit]
        self._log.debug("Synthesizing weather for %.4f, %.4f", latitude, longitude)
        return WeatherReading(
            temperature=self._rng.randint(low, high),
            unit=unit,
            description=self._rng.choice(GENERIC_CONDITIONS),
            humidity=self._rng.randint(*HUMIDITY_RANGE),
            wind_speed=self._rng.randint(*WIND_SPEED_RANGE),
            condition_code=None,
            source=self.name,
        )


__all__ = ["SyntheticWeatherProvider", "GENERIC_CONDITIONS", "TEMPERATURE_RANGES"]
