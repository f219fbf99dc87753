from __future__ import annotations

import logging
import math
from typing import Optional

from .base import ProviderError, WeatherProvider, normalize_unit
from ..entities import WeatherReading
from ..weather_codes import describe_weather_code


CURRENT_FIELDS = (
    "temperature_2m",
    "relative_humidity_2m",
    "weather_code",
    "wind_speed_10m",
    "is_day",
)

_TEMPERATURE_UNITS = {"C": "celsius", "F": "fahrenheit"}


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


class OpenMeteoProvider(WeatherProvider):
    name = "open-meteo"
    base_url = "https://api.open-meteo.com/v1/forecast"

    def __init__(self, base_url: Optional[str] = None, **kwargs) -> None:
        super().__init__(**kwargs)
        self.base_url = base_url or self.base_url
        self._log = logging.getLogger(self.__class__.__name__)

    def current(self, latitude: float, longitude: float, unit: str = "C") -> WeatherReading:
        unit = normalize_unit(unit)
        params = {
            "latitude": latitude,
            "longitude": longitude,
            "current": ",".join(CURRENT_FIELDS),
            "temperature_unit": _TEMPERATURE_UNITS[unit],
            # km/h regardless of the temperature unit
            "wind_speed_unit": "kmh",
            "timezone": "auto",
        }
        response = self._request("GET", self.base_url, params=params)
        data = self._json(response)
        current = data.get("current")
        if not isinstance(current, dict):
            raise ProviderError("missing current weather")

        temperature = _number(current, "temperature_2m")
        humidity = _number(current, "relative_humidity_2m")
        wind_speed = _number(current, "wind_speed_10m")
        code = _number(current, "weather_code")
        is_day = _number(current, "is_day")
        if code != int(code):
            raise ProviderError(f"invalid weather_code: {code!r}")
        code = int(code)

        return WeatherReading(
            temperature=_round_half_up(temperature),
            unit=unit,
            description=describe_weather_code(code, is_day == 1),
            humidity=humidity,
            wind_speed=_round_half_up(wind_speed),
            condition_code=str(code),
            source=self.name,
        )


def _number(payload: dict, field: str) -> float:
    value = payload.get(field)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ProviderError(f"missing or invalid {field}: {value!r}")
    if isinstance(value, float) and not math.isfinite(value):
        raise ProviderError(f"non-finite {field}")
    return value


__all__ = ["OpenMeteoProvider", "CURRENT_FIELDS"]
