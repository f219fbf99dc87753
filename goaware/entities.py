from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True, slots=True)
class Coordinate:
    """Latitude/longitude pair in decimal degrees."""

    latitude: float
    longitude: float


@dataclass(frozen=True, slots=True)
class WeatherReading:
    """Normalized current-conditions reading.

    - temperature in whole degrees of ``unit`` (``"C"`` or ``"F"``)
    - humidity as a relative percentage (0-100)
    - wind speed in whole kilometres per hour
    """

    temperature: float
    unit: str
    description: str
    humidity: float
    wind_speed: float
    condition_code: Optional[str] = None
    source: str = ""


@dataclass(frozen=True, slots=True)
class CityWeather:
    """One row of a country weather report."""

    city: str
    temperature: float
    condition: str
    humidity: float
    wind_speed: float
    condition_code: Optional[str] = None
    source: str = ""

    @classmethod
    def from_reading(cls, city: str, reading: WeatherReading) -> "CityWeather":
        return cls(
            city=city,
            temperature=reading.temperature,
            condition=reading.description,
            humidity=reading.humidity,
            wind_speed=reading.wind_speed,
            condition_code=reading.condition_code,
            source=reading.source,
        )

    def as_payload(self) -> Dict[str, Any]:
        return {
            "city": self.city,
            "temperature": self.temperature,
            "condition": self.condition,
            "humidity": self.humidity,
            "windSpeed": self.wind_speed,
            "conditionCode": self.condition_code,
        }


__all__ = ["Coordinate", "WeatherReading", "CityWeather"]
