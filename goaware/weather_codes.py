"""WMO weather interpretation codes as used by Open-Meteo."""
from __future__ import annotations

from types import MappingProxyType
from typing import Mapping, Tuple

UNKNOWN_WEATHER = "Unknown weather"

# code -> (day text, night text)
_DAY_NIGHT: Mapping[int, Tuple[str, str]] = MappingProxyType(
    {
        0: ("Clear sky", "Clear night"),
        1: ("Mainly clear", "Mainly clear night"),
    }
)

WEATHER_CODES: Mapping[int, str] = MappingProxyType(
    {
        2: "Partly cloudy",
        3: "Overcast",
        45: "Fog",
        48: "Depositing rime fog",
        51: "Light drizzle",
        53: "Moderate drizzle",
        55: "Dense drizzle",
        56: "Light freezing drizzle",
        57: "Dense freezing drizzle",
        61: "Slight rain",
        63: "Moderate rain",
        65: "Heavy rain",
        66: "Light freezing rain",
        67: "Heavy freezing rain",
        71: "Slight snow fall",
        73: "Moderate snow fall",
        75: "Heavy snow fall",
        77: "Snow grains",
        80: "Slight rain showers",
        81: "Moderate rain showers",
        82: "Violent rain showers",
        85: "Slight snow showers",
        86: "Heavy snow showers",
        95: "Thunderstorm",
        96: "Thunderstorm with slight hail",
        99: "Thunderstorm with heavy hail",
    }
)


def describe_weather_code(code: int, is_day: bool) -> str:
    """Return a human-readable description for a WMO ``code``.

    Only codes 0 and 1 read differently at night. Codes outside the table
    yield ``"Unknown weather"``.
    """
    if code in _DAY_NIGHT:
        day, night = _DAY_NIGHT[code]
        return day if is_day else night
    return WEATHER_CODES.get(code, UNKNOWN_WEATHER)


def known_codes() -> frozenset:
    return frozenset(_DAY_NIGHT) | frozenset(WEATHER_CODES)


__all__ = ["describe_weather_code", "known_codes", "WEATHER_CODES", "UNKNOWN_WEATHER"]
