"""Plain-text rendering of country weather reports for the assistant."""
from __future__ import annotations

from typing import Iterable

from .entities import CityWeather


REPORT_FOOTER = (
    "This weather information can help you plan what to pack and the best times "
    "to visit outdoor attractions."
)


def format_city_line(row: CityWeather) -> str:
    return (
        f"{row.city}: {row.temperature}°C, {row.condition}, "
        f"Humidity: {row.humidity}%, Wind: {row.wind_speed} km/h"
    )


def format_country_weather(country: str, report: Iterable[CityWeather]) -> str:
    lines = "\n".join(format_city_line(row) for row in report)
    return f"Current Weather Conditions in {country}:\n\n{lines}\n\n{REPORT_FOOTER}"


__all__ = ["format_country_weather", "format_city_line", "REPORT_FOOTER"]
