from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import List, Optional

from ..abstractions import WeatherSource
from ..entities import CityWeather, WeatherReading
from ..locations.cities import top_cities
from ..locations.coordinates import coordinate_of, has_coordinate
from ..providers.base import ProviderError, normalize_unit
from ..providers.openmeteo import OpenMeteoProvider
from ..providers.synthetic import SyntheticWeatherProvider


class WeatherService:
    """Primary source with a synthetic fallback behind one call that never fails."""

    def __init__(
        self,
        *,
        primary_provider: Optional[WeatherSource] = None,
        fallback_provider: Optional[WeatherSource] = None,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.primary = primary_provider or OpenMeteoProvider()
        self.fallback = fallback_provider or SyntheticWeatherProvider()
        self._log = logger or logging.getLogger(self.__class__.__name__)

    def get_current(self, latitude: float, longitude: float, unit: str = "C") -> WeatherReading:
        unit = normalize_unit(unit)
        try:
            return self.primary.current(latitude, longitude, unit)
        except ProviderError as exc:
            self._log.warning(
                "Provider %s failed for %.4f, %.4f: %s; using %s",
                self.primary.name, latitude, longitude, exc, self.fallback.name,
            )
        except Exception:  # noqa: BLE001 - upstream failures must not reach the caller
            self._log.exception(
                "Unexpected error from provider %s; using %s", self.primary.name, self.fallback.name
            )
        return self.fallback.current(latitude, longitude, unit)


class CountryWeatherService:
    """Resolve a country to its representative cities and report their weather.

    Readings are always requested in Celsius. With ``max_workers`` above one
    the per-city requests run on a thread pool; the report keeps city order
    either way.
    """

    UNIT = "C"

    def __init__(
        self,
        weather_service: Optional[WeatherService] = None,
        *,
        max_workers: int = 1,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        self.weather = weather_service or WeatherService()
        self.max_workers = max(1, int(max_workers))
        self._log = logger or logging.getLogger(self.__class__.__name__)

    def top_cities(self, country: str) -> List[str]:
        return top_cities(country)

    def report_for(self, country: str) -> List[CityWeather]:
        cities = top_cities(country)

        def fetch(city: str) -> CityWeather:
            if not has_coordinate(city, country):
                self._log.debug("Using default coordinate for %s, %s", city, country)
            coordinate = coordinate_of(city, country)
            reading = self.weather.get_current(coordinate.latitude, coordinate.longitude, self.UNIT)
            return CityWeather.from_reading(city, reading)

        if self.max_workers > 1 and len(cities) > 1:
            with ThreadPoolExecutor(max_workers=min(self.max_workers, len(cities))) as pool:
                report = list(pool.map(fetch, cities))
        else:
            report = [fetch(city) for city in cities]

        self._log.info("Weather report for %s: %s", country, ", ".join(cities))
        return report


__all__ = ["WeatherService", "CountryWeatherService"]
