from __future__ import annotations

import random
import threading
from typing import List, Tuple

import pytest

from goaware.entities import CityWeather, Coordinate, WeatherReading
from goaware.locations.cities import top_cities
from goaware.locations.coordinates import DEFAULT_COORDINATE, coordinate_of
from goaware.providers.base import ProviderError
from goaware.providers.openmeteo import OpenMeteoProvider
from goaware.providers.synthetic import SyntheticWeatherProvider
from goaware.reports import REPORT_FOOTER, format_country_weather
from goaware.services.weather import CountryWeatherService, WeatherService


class RecordingSource:
    name = "recording"

    def __init__(self, temperature: float = 18) -> None:
        self.temperature = temperature
        self.calls: List[Tuple[float, float, str]] = []
        self._lock = threading.Lock()

    def current(self, latitude: float, longitude: float, unit: str = "C") -> WeatherReading:
        with self._lock:
            self.calls.append((latitude, longitude, unit))
        return WeatherReading(
            temperature=self.temperature,
            unit=unit,
            description="Overcast",
            humidity=70,
            wind_speed=9,
            condition_code="3",
            source=self.name,
        )


class FailingSource:
    name = "failing"

    def __init__(self, exc: Exception) -> None:
        self.exc = exc
        self.calls = 0

    def current(self, latitude: float, longitude: float, unit: str = "C") -> WeatherReading:
        self.calls += 1
        raise self.exc


def test_weather_service_prefers_primary():
    primary = RecordingSource()
    fallback = RecordingSource(temperature=99)
    service = WeatherService(primary_provider=primary, fallback_provider=fallback)

    reading = service.get_current(1.0, 2.0)

    assert reading.source == "recording"
    assert reading.temperature == 18
    assert primary.calls == [(1.0, 2.0, "C")]
    assert fallback.calls == []


@pytest.mark.parametrize(
    "exc",
    [ProviderError("HTTP 500"), KeyError("current"), RuntimeError("boom"), ZeroDivisionError()],
)
def test_weather_service_falls_back_without_retrying(exc):
    primary = FailingSource(exc)
    service = WeatherService(
        primary_provider=primary,
        fallback_provider=SyntheticWeatherProvider(rng=random.Random(3)),
    )

    reading = service.get_current(1.0, 2.0, "F")

    assert primary.calls == 1
    assert reading.source == "synthetic"
    assert reading.unit == "F"
    assert 41 <= reading.temperature <= 94


def test_weather_service_falls_back_on_upstream_outage(requests_mock):
    url = "https://openmeteo.test/v1/forecast"
    requests_mock.get(url, status_code=502, text="bad gateway")
    service = WeatherService(
        primary_provider=OpenMeteoProvider(base_url=url),
        fallback_provider=SyntheticWeatherProvider(),
    )

    reading = service.get_current(35.6762, 139.6503)

    assert reading.source == "synthetic"
    assert requests_mock.call_count == 1


@pytest.mark.parametrize(
    "unit, expected",
    [("c", "C"), ("f", "F"), (" F", "F"), ("kelvin", "C"), ("", "C"), (None, "C")],
)
def test_weather_service_normalizes_any_unit(unit, expected):
    primary = RecordingSource()
    service = WeatherService(primary_provider=primary, fallback_provider=RecordingSource())

    reading = service.get_current(0.0, 0.0, unit)

    assert reading.unit == expected
    assert primary.calls == [(0.0, 0.0, expected)]


@pytest.mark.parametrize("unit", ["c", "kelvin", None, 42])
def test_weather_service_never_raises_for_odd_units_during_outage(unit):
    service = WeatherService(
        primary_provider=FailingSource(RuntimeError("boom")),
        fallback_provider=SyntheticWeatherProvider(rng=random.Random(5)),
    )

    reading = service.get_current(0.0, 0.0, unit)

    assert reading.unit == "C"
    assert reading.source == "synthetic"
    assert 5 <= reading.temperature <= 34


def test_report_for_japan_preserves_city_order():
    primary = RecordingSource()
    service = CountryWeatherService(WeatherService(primary_provider=primary))

    report = service.report_for("Japan")

    assert [row.city for row in report] == top_cities("Japan") == ["Tokyo", "Osaka", "Kyoto"]
    assert primary.calls == [
        (35.6762, 139.6503, "C"),
        (34.6937, 135.5023, "C"),
        (35.0116, 135.7681, "C"),
    ]
    assert report[0] == CityWeather(
        city="Tokyo",
        temperature=18,
        condition="Overcast",
        humidity=70,
        wind_speed=9,
        condition_code="3",
        source="recording",
    )


def test_report_for_unknown_country_uses_default_coordinate():
    primary = RecordingSource()
    service = CountryWeatherService(WeatherService(primary_provider=primary))

    report = service.report_for("Atlantis")

    assert [row.city for row in report] == ["Atlantis"]
    assert primary.calls == [(DEFAULT_COORDINATE.latitude, DEFAULT_COORDINATE.longitude, "C")]


def test_report_for_unknown_country_survives_outage():
    service = CountryWeatherService(
        WeatherService(
            primary_provider=FailingSource(ProviderError("timeout")),
            fallback_provider=SyntheticWeatherProvider(rng=random.Random(11)),
        )
    )

    report = service.report_for("Atlantis")

    assert len(report) == 1
    row = report[0]
    assert row.city == "Atlantis"
    assert 5 <= row.temperature <= 34
    assert 30 <= row.humidity <= 69
    assert 5 <= row.wind_speed <= 24


def test_report_for_alias_uses_alias_coordinates():
    primary = RecordingSource()
    service = CountryWeatherService(WeatherService(primary_provider=primary))

    service.report_for("Britain")

    expected = [coordinate_of(city, "britain") for city in ("London", "Manchester", "Birmingham")]
    assert [Coordinate(lat, lon) for lat, lon, _ in primary.calls] == expected


def test_report_for_region_without_coordinates_uses_default():
    primary = RecordingSource()
    service = CountryWeatherService(WeatherService(primary_provider=primary))

    report = service.report_for("Balkans")

    assert [row.city for row in report] == ["Belgrade", "Zagreb", "Sarajevo"]
    assert {(lat, lon) for lat, lon, _ in primary.calls} == {(25.0, 0.0)}


def test_concurrent_fan_out_keeps_city_order():
    primary = RecordingSource()
    service = CountryWeatherService(WeatherService(primary_provider=primary), max_workers=3)

    report = service.report_for("usa")

    assert [row.city for row in report] == ["New York", "Los Angeles", "Chicago"]
    assert len(primary.calls) == 3


def test_payload_and_text_report():
    primary = RecordingSource(temperature=-4)
    service = CountryWeatherService(WeatherService(primary_provider=primary))
    report = service.report_for("Iceland")

    assert report[0].as_payload() == {
        "city": "Reykjavik",
        "temperature": -4,
        "condition": "Overcast",
        "humidity": 70,
        "windSpeed": 9,
        "conditionCode": "3",
    }

    text = format_country_weather("Iceland", report)
    assert text.startswith("Current Weather Conditions in Iceland:\n\n")
    assert "Reykjavik: -4°C, Overcast, Humidity: 70%, Wind: 9 km/h\n" in text
    assert text.endswith(REPORT_FOOTER)
    assert text.count("\n") == 6


def test_concurrent_fan_out_over_http(requests_mock):
    url = "https://openmeteo.test/v1/forecast"
    requests_mock.get(
        url,
        json={
            "current": {
                "temperature_2m": 11.0,
                "relative_humidity_2m": 60,
                "weather_code": 3,
                "wind_speed_10m": 8.0,
                "is_day": 1,
            }
        },
    )
    service = CountryWeatherService(
        WeatherService(primary_provider=OpenMeteoProvider(base_url=url)),
        max_workers=3,
    )

    report = service.report_for("Germany")

    assert [row.city for row in report] == ["Berlin", "Munich", "Hamburg"]
    assert {row.source for row in report} == {"open-meteo"}
    assert requests_mock.call_count == 3
