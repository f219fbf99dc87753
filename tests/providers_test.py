from __future__ import annotations

import random
import threading

import pytest
import requests

from goaware.entities import WeatherReading
from goaware.providers.base import ProviderError, RequestConfig
from goaware.providers.openmeteo import OpenMeteoProvider
from goaware.providers.synthetic import GENERIC_CONDITIONS, SyntheticWeatherProvider


URL = "https://openmeteo.test/v1/forecast"


def current_payload(**overrides) -> dict:
    current = {
        "time": "2024-05-01T12:00",
        "interval": 900,
        "temperature_2m": 21.5,
        "relative_humidity_2m": 65,
        "weather_code": 0,
        "wind_speed_10m": 12.4,
        "is_day": 1,
    }
    current.update(overrides)
    return {"latitude": 35.7, "longitude": 139.7, "current": current}


def test_openmeteo_current_normalization(requests_mock):
    provider = OpenMeteoProvider(base_url=URL)
    requests_mock.get(URL, json=current_payload())

    reading = provider.current(35.6762, 139.6503)

    assert reading == WeatherReading(
        temperature=22,
        unit="C",
        description="Clear sky",
        humidity=65,
        wind_speed=12,
        condition_code="0",
        source="open-meteo",
    )


def test_openmeteo_request_parameters(requests_mock):
    provider = OpenMeteoProvider(base_url=URL)
    requests_mock.get(URL, json=current_payload())

    provider.current(35.6762, 139.6503, unit="F")

    qs = requests_mock.last_request.qs
    assert qs["latitude"] == ["35.6762"]
    assert qs["longitude"] == ["139.6503"]
    assert qs["current"] == ["temperature_2m,relative_humidity_2m,weather_code,wind_speed_10m,is_day"]
    assert qs["temperature_unit"] == ["fahrenheit"]
    assert qs["wind_speed_unit"] == ["kmh"]
    assert qs["timezone"] == ["auto"]


def test_openmeteo_night_and_rounding(requests_mock):
    provider = OpenMeteoProvider(base_url=URL)
    requests_mock.get(
        URL,
        json=current_payload(temperature_2m=-2.5, wind_speed_10m=0.5, weather_code=1, is_day=0, relative_humidity_2m=88),
    )

    reading = provider.current(59.9, 30.3)

    assert reading.temperature == -2
    assert reading.wind_speed == 1
    assert reading.humidity == 88
    assert reading.description == "Mainly clear night"
    assert reading.condition_code == "1"


def test_openmeteo_unknown_code_is_not_an_error(requests_mock):
    provider = OpenMeteoProvider(base_url=URL)
    requests_mock.get(URL, json=current_payload(weather_code=42))

    reading = provider.current(0.0, 0.0)

    assert reading.description == "Unknown weather"
    assert reading.condition_code == "42"


@pytest.mark.parametrize("status_code", [400, 404, 429, 500, 503])
def test_openmeteo_http_errors(requests_mock, status_code):
    provider = OpenMeteoProvider(base_url=URL)
    requests_mock.get(URL, status_code=status_code, text="upstream error")

    with pytest.raises(ProviderError):
        provider.current(0.0, 0.0)


@pytest.mark.parametrize(
    "exc",
    [requests.exceptions.ConnectTimeout, requests.exceptions.ReadTimeout, requests.exceptions.ConnectionError],
)
def test_openmeteo_transport_errors(requests_mock, exc):
    provider = OpenMeteoProvider(base_url=URL)
    requests_mock.get(URL, exc=exc)

    with pytest.raises(ProviderError) as info:
        provider.current(0.0, 0.0)

    assert isinstance(info.value.__cause__, exc)


@pytest.mark.parametrize(
    "kwargs",
    [
        {"text": "<html>not json</html>"},
        {"json": []},
        {"json": {"hourly": {}}},
        {"json": {"current": None}},
        {"json": current_payload(temperature_2m=None)},
        {"json": current_payload(relative_humidity_2m="wet")},
        {"json": current_payload(weather_code=2.5)},
        {"json": current_payload(is_day=True)},
        {"json": {"current": {"temperature_2m": 10.0}}},
    ],
)
def test_openmeteo_malformed_payloads(requests_mock, kwargs):
    provider = OpenMeteoProvider(base_url=URL)
    requests_mock.get(URL, **kwargs)

    with pytest.raises(ProviderError):
        provider.current(0.0, 0.0)


def test_openmeteo_uses_configured_timeout():
    class RecordingSession(requests.Session):
        def request(self, method, url, **kwargs):
            self.seen = kwargs
            raise requests.exceptions.ReadTimeout("slow")

    session = RecordingSession()
    provider = OpenMeteoProvider(base_url=URL, session=session, request_config=RequestConfig(timeout=2.5))

    with pytest.raises(ProviderError):
        provider.current(0.0, 0.0)

    assert session.seen["timeout"] == 2.5


@pytest.mark.parametrize(
    "unit, expected_unit, api_unit",
    [("f", "F", "fahrenheit"), (" F ", "F", "fahrenheit"), ("c", "C", "celsius"), ("K", "C", "celsius"), (None, "C", "celsius")],
)
def test_openmeteo_normalizes_unit(requests_mock, unit, expected_unit, api_unit):
    requests_mock.get(URL, json=current_payload())

    reading = OpenMeteoProvider(base_url=URL).current(0.0, 0.0, unit=unit)

    assert reading.unit == expected_unit
    assert requests_mock.last_request.qs["temperature_unit"] == [api_unit]


def test_openmeteo_sessions_are_per_thread():
    provider = OpenMeteoProvider(base_url=URL)
    seen = []

    def grab():
        seen.append(provider.session)

    worker = threading.Thread(target=grab)
    worker.start()
    worker.join()

    assert seen[0] is not provider.session
    assert provider.session is provider.session


def test_injected_session_is_shared_across_threads():
    session = requests.Session()
    provider = OpenMeteoProvider(base_url=URL, session=session)
    seen = []

    worker = threading.Thread(target=lambda: seen.append(provider.session))
    worker.start()
    worker.join()

    assert seen == [session]
    assert provider.session is session


@pytest.mark.parametrize("unit, low, high", [("C", 5, 34), ("F", 41, 94)])
def test_synthetic_readings_stay_plausible(unit, low, high):
    provider = SyntheticWeatherProvider(rng=random.Random(1234))

    for _ in range(300):
        reading = provider.current(10.0, 20.0, unit)
        assert low <= reading.temperature <= high
        assert 30 <= reading.humidity <= 69
        assert 5 <= reading.wind_speed <= 24
        assert reading.description in GENERIC_CONDITIONS
        assert reading.unit == unit
        assert reading.condition_code is None
        assert reading.source == "synthetic"


def test_synthetic_is_deterministic_with_seeded_rng():
    first = SyntheticWeatherProvider(rng=random.Random(7)).current(0.0, 0.0)
    second = SyntheticWeatherProvider(rng=random.Random(7)).current(0.0, 0.0)

    assert first == second
