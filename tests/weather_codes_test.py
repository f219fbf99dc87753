from __future__ import annotations

import pytest

from goaware.weather_codes import UNKNOWN_WEATHER, describe_weather_code, known_codes


def test_clear_codes_depend_on_daylight() -> None:
    assert describe_weather_code(0, True) == "Clear sky"
    assert describe_weather_code(0, False) == "Clear night"
    assert describe_weather_code(1, True) == "Mainly clear"
    assert describe_weather_code(1, False) == "Mainly clear night"


@pytest.mark.parametrize("code", sorted(known_codes() - {0, 1}))
def test_other_codes_ignore_daylight(code: int) -> None:
    assert describe_weather_code(code, True) == describe_weather_code(code, False)
    assert describe_weather_code(code, True) != UNKNOWN_WEATHER


def test_table_covers_wmo_scheme() -> None:
    assert known_codes() == {
        0, 1, 2, 3, 45, 48, 51, 53, 55, 56, 57, 61, 63, 65, 66, 67,
        71, 73, 75, 77, 80, 81, 82, 85, 86, 95, 96, 99,
    }
    assert describe_weather_code(63, True) == "Moderate rain"
    assert describe_weather_code(99, False) == "Thunderstorm with heavy hail"


@pytest.mark.parametrize("is_day", [True, False])
@pytest.mark.parametrize("code", [9999, -1, 4, 100])
def test_unknown_codes(code: int, is_day: bool) -> None:
    assert describe_weather_code(code, is_day) == "Unknown weather"
