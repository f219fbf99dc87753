from __future__ import annotations

import pytest

from backend.api import views


@pytest.fixture(autouse=True)
def fresh_services():
    views.get_weather_service.cache_clear()
    views.get_country_weather_service.cache_clear()
    yield
    views.get_weather_service.cache_clear()
    views.get_country_weather_service.cache_clear()
