"""API URL configuration."""
from __future__ import annotations

from django.urls import path

from backend.api.views import CitiesView, CountryWeatherView, WeatherView

urlpatterns = [
    path("weather", WeatherView.as_view(), name="weather"),
    path("cities", CitiesView.as_view(), name="cities"),
    path("country-weather", CountryWeatherView.as_view(), name="country-weather"),
]
