"""REST API views for country and coordinate weather."""
from __future__ import annotations

from dataclasses import asdict
from functools import lru_cache

from django.conf import settings
from rest_framework import status
from rest_framework.permissions import AllowAny
from rest_framework.response import Response
from rest_framework.views import APIView

from goaware.locations.cities import is_known_country
from goaware.providers.base import RequestConfig, SUPPORTED_UNITS
from goaware.providers.openmeteo import OpenMeteoProvider
from goaware.providers.synthetic import SyntheticWeatherProvider
from goaware.reports import format_country_weather
from goaware.services.weather import CountryWeatherService, WeatherService


@lru_cache(maxsize=1)
def get_weather_service() -> WeatherService:
    primary = OpenMeteoProvider(
        base_url=settings.OPEN_METEO_URL,
        request_config=RequestConfig(timeout=settings.WEATHER_REQUEST_TIMEOUT),
    )
    return WeatherService(primary_provider=primary, fallback_provider=SyntheticWeatherProvider())


@lru_cache(maxsize=1)
def get_country_weather_service() -> CountryWeatherService:
    return CountryWeatherService(get_weather_service(), max_workers=settings.WEATHER_FETCH_WORKERS)


def _country_param(request):
    country = (request.query_params.get("country") or "").strip()
    if not country:
        return None, Response({"detail": "country query parameter is required"}, status=status.HTTP_400_BAD_REQUEST)
    return country, None


class WeatherView(APIView):
    """Provide the current reading for requested coordinates."""

    permission_classes = [AllowAny]

    def get(self, request, *args, **kwargs):  # noqa: D401
        """Return the weather reading for the specified coordinates."""
        try:
            latitude = float(request.query_params["lat"])
            longitude = float(request.query_params["lon"])
        except KeyError:
            return Response({"detail": "lat and lon query parameters are required"}, status=status.HTTP_400_BAD_REQUEST)
        except ValueError:
            return Response({"detail": "lat and lon must be valid floating point numbers"}, status=status.HTTP_400_BAD_REQUEST)
        if not (-90.0 <= latitude <= 90.0 and -180.0 <= longitude <= 180.0):
            return Response({"detail": "lat or lon out of range"}, status=status.HTTP_400_BAD_REQUEST)

        unit = request.query_params.get("unit", "C").upper()
        if unit not in SUPPORTED_UNITS:
            return Response({"detail": "unit must be C or F"}, status=status.HTTP_400_BAD_REQUEST)

        reading = get_weather_service().get_current(latitude, longitude, unit)
        payload = asdict(reading)
        payload.update(latitude=latitude, longitude=longitude)
        return Response(payload, status=status.HTTP_200_OK)


class CitiesView(APIView):
    """Representative cities for a country, alias or region name."""

    permission_classes = [AllowAny]

    def get(self, request, *args, **kwargs):
        country, error = _country_param(request)
        if error is not None:
            return error
        cities = get_country_weather_service().top_cities(country)
        return Response(
            {"country": country, "cities": cities, "known": is_known_country(country)},
            status=status.HTTP_200_OK,
        )


class CountryWeatherView(APIView):
    """Current weather for each representative city of a country."""

    permission_classes = [AllowAny]

    def get(self, request, *args, **kwargs):
        country, error = _country_param(request)
        if error is not None:
            return error
        report = get_country_weather_service().report_for(country)
        return Response(
            {
                "country": country,
                "cities": [row.as_payload() for row in report],
                "report": format_country_weather(country, report),
            },
            status=status.HTTP_200_OK,
        )
