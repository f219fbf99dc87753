"""Management command to fetch weather using the same stack as the API."""
from __future__ import annotations

import json
from dataclasses import asdict
from typing import Any

from django.core.management.base import BaseCommand, CommandError

from backend.api.views import get_country_weather_service, get_weather_service
from goaware.providers.base import SUPPORTED_UNITS
from goaware.reports import format_country_weather


class Command(BaseCommand):
    help = "Print current weather for a country's top cities or for a coordinate"

    def add_arguments(self, parser) -> None:  # noqa: D401
        parser.add_argument("--country", type=str, help="Country, alias or region name")
        parser.add_argument("--lat", type=float, help="Latitude")
        parser.add_argument("--lon", type=float, help="Longitude")
        parser.add_argument("--unit", type=str, default="C", help="Temperature unit for --lat/--lon (C or F)")
        parser.add_argument("--json", action="store_true", help="Emit JSON instead of the text report")

    def handle(self, *args: Any, **options: Any) -> None:  # noqa: D401
        country = (options.get("country") or "").strip()
        latitude = options.get("lat")
        longitude = options.get("lon")

        if country:
            report = get_country_weather_service().report_for(country)
            if options["json"]:
                self.stdout.write(json.dumps([row.as_payload() for row in report], ensure_ascii=False))
            else:
                self.stdout.write(format_country_weather(country, report))
            return

        if latitude is None or longitude is None:
            raise CommandError("--country or both --lat and --lon are required")
        unit = options["unit"].upper()
        if unit not in SUPPORTED_UNITS:
            raise CommandError("--unit must be C or F")
        reading = get_weather_service().get_current(latitude, longitude, unit)
        self.stdout.write(json.dumps(asdict(reading), ensure_ascii=False))
