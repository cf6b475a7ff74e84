"""Interface for weather providers."""

from __future__ import annotations

from typing import Protocol

from city_weather.domain import WeatherRecord


class WeatherProvider(Protocol):
    """Anything that can look up current weather by city name."""

    def fetch(self, city_name: str) -> WeatherRecord:
        """Return the current weather or raise a `FetchError`."""
        ...
