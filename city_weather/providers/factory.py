"""Factory helpers for building the weather provider at startup."""

from __future__ import annotations

from city_weather import config
from city_weather.providers.base import WeatherProvider
from city_weather.providers.openweather_client import WeatherProviderClient
from utils.logging_utils import get_tagged_logger

logger = get_tagged_logger(__name__, tag="providers/factory")


def build_weather_provider(settings: config.Settings | None = None) -> WeatherProvider:
    """Instantiate the OpenWeatherMap client from settings."""
    settings = settings or config.settings
    if not settings.api_key:
        logger.warning("WEATHER_API_KEY is not set; every lookup will be rejected as unauthorized")
    logger.info("Using OpenWeatherMap provider", extra={"base_url": settings.base_url})
    return WeatherProviderClient(
        settings.api_key,
        base_url=settings.base_url,
        units=settings.units,
        timeout=settings.request_timeout_seconds,
    )
