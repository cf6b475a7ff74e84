"""Weather provider clients."""

from .base import WeatherProvider
from .factory import build_weather_provider
from .openweather_client import WeatherProviderClient

__all__ = [
    "build_weather_provider",
    "WeatherProvider",
    "WeatherProviderClient",
]
