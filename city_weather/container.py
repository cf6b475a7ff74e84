"""Wire the provider, the favorite store and the controller together."""

from __future__ import annotations

from typing import Optional

from city_weather import config
from city_weather.controller import Dispatcher, SearchController
from city_weather.favorite_store import FavoriteCityStore, build_favorite_store
from city_weather.providers import WeatherProvider, build_weather_provider
from utils.logging_utils import get_tagged_logger

logger = get_tagged_logger(__name__, tag="container")


def build_search_controller(
    settings: config.Settings | None = None,
    *,
    provider: Optional[WeatherProvider] = None,
    store: Optional[FavoriteCityStore] = None,
    dispatch: Optional[Dispatcher] = None,
) -> SearchController:
    """Build a controller from settings; explicit collaborators take precedence."""
    settings = settings or config.settings
    provider = provider or build_weather_provider(settings)
    store = store or build_favorite_store(settings)
    logger.debug("Building SearchController with %s and %s", type(provider).__name__, type(store).__name__)
    return SearchController(provider, store, dispatch=dispatch, max_workers=settings.max_workers)
