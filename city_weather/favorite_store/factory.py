"""Pick a favorite-city backend from configuration."""

from __future__ import annotations

try:
    import redis  # type: ignore
except ImportError:  # pragma: no cover - optional dependency
    redis = None

from city_weather import config
from city_weather.favorite_store.base import FavoriteCityStore
from city_weather.favorite_store.file import JsonFileFavoriteCityStore
from city_weather.favorite_store.memory import InMemoryFavoriteCityStore
from city_weather.favorite_store.redis import RedisFavoriteCityStore
from utils.logging_utils import get_tagged_logger, mask_url_secrets

logger = get_tagged_logger(__name__, tag="favorite_store/factory")

DEFAULT_STORE_NAME = "file"


def build_favorite_store(settings: config.Settings | None = None) -> FavoriteCityStore:
    """Instantiate the configured favorite store."""
    settings = settings or config.settings
    backend = (settings.favorite_store or DEFAULT_STORE_NAME).lower()
    key = settings.favorite_key

    if backend == "memory":
        logger.info("Using InMemoryFavoriteCityStore")
        return InMemoryFavoriteCityStore(key=key)

    if backend == "file":
        logger.info("Using JsonFileFavoriteCityStore", extra={"path": settings.favorite_store_path})
        return JsonFileFavoriteCityStore(settings.favorite_store_path, key=key)

    if backend == "redis":
        if not settings.favorite_redis_url:
            raise ValueError("favorite_redis_url must be set for the Redis favorite store")
        if redis is None:
            logger.warning("redis package not installed; falling back to InMemoryFavoriteCityStore")
            return InMemoryFavoriteCityStore(key=key)
        try:
            client = redis.Redis.from_url(settings.favorite_redis_url)
            client.ping()
            logger.info("Using RedisFavoriteCityStore", extra={"redis_url": mask_url_secrets(settings.favorite_redis_url)})
            return RedisFavoriteCityStore(client, key=key)
        except Exception as exc:
            logger.warning("Falling back to InMemoryFavoriteCityStore (Redis unavailable)", extra={"error": str(exc)})
            return InMemoryFavoriteCityStore(key=key)

    raise ValueError(f"Unknown favorite store '{backend}'")
