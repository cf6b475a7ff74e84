"""Redis-backed favorite store."""

from typing import Optional

from city_weather.favorite_store.base import FAVORITE_CITY_KEY, FavoriteCityStore
from utils.logging_utils import get_tagged_logger

logger = get_tagged_logger(__name__, tag="favorite_store/redis")


class RedisFavoriteCityStore(FavoriteCityStore):
    """Stores the favorite as a single Redis string under `prefix + key`."""

    def __init__(self, client, key: str = FAVORITE_CITY_KEY, prefix: str = "prefs:") -> None:
        logger.debug("Initializing RedisFavoriteCityStore")
        self.client = client
        self.key = key
        self.prefix = prefix

    def _redis_key(self) -> str:
        return f"{self.prefix}{self.key}"

    def save(self, city: str) -> None:
        try:
            self.client.set(self._redis_key(), city.encode("utf-8"))
            logger.info("Saved favorite city: %s", city)
        except Exception as exc:  # pragma: no cover - defensive
            logger.error("Failed to write favorite city to Redis: %s", exc)

    def get(self) -> Optional[str]:
        try:
            raw = self.client.get(self._redis_key())
        except Exception as exc:  # pragma: no cover - defensive
            logger.error("Failed to read favorite city from Redis: %s", exc)
            return None
        if raw is None:
            return None
        if isinstance(raw, bytes):
            try:
                return raw.decode("utf-8")
            except UnicodeDecodeError as exc:
                logger.error("Stored favorite city is not valid UTF-8: %s", exc)
                return None
        return str(raw)

    def clear(self) -> None:
        try:
            self.client.delete(self._redis_key())
            logger.info("Cleared favorite city")
        except Exception as exc:  # pragma: no cover - defensive
            logger.error("Failed to delete favorite city from Redis: %s", exc)
