"""In-memory favorite store, intended for development and tests."""

import threading
from typing import Optional

from city_weather.favorite_store.base import FAVORITE_CITY_KEY, FavoriteCityStore
from utils.logging_utils import get_tagged_logger

logger = get_tagged_logger(__name__, tag="favorite_store/in_memory")


class InMemoryFavoriteCityStore(FavoriteCityStore):
    """Thread-safe dict-backed store (dev/test)."""

    def __init__(self, key: str = FAVORITE_CITY_KEY) -> None:
        logger.debug("Initializing InMemoryFavoriteCityStore")
        self.key = key
        self._values: dict[str, str] = {}
        self._lock = threading.Lock()

    def save(self, city: str) -> None:
        with self._lock:
            self._values[self.key] = city
        logger.info("Saved favorite city: %s", city)

    def get(self) -> Optional[str]:
        with self._lock:
            return self._values.get(self.key)

    def clear(self) -> None:
        with self._lock:
            self._values.pop(self.key, None)
        logger.info("Cleared favorite city")
