"""Favorite-city storage backends."""

from .base import FAVORITE_CITY_KEY, FavoriteCityStore
from .factory import build_favorite_store
from .file import JsonFileFavoriteCityStore
from .memory import InMemoryFavoriteCityStore
from .redis import RedisFavoriteCityStore

__all__ = [
    "FAVORITE_CITY_KEY",
    "FavoriteCityStore",
    "build_favorite_store",
    "InMemoryFavoriteCityStore",
    "JsonFileFavoriteCityStore",
    "RedisFavoriteCityStore",
]
