"""Shared protocol for favorite-city storage backends."""

from typing import Optional, Protocol

FAVORITE_CITY_KEY = "favoriteCityKey"


class FavoriteCityStore(Protocol):
    """One optional city name under a fixed key.

    Implementations treat storage failures as best-effort: they are logged,
    never raised.
    """

    def save(self, city: str) -> None:
        """Overwrite the stored favorite."""

    def get(self) -> Optional[str]:
        """Return the stored favorite, or None."""

    def clear(self) -> None:
        """Remove the stored favorite without raising if it is absent."""
