"""Application configuration pulled from environment variables via pydantic."""
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from utils.logging_utils import get_tagged_logger
logger = get_tagged_logger(__name__, tag="config")

OPENWEATHER_CURRENT_URL = "https://api.openweathermap.org/data/2.5/weather"


class Settings(BaseSettings):
    """Environment-driven configuration for the city weather service."""
    model_config = SettingsConfigDict(env_prefix="WEATHER_", extra="ignore")

    api_key: str = ""
    base_url: str = OPENWEATHER_CURRENT_URL
    units: str = "metric"
    request_timeout_seconds: float | None = None  # None inherits the transport default
    favorite_store: str = "file"  # options: file, memory, redis
    favorite_store_path: str = "./favorites.json"
    favorite_redis_url: str | None = None
    favorite_key: str = "favoriteCityKey"
    max_workers: int = 4
    log_level: str = "INFO"

    @field_validator("base_url", mode="after")
    @classmethod
    def strip_trailing_slash(cls, v: str) -> str:
        """Normalize base URLs to avoid double slashes."""
        return str(v).rstrip("/")

    @field_validator("favorite_store", mode="after")
    @classmethod
    def lower_store_name(cls, v: str) -> str:
        """Backend names are matched case-insensitively."""
        return str(v).strip().lower()


settings = Settings()


if __name__ == "__main__":
    logger.setLevel("DEBUG")
    logger.debug(f"Loaded settings: {settings.model_dump_json(indent=4, exclude={'api_key'})}")
