import os

import uvicorn

from city_weather.config import settings
from utils.logging_utils import get_tagged_logger, setup_logging

logger = get_tagged_logger(__name__, tag="server")


def check_api_key() -> None:
    """Warn early when no provider key is configured; every lookup would fail with 401."""
    if not settings.api_key:
        logger.warning("WEATHER_API_KEY is not set; lookups will report an invalid API key.")


if __name__ == "__main__":
    setup_logging(level=settings.log_level, app_name="city_weather_server")
    check_api_key()

    uvicorn.run(
        "city_weather.main:app",
        host="0.0.0.0",
        port=int(os.getenv("PORT", 8000)),
        reload=False,
    )
