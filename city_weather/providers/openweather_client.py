"""Client for the OpenWeatherMap current-weather endpoint."""
from __future__ import annotations

from typing import Optional

import requests
from pydantic import ValidationError

from city_weather.config import OPENWEATHER_CURRENT_URL
from city_weather.domain import WeatherRecord
from city_weather.errors import DecodingError, InvalidInputError, UnreachableError, error_for_status
from city_weather.models import WeatherResponse
from utils.logging_utils import get_tagged_logger, mask_url_secrets

logger = get_tagged_logger(__name__, tag="providers/openweather_client")


class WeatherProviderClient:
    """Turn a city name into one GET request and one WeatherRecord.

    Every failure is raised as a `FetchError` subclass. The client keeps no
    state between calls, so one instance can serve concurrent callers.
    """

    def __init__(
        self,
        api_key: str,
        *,
        base_url: str = OPENWEATHER_CURRENT_URL,
        units: str = "metric",
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.api_key = api_key
        self.base_url = str(base_url).rstrip("/")
        self.units = units
        self.timeout = timeout
        self.session = session or requests.Session()

    def build_params(self, city_name: str) -> dict[str, str]:
        """Query parameters for one lookup."""
        return {"q": city_name, "appid": self.api_key, "units": self.units}

    def fetch(self, city_name: str) -> WeatherRecord:
        """Fetch current weather for `city_name`."""
        city = (city_name or "").strip()
        if not city:
            raise InvalidInputError("city name is blank")

        try:
            resp = self.session.get(self.base_url, params=self.build_params(city), timeout=self.timeout)
        except requests.exceptions.RequestException as exc:
            logger.warning("Weather request for '%s' failed: %s", city, exc)
            raise UnreachableError(str(exc)) from exc

        logger.debug("GET %s -> %s", mask_url_secrets(str(resp.url or self.base_url)), resp.status_code)

        error = error_for_status(resp.status_code)
        if error is not None:
            logger.warning("Weather request for '%s' returned HTTP %s", city, resp.status_code)
            raise error

        return self._decode(resp)

    @staticmethod
    def _decode(resp: requests.Response) -> WeatherRecord:
        """Validate the body and map it to a record; never returns a partial one."""
        try:
            payload = WeatherResponse.model_validate_json(resp.content)
        except ValidationError as exc:
            logger.error("Unable to decode weather response: %s", exc)
            logger.debug("Raw response body: %s", (resp.text or "")[:500])
            raise DecodingError(str(exc)) from exc
        return WeatherRecord.from_response(payload)
