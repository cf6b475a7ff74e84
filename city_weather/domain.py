"""Normalized weather record consumed by the controller and view layer."""
from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Optional

from city_weather.models import WeatherResponse

MISSING_DESCRIPTION = "N/A"


@dataclass(frozen=True)
class WeatherRecord:
    """Current conditions for one city, built only from a validated response."""
    city_name: str
    temperature_c: float
    feels_like_c: float
    description: str
    humidity_pct: int
    pressure_hpa: int
    wind_speed_ms: float
    country: Optional[str] = None

    @classmethod
    def from_response(cls, response: WeatherResponse) -> WeatherRecord:
        """Map a provider response onto a record."""
        description = response.weather[0].description if response.weather else MISSING_DESCRIPTION
        return cls(
            city_name=response.name,
            temperature_c=response.main.temp,
            feels_like_c=response.main.feels_like,
            description=description,
            humidity_pct=response.main.humidity,
            pressure_hpa=response.main.pressure,
            wind_speed_ms=response.wind.speed if response.wind else 0.0,
            country=response.sys.country if response.sys else None,
        )

    @property
    def temperature_display(self) -> str:
        return f"{self.temperature_c:.1f}°C"

    @property
    def feels_like_display(self) -> str:
        return f"{self.feels_like_c:.1f}°C"

    @property
    def display_description(self) -> str:
        """Provider description in title case, e.g. "clear sky" -> "Clear Sky"."""
        return self.description.title()

    @property
    def location(self) -> str:
        if self.country:
            return f"{self.city_name}, {self.country}"
        return self.city_name

    def to_display_strings(self) -> dict[str, str]:
        """Return the labelled strings the detail view renders."""
        return {
            "location": self.location,
            "temperature": self.temperature_display,
            "feels_like": f"Feels like {self.feels_like_display}",
            "description": self.display_description,
            "humidity": f"Humidity: {self.humidity_pct}%",
            "pressure": f"Pressure: {self.pressure_hpa} hPa",
            "wind_speed": f"Wind: {self.wind_speed_ms:.1f} m/s",
        }

    def to_dict(self) -> dict:
        """Raw fields plus display strings, ready for JSON."""
        data = asdict(self)
        data["display"] = self.to_display_strings()
        return data
