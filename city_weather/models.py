"""Pydantic schema for the OpenWeatherMap current-weather response."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class _ProviderModel(BaseModel):
    """Strict types; unknown provider fields are ignored."""
    model_config = ConfigDict(extra="ignore", strict=True)


class Coordinates(_ProviderModel):
    lon: float
    lat: float


class WeatherCondition(_ProviderModel):
    """One entry of the `weather` array."""
    id: int
    main: str
    description: str
    icon: str


class MainMetrics(_ProviderModel):
    temp: float
    feels_like: float
    temp_min: Optional[float] = None
    temp_max: Optional[float] = None
    pressure: int = Field(gt=0)
    humidity: int = Field(ge=0, le=100)


class Wind(_ProviderModel):
    speed: float = Field(ge=0)
    deg: Optional[int] = None
    gust: Optional[float] = None


class SysInfo(_ProviderModel):
    type: Optional[int] = None
    id: Optional[int] = None
    country: Optional[str] = None
    sunrise: Optional[int] = None
    sunset: Optional[int] = None


class WeatherResponse(_ProviderModel):
    """Root object of a successful current-weather response."""
    coord: Optional[Coordinates] = None
    weather: list[WeatherCondition]
    main: MainMetrics
    wind: Optional[Wind] = None
    sys: Optional[SysInfo] = None
    name: str
    cod: int
