"""HTTP API exposing one search controller to a front end."""

from typing import Optional

from fastapi import APIRouter, HTTPException, Request, status
from pydantic import BaseModel

from .controller import SearchController
from utils.logging_utils import get_tagged_logger

logger = get_tagged_logger(__name__, tag="api")

router = APIRouter()


class WeatherDisplay(BaseModel):
    """Labelled strings for the detail view."""
    location: str
    temperature: str
    feels_like: str
    description: str
    humidity: str
    pressure: str
    wind_speed: str


class WeatherPayload(BaseModel):
    """Serialized weather record."""
    city_name: str
    country: Optional[str] = None
    temperature_c: float
    feels_like_c: float
    description: str
    humidity_pct: int
    pressure_hpa: int
    wind_speed_ms: float
    display: WeatherDisplay


class StateResponse(BaseModel):
    """Current controller state."""
    status: str
    message: Optional[str] = None
    weather: Optional[WeatherPayload] = None


class SearchRequest(BaseModel):
    """Incoming search payload; `wait` blocks until the lookup finishes."""
    city: str
    wait: bool = False


class FavoriteResponse(BaseModel):
    city: Optional[str] = None


class SaveFavoriteResponse(BaseModel):
    saved: bool
    city: Optional[str] = None


def _controller(request: Request) -> SearchController:
    return request.app.state.controller


def _state_response(controller: SearchController) -> StateResponse:
    return StateResponse(**controller.state.to_dict())


@router.get("/state", response_model=StateResponse)
def get_state(request: Request):
    """Return the current search state."""
    return _state_response(_controller(request))


@router.post("/search", response_model=StateResponse)
def search(body: SearchRequest, request: Request):
    """Submit a lookup; returns `loading` unless `wait` is set."""
    controller = _controller(request)
    future = controller.submit(body.city)
    if body.wait:
        future.result()
    return _state_response(controller)


@router.post("/reset", response_model=StateResponse)
def reset(request: Request):
    """Return the controller to idle."""
    controller = _controller(request)
    controller.reset()
    return _state_response(controller)


@router.get("/favorite", response_model=FavoriteResponse)
def get_favorite(request: Request):
    """Return the saved favorite city, used to pre-fill the search box."""
    return FavoriteResponse(city=_controller(request).get_favorite_city())


@router.post("/favorite", response_model=SaveFavoriteResponse)
def save_favorite(request: Request):
    """Save the last successfully looked-up city as the favorite."""
    controller = _controller(request)
    if not controller.save_favorite():
        logger.debug("Save favorite requested before any successful lookup")
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="No city has been looked up yet")
    return SaveFavoriteResponse(saved=True, city=controller.last_validated_city)


@router.delete("/favorite", response_model=FavoriteResponse)
def clear_favorite(request: Request):
    """Clear the saved favorite city."""
    controller = _controller(request)
    controller.clear_favorite_city()
    return FavoriteResponse(city=None)
