"""Search state machine sitting between the view layer and the provider."""
from __future__ import annotations

import asyncio
import threading
from concurrent.futures import Executor, Future, ThreadPoolExecutor
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional

from city_weather.domain import WeatherRecord
from city_weather.errors import ErrorMessages, FetchError, UnknownFetchError, message_for_error
from city_weather.favorite_store.base import FavoriteCityStore
from city_weather.providers.base import WeatherProvider
from utils.logging_utils import get_tagged_logger

logger = get_tagged_logger(__name__, tag="controller")

StateObserver = Callable[["SearchState"], None]
Dispatcher = Callable[[Callable[[], None]], None]


class SearchStatus(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    LOADED = "loaded"
    ERROR = "error"


@dataclass(frozen=True)
class SearchState:
    """One value of the state machine; `weather` only on LOADED, `message` only on ERROR."""
    status: SearchStatus
    weather: Optional[WeatherRecord] = None
    message: Optional[str] = None

    @classmethod
    def idle(cls) -> SearchState:
        return cls(SearchStatus.IDLE)

    @classmethod
    def loading(cls) -> SearchState:
        return cls(SearchStatus.LOADING)

    @classmethod
    def loaded(cls, weather: WeatherRecord) -> SearchState:
        return cls(SearchStatus.LOADED, weather=weather)

    @classmethod
    def error(cls, message: str) -> SearchState:
        return cls(SearchStatus.ERROR, message=message)

    def to_dict(self) -> dict:
        out: dict = {"status": self.status.value}
        if self.message is not None:
            out["message"] = self.message
        if self.weather is not None:
            out["weather"] = self.weather.to_dict()
        return out


def _run_inline(callback: Callable[[], None]) -> None:
    callback()


def asyncio_dispatcher(loop: asyncio.AbstractEventLoop) -> Dispatcher:
    """Deliver completions onto an asyncio event loop instead of the worker thread."""
    def dispatch(callback: Callable[[], None]) -> None:
        loop.call_soon_threadsafe(callback)
    return dispatch


class SearchController:
    """Owns the {idle, loading, loaded, error} state and orchestrates lookups.

    `submit` never blocks: the provider call runs on `executor` and its
    result is handed to `dispatch`, which by default applies it on the
    worker thread. Each submit (and each reset) bumps a generation counter;
    a fetch that completes after a newer submit is dropped, so the most
    recently submitted search always determines the visible state.
    Superseded fetches are not cancelled.

    Observers run synchronously on every transition, with the controller
    lock held. They must not call `submit` from inside the callback.
    """

    def __init__(
        self,
        provider: WeatherProvider,
        store: FavoriteCityStore,
        *,
        executor: Optional[Executor] = None,
        dispatch: Optional[Dispatcher] = None,
        max_workers: int = 4,
    ) -> None:
        self._provider = provider
        self._store = store
        self._owns_executor = executor is None
        self._executor = executor or ThreadPoolExecutor(max_workers=max_workers, thread_name_prefix="weather-fetch")
        self._dispatch = dispatch or _run_inline
        self._lock = threading.RLock()
        self._observers: List[StateObserver] = []
        self._state = SearchState.idle()
        self._generation = 0
        self._last_validated_city: Optional[str] = None

    # -- observers ---------------------------------------------------------

    @property
    def state(self) -> SearchState:
        with self._lock:
            return self._state

    def subscribe(self, observer: StateObserver) -> Callable[[], None]:
        """Register `observer`; the returned callable unregisters it."""
        with self._lock:
            self._observers.append(observer)

        def unsubscribe() -> None:
            with self._lock:
                if observer in self._observers:
                    self._observers.remove(observer)

        return unsubscribe

    def _transition(self, new_state: SearchState) -> None:
        with self._lock:
            self._state = new_state
            logger.debug("State -> %s", new_state.status.value)
            for observer in list(self._observers):
                observer(new_state)

    # -- searching ---------------------------------------------------------

    def submit(self, city: str) -> Future:
        """Start a lookup for `city`.

        Returns a Future resolving to the terminal state this lookup
        produced. When a newer submit has superseded it, that state is not
        applied; read `state` for what is current.
        """
        trimmed = (city or "").strip()
        with self._lock:
            self._generation += 1
            generation = self._generation
            if not trimmed:
                logger.info("Rejected blank city name")
                outcome = SearchState.error(ErrorMessages.INVALID_CITY)
                self._transition(outcome)
                done: Future = Future()
                done.set_result(outcome)
                return done
            self._transition(SearchState.loading())

        logger.info("Searching weather for '%s'", trimmed)
        return self._executor.submit(self._run_fetch, trimmed, generation)

    def _run_fetch(self, city: str, generation: int) -> SearchState:
        try:
            record = self._provider.fetch(city)
        except FetchError as exc:
            logger.info("Lookup for '%s' failed: %s", city, exc.kind.value)
            outcome = SearchState.error(message_for_error(exc))
        except Exception:
            logger.exception("Unexpected failure looking up '%s'", city)
            outcome = SearchState.error(UnknownFetchError().message)
        else:
            outcome = SearchState.loaded(record)

        self._dispatch(lambda: self._complete(city, generation, outcome))
        return outcome

    def _complete(self, city: str, generation: int, outcome: SearchState) -> None:
        with self._lock:
            if generation != self._generation:
                logger.debug("Dropping superseded result for '%s'", city)
                return
            if outcome.status is SearchStatus.LOADED:
                self._last_validated_city = city
            self._transition(outcome)

    def reset(self) -> None:
        """Return to idle and forget the last validated city."""
        with self._lock:
            self._generation += 1
            self._last_validated_city = None
            self._transition(SearchState.idle())

    # -- favorites ---------------------------------------------------------

    @property
    def last_validated_city(self) -> Optional[str]:
        with self._lock:
            return self._last_validated_city

    def can_save_favorite(self) -> bool:
        return self.last_validated_city is not None

    def save_favorite(self) -> bool:
        """Persist the last successfully looked-up city; False if there is none."""
        city = self.last_validated_city
        if city is None:
            return False
        self._store.save(city)
        return True

    def get_favorite_city(self) -> Optional[str]:
        return self._store.get()

    def clear_favorite_city(self) -> None:
        self._store.clear()

    # -- lifecycle ---------------------------------------------------------

    def close(self) -> None:
        """Shut down the executor if this controller created it.

        Fetches still queued are cancelled. A fetch already running is
        waited for, so a request without a timeout can hold this call for as
        long as the transport does; set `request_timeout_seconds` to bound it.
        """
        if self._owns_executor:
            self._executor.shutdown(wait=True, cancel_futures=True)

    def __enter__(self) -> SearchController:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()
