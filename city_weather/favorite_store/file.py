"""Durable favorite store backed by a flat JSON file on local disk."""

import json
import os
import tempfile
import threading
from pathlib import Path
from typing import Optional

from city_weather.favorite_store.base import FAVORITE_CITY_KEY, FavoriteCityStore
from utils.logging_utils import get_tagged_logger

logger = get_tagged_logger(__name__, tag="favorite_store/json_file")


class JsonFileFavoriteCityStore(FavoriteCityStore):
    """Key-value preferences kept in one JSON object on disk.

    Other keys already in the file are preserved. Writes go through a temp
    file and `os.replace`, so a crash never leaves a half-written file.
    """

    def __init__(self, path: str | os.PathLike, key: str = FAVORITE_CITY_KEY) -> None:
        logger.debug("Initializing JsonFileFavoriteCityStore at %s", path)
        self.path = Path(path)
        self.key = key
        self._lock = threading.Lock()

    def _read_all(self) -> dict:
        """Load the whole file; missing or unreadable files read as empty."""
        try:
            raw = self.path.read_text(encoding="utf-8")
        except FileNotFoundError:
            return {}
        except OSError as exc:
            logger.error("Failed to read preferences file %s: %s", self.path, exc)
            return {}
        try:
            data = json.loads(raw) if raw.strip() else {}
        except ValueError as exc:
            logger.error("Preferences file %s is not valid JSON: %s", self.path, exc)
            return {}
        if not isinstance(data, dict):
            logger.error("Preferences file %s does not hold a JSON object", self.path)
            return {}
        return data

    def _write_all(self, data: dict) -> None:
        """Atomically replace the file contents."""
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp")
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as fh:
                    json.dump(data, fh, ensure_ascii=False, indent=2)
                os.replace(tmp_name, self.path)
            except BaseException:
                if os.path.exists(tmp_name):
                    os.unlink(tmp_name)
                raise
        except OSError as exc:
            logger.error("Failed to write preferences file %s: %s", self.path, exc)

    def save(self, city: str) -> None:
        with self._lock:
            data = self._read_all()
            data[self.key] = city
            self._write_all(data)
        logger.info("Saved favorite city: %s", city)

    def get(self) -> Optional[str]:
        with self._lock:
            value = self._read_all().get(self.key)
        if value is not None and not isinstance(value, str):
            logger.warning("Ignoring non-string favorite city value in %s", self.path)
            return None
        return value

    def clear(self) -> None:
        with self._lock:
            data = self._read_all()
            if self.key not in data:
                return
            data.pop(self.key)
            self._write_all(data)
        logger.info("Cleared favorite city")
