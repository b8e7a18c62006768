"""
Persistence: a minimal key-value interface plus the JSON codecs for history and
favorites. Values are strings; history and favorites are stored as JSON arrays.
Corrupt or missing data always loads as an empty collection.
"""
import json
import logging
import re
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any

from ..color import Color

logger = logging.getLogger(__name__)

HISTORY_KEY = "color-generator-history"
FAVORITES_KEY = "color-generator-favorites"

_SAFE_KEY = re.compile(r"[^A-Za-z0-9._-]+")


class KeyValueStore(ABC):
    """String key -> string value. Implementations must not raise on a missing key."""

    @abstractmethod
    def get(self, key: str) -> str | None:
        ...

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        ...


class MemoryStore(KeyValueStore):
    """In-process store. Default for tests and one-shot runs."""

    def __init__(self, initial: dict[str, str] | None = None):
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> str | None:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = value


class JsonFileStore(KeyValueStore):
    """One <key>.json file per key under a directory."""

    def __init__(self, directory: Path):
        self.directory = Path(directory)

    def path_for(self, key: str) -> Path:
        return self.directory / f"{_SAFE_KEY.sub('_', key)}.json"

    def get(self, key: str) -> str | None:
        path = self.path_for(key)
        if not path.exists():
            return None
        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Could not read %s: %s", path, e)
            return None

    def set(self, key: str, value: str) -> None:
        self.directory.mkdir(parents=True, exist_ok=True)
        self.path_for(key).write_text(value, encoding="utf-8")


def _load_array(raw: str | None, key: str) -> list[Any]:
    if not raw:
        return []
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as e:
        logger.warning("Stored %s is not valid JSON (%s); starting empty", key, e)
        return []
    if not isinstance(data, list):
        logger.warning("Stored %s is not a JSON array; starting empty", key)
        return []
    return data


def dump_favorites(favorites: list[Color]) -> str:
    return json.dumps([c.to_dict() for c in favorites], ensure_ascii=False)


def load_favorites(raw: str | None) -> list[Color]:
    """Decode favorites; undecodable items are skipped."""
    out: list[Color] = []
    for item in _load_array(raw, FAVORITES_KEY):
        try:
            out.append(Color.from_dict(item))
        except (TypeError, ValueError, AttributeError) as e:
            logger.warning("Skipping stored favorite %r: %s", item, e)
    return out


def dump_history(history: list[Any]) -> str:
    return json.dumps([entry.to_dict() for entry in history], ensure_ascii=False)


def load_history(raw: str | None) -> list[Any]:
    """Decode history entries, most recent first; undecodable entries are skipped."""
    from .store import HistoryEntry

    out: list[HistoryEntry] = []
    for item in _load_array(raw, HISTORY_KEY):
        try:
            out.append(HistoryEntry.from_dict(item))
        except (TypeError, ValueError, KeyError, AttributeError) as e:
            logger.warning("Skipping stored history entry: %s", e)
    return out


def open_storage(config: dict[str, Any] | None = None) -> KeyValueStore:
    """Storage backend from config storage.backend: memory | file | api."""
    if config is None:
        from ..config import load_config
        config = load_config()
    storage = config.get("storage", {})
    backend = (storage.get("backend") or "file").lower()
    if backend == "memory":
        return MemoryStore()
    if backend == "file":
        from ..config import get_storage_dir
        return JsonFileStore(get_storage_dir(config))
    if backend == "api":
        api_base = storage.get("api_base")
        if not api_base:
            raise ValueError("storage.backend 'api' needs storage.api_base")
        from .remote import ApiKeyValueStore
        return ApiKeyValueStore(api_base)
    raise ValueError(f"Unknown storage backend {backend!r}; expected memory, file or api")
