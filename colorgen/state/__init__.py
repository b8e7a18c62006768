# Palette state: store, history entries, persistence backends

from .persistence import (
    KeyValueStore,
    MemoryStore,
    JsonFileStore,
    HISTORY_KEY,
    FAVORITES_KEY,
    dump_history,
    load_history,
    dump_favorites,
    load_favorites,
    open_storage,
)
from .store import PaletteStateStore, HistoryEntry, utc_now_iso

__all__ = [
    "KeyValueStore",
    "MemoryStore",
    "JsonFileStore",
    "HISTORY_KEY",
    "FAVORITES_KEY",
    "dump_history",
    "load_history",
    "dump_favorites",
    "load_favorites",
    "open_storage",
    "PaletteStateStore",
    "HistoryEntry",
    "utc_now_iso",
]
