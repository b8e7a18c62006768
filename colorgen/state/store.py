"""
Palette state: current palette, locked positions, favorites and bounded history.
All mutation goes through these methods. Favorites and history are written to the
attached key-value store after every change that touches them.
"""
import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Callable, Iterable

from ..color import Color
from ..generation.modes import GENERATION_MODES
from .persistence import (
    FAVORITES_KEY,
    HISTORY_KEY,
    KeyValueStore,
    dump_favorites,
    dump_history,
    load_favorites,
    load_history,
)

logger = logging.getLogger(__name__)

DEFAULT_HISTORY_LIMIT = 20
DEFAULT_MODE = "random"


def utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


@dataclass(frozen=True)
class HistoryEntry:
    """Snapshot of a palette with the time it was saved and the mode active then."""

    colors: tuple[Color, ...]
    timestamp: str
    mode: str = DEFAULT_MODE

    def to_dict(self) -> dict[str, Any]:
        return {
            "colors": [c.to_dict() for c in self.colors],
            "timestamp": self.timestamp,
            "mode": self.mode,
        }

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> "HistoryEntry":
        """Missing mode means the default; an unknown one raises ValueError."""
        mode = d.get("mode") or DEFAULT_MODE
        if mode not in GENERATION_MODES:
            raise ValueError(f"Unknown generation mode {mode!r} in history entry")
        return cls(
            colors=tuple(Color.from_dict(c) for c in d["colors"]),
            timestamp=str(d.get("timestamp", "")),
            mode=mode,
        )


@dataclass
class PaletteStateStore:
    """
    Single owner of palette state for one session.
    Locks are positions, not colors: they survive set_palette and are never
    bounds-checked, so a lock past the end applies once the palette grows.
    """

    storage: KeyValueStore | None = None
    history_limit: int = DEFAULT_HISTORY_LIMIT
    clock: Callable[[], str] | None = None
    colors: list[Color] = field(default_factory=list)
    locked: set[int] = field(default_factory=set)
    favorites: list[Color] = field(default_factory=list)
    history: list[HistoryEntry] = field(default_factory=list)
    mode: str = DEFAULT_MODE

    def __post_init__(self) -> None:
        if self.clock is None:
            self.clock = utc_now_iso
        if self.storage is not None:
            self.history = load_history(self.storage.get(HISTORY_KEY))[: self.history_limit]
            self.favorites = load_favorites(self.storage.get(FAVORITES_KEY))

    # Palette

    def set_palette(self, colors: Iterable[Color]) -> None:
        self.colors = list(colors)

    def select_color(self, color: Color) -> None:
        """Make color the primary (position 0) color."""
        if self.colors:
            self.colors[0] = color
        else:
            self.colors.append(color)

    def add_picked_colors(self, picked: Iterable[Color], count: int) -> int:
        """Prepend picked colors and keep the first count. Returns how many were picked."""
        picked = list(picked)
        if picked:
            self.colors = (picked + self.colors)[:count]
        return len(picked)

    # Locks

    def toggle_lock(self, index: int) -> bool:
        """Flip the lock on a position. Returns True if now locked."""
        if index in self.locked:
            self.locked.discard(index)
            return False
        self.locked.add(index)
        return True

    def is_locked(self, index: int) -> bool:
        return index in self.locked

    # Favorites

    def is_favorite(self, color: Color) -> bool:
        return any(fav.same_hex(color) for fav in self.favorites)

    def toggle_favorite(self, color: Color) -> bool:
        """Add or remove by hex. Returns True if color is now a favorite."""
        for i, fav in enumerate(self.favorites):
            if fav.same_hex(color):
                del self.favorites[i]
                self._save_favorites()
                return False
        self.favorites.append(color)
        self._save_favorites()
        return True

    def remove_favorite(self, index: int) -> Color | None:
        """Remove the favorite at position index. Out of range is a no-op."""
        if not 0 <= index < len(self.favorites):
            logger.warning("remove_favorite: index %s out of range (%s favorites)", index, len(self.favorites))
            return None
        removed = self.favorites.pop(index)
        self._save_favorites()
        return removed

    # History

    def push_history(self, colors: Iterable[Color], mode: str | None = None) -> HistoryEntry:
        """Prepend a snapshot, evicting the oldest entries past history_limit."""
        entry = HistoryEntry(colors=tuple(colors), timestamp=self.clock(), mode=mode or self.mode)
        self.history.insert(0, entry)
        del self.history[self.history_limit:]
        self._save_history()
        return entry

    def load_from_history(self, entry: HistoryEntry | int) -> HistoryEntry | None:
        """Restore colors and mode from an entry (or its index). Locks are not restored."""
        if isinstance(entry, int):
            if not 0 <= entry < len(self.history):
                logger.warning("load_from_history: index %s out of range (%s entries)", entry, len(self.history))
                return None
            entry = self.history[entry]
        self.colors = list(entry.colors)
        self.mode = entry.mode
        return entry

    # Reset

    def reset(self) -> None:
        """Clear palette, locks and history; favorites are kept."""
        self.colors = []
        self.locked.clear()
        self.history = []
        self.mode = DEFAULT_MODE
        self._save_history()
        self._save_favorites()

    def _save_history(self) -> None:
        if self.storage is not None:
            self.storage.set(HISTORY_KEY, dump_history(self.history))

    def _save_favorites(self) -> None:
        if self.storage is not None:
            self.storage.set(FAVORITES_KEY, dump_favorites(self.favorites))
