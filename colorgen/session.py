"""
Palette session: the object a UI (or CLI) holds for one user. Owns config, the
state store and the generator. UI actions map to methods through `commands`,
so callers dispatch by action name instead of wiring callbacks into the core.
"""
import logging
import time
from pathlib import Path
from typing import Any, Callable, Iterable

from .color import Color, parse_color_string
from .generation import GENERATION_MODES, GenerationRanges, PaletteGenerator
from .random_utils import RandomBetween
from .state import HistoryEntry, KeyValueStore, PaletteStateStore
from .workflow_utils import log_structured

logger = logging.getLogger(__name__)


class UnknownCommandError(KeyError):
    """No command registered under that action name."""


class PaletteSession:

    def __init__(
        self,
        config: dict[str, Any] | None = None,
        *,
        storage: KeyValueStore | None = None,
        random_between: RandomBetween | None = None,
        clock: Callable[[], str] | None = None,
    ):
        from .config import get_ranges, load_config

        self.config = config if config is not None else load_config()
        palette_cfg = self.config.get("palette", {})
        history_cfg = self.config.get("history", {})

        self.count = int(palette_cfg.get("count", 5))
        self.ranges = get_ranges(self.config).clamped()
        self.generator = PaletteGenerator(random_between)
        self.store = PaletteStateStore(
            storage=storage,
            history_limit=int(history_cfg.get("max_entries", 20)),
            clock=clock,
        )
        self.store.mode = palette_cfg.get("mode", "random")

        self.commands: dict[str, Callable[..., Any]] = {
            "generate": self.generate,
            "save": self.save_current,
            "set_mode": self.set_mode,
            "set_count": self.set_count,
            "set_ranges": self.set_ranges,
            "toggle_lock": self.toggle_lock,
            "toggle_favorite": self.toggle_favorite,
            "select_color": self.select_color,
            "select_favorite": self.select_favorite,
            "load_history": self.load_history,
            "remove_favorite": self.remove_favorite,
            "add_picked_colors": self.add_picked_colors,
            "reset_all": self.reset_all,
            "export": self.export,
        }

    def dispatch(self, action: str, *args: Any, **kwargs: Any) -> Any:
        """Run the command registered for action."""
        try:
            command = self.commands[action]
        except KeyError:
            raise UnknownCommandError(action) from None
        return command(*args, **kwargs)

    # Read-only views for rendering

    @property
    def colors(self) -> list[Color]:
        return self.store.colors

    @property
    def mode(self) -> str:
        return self.store.mode

    @property
    def primary(self) -> Color | None:
        return self.store.colors[0] if self.store.colors else None

    # Commands

    def generate(self) -> list[Color]:
        """New palette honoring locks; recorded in history."""
        colors = self.generator.generate(
            self.count,
            self.store.mode,
            self.ranges,
            previous_palette=self.store.colors,
            locked_positions=self.store.locked,
        )
        self.store.set_palette(colors)
        self.store.push_history(colors, self.store.mode)
        return colors

    def save_current(self) -> HistoryEntry:
        return self.store.push_history(self.store.colors, self.store.mode)

    def set_mode(self, mode: str) -> str:
        if mode not in GENERATION_MODES:
            raise ValueError(f"Unknown generation mode {mode!r}; expected one of {', '.join(GENERATION_MODES)}")
        self.store.mode = mode
        return mode

    def set_count(self, count: int) -> int:
        count = int(count)
        if count < 1:
            raise ValueError(f"count must be >= 1, got {count}")
        self.count = count
        return count

    def set_ranges(self, **values: int) -> GenerationRanges:
        """Update some range bounds; any max left below its min is raised to it."""
        merged = {**self.ranges.to_dict(), **values}
        self.ranges = GenerationRanges.from_dict(merged).clamped()
        return self.ranges

    def toggle_lock(self, index: int) -> bool:
        return self.store.toggle_lock(int(index))

    def toggle_favorite(self, index: int = 0) -> bool | None:
        """Toggle the palette color at index (primary by default) as a favorite."""
        color = self._color_at(index)
        if color is None:
            return None
        return self.store.toggle_favorite(color)

    def select_color(self, index: int) -> Color | None:
        color = self._color_at(index)
        if color is not None:
            self.store.select_color(color)
        return color

    def select_favorite(self, index: int) -> Color | None:
        if not 0 <= index < len(self.store.favorites):
            logger.warning("select_favorite: index %s out of range", index)
            return None
        color = self.store.favorites[index]
        self.store.select_color(color)
        return color

    def load_history(self, index: int) -> HistoryEntry | None:
        return self.store.load_from_history(int(index))

    def remove_favorite(self, index: int) -> Color | None:
        return self.store.remove_favorite(int(index))

    def add_picked_colors(self, values: Iterable[str]) -> int:
        """Prepend colors given as hex or rgb(...) strings; palette stays at count."""
        picked = [Color.from_rgb(*parse_color_string(v)) for v in values]
        return self.store.add_picked_colors(picked, self.count)

    def reset_all(self) -> list[Color]:
        """Back to config defaults, history and locks cleared, then a fresh palette."""
        from .config import get_ranges

        palette_cfg = self.config.get("palette", {})
        self.store.reset()
        self.count = int(palette_cfg.get("count", 5))
        self.ranges = get_ranges(self.config).clamped()
        log_structured("info", event="reset_all", count=self.count)
        return self.generate()

    def export(self, fmt: str, path: Path | str | None = None) -> str:
        """Export the current palette. png without a path goes to the configured export dir."""
        from .config import get_export_dir
        from .export import export_filename, export_palette

        export_cfg = self.config.get("export", {})
        fmt = (fmt or "").lower()
        if fmt == "png" and path is None:
            path = get_export_dir(self.config) / export_filename(fmt, int(time.time() * 1000))
        return export_palette(
            self.store.colors,
            fmt,
            mode=self.store.mode,
            path=path,
            swatch_width=int(export_cfg.get("swatch_width", 100)),
            swatch_height=int(export_cfg.get("swatch_height", 100)),
        )

    def _color_at(self, index: int) -> Color | None:
        if not 0 <= index < len(self.store.colors):
            logger.warning("No palette color at index %s (palette has %s)", index, len(self.store.colors))
            return None
        return self.store.colors[index]
