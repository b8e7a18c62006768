"""
Palette generator: count + mode + HSL ranges -> ordered list of Colors.
Locked positions are copied from the previous palette unchanged.
"""
import logging
from dataclasses import asdict, dataclass
from typing import Any, Iterable, Sequence

from ..color import Color
from ..random_utils import RandomBetween, secure_random_between
from .modes import GENERATION_MODES, GenerationMode, pick_hue

logger = logging.getLogger(__name__)


class InvalidRangeError(ValueError):
    """A configured range has min > max."""


@dataclass(frozen=True)
class GenerationRanges:
    """Inclusive HSL ranges for generation. Hue in degrees, saturation/lightness in percent."""

    hue_min: int = 0
    hue_max: int = 360
    sat_min: int = 30
    sat_max: int = 90
    light_min: int = 40
    light_max: int = 80

    def validate(self) -> "GenerationRanges":
        for label, lo, hi in self._pairs():
            if lo > hi:
                raise InvalidRangeError(f"{label} range is inverted: min={lo} > max={hi}")
        return self

    def clamped(self) -> "GenerationRanges":
        """Copy where every max below its min is raised to the min."""
        return GenerationRanges(
            hue_min=self.hue_min,
            hue_max=max(self.hue_min, self.hue_max),
            sat_min=self.sat_min,
            sat_max=max(self.sat_min, self.sat_max),
            light_min=self.light_min,
            light_max=max(self.light_min, self.light_max),
        )

    def _pairs(self) -> list[tuple[str, int, int]]:
        return [
            ("hue", self.hue_min, self.hue_max),
            ("saturation", self.sat_min, self.sat_max),
            ("lightness", self.light_min, self.light_max),
        ]

    def to_dict(self) -> dict[str, int]:
        return asdict(self)

    @classmethod
    def from_dict(cls, d: dict[str, Any] | None) -> "GenerationRanges":
        """Build from a dict, ignoring unknown keys; missing keys keep their defaults."""
        d = d or {}
        field_names = {f for f in cls.__dataclass_fields__}
        return cls(**{k: int(v) for k, v in d.items() if k in field_names and v is not None})


class PaletteGenerator:
    """
    Generates palettes from an injected random source.
    The source must return a uniform int in [min, max], inclusive on both ends.
    """

    def __init__(self, random_between: RandomBetween | None = None):
        self.random_between = random_between or secure_random_between

    def generate(
        self,
        count: int,
        mode: GenerationMode,
        ranges: GenerationRanges,
        previous_palette: Sequence[Color] | None = None,
        locked_positions: Iterable[int] = frozenset(),
    ) -> list[Color]:
        if count < 0:
            raise ValueError(f"count must be >= 0, got {count}")
        if mode not in GENERATION_MODES:
            raise ValueError(f"Unknown generation mode {mode!r}; expected one of {', '.join(GENERATION_MODES)}")
        ranges.validate()
        previous = list(previous_palette or [])
        locked = set(locked_positions)

        # Gradient steps from the palette being replaced, not from colors made in this pass
        last_hue = previous[-1].hue if previous and previous[-1] is not None else None

        colors: list[Color] = []
        for i in range(count):
            if i in locked and i < len(previous) and previous[i] is not None:
                colors.append(previous[i])
                continue
            colors.append(self.make_color(mode, ranges, last_hue=last_hue))

        logger.debug(
            "Generated %s colors (mode=%s, locked=%s)",
            count, mode, sorted(p for p in locked if p < count),
        )
        return colors

    def make_color(self, mode: GenerationMode, ranges: GenerationRanges, *, last_hue: int | None = None) -> Color:
        """Synthesize one color. Hue is reduced into [0, 360) before conversion."""
        hue = pick_hue(mode, ranges.hue_min, ranges.hue_max, self.random_between, last_hue=last_hue)
        saturation = self.random_between(ranges.sat_min, ranges.sat_max)
        lightness = self.random_between(ranges.light_min, ranges.light_max)
        return Color(hue % 360, saturation, lightness)
