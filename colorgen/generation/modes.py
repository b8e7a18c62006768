"""
Hue selection per generation mode. Saturation and lightness do not depend on the mode.
"""
import math
from typing import Callable, Literal

from ..random_utils import RandomBetween, choice_between

GenerationMode = Literal["random", "harmonious", "analogous", "gradient"]

GENERATION_MODES: tuple[str, ...] = ("random", "harmonious", "analogous", "gradient")

# Complementary and triadic offsets
HARMONIOUS_OFFSETS: tuple[int, ...] = (0, 180, 120, 240, 60, 300)
ANALOGOUS_SPREAD = 30
GRADIENT_STEPS = 10


def random_hue(lo: int, hi: int, random_between: RandomBetween, last_hue: int | None = None) -> int:
    return random_between(lo, hi)


def harmonious_hue(lo: int, hi: int, random_between: RandomBetween, last_hue: int | None = None) -> int:
    """Random base hue plus one complementary/triadic offset. Not reduced here (may exceed 360)."""
    base = random_between(lo, hi)
    return base + choice_between(HARMONIOUS_OFFSETS, random_between)


def analogous_hue(lo: int, hi: int, random_between: RandomBetween, last_hue: int | None = None) -> int:
    base = random_between(lo, hi)
    offset = random_between(-ANALOGOUS_SPREAD, ANALOGOUS_SPREAD)
    return (base + offset + 360) % 360


def gradient_hue(lo: int, hi: int, random_between: RandomBetween, last_hue: int | None = None) -> int:
    """
    Advance the previous hue by a tenth of the range, wrapping inside [lo, hi).
    No previous hue: random in range. Empty span pins to lo.
    """
    if last_hue is None:
        return random_between(lo, hi)
    span = hi - lo
    if span <= 0:
        return lo
    step = span / GRADIENT_STEPS
    return int(math.floor((last_hue - lo + step) % span + lo + 0.5))


HUE_PICKERS: dict[str, Callable[..., int]] = {
    "random": random_hue,
    "harmonious": harmonious_hue,
    "analogous": analogous_hue,
    "gradient": gradient_hue,
}


def pick_hue(
    mode: GenerationMode,
    lo: int,
    hi: int,
    random_between: RandomBetween,
    *,
    last_hue: int | None = None,
) -> int:
    """Dispatch to the hue picker for mode. Raises ValueError for unknown modes."""
    picker = HUE_PICKERS.get(mode)
    if picker is None:
        raise ValueError(f"Unknown generation mode {mode!r}; expected one of {', '.join(GENERATION_MODES)}")
    return picker(lo, hi, random_between, last_hue)
