# Palette generation: per-mode hue selection and the generator

from .modes import (
    GenerationMode,
    GENERATION_MODES,
    HARMONIOUS_OFFSETS,
    pick_hue,
)
from .generator import GenerationRanges, InvalidRangeError, PaletteGenerator

__all__ = [
    "GenerationMode",
    "GENERATION_MODES",
    "HARMONIOUS_OFFSETS",
    "pick_hue",
    "GenerationRanges",
    "InvalidRangeError",
    "PaletteGenerator",
]
