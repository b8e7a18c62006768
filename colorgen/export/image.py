"""
PNG export: one solid swatch per color, side by side. Uses numpy + Pillow.
"""
from pathlib import Path
from typing import TYPE_CHECKING, Sequence

from ..color import Color

if TYPE_CHECKING:
    import numpy as np


def render_swatches(
    colors: Sequence[Color],
    *,
    swatch_width: int = 100,
    swatch_height: int = 100,
) -> "np.ndarray":
    """RGB uint8 frame of shape (swatch_height, len(colors) * swatch_width, 3)."""
    import numpy as np

    if swatch_width <= 0 or swatch_height <= 0:
        raise ValueError("swatch size must be positive")
    frame = np.zeros((swatch_height, max(1, len(colors)) * swatch_width, 3), dtype=np.uint8)
    for i, color in enumerate(colors):
        frame[:, i * swatch_width : (i + 1) * swatch_width] = color.rgb
    return frame


def export_png(
    colors: Sequence[Color],
    path: Path,
    *,
    swatch_width: int = 100,
    swatch_height: int = 100,
) -> Path:
    """Write the swatch strip to path. Returns the path written."""
    from PIL import Image

    frame = render_swatches(colors, swatch_width=swatch_width, swatch_height=swatch_height)
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    Image.fromarray(frame).save(path, format="PNG")
    return path
