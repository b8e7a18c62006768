# Exports: CSS / SCSS / JSON text and PNG swatch strips

from .formats import (
    export_css,
    export_scss,
    export_json,
    export_palette,
    export_filename,
    EXPORT_FORMATS,
    TEXT_FORMATS,
)
from .image import export_png, render_swatches

__all__ = [
    "export_css",
    "export_scss",
    "export_json",
    "export_palette",
    "export_filename",
    "EXPORT_FORMATS",
    "TEXT_FORMATS",
    "export_png",
    "render_swatches",
]
