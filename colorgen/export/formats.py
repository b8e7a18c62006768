"""
Text exports of a finished palette: CSS custom properties, SCSS variables, JSON document.
"""
import json
from typing import Sequence

from ..color import Color

TEXT_FORMATS: tuple[str, ...] = ("css", "scss", "json")
EXPORT_FORMATS: tuple[str, ...] = TEXT_FORMATS + ("png",)


def export_css(colors: Sequence[Color]) -> str:
    lines = ["/* Color palette */", "", ":root {"]
    for i, color in enumerate(colors, start=1):
        lines.append(f"  --color-{i}: {color.hex};")
    lines += ["}", ""]
    for i, color in enumerate(colors, start=1):
        lines.append(f"/* Color {i}: {color.name} */")
        lines.append(f".color-{i} {{ background: {color.hex}; }}")
        lines.append("")
    return "\n".join(lines) + "\n"


def export_scss(colors: Sequence[Color]) -> str:
    lines = ["// Color palette", ""]
    for i, color in enumerate(colors, start=1):
        lines.append(f"$color-{i}: {color.hex}; // {color.name}")
    lines += ["", "// Utility classes"]
    for i in range(1, len(colors) + 1):
        lines.append(f".bg-color-{i} {{ background: $color-{i}; }}")
        lines.append(f".text-color-{i} {{ color: $color-{i}; }}")
    return "\n".join(lines) + "\n"


def export_json(colors: Sequence[Color], mode: str, generated: str | None = None) -> str:
    """JSON document: palette entries, generation time (ISO-8601) and mode."""
    if generated is None:
        from ..state import utc_now_iso
        generated = utc_now_iso()
    data = {
        "palette": [c.to_dict() for c in colors],
        "generated": generated,
        "mode": mode,
    }
    return json.dumps(data, indent=2, ensure_ascii=False)


def export_filename(fmt: str, millis: int) -> str:
    """Download name for an export, e.g. palette-1700000000000.css."""
    if fmt not in EXPORT_FORMATS:
        raise ValueError(f"Unknown export format {fmt!r}; expected one of {', '.join(EXPORT_FORMATS)}")
    return f"palette-{millis}.{fmt}"


def export_palette(
    colors: Sequence[Color],
    fmt: str,
    *,
    mode: str = "random",
    path=None,
    swatch_width: int = 100,
    swatch_height: int = 100,
) -> str:
    """
    Export in fmt. Text formats return the text (and write it when path is set);
    png requires path and returns it as a string.
    """
    fmt = (fmt or "").lower()
    if fmt == "png":
        if path is None:
            raise ValueError("png export needs an output path")
        from .image import export_png
        return str(export_png(colors, path, swatch_width=swatch_width, swatch_height=swatch_height))
    exporters = {
        "css": lambda: export_css(colors),
        "scss": lambda: export_scss(colors),
        "json": lambda: export_json(colors, mode),
    }
    if fmt not in exporters:
        raise ValueError(f"Unknown export format {fmt!r}; expected one of {', '.join(EXPORT_FORMATS)}")
    text = exporters[fmt]()
    if path is not None:
        from pathlib import Path
        out = Path(path)
        out.parent.mkdir(parents=True, exist_ok=True)
        out.write_text(text, encoding="utf-8")
    return text
