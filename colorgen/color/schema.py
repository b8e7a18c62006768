"""
Color value type. Hue / saturation / lightness are stored; hex, rgb and name are
always derived from them so they can never disagree.
"""
from dataclasses import dataclass
from typing import Any

from .convert import (
    format_hsl,
    format_rgb,
    hex_to_rgb,
    hsl_to_hex,
    hsl_to_rgb,
    rgb_to_hsl,
)
from .naming import color_name


@dataclass(frozen=True)
class Color:
    """One palette color: hue in degrees (0-359), saturation and lightness in percent."""

    hue: int
    saturation: int
    lightness: int

    @property
    def hex(self) -> str:
        return hsl_to_hex(self.hue, self.saturation, self.lightness)

    @property
    def rgb(self) -> tuple[int, int, int]:
        return hsl_to_rgb(self.hue, self.saturation, self.lightness)

    @property
    def name(self) -> str:
        return color_name(self.hue, self.saturation, self.lightness)

    @property
    def hsl(self) -> str:
        return format_hsl(self.hue, self.saturation, self.lightness)

    @property
    def rgb_string(self) -> str:
        return format_rgb(*self.rgb)

    def same_hex(self, other: "Color | str") -> bool:
        """Hex equality, case-insensitive. Identity for favorites."""
        other_hex = other if isinstance(other, str) else other.hex
        return self.hex.lower() == other_hex.lower()

    @classmethod
    def from_rgb(cls, r: int, g: int, b: int) -> "Color":
        h, s, l = rgb_to_hsl(r, g, b)
        return cls(h % 360, s, l)

    @classmethod
    def from_hex(cls, value: str) -> "Color":
        return cls.from_rgb(*hex_to_rgb(value))

    def to_dict(self) -> dict[str, Any]:
        """JSON-safe form used by persistence and the JSON export."""
        return {
            "name": self.name,
            "hex": self.hex,
            "hsl": self.hsl,
            "rgb": self.rgb_string,
            "hue": self.hue,
            "saturation": self.saturation,
            "lightness": self.lightness,
        }

    @classmethod
    def from_dict(cls, d: dict[str, Any]) -> "Color":
        """Rebuild from to_dict() output; falls back to the hex when HSL fields are missing."""
        if all(k in d for k in ("hue", "saturation", "lightness")):
            return cls(int(d["hue"]), int(d["saturation"]), int(d["lightness"]))
        if d.get("hex"):
            return cls.from_hex(d["hex"])
        raise ValueError(f"Color needs hue/saturation/lightness or hex: {d!r}")
