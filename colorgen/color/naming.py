"""
Descriptive color names from HSL. Ordered threshold rules; first match wins.
"""
import math

# Hue family per 15° band. Several bands reuse a family name on purpose.
HUE_NAMES: dict[int, str] = {
    0: "red", 15: "red-orange", 30: "orange", 45: "yellow-orange",
    60: "yellow", 75: "yellow-green", 90: "green-yellow", 105: "green",
    120: "green-blue", 135: "cyan", 150: "blue-cyan", 165: "blue",
    180: "blue-violet", 195: "violet", 210: "magenta", 225: "pink",
    240: "magenta-pink", 255: "red-magenta", 270: "violet", 285: "blue-violet",
    300: "magenta", 315: "red-magenta", 330: "red", 345: "red-orange",
}

HUE_BAND = 15
UNKNOWN_NAME = "unknown"


def hue_family(h: float) -> str:
    """Base name for a hue, snapped to the nearest 15° band."""
    key = int(math.floor(h / HUE_BAND + 0.5)) * HUE_BAND % 360
    return HUE_NAMES.get(key, UNKNOWN_NAME)


def color_name(h: float, s: float, l: float) -> str:
    if s < 10 and l > 90:
        return "white"
    if s < 10 and l < 10:
        return "black"
    if l < 20:
        return "very dark"
    if l > 90:
        return "very light"

    base = hue_family(h)

    if s < 30:
        return f"pale {base}"
    if s > 80:
        return f"vivid {base}"
    if l < 40:
        return f"dark {base}"
    if l > 70:
        return f"light {base}"
    return base
