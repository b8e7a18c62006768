"""
Color-space conversion: HSL <-> RGB <-> hex. Pure functions, integer channels.
Rounding is half-up per channel (never banker's rounding), so values match what
a browser computes for the same CSS color.
"""
import math
import re

_RGB_STRING = re.compile(r"^rgb\((\d+), ?(\d+), ?(\d+)\)$")
_HEX_STRING = re.compile(r"^#?([0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")


def _round(value: float) -> int:
    return int(math.floor(value + 0.5))


def hsl_to_hex(h: float, s: float, l: float) -> str:
    """HSL (degrees, percent, percent) to '#rrggbb'."""
    l /= 100
    a = s * min(l, 1 - l) / 100

    def channel(n: int) -> str:
        k = (n + h / 30) % 12
        value = l - a * max(min(k - 3, 9 - k, 1), -1)
        return f"{_round(255 * value):02x}"

    return f"#{channel(0)}{channel(8)}{channel(4)}"


def hsl_to_rgb(h: float, s: float, l: float) -> tuple[int, int, int]:
    """
    HSL to an (r, g, b) triple of 0-255 ints using the chroma / x / m sector formula.
    Sectors are half-open [low, high); h outside [0, 360) matches no sector and
    only the lightness offset m is applied.
    """
    s /= 100
    l /= 100
    c = (1 - abs(2 * l - 1)) * s
    x = c * (1 - abs((h / 60) % 2 - 1))
    m = l - c / 2
    r = g = b = 0.0

    if 0 <= h < 60:
        r, g, b = c, x, 0
    elif 60 <= h < 120:
        r, g, b = x, c, 0
    elif 120 <= h < 180:
        r, g, b = 0, c, x
    elif 180 <= h < 240:
        r, g, b = 0, x, c
    elif 240 <= h < 300:
        r, g, b = x, 0, c
    elif 300 <= h < 360:
        r, g, b = c, 0, x

    return (
        _round((r + m) * 255),
        _round((g + m) * 255),
        _round((b + m) * 255),
    )


def rgb_to_hex(r: int, g: int, b: int) -> str:
    return f"#{int(r):02x}{int(g):02x}{int(b):02x}"


def hex_to_rgb(value: str) -> tuple[int, int, int]:
    """'#rrggbb', 'rrggbb' or '#rgb' to an (r, g, b) triple. Raises ValueError if malformed."""
    match = _HEX_STRING.match((value or "").strip())
    if not match:
        raise ValueError(f"Not a hex color: {value!r}")
    digits = match.group(1)
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    return tuple(int(digits[i : i + 2], 16) for i in (0, 2, 4))


def rgb_to_hsl(r: int, g: int, b: int) -> tuple[int, int, int]:
    """
    RGB (0-255) to (h, s, l): h in [0, 360], s and l in [0, 100].
    Each component is rounded separately after the float computation, so a round
    trip through hsl_to_rgb may drift by one unit per component.
    """
    r /= 255
    g /= 255
    b /= 255

    hi = max(r, g, b)
    lo = min(r, g, b)
    l = (hi + lo) / 2

    if hi == lo:
        h = s = 0.0
    else:
        d = hi - lo
        s = d / (2 - hi - lo) if l > 0.5 else d / (hi + lo)
        if hi == r:
            h = (g - b) / d + (6 if g < b else 0)
        elif hi == g:
            h = (b - r) / d + 2
        else:
            h = (r - g) / d + 4
        h /= 6

    return _round(h * 360), _round(s * 100), _round(l * 100)


def parse_rgb_string(value: str) -> tuple[int, int, int]:
    """Parse 'rgb(R, G, B)'. Anything else yields (0, 0, 0); never raises."""
    match = _RGB_STRING.match(value or "")
    if not match:
        return (0, 0, 0)
    return int(match.group(1)), int(match.group(2)), int(match.group(3))


def parse_color_string(value: str) -> tuple[int, int, int]:
    """Hex or 'rgb(...)' string to an RGB triple, with the same zero fallback as parse_rgb_string."""
    value = (value or "").strip()
    if _HEX_STRING.match(value):
        return hex_to_rgb(value)
    return parse_rgb_string(value)


def format_rgb(r: int, g: int, b: int) -> str:
    return f"rgb({r}, {g}, {b})"


def format_hsl(h: int, s: int, l: int) -> str:
    return f"hsl({h}, {s}%, {l}%)"
