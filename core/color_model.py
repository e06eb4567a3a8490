"""
Color Chooser - Color Model

Conversion between the internal RGB color and the four textual notations
(HEX, RGB, HSV, HSL), plus the scalar position to color mapping.
Pure functions only; no Qt imports here.
"""
import colorsys
import math
import string
from dataclasses import dataclass
from enum import Enum

MAX_PACKED = 0xFFFFFF


def _round(value):
    """Round half up to an int (so 0.5 -> 1, 2.5 -> 3)."""
    return int(math.floor(value + 0.5))


@dataclass(frozen=True)
class Color:
    """
    An opaque 24-bit color.

    Channels are 8-bit ints (0-255). There is no alpha.
    """
    red: int
    green: int
    blue: int

    def __post_init__(self):
        for name in ("red", "green", "blue"):
            value = getattr(self, name)
            if not 0 <= value <= 255:
                raise ValueError(f"{name} channel out of range: {value}")

    @classmethod
    def from_packed(cls, value):
        """Unpack the lowest 24 bits of an int, most significant byte = red."""
        value &= MAX_PACKED
        return cls((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF)

    @classmethod
    def from_unit(cls, r, g, b):
        """Build from float channels in [0, 1]."""
        return cls(*(min(255, max(0, _round(c * 255))) for c in (r, g, b)))

    @property
    def packed(self):
        return (self.red << 16) | (self.green << 8) | self.blue

    def unit(self):
        """Channels as floats in [0, 1]."""
        return (self.red / 255.0, self.green / 255.0, self.blue / 255.0)


BLACK = Color(0, 0, 0)
WHITE = Color(255, 255, 255)


class Notation(Enum):
    """Textual color notations. The value is the menu label."""
    HEX = "HEX"
    RGB = "RGB"
    HSV = "HSB/HSV"
    HSL = "HSL"

    @property
    def label(self):
        return self.value


# ─────────────────────────────────────────────────────────────────────────────
# Formatters
# ─────────────────────────────────────────────────────────────────────────────

def to_hex(color):
    return f"#{color.packed & MAX_PACKED:06x}"


def to_rgb_string(color):
    return f"{color.red:03d}, {color.green:03d}, {color.blue:03d}"


def hsv_components(color):
    """
    Return (hue degrees, saturation %, value %) as rounded ints.

    Hue is kept in [0, 360): a hue that rounds up to 360 wraps to 0.
    """
    h, s, v = colorsys.rgb_to_hsv(*color.unit())
    return _round(h * 360) % 360, _round(s * 100), _round(v * 100)


def hsl_components(color):
    """
    Return (hue degrees, saturation %, lightness %) as rounded ints.

    Textbook HSL: lightness is the mid-range of max and min, and saturation
    is scaled by how far lightness sits from 0.5. This is not the HSV path.
    """
    r, g, b = color.unit()
    lo = min(r, g, b)
    hi = max(r, g, b)

    if hi == lo:
        h = 0.0
    elif hi == r:
        h = ((60 * (g - b) / (hi - lo)) + 360) % 360
    elif hi == g:
        h = 60 * (b - r) / (hi - lo) + 120
    else:
        h = 60 * (r - g) / (hi - lo) + 240

    l = (hi + lo) / 2

    if hi == lo:
        s = 0.0
    elif l <= 0.5:
        s = (hi - lo) / (hi + lo)
    else:
        s = (hi - lo) / (2 - hi - lo)

    return _round(h) % 360, _round(s * 100), _round(l * 100)


def to_hsv_string(color):
    return "{:03d}, {:03d}, {:03d}".format(*hsv_components(color))


def to_hsl_string(color):
    return "{:03d}, {:03d}, {:03d}".format(*hsl_components(color))


_FORMATTERS = {
    Notation.HEX: to_hex,
    Notation.RGB: to_rgb_string,
    Notation.HSV: to_hsv_string,
    Notation.HSL: to_hsl_string,
}


def format_color(color, notation):
    """Format a color with the formatter registered for `notation`."""
    return _FORMATTERS[notation](color)


def parse_hex(text):
    """Parse `#rrggbb` (hash optional, any case) back into a Color."""
    digits = text.strip().lstrip("#")
    if len(digits) != 6 or not all(c in string.hexdigits for c in digits):
        raise ValueError(f"Invalid hex color: {text!r}")
    return Color.from_packed(int(digits, 16))


def position_to_color(fraction):
    """
    Map a scalar fraction onto the 0x000000-0xFFFFFF range.

    Fractions outside [0, 1] are not clamped; the packed value is masked
    to its lowest 24 bits instead.
    """
    return Color.from_packed(_round(fraction * MAX_PACKED))
