"""
conversion.py
=============

Does: Convert between 6-digit hex text, integer RGB triples, HSL triples and
      unit-float RGB mappings (the value format of design-tool variables).
Used By: Scale generation (tints/shades), palette serialization, variable
         reconciliation.
Returns: Color named tuples, uppercase hex strings, (h, s, l) float triples.
"""

from __future__ import annotations

import logging
import math
import re
from typing import Mapping, NamedTuple, Tuple

from webcolors import hex_to_rgb, rgb_to_hex

# Public surface
__all__ = [
    "Color",
    "HSL",
    "InvalidColorFormat",
    "make_color",
    "round_half_up",
    "strip_hash",
    "hex_to_color",
    "color_to_hex",
    "color_to_hsl",
    "hsl_to_color",
    "color_to_unit_rgb",
    "unit_rgb_to_color",
]
__docformat__ = "google"

logger = logging.getLogger(__name__)


# ── Types ─────────────────────────────────────────────────────────────────────
class Color(NamedTuple):
    """A 24-bit sRGB color as three 0–255 integer channels."""

    r: int
    g: int
    b: int


HSL = Tuple[float, float, float]


class InvalidColorFormat(ValueError):
    """Raise when a color string is not exactly six hexadecimal digits."""


_HEX6 = re.compile(r"[0-9a-fA-F]{6}")


# =============================================================================
# 1) HELPERS
# =============================================================================

def round_half_up(value: float) -> int:
    """Does: Round .5 away from zero for positive channel values (not banker's)."""
    return int(math.floor(value + 0.5))


def _validate_rgb(rgb: Tuple[int, int, int]) -> None:
    r, g, b = rgb
    if not (0 <= r <= 255 and 0 <= g <= 255 and 0 <= b <= 255):
        raise ValueError(f"RGB out of bounds: {tuple(rgb)}")


def make_color(r: int, g: int, b: int) -> Color:
    """Does: Build a Color after checking every channel is within 0–255."""
    rgb = (int(r), int(g), int(b))
    _validate_rgb(rgb)
    return Color(*rgb)


def strip_hash(text: str) -> str:
    """Does: Drop a single leading '#' so UI-style values can reach hex_to_color."""
    return text[1:] if isinstance(text, str) and text.startswith("#") else text


# =============================================================================
# 2) HEX <-> RGB
# =============================================================================

def hex_to_color(text: str) -> Color:
    """Does: Parse exactly six hex digits into a Color.

    Raises:
        InvalidColorFormat: for anything else (shorthand, '#' prefix, non-str).
    """
    if not isinstance(text, str) or _HEX6.fullmatch(text) is None:
        raise InvalidColorFormat(f"Expected 6 hexadecimal digits, got {text!r}")
    r, g, b = hex_to_rgb(f"#{text}")
    return Color(r, g, b)


def color_to_hex(color: Tuple[int, int, int]) -> str:
    """Does: Encode a Color as six uppercase hex digits (no '#')."""
    _validate_rgb(color)
    return rgb_to_hex(tuple(color))[1:].upper()


# =============================================================================
# 3) RGB <-> HSL
# =============================================================================

def color_to_hsl(color: Tuple[int, int, int]) -> HSL:
    """Does: Standard RGB→HSL; hue is a fraction of the circle in [0, 1)."""
    r, g, b = (c / 255 for c in color)
    hi = max(r, g, b)
    lo = min(r, g, b)
    l = (hi + lo) / 2

    if hi == lo:  # achromatic
        return 0.0, 0.0, l

    d = hi - lo
    s = d / (2 - hi - lo) if l > 0.5 else d / (hi + lo)
    if hi == r:
        h = (g - b) / d + (6 if g < b else 0)
    elif hi == g:
        h = (b - r) / d + 2
    else:
        h = (r - g) / d + 4
    return h / 6, s, l


def _hue_to_channel(p: float, q: float, t: float) -> float:
    if t < 0:
        t += 1
    if t > 1:
        t -= 1
    if t < 1 / 6:
        return p + (q - p) * 6 * t
    if t < 1 / 2:
        return q
    if t < 2 / 3:
        return p + (q - p) * (2 / 3 - t) * 6
    return p


def hsl_to_color(h: float, s: float, l: float) -> Color:
    """Does: Standard HSL→RGB; zero saturation yields a pure gray of round(l*255)."""
    if s == 0:
        v = round_half_up(l * 255)
        return Color(v, v, v)

    q = l * (1 + s) if l < 0.5 else l + s - l * s
    p = 2 * l - q
    return Color(
        round_half_up(_hue_to_channel(p, q, h + 1 / 3) * 255),
        round_half_up(_hue_to_channel(p, q, h) * 255),
        round_half_up(_hue_to_channel(p, q, h - 1 / 3) * 255),
    )


# =============================================================================
# 4) UNIT-FLOAT RGB (variable store values)
# =============================================================================

def color_to_unit_rgb(color: Tuple[int, int, int]) -> dict[str, float]:
    """Does: Express a Color as {'r','g','b'} floats in [0, 1]."""
    _validate_rgb(color)
    r, g, b = color
    return {"r": r / 255, "g": g / 255, "b": b / 255}


def unit_rgb_to_color(value: Mapping[str, float]) -> Color:
    """Does: Convert a {'r','g','b'[,'a']} float mapping back to a Color (alpha ignored)."""
    try:
        channels = [value[k] for k in ("r", "g", "b")]
    except (KeyError, TypeError) as e:
        raise ValueError(f"Not an RGB mapping: {value!r}") from e
    return make_color(*(round_half_up(float(c) * 255) for c in channels))
