"""
utils package.
=============

Does: Provide the color-space codec (hex / RGB / HSL / unit-float RGB) shared by
      scale generation and variable reconciliation.
"""

from .conversion import (
    HSL,
    Color,
    InvalidColorFormat,
    color_to_hex,
    color_to_hsl,
    color_to_unit_rgb,
    hex_to_color,
    hsl_to_color,
    make_color,
    round_half_up,
    strip_hash,
    unit_rgb_to_color,
)

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
