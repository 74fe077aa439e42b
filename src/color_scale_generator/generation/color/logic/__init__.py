"""
logic.
=====

Does: Expose the scale generator (one family) and the palette builder (all families).
"""

from .palette import (
    BaseColors,
    ColorScale,
    SeedPalette,
    build_palette,
    build_palette_from_hex,
    default_seed_palette,
)
from .scale import (
    StepMap,
    darken_hsl,
    generate_family,
    mix_rgb,
    shade_ratios,
    tint_ratios,
)

__all__ = [
    # scale
    "StepMap",
    "generate_family",
    "mix_rgb",
    "darken_hsl",
    "tint_ratios",
    "shade_ratios",
    # palette
    "SeedPalette",
    "BaseColors",
    "ColorScale",
    "build_palette",
    "build_palette_from_hex",
    "default_seed_palette",
]
