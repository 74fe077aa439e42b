"""
color.
=====

Does: Aggregate the color-domain pieces: codec (hex/RGB/HSL), domain constants
      and config tables, family scale generation and palette assembly.
Used By: Orchestrator, variable reconciler, demo CLI.
Returns: Pure functions and immutable values; no side effects.
"""

# ── Constants ────────────────────────────────────────────────────────────────
from .constants import (
    BASE_STEP,
    CANONICAL_STEPS,
    FAMILIES,
    SEED_ROLES,
    get_default_seed_hex,
    get_scale_steps,
    get_search_patterns,
)

# ── Scale & palette ──────────────────────────────────────────────────────────
from .logic import (
    ColorScale,
    SeedPalette,
    StepMap,
    build_palette,
    build_palette_from_hex,
    default_seed_palette,
    generate_family,
)

# ── Codec ────────────────────────────────────────────────────────────────────
from .utils import (
    Color,
    InvalidColorFormat,
    color_to_hex,
    color_to_hsl,
    hex_to_color,
    hsl_to_color,
)

__all__ = [
    # constants
    "CANONICAL_STEPS",
    "BASE_STEP",
    "SEED_ROLES",
    "FAMILIES",
    "get_scale_steps",
    "get_search_patterns",
    "get_default_seed_hex",
    # codec
    "Color",
    "InvalidColorFormat",
    "hex_to_color",
    "color_to_hex",
    "color_to_hsl",
    "hsl_to_color",
    # scale & palette
    "StepMap",
    "SeedPalette",
    "ColorScale",
    "generate_family",
    "build_palette",
    "build_palette_from_hex",
    "default_seed_palette",
]
