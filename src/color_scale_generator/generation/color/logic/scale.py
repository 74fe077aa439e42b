"""
scale.py
========

Does: Generate the 10-step ramp of one color family.
      - Tints (50–400): linear RGB interpolation from white toward the seed.
      - Base (500): the seed, untouched.
      - Shades (600–900): HSL darkening that holds the hue, damps saturation for
        mid-dark steps and boosts it for the darkest ones so they stay vivid.
Returns: StepMap, a read-only {step: Color} mapping with exactly the ten steps.
Used by: palette.build_palette and anything needing a single family ramp.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Dict, Iterable, Mapping, Tuple

from color_scale_generator.generation.color.constants import (
    BASE_STEP,
    CANONICAL_STEPS,
    SATURATION_BOOST_FACTOR,
    SATURATION_BOOST_THRESHOLD,
    SATURATION_DAMPING_FACTOR,
    SHADE_LIGHTNESS_FACTOR,
    SHADE_RATIO_CAP,
    validate_steps,
)
from color_scale_generator.generation.color.utils.conversion import (
    Color,
    color_to_hsl,
    hsl_to_color,
    round_half_up,
)

__all__ = [
    "StepMap",
    "tint_ratios",
    "shade_ratios",
    "mix_rgb",
    "darken_hsl",
    "generate_family",
]
__docformat__ = "google"

logger = logging.getLogger(__name__)

StepMap = Mapping[int, Color]

_TINT_COUNT = 5
_SHADE_COUNT = 4


def tint_ratios() -> Tuple[float, ...]:
    """Does: Seed weights for steps 50..400 → (0, .25, .5, .75, 1.0).

    The last one reaches 1.0, so step 400 repeats the seed (same as 500).
    """
    return tuple(i / 4 for i in range(_TINT_COUNT))


def shade_ratios() -> Tuple[float, ...]:
    """Does: Darkening ratios for steps 600..900 → (.25, .5, .75, .85)."""
    return tuple(min(SHADE_RATIO_CAP, (i + 1) / 4) for i in range(_SHADE_COUNT))


def mix_rgb(start: Color, end: Color, ratio: float) -> Color:
    """Does: Per-channel `round(start*(1-ratio) + end*ratio)` with half-up rounding."""
    return Color(
        *(round_half_up(a * (1 - ratio) + b * ratio) for a, b in zip(start, end))
    )


def darken_hsl(seed: Color, ratio: float) -> Color:
    """Does: Darken `seed` in HSL space at `ratio`, keeping its hue.

    Lightness becomes l * (1 - ratio * 0.85). Saturation is boosted (capped at 1)
    once ratio passes 0.6, otherwise reduced by ratio * 0.2.
    """
    h, s, l = color_to_hsl(seed)
    new_l = l * (1 - ratio * SHADE_LIGHTNESS_FACTOR)
    if ratio > SATURATION_BOOST_THRESHOLD:
        new_s = min(1.0, s * (1 + (ratio - SATURATION_BOOST_THRESHOLD) * SATURATION_BOOST_FACTOR))
    else:
        new_s = s * (1 - ratio * SATURATION_DAMPING_FACTOR)
    return hsl_to_color(h, new_s, new_l)


def generate_family(
    seed: Color,
    white: Color,
    black: Color,
    *,
    steps: Iterable[int] = CANONICAL_STEPS,
) -> StepMap:
    """Does: Build the ten-step ramp for one family.

    Args:
        seed: Family color; returned unchanged at step 500.
        white: Tint anchor (step 50 equals it).
        black: Shade anchor. Shades are derived in HSL from the seed alone, so
            this only completes the (seed, white, black) family signature.
        steps: Step table. Must be the ten canonical steps; callers that load
            data/scale_steps.json pass it in here.

    Returns:
        Read-only mapping ordered 50 → 900.
    """
    table = validate_steps(steps)
    base_idx = table.index(BASE_STEP)
    tint_steps = table[:base_idx]
    shade_steps = table[base_idx + 1:]

    scale: Dict[int, Color] = {}
    for step, ratio in zip(tint_steps, tint_ratios()):
        scale[step] = mix_rgb(white, seed, ratio)

    scale[BASE_STEP] = seed

    for step, ratio in zip(shade_steps, shade_ratios()):
        scale[step] = darken_hsl(seed, ratio)

    logger.debug("family seed=%s black=%s → %d steps", seed, black, len(scale))
    return MappingProxyType(scale)
