"""
palette.py
==========

Does: Assemble a full ColorScale from a six-role SeedPalette: white/black pass
      through, and each family (brand, primary, secondary, gray) gets its own
      independent ten-step ramp.
Returns: Immutable SeedPalette / ColorScale values with a string→hex wire form.
Used by: Orchestrator, demo CLI, variable reconciler.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, NamedTuple, Tuple

from color_scale_generator.generation.color.constants import (
    CANONICAL_STEPS,
    FAMILIES,
    FAMILY_SEED_ROLE,
    SEED_ROLES,
    get_default_seed_hex,
    validate_steps,
)
from color_scale_generator.generation.color.logic.scale import StepMap, generate_family
from color_scale_generator.generation.color.utils.conversion import (
    Color,
    color_to_hex,
    hex_to_color,
    strip_hash,
)

__all__ = [
    "SeedPalette",
    "BaseColors",
    "ColorScale",
    "build_palette",
    "build_palette_from_hex",
    "default_seed_palette",
]
__docformat__ = "google"

logger = logging.getLogger(__name__)


class SeedPalette(NamedTuple):
    """The six seed colors; wire names are camelCase (`baseWhite`, `brand500`, …)."""

    base_white: Color
    base_black: Color
    brand500: Color
    primary500: Color
    secondary500: Color
    gray500: Color

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, str]) -> "SeedPalette":
        """Does: Parse {role: hex} (wire keys, optional '#').

        Raises:
            KeyError: a role is missing.
            InvalidColorFormat: a value is not six hex digits.
        """
        missing = [r for r in SEED_ROLES if r not in mapping]
        if missing:
            raise KeyError(f"Seed palette is missing roles: {missing}")
        return cls(*(hex_to_color(strip_hash(mapping[r])) for r in SEED_ROLES))

    def to_dict(self) -> Dict[str, str]:
        return {role: color_to_hex(c) for role, c in zip(SEED_ROLES, self)}

    def role(self, name: str) -> Color:
        """Does: Look up a color by wire role name (e.g. 'gray500')."""
        try:
            return self[SEED_ROLES.index(name)]
        except ValueError as e:
            raise KeyError(name) from e

    def replace_roles(self, overrides: Mapping[str, Color]) -> "SeedPalette":
        """Does: Copy with some roles (wire names) swapped for new colors."""
        values = [overrides.get(role, c) for role, c in zip(SEED_ROLES, self)]
        return SeedPalette(*values)


class BaseColors(NamedTuple):
    white: Color
    black: Color


class ColorScale(NamedTuple):
    """Generated palette: base anchors plus {family: StepMap}."""

    base: BaseColors
    families: Mapping[str, StepMap]

    def to_dict(self) -> Dict[str, Dict[str, str]]:
        """Does: Wire form, e.g. {"base": {"white": "FFFFFF", ...}, "brand": {"50": ...}}."""
        out: Dict[str, Dict[str, str]] = {
            "base": {"white": color_to_hex(self.base.white), "black": color_to_hex(self.base.black)}
        }
        for family, steps in self.families.items():
            out[family] = {str(step): color_to_hex(c) for step, c in steps.items()}
        return out

    def to_variables(self) -> List[Tuple[str, Color]]:
        """Does: Flatten to ordered (variable name, color) pairs: base/white, base/black, family/step."""
        pairs: List[Tuple[str, Color]] = [
            ("base/white", self.base.white),
            ("base/black", self.base.black),
        ]
        for family, steps in self.families.items():
            pairs.extend((f"{family}/{step}", c) for step, c in steps.items())
        return pairs


def build_palette(seed: SeedPalette, *, steps: Iterable[int] = CANONICAL_STEPS) -> ColorScale:
    """Does: Generate every family ramp from `seed` (families never interact)."""
    table = validate_steps(steps)
    families = {
        family: generate_family(
            seed.role(FAMILY_SEED_ROLE[family]),
            seed.base_white,
            seed.base_black,
            steps=table,
        )
        for family in FAMILIES
    }
    logger.debug("Built palette for %d families", len(families))
    return ColorScale(
        base=BaseColors(white=seed.base_white, black=seed.base_black),
        families=MappingProxyType(families),
    )


def build_palette_from_hex(
    mapping: Mapping[str, str], *, steps: Iterable[int] = CANONICAL_STEPS
) -> ColorScale:
    """Does: Parse a {role: hex} mapping and build its palette."""
    return build_palette(SeedPalette.from_mapping(mapping), steps=steps)


def default_seed_palette() -> SeedPalette:
    """Does: SeedPalette from data/default_seed.json (fallback for failed lookups)."""
    return SeedPalette.from_mapping(get_default_seed_hex())
