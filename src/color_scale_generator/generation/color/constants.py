# constants.py
# ============

"""
constants.
=========

Does: Define the color-scale domain constants (roles, families, shading tuning)
      and typed accessors for the JSON tables shipped under data/
      (step list, variable search patterns, default seed palette).
Used By: Scale generator, palette builder, variable reconciler, orchestrator.
Returns: Pure data structures; accessors go through load_config (cached, validated).
"""

from __future__ import annotations

from typing import Any, Dict, List, Tuple

from color_scale_generator.generation.general.utils.load_config import load_config

__all__ = [
    "CANONICAL_STEPS",
    "BASE_STEP",
    "SEED_ROLES",
    "FAMILIES",
    "FAMILY_SEED_ROLE",
    "SHADE_RATIO_CAP",
    "SHADE_LIGHTNESS_FACTOR",
    "SATURATION_BOOST_THRESHOLD",
    "SATURATION_BOOST_FACTOR",
    "SATURATION_DAMPING_FACTOR",
    "validate_steps",
    "get_scale_steps",
    "get_search_patterns",
    "get_default_seed_hex",
]


# ── 1) Steps & roles ─────────────────────────────────────────────────────────
CANONICAL_STEPS: Tuple[int, ...] = (50, 100, 200, 300, 400, 500, 600, 700, 800, 900)
BASE_STEP = 500

# Wire names of the seed palette roles, in palette order
SEED_ROLES: Tuple[str, ...] = (
    "baseWhite",
    "baseBlack",
    "brand500",
    "primary500",
    "secondary500",
    "gray500",
)

FAMILIES: Tuple[str, ...] = ("brand", "primary", "secondary", "gray")
FAMILY_SEED_ROLE: Dict[str, str] = {f: f"{f}500" for f in FAMILIES}


# ── 2) Shade tuning ──────────────────────────────────────────────────────────
SHADE_RATIO_CAP = 0.85  # 900 stops at 0.85 instead of 1.0
SHADE_LIGHTNESS_FACTOR = 0.85  # l' = l * (1 - ratio * 0.85)
SATURATION_BOOST_THRESHOLD = 0.6  # above: boost, else: damp
SATURATION_BOOST_FACTOR = 0.5
SATURATION_DAMPING_FACTOR = 0.2


# ── 3) Config tables (data/*.json) ───────────────────────────────────────────
def validate_steps(steps: Any) -> Tuple[int, ...]:
    """Does: Accept only the ten canonical steps in ascending order."""
    try:
        out = tuple(int(s) for s in steps)
    except (TypeError, ValueError) as e:
        raise ValueError(f"Steps must be integers, got {steps!r}") from e
    if out != CANONICAL_STEPS:
        raise ValueError(f"Steps must be exactly {list(CANONICAL_STEPS)}, got {list(out)}")
    return out


def _validate_scale_table(data: Dict[str, Any]) -> Tuple[int, ...]:
    steps = validate_steps(data["steps"])
    if int(data.get("base_step", BASE_STEP)) != BASE_STEP:
        raise ValueError(f"base_step must be {BASE_STEP}")
    return steps


def _validate_patterns(data: Dict[str, Any]) -> Dict[str, Tuple[str, ...]]:
    unknown = set(data) - set(SEED_ROLES)
    if unknown:
        raise ValueError(f"Unknown roles in search patterns: {sorted(unknown)}")
    out: Dict[str, Tuple[str, ...]] = {}
    for role in SEED_ROLES:
        patterns: List[Any] = data.get(role, [])
        if not isinstance(patterns, list) or not all(isinstance(p, str) and p for p in patterns):
            raise ValueError(f"{role}: expected a list of non-empty strings")
        out[role] = tuple(p.lower() for p in patterns)
    return out


def _validate_seed(data: Dict[str, Any]) -> Dict[str, str]:
    missing = [r for r in SEED_ROLES if r not in data]
    if missing:
        raise ValueError(f"Default seed is missing roles: {missing}")
    return {r: str(data[r]) for r in SEED_ROLES}


def get_scale_steps() -> Tuple[int, ...]:
    """Does: Return the validated step table from data/scale_steps.json."""
    return load_config("scale_steps", validator=_validate_scale_table)


def get_search_patterns() -> Dict[str, Tuple[str, ...]]:
    """Does: Return {role: lowercase substrings} from data/search_patterns.json."""
    return load_config("search_patterns", validator=_validate_patterns)


def get_default_seed_hex() -> Dict[str, str]:
    """Does: Return the default seed palette as {role: hex} from data/default_seed.json."""
    return load_config("default_seed", validator=_validate_seed)
