# tests/test_color_logic.py
"""
scale / palette tests
=====================

Does: Check the ten-step family ramp (tints, base, HSL shades), the palette
      assembly over the four families, and the wire serialization.
"""

from __future__ import annotations

import importlib

import pytest

cv = importlib.import_module("color_scale_generator.generation.color.utils.conversion")
sc = importlib.import_module("color_scale_generator.generation.color.logic.scale")
pl = importlib.import_module("color_scale_generator.generation.color.logic.palette")

STEPS = (50, 100, 200, 300, 400, 500, 600, 700, 800, 900)
WHITE = cv.hex_to_color("FFFFFF")
BLACK = cv.hex_to_color("000000")

GOLDEN_SEED = {
    "baseWhite": "FFFFFF",
    "baseBlack": "000000",
    "brand500": "6366F1",
    "primary500": "3B82F6",
    "secondary500": "EC4899",
    "gray500": "6B7280",
}
SEEDS = ["6366F1", "3B82F6", "EC4899", "6B7280", "10B981", "F59E0B", "808080", "1E1E1E"]


def _hex_ramp(steps):
    return {step: cv.color_to_hex(c) for step, c in steps.items()}


# ──────────────────────────────────────────────────────────────────────────────
# Ratios
# ──────────────────────────────────────────────────────────────────────────────
def test_tint_and_shade_ratios():
    assert sc.tint_ratios() == (0.0, 0.25, 0.5, 0.75, 1.0)
    assert sc.shade_ratios() == (0.25, 0.5, 0.75, 0.85)


# ──────────────────────────────────────────────────────────────────────────────
# Single family
# ──────────────────────────────────────────────────────────────────────────────
@pytest.mark.parametrize("seed_hex", SEEDS)
def test_family_has_exactly_the_ten_steps_in_order(seed_hex):
    ramp = sc.generate_family(cv.hex_to_color(seed_hex), WHITE, BLACK)
    assert tuple(ramp) == STEPS


@pytest.mark.parametrize("seed_hex", SEEDS)
def test_step_500_and_400_equal_seed(seed_hex):
    seed = cv.hex_to_color(seed_hex)
    ramp = sc.generate_family(seed, WHITE, BLACK)
    assert ramp[500] is seed
    assert ramp[400] == seed


@pytest.mark.parametrize("white_hex", ["FFFFFF", "F0F0F0", "FAF7F2"])
def test_step_50_equals_white_anchor(white_hex):
    white = cv.hex_to_color(white_hex)
    ramp = sc.generate_family(cv.hex_to_color("6366F1"), white, BLACK)
    assert ramp[50] == white


def test_tints_interpolate_with_half_up_rounding():
    ramp = _hex_ramp(sc.generate_family(cv.hex_to_color("6366F1"), WHITE, BLACK))
    assert ramp[100] == "D8D9FC"
    assert ramp[200] == "B1B3F8"  # g = 178.5 → 179
    assert ramp[300] == "8A8CF5"


def test_gray_ramp_golden():
    ramp = _hex_ramp(sc.generate_family(cv.hex_to_color("808080"), WHITE, BLACK))
    assert ramp == {
        50: "FFFFFF",
        100: "DFDFDF",
        200: "C0C0C0",
        300: "A0A0A0",
        400: "808080",
        500: "808080",
        600: "656565",
        700: "4A4A4A",
        800: "2E2E2E",
        900: "242424",
    }


@pytest.mark.parametrize("seed_hex", SEEDS)
def test_shades_darken_monotonically(seed_hex):
    ramp = sc.generate_family(cv.hex_to_color(seed_hex), WHITE, BLACK)
    lightness = [cv.color_to_hsl(ramp[s])[2] for s in (600, 700, 800, 900)]
    assert lightness == sorted(lightness, reverse=True)


def test_shades_keep_the_seed_hue():
    seed = cv.hex_to_color("6366F1")
    h0, _, _ = cv.color_to_hsl(seed)
    ramp = sc.generate_family(seed, WHITE, BLACK)
    for step in (600, 700):
        h, _, _ = cv.color_to_hsl(ramp[step])
        assert h == pytest.approx(h0, abs=0.01)


def test_darken_hsl_saturation_branches(monkeypatch):
    seen = []
    monkeypatch.setattr(sc, "hsl_to_color", lambda h, s, l: seen.append((h, s, l)) or cv.Color(0, 0, 0))
    monkeypatch.setattr(sc, "color_to_hsl", lambda c: (0.5, 0.8, 0.6))

    sc.darken_hsl(cv.Color(1, 2, 3), 0.5)
    sc.darken_hsl(cv.Color(1, 2, 3), 0.85)
    sc.darken_hsl(cv.Color(1, 2, 3), 0.75)

    (_, s_mid, l_mid), (_, s_dark, l_dark), (_, s_800, _) = seen
    assert s_mid == pytest.approx(0.8 * (1 - 0.5 * 0.2))
    assert l_mid == pytest.approx(0.6 * (1 - 0.5 * 0.85))
    assert s_dark == pytest.approx(0.8 * (1 + 0.25 * 0.5))
    assert l_dark == pytest.approx(0.6 * (1 - 0.85 * 0.85))
    assert s_800 == pytest.approx(0.8 * (1 + 0.15 * 0.5))


def test_darken_hsl_saturation_boost_is_capped(monkeypatch):
    seen = []
    monkeypatch.setattr(sc, "hsl_to_color", lambda h, s, l: seen.append(s) or cv.Color(0, 0, 0))
    monkeypatch.setattr(sc, "color_to_hsl", lambda c: (0.0, 0.99, 0.5))
    sc.darken_hsl(cv.Color(0, 0, 0), 0.85)
    assert seen == [1.0]


def test_family_is_read_only():
    ramp = sc.generate_family(cv.hex_to_color("6366F1"), WHITE, BLACK)
    with pytest.raises(TypeError):
        ramp[500] = WHITE  # type: ignore[index]


def test_family_and_palette_ignore_data_dir(tmp_path, monkeypatch):
    empty = tmp_path / "data"
    empty.mkdir()
    monkeypatch.setenv("DATA_DIR", str(empty))

    ramp = sc.generate_family(cv.hex_to_color("6366F1"), WHITE, BLACK)
    assert tuple(ramp) == STEPS
    scale = pl.build_palette(pl.SeedPalette.from_mapping(GOLDEN_SEED))
    assert scale.to_dict()["brand"]["500"] == "6366F1"


@pytest.mark.parametrize("steps", [(50, 100), tuple(reversed(STEPS)), STEPS + (950,), ("a",) * 10])
def test_family_rejects_non_canonical_steps(steps):
    with pytest.raises(ValueError):
        sc.generate_family(cv.hex_to_color("6366F1"), WHITE, BLACK, steps=steps)


# ──────────────────────────────────────────────────────────────────────────────
# Palette
# ──────────────────────────────────────────────────────────────────────────────
def test_golden_palette():
    scale = pl.build_palette_from_hex(GOLDEN_SEED)
    brand = scale.to_dict()["brand"]
    assert brand["50"] == "FFFFFF"
    assert brand["500"] == "6366F1"
    assert brand["400"] == "6366F1"
    assert scale.base == (WHITE, BLACK)


def test_palette_families_and_keys():
    scale = pl.build_palette_from_hex(GOLDEN_SEED)
    assert list(scale.families) == ["brand", "primary", "secondary", "gray"]
    wire = scale.to_dict()
    assert list(wire) == ["base", "brand", "primary", "secondary", "gray"]
    assert wire["base"] == {"white": "FFFFFF", "black": "000000"}
    for family in ("brand", "primary", "secondary", "gray"):
        assert list(wire[family]) == [str(s) for s in STEPS]
        assert wire[family]["500"] == GOLDEN_SEED[f"{family}500"]


def test_families_are_independent():
    base = pl.build_palette_from_hex(GOLDEN_SEED)
    changed = pl.build_palette_from_hex({**GOLDEN_SEED, "brand500": "FF0000"})
    for family in ("primary", "secondary", "gray"):
        assert dict(base.families[family]) == dict(changed.families[family])
    assert dict(base.families["brand"]) != dict(changed.families["brand"])


def test_palette_is_deterministic():
    a = pl.build_palette_from_hex(GOLDEN_SEED).to_dict()
    b = pl.build_palette_from_hex(dict(reversed(list(GOLDEN_SEED.items())))).to_dict()
    assert a == b


def test_to_variables_names_and_count():
    pairs = pl.build_palette_from_hex(GOLDEN_SEED).to_variables()
    names = [n for n, _ in pairs]
    assert names[:3] == ["base/white", "base/black", "brand/50"]
    assert "gray/900" in names
    assert len(pairs) == 2 + 4 * 10


def test_seed_from_mapping_accepts_hash_and_rejects_bad_values():
    seed = pl.SeedPalette.from_mapping({**GOLDEN_SEED, "brand500": "#6366f1"})
    assert seed.brand500 == cv.Color(99, 102, 241)
    assert seed.to_dict()["brand500"] == "6366F1"

    with pytest.raises(cv.InvalidColorFormat):
        pl.SeedPalette.from_mapping({**GOLDEN_SEED, "gray500": "nope"})

    partial = dict(GOLDEN_SEED)
    del partial["gray500"]
    with pytest.raises(KeyError):
        pl.SeedPalette.from_mapping(partial)


def test_seed_role_lookup_and_replace():
    seed = pl.SeedPalette.from_mapping(GOLDEN_SEED)
    assert seed.role("gray500") == cv.hex_to_color("6B7280")
    with pytest.raises(KeyError):
        seed.role("accent500")
    red = cv.Color(255, 0, 0)
    swapped = seed.replace_roles({"brand500": red})
    assert swapped.brand500 == red
    assert swapped.gray500 == seed.gray500


def test_default_seed_palette_matches_data_file():
    assert pl.default_seed_palette().to_dict() == GOLDEN_SEED
