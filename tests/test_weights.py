"""
Component weight calculator tests: W-Beam, Thrie Beam, Post, Spacer.

Tests:
1-4.   Worked examples
5-9.   Formula properties (black weight, totals, zero thickness, coating scaling)
10-12. No-validation behaviour and part constants
"""

import math

import pytest

from mbcb.weights import (
    BEAM_LENGTH_MM,
    DENSITY_OF_STEEL,
    PART_CONSTANTS,
    calculate_part_weights,
    calculate_post_weights,
    calculate_spacer_weights,
    calculate_thrie_beam_weights,
    calculate_w_beam_weights,
)


def _lengths():
    """(part_type, length) pairs, Post/Spacer with a caller length."""
    return [
        ("w_beam", BEAM_LENGTH_MM),
        ("thrie_beam", BEAM_LENGTH_MM),
        ("post", 1800),
        ("spacer", 530),
    ]


# ============================================================
# Worked examples
# ============================================================

def test_w_beam_5mm_450gsm():
    """5 mm W-Beam at 450 GSM: ~81.87 kg black, ~1.887 kg zinc."""
    result = calculate_w_beam_weights(thickness_mm=5, coating_gsm=450)
    assert result["black_material_weight_kg"] == pytest.approx(81.86928)
    assert result["zinc_weight_kg"] == pytest.approx(1.886967)
    assert result["total_w_beam_weight_kg"] == pytest.approx(83.756247)
    assert round(result["total_w_beam_weight_kg"], 2) == 83.76


def test_post_4mm_1200mm_400gsm():
    result = calculate_post_weights(thickness_mm=4, length_mm=1200, coating_gsm=400)
    assert result["black_material_weight_kg"] == pytest.approx(10.54176)
    # 2 × (4×278 + 278×1200 + 1200×4) = 679024 mm²
    assert result["zinc_weight_kg"] == pytest.approx(0.679024 * 400 / 1000)
    assert result["total_post_weight_kg"] == pytest.approx(10.54176 + 0.2716096)


def test_thrie_beam_scales_with_nominal_width():
    """Same thickness and coating: black weight in the ratio 750 / 480."""
    w_beam = calculate_w_beam_weights(2.5, 450)
    thrie = calculate_thrie_beam_weights(2.5, 450)
    ratio = thrie["black_material_weight_kg"] / w_beam["black_material_weight_kg"]
    assert ratio == pytest.approx(750 / 480)


def test_spacer_matches_post_geometry():
    """Spacer and Post share nominal width, so equal inputs give equal weights."""
    spacer = calculate_spacer_weights(4.5, 530, 450)
    post = calculate_post_weights(4.5, 530, 450)
    assert spacer["total_spacer_weight_kg"] == post["total_post_weight_kg"]


# ============================================================
# Formula properties
# ============================================================

@pytest.mark.parametrize("part_type,length", _lengths())
def test_black_weight_is_volume_times_density(part_type, length):
    nominal = PART_CONSTANTS[part_type].nominal_width_mm
    result = calculate_part_weights(part_type, 2.7, 500, length)
    assert result["black_material_weight_kg"] == pytest.approx(2.7 * nominal * length * 0.0000079)


@pytest.mark.parametrize("part_type,length", _lengths())
def test_total_is_black_plus_zinc(part_type, length):
    result = calculate_part_weights(part_type, 4.05, 350, length)
    assert result["total_weight_kg"] == result["black_material_weight_kg"] + result["zinc_weight_kg"]


@pytest.mark.parametrize("part_type,length", _lengths())
def test_zero_thickness_leaves_only_face_zinc(part_type, length):
    nominal = PART_CONSTANTS[part_type].nominal_width_mm
    result = calculate_part_weights(part_type, 0, 450, length)
    assert result["black_material_weight_kg"] == 0
    assert result["zinc_weight_kg"] == pytest.approx(2 * nominal * length / 1e6 * 450 / 1000)


@pytest.mark.parametrize("part_type,length", _lengths())
def test_coating_scales_zinc_only(part_type, length):
    base = calculate_part_weights(part_type, 3.0, 350, length)
    doubled = calculate_part_weights(part_type, 3.0, 700, length)
    assert doubled["zinc_weight_kg"] == pytest.approx(2 * base["zinc_weight_kg"])
    assert doubled["black_material_weight_kg"] == base["black_material_weight_kg"]


def test_fixed_length_parts_ignore_caller_length():
    """W-Beam / Thrie Beam always use 4318 mm."""
    default = calculate_part_weights("w_beam", 2.5, 450)
    overridden = calculate_part_weights("w_beam", 2.5, 450, length_mm=1000)
    assert default == overridden


# ============================================================
# No validation
# ============================================================

def test_negative_thickness_is_accepted():
    result = calculate_w_beam_weights(-5, 450)
    assert result["black_material_weight_kg"] == pytest.approx(-81.86928)


def test_nan_propagates_without_raising():
    result = calculate_spacer_weights(float("nan"), 330, 450)
    assert math.isnan(result["black_material_weight_kg"])
    assert math.isnan(result["total_spacer_weight_kg"])


def test_part_constants():
    """Density shared by every part; only beams carry a fixed length."""
    assert DENSITY_OF_STEEL == 0.0000079
    assert all(c.density_kg_per_mm3 == DENSITY_OF_STEEL for c in PART_CONSTANTS.values())
    assert PART_CONSTANTS["w_beam"].nominal_width_mm == 480
    assert PART_CONSTANTS["thrie_beam"].nominal_width_mm == 750
    assert PART_CONSTANTS["post"].length_mm is None
    assert PART_CONSTANTS["spacer"].length_mm is None
    assert (PART_CONSTANTS["thrie_beam"].width_mm, PART_CONSTANTS["thrie_beam"].height_mm) == (80, 502)
    with pytest.raises(KeyError):
        calculate_part_weights("guard_rail", 2.5, 450)
