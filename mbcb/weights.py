# Component weight constants: MBCB (metal beam crash barrier) parts, all dimensions in mm

from dataclasses import dataclass
from typing import Optional

# Density of steel (kg/mm³)
DENSITY_OF_STEEL = 0.0000079

# Rail length shared by W-Beam and Thrie Beam (mm)
BEAM_LENGTH_MM = 4318


@dataclass(frozen=True)
class PartConstants:
    """
    Fixed geometry for one part type.

    width_mm and height_mm describe the rolled profile but the weight
    formula treats every part as a flat prism of nominal_width_mm, so
    they are carried as metadata only. length_mm is None when the caller
    supplies the length (Post, Spacer).
    """
    width_mm: float
    height_mm: float
    nominal_width_mm: float
    length_mm: Optional[float] = None
    density_kg_per_mm3: float = DENSITY_OF_STEEL


PART_CONSTANTS = {
    "w_beam": PartConstants(width_mm=80, height_mm=310, nominal_width_mm=480, length_mm=BEAM_LENGTH_MM),
    "thrie_beam": PartConstants(width_mm=80, height_mm=502, nominal_width_mm=750, length_mm=BEAM_LENGTH_MM),
    "post": PartConstants(width_mm=150, height_mm=75, nominal_width_mm=278),
    "spacer": PartConstants(width_mm=150, height_mm=75, nominal_width_mm=278),
}


def calculate_part_weights(
    part_type: str,
    thickness_mm: float,
    coating_gsm: float,
    length_mm: Optional[float] = None,
) -> dict:
    """
    Black steel and zinc coating weight (kg) for one part.

    Volume is thickness × nominal width × length; zinc is the closed-box
    surface area (m²) × coating GSM / 1000. Fixed-length parts ignore
    length_mm. Inputs are not validated: zero, negative or NaN values
    flow straight through the arithmetic.
    """
    constants = PART_CONSTANTS[part_type]
    if constants.length_mm is not None:
        length_mm = constants.length_mm
    nominal_width_mm = constants.nominal_width_mm

    volume_mm3 = thickness_mm * nominal_width_mm * length_mm
    black_material_weight_kg = volume_mm3 * constants.density_kg_per_mm3

    surface_area_mm2 = 2 * (
        thickness_mm * nominal_width_mm
        + nominal_width_mm * length_mm
        + length_mm * thickness_mm
    )
    surface_area_m2 = surface_area_mm2 / 1_000_000
    zinc_weight_kg = (surface_area_m2 * coating_gsm) / 1000

    return {
        "part_type": part_type,
        "black_material_weight_kg": black_material_weight_kg,
        "zinc_weight_kg": zinc_weight_kg,
        "total_weight_kg": black_material_weight_kg + zinc_weight_kg,
    }


def _named_result(weights: dict, total_key: str) -> dict:
    return {
        "black_material_weight_kg": weights["black_material_weight_kg"],
        "zinc_weight_kg": weights["zinc_weight_kg"],
        total_key: weights["total_weight_kg"],
    }


def calculate_w_beam_weights(thickness_mm: float, coating_gsm: float) -> dict:
    """W-Beam rail, fixed 4318 mm length."""
    weights = calculate_part_weights("w_beam", thickness_mm, coating_gsm)
    return _named_result(weights, "total_w_beam_weight_kg")


def calculate_thrie_beam_weights(thickness_mm: float, coating_gsm: float) -> dict:
    """Thrie Beam rail, fixed 4318 mm length."""
    weights = calculate_part_weights("thrie_beam", thickness_mm, coating_gsm)
    return _named_result(weights, "total_thrie_beam_weight_kg")


def calculate_post_weights(thickness_mm: float, length_mm: float, coating_gsm: float) -> dict:
    weights = calculate_part_weights("post", thickness_mm, coating_gsm, length_mm)
    return _named_result(weights, "total_post_weight_kg")


def calculate_spacer_weights(thickness_mm: float, length_mm: float, coating_gsm: float) -> dict:
    weights = calculate_part_weights("spacer", thickness_mm, coating_gsm, length_mm)
    return _named_result(weights, "total_spacer_weight_kg")
