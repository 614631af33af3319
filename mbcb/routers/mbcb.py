"""
MBCB API: weight and price calculation for metal beam crash barriers.

POST /api/mbcb/calculate                  W-Beam Section weights and flat price
POST /api/mbcb/parts/{part_type}/weights  Formula weights for one part
GET  /api/mbcb/systems                    Registered barrier systems
GET  /api/mbcb/systems/{system}/options   Selectable thickness / length / coating values
POST /api/mbcb/systems/{system}/quote     Set weights, per-rm costs and GST for a system
"""

import logging

from fastapi import APIRouter, HTTPException

from .. import schemas
from ..calculators.base import build_part_result
from ..calculators.registry import get_calculator, has_calculator, list_calculators
from ..pricing_engine import PricingEngine
from ..weights import PART_CONSTANTS, calculate_part_weights

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/mbcb", tags=["mbcb"])

pricing_engine = PricingEngine()

SECTION_NAME = "W-Beam Section"


def _get_system_calculator(system: str):
    if not has_calculator(system):
        raise HTTPException(status_code=404, detail=f"Unknown barrier system: {system}")
    return get_calculator(system)


@router.post("/calculate", response_model=schemas.SectionCalculateResponse)
def calculate_section(request: schemas.SectionCalculateRequest):
    """
    W-Beam Section: one W-Beam, one Post and one Spacer, no set multipliers.

    Parts with missing inputs come back found=False with an error and are
    left out of the totals.
    """
    parts = {
        "w_beam": build_part_result(
            "w_beam", request.w_beam.thickness, request.w_beam.coating_gsm,
        ),
        "post": build_part_result(
            "post", request.post.thickness, request.post.coating_gsm, request.post.length,
        ),
        "spacer": build_part_result(
            "spacer", request.spacer.thickness, request.spacer.coating_gsm, request.spacer.length,
        ),
    }

    total_black = sum(p["weight_black_material"] for p in parts.values() if p["found"])
    total_zinc = sum(p["weight_zinc_added"] for p in parts.values() if p["found"])
    total_weight = total_black + total_zinc
    rate_per_kg = request.rate_per_kg or None

    missing = [name for name, p in parts.items() if not p["found"]]
    if missing:
        logger.info("Section calculate skipped parts with missing inputs: %s", missing)

    return {
        "section": SECTION_NAME,
        "parts": parts,
        "totals": {
            "total_black_weight": total_black,
            "total_zinc_weight": total_zinc,
            "total_weight": total_weight,
            "rate_per_kg": rate_per_kg,
            "total_price": pricing_engine.section_price(total_weight, rate_per_kg),
        },
    }


@router.post("/parts/{part_type}/weights", response_model=schemas.PartWeights)
def part_weights(part_type: str, request: schemas.PartWeightsRequest):
    """Raw formula weights for one part. Inputs are passed through unchecked."""
    if part_type not in PART_CONSTANTS:
        raise HTTPException(status_code=404, detail=f"Unknown part type: {part_type}")
    if PART_CONSTANTS[part_type].length_mm is None and request.length_mm is None:
        raise HTTPException(status_code=422, detail=f"length_mm is required for {part_type}")
    return calculate_part_weights(
        part_type, request.thickness_mm, request.coating_gsm, request.length_mm,
    )


@router.get("/systems")
def list_systems():
    return {"systems": list_calculators()}


@router.get("/systems/{system}/options")
def system_options(system: str):
    calculator = _get_system_calculator(system)
    return {"system": system, "options": calculator.get_options()}


@router.post("/systems/{system}/quote", response_model=schemas.SystemQuote)
def system_quote(system: str, request: schemas.SystemQuoteRequest):
    """
    Build a barrier quote.

    1. Calculator assembles the set (parts × multipliers + fasteners)
    2. Pricing engine costs it per running metre and applies quantity
    3. GST split by place of supply
    """
    calculator = _get_system_calculator(system)
    fields = request.model_dump(include={
        "w_beam", "thrie_beam", "post", "spacer",
        "fastener_mode", "hex_bolt_qty", "button_bolt_qty",
    })
    set_weights = calculator.calculate(fields)

    costs = request.model_dump(include={
        "rate_per_kg", "include_transportation", "transport_cost_per_kg",
        "include_installation", "installation_cost_per_rm", "quantity_rm",
    })
    return pricing_engine.build_priced_quote(set_weights, costs, request.state_name)
