from pydantic import BaseModel
from typing import Optional, Dict, List


class PartInput(BaseModel):
    thickness: Optional[float] = None
    length: Optional[float] = None
    coating_gsm: Optional[float] = None


class SystemPartInput(PartInput):
    include: bool = True


class PartResult(BaseModel):
    found: bool
    error: Optional[str] = None
    weight_black_material: Optional[float] = None
    weight_zinc_added: Optional[float] = None
    total_weight: Optional[float] = None
    inputs: Optional[PartInput] = None


# --- W-Beam Section calculate ---

class SectionCalculateRequest(BaseModel):
    w_beam: PartInput = PartInput()
    post: PartInput = PartInput()
    spacer: PartInput = PartInput()
    rate_per_kg: Optional[float] = None


class SectionTotals(BaseModel):
    total_black_weight: float
    total_zinc_weight: float
    total_weight: float
    rate_per_kg: Optional[float] = None
    total_price: Optional[float] = None


class SectionCalculateResponse(BaseModel):
    section: str
    parts: Dict[str, PartResult]
    totals: SectionTotals


# --- Single part ---

class PartWeightsRequest(BaseModel):
    thickness_mm: float
    coating_gsm: float
    length_mm: Optional[float] = None


class PartWeights(BaseModel):
    part_type: str
    black_material_weight_kg: float
    zinc_weight_kg: float
    total_weight_kg: float


# --- Barrier system quote ---

class SystemQuoteRequest(BaseModel):
    w_beam: Optional[SystemPartInput] = None
    thrie_beam: Optional[SystemPartInput] = None
    post: Optional[SystemPartInput] = None
    spacer: Optional[SystemPartInput] = None
    fastener_mode: str = "default"
    hex_bolt_qty: int = 0
    button_bolt_qty: int = 0

    rate_per_kg: Optional[float] = None
    include_transportation: bool = False
    transport_cost_per_kg: Optional[float] = None
    include_installation: bool = False
    installation_cost_per_rm: Optional[float] = None
    quantity_rm: Optional[float] = None
    state_name: str = ""


class GstBreakdown(BaseModel):
    sgst: float
    cgst: float
    igst: float
    total_with_gst: float
    intra_state: bool


class SetWeights(BaseModel):
    system: str
    parts: Dict[str, dict]
    multipliers: Dict[str, int]
    fastener_mode: str
    fastener_weight_kg: float
    total_black_weight_kg: float
    total_zinc_weight_kg: float
    set_weight_kg: float
    weight_per_rm_kg: float
    assumptions: List[str] = []


class SystemQuote(BaseModel):
    system: str
    weights: SetWeights
    rate_per_kg: Optional[float] = None
    transport_cost_per_kg: float
    installation_cost_per_rm: float
    quantity_rm: Optional[float] = None
    material_cost_per_rm: Optional[float] = None
    transport_cost_per_rm: Optional[float] = None
    total_cost_per_rm: Optional[float] = None
    final_total: Optional[float] = None
    gst: Optional[GstBreakdown] = None
    created_at: str
