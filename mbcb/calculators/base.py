"""
Abstract base class for barrier system calculators.

Input: fields dict (part inputs, include flags, fastener mode)
Output: SetWeights dict: per-part results, set weight, kg per running metre
"""

import logging
from abc import ABC, abstractmethod

from ..config import settings
from ..weights import PART_CONSTANTS, calculate_part_weights

logger = logging.getLogger(__name__)

PART_LABELS = {
    "w_beam": "W-Beam",
    "thrie_beam": "Thrie Beam",
    "post": "Post",
    "spacer": "Spacer",
}

# Fastener weights (kg each)
HEX_BOLT_KG = 0.135
BUTTON_BOLT_KG = 0.145

COATING_GSM_OPTIONS = [350, 400, 450, 500, 550]


def stepped(start: float, stop: float, step: float) -> list:
    """Inclusive range of option values, rounded to 2 dp to keep 2.05 from drifting."""
    count = int(round((stop - start) / step))
    return [round(start + i * step, 2) for i in range(count + 1)]


def parse_number(value, default: float = 0.0) -> float:
    """Parse a numeric value from user input."""
    if value is None:
        return default
    try:
        return float(str(value).strip())
    except (ValueError, TypeError):
        return default


def needs_length(part_type: str) -> bool:
    return PART_CONSTANTS[part_type].length_mm is None


def build_part_result(part_type: str, thickness, coating_gsm, length=None) -> dict:
    """
    Validate one part's inputs and run the weight formula.

    Missing or zero inputs come back in-band as found=False with an error
    message; the part then contributes nothing to set totals.
    """
    label = PART_LABELS[part_type]
    thickness = parse_number(thickness)
    coating_gsm = parse_number(coating_gsm)
    length = parse_number(length) if needs_length(part_type) else None

    inputs = {"thickness": thickness, "length": length, "coating_gsm": coating_gsm}

    if needs_length(part_type):
        if not thickness or not length or not coating_gsm:
            return {
                "found": False,
                "error": f"Thickness, Length, and Coating GSM are required for {label}",
                "inputs": inputs,
            }
    elif not thickness or not coating_gsm:
        return {
            "found": False,
            "error": f"Thickness and Coating GSM are required for {label}",
            "inputs": inputs,
        }

    weights = calculate_part_weights(part_type, thickness, coating_gsm, length)
    return {
        "found": True,
        "weight_black_material": weights["black_material_weight_kg"],
        "weight_zinc_added": weights["zinc_weight_kg"],
        "total_weight": weights["total_weight_kg"],
        "inputs": inputs,
    }


class BaseSystemCalculator(ABC):
    """All barrier system calculators inherit from this."""

    SYSTEM_NAME = ""
    # Parts per laid set, e.g. {"thrie_beam": 1, "post": 2, "spacer": 2}
    PART_MULTIPLIERS: dict = {}
    DEFAULT_FASTENER_KG = 0.0

    @abstractmethod
    def calculate(self, fields: dict) -> dict:
        """
        Takes part inputs and fastener settings.
        Returns a SetWeights dict.
        """
        pass

    @abstractmethod
    def get_options(self) -> dict:
        """Selectable thickness / length / coating values per part."""
        pass

    # --- Helper methods for all calculators ---

    def is_manual_fasteners(self, fields: dict) -> bool:
        return str(fields.get("fastener_mode", "default")).lower() == "manual"

    def fastener_weight_kg(self, fields: dict) -> float:
        """Default kg per set, or bolt counts × unit weight in manual mode."""
        if not self.is_manual_fasteners(fields):
            return self.DEFAULT_FASTENER_KG
        hex_qty = parse_number(fields.get("hex_bolt_qty"))
        button_qty = parse_number(fields.get("button_bolt_qty"))
        return hex_qty * HEX_BOLT_KG + button_qty * BUTTON_BOLT_KG

    def calculate_parts(self, fields: dict) -> dict:
        """
        Per-part results keyed by part type.

        Manual fastener mode quotes fasteners alone, so every part is
        excluded. Otherwise a part is calculated unless its include flag
        is explicitly false.
        """
        manual = self.is_manual_fasteners(fields)
        parts = {}
        for part_type in self.PART_MULTIPLIERS:
            part_fields = fields.get(part_type) or {}
            if manual or not part_fields.get("include", True):
                parts[part_type] = {"included": False, "found": False}
                continue
            result = build_part_result(
                part_type,
                part_fields.get("thickness"),
                part_fields.get("coating_gsm"),
                part_fields.get("length"),
            )
            result["included"] = True
            parts[part_type] = result
        return parts

    def make_set_weights(self, parts: dict, fields: dict, assumptions: list = None) -> dict:
        """
        Build the SetWeights output dict.

        set_weight_kg = Σ(multiplier × part total) + fastener kg;
        weight_per_rm_kg = set_weight_kg / running metres per set.
        """
        fastener_kg = self.fastener_weight_kg(fields)
        black = 0.0
        zinc = 0.0
        parts_weight = 0.0
        for part_type, result in parts.items():
            if not result.get("found"):
                continue
            multiplier = self.PART_MULTIPLIERS[part_type]
            black += result["weight_black_material"] * multiplier
            zinc += result["weight_zinc_added"] * multiplier
            parts_weight += result["total_weight"] * multiplier

        set_weight_kg = parts_weight + fastener_kg
        weight_per_rm_kg = set_weight_kg / settings.RUNNING_METRES_PER_SET

        logger.debug(
            "%s set: %.3f kg (fasteners %.3f kg), %.3f kg/rm",
            self.SYSTEM_NAME, set_weight_kg, fastener_kg, weight_per_rm_kg,
        )

        return {
            "system": self.SYSTEM_NAME,
            "parts": parts,
            "multipliers": dict(self.PART_MULTIPLIERS),
            "fastener_mode": "manual" if self.is_manual_fasteners(fields) else "default",
            "fastener_weight_kg": fastener_kg,
            "total_black_weight_kg": black,
            "total_zinc_weight_kg": zinc,
            "set_weight_kg": set_weight_kg,
            "weight_per_rm_kg": weight_per_rm_kg,
            "assumptions": assumptions or [],
        }
