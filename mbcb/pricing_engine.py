"""
Pricing Engine: per-running-metre costing for barrier quotes.

Pure math. kg × rate, per-rm costs × quantity, then GST by place of supply.

Input: SetWeights (from calculators) + cost inputs
Output: PricedQuote dict
"""

import logging
from datetime import datetime

from .config import settings

logger = logging.getLogger(__name__)


def _positive(value) -> float:
    """Treat None / zero / negative cost inputs as not supplied."""
    if value is None:
        return 0.0
    return value if value > 0 else 0.0


class PricingEngine:
    """
    Turns a set weight into material, transport and installation costs.

    Default fastener mode prices per running metre and multiplies by the
    quoted quantity. Manual fastener mode prices the counted fasteners
    directly as a lump sum.
    """

    def build_priced_quote(self, set_weights: dict, costs: dict, state_name: str = "") -> dict:
        """
        Args:
            set_weights: SetWeights dict from a barrier system calculator
            costs: {
                "rate_per_kg": float,
                "include_transportation": bool,
                "transport_cost_per_kg": float,
                "include_installation": bool,
                "installation_cost_per_rm": float,
                "quantity_rm": float,
            }
            state_name: place of supply, drives the GST split

        Returns:
            PricedQuote dict
        """
        rate = _positive(costs.get("rate_per_kg"))
        transport_rate = (
            _positive(costs.get("transport_cost_per_kg"))
            if costs.get("include_transportation") else 0.0
        )
        installation_per_rm = (
            _positive(costs.get("installation_cost_per_rm"))
            if costs.get("include_installation") else 0.0
        )
        quantity_rm = costs.get("quantity_rm")

        if set_weights.get("fastener_mode") == "manual":
            pricing = self._price_fasteners_only(
                set_weights.get("fastener_weight_kg", 0.0), rate, transport_rate,
            )
        else:
            pricing = self._price_per_rm(
                set_weights.get("weight_per_rm_kg", 0.0), rate, transport_rate,
                installation_per_rm, quantity_rm,
            )

        gst = self.calculate_gst(pricing["final_total"], state_name)

        logger.info(
            "Priced %s: final_total=%s state=%s",
            set_weights.get("system"), pricing["final_total"], state_name or "-",
        )

        return {
            "system": set_weights.get("system"),
            "weights": set_weights,
            "rate_per_kg": costs.get("rate_per_kg"),
            "transport_cost_per_kg": transport_rate,
            "installation_cost_per_rm": installation_per_rm,
            "quantity_rm": quantity_rm,
            **pricing,
            "gst": gst,
            "created_at": datetime.utcnow().isoformat(),
        }

    def _price_per_rm(self, kg_per_rm: float, rate: float, transport_rate: float,
                      installation_per_rm: float, quantity_rm) -> dict:
        material_cost_per_rm = kg_per_rm * rate if rate > 0 and kg_per_rm > 0 else None
        transport_cost_per_rm = kg_per_rm * transport_rate if kg_per_rm > 0 else None

        total_cost_per_rm = None
        if material_cost_per_rm is not None:
            total_cost_per_rm = material_cost_per_rm + (transport_cost_per_rm or 0) + installation_per_rm

        final_total = None
        if total_cost_per_rm is not None and quantity_rm is not None and quantity_rm > 0:
            final_total = total_cost_per_rm * quantity_rm

        return {
            "material_cost_per_rm": material_cost_per_rm,
            "transport_cost_per_rm": transport_cost_per_rm,
            "total_cost_per_rm": total_cost_per_rm,
            "final_total": final_total,
        }

    def _price_fasteners_only(self, fastener_kg: float, rate: float, transport_rate: float) -> dict:
        """Lump-sum pricing on total fastener kg; nothing here is per rm."""
        material_cost = fastener_kg * rate if rate > 0 and fastener_kg > 0 else None
        transport_cost = fastener_kg * transport_rate if transport_rate > 0 and fastener_kg > 0 else None
        final_total = (material_cost or 0) + (transport_cost or 0)
        return {
            "material_cost_per_rm": material_cost,
            "transport_cost_per_rm": transport_cost,
            "total_cost_per_rm": final_total,
            "final_total": final_total,
        }

    def calculate_gst(self, final_total, state_name: str = "") -> dict:
        """
        Intra-state supply (home state) pays SGST + CGST, anything else IGST.
        Returns None when there is no positive total to tax.
        """
        if not final_total or final_total <= 0:
            return None

        if settings.GST_HOME_STATE.lower() in (state_name or "").lower():
            sgst = final_total * settings.SGST_RATE
            cgst = final_total * settings.CGST_RATE
            return {
                "sgst": sgst,
                "cgst": cgst,
                "igst": 0.0,
                "total_with_gst": final_total + sgst + cgst,
                "intra_state": True,
            }

        igst = final_total * settings.IGST_RATE
        return {
            "sgst": 0.0,
            "cgst": 0.0,
            "igst": igst,
            "total_with_gst": final_total + igst,
            "intra_state": False,
        }

    def section_price(self, total_weight_kg: float, rate_per_kg) -> float:
        """Flat price for a section total; None when no rate is given."""
        if not rate_per_kg:
            return None
        return total_weight_kg * rate_per_kg
