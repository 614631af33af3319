"""
Double W-Beam barrier.

Rails on both faces of the post line, so each 4 m set carries 2 W-Beam
rails, 2 posts and 4 spacers, plus 4 kg of fasteners by default.
"""

from .base import BaseSystemCalculator, COATING_GSM_OPTIONS, stepped


class DoubleWBeamCalculator(BaseSystemCalculator):

    SYSTEM_NAME = "double_w_beam"
    PART_MULTIPLIERS = {"w_beam": 2, "post": 2, "spacer": 4}
    DEFAULT_FASTENER_KG = 4.0

    SPACER_LENGTHS = [330, 360]

    def calculate(self, fields: dict) -> dict:
        parts = self.calculate_parts(fields)
        assumptions = []
        if self.is_manual_fasteners(fields):
            assumptions.append("Manual fastener mode: quote covers fasteners only, no rails, posts or spacers.")
        else:
            assumptions.append(
                f"Fasteners taken at {self.DEFAULT_FASTENER_KG:g} kg per set (double W-beam default)."
            )
        if parts.get("spacer", {}).get("found"):
            assumptions.append("4 spacers per set: one per rail face at each post.")
        assumptions.append("W-Beam rail length fixed at 4318 mm.")
        return self.make_set_weights(parts, fields, assumptions)

    def get_options(self) -> dict:
        return {
            "w_beam": {
                "thickness": stepped(2.0, 3.0, 0.05),
                "coating_gsm": list(COATING_GSM_OPTIONS),
            },
            "post": {
                "thickness": stepped(4.0, 5.0, 0.05),
                "length": stepped(1100, 3000, 100),
                "coating_gsm": list(COATING_GSM_OPTIONS),
            },
            "spacer": {
                "thickness": stepped(4.0, 5.0, 0.05),
                "length": list(self.SPACER_LENGTHS),
                "coating_gsm": list(COATING_GSM_OPTIONS),
            },
        }
