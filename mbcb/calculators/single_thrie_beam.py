"""
Single Thrie-Beam barrier.

One set per 4 running metres: 1 Thrie Beam rail, 2 posts, 2 spacers,
plus fasteners (3 kg per set unless counted manually).
"""

from .base import BaseSystemCalculator, COATING_GSM_OPTIONS, stepped


class SingleThrieBeamCalculator(BaseSystemCalculator):

    SYSTEM_NAME = "single_thrie_beam"
    PART_MULTIPLIERS = {"thrie_beam": 1, "post": 2, "spacer": 2}
    DEFAULT_FASTENER_KG = 3.0

    SPACER_LENGTHS = [530, 550]

    def calculate(self, fields: dict) -> dict:
        parts = self.calculate_parts(fields)
        assumptions = []
        if self.is_manual_fasteners(fields):
            assumptions.append("Manual fastener mode: quote covers fasteners only, no rails, posts or spacers.")
        else:
            assumptions.append(
                f"Fasteners taken at {self.DEFAULT_FASTENER_KG:g} kg per set (single thrie-beam default)."
            )
        assumptions.append("Thrie Beam rail length fixed at 4318 mm.")
        return self.make_set_weights(parts, fields, assumptions)

    def get_options(self) -> dict:
        return {
            "thrie_beam": {
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
