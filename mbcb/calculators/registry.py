"""
Calculator registry: maps barrier system keys to calculator classes.
"""

from .single_thrie_beam import SingleThrieBeamCalculator
from .double_w_beam import DoubleWBeamCalculator
from .base import BaseSystemCalculator

CALCULATOR_REGISTRY: dict[str, type] = {
    "single_thrie_beam": SingleThrieBeamCalculator,
    "double_w_beam": DoubleWBeamCalculator,
}


def get_calculator(system: str) -> BaseSystemCalculator:
    """Returns an instance of the calculator for a barrier system, or raises ValueError."""
    if system not in CALCULATOR_REGISTRY:
        raise ValueError(
            f"No calculator registered for barrier system: {system}. "
            f"Available: {list(CALCULATOR_REGISTRY.keys())}"
        )
    return CALCULATOR_REGISTRY[system]()


def has_calculator(system: str) -> bool:
    """Check if a calculator exists for a barrier system."""
    return system in CALCULATOR_REGISTRY


def list_calculators() -> list[str]:
    """List all registered barrier system keys."""
    return list(CALCULATOR_REGISTRY.keys())
