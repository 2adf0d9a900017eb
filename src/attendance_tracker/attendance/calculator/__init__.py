from .base import PercentageCalculator
from .standard_calculator import StandardPercentageCalculator

__all__ = ["PercentageCalculator", "StandardPercentageCalculator"]
