from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

from ...core.constants import PERCENTAGE_PLACES
from .base import PercentageCalculator

_QUANTUM = Decimal(1).scaleb(-PERCENTAGE_PLACES)


class StandardPercentageCalculator(PercentageCalculator):
    """Standard rule: present / (present + absent) * 100, "0.00" when nothing recorded.

    Rounds the exact value of the float half away from zero, so ties only
    happen when the binary value really is a tie.
    """

    def percentage(self, present: int, absent: int) -> str:
        total = present + absent
        if total == 0:
            return f"{0:.{PERCENTAGE_PLACES}f}"
        value = (present / total) * 100
        return str(Decimal(value).quantize(_QUANTUM, rounding=ROUND_HALF_UP))
