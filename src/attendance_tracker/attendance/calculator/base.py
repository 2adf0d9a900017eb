from __future__ import annotations

from abc import ABC, abstractmethod


class PercentageCalculator(ABC):
    """Calculator interface (Strategy Pattern for attendance percentage)."""

    @abstractmethod
    def percentage(self, present: int, absent: int) -> str:
        raise NotImplementedError
