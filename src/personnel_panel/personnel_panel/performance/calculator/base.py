from __future__ import annotations

from abc import ABC, abstractmethod


class PerformanceCalculator(ABC):
    """Calculator interface (Strategy Pattern for performance metrics)."""

    @abstractmethod
    def investor_count(self, member_count: int) -> int:
        raise NotImplementedError

    @abstractmethod
    def conversion_rate(self, member_count: int, investor_count: int) -> float:
        raise NotImplementedError

    @abstractmethod
    def score(
        self,
        *,
        total_amount: float,
        member_count: int,
        investor_count: int,
        conversion_rate: float,
    ) -> int:
        raise NotImplementedError
