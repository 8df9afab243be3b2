from __future__ import annotations

import math

from .base import PerformanceCalculator

INVESTOR_RATIO = 0.7

# (target, weight): each component contributes at most `weight` points.
AMOUNT_TARGET, AMOUNT_WEIGHT = 100_000, 40
MEMBER_TARGET, MEMBER_WEIGHT = 50, 20
INVESTOR_TARGET, INVESTOR_WEIGHT = 35, 25
CONVERSION_TARGET, CONVERSION_WEIGHT = 100, 15


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


class StandardPerformanceCalculator(PerformanceCalculator):
    """Standard rule: investors estimated at 70% of members, score capped at 100."""

    def investor_count(self, member_count: int) -> int:
        return int(math.floor(member_count * INVESTOR_RATIO))

    def conversion_rate(self, member_count: int, investor_count: int) -> float:
        if member_count <= 0:
            return 0.0
        return investor_count / member_count * 100

    def score(
        self,
        *,
        total_amount: float,
        member_count: int,
        investor_count: int,
        conversion_rate: float,
    ) -> int:
        amount_score = min(total_amount / AMOUNT_TARGET * AMOUNT_WEIGHT, AMOUNT_WEIGHT)
        member_score = min(member_count / MEMBER_TARGET * MEMBER_WEIGHT, MEMBER_WEIGHT)
        investor_score = min(investor_count / INVESTOR_TARGET * INVESTOR_WEIGHT, INVESTOR_WEIGHT)
        conversion_score = min(conversion_rate / CONVERSION_TARGET * CONVERSION_WEIGHT, CONVERSION_WEIGHT)
        return round_half_up(amount_score + member_score + investor_score + conversion_score)
