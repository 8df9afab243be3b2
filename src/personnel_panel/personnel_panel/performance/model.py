from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional


@dataclass(frozen=True)
class Deposit:
    """Raw deposit row recorded by a staff member."""

    deposit_id: str
    customer_id: str
    staff_name: Optional[str]
    amount: Decimal
    deposit_date: date


@dataclass(frozen=True)
class PerformanceRow:
    """Read-model for the export: one row per (date, employee)."""

    work_date: date
    employee_id: Optional[str]
    employee_name: str
    total_amount: float
    member_count: int
    investor_count: int
    conversion_rate: float
    performance_score: int
