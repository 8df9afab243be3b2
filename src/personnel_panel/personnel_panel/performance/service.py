from __future__ import annotations

from collections import OrderedDict
from datetime import date
from decimal import Decimal
from typing import Iterable, Optional

from ..common.validators import require_date_order
from ..core.logger import logger
from ..employees.repository import EmployeeRepository
from .calculator.base import PerformanceCalculator
from .calculator.standard_calculator import StandardPerformanceCalculator
from .model import PerformanceRow
from .repository import DepositRepository

UNKNOWN_STAFF = "N/A"


class PerformanceReportService:
    """Builds the per-day, per-employee performance dataset from deposits."""

    def __init__(
        self,
        deposits: DepositRepository,
        employees: EmployeeRepository,
        *,
        calculator: Optional[PerformanceCalculator] = None,
    ):
        self._deposits = deposits
        self._employees = employees
        self._calculator = calculator or StandardPerformanceCalculator()

    def build_dataset(
        self,
        *,
        start: date,
        end: date,
        employee_ids: Optional[Iterable[str]] = None,
    ) -> list[PerformanceRow]:
        require_date_order(start, end)

        employees = list(self._employees.list_all())
        wanted = set(employee_ids) if employee_ids is not None else None

        # Names are not unique; a deposit is credited to the oldest matching
        # employee, or to the matching one that was selected.
        ids_by_name: dict[str, list[str]] = {}
        for e in employees:
            if wanted is None or e.employee_id in wanted:
                ids_by_name.setdefault(e.name, []).append(e.employee_id)

        staff_names = None if wanted is None else list(ids_by_name)

        deposits = self._deposits.list_between(start_date=start, end_date=end, staff_names=staff_names)

        groups: "OrderedDict[tuple[date, str], dict]" = OrderedDict()
        for d in deposits:
            name = d.staff_name or UNKNOWN_STAFF
            g = groups.get((d.deposit_date, name))
            if not g:
                g = {"total_amount": Decimal("0"), "customers": set()}
                groups[(d.deposit_date, name)] = g
            g["total_amount"] += Decimal(d.amount or 0)
            g["customers"].add(d.customer_id)

        rows: list[PerformanceRow] = []
        for (work_date, name), g in groups.items():
            total_amount = float(g["total_amount"])
            member_count = len(g["customers"])
            investor_count = self._calculator.investor_count(member_count)
            conversion_rate = self._calculator.conversion_rate(member_count, investor_count)
            rows.append(
                PerformanceRow(
                    work_date=work_date,
                    employee_id=ids_by_name.get(name, [None])[0],
                    employee_name=name,
                    total_amount=total_amount,
                    member_count=member_count,
                    investor_count=investor_count,
                    conversion_rate=conversion_rate,
                    performance_score=self._calculator.score(
                        total_amount=total_amount,
                        member_count=member_count,
                        investor_count=investor_count,
                        conversion_rate=conversion_rate,
                    ),
                )
            )

        rows.sort(key=lambda r: (r.work_date, r.employee_name))
        logger.debug("Built performance dataset: %d rows from %d deposits", len(rows), len(deposits))
        return rows
