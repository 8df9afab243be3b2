from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal

import pytest

from src.personnel_panel.personnel_panel.core.exceptions import ValidationError
from src.personnel_panel.personnel_panel.employees.model import Employee
from src.personnel_panel.personnel_panel.exports.engine import ExcelExportEngine
from src.personnel_panel.personnel_panel.exports.options import ExportOptions
from src.personnel_panel.personnel_panel.performance.model import Deposit
from src.personnel_panel.personnel_panel.performance.service import PerformanceReportService


class FakeDepositRepo:
    def __init__(self, deposits):
        self._deposits = deposits
        self.last_args = None

    def list_between(self, *, start_date, end_date, staff_names=None):
        self.last_args = {"start_date": start_date, "end_date": end_date, "staff_names": staff_names}
        rows = [d for d in self._deposits if start_date <= d.deposit_date <= end_date]
        if staff_names is not None:
            rows = [d for d in rows if d.staff_name in staff_names]
        return rows


class FakeEmployeeRepo:
    def __init__(self, employees):
        self._employees = employees

    def list_all(self):
        return list(self._employees)


EMPLOYEES = [
    Employee("e-ahmet", "Ahmet", "#E1306C", datetime(2024, 1, 1)),
    Employee("e-ayse", "Ayşe", "#4285F4", datetime(2024, 1, 2)),
]


def deposit(i, customer, staff, amount, day):
    return Deposit(str(i), customer, staff, Decimal(amount), date(2024, 1, day))


def test_groups_by_day_and_staff():
    deposits = [
        deposit(1, "c1", "Ahmet", "1000.50", 2),
        deposit(2, "c2", "Ahmet", "2000", 2),
        deposit(3, "c1", "Ahmet", "500", 2),
        deposit(4, "c3", "Ayşe", "7000", 1),
        deposit(5, "c4", None, "10", 1),
    ]
    svc = PerformanceReportService(FakeDepositRepo(deposits), FakeEmployeeRepo(EMPLOYEES))

    rows = svc.build_dataset(start=date(2024, 1, 1), end=date(2024, 1, 31))

    assert [(r.work_date.day, r.employee_name) for r in rows] == [(1, "Ayşe"), (1, "N/A"), (2, "Ahmet")]
    ahmet = rows[2]
    assert ahmet.employee_id == "e-ahmet"
    assert ahmet.total_amount == pytest.approx(3500.5)
    assert ahmet.member_count == 2
    assert ahmet.investor_count == 1
    assert ahmet.conversion_rate == pytest.approx(50.0)
    assert rows[1].employee_id is None


def test_selected_employees_restrict_by_name():
    repo = FakeDepositRepo([deposit(1, "c1", "Ahmet", "100", 1), deposit(2, "c2", "Ayşe", "100", 1)])
    svc = PerformanceReportService(repo, FakeEmployeeRepo(EMPLOYEES))

    rows = svc.build_dataset(start=date(2024, 1, 1), end=date(2024, 1, 31), employee_ids=["e-ayse"])

    assert repo.last_args["staff_names"] == ["Ayşe"]
    assert [r.employee_name for r in rows] == ["Ayşe"]


def test_reversed_range_is_rejected():
    svc = PerformanceReportService(FakeDepositRepo([]), FakeEmployeeRepo(EMPLOYEES))
    with pytest.raises(ValidationError):
        svc.build_dataset(start=date(2024, 2, 1), end=date(2024, 1, 1))


NAMESAKES = [
    Employee("e-1", "Ahmet", "#E1306C", datetime(2024, 1, 1)),
    Employee("e-2", "Ahmet", "#4285F4", datetime(2024, 1, 2)),
]


@pytest.mark.parametrize("selected", ["e-1", "e-2"])
def test_namesakes_are_credited_to_the_selected_employee(selected):
    svc = PerformanceReportService(
        FakeDepositRepo([deposit(1, "c1", "Ahmet", "100", 5)]),
        FakeEmployeeRepo(NAMESAKES),
    )

    rows = svc.build_dataset(start=date(2024, 1, 1), end=date(2024, 1, 31), employee_ids=[selected])

    assert [(r.employee_id, r.employee_name) for r in rows] == [(selected, "Ahmet")]

    opts = ExportOptions(
        start_date=date(2024, 1, 1),
        end_date=date(2024, 1, 31),
        include_all_employees=False,
        selected_employees={selected},
    )
    assert ExcelExportEngine().export(opts, rows).row_count == 1


def test_namesakes_without_selection_use_the_oldest_employee():
    svc = PerformanceReportService(
        FakeDepositRepo([deposit(1, "c1", "Ahmet", "100", 5)]),
        FakeEmployeeRepo(NAMESAKES),
    )

    rows = svc.build_dataset(start=date(2024, 1, 1), end=date(2024, 1, 31))

    assert [r.employee_id for r in rows] == ["e-1"]
