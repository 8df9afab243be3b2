from __future__ import annotations

import random
from typing import Optional, Sequence

from ..common.colors import pick_color
from ..common.validators import require_non_empty
from ..core.exceptions import NotFoundError
from ..core.host import HostActions
from ..core.logger import logger
from .model import Employee
from .repository import EmployeeRepository

DELETE_CONFIRM_MESSAGE = "Bu personeli silmek istediğinizden emin misiniz?"


class EmployeeService:
    """Use case: manage personnel records."""

    def __init__(self, employees: EmployeeRepository, *, rng: Optional[random.Random] = None):
        self._employees = employees
        self._rng = rng

    def list_employees(self) -> Sequence[Employee]:
        return list(self._employees.list_all())

    def get_employee(self, employee_id: str) -> Employee:
        employee = self._employees.get_by_id(employee_id)
        if not employee:
            raise NotFoundError("Personel bulunamadı")
        return employee

    def add_employee(self, name: str) -> Employee:
        name = require_non_empty(name, "personel adı")
        used_colors = [e.color for e in self._employees.list_all()]
        color = pick_color(used_colors, self._rng)
        employee = self._employees.create(name=name, color=color)
        logger.info("Employee %s created with color %s", employee.employee_id, color)
        return employee

    def delete_employee(self, employee_id: str, *, host: HostActions) -> bool:
        """Delete after the host confirmed; False means the user declined."""
        if not host.confirm(DELETE_CONFIRM_MESSAGE):
            return False
        if not self._employees.delete_by_id(employee_id):
            raise NotFoundError("Personel bulunamadı")
        logger.info("Employee %s deleted", employee_id)
        return True
