from __future__ import annotations

import uuid
from typing import Optional, Sequence

from ..core.constants import EMPLOYEES_TABLE
from ..core.exceptions import BackendError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Employee
from .repository import EmployeeRepository


def _to_employee(row: dict) -> Employee:
    return Employee(
        employee_id=str(row["id"]),
        name=row["name"],
        color=row.get("color") or "",
        created_at=row["created_at"],
    )


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT id, name, color, created_at
                FROM {EMPLOYEES_TABLE}
                ORDER BY created_at ASC
                """
            )
            return [_to_employee(r) for r in fetchall(cur)]

    def get_by_id(self, employee_id: str) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT id, name, color, created_at FROM {EMPLOYEES_TABLE} WHERE id=%s",
                (employee_id,),
            )
            row = fetchone(cur)
            return _to_employee(row) if row else None

    def create(self, *, name: str, color: str) -> Employee:
        employee_id = str(uuid.uuid4())
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"INSERT INTO {EMPLOYEES_TABLE}(id, name, color) VALUES(%s,%s,%s)",
                (employee_id, name, color),
            )
            cur.execute(
                f"SELECT id, name, color, created_at FROM {EMPLOYEES_TABLE} WHERE id=%s",
                (employee_id,),
            )
            row = fetchone(cur)
        if not row:
            raise BackendError("Inserted employee could not be read back", code="PGRST116")
        return _to_employee(row)

    def delete_by_id(self, employee_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"DELETE FROM {EMPLOYEES_TABLE} WHERE id=%s", (employee_id,))
            return cur.rowcount > 0
