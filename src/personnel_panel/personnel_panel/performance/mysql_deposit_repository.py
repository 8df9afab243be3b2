from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Optional, Sequence

from ..core.constants import DEPOSITS_TABLE
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, placeholders
from .model import Deposit
from .repository import DepositRepository


class MySQLDepositRepository(DepositRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_between(
        self,
        *,
        start_date: date,
        end_date: date,
        staff_names: Optional[Sequence[str]] = None,
    ) -> Sequence[Deposit]:
        sql = f"""
            SELECT id, customer_id, staff_name, amount, deposit_date
            FROM {DEPOSITS_TABLE}
            WHERE deposit_date BETWEEN %s AND %s
        """
        params: list = [start_date, end_date]
        if staff_names is not None:
            if not staff_names:
                return []
            sql += f" AND staff_name IN ({placeholders(len(staff_names))})"
            params.extend(staff_names)
        sql += " ORDER BY deposit_date ASC, id ASC"

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(sql, tuple(params))
            rows = fetchall(cur)

        return [
            Deposit(
                deposit_id=str(r["id"]),
                customer_id=str(r["customer_id"]),
                staff_name=r.get("staff_name"),
                amount=Decimal(str(r.get("amount") or 0)),
                deposit_date=r["deposit_date"],
            )
            for r in rows
        ]
