from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Employee:
    """Domain entity: a personnel record (pure data, no DB access)."""

    employee_id: str
    name: str
    color: str
    created_at: datetime

    @property
    def initial(self) -> str:
        return self.name[:1].upper()
