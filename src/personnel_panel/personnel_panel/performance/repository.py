from __future__ import annotations

from datetime import date
from typing import Optional, Protocol, Sequence

from .model import Deposit


class DepositRepository(Protocol):
    def list_between(
        self,
        *,
        start_date: date,
        end_date: date,
        staff_names: Optional[Sequence[str]] = None,
    ) -> Sequence[Deposit]:
        """Deposits dated within [start_date, end_date], optionally for given staff only."""
        raise NotImplementedError
