from __future__ import annotations

from datetime import date, datetime, timezone
from typing import Optional

from ..core.exceptions import ValidationError


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    try:
        return datetime.strptime(value.strip(), "%Y-%m-%d").date()
    except (AttributeError, ValueError):
        raise ValidationError(f"Geçersiz tarih: {value!r}")


def month_start(today: Optional[date] = None) -> date:
    today = today or date.today()
    return today.replace(day=1)


def now_utc() -> datetime:
    """Current aware UTC time.

    Note: Wrapped so tests can inject a fixed clock instead.
    """
    return datetime.now(timezone.utc)
