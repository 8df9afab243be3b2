from __future__ import annotations

from ..core.exceptions import ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"Lütfen {field_name} girin")
    return value.strip()


def require_date_order(start, end) -> None:
    if start > end:
        raise ValidationError("Başlangıç tarihi bitiş tarihinden sonra olamaz")
