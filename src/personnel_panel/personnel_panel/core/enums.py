from __future__ import annotations

from enum import Enum


class ColorScheme(str, Enum):
    """Named palettes for the spreadsheet export."""

    PERFORMANCE = "performance"
    PROFESSIONAL = "professional"
    CORPORATE = "corporate"
    MODERN = "modern"
    MINIMAL = "minimal"

    @classmethod
    def parse(cls, value) -> "ColorScheme":
        """Unknown or empty values fall back to the professional palette."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            return cls.PROFESSIONAL


class ExportColumn(str, Enum):
    """Exportable columns, declared in canonical output order."""

    DATE = "date"
    EMPLOYEE = "employee"
    TOTAL_AMOUNT = "total_amount"
    MEMBER_COUNT = "member_count"
    INVESTOR_COUNT = "investor_count"
    CONVERSION_RATE = "conversion_rate"
    PERFORMANCE_SCORE = "performance_score"


class MessageKind(str, Enum):
    """Banner categories (match Flask flash categories used by the templates)."""

    SUCCESS = "success"
    ERROR = "danger"
    WARNING = "warning"
    INFO = "info"
