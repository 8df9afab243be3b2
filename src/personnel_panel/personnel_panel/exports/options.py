from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import date, datetime
from typing import Any, Iterable, Mapping, Optional

from ..common.datetime_utils import month_start, parse_iso_date
from ..common.validators import require_date_order
from ..core.enums import ColorScheme, ExportColumn
from ..core.exceptions import ValidationError

COLUMN_LABELS: dict[ExportColumn, str] = {
    ExportColumn.DATE: "Tarih",
    ExportColumn.EMPLOYEE: "Personel",
    ExportColumn.TOTAL_AMOUNT: "Toplam Tutar",
    ExportColumn.MEMBER_COUNT: "Üye Sayısı",
    ExportColumn.INVESTOR_COUNT: "Yatırımcı Sayısı",
    ExportColumn.CONVERSION_RATE: "Dönüşüm Oranı (%)",
    ExportColumn.PERFORMANCE_SCORE: "Performans Skoru",
}

TOGGLE_FIELDS: tuple[str, ...] = (
    "include_all_employees",
    "include_conditional_formatting",
    "include_chart",
    "include_logo",
    "include_summary",
    "include_average",
    "include_min_max",
)


def all_columns() -> dict[str, bool]:
    return {c.value: True for c in ExportColumn}


def _normalize_columns(columns: Mapping[Any, Any]) -> dict[str, bool]:
    wanted = {str(getattr(k, "value", k)): bool(v) for k, v in dict(columns).items()}
    return {c.value: wanted.get(c.value, False) for c in ExportColumn}


def _as_date(value: Any) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return parse_iso_date(str(value))


@dataclass(frozen=True)
class ExportOptions:
    """Everything the user picked on the export panel.

    Instances are normalized on construction: dates are `date` objects, the
    employee selection is a frozenset, `columns` has exactly one entry per
    ExportColumn and unknown color schemes become `professional`.
    """

    start_date: date
    end_date: date
    selected_employees: frozenset = field(default_factory=frozenset)
    include_all_employees: bool = True
    columns: dict = field(default_factory=all_columns)
    color_scheme: ColorScheme = ColorScheme.PERFORMANCE
    include_conditional_formatting: bool = True
    include_chart: bool = False
    include_logo: bool = False
    include_summary: bool = True
    include_average: bool = True
    include_min_max: bool = False

    def __post_init__(self):
        object.__setattr__(self, "start_date", _as_date(self.start_date))
        object.__setattr__(self, "end_date", _as_date(self.end_date))
        object.__setattr__(self, "selected_employees", frozenset(str(e) for e in self.selected_employees))
        object.__setattr__(self, "columns", _normalize_columns(self.columns))
        object.__setattr__(self, "color_scheme", ColorScheme.parse(self.color_scheme))

    @classmethod
    def defaults(cls, today: Optional[date] = None) -> "ExportOptions":
        today = today or date.today()
        return cls(start_date=month_start(today), end_date=today)

    @property
    def selected_columns(self) -> list[ExportColumn]:
        return [c for c in ExportColumn if self.columns.get(c.value)]

    @property
    def wants_aggregates(self) -> bool:
        return self.include_summary or self.include_average or self.include_min_max

    def validate(self) -> None:
        require_date_order(self.start_date, self.end_date)
        if not self.selected_columns:
            raise ValidationError("En az bir sütun seçilmelidir")

    def with_columns(self, columns: Iterable[ExportColumn]) -> "ExportOptions":
        chosen = {ExportColumn(c).value for c in columns}
        return replace(self, columns={c.value: c.value in chosen for c in ExportColumn})

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "start_date": self.start_date.isoformat(),
            "end_date": self.end_date.isoformat(),
            "selected_employees": sorted(self.selected_employees),
            "columns": dict(self.columns),
            "color_scheme": self.color_scheme.value,
        }
        for name in TOGGLE_FIELDS:
            data[name] = getattr(self, name)
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Any], *, base: Optional["ExportOptions"] = None) -> "ExportOptions":
        """Build options from a (possibly partial) snapshot, merged over `base`.

        Keys missing from `data` keep the value from `base` (panel defaults when
        not given); a present `columns` mapping replaces the base columns.
        """
        base = base or cls.defaults()
        merged = base.to_dict()
        for key, value in dict(data).items():
            if key in merged and value is not None:
                merged[key] = value
        try:
            return cls(
                start_date=merged["start_date"],
                end_date=merged["end_date"],
                selected_employees=frozenset(merged["selected_employees"] or ()),
                columns=merged["columns"] or {},
                color_scheme=merged["color_scheme"],
                **{name: bool(merged[name]) for name in TOGGLE_FIELDS},
            )
        except (TypeError, AttributeError) as e:
            raise ValidationError(f"Geçersiz dışa aktarma ayarları: {e}")
