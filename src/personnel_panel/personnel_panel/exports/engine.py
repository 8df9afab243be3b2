from __future__ import annotations

import io
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from statistics import fmean
from typing import Callable, Iterable, Optional, Sequence

from openpyxl import Workbook
from openpyxl.chart import BarChart, Reference
from openpyxl.drawing.image import Image
from openpyxl.formatting.rule import CellIsRule
from openpyxl.styles import Font
from openpyxl.utils import get_column_letter

from ..common.datetime_utils import now_utc
from ..core.constants import EXPORT_FILENAME_PREFIX, EXPORT_SHEET_TITLE, XLSX_MIMETYPE
from ..core.enums import ExportColumn
from ..core.exceptions import ExportError
from ..core.logger import logger
from ..performance.calculator.standard_calculator import round_half_up
from ..performance.model import PerformanceRow
from . import palettes
from .options import COLUMN_LABELS, ExportOptions

SUMMARY_LABEL = "TOPLAM"
AVERAGE_LABEL = "ORTALAMA"
MIN_LABEL = "EN DÜŞÜK"
MAX_LABEL = "EN YÜKSEK"

NO_DATA_MESSAGE = "Seçilen kriterlere uygun veri bulunamadı"

COLUMN_WIDTHS: dict[ExportColumn, int] = {
    ExportColumn.DATE: 12,
    ExportColumn.EMPLOYEE: 20,
    ExportColumn.TOTAL_AMOUNT: 15,
    ExportColumn.MEMBER_COUNT: 14,
    ExportColumn.INVESTOR_COUNT: 14,
    ExportColumn.CONVERSION_RATE: 16,
    ExportColumn.PERFORMANCE_SCORE: 16,
}

NUMBER_FORMATS: dict[ExportColumn, str] = {
    ExportColumn.DATE: "DD.MM.YYYY",
    ExportColumn.TOTAL_AMOUNT: '"₺"#,##0.00',
    ExportColumn.MEMBER_COUNT: "0",
    ExportColumn.INVESTOR_COUNT: "0",
    ExportColumn.CONVERSION_RATE: '"%"0.00',
    ExportColumn.PERFORMANCE_SCORE: "0",
}

NUMERIC_COLUMNS: tuple[ExportColumn, ...] = (
    ExportColumn.TOTAL_AMOUNT,
    ExportColumn.MEMBER_COUNT,
    ExportColumn.INVESTOR_COUNT,
    ExportColumn.CONVERSION_RATE,
    ExportColumn.PERFORMANCE_SCORE,
)

# Columns whose aggregated value is shown as a whole number.
INTEGER_COLUMNS = frozenset(
    {ExportColumn.MEMBER_COUNT, ExportColumn.INVESTOR_COUNT, ExportColumn.PERFORMANCE_SCORE}
)

LOGO_HEIGHT_PX = 60


@dataclass(frozen=True)
class ExportArtifact:
    filename: str
    content: bytes
    mimetype: str
    row_count: int


def select_rows(options: ExportOptions, dataset: Iterable[PerformanceRow]) -> list[PerformanceRow]:
    """Rows inside the date range (inclusive) and employee selection, sorted."""
    rows = [r for r in dataset if options.start_date <= r.work_date <= options.end_date]
    if not options.include_all_employees:
        rows = [r for r in rows if r.employee_id in options.selected_employees]
    return sorted(rows, key=lambda r: (r.work_date, r.employee_name))


def _cell_value(row: PerformanceRow, column: ExportColumn):
    if column is ExportColumn.DATE:
        return row.work_date
    if column is ExportColumn.EMPLOYEE:
        return row.employee_name
    if column is ExportColumn.TOTAL_AMOUNT:
        return row.total_amount
    if column is ExportColumn.MEMBER_COUNT:
        return row.member_count
    if column is ExportColumn.INVESTOR_COUNT:
        return row.investor_count
    if column is ExportColumn.CONVERSION_RATE:
        return row.conversion_rate
    return row.performance_score


def _mean(values: Sequence[float], column: ExportColumn):
    value = fmean(values)
    return round_half_up(value) if column in INTEGER_COLUMNS else value


def _summary(rows: Sequence[PerformanceRow], column: ExportColumn):
    values = [_cell_value(r, column) for r in rows]
    if column in (ExportColumn.CONVERSION_RATE, ExportColumn.PERFORMANCE_SCORE):
        return _mean(values, column)
    return sum(values)


def _average(rows: Sequence[PerformanceRow], column: ExportColumn):
    return _mean([_cell_value(r, column) for r in rows], column)


def _minimum(rows: Sequence[PerformanceRow], column: ExportColumn):
    return min(_cell_value(r, column) for r in rows)


def _maximum(rows: Sequence[PerformanceRow], column: ExportColumn):
    return max(_cell_value(r, column) for r in rows)


class ExcelExportEngine:
    """Renders a performance dataset into a styled .xlsx workbook (in memory)."""

    def __init__(
        self,
        *,
        logo_path: Optional[str | Path] = None,
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self._logo_path = Path(logo_path) if logo_path else None
        self._clock = clock or now_utc

    def export(self, options: ExportOptions, dataset: Iterable[PerformanceRow]) -> ExportArtifact:
        options.validate()
        rows = select_rows(options, dataset)
        if not rows and options.wants_aggregates:
            raise ExportError(NO_DATA_MESSAGE)

        columns = options.selected_columns
        palette = palettes.palette_for(options.color_scheme)

        wb = Workbook()
        ws = wb.active
        ws.title = EXPORT_SHEET_TITLE

        self._write_header(ws, columns, palette)
        for i, row in enumerate(rows):
            self._write_data_row(ws, i + 2, row, columns, palette.row_fill(i))
        last_data_row = len(rows) + 1

        aggregates = []
        if options.include_summary:
            aggregates.append((SUMMARY_LABEL, _summary))
        if options.include_average:
            aggregates.append((AVERAGE_LABEL, _average))
        if options.include_min_max:
            aggregates.append((MIN_LABEL, _minimum))
            aggregates.append((MAX_LABEL, _maximum))
        for offset, (label, fn) in enumerate(aggregates, start=1):
            self._write_aggregate_row(ws, last_data_row + offset, label, rows, columns, palette, fn)
        last_row = last_data_row + len(aggregates)

        for idx, column in enumerate(columns, start=1):
            ws.column_dimensions[get_column_letter(idx)].width = COLUMN_WIDTHS[column]
        ws.freeze_panes = "A2"

        if options.include_conditional_formatting and rows:
            self._add_score_rules(ws, columns, last_data_row)
        if options.include_chart and rows:
            self._add_chart(ws, columns, last_data_row, anchor_row=last_row + 2)
        if options.include_logo:
            self._add_logo(ws, len(columns))

        buf = io.BytesIO()
        wb.save(buf)

        filename = f"{EXPORT_FILENAME_PREFIX}_{self._clock().date().isoformat()}.xlsx"
        logger.info(
            "Excel export %s: %d rows, %d columns, scheme=%s",
            filename,
            len(rows),
            len(columns),
            options.color_scheme.value,
        )
        return ExportArtifact(
            filename=filename,
            content=buf.getvalue(),
            mimetype=XLSX_MIMETYPE,
            row_count=len(rows),
        )

    @staticmethod
    def _write_header(ws, columns: Sequence[ExportColumn], palette: palettes.SchemePalette) -> None:
        for idx, column in enumerate(columns, start=1):
            cell = ws.cell(row=1, column=idx, value=COLUMN_LABELS[column])
            cell.fill = palette.header.pattern_fill()
            cell.font = palettes.header_font(palette)
            cell.border = palettes.HEADER_BORDER
            cell.alignment = palettes.ALIGN_CENTER
        ws.row_dimensions[1].height = 24

    @staticmethod
    def _write_data_row(ws, row_idx: int, row: PerformanceRow, columns, fill) -> None:
        for idx, column in enumerate(columns, start=1):
            cell = ws.cell(row=row_idx, column=idx, value=_cell_value(row, column))
            cell.border = palettes.CELL_BORDER
            # First two columns are identifiers and read better left-aligned.
            cell.alignment = palettes.ALIGN_LEFT if idx <= 2 else palettes.ALIGN_CENTER
            if column in NUMBER_FORMATS:
                cell.number_format = NUMBER_FORMATS[column]
            if fill is not None:
                cell.fill = fill

    @staticmethod
    def _write_aggregate_row(ws, row_idx: int, label: str, rows, columns, palette, fn) -> None:
        for idx, column in enumerate(columns, start=1):
            if idx == 1:
                value = label
            elif column in NUMERIC_COLUMNS:
                value = fn(rows, column)
            else:
                value = None
            cell = ws.cell(row=row_idx, column=idx, value=value)
            cell.fill = palette.total.pattern_fill()
            cell.font = palettes.total_font(palette)
            cell.border = palettes.CELL_BORDER
            cell.alignment = palettes.ALIGN_LEFT if idx <= 2 else palettes.ALIGN_CENTER
            if idx > 1 and column in NUMBER_FORMATS:
                cell.number_format = NUMBER_FORMATS[column]

    @staticmethod
    def _add_score_rules(ws, columns: Sequence[ExportColumn], last_data_row: int) -> None:
        if ExportColumn.PERFORMANCE_SCORE not in columns:
            logger.debug("Score column not exported; skipping conditional formatting")
            return
        letter = get_column_letter(columns.index(ExportColumn.PERFORMANCE_SCORE) + 1)
        cell_range = f"{letter}2:{letter}{last_data_row}"
        for band in palettes.SCORE_BANDS:
            if band.high is None:
                operator, formula = "greaterThanOrEqual", [str(band.low)]
            elif band.low is None:
                operator, formula = "lessThanOrEqual", [str(band.high)]
            else:
                operator, formula = "between", [str(band.low), str(band.high)]
            ws.conditional_formatting.add(
                cell_range,
                CellIsRule(
                    operator=operator,
                    formula=formula,
                    fill=band.swatch.pattern_fill(),
                    font=Font(bold=True, color=band.swatch.font),
                ),
            )

    @staticmethod
    def _add_chart(ws, columns: Sequence[ExportColumn], last_data_row: int, *, anchor_row: int) -> None:
        if ExportColumn.PERFORMANCE_SCORE in columns:
            value_column = ExportColumn.PERFORMANCE_SCORE
        else:
            value_column = next((c for c in columns if c in NUMERIC_COLUMNS), None)
        if value_column is None:
            logger.warning("No numeric column exported; skipping chart")
            return

        chart = BarChart()
        chart.type = "col"
        chart.title = COLUMN_LABELS[value_column]
        chart.y_axis.title = COLUMN_LABELS[value_column]
        chart.height = 8
        chart.width = max(16, len(columns) * 3)

        value_idx = columns.index(value_column) + 1
        data = Reference(ws, min_col=value_idx, min_row=1, max_row=last_data_row)
        chart.add_data(data, titles_from_data=True)

        label_column = next(
            (c for c in (ExportColumn.EMPLOYEE, ExportColumn.DATE) if c in columns),
            None,
        )
        if label_column is not None:
            label_idx = columns.index(label_column) + 1
            chart.set_categories(Reference(ws, min_col=label_idx, min_row=2, max_row=last_data_row))
            chart.x_axis.title = COLUMN_LABELS[label_column]

        ws.add_chart(chart, f"A{anchor_row}")

    def _add_logo(self, ws, column_count: int) -> None:
        if self._logo_path is None or not self._logo_path.is_file():
            logger.warning("Logo requested but not available at %s; skipping", self._logo_path)
            return
        img = Image(str(self._logo_path))
        if img.height:
            ratio = LOGO_HEIGHT_PX / img.height
            img.height = LOGO_HEIGHT_PX
            img.width = int(img.width * ratio)
        ws.add_image(img, f"{get_column_letter(column_count + 2)}1")
