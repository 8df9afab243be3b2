from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from openpyxl.styles import Alignment, Border, Font, PatternFill, Side

from ..core.enums import ColorScheme


@dataclass(frozen=True)
class Swatch:
    """Background + font color pair (RGB hex without '#')."""

    fill: str
    font: str

    def pattern_fill(self) -> PatternFill:
        return PatternFill(start_color=self.fill, end_color=self.fill, fill_type="solid")


@dataclass(frozen=True)
class SchemePalette:
    header: Swatch
    total: Swatch
    row_fills: tuple[str, ...] = ()

    def row_fill(self, index: int) -> Optional[PatternFill]:
        """Fill for the index-th data row (0-based); None when the scheme has no banding."""
        if not self.row_fills:
            return None
        color = self.row_fills[index % len(self.row_fills)]
        return PatternFill(start_color=color, end_color=color, fill_type="solid")


@dataclass(frozen=True)
class ScoreBand:
    label: str
    low: Optional[int]
    high: Optional[int]
    swatch: Swatch


SCHEMES: dict[ColorScheme, SchemePalette] = {
    ColorScheme.PERFORMANCE: SchemePalette(
        header=Swatch("1E40AF", "FFFFFF"),
        total=Swatch("374151", "FFFFFF"),
    ),
    ColorScheme.PROFESSIONAL: SchemePalette(
        header=Swatch("0F172A", "FFFFFF"),
        total=Swatch("475569", "FFFFFF"),
        row_fills=("F8FAFC", "FFFFFF"),
    ),
    ColorScheme.MINIMAL: SchemePalette(
        header=Swatch("FFFFFF", "000000"),
        total=Swatch("F1F5F9", "000000"),
    ),
    ColorScheme.CORPORATE: SchemePalette(
        header=Swatch("1E3A8A", "FFFFFF"),
        total=Swatch("1E40AF", "FFFFFF"),
        row_fills=("DBEAFE", "FFFFFF"),
    ),
    ColorScheme.MODERN: SchemePalette(
        header=Swatch("7C3AED", "FFFFFF"),
        total=Swatch("6D28D9", "FFFFFF"),
        row_fills=("F3E8FF", "FFFFFF"),
    ),
}

# Highest band first; scores are integers 0-100.
SCORE_BANDS: tuple[ScoreBand, ...] = (
    ScoreBand("excellent", 90, None, Swatch("16A34A", "FFFFFF")),
    ScoreBand("good", 70, 89, Swatch("4ADE80", "000000")),
    ScoreBand("average", 50, 69, Swatch("FBBF24", "000000")),
    ScoreBand("poor", 30, 49, Swatch("FB923C", "000000")),
    ScoreBand("critical", None, 29, Swatch("DC2626", "FFFFFF")),
)


def palette_for(scheme) -> SchemePalette:
    return SCHEMES.get(ColorScheme.parse(scheme), SCHEMES[ColorScheme.PROFESSIONAL])


HEADER_BORDER = Border(
    left=Side(style="thin", color="000000"),
    right=Side(style="thin", color="000000"),
    top=Side(style="thin", color="000000"),
    bottom=Side(style="thin", color="000000"),
)
CELL_BORDER = Border(
    left=Side(style="thin", color="CCCCCC"),
    right=Side(style="thin", color="CCCCCC"),
    top=Side(style="thin", color="CCCCCC"),
    bottom=Side(style="thin", color="CCCCCC"),
)

ALIGN_CENTER = Alignment(horizontal="center", vertical="center")
ALIGN_LEFT = Alignment(horizontal="left", vertical="center")


def header_font(palette: SchemePalette) -> Font:
    return Font(bold=True, size=12, color=palette.header.font)


def total_font(palette: SchemePalette) -> Font:
    return Font(bold=True, size=11, color=palette.total.font)
