"""
GridBuilder — place labels and merged header blocks by (row, col).

Keeps header layout declarative: callers say "this label spans these
rows/cols with this style" instead of doing merge arithmetic inline.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from openpyxl.styles import Alignment, Border, Font, PatternFill
from openpyxl.worksheet.worksheet import Worksheet

from lottery_sales.excel.styles import HEADER_FONT, HEADER_FILL, HEADER_BORDER, CENTER


@dataclass(frozen=True)
class CellStyle:
    font: Optional[Font] = None
    fill: Optional[PatternFill] = None
    border: Optional[Border] = None
    alignment: Optional[Alignment] = None
    number_format: Optional[str] = None


HEADER_STYLE = CellStyle(font=HEADER_FONT, fill=HEADER_FILL, border=HEADER_BORDER, alignment=CENTER)


class GridBuilder:
    """Thin coordinate layer over an openpyxl worksheet (1-based rows/cols)."""

    def __init__(self, ws: Worksheet) -> None:
        self.ws = ws

    def style(self, row: int, col: int, style: CellStyle, rows: int = 1, cols: int = 1) -> None:
        """Apply ``style`` to every cell of the rows × cols block."""
        for r in range(row, row + rows):
            for c in range(col, col + cols):
                cell = self.ws.cell(row=r, column=c)
                if style.font is not None:
                    cell.font = style.font
                if style.fill is not None:
                    cell.fill = style.fill
                if style.border is not None:
                    cell.border = style.border
                if style.alignment is not None:
                    cell.alignment = style.alignment
                if style.number_format is not None:
                    cell.number_format = style.number_format

    def merge(self, row: int, col: int, rows: int = 1, cols: int = 1) -> None:
        if rows > 1 or cols > 1:
            self.ws.merge_cells(
                start_row=row,
                start_column=col,
                end_row=row + rows - 1,
                end_column=col + cols - 1,
            )

    def label(
        self,
        row: int,
        col: int,
        text: str,
        rows: int = 1,
        cols: int = 1,
        style: CellStyle | None = HEADER_STYLE,
    ) -> None:
        """Write ``text`` at (row, col), style the block, then merge it."""
        if style is not None:
            self.style(row, col, style, rows, cols)
        self.ws.cell(row=row, column=col).value = text
        self.merge(row, col, rows, cols)

    def freeze(self, row: int, col: int) -> None:
        """Freeze everything above ``row`` and left of ``col``."""
        self.ws.freeze_panes = self.ws.cell(row=row, column=col).coordinate
