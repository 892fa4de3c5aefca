"""
Reusable Excel cell/row formatting helpers.
"""
from __future__ import annotations

from openpyxl.cell.cell import ILLEGAL_CHARACTERS_RE
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.worksheet import Worksheet

from lottery_sales.excel.styles import (
    HEADER_FONT, HEADER_FILL, HEADER_BORDER,
    DATA_FONT, TOTAL_FONT,
    THIN_BORDER, ALTERNATE_FILL, TOTAL_FILL,
    CENTER, LEFT, RIGHT,
    INTEGER_FORMAT,
)


# ---------------------------------------------------------------------------
# Header row
# ---------------------------------------------------------------------------

def format_header_row(ws: Worksheet, row_num: int, num_cols: int, start_col: int = 1) -> None:
    """Apply header styling to ``num_cols`` cells of a row."""
    for col in range(start_col, start_col + num_cols):
        cell = ws.cell(row=row_num, column=col)
        cell.font = HEADER_FONT
        cell.fill = HEADER_FILL
        cell.alignment = CENTER
        cell.border = HEADER_BORDER


# ---------------------------------------------------------------------------
# Data cell
# ---------------------------------------------------------------------------

def format_data_cell(
    ws: Worksheet,
    row_num: int,
    col_num: int,
    value,
    col_type: str = "text",
    is_total: bool = False,
) -> None:
    """Write and format a single data cell.

    ``number`` cells are stored as ints with a no-decimal format; everything
    else is stored as a string with worksheet-illegal control characters
    removed.
    """
    cell = ws.cell(row=row_num, column=col_num)
    if col_type == "number":
        cell.value = int(value or 0)
        cell.number_format = INTEGER_FORMAT
        cell.alignment = RIGHT
    else:
        cell.value = "" if value is None else ILLEGAL_CHARACTERS_RE.sub("", str(value))
        cell.alignment = LEFT
    cell.font = TOTAL_FONT if is_total else DATA_FONT
    cell.border = THIN_BORDER

    if is_total:
        cell.fill = TOTAL_FILL
    elif row_num % 2 == 0:
        cell.fill = ALTERNATE_FILL


# ---------------------------------------------------------------------------
# Column widths
# ---------------------------------------------------------------------------

def set_column_widths(ws: Worksheet, widths: dict[int, float]) -> None:
    """Set explicit widths keyed by 1-based column index."""
    for col, width in widths.items():
        ws.column_dimensions[get_column_letter(col)].width = width


def auto_column_width(ws: Worksheet, min_width: int = 10, max_width: int = 40) -> None:
    """Auto-fit column widths based on content length."""
    for column in ws.columns:
        max_length = 0
        column_letter = get_column_letter(column[0].column)
        for cell in column:
            if cell.value is not None:
                max_length = max(max_length, len(str(cell.value)))
        ws.column_dimensions[column_letter].width = min(max(max_length + 2, min_width), max_width)
