"""
Lottery sales workbook — Sales Details, Brand Summary, District Summary.

Sales Details uses a two-row header: scalar and trailing labels span both
rows, each day label spans its nine brand columns plus the day total, and
row 2 carries the brand names. Data starts on row 3.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Sequence

from openpyxl.worksheet.worksheet import Worksheet

from lottery_sales.config import DAYS_OF_WEEK, DAY_FIELDS, LOTTERY_BRANDS
from lottery_sales.data.schemas import Submission
from lottery_sales.analytics.aggregator import brand_summary, district_summary
from lottery_sales.reports.export_table import (
    SCALAR_COLUMNS, TRAILING_COLUMNS, WEEKLY_TOTAL_COLUMN, EXPORT_COLUMNS,
    build_export_records, day_total_column,
)
from lottery_sales.excel.formatters import format_data_cell, set_column_widths
from lottery_sales.excel.grid import CellStyle, GridBuilder
from lottery_sales.excel.styles import (
    SUBHEADER_FONT, SUBHEADER_FILL, HEADER_BORDER, WRAP_CENTER,
)
from lottery_sales.excel.writer import ExcelWriter

logger = logging.getLogger(__name__)

DETAILS_SHEET = "Sales Details"
BRAND_SHEET = "Brand Summary"
DISTRICT_SHEET = "District Summary"

HEADER_ROWS = 2
FIRST_DATA_ROW = HEADER_ROWS + 1

SUBHEADER_STYLE = CellStyle(
    font=SUBHEADER_FONT, fill=SUBHEADER_FILL, border=HEADER_BORDER, alignment=WRAP_CENTER,
)

# Widths tuned to the scalar header labels
SCALAR_WIDTHS = {
    "Submitted By": 20,
    "District": 15,
    "City": 15,
    "Dealer Name": 24,
    "Dealer Number": 15,
    "Assistant Name": 20,
    "Sales Method": 14,
    "Sales Location": 22,
}
BRAND_COL_WIDTH = 9
DAY_TOTAL_WIDTH = 11
TRAILING_WIDTH = 14

BRAND_COLS = [("brand", "text", "Brand")] + [
    (field, "number", day) for field, day in zip(DAY_FIELDS, DAYS_OF_WEEK)
] + [("total", "number", "Total")]

DISTRICT_COLS = [
    ("district", "text", "District"),
    ("totalSubmissions", "number", "Total Submissions"),
    ("totalTickets", "number", "Total Tickets"),
    ("uniqueDealers", "number", "Unique Dealers"),
]

_TEXT_COLUMNS = {label for label, _ in SCALAR_COLUMNS} | {c for c in TRAILING_COLUMNS if c != WEEKLY_TOTAL_COLUMN}
_DAY_TOTAL_COLUMNS = {day_total_column(day) for day in DAYS_OF_WEEK}


# ---------------------------------------------------------------------------
# Sales Details
# ---------------------------------------------------------------------------

def _day_block_start(day_index: int) -> int:
    """1-based column of the first brand cell for a day."""
    return len(SCALAR_COLUMNS) + 1 + day_index * (len(LOTTERY_BRANDS) + 1)


def _write_details_header(grid: GridBuilder) -> None:
    col = 1
    for label, _ in SCALAR_COLUMNS:
        grid.label(1, col, label, rows=HEADER_ROWS)
        col += 1

    block_width = len(LOTTERY_BRANDS) + 1
    for i, day in enumerate(DAYS_OF_WEEK):
        start = _day_block_start(i)
        grid.label(1, start, day, cols=block_width)
        for j, brand in enumerate(LOTTERY_BRANDS):
            grid.label(2, start + j, brand, style=SUBHEADER_STYLE)
        grid.label(2, start + len(LOTTERY_BRANDS), "Total", style=SUBHEADER_STYLE)

    col = _day_block_start(len(DAYS_OF_WEEK))
    for label in TRAILING_COLUMNS:
        grid.label(1, col, label, rows=HEADER_ROWS)
        col += 1

    grid.ws.row_dimensions[2].height = 42


def _details_widths() -> dict[int, float]:
    widths: dict[int, float] = {}
    for col, (label, _) in enumerate(SCALAR_COLUMNS, 1):
        widths[col] = SCALAR_WIDTHS.get(label, 15)
    for i in range(len(DAYS_OF_WEEK)):
        start = _day_block_start(i)
        for j in range(len(LOTTERY_BRANDS)):
            widths[start + j] = BRAND_COL_WIDTH
        widths[start + len(LOTTERY_BRANDS)] = DAY_TOTAL_WIDTH
    first_trailing = _day_block_start(len(DAYS_OF_WEEK))
    for k in range(len(TRAILING_COLUMNS)):
        widths[first_trailing + k] = TRAILING_WIDTH
    return widths


def write_details_sheet(ws: Worksheet, records: Sequence[dict]) -> int:
    """Header block + one row per export record. Returns rows written."""
    grid = GridBuilder(ws)
    _write_details_header(grid)

    row = FIRST_DATA_ROW
    for record in records:
        for col, key in enumerate(EXPORT_COLUMNS, 1):
            col_type = "text" if key in _TEXT_COLUMNS else "number"
            is_total = key in _DAY_TOTAL_COLUMNS or key == WEEKLY_TOTAL_COLUMN
            format_data_cell(ws, row, col, record.get(key), col_type, is_total=is_total)
        row += 1

    set_column_widths(ws, _details_widths())
    grid.freeze(FIRST_DATA_ROW, len(SCALAR_COLUMNS) + 1)
    return row - FIRST_DATA_ROW


# ---------------------------------------------------------------------------
# Summary sheets
# ---------------------------------------------------------------------------

def brand_sheet_rows(submissions: Sequence[Submission]) -> list[dict]:
    """All nine brands in fixed order, zero-filled."""
    summary = brand_summary(submissions, zero_fill=True)
    return [{"brand": brand, **summary[brand]} for brand in LOTTERY_BRANDS]


# ---------------------------------------------------------------------------
# Workbook
# ---------------------------------------------------------------------------

def build_workbook(submissions: Sequence[Submission]) -> ExcelWriter:
    records = build_export_records(submissions)

    ew = ExcelWriter()
    details = ew.add_sheet(DETAILS_SHEET)
    write_details_sheet(details, records)

    ws_brand = ew.add_sheet(BRAND_SHEET)
    ew.write_table(ws_brand, 1, BRAND_COLS, brand_sheet_rows(submissions), table_name="BrandSummary")

    ws_district = ew.add_sheet(DISTRICT_SHEET)
    ew.write_table(ws_district, 1, DISTRICT_COLS, district_summary(submissions), table_name="DistrictSummary")

    logger.info("Built sales workbook (%d detail rows)", len(records))
    return ew


def generate_excel_bytes(submissions: Sequence[Submission]) -> bytes:
    """The whole .xlsx file, built in memory."""
    return build_workbook(submissions).to_bytes()


def generate_excel(submissions: Sequence[Submission], output_path: str | Path) -> Path:
    return build_workbook(submissions).save(output_path)
