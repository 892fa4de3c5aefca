import io

import pytest
from openpyxl import load_workbook

from lottery_sales.config import DAYS_OF_WEEK, LOTTERY_BRANDS
from lottery_sales.reports.sales_workbook import (
    BRAND_SHEET, DETAILS_SHEET, DISTRICT_SHEET, generate_excel, generate_excel_bytes,
)

from tests.conftest import make_submission


def _open(submissions):
    return load_workbook(io.BytesIO(generate_excel_bytes(submissions)))


@pytest.fixture
def workbook(sample_submissions):
    return _open(sample_submissions)


def test_sheet_order(workbook):
    assert workbook.sheetnames == [DETAILS_SHEET, BRAND_SHEET, DISTRICT_SHEET]


class TestDetailsSheet:

    def test_two_row_header_merges(self, workbook):
        ws = workbook[DETAILS_SHEET]
        merged = {str(r) for r in ws.merged_cells.ranges}
        # scalar columns span both header rows
        for letter in "ABCDEFGH":
            assert f"{letter}1:{letter}2" in merged
        # each day spans 9 brands + total
        assert "I1:R1" in merged
        assert "S1:AB1" in merged
        assert "BQ1:BZ1" in merged
        # trailing columns
        for letter in ("CA", "CB", "CC"):
            assert f"{letter}1:{letter}2" in merged
        assert len(merged) == 8 + 7 + 3

    def test_header_labels(self, workbook):
        ws = workbook[DETAILS_SHEET]
        assert ws["A1"].value == "Submitted By"
        assert ws["H1"].value == "Sales Location"
        assert [ws.cell(row=1, column=9 + i * 10).value for i in range(7)] == DAYS_OF_WEEK
        assert [ws.cell(row=2, column=9 + j).value for j in range(9)] == LOTTERY_BRANDS
        assert ws.cell(row=2, column=18).value == "Total"
        assert ws["CA1"].value == "Weekly Total"
        assert ws["CC1"].value == "Updated Date"
        assert ws["A1"].font.bold
        assert ws["I1"].alignment.horizontal == "center"

    def test_frozen_panes(self, workbook):
        assert workbook[DETAILS_SHEET].freeze_panes == "I3"

    def test_data_rows_start_at_row_three(self, workbook, sample_submissions):
        ws = workbook[DETAILS_SHEET]
        assert ws.max_row == 2 + len(sample_submissions)
        assert ws.max_column == 81

    def test_cell_types(self):
        sub = make_submission({"Sasiri": {"monday": 10, "tuesday": 5}}, dealer_number="012345")
        ws = _open([sub])[DETAILS_SHEET]
        sasiri = 9 + LOTTERY_BRANDS.index("Sasiri")
        assert ws.cell(row=3, column=sasiri).value == 10
        assert ws.cell(row=3, column=sasiri).data_type == "n"
        assert ws.cell(row=3, column=sasiri).number_format == "#,##0"
        assert ws.cell(row=3, column=18).value == 10          # Monday_Total
        assert ws.cell(row=3, column=sasiri + 10).value == 5  # Tuesday_Sasiri
        assert ws.cell(row=3, column=79).value == 15          # Weekly Total
        assert ws.cell(row=3, column=5).value == "012345"
        assert ws.cell(row=3, column=5).data_type == "s"
        assert ws.cell(row=3, column=80).data_type == "s"

    def test_control_characters_are_stripped(self):
        sub = make_submission(city="Main\x0bStreet", dealer_name="Lucky\x07 Stores", district="Galle")
        wb = _open([sub])
        ws = wb[DETAILS_SHEET]
        assert ws.cell(row=3, column=3).value == "MainStreet"
        assert ws.cell(row=3, column=4).value == "Lucky Stores"
        assert wb[DISTRICT_SHEET].cell(row=2, column=1).value == "Galle"

    def test_column_widths(self, workbook):
        ws = workbook[DETAILS_SHEET]
        assert ws.column_dimensions["D"].width > ws.column_dimensions["I"].width
        assert ws.column_dimensions["R"].width > ws.column_dimensions["I"].width


class TestSummarySheets:

    def test_brand_summary_lists_all_brands(self, workbook):
        ws = workbook[BRAND_SHEET]
        assert [c.value for c in ws[1]] == ["Brand"] + DAYS_OF_WEEK + ["Total"]
        assert [ws.cell(row=r, column=1).value for r in range(2, 11)] == LOTTERY_BRANDS
        sasiri = [c.value for c in ws[2 + LOTTERY_BRANDS.index("Sasiri")]]
        assert sasiri == ["Sasiri", 10, 5, 0, 0, 0, 0, 7, 22]
        assert ws.freeze_panes == "A2"
        assert "BrandSummary" in ws.tables

    def test_district_summary(self, workbook):
        ws = workbook[DISTRICT_SHEET]
        rows = [[c.value for c in row] for row in ws.iter_rows(min_row=1)]
        assert rows == [
            ["District", "Total Submissions", "Total Tickets", "Unique Dealers"],
            ["Colombo", 2, 28, 2],
            ["Galle", 1, 4, 1],
        ]
        assert ws.freeze_panes == "A2"
        assert "DistrictSummary" in ws.tables


class TestEmptyWorkbook:

    def test_headers_only(self):
        wb = _open([])
        details = wb[DETAILS_SHEET]
        assert details.max_row == 2
        assert details["A1"].value == "Submitted By"

        brands = wb[BRAND_SHEET]
        assert brands.max_row == 10
        assert all(brands.cell(row=r, column=9).value == 0 for r in range(2, 11))

        districts = wb[DISTRICT_SHEET]
        assert districts.max_row == 1
        assert not districts.tables


def test_generate_excel_writes_file(tmp_path, sample_submissions):
    path = generate_excel(sample_submissions, tmp_path / "out" / "report.xlsx")
    assert path.exists()
    assert load_workbook(path).sheetnames[0] == DETAILS_SHEET
