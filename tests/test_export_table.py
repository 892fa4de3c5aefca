import csv
import datetime as dt
import io

from lottery_sales.config import DAYS_OF_WEEK, LOTTERY_BRANDS
from lottery_sales.reports.export_table import (
    EXPORT_COLUMNS, build_export_frame, build_export_records, submission_record, to_csv,
)

from tests.conftest import make_submission


def test_column_layout():
    assert len(EXPORT_COLUMNS) == 81
    assert EXPORT_COLUMNS[:8] == [
        "Submitted By", "District", "City", "Dealer Name",
        "Dealer Number", "Assistant Name", "Sales Method", "Sales Location",
    ]
    assert EXPORT_COLUMNS[8] == f"Monday_{LOTTERY_BRANDS[0]}"
    assert EXPORT_COLUMNS[17] == "Monday_Total"
    assert EXPORT_COLUMNS[18] == f"Tuesday_{LOTTERY_BRANDS[0]}"
    assert EXPORT_COLUMNS[77] == "Sunday_Total"
    assert EXPORT_COLUMNS[-3:] == ["Weekly Total", "Created Date", "Updated Date"]


def test_single_brand_scenario():
    sub = make_submission(
        {"Sasiri": {"monday": 10, "tuesday": 5}},
        created_at=dt.datetime(2025, 10, 13, 8, 30, tzinfo=dt.timezone.utc),
        updated_at=dt.datetime(2025, 10, 14, 23, 59, tzinfo=dt.timezone.utc),
    )
    assert sub.total_tickets == 15
    assert sub.daily_sales[0].weekly_total == 15

    record = submission_record(sub)
    assert list(record) == EXPORT_COLUMNS
    assert record["Monday_Sasiri"] == 10
    assert record["Tuesday_Sasiri"] == 5
    assert record["Monday_Total"] == 10
    assert record["Tuesday_Total"] == 5
    assert record["Weekly Total"] == 15
    assert record["Created Date"] == "2025-10-13"
    assert record["Updated Date"] == "2025-10-14"

    matrix = [c for c in EXPORT_COLUMNS if "_" in c]
    nonzero = {c for c in matrix if record[c]}
    assert len(matrix) == 70
    assert nonzero == {"Monday_Sasiri", "Tuesday_Sasiri", "Monday_Total", "Tuesday_Total"}


def test_missing_brand_is_zero_for_every_day():
    record = submission_record(make_submission({"Jayoda": {"monday": 3}}))
    for day in DAYS_OF_WEEK:
        assert record[f"{day}_Shanida"] == 0


def test_scalar_fields():
    record = submission_record(make_submission(dealer_number="012345", full_name="Kamal Perera"))
    assert record["Submitted By"] == "Kamal Perera"
    assert record["Dealer Number"] == "012345"
    assert record["District"] == "Colombo"


def test_one_row_per_submission(sample_submissions):
    df = build_export_frame(sample_submissions)
    assert len(df) == len(sample_submissions)
    assert list(df.columns) == EXPORT_COLUMNS
    assert len(build_export_records(sample_submissions)) == 3


def test_csv_day_totals_survive_round_trip(sample_submissions):
    rows = list(csv.DictReader(io.StringIO(to_csv(sample_submissions))))
    assert len(rows) == 3
    for row in rows:
        for day in DAYS_OF_WEEK:
            brand_sum = sum(int(row[f"{day}_{b}"]) for b in LOTTERY_BRANDS)
            assert int(row[f"{day}_Total"]) == brand_sum


def test_csv_keeps_leading_zero_dealer_number():
    text = to_csv([make_submission(dealer_number="000123")])
    row = next(csv.DictReader(io.StringIO(text)))
    assert row["Dealer Number"] == "000123"


def test_csv_is_deterministic(sample_submissions):
    assert to_csv(sample_submissions) == to_csv(sample_submissions)


def test_csv_empty_has_header_only():
    lines = to_csv([]).splitlines()
    assert len(lines) == 1
    assert next(csv.reader(lines)) == EXPORT_COLUMNS
