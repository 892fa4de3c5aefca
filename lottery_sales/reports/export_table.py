"""
Flat export table — one row per submission, day × brand cross-tab.

Column layout (81 columns, order is part of the file format):
  8 scalar columns, then for each day 9 brand columns + a day total,
  then Weekly Total, Created Date, Updated Date.
"""
from __future__ import annotations

import logging
from typing import Iterable

import pandas as pd

from lottery_sales.config import DAYS_OF_WEEK, DAY_FIELDS, LOTTERY_BRANDS
from lottery_sales.data.schemas import Submission
from lottery_sales.analytics.common import iso_date

logger = logging.getLogger(__name__)


# (label, Submission attribute)
SCALAR_COLUMNS = [
    ("Submitted By", "submitted_by"),
    ("District", "district"),
    ("City", "city"),
    ("Dealer Name", "dealer_name"),
    ("Dealer Number", "dealer_number"),
    ("Assistant Name", "assistant_name"),
    ("Sales Method", "sales_method"),
    ("Sales Location", "sales_location"),
]

WEEKLY_TOTAL_COLUMN = "Weekly Total"
CREATED_COLUMN = "Created Date"
UPDATED_COLUMN = "Updated Date"
TRAILING_COLUMNS = [WEEKLY_TOTAL_COLUMN, CREATED_COLUMN, UPDATED_COLUMN]


def day_brand_column(day: str, brand: str) -> str:
    return f"{day}_{brand}"


def day_total_column(day: str) -> str:
    return f"{day}_Total"


def matrix_columns(
    days: list[str] = DAYS_OF_WEEK,
    brands: list[str] = LOTTERY_BRANDS,
) -> list[str]:
    """Day-major brand columns, each day closed by its total column."""
    cols: list[str] = []
    for day in days:
        cols.extend(day_brand_column(day, brand) for brand in brands)
        cols.append(day_total_column(day))
    return cols


EXPORT_COLUMNS = (
    [label for label, _ in SCALAR_COLUMNS]
    + matrix_columns()
    + TRAILING_COLUMNS
)


def _brand_counts(submission: Submission) -> dict[str, dict[str, int]]:
    """{brand: {day_field: count}}; repeated brand rows are summed."""
    counts: dict[str, dict[str, int]] = {}
    for sale in submission.daily_sales:
        bucket = counts.setdefault(sale.brand_name, {day: 0 for day in DAY_FIELDS})
        for day in DAY_FIELDS:
            bucket[day] += getattr(sale, day)
    return counts


def submission_record(submission: Submission) -> dict:
    """Flatten one submission into an ordered EXPORT_COLUMNS dict."""
    record: dict = {label: getattr(submission, attr) for label, attr in SCALAR_COLUMNS}

    counts = _brand_counts(submission)
    for day, day_field in zip(DAYS_OF_WEEK, DAY_FIELDS):
        day_total = 0
        for brand in LOTTERY_BRANDS:
            value = counts.get(brand, {}).get(day_field, 0)
            record[day_brand_column(day, brand)] = value
            day_total += value
        record[day_total_column(day)] = day_total

    record[WEEKLY_TOTAL_COLUMN] = sum(s.weekly_total for s in submission.daily_sales)
    record[CREATED_COLUMN] = iso_date(submission.created_at)
    record[UPDATED_COLUMN] = iso_date(submission.updated_at)
    return record


def build_export_records(submissions: Iterable[Submission]) -> list[dict]:
    return [submission_record(s) for s in submissions]


def build_export_frame(submissions: Iterable[Submission]) -> pd.DataFrame:
    """Export records as a DataFrame with the fixed 81-column order."""
    records = build_export_records(submissions)
    return pd.DataFrame(records, columns=EXPORT_COLUMNS)


def to_csv(submissions: Iterable[Submission]) -> str:
    """CSV text, header row = column labels. Same input → same bytes."""
    df = build_export_frame(submissions)
    logger.info("Formatting CSV export (%d rows)", len(df))
    return df.to_csv(index=False, lineterminator="\n")
