import pytest

from lottery_sales.analytics.totals import coerce_count, weekly_total, submission_total
from lottery_sales.data.schemas import DailySale


@pytest.mark.parametrize("raw, expected", [
    (5, 5),
    ("12", 12),
    (" 7 ", 7),
    ("12abc", 12),
    ("abc", 0),
    ("", 0),
    (None, 0),
    (-3, 0),
    ("-3", 0),
    (4.9, 4),
    (float("nan"), 0),
    (True, 0),
])
def test_coerce_count(raw, expected):
    assert coerce_count(raw) == expected


def test_weekly_total_sums_seven_days():
    counts = {"monday": 1, "tuesday": 2, "wednesday": 3, "thursday": 4,
              "friday": 5, "saturday": 6, "sunday": 7}
    assert weekly_total(counts) == 28


def test_weekly_total_missing_days_are_zero():
    assert weekly_total({"monday": 10, "tuesday": 5}) == 15
    assert weekly_total({}) == 0


def test_malformed_wednesday_is_ignored():
    counts = {"monday": 2, "wednesday": "abc", "friday": "3"}
    assert weekly_total(counts) == 5


def test_submission_total_from_records_and_dicts():
    sales = [
        DailySale.from_dict({"brandName": "Sasiri", "monday": 10, "tuesday": 5}),
        DailySale.from_dict({"brandName": "Jayoda", "sunday": "4"}),
    ]
    assert submission_total(sales) == 19
    assert submission_total([{"weeklyTotal": 3}, {"weeklyTotal": "x"}]) == 3
    assert submission_total([]) == 0


def test_daily_sale_ignores_posted_weekly_total():
    sale = DailySale.from_dict({"brandName": "Sasiri", "monday": 1, "weeklyTotal": 999})
    assert sale.weekly_total == 1
    assert sale.weekly_total == sum(sale.counts().values())
