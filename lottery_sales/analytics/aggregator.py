"""
Submission aggregator — dashboard counts, brand and location summaries.

All functions trust their input: ownership scoping and filtering happen in
the repository before the list reaches this module. Empty input gives
zero counts and empty collections, never an error.

The brand and location summaries keep groups in first-seen order, so they
accumulate into plain dicts; only the sorted district summary goes through a
pandas groupby.
"""
from __future__ import annotations

import datetime as dt
from typing import Iterable

import pandas as pd

from lottery_sales.config import DAY_FIELDS, LOTTERY_BRANDS
from lottery_sales.data.schemas import Submission, utcnow
from lottery_sales.analytics.common import start_of_week, start_of_month, sanitize_for_json


def _empty_bucket() -> dict[str, int]:
    bucket = {day: 0 for day in DAY_FIELDS}
    bucket["total"] = 0
    return bucket


# ---------------------------------------------------------------------------
# Dashboard
# ---------------------------------------------------------------------------

def dashboard_stats(submissions: Iterable[Submission], now: dt.datetime | None = None) -> dict:
    """Finalized submission counts (all / this week / this month) plus drafts."""
    now = now or utcnow()
    week_start = start_of_week(now)
    month_start = start_of_month(now)

    stats = {
        "totalSubmissions": 0,
        "thisWeekSubmissions": 0,
        "thisMonthSubmissions": 0,
        "draftSubmissions": 0,
    }
    for sub in submissions:
        if sub.is_draft:
            stats["draftSubmissions"] += 1
            continue
        stats["totalSubmissions"] += 1
        if week_start <= sub.created_at <= now:
            stats["thisWeekSubmissions"] += 1
        if month_start <= sub.created_at <= now:
            stats["thisMonthSubmissions"] += 1
    return stats


# ---------------------------------------------------------------------------
# Totals across a submission set
# ---------------------------------------------------------------------------

def total_tickets(submissions: Iterable[Submission]) -> int:
    return sum(sub.total_tickets for sub in submissions)


def brand_summary(
    submissions: Iterable[Submission],
    zero_fill: bool = False,
) -> dict[str, dict[str, int]]:
    """Per-brand day sums and weekly total.

    Brands with no DailySale rows are absent unless ``zero_fill`` is set,
    in which case the nine fixed brands are always present (first, in
    their fixed order).
    """
    summary: dict[str, dict[str, int]] = {}
    if zero_fill:
        for brand in LOTTERY_BRANDS:
            summary[brand] = _empty_bucket()

    for sub in submissions:
        for sale in sub.daily_sales:
            bucket = summary.setdefault(sale.brand_name, _empty_bucket())
            for day in DAY_FIELDS:
                bucket[day] += getattr(sale, day)
            bucket["total"] += sale.weekly_total
    return summary


def location_summary(submissions: Iterable[Submission]) -> list[dict]:
    """Submission count and ticket total per literal "district, city" key.

    No trimming or case folding: "Colombo" and "colombo" are separate groups.
    """
    groups: dict[str, dict] = {}
    for sub in submissions:
        key = f"{sub.district}, {sub.city}"
        entry = groups.get(key)
        if entry is None:
            entry = groups[key] = {
                "district": sub.district,
                "city": sub.city,
                "submissions": 0,
                "totalTickets": 0,
            }
        entry["submissions"] += 1
        entry["totalTickets"] += sub.total_tickets
    return list(groups.values())


DISTRICT_SUMMARY_COLUMNS = ["district", "totalSubmissions", "totalTickets", "uniqueDealers"]


def district_summary(submissions: Iterable[Submission]) -> list[dict]:
    """Per-district submissions, tickets and distinct dealer names, sorted by district."""
    rows = [
        {
            "id": sub.id,
            "district": sub.district,
            "dealer_name": sub.dealer_name,
            "total_tickets": sub.total_tickets,
        }
        for sub in submissions
    ]
    if not rows:
        return []

    df = pd.DataFrame(rows)
    grouped = df.groupby("district", sort=True).agg(
        totalSubmissions=("id", "nunique"),
        totalTickets=("total_tickets", "sum"),
        uniqueDealers=("dealer_name", "nunique"),
    ).reset_index()
    return sanitize_for_json(grouped[DISTRICT_SUMMARY_COLUMNS].to_dict("records"))
