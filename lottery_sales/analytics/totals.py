"""
Totals calculator — weekly per-brand totals and submission grand totals.

Counts arrive from form payloads and may be strings, floats, blanks or
garbage. Everything is coerced to a non-negative int before summing;
nothing in here raises.
"""
from __future__ import annotations

import math
import re
from typing import Any, Iterable, Mapping

from lottery_sales.config import DAY_FIELDS

_LEADING_INT_RE = re.compile(r"^\s*([+-]?\d+)")


def coerce_count(value: Any) -> int:
    """Coerce a raw day count to an int >= 0 (0 for anything unparseable)."""
    if value is None or isinstance(value, bool):
        return 0
    if isinstance(value, int):
        return max(value, 0)
    if isinstance(value, float):
        if math.isnan(value) or math.isinf(value):
            return 0
        return max(int(value), 0)
    m = _LEADING_INT_RE.match(str(value))
    if not m:
        return 0
    return max(int(m.group(1)), 0)


def coerce_counts(counts: Mapping[str, Any]) -> dict[str, int]:
    """Return {monday..sunday: int} with every missing/bad day set to 0."""
    return {day: coerce_count(counts.get(day)) for day in DAY_FIELDS}


def weekly_total(counts: Mapping[str, Any]) -> int:
    """Sum of the seven day counts."""
    return sum(coerce_counts(counts).values())


def submission_total(daily_sales: Iterable[Any]) -> int:
    """Sum of each daily sale's weekly total.

    Accepts DailySale records or raw dicts carrying ``weeklyTotal``.
    """
    total = 0
    for sale in daily_sales:
        if isinstance(sale, Mapping):
            total += coerce_count(sale.get("weeklyTotal"))
        else:
            total += coerce_count(getattr(sale, "weekly_total", 0))
    return total
