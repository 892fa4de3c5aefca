"""
Small helpers shared by the aggregation and export modules.
"""
from __future__ import annotations

import datetime as dt
import math

import numpy as np
import pandas as pd


def start_of_week(now: dt.datetime) -> dt.datetime:
    """Most recent Sunday 00:00 UTC (today, if today is Sunday)."""
    now = now.astimezone(dt.timezone.utc)
    days_since_sunday = (now.weekday() + 1) % 7
    day = now.date() - dt.timedelta(days=days_since_sunday)
    return dt.datetime.combine(day, dt.time.min, tzinfo=dt.timezone.utc)


def start_of_month(now: dt.datetime) -> dt.datetime:
    """First day of the current month, 00:00 UTC."""
    now = now.astimezone(dt.timezone.utc)
    return dt.datetime(now.year, now.month, 1, tzinfo=dt.timezone.utc)


def iso_date(value: dt.datetime) -> str:
    """Calendar date only (YYYY-MM-DD), in UTC."""
    return value.astimezone(dt.timezone.utc).date().isoformat()


def sanitize_for_json(obj):
    """Recursively convert numpy/pandas types to native Python for JSON serialization."""
    if isinstance(obj, dict):
        return {str(k): sanitize_for_json(v) for k, v in obj.items() if k is not None}
    if isinstance(obj, (list, tuple)):
        return [sanitize_for_json(v) for v in obj]
    if isinstance(obj, np.integer):
        return int(obj)
    if isinstance(obj, np.floating):
        v = float(obj)
        return 0.0 if (math.isnan(v) or math.isinf(v)) else v
    if isinstance(obj, np.bool_):
        return bool(obj)
    if isinstance(obj, np.ndarray):
        return sanitize_for_json(obj.tolist())
    if isinstance(obj, float):
        return 0.0 if (math.isnan(obj) or math.isinf(obj)) else obj
    if pd.api.types.is_scalar(obj) and pd.isna(obj):
        return None
    return obj
