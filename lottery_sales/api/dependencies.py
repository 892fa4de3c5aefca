"""
FastAPI dependencies — SubmissionStore singleton, caller identity, filter parsing.
"""
from __future__ import annotations

import datetime as dt
import logging
from typing import Optional

from fastapi import Header, HTTPException, Query

from lottery_sales.config import ALL_ROLES
from lottery_sales.data.schemas import CurrentUser, SubmissionFilter
from lottery_sales.data.store import SubmissionRepository
from lottery_sales.errors import StoreUnavailable

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Global store singleton (set during startup)
# ---------------------------------------------------------------------------
_store: SubmissionRepository | None = None


def set_store(store: SubmissionRepository | None) -> None:
    global _store
    _store = store


def get_store() -> SubmissionRepository:
    if _store is None or not getattr(_store, "is_loaded", True):
        raise StoreUnavailable()
    return _store


# ---------------------------------------------------------------------------
# Caller identity (issued and verified by the upstream auth layer)
# ---------------------------------------------------------------------------

def get_current_user(
    x_user_id: Optional[str] = Header(None),
    x_user_role: Optional[str] = Header(None),
    x_username: Optional[str] = Header(None),
    x_full_name: Optional[str] = Header(None),
) -> CurrentUser:
    if not x_user_id or not x_user_role:
        raise HTTPException(401, "Access token required")
    role = x_user_role.strip().upper()
    if role not in ALL_ROLES:
        raise HTTPException(401, f"Unknown role: {x_user_role}")
    return CurrentUser(
        id=x_user_id,
        role=role,
        username=x_username or "",
        full_name=x_full_name,
    )


# ---------------------------------------------------------------------------
# Report filter parsing from query params
# ---------------------------------------------------------------------------

def _parse_date(value: Optional[str], name: str) -> Optional[dt.date]:
    """Leading YYYY-MM-DD of a date or timestamp; unparseable → no bound."""
    if not value:
        return None
    try:
        return dt.date.fromisoformat(value.strip()[:10])
    except ValueError:
        logger.warning("Ignoring unparseable %s=%r", name, value)
        return None


def parse_filter(
    startDate: Optional[str] = Query(None, description="YYYY-MM-DD"),
    endDate: Optional[str] = Query(None, description="YYYY-MM-DD"),
    district: Optional[str] = Query(None, description="Case-insensitive substring"),
    city: Optional[str] = Query(None, description="Case-insensitive substring"),
) -> SubmissionFilter:
    """Parse report query parameters into a SubmissionFilter."""
    return SubmissionFilter(
        start_date=_parse_date(startDate, "startDate"),
        end_date=_parse_date(endDate, "endDate"),
        district=district or None,
        city=city or None,
    )
