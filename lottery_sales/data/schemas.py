"""
Typed submission records, the caller identity, and report filters.

Payloads are converted once here (camelCase dicts → dataclasses); nothing
downstream re-validates them.
"""
from __future__ import annotations

import datetime as dt
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from lottery_sales.config import DAY_FIELDS, MANAGER_ROLES
from lottery_sales.analytics.totals import coerce_counts, submission_total


def utcnow() -> dt.datetime:
    return dt.datetime.now(dt.timezone.utc)


def parse_datetime(value: Any) -> Optional[dt.datetime]:
    """Parse an ISO timestamp (trailing Z allowed) into an aware UTC datetime."""
    if value is None or value == "":
        return None
    if isinstance(value, dt.datetime):
        parsed = value
    elif isinstance(value, dt.date):
        parsed = dt.datetime(value.year, value.month, value.day)
    else:
        text = str(value).strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        parsed = dt.datetime.fromisoformat(text)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=dt.timezone.utc)
    return parsed.astimezone(dt.timezone.utc)


def _iso(value: Optional[dt.datetime]) -> Optional[str]:
    if value is None:
        return None
    return value.astimezone(dt.timezone.utc).isoformat().replace("+00:00", "Z")


# ---------------------------------------------------------------------------
# Records
# ---------------------------------------------------------------------------

@dataclass
class DailySale:
    """One brand's seven day counts within a submission."""
    brand_name: str
    monday: int = 0
    tuesday: int = 0
    wednesday: int = 0
    thursday: int = 0
    friday: int = 0
    saturday: int = 0
    sunday: int = 0
    weekly_total: int = 0
    submission_id: Optional[str] = None

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any], submission_id: str | None = None) -> "DailySale":
        """Build a row from a raw payload, recomputing the weekly total."""
        counts = coerce_counts(raw)
        return cls(
            brand_name=str(raw.get("brandName") or ""),
            weekly_total=sum(counts.values()),
            submission_id=submission_id or raw.get("submissionId"),
            **counts,
        )

    def counts(self) -> dict[str, int]:
        return {day: getattr(self, day) for day in DAY_FIELDS}

    def to_dict(self) -> dict:
        return {
            "submissionId": self.submission_id,
            "brandName": self.brand_name,
            **self.counts(),
            "weeklyTotal": self.weekly_total,
        }


@dataclass
class Owner:
    """Read-only view of the submitting user."""
    id: str
    username: str = ""
    full_name: Optional[str] = None

    @property
    def display_name(self) -> str:
        return self.full_name or self.username

    def to_dict(self) -> dict:
        return {"id": self.id, "username": self.username, "fullName": self.full_name}


@dataclass
class Submission:
    """One dealer's weekly sales report."""
    id: str
    user_id: str
    district: str = ""
    city: str = ""
    dealer_name: str = ""
    dealer_number: str = ""
    assistant_name: str = ""
    sales_method: str = ""
    sales_location: str = ""
    is_draft: bool = True
    total_tickets: int = 0
    created_at: dt.datetime = field(default_factory=utcnow)
    updated_at: dt.datetime = field(default_factory=utcnow)
    daily_sales: list[DailySale] = field(default_factory=list)
    owner: Optional[Owner] = None

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> "Submission":
        """Convert a stored/posted camelCase record into a Submission.

        ``weeklyTotal`` and ``totalTickets`` in the input are ignored and
        recomputed from the day counts.
        """
        sub_id = str(raw["id"])
        sales = [DailySale.from_dict(s, sub_id) for s in raw.get("dailySales") or []]
        user = raw.get("user") or {}
        user_id = str(raw.get("userId") or user.get("id") or "")
        owner = Owner(
            id=user_id,
            username=user.get("username") or "",
            full_name=user.get("fullName"),
        ) if user or user_id else None
        created = parse_datetime(raw.get("createdAt")) or utcnow()
        return cls(
            id=sub_id,
            user_id=user_id,
            district=raw.get("district") or "",
            city=raw.get("city") or "",
            dealer_name=raw.get("dealerName") or "",
            dealer_number=str(raw.get("dealerNumber") or ""),
            assistant_name=raw.get("assistantName") or "",
            sales_method=raw.get("salesMethod") or "",
            sales_location=raw.get("salesLocation") or "",
            is_draft=bool(raw.get("isDraft", True)),
            total_tickets=submission_total(sales),
            created_at=created,
            updated_at=parse_datetime(raw.get("updatedAt")) or created,
            daily_sales=sales,
            owner=owner,
        )

    @property
    def submitted_by(self) -> str:
        return self.owner.display_name if self.owner else ""

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "userId": self.user_id,
            "district": self.district,
            "city": self.city,
            "dealerName": self.dealer_name,
            "dealerNumber": self.dealer_number,
            "assistantName": self.assistant_name,
            "salesMethod": self.sales_method,
            "salesLocation": self.sales_location,
            "isDraft": self.is_draft,
            "totalTickets": self.total_tickets,
            "createdAt": _iso(self.created_at),
            "updatedAt": _iso(self.updated_at),
            "user": self.owner.to_dict() if self.owner else None,
            "dailySales": [s.to_dict() for s in self.daily_sales],
        }


# ---------------------------------------------------------------------------
# Caller identity (supplied by the upstream auth layer)
# ---------------------------------------------------------------------------

@dataclass
class CurrentUser:
    id: str
    role: str
    username: str = ""
    full_name: Optional[str] = None

    @property
    def is_manager(self) -> bool:
        return self.role in MANAGER_ROLES

    def as_owner(self) -> Owner:
        return Owner(id=self.id, username=self.username, full_name=self.full_name)


# ---------------------------------------------------------------------------
# Report filter
# ---------------------------------------------------------------------------

@dataclass
class SubmissionFilter:
    """Query filter for report and listing endpoints."""
    start_date: Optional[dt.date] = None
    end_date: Optional[dt.date] = None
    district: Optional[str] = None
    city: Optional[str] = None
    is_draft: Optional[bool] = None

    def resolve(self) -> tuple[Optional[dt.datetime], Optional[dt.datetime]]:
        """Return the inclusive [start, end] instants, or (None, None).

        The range only applies when both bounds are given; the end date
        covers its whole day.
        """
        if self.start_date is None or self.end_date is None:
            return None, None
        start = dt.datetime.combine(self.start_date, dt.time.min, tzinfo=dt.timezone.utc)
        end = dt.datetime.combine(self.end_date, dt.time.max, tzinfo=dt.timezone.utc)
        return start, end

    def matches(self, submission: Submission) -> bool:
        if self.is_draft is not None and submission.is_draft != self.is_draft:
            return False
        start, end = self.resolve()
        if start is not None and not (start <= submission.created_at <= end):
            return False
        if self.district and self.district.lower() not in submission.district.lower():
            return False
        if self.city and self.city.lower() not in submission.city.lower():
            return False
        return True

    @property
    def date_range(self) -> dict:
        return {
            "startDate": self.start_date.isoformat() if self.start_date else None,
            "endDate": self.end_date.isoformat() if self.end_date else None,
        }

    @property
    def filters(self) -> dict:
        return {"district": self.district, "city": self.city}
