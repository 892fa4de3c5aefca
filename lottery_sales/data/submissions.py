"""
Submission write path — validation, totals, ownership rules.

Every create/update rebuilds the whole DailySale set and recomputes the
weekly totals and the submission total before anything is stored.
"""
from __future__ import annotations

import datetime as dt
import logging
import math
import re
import uuid
from typing import Any, Mapping, Optional

from lottery_sales.config import DEALER_NUMBER_LENGTH, SRI_LANKA_DISTRICTS, DEFAULT_PAGE_SIZE
from lottery_sales.analytics.totals import submission_total
from lottery_sales.data.schemas import (
    CurrentUser, DailySale, Submission, SubmissionFilter, utcnow,
)
from lottery_sales.data.store import SubmissionRepository
from lottery_sales.errors import AccessDenied, SubmissionNotFound, SubmissionValidationError

logger = logging.getLogger(__name__)

_DIGITS_RE = re.compile(r"^\d+$")

_REQUIRED_TEXT = [
    ("district", "District is required"),
    ("city", "City is required"),
    ("dealerName", "Dealer name is required"),
    ("dealerNumber", "Dealer number is required"),
    ("assistantName", "Assistant name is required"),
    ("salesMethod", "Sales method is required"),
    ("salesLocation", "Sales location is required"),
]


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------

def _blank(value: Any) -> bool:
    return value is None or str(value).strip() == ""


def validate_submission(payload: Mapping[str, Any]) -> list[dict]:
    """Return field errors for a final submission. Drafts always pass."""
    if payload.get("isDraft", True):
        return []

    errors: list[dict] = []
    for key, message in _REQUIRED_TEXT:
        if _blank(payload.get(key)):
            errors.append({"field": key, "message": message})

    district = payload.get("district")
    if not _blank(district) and district not in SRI_LANKA_DISTRICTS:
        errors.append({"field": "district", "message": "Please select a valid Sri Lankan district"})

    dealer_number = payload.get("dealerNumber")
    if not _blank(dealer_number):
        dealer_number = str(dealer_number)
        if not _DIGITS_RE.match(dealer_number):
            errors.append({"field": "dealerNumber", "message": "Dealer number must contain only numbers"})
        elif len(dealer_number) != DEALER_NUMBER_LENGTH:
            errors.append({
                "field": "dealerNumber",
                "message": f"Dealer number must be exactly {DEALER_NUMBER_LENGTH} digits",
            })

    if not isinstance(payload.get("dailySales"), list):
        errors.append({"field": "dailySales", "message": "Daily sales data is required"})

    return errors


# ---------------------------------------------------------------------------
# Create / update / delete
# ---------------------------------------------------------------------------

def _apply_payload(
    submission: Submission,
    payload: Mapping[str, Any],
    now: dt.datetime,
) -> Submission:
    """Copy scalar fields, replace the DailySale set, recompute totals."""
    submission.district = payload.get("district") or ""
    submission.city = payload.get("city") or ""
    submission.dealer_name = payload.get("dealerName") or ""
    submission.dealer_number = str(payload.get("dealerNumber") or "")
    submission.assistant_name = payload.get("assistantName") or ""
    submission.sales_method = payload.get("salesMethod") or ""
    submission.sales_location = payload.get("salesLocation") or ""
    submission.is_draft = bool(payload.get("isDraft", True))

    raw_sales = payload.get("dailySales") or []
    submission.daily_sales = [DailySale.from_dict(s, submission.id) for s in raw_sales]
    submission.total_tickets = submission_total(submission.daily_sales)
    submission.updated_at = now
    return submission


def create_or_update_submission(
    repo: SubmissionRepository,
    user: CurrentUser,
    payload: Mapping[str, Any],
    now: dt.datetime | None = None,
) -> tuple[Submission, bool]:
    """Create a submission, or update it when the payload carries an ``id``.

    Returns (submission, created).
    """
    errors = validate_submission(payload)
    if errors:
        raise SubmissionValidationError(errors)

    now = now or utcnow()
    submission_id = payload.get("id")

    if submission_id:
        existing = repo.get(str(submission_id))
        if existing is None:
            raise SubmissionNotFound(str(submission_id))
        if not user.is_manager:
            if existing.user_id != user.id:
                raise AccessDenied()
            if not existing.is_draft:
                raise AccessDenied("Finalized submissions can only be changed by a manager")

        updated = Submission(
            id=existing.id,
            user_id=existing.user_id,
            created_at=existing.created_at,
            owner=existing.owner,
        )
        _apply_payload(updated, payload, now)
        repo.replace(updated)
        logger.info("Updated submission %s (%d tickets, draft=%s)",
                    updated.id, updated.total_tickets, updated.is_draft)
        return updated, False

    submission = Submission(
        id=str(uuid.uuid4()),
        user_id=user.id,
        created_at=now,
        owner=user.as_owner(),
    )
    _apply_payload(submission, payload, now)
    repo.add(submission)
    logger.info("Created submission %s (%d tickets, draft=%s)",
                submission.id, submission.total_tickets, submission.is_draft)
    return submission, True


def _readable(submission: Optional[Submission], user: CurrentUser, submission_id: str) -> Submission:
    if submission is None:
        raise SubmissionNotFound(submission_id)
    if not user.is_manager and submission.user_id != user.id:
        raise AccessDenied()
    return submission


def get_submission(repo: SubmissionRepository, user: CurrentUser, submission_id: str) -> Submission:
    return _readable(repo.get(submission_id), user, submission_id)


def delete_submission(repo: SubmissionRepository, user: CurrentUser, submission_id: str) -> None:
    """Managers may delete anything; assistants only their own."""
    _readable(repo.get(submission_id), user, submission_id)
    repo.remove(submission_id)
    logger.info("Deleted submission %s (by %s)", submission_id, user.id)


def list_submissions(
    repo: SubmissionRepository,
    user: CurrentUser,
    page: int = 1,
    limit: int = DEFAULT_PAGE_SIZE,
    is_draft: Optional[bool] = None,
) -> dict:
    """One page of the caller's visible submissions, newest first."""
    page = max(page, 1)
    limit = max(limit, 1)
    rows = repo.fetch(SubmissionFilter(is_draft=is_draft), user)
    offset = (page - 1) * limit
    return {
        "submissions": [s.to_dict() for s in rows[offset:offset + limit]],
        "pagination": {
            "page": page,
            "limit": limit,
            "total": len(rows),
            "pages": math.ceil(len(rows) / limit),
        },
    }
