"""
Submission endpoints — list, read, create/update, delete.
"""
from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query
from fastapi.responses import JSONResponse

from lottery_sales.config import DEFAULT_PAGE_SIZE
from lottery_sales.data.schemas import CurrentUser
from lottery_sales.data.store import SubmissionRepository
from lottery_sales.data.submissions import (
    create_or_update_submission, delete_submission, get_submission, list_submissions,
)
from lottery_sales.api.dependencies import get_store, get_current_user
from lottery_sales.api.response_models import MessageResponse, SubmissionPayload, SubmissionResponse

router = APIRouter(prefix="/api/submissions", tags=["submissions"])


@router.get("")
def list_(
    page: int = Query(1, ge=1),
    limit: int = Query(DEFAULT_PAGE_SIZE, ge=1),
    isDraft: Optional[bool] = Query(None),
    store: SubmissionRepository = Depends(get_store),
    user: CurrentUser = Depends(get_current_user),
):
    return list_submissions(store, user, page, limit, isDraft)


@router.get("/{submission_id}")
def read(
    submission_id: str,
    store: SubmissionRepository = Depends(get_store),
    user: CurrentUser = Depends(get_current_user),
):
    return get_submission(store, user, submission_id).to_dict()


@router.post("", response_model=SubmissionResponse)
def create_or_update(
    req: SubmissionPayload,
    store: SubmissionRepository = Depends(get_store),
    user: CurrentUser = Depends(get_current_user),
):
    """Create a submission, or replace an existing one when ``id`` is set."""
    submission, created = create_or_update_submission(store, user, req.model_dump())
    if created:
        return JSONResponse(
            status_code=201,
            content={"message": "Submission created successfully", "submission": submission.to_dict()},
        )
    return SubmissionResponse(message="Submission updated successfully", submission=submission.to_dict())


@router.delete("/{submission_id}", response_model=MessageResponse)
def delete(
    submission_id: str,
    store: SubmissionRepository = Depends(get_store),
    user: CurrentUser = Depends(get_current_user),
):
    delete_submission(store, user, submission_id)
    return MessageResponse(message="Submission deleted successfully")
