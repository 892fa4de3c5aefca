"""
Report endpoints — summary, dashboard, CSV/Excel export.
"""
from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import JSONResponse, Response

from lottery_sales.data.schemas import CurrentUser, SubmissionFilter
from lottery_sales.data.store import SubmissionRepository
from lottery_sales.api.dependencies import get_store, get_current_user, parse_filter
from lottery_sales.analytics.common import sanitize_for_json
from lottery_sales.reports import sales_report

router = APIRouter(prefix="/api/reports", tags=["reports"])


def _safe_json(data) -> JSONResponse:
    return JSONResponse(content=sanitize_for_json(data))


@router.get("/summary")
def summary(
    store: SubmissionRepository = Depends(get_store),
    user: CurrentUser = Depends(get_current_user),
    flt: SubmissionFilter = Depends(parse_filter),
):
    """Totals, brand and location summaries, and the 50 most recent submissions."""
    return _safe_json(sales_report.generate_summary_json(store, user, flt))


@router.get("/dashboard")
def dashboard(
    store: SubmissionRepository = Depends(get_store),
    user: CurrentUser = Depends(get_current_user),
):
    """Week/month/draft counts and the five most recent submissions."""
    return _safe_json(sales_report.generate_dashboard_json(store, user))


@router.get("/export")
def export(
    format: str = Query("csv", description="csv|excel|json"),
    store: SubmissionRepository = Depends(get_store),
    user: CurrentUser = Depends(get_current_user),
    flt: SubmissionFilter = Depends(parse_filter),
):
    if format not in sales_report.EXPORT_FORMATS:
        raise HTTPException(400, f"Invalid format: {format}. Valid: {list(sales_report.EXPORT_FORMATS)}")

    result = sales_report.generate_export(store, user, flt, format)
    if isinstance(result, list):
        return _safe_json(result)
    return Response(
        content=result.content,
        media_type=result.media_type,
        headers={"Content-Disposition": f"attachment; filename={result.filename}"},
    )
