"""
Report payloads for the summary, dashboard and export endpoints.

Reports only cover finalized submissions; drafts appear solely as the
dashboard's draft count.
"""
from __future__ import annotations

import dataclasses
import datetime as dt
import logging
from dataclasses import dataclass

from lottery_sales.config import (
    CSV_FILENAME, XLSX_FILENAME, XLSX_MEDIA_TYPE,
    SUMMARY_SUBMISSION_LIMIT, RECENT_SUBMISSION_LIMIT,
)
from lottery_sales.data.schemas import CurrentUser, SubmissionFilter, utcnow
from lottery_sales.data.store import SubmissionRepository
from lottery_sales.analytics.aggregator import (
    brand_summary, dashboard_stats, location_summary, total_tickets,
)
from lottery_sales.reports import export_table, sales_workbook
from lottery_sales.errors import ExportError

logger = logging.getLogger(__name__)

EXPORT_FORMATS = ("csv", "excel", "json")


def _finalized(flt: SubmissionFilter | None) -> SubmissionFilter:
    flt = flt or SubmissionFilter()
    return dataclasses.replace(flt, is_draft=False)


def generate_summary_json(
    repo: SubmissionRepository,
    user: CurrentUser,
    flt: SubmissionFilter | None = None,
) -> dict:
    flt = _finalized(flt)
    submissions = repo.fetch(flt, user)
    logger.info("Summary report for %s: %d submissions", user.id, len(submissions))

    return {
        "summary": {
            "totalSubmissions": len(submissions),
            "totalTickets": total_tickets(submissions),
            "dateRange": flt.date_range,
            "filters": flt.filters,
        },
        "brandSummary": brand_summary(submissions),
        "locationSummary": location_summary(submissions),
        "submissions": [s.to_dict() for s in submissions[:SUMMARY_SUBMISSION_LIMIT]],
    }


def generate_dashboard_json(
    repo: SubmissionRepository,
    user: CurrentUser,
    now: dt.datetime | None = None,
) -> dict:
    submissions = repo.fetch(None, user)
    finalized = [s for s in submissions if not s.is_draft]
    return {
        "stats": dashboard_stats(submissions, now or utcnow()),
        "recentSubmissions": [s.to_dict() for s in finalized[:RECENT_SUBMISSION_LIMIT]],
    }


@dataclass
class ExportFile:
    content: bytes
    media_type: str
    filename: str | None = None


def generate_export(
    repo: SubmissionRepository,
    user: CurrentUser,
    flt: SubmissionFilter | None = None,
    fmt: str = "csv",
) -> ExportFile | list[dict]:
    """Build the complete export in memory.

    ``json`` returns the flat records; ``csv``/``excel`` return file bytes.
    Any formatting failure is raised as ExportError before anything is sent.
    """
    if fmt not in EXPORT_FORMATS:
        raise ValueError(f"Unknown export format: {fmt}")

    submissions = repo.fetch(_finalized(flt), user)
    logger.info("Export (%s) for %s: %d submissions", fmt, user.id, len(submissions))

    try:
        if fmt == "json":
            return export_table.build_export_records(submissions)
        if fmt == "csv":
            text = export_table.to_csv(submissions)
            return ExportFile(text.encode("utf-8"), "text/csv; charset=utf-8", CSV_FILENAME)
        data = sales_workbook.generate_excel_bytes(submissions)
        return ExportFile(data, XLSX_MEDIA_TYPE, XLSX_FILENAME)
    except Exception as exc:
        logger.exception("Failed to build %s export", fmt)
        raise ExportError("Failed to export data") from exc
