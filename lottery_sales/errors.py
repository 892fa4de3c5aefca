"""
Domain exceptions, mapped to HTTP status codes by the API layer.
"""
from __future__ import annotations


class LotterySalesError(Exception):
    """Base class for all service errors."""

    status_code = 500

    def __init__(self, message: str = "Internal server error") -> None:
        super().__init__(message)
        self.message = message


class SubmissionNotFound(LotterySalesError):
    status_code = 404

    def __init__(self, submission_id: str) -> None:
        super().__init__("Submission not found")
        self.submission_id = submission_id


class AccessDenied(LotterySalesError):
    status_code = 403

    def __init__(self, message: str = "Access denied") -> None:
        super().__init__(message)


class SubmissionValidationError(LotterySalesError):
    """Raised for final submissions that fail field validation."""

    status_code = 400

    def __init__(self, errors: list[dict]) -> None:
        super().__init__("Validation failed")
        self.errors = errors


class StoreUnavailable(LotterySalesError):
    status_code = 503

    def __init__(self, message: str = "Data not loaded yet") -> None:
        super().__init__(message)


class ExportError(LotterySalesError):
    """Building an export file failed; no partial file is ever returned."""

    status_code = 500
