"""Submission records, filters and the submission store."""
from .schemas import DailySale, Owner, Submission, SubmissionFilter, CurrentUser
from .store import SubmissionRepository, SubmissionStore
