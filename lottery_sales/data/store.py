"""
SubmissionStore — in-memory submission repository with an optional JSON snapshot.

Loaded once at startup, queried on every request. The report and export
code only depends on the SubmissionRepository protocol, so swapping this
for a database-backed repository only changes this module.
"""
from __future__ import annotations

import json
import logging
import threading
from pathlib import Path
from typing import Iterable, Optional, Protocol

from lottery_sales.data.schemas import CurrentUser, Submission, SubmissionFilter

logger = logging.getLogger(__name__)


class SubmissionRepository(Protocol):
    """What the reporting and write paths need from persistence."""

    def fetch(
        self,
        flt: SubmissionFilter | None = None,
        user: CurrentUser | None = None,
    ) -> list[Submission]: ...

    def get(self, submission_id: str) -> Optional[Submission]: ...

    def add(self, submission: Submission) -> Submission: ...

    def replace(self, submission: Submission) -> Submission: ...

    def remove(self, submission_id: str) -> None: ...


class SubmissionStore:
    """Submissions keyed by id, newest-first on every fetch."""

    def __init__(
        self,
        path: Path | None = None,
        submissions: Iterable[Submission] = (),
    ) -> None:
        self.path = path
        self._submissions: dict[str, Submission] = {s.id: s for s in submissions}
        self._lock = threading.RLock()
        self._loaded = path is None

    # ------------------------------------------------------------------
    # Loading / persistence
    # ------------------------------------------------------------------

    def load(self) -> "SubmissionStore":
        """Read the JSON snapshot, if one exists."""
        with self._lock:
            self._submissions = {}
            if self.path is not None and self.path.exists():
                raw = json.loads(self.path.read_text(encoding="utf-8"))
                for record in raw.get("submissions", []):
                    sub = Submission.from_dict(record)
                    self._submissions[sub.id] = sub
                logger.info("Loaded %d submissions from %s", len(self._submissions), self.path)
            else:
                logger.info("No submission snapshot found — starting with empty store")
            self._loaded = True
        return self

    def _commit(self, submissions: dict[str, Submission]) -> None:
        """Persist ``submissions``, then make it the live set.

        A failed snapshot write leaves the in-memory state untouched.
        """
        self._flush(submissions)
        self._submissions = submissions

    def _flush(self, submissions: dict[str, Submission]) -> None:
        if self.path is None:
            return
        self.path.parent.mkdir(parents=True, exist_ok=True)
        payload = {"submissions": [s.to_dict() for s in submissions.values()]}
        tmp = self.path.with_suffix(".tmp")
        tmp.write_text(json.dumps(payload, indent=2), encoding="utf-8")
        tmp.replace(self.path)

    @property
    def is_loaded(self) -> bool:
        return self._loaded

    def count(self) -> int:
        return len(self._submissions)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def fetch(
        self,
        flt: SubmissionFilter | None = None,
        user: CurrentUser | None = None,
    ) -> list[Submission]:
        """Submissions matching ``flt``, newest first.

        Non-manager callers only ever see their own submissions.
        """
        with self._lock:
            rows = list(self._submissions.values())
        if user is not None and not user.is_manager:
            rows = [s for s in rows if s.user_id == user.id]
        if flt is not None:
            rows = [s for s in rows if flt.matches(s)]
        rows.sort(key=lambda s: s.created_at, reverse=True)
        return rows

    def get(self, submission_id: str) -> Optional[Submission]:
        with self._lock:
            return self._submissions.get(submission_id)

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    def add(self, submission: Submission) -> Submission:
        with self._lock:
            self._commit({**self._submissions, submission.id: submission})
        return submission

    def replace(self, submission: Submission) -> Submission:
        """Swap in a submission together with its full DailySale set."""
        with self._lock:
            if submission.id not in self._submissions:
                raise KeyError(submission.id)
            self._commit({**self._submissions, submission.id: submission})
        return submission

    def remove(self, submission_id: str) -> None:
        with self._lock:
            remaining = dict(self._submissions)
            remaining.pop(submission_id, None)
            self._commit(remaining)
