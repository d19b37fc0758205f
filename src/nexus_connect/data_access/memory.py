from __future__ import annotations

import logging
import threading
import uuid
from datetime import datetime, timezone
from typing import Any, Callable

from nexus_connect.core.exceptions import ThankYouMessageConflictError
from nexus_connect.models.submission import SUBMISSION_MODELS, Submission, SubmissionForm

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class InMemorySubmissionRepository:
    """Process-local store. Nothing survives a restart."""

    def __init__(self, clock: Callable[[], datetime] = utc_now):
        self.clock = clock
        self._submissions: dict[str, Submission] = {}
        self._lock = threading.Lock()
        self._record_locks: dict[str, threading.Lock] = {}

    def _record_lock(self, submission_id: str) -> threading.Lock | None:
        with self._lock:
            return self._record_locks.get(submission_id)

    def create(self, form: SubmissionForm, **attributes: Any) -> Submission:
        model = SUBMISSION_MODELS[form.mission_type]
        submission = model(
            **form.model_dump(),
            **attributes,
            id=str(uuid.uuid4()),
            created_at=self.clock(),
        )
        with self._lock:
            self._submissions[submission.id] = submission
            self._record_locks[submission.id] = threading.Lock()
        logger.info(
            f"Stored {submission.mission_type} submission {submission.id}",
            extra={"submission_id": submission.id, "mission_type": submission.mission_type},
        )
        return submission

    def get(self, submission_id: str) -> Submission | None:
        with self._lock:
            return self._submissions.get(submission_id)

    def list(self) -> list[Submission]:
        with self._lock:
            submissions = list(self._submissions.values())
        return sorted(submissions, key=lambda s: s.created_at, reverse=True)

    def set_thank_you_message(self, submission_id: str, message: str) -> Submission | None:
        record_lock = self._record_lock(submission_id)
        if record_lock is None:
            return None

        with record_lock:
            submission = self.get(submission_id)
            if submission.ai_thank_you_message is not None:
                raise ThankYouMessageConflictError(submission_id)

            updated = submission.model_copy(update={"ai_thank_you_message": message})
            with self._lock:
                self._submissions[submission_id] = updated
            return updated
