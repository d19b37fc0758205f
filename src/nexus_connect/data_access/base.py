from typing import Any, Protocol

from nexus_connect.models.submission import Submission, SubmissionForm


class SubmissionRepository(Protocol):
    """Storage contract for submissions.

    Stores generate the id and ``created_at`` themselves; callers only hand
    over validated form data plus any extra attributes (contact triage).
    ``set_thank_you_message`` returns ``None`` for an unknown id and raises
    ``ThankYouMessageConflictError`` when the message was already set.
    """

    def create(self, form: SubmissionForm, **attributes: Any) -> Submission: ...

    def get(self, submission_id: str) -> Submission | None: ...

    def list(self) -> list[Submission]: ...

    def set_thank_you_message(self, submission_id: str, message: str) -> Submission | None: ...
