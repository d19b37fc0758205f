import logging

from nexus_connect.core.exceptions import SubmissionNotFoundError
from nexus_connect.data_access.base import SubmissionRepository
from nexus_connect.models.submission import Submission, SubmissionForm
from nexus_connect.services.thank_you_service import ThankYouService

logger = logging.getLogger(__name__)

class SubmissionService:
    def __init__(
        self,
        repository: SubmissionRepository,
        thank_you_service: ThankYouService
    ):
        self.repository = repository
        self.thank_you_service = thank_you_service

    def create_submission(self, form: SubmissionForm) -> Submission:
        attributes = {}
        if form.mission_type == "contact":
            classification = self.thank_you_service.classify_contact(form.message, form.subject)
            attributes = {
                "category": classification.category,
                "priority": classification.priority,
                "ai_summary": classification.summary,
            }

        submission = self.repository.create(form, **attributes)

        message = self.thank_you_service.generate_thank_you(submission)
        updated = self.repository.set_thank_you_message(submission.id, message)
        if updated is None:
            raise SubmissionNotFoundError(submission.id)

        logger.info(
            f"Processed {updated.mission_type} submission {updated.id}.",
            extra={"submission_id": updated.id, "mission_type": updated.mission_type},
        )
        return updated

    def get_submission(self, submission_id: str) -> Submission:
        submission = self.repository.get(submission_id)
        if submission is None:
            raise SubmissionNotFoundError(submission_id)
        return submission

    def list_submissions(self) -> list[Submission]:
        return self.repository.list()
