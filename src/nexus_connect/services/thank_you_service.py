import logging
from datetime import datetime

from nexus_connect.core.exceptions import CompletionError, CompletionUnavailableError
from nexus_connect.models.assistant import (
    CONTACT_CATEGORIES,
    CONTACT_PRIORITIES,
    ContactClassification,
)
from nexus_connect.models.submission import Submission
from nexus_connect.services import prompts
from nexus_connect.services.assistant_service import parse_json_object
from nexus_connect.services.completion_client import CompletionClient

logger = logging.getLogger(__name__)


def mission_details(submission: Submission) -> str:
    """One line describing what the user actually did, for the prompt."""
    fields = submission.model_dump()
    if submission.mission_type == "benevolat":
        fields["skills"] = ", ".join(submission.skills)

    details = prompts.MISSION_DETAILS[submission.mission_type].format(**fields)
    for name, template in prompts.OPTIONAL_DETAILS.items():
        value = fields.get(name)
        if value:
            details += template.format(value=value)
    return details


def fallback_thank_you(submission: Submission, year: int) -> str:
    return prompts.FALLBACK_THANK_YOU[submission.mission_type].format(
        first_name=submission.first_name,
        year=year,
    )


class ThankYouService:
    def __init__(self, completion_client: CompletionClient):
        self.completion_client = completion_client

    def generate_thank_you(self, submission: Submission) -> str:
        year = datetime.now().year
        prompt = prompts.THANK_YOU_PROMPT.format(
            year=year,
            emotion_style=prompts.EMOTION_STYLES[submission.emotion_preference],
            mission_context=prompts.MISSION_CONTEXTS[submission.mission_type],
            first_name=submission.first_name,
            last_name=submission.last_name,
            details=mission_details(submission),
        )

        try:
            return self.completion_client.complete(prompt, max_tokens=256)
        except CompletionUnavailableError:
            logger.info("Language model not configured, using fallback thank-you message")
        except CompletionError as e:
            logger.error(f"Thank-you generation error: {e}")
        return fallback_thank_you(submission, year)

    def classify_contact(self, message: str, subject: str) -> ContactClassification:
        summary = subject or prompts.DEFAULT_CONTACT_SUMMARY
        prompt = prompts.CONTACT_PROMPT.format(subject=subject, message=message)

        try:
            result = parse_json_object(
                self.completion_client.complete(prompt, json_mode=True, max_tokens=128)
            )
        except CompletionUnavailableError:
            return ContactClassification(category="autre", priority="moyenne", summary=summary)
        except (CompletionError, ValueError) as e:
            logger.error(f"Contact classification error: {e}")
            return ContactClassification(category="autre", priority="moyenne", summary=summary)

        category = result.get("category")
        priority = result.get("priority")
        model_summary = result.get("summary")
        return ContactClassification(
            category=category if category in CONTACT_CATEGORIES else "autre",
            priority=priority if priority in CONTACT_PRIORITIES else "moyenne",
            summary=model_summary if isinstance(model_summary, str) and model_summary.strip() else summary,
        )
