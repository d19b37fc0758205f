class NexusConnectError(Exception):
    """Base exception for the Nexus Connect API."""

    def __init__(self, message: str = "") -> None:
        self.message = message
        super().__init__(self.message)


class SubmissionNotFoundError(NexusConnectError):
    """Raised when no submission exists for the requested id."""

    def __init__(self, submission_id: str) -> None:
        self.submission_id = submission_id
        super().__init__(f"Submission {submission_id} not found")


class ThankYouMessageConflictError(NexusConnectError):
    """Raised when a submission already carries a thank-you message."""

    def __init__(self, submission_id: str) -> None:
        self.submission_id = submission_id
        super().__init__(f"Submission {submission_id} already has a thank-you message")


class CompletionError(NexusConnectError):
    """Raised when the language-model provider fails or returns nothing usable."""


class CompletionUnavailableError(CompletionError):
    """Raised when no language-model provider is configured."""


class EmptyCompletionError(CompletionError):
    """Raised when the provider answers with no content."""
