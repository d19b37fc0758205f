from datetime import datetime, timedelta, timezone

import pytest
from fastapi.testclient import TestClient

from nexus_connect.core.dependencies import get_assistant_service, get_submission_service
from nexus_connect.core.exceptions import CompletionError
from nexus_connect.data_access.memory import InMemorySubmissionRepository
from nexus_connect.services.assistant_service import AssistantService
from nexus_connect.services.completion_client import UnavailableCompletionClient
from nexus_connect.services.submission_service import SubmissionService
from nexus_connect.services.thank_you_service import ThankYouService


class FakeCompletionClient:
    """Replays scripted completions; exceptions in the script are raised."""

    def __init__(self, *responses):
        self.responses = list(responses)
        self.calls = []

    def complete(self, prompt, *, json_mode=False, max_tokens=256):
        self.calls.append({"prompt": prompt, "json_mode": json_mode, "max_tokens": max_tokens})
        if not self.responses:
            raise CompletionError("no scripted completion left")
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response


class ScriptedClock:
    """Hands out the given timestamps in order."""

    def __init__(self, *moments):
        self.moments = list(moments)

    def __call__(self):
        return self.moments.pop(0)


BASE_TIME = datetime(2025, 12, 4, 18, 0, tzinfo=timezone.utc)


def minutes(n):
    return BASE_TIME + timedelta(minutes=n)


DONATION_PAYLOAD = {
    "missionType": "don",
    "firstName": "Ada",
    "lastName": "Lovelace",
    "email": "ada@example.com",
    "amount": 25,
    "frequency": "mensuel",
    "customMessage": "Pour le Nexus",
}

VOLUNTEER_PAYLOAD = {
    "missionType": "benevolat",
    "firstName": "Alan",
    "lastName": "Turing",
    "email": "alan@example.com",
    "skills": ["python", "design"],
    "availability": "week-ends",
    "emotionPreference": "epique",
}

CONTACT_PAYLOAD = {
    "missionType": "contact",
    "firstName": "Grace",
    "lastName": "Hopper",
    "email": "grace@example.com",
    "subject": "Inscription à l'événement",
    "message": "Bonjour, comment puis-je inscrire mon équipe ?",
}

INFO_PAYLOAD = {
    "missionType": "informations",
    "firstName": "Linus",
    "lastName": "Torvalds",
    "email": "linus@example.com",
    "requestType": "partenariat",
    "specificQuestion": "Quels sont vos projets pour 2026 ?",
    "emotionPreference": "drole",
}

ALL_PAYLOADS = [DONATION_PAYLOAD, VOLUNTEER_PAYLOAD, CONTACT_PAYLOAD, INFO_PAYLOAD]


@pytest.fixture
def repository():
    return InMemorySubmissionRepository()


@pytest.fixture
def offline_client():
    return UnavailableCompletionClient()


@pytest.fixture
def app_client(repository, offline_client):
    from nexus_connect.api.main import app

    submission_service = SubmissionService(
        repository=repository,
        thank_you_service=ThankYouService(completion_client=offline_client),
    )
    assistant_service = AssistantService(completion_client=offline_client)
    app.dependency_overrides[get_submission_service] = lambda: submission_service
    app.dependency_overrides[get_assistant_service] = lambda: assistant_service

    with TestClient(app, raise_server_exceptions=False) as client:
        yield client

    app.dependency_overrides.clear()
