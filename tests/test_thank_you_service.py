import json
from datetime import datetime

import pytest

from nexus_connect.core.exceptions import CompletionError, EmptyCompletionError
from nexus_connect.models.submission import SUBMISSION_ADAPTER
from nexus_connect.services.thank_you_service import ThankYouService, mission_details
from conftest import (
    ALL_PAYLOADS,
    BASE_TIME,
    CONTACT_PAYLOAD,
    DONATION_PAYLOAD,
    INFO_PAYLOAD,
    VOLUNTEER_PAYLOAD,
    FakeCompletionClient,
)


def make_submission(payload):
    return SUBMISSION_ADAPTER.validate_python(
        {**payload, "id": "sub-1", "createdAt": BASE_TIME.isoformat()}
    )


def test_mission_details_per_type():
    assert mission_details(make_submission(DONATION_PAYLOAD)) == (
        'Montant du don: 25€, Fréquence: mensuel. Message personnel: "Pour le Nexus"'
    )
    assert mission_details(make_submission(VOLUNTEER_PAYLOAD)) == (
        "Compétences proposées: python, design. Disponibilité: week-ends."
    )
    assert mission_details(make_submission(CONTACT_PAYLOAD)) == (
        'Sujet du message: "Inscription à l\'événement".'
    )
    assert mission_details(make_submission(INFO_PAYLOAD)) == (
        'Type de demande: partenariat. Question spécifique: "Quels sont vos projets pour 2026 ?"'
    )


def test_prompt_carries_tone_name_details_and_year():
    client = FakeCompletionClient("Merci Alan, chevalier du code !")
    submission = make_submission(VOLUNTEER_PAYLOAD)

    message = ThankYouService(client).generate_thank_you(submission)

    prompt = client.calls[0]["prompt"]
    assert message == "Merci Alan, chevalier du code !"
    assert "héroïque et épique" in prompt, "epique preference selects the epic tone"
    assert "Alan Turing" in prompt
    assert "python, design" in prompt
    assert str(datetime.now().year) in prompt
    assert client.calls[0]["json_mode"] is False


def test_default_tone_is_caring():
    client = FakeCompletionClient("Merci !")
    ThankYouService(client).generate_thank_you(make_submission(DONATION_PAYLOAD))

    assert "chaleureux" in client.calls[0]["prompt"]


@pytest.mark.parametrize("payload", ALL_PAYLOADS, ids=lambda p: p["missionType"])
def test_fallback_message_for_every_mission(offline_client, payload):
    submission = make_submission(payload)

    message = ThankYouService(offline_client).generate_thank_you(submission)

    assert payload["firstName"] in message
    assert str(datetime.now().year) in message


@pytest.mark.parametrize("failure", [CompletionError("timeout"), EmptyCompletionError("empty")])
def test_fallback_on_model_failure(failure):
    client = FakeCompletionClient(failure)
    message = ThankYouService(client).generate_thank_you(make_submission(DONATION_PAYLOAD))

    assert message.startswith("Merci infiniment Ada !")


def test_fallback_ignores_tone():
    funny = make_submission({**DONATION_PAYLOAD, "emotionPreference": "drole"})
    epic = make_submission({**DONATION_PAYLOAD, "emotionPreference": "epique"})
    service = ThankYouService(FakeCompletionClient(CompletionError("a"), CompletionError("b")))

    assert service.generate_thank_you(funny) == service.generate_thank_you(epic)


def test_classify_contact_from_model():
    client = FakeCompletionClient(json.dumps({
        "category": "inscription", "priority": "haute", "summary": "Veut inscrire son équipe"
    }))

    result = ThankYouService(client).classify_contact("Comment s'inscrire ?", "Inscription")

    assert result.category == "inscription"
    assert result.priority == "haute"
    assert result.summary == "Veut inscrire son équipe"
    assert client.calls[0]["max_tokens"] == 128


def test_classify_contact_sanitizes_model_values():
    client = FakeCompletionClient(json.dumps({"category": "spam", "priority": "urgent"}))

    result = ThankYouService(client).classify_contact("...", "Mon sujet")

    assert result.category == "autre"
    assert result.priority == "moyenne"
    assert result.summary == "Mon sujet"


@pytest.mark.parametrize("failure", [CompletionError("boom"), "{not json"])
def test_classify_contact_fallback(failure):
    result = ThankYouService(FakeCompletionClient(failure)).classify_contact("msg", "")

    assert result.category == "autre"
    assert result.priority == "moyenne"
    assert result.summary == "Demande de contact"


def test_classify_contact_offline_uses_subject(offline_client):
    result = ThankYouService(offline_client).classify_contact("msg", "Question sur le hackathon")

    assert result.summary == "Question sur le hackathon"
