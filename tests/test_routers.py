import pytest

from nexus_connect.core.dependencies import get_submission_service
from conftest import (
    ALL_PAYLOADS,
    CONTACT_PAYLOAD,
    DONATION_PAYLOAD,
    INFO_PAYLOAD,
    VOLUNTEER_PAYLOAD,
    ScriptedClock,
    minutes,
)


@pytest.mark.parametrize("payload", ALL_PAYLOADS, ids=lambda p: p["missionType"])
def test_create_submission_offline(app_client, payload):
    resp = app_client.post("/api/submissions", json=payload)
    body = resp.json()

    assert resp.status_code == 201, "expected 201 for a valid submission"
    assert set(body) == {"id", "missionType", "firstName", "lastName", "aiThankYouMessage", "createdAt"}
    assert body["missionType"] == payload["missionType"]
    assert body["aiThankYouMessage"], "fallback thank-you must be non-empty"


def test_donation_with_zero_amount_is_rejected(app_client):
    resp = app_client.post("/api/submissions", json={**DONATION_PAYLOAD, "amount": 0})
    body = resp.json()

    assert resp.status_code == 400
    assert body["error"] == "Validation error"
    assert [d["field"] for d in body["details"]] == ["amount"]


@pytest.mark.parametrize(
    "payload, field",
    [
        ({**VOLUNTEER_PAYLOAD, "skills": []}, "skills"),
        ({**CONTACT_PAYLOAD, "subject": "Hi"}, "subject"),
        ({**CONTACT_PAYLOAD, "message": "court"}, "message"),
        ({**INFO_PAYLOAD, "email": "not-an-email"}, "email"),
        ({**DONATION_PAYLOAD, "firstName": "A"}, "firstName"),
        ({**DONATION_PAYLOAD, "frequency": "hebdo"}, "frequency"),
    ],
)
def test_field_validation_errors(app_client, payload, field):
    resp = app_client.post("/api/submissions", json=payload)

    assert resp.status_code == 400
    assert field in [d["field"] for d in resp.json()["details"]]


def test_unknown_mission_type_is_rejected(app_client):
    resp = app_client.post("/api/submissions", json={**DONATION_PAYLOAD, "missionType": "pizza"})

    assert resp.status_code == 400
    assert resp.json()["error"] == "Validation error"


def test_get_submission_roundtrip(app_client):
    created = app_client.post("/api/submissions", json=VOLUNTEER_PAYLOAD).json()

    resp = app_client.get(f"/api/submissions/{created['id']}")
    body = resp.json()

    assert resp.status_code == 200
    assert body["firstName"] == "Alan"
    assert body["missionType"] == "benevolat"
    assert body["aiThankYouMessage"] == created["aiThankYouMessage"]


def test_get_unknown_submission_returns_404(app_client):
    resp = app_client.get("/api/submissions/does-not-exist")

    assert resp.status_code == 404
    assert resp.json() == {"error": "Submission not found"}


def test_list_submissions_newest_first(app_client, repository):
    repository.clock = ScriptedClock(minutes(2), minutes(9), minutes(4))
    for payload in (DONATION_PAYLOAD, CONTACT_PAYLOAD, INFO_PAYLOAD):
        app_client.post("/api/submissions", json=payload)

    resp = app_client.get("/api/submissions")
    body = resp.json()

    assert resp.status_code == 200
    assert [s["missionType"] for s in body] == ["contact", "informations", "don"]
    assert set(body[0]) == {"id", "missionType", "firstName", "lastName", "email", "createdAt"}
    assert body[0]["email"] == "grace@example.com"


def test_unexpected_error_returns_opaque_500(app_client):
    class BrokenService:
        def create_submission(self, form):
            raise RuntimeError("disk on fire")

    app_client.app.dependency_overrides[get_submission_service] = lambda: BrokenService()

    resp = app_client.post("/api/submissions", json=DONATION_PAYLOAD)

    assert resp.status_code == 500
    assert resp.json() == {"error": "Internal server error"}


def test_analyze_intent(app_client):
    resp = app_client.post("/api/ai/analyze-intent", json={"message": "I want to volunteer", "language": "en"})
    body = resp.json()

    assert resp.status_code == 200
    assert body == {
        "intent": "benevolat",
        "confidence": 0.8,
        "suggestion": "You want to join our team? Awesome! I'm opening the Volunteer section.",
        "redirectPath": "/mission/benevolat",
    }


def test_analyze_intent_unclear(app_client):
    body = app_client.post("/api/ai/analyze-intent", json={"message": "Bonjour"}).json()

    assert body["intent"] == "unclear"
    assert body["confidence"] == 0.3
    assert body["redirectPath"] is None


@pytest.mark.parametrize("path", ["/api/ai/analyze-intent", "/api/ai/suggest-donation", "/api/ai/chat"])
@pytest.mark.parametrize("body", [{}, {"message": ""}, {"message": 42}, {"message": "   "}])
def test_ai_endpoints_require_message(app_client, path, body):
    resp = app_client.post(path, json=body)

    assert resp.status_code == 400
    assert resp.json() == {"error": "Message is required"}


def test_suggest_donation(app_client):
    resp = app_client.post("/api/ai/suggest-donation", json={"message": "Je n'ai pas beaucoup d'argent"})
    body = resp.json()

    assert resp.status_code == 200
    assert body["suggestedAmount"] == 5
    assert body["frequency"] == "ponctuel"
    assert set(body) == {"suggestedAmount", "frequency", "reason", "message"}


def test_chat_offline(app_client):
    resp = app_client.post("/api/ai/chat", json={"message": "Salut", "context": "accueil"})

    assert resp.status_code == 200
    assert "Axolotl" in resp.json()["response"]


def test_health(app_client):
    resp = app_client.get("/api/health")
    body = resp.json()

    assert resp.status_code == 200
    assert body["status"] == "ok"
    assert body["timestamp"]
