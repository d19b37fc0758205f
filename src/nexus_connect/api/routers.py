from datetime import datetime, timezone
from fastapi import (
    APIRouter,
    Body,
    Depends,
    HTTPException
)
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError
from typing import Any
import logging

from nexus_connect.core.dependencies import (
    get_assistant_service,
    get_submission_service,
)
from nexus_connect.core.exceptions import SubmissionNotFoundError
from nexus_connect.models.assistant import DonationSuggestion, IntentAnalysis
from nexus_connect.models.submission import SUBMISSION_FORM_ADAPTER
from nexus_connect.services.assistant_service import AssistantService
from nexus_connect.services.submission_service import SubmissionService
from nexus_connect.api.schemas import (
    AssistantRequest,
    ChatRequest,
    ChatResponse,
    HealthResponse,
    SubmissionResponse,
    SubmissionSummary,
)

router = APIRouter(prefix="/api")
logger = logging.getLogger(__name__)

def require_message(body: AssistantRequest) -> str:
    if not isinstance(body.message, str) or not body.message.strip():
        raise HTTPException(status_code=400, detail="Message is required")
    return body.message

@router.post(
    "/submissions",
    response_model=SubmissionResponse,
    status_code=201
)
def create_submission(
    payload: Any = Body(...),
    submission_service: SubmissionService = Depends(get_submission_service)
):
    try:
        form = SUBMISSION_FORM_ADAPTER.validate_python(payload)
    except ValidationError as e:
        raise RequestValidationError(e.errors())

    try:
        submission = submission_service.create_submission(form)
    except Exception as e:
        logger.exception(f"Submission error: {e}")
        raise HTTPException(status_code=500, detail="Internal server error")

    return SubmissionResponse.model_validate(submission, from_attributes=True)

@router.get(
    "/submissions/{submission_id}",
    response_model=SubmissionResponse
)
def get_submission(
    submission_id: str,
    submission_service: SubmissionService = Depends(get_submission_service)
):
    try:
        submission = submission_service.get_submission(submission_id)
    except SubmissionNotFoundError:
        raise HTTPException(status_code=404, detail="Submission not found")
    return SubmissionResponse.model_validate(submission, from_attributes=True)

@router.get(
    "/submissions",
    response_model=list[SubmissionSummary]
)
def list_submissions(
    submission_service: SubmissionService = Depends(get_submission_service)
):
    return [
        SubmissionSummary.model_validate(s, from_attributes=True)
        for s in submission_service.list_submissions()
    ]

@router.post(
    "/ai/analyze-intent",
    response_model=IntentAnalysis
)
def analyze_intent(
    body: AssistantRequest,
    assistant_service: AssistantService = Depends(get_assistant_service)
):
    message = require_message(body)
    return assistant_service.analyze_intent(message, body.language)

@router.post(
    "/ai/suggest-donation",
    response_model=DonationSuggestion
)
def suggest_donation(
    body: AssistantRequest,
    assistant_service: AssistantService = Depends(get_assistant_service)
):
    message = require_message(body)
    return assistant_service.suggest_donation(message, body.language)

@router.post(
    "/ai/chat",
    response_model=ChatResponse
)
def chat(
    body: ChatRequest,
    assistant_service: AssistantService = Depends(get_assistant_service)
):
    message = require_message(body)
    response = assistant_service.chat(message, body.context, body.language)
    return ChatResponse(response=response)

@router.get(
    "/health",
    response_model=HealthResponse
)
def health():
    return HealthResponse(status="ok", timestamp=datetime.now(timezone.utc))
