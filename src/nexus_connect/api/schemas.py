from datetime import datetime
from typing import Any

from nexus_connect.models.assistant import Language
from nexus_connect.models.submission import CamelModel, MissionType

class SubmissionResponse(CamelModel):
    id: str
    mission_type: MissionType
    first_name: str
    last_name: str
    ai_thank_you_message: str | None = None
    created_at: datetime

class SubmissionSummary(CamelModel):
    id: str
    mission_type: MissionType
    first_name: str
    last_name: str
    email: str
    created_at: datetime

class AssistantRequest(CamelModel):
    # Checked in the router so that missing, blank and non-string
    # messages share one error
    message: Any = None
    language: Language = "fr"

class ChatRequest(AssistantRequest):
    context: str | None = None

class ChatResponse(CamelModel):
    response: str

class HealthResponse(CamelModel):
    status: str
    timestamp: datetime
