from pydantic import Field
from typing import Literal

from nexus_connect.models.submission import CamelModel, DonationFrequency


Intent = Literal["don", "benevolat", "contact", "informations", "unclear"]
Language = Literal["fr", "en"]

CONTACT_CATEGORIES: tuple[str, ...] = (
    "technique", "generale", "inscription", "plainte", "felicitations", "autre"
)
CONTACT_PRIORITIES: tuple[str, ...] = ("haute", "moyenne", "basse")


class IntentAnalysis(CamelModel):
    intent: Intent
    confidence: float = Field(ge=0.0, le=1.0)
    suggestion: str
    redirect_path: str | None = None


class DonationSuggestion(CamelModel):
    suggested_amount: int = Field(ge=5, le=100)
    frequency: DonationFrequency
    reason: str
    message: str


class ContactClassification(CamelModel):
    category: str
    priority: str
    summary: str
