from datetime import datetime
from pydantic import BaseModel, ConfigDict, EmailStr, Field, TypeAdapter
from pydantic.alias_generators import to_camel
from typing import Annotated, Literal, Union


MissionType = Literal["don", "benevolat", "contact", "informations"]
EmotionType = Literal["epique", "bienveillant", "drole"]
DonationFrequency = Literal["ponctuel", "mensuel", "annuel"]

MISSION_TYPES: tuple[str, ...] = ("don", "benevolat", "contact", "informations")
DONATION_FREQUENCIES: tuple[str, ...] = ("ponctuel", "mensuel", "annuel")


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class BaseSubmissionForm(CamelModel):
    first_name: str = Field(min_length=2)
    last_name: str = Field(min_length=2)
    email: EmailStr
    message: str | None = None
    emotion_preference: EmotionType = "bienveillant"


class DonationForm(BaseSubmissionForm):
    mission_type: Literal["don"]
    amount: int = Field(ge=1)
    frequency: DonationFrequency
    custom_message: str | None = None


class VolunteerForm(BaseSubmissionForm):
    mission_type: Literal["benevolat"]
    skills: list[str] = Field(min_length=1)
    availability: str = Field(min_length=1)
    motivation: str | None = None


class ContactForm(BaseSubmissionForm):
    mission_type: Literal["contact"]
    subject: str = Field(min_length=5)
    message: str = Field(min_length=10)


class InfoRequestForm(BaseSubmissionForm):
    mission_type: Literal["informations"]
    request_type: str = Field(min_length=1)
    specific_question: str | None = None


SubmissionForm = Annotated[
    Union[DonationForm, VolunteerForm, ContactForm, InfoRequestForm],
    Field(discriminator="mission_type"),
]


class StoredSubmission(CamelModel):
    """Fields the store owns. Records are frozen once created."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    id: str
    created_at: datetime
    ai_thank_you_message: str | None = None


class DonationSubmission(DonationForm, StoredSubmission):
    pass


class VolunteerSubmission(VolunteerForm, StoredSubmission):
    pass


class ContactSubmission(ContactForm, StoredSubmission):
    category: str | None = None
    priority: str | None = None
    ai_summary: str | None = None


class InfoRequestSubmission(InfoRequestForm, StoredSubmission):
    pass


Submission = Annotated[
    Union[DonationSubmission, VolunteerSubmission, ContactSubmission, InfoRequestSubmission],
    Field(discriminator="mission_type"),
]

SUBMISSION_MODELS: dict[str, type[StoredSubmission]] = {
    "don": DonationSubmission,
    "benevolat": VolunteerSubmission,
    "contact": ContactSubmission,
    "informations": InfoRequestSubmission,
}

SUBMISSION_FORM_ADAPTER: TypeAdapter[SubmissionForm] = TypeAdapter(SubmissionForm)
SUBMISSION_ADAPTER: TypeAdapter[Submission] = TypeAdapter(Submission)
