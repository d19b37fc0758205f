import boto3
import logging
import openai
from functools import lru_cache

from nexus_connect.core.config import settings
from nexus_connect.data_access.base import SubmissionRepository
from nexus_connect.data_access.dynamodb import DynamoSubmissionRepository
from nexus_connect.data_access.memory import InMemorySubmissionRepository
from nexus_connect.services.assistant_service import AssistantService
from nexus_connect.services.completion_client import (
    CompletionClient,
    OpenAICompletionClient,
    UnavailableCompletionClient,
)
from nexus_connect.services.submission_service import SubmissionService
from nexus_connect.services.thank_you_service import ThankYouService

logger = logging.getLogger(__name__)


@lru_cache()
def get_boto_session() -> boto3.Session:
    return boto3.Session(
        region_name=settings.AWS_REGION,
        profile_name=settings.AWS_PROFILE
    )

@lru_cache()
def get_submission_repository() -> SubmissionRepository:
    if settings.STORAGE_BACKEND == "dynamodb":
        session = get_boto_session()
        dynamo_resource = session.resource('dynamodb')
        table = dynamo_resource.Table(settings.DYNAMODB_TABLE_NAME)
        return DynamoSubmissionRepository(table=table)
    return InMemorySubmissionRepository()

@lru_cache()
def get_completion_client() -> CompletionClient:
    if not settings.ai_enabled:
        logger.warning("OPENAI_API_KEY is not set, AI features use fallback answers")
        return UnavailableCompletionClient()

    client = openai.OpenAI(
        api_key=settings.OPENAI_API_KEY,
        timeout=settings.OPENAI_TIMEOUT_SECONDS,
        max_retries=0
    )
    return OpenAICompletionClient(
        client=client,
        model=settings.OPENAI_MODEL,
        max_attempts=settings.OPENAI_MAX_ATTEMPTS
    )

@lru_cache()
def get_assistant_service() -> AssistantService:
    return AssistantService(completion_client=get_completion_client())

@lru_cache()
def get_thank_you_service() -> ThankYouService:
    return ThankYouService(completion_client=get_completion_client())

@lru_cache()
def get_submission_service() -> SubmissionService:
    return SubmissionService(
        repository=get_submission_repository(),
        thank_you_service=get_thank_you_service()
    )
