import logging
import uuid
from boto3.dynamodb.conditions import Key
from botocore.exceptions import ClientError
from datetime import datetime, timezone
from decimal import Decimal
from typing import Any

from nexus_connect.core.exceptions import ThankYouMessageConflictError
from nexus_connect.models.submission import (
    SUBMISSION_ADAPTER,
    SUBMISSION_MODELS,
    Submission,
    SubmissionForm,
)

logger = logging.getLogger(__name__)

SUBMISSION_PREFIX = "SUBMISSION#"
SUBMISSION_SK = "SUBMISSION"
ENTITY_TYPE = "SUBMISSION"
RECENT_INDEX = "RecentSubmissionsIndex"
KEY_ATTRIBUTES = ("PK", "SK", "entity_type")


def _from_dynamo(value: Any) -> Any:
    if isinstance(value, Decimal):
        return int(value) if value == value.to_integral_value() else float(value)
    if isinstance(value, list):
        return [_from_dynamo(v) for v in value]
    return value


class DynamoSubmissionRepository:
    """One item per submission, listed newest-first through a GSI on
    ``entity_type`` / ``createdAt``."""

    def __init__(self, table):
        self.table = table

    def _key(self, submission_id: str) -> dict:
        return {
            "PK": f"{SUBMISSION_PREFIX}{submission_id}",
            "SK": SUBMISSION_SK
        }

    def _to_submission(self, item: dict) -> Submission:
        data = {k: _from_dynamo(v) for k, v in item.items() if k not in KEY_ATTRIBUTES}
        return SUBMISSION_ADAPTER.validate_python(data)

    def create(self, form: SubmissionForm, **attributes: Any) -> Submission:
        model = SUBMISSION_MODELS[form.mission_type]
        submission = model(
            **form.model_dump(),
            **attributes,
            id=str(uuid.uuid4()),
            created_at=datetime.now(timezone.utc),
        )
        # DynamoDB items carry no NULL attributes so the thank-you
        # condition below can rely on attribute_not_exists
        item = {
            **self._key(submission.id),
            "entity_type": ENTITY_TYPE,
            **submission.model_dump(mode="json", by_alias=True, exclude_none=True),
        }

        self.table.put_item(
            Item=item,
            ConditionExpression="attribute_not_exists(PK)"
        )
        return submission

    def get(self, submission_id: str) -> Submission | None:
        response = self.table.get_item(Key=self._key(submission_id))
        item = response.get("Item")
        return self._to_submission(item) if item else None

    def list(self) -> list[Submission]:
        try:
            items = []
            kwargs = {
                "IndexName": RECENT_INDEX,
                "KeyConditionExpression": Key("entity_type").eq(ENTITY_TYPE),
                "ScanIndexForward": False,
            }
            while True:
                response = self.table.query(**kwargs)
                items.extend(response.get("Items", []))
                if "LastEvaluatedKey" not in response:
                    break
                kwargs["ExclusiveStartKey"] = response["LastEvaluatedKey"]
        except ClientError as e:
            logger.error(f"Error listing submissions: {e}")
            raise
        return [self._to_submission(item) for item in items]

    def set_thank_you_message(self, submission_id: str, message: str) -> Submission | None:
        try:
            response = self.table.update_item(
                Key=self._key(submission_id),
                UpdateExpression="SET #msg = :m",
                ConditionExpression="attribute_exists(PK) AND attribute_not_exists(#msg)",
                ExpressionAttributeNames={"#msg": "aiThankYouMessage"},
                ExpressionAttributeValues={":m": message},
                ReturnValues="ALL_NEW"
            )
            return self._to_submission(response["Attributes"])
        except ClientError as e:
            if e.response['Error']['Code'] != 'ConditionalCheckFailedException':
                logger.error(f"Error setting thank-you message: {e}")
                raise

        if self.get(submission_id) is None:
            return None
        logger.info(f"Thank-you message for {submission_id} is already set.")
        raise ThankYouMessageConflictError(submission_id)
