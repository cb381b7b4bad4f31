import logging
import uuid
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from boto3.dynamodb.conditions import Key
from botocore.exceptions import ClientError

from app.core.config import settings
from app.schemas.event import EventOut
from app.validation import DuplicateSlug, validate_event
from app.validation.event_rules import REQUIRED_LIST_FIELDS, REQUIRED_STRING_FIELDS

logger = logging.getLogger(__name__)

EVENT_FIELDS = REQUIRED_STRING_FIELDS + REQUIRED_LIST_FIELDS

# Attributes that only exist for the table layout and are never returned
KEY_ATTRIBUTES = (
    "PK",
    "SK",
    "GSI_EventsByCreatedAt_PK",
    "GSI_EventsByCreatedAt_SK",
)


def utc_now() -> str:
    return datetime.now(timezone.utc).isoformat()


class EventService:
    def __init__(self, dynamodb_resource, table_name=None):
        self.dynamodb = dynamodb_resource
        self.table = dynamodb_resource.Table(table_name or settings.dynamodb_table_name)

    def create_event(self, event_data: Dict[str, Any]) -> EventOut:
        """Validate, normalize and store a new event together with its slug marker"""
        candidate = {k: v for k, v in event_data.items() if k in EVENT_FIELDS}
        record = validate_event(candidate)

        event_id = str(uuid.uuid4())
        now = utc_now()

        event_item = {
            "PK": f"EVENT#{event_id}",
            "SK": "DETAIL",
            "id": event_id,
            **record,
            "createdAt": now,
            "updatedAt": now,
        }

        # Newest-first listing reads this index backwards
        event_item["GSI_EventsByCreatedAt_PK"] = "EVENT_TIMELINE"
        event_item["GSI_EventsByCreatedAt_SK"] = f"CREATED#{now}#EVENT#{event_id}"

        transact_items = [
            # The marker item makes the slug unique across all events
            {
                "Put": {
                    "TableName": self.table.table_name,
                    "Item": self._slug_item(record["slug"], event_id),
                    "ConditionExpression": "attribute_not_exists(PK)",
                }
            },
            {"Put": {"TableName": self.table.table_name, "Item": event_item}},
        ]

        try:
            self.dynamodb.meta.client.transact_write_items(TransactItems=transact_items)
        except ClientError as e:
            self._raise_write_error(e, record["slug"], slug_index=0, action="create")

        logger.info("Created event %s (%s)", event_id, record["slug"])
        return self._to_event_out(event_item)

    def list_events(self) -> List[EventOut]:
        """Return every event, most recently created first"""
        items = []
        query_kwargs = {
            "IndexName": "GSI_EventsByCreatedAt",
            "KeyConditionExpression": Key("GSI_EventsByCreatedAt_PK").eq(
                "EVENT_TIMELINE"
            ),
            "ScanIndexForward": False,
        }

        try:
            while True:
                response = self.table.query(**query_kwargs)
                items.extend(response.get("Items", []))
                last_key = response.get("LastEvaluatedKey")
                if not last_key:
                    break
                query_kwargs["ExclusiveStartKey"] = last_key
        except ClientError as e:
            raise Exception(f"Failed to list events: {e}")

        return [self._to_event_out(item) for item in items]

    def get_event(self, event_id: str) -> Optional[EventOut]:
        item = self._get_event_item(event_id)
        return self._to_event_out(item) if item else None

    def get_event_by_slug(self, slug: str) -> Optional[EventOut]:
        try:
            response = self.table.get_item(Key={"PK": f"SLUG#{slug}", "SK": "SLUG"})
        except ClientError as e:
            raise Exception(f"Failed to get event: {e}")

        marker = response.get("Item")
        if not marker:
            return None
        return self.get_event(marker["eventId"])

    def event_exists(self, event_id: str) -> bool:
        """Point-in-time existence check used by booking validation"""
        return self._get_event_item(event_id) is not None

    def update_event(self, event_id: str, changes: Dict[str, Any]) -> Optional[EventOut]:
        """Apply a partial update; derived fields follow only the fields changed here"""
        current = self._get_event_item(event_id)
        if current is None:
            return None

        changes = {k: v for k, v in changes.items() if k in EVENT_FIELDS}
        merged = {k: current.get(k) for k in EVENT_FIELDS}
        merged["slug"] = current.get("slug")
        merged.update(changes)

        record = validate_event(merged, changed=changes.keys())

        event_item = {**current, **record, "updatedAt": utc_now()}
        old_slug = current.get("slug")

        try:
            if record["slug"] == old_slug:
                self.table.put_item(Item=event_item)
            else:
                self.dynamodb.meta.client.transact_write_items(
                    TransactItems=[
                        {
                            "Put": {
                                "TableName": self.table.table_name,
                                "Item": self._slug_item(record["slug"], event_id),
                                "ConditionExpression": "attribute_not_exists(PK)",
                            }
                        },
                        {
                            "Delete": {
                                "TableName": self.table.table_name,
                                "Key": {"PK": f"SLUG#{old_slug}", "SK": "SLUG"},
                            }
                        },
                        {
                            "Put": {
                                "TableName": self.table.table_name,
                                "Item": event_item,
                            }
                        },
                    ]
                )
        except ClientError as e:
            self._raise_write_error(e, record["slug"], slug_index=0, action="update")

        logger.info("Updated event %s (%s)", event_id, ", ".join(sorted(changes)))
        return self._to_event_out(event_item)

    def _get_event_item(self, event_id: str) -> Optional[Dict[str, Any]]:
        try:
            response = self.table.get_item(
                Key={"PK": f"EVENT#{event_id}", "SK": "DETAIL"}
            )
        except ClientError as e:
            raise Exception(f"Failed to get event: {e}")
        return response.get("Item")

    @staticmethod
    def _slug_item(slug: str, event_id: str) -> Dict[str, str]:
        return {"PK": f"SLUG#{slug}", "SK": "SLUG", "eventId": event_id}

    @staticmethod
    def _raise_write_error(error: ClientError, slug: str, slug_index: int, action: str):
        if error.response["Error"]["Code"] == "TransactionCanceledException":
            reasons = error.response.get("CancellationReasons", [])
            slug_reason = reasons[slug_index] if len(reasons) > slug_index else {}
            if not reasons or slug_reason.get("Code") == "ConditionalCheckFailed":
                raise DuplicateSlug(slug)
            raise Exception("Transaction failed: Conditional check failed")
        raise Exception(f"Failed to {action} event: {error}")

    @staticmethod
    def _to_event_out(item: Dict[str, Any]) -> EventOut:
        return EventOut(**{k: v for k, v in item.items() if k not in KEY_ATTRIBUTES})
