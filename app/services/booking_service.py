import logging
import uuid
from typing import Any, Dict, List

from boto3.dynamodb.conditions import Key
from botocore.exceptions import ClientError

from app.core.config import settings
from app.schemas.booking import BookingOut
from app.services.event_service import EventService, utc_now
from app.validation import validate_booking

logger = logging.getLogger(__name__)

KEY_ATTRIBUTES = (
    "PK",
    "SK",
    "GSI_BookingsByEvent_PK",
    "GSI_BookingsByEvent_SK",
)


class BookingService:
    def __init__(self, dynamodb_resource, table_name=None, event_service=None):
        self.dynamodb = dynamodb_resource
        self.table = dynamodb_resource.Table(table_name or settings.dynamodb_table_name)
        self.event_service = event_service or EventService(dynamodb_resource, table_name)

    def create_booking(self, booking_data: Dict[str, Any]) -> BookingOut:
        """Validate a booking against its event and store it.

        The event lookup and the write are separate requests, so an event
        removed in between is not noticed.
        """
        record = validate_booking(
            {
                "eventId": booking_data.get("eventId"),
                "email": booking_data.get("email"),
            },
            self.event_service.event_exists,
        )

        booking_id = str(uuid.uuid4())
        now = utc_now()

        item = {
            "PK": f"BOOKING#{booking_id}",
            "SK": "DETAIL",
            "id": booking_id,
            "eventId": record["eventId"],
            "email": record["email"],
            "createdAt": now,
            "updatedAt": now,
        }

        # Lets an event's bookings be listed without a scan
        item["GSI_BookingsByEvent_PK"] = f"EVENT#{record['eventId']}"
        item["GSI_BookingsByEvent_SK"] = f"BOOKING#{now}#{booking_id}"

        try:
            self.table.put_item(Item=item)
        except ClientError as e:
            raise Exception(f"Failed to create booking: {e}")

        logger.info("Created booking %s for event %s", booking_id, record["eventId"])
        return BookingOut(**{k: v for k, v in item.items() if k not in KEY_ATTRIBUTES})

    def list_bookings_for_event(self, event_id: str) -> List[BookingOut]:
        """Bookings for one event, oldest first"""
        items = []
        query_kwargs = {
            "IndexName": "GSI_BookingsByEvent",
            "KeyConditionExpression": Key("GSI_BookingsByEvent_PK").eq(
                f"EVENT#{event_id}"
            ),
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
            raise Exception(f"Failed to list bookings: {e}")

        return [
            BookingOut(**{k: v for k, v in item.items() if k not in KEY_ATTRIBUTES})
            for item in items
        ]
