"""
Validation applied to a Booking before it is written.

The referenced Event is looked up through the ``event_exists`` callable.
This is a point-in-time read: an Event deleted between the check and the
Booking write is not detected.
"""

from typing import Any, Callable, Dict, Mapping

from app.validation.errors import DanglingReference, InvalidEmail, MissingField
from app.validation.normalizers import is_valid_email


def validate_booking(
    candidate: Mapping[str, Any], event_exists: Callable[[str], bool]
) -> Dict[str, Any]:
    """Validate a Booking candidate and return its normalized form.

    The email is trimmed and lowercased before the event lookup, so the
    stored value is always the one that was validated.
    """
    record = dict(candidate)

    email = record.get("email")
    if not isinstance(email, str) or not email.strip():
        raise MissingField("email")

    email = email.strip()
    if not is_valid_email(email):
        raise InvalidEmail(email)
    record["email"] = email.lower()

    event_id = record.get("eventId")
    if not isinstance(event_id, str) or not event_id.strip():
        raise MissingField("eventId")
    record["eventId"] = event_id.strip()

    if not event_exists(record["eventId"]):
        raise DanglingReference(record["eventId"])

    return record
