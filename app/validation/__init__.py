from .errors import (
    EventValidationError,
    MissingField,
    InvalidItem,
    InvalidDate,
    InvalidTime,
    InvalidEmail,
    DanglingReference,
    DuplicateSlug,
)
from .normalizers import slugify, normalize_date, normalize_time, is_valid_email
from .event_rules import validate_event
from .booking_rules import validate_booking

__all__ = [
    "EventValidationError",
    "MissingField",
    "InvalidItem",
    "InvalidDate",
    "InvalidTime",
    "InvalidEmail",
    "DanglingReference",
    "DuplicateSlug",
    "slugify",
    "normalize_date",
    "normalize_time",
    "is_valid_email",
    "validate_event",
    "validate_booking",
]
