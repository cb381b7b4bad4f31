"""
Pure helpers used to normalize record fields before they are stored.

None of these functions touch the database; they either return the
normalized value or raise one of the errors in ``app.validation.errors``.
"""

import re
from datetime import datetime, timezone
from email.utils import parsedate_to_datetime

from app.validation.errors import InvalidDate, InvalidTime

_NON_ALPHANUMERIC = re.compile(r"[^a-z0-9]+")
_TIME_PATTERN = re.compile(r"([0-1]?[0-9]|2[0-3]):([0-5][0-9])")
_EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")

# Calendar forms accepted besides ISO-8601 and RFC 2822.
_DATE_FORMATS = (
    "%B %d, %Y",
    "%b %d, %Y",
    "%d %B %Y",
    "%d %b %Y",
    "%m/%d/%Y",
    "%Y/%m/%d",
)


def slugify(title: str) -> str:
    """Build a URL-friendly slug from an event title."""
    slug = _NON_ALPHANUMERIC.sub("-", title.lower().strip())
    return slug.strip("-")


def _parse_datetime(text: str) -> datetime | None:
    try:
        return datetime.fromisoformat(text)
    except ValueError:
        pass

    try:
        return parsedate_to_datetime(text)
    except (TypeError, ValueError):
        pass

    for fmt in _DATE_FORMATS:
        try:
            return datetime.strptime(text, fmt)
        except ValueError:
            continue
    return None


def normalize_date(value: str) -> str:
    """Normalize a date-like string to its UTC calendar date (YYYY-MM-DD).

    Values without timezone information are taken to be UTC already.
    """
    if not isinstance(value, str) or not value.strip():
        raise InvalidDate(value)

    parsed = _parse_datetime(value.strip())
    if parsed is None:
        raise InvalidDate(value)

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    try:
        return parsed.astimezone(timezone.utc).date().isoformat()
    except OverflowError:
        # Parsed fine, but the UTC shift leaves the supported year range
        raise InvalidDate(value)


def normalize_time(value: str) -> str:
    """Normalize ``H:mm`` or ``HH:mm`` (24h) to zero-padded ``HH:mm``."""
    if not isinstance(value, str):
        raise InvalidTime(value)

    match = _TIME_PATTERN.fullmatch(value.strip())
    if not match:
        raise InvalidTime(value)

    hours, minutes = match.groups()
    return f"{hours.zfill(2)}:{minutes}"


def is_valid_email(value: str) -> bool:
    return bool(_EMAIL_PATTERN.fullmatch(value))
