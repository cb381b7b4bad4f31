"""
Validation and normalization applied to an Event before it is written.

``validate_event`` is called explicitly by ``EventService`` on create and on
update. It never mutates its input; the returned dict is what gets stored.
"""

from typing import Any, Dict, Iterable, Mapping, Optional

from app.validation.errors import InvalidItem, MissingField
from app.validation.normalizers import normalize_date, normalize_time, slugify

REQUIRED_STRING_FIELDS = (
    "title",
    "description",
    "overview",
    "image",
    "venue",
    "location",
    "date",
    "time",
    "mode",
    "audience",
    "organizer",
)

REQUIRED_LIST_FIELDS = ("agenda", "tags")


def _require_string(record: Mapping[str, Any], field: str) -> str:
    value = record.get(field)
    if not isinstance(value, str) or not value.strip():
        raise MissingField(field)
    return value.strip()


def _require_string_list(record: Mapping[str, Any], field: str) -> list:
    value = record.get(field)
    if not isinstance(value, (list, tuple)) or len(value) == 0:
        raise MissingField(
            field, f"{field} is required and must be a non-empty array"
        )
    if not all(isinstance(item, str) and item.strip() for item in value):
        raise InvalidItem(field)
    return [item.strip() for item in value]


def validate_event(
    candidate: Mapping[str, Any], changed: Optional[Iterable[str]] = None
) -> Dict[str, Any]:
    """Validate an Event candidate and return its normalized form.

    ``changed`` names the fields modified by this write. ``None`` means the
    record is new, so every field counts as changed. The slug is derived
    from the title, and date/time are normalized, only when their source
    field changed.

    Raises ``MissingField``, ``InvalidItem``, ``InvalidDate`` or
    ``InvalidTime``.
    """
    record = dict(candidate)

    # Structural checks come first so error reporting stays predictable.
    for field in REQUIRED_STRING_FIELDS:
        record[field] = _require_string(record, field)
    for field in REQUIRED_LIST_FIELDS:
        record[field] = _require_string_list(record, field)

    modified = set(REQUIRED_STRING_FIELDS) if changed is None else set(changed)

    if "title" in modified:
        record["slug"] = slugify(record["title"])
    if "date" in modified:
        record["date"] = normalize_date(record["date"])
    if "time" in modified:
        record["time"] = normalize_time(record["time"])

    return record
