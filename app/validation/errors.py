"""Errors raised while validating records before they are written."""


class EventValidationError(ValueError):
    """Base class for every pre-persist validation failure."""


class MissingField(EventValidationError):
    def __init__(self, field: str, message: str | None = None):
        self.field = field
        super().__init__(
            message or f"{field} is required and must be a non-empty string"
        )


class InvalidItem(EventValidationError):
    def __init__(self, field: str):
        self.field = field
        super().__init__(f"{field} must contain only non-empty strings")


class InvalidDate(EventValidationError):
    def __init__(self, value):
        self.value = value
        super().__init__(
            f"Invalid event date {value!r}; expected a parsable date string"
        )


class InvalidTime(EventValidationError):
    def __init__(self, value):
        self.value = value
        super().__init__(
            f"Invalid event time {value!r}; expected HH:mm in 24-hour format"
        )


class InvalidEmail(EventValidationError):
    def __init__(self, value):
        self.value = value
        super().__init__("Booking email must be a valid email address")


class DanglingReference(EventValidationError):
    def __init__(self, event_id):
        self.event_id = event_id
        super().__init__(
            f"Cannot create booking: referenced event {event_id} does not exist"
        )


class DuplicateSlug(EventValidationError):
    def __init__(self, slug: str):
        self.slug = slug
        super().__init__(f"An event with slug '{slug}' already exists")
