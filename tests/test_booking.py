import pytest

from app.schemas.booking import BookingOut
from app.services.booking_service import BookingService
from app.services.event_service import EventService
from app.validation import DanglingReference, InvalidEmail
from tests.conftest import TEST_TABLE_NAME


@pytest.fixture
def event_service(dynamodb_resource):
    return EventService(dynamodb_resource, TEST_TABLE_NAME)


@pytest.fixture
def booking_service(dynamodb_resource, event_service):
    """Create BookingService instance with test table"""
    return BookingService(dynamodb_resource, TEST_TABLE_NAME, event_service)


@pytest.fixture
def event(event_service, valid_event_data):
    return event_service.create_event(valid_event_data)


def test_create_booking_success(booking_service, event):
    result = booking_service.create_booking(
        {"eventId": event.id, "email": "  Jane.Doe@Example.com "}
    )

    assert isinstance(result, BookingOut)
    assert result.eventId == event.id
    assert result.email == "jane.doe@example.com"
    assert len(result.id) > 0


def test_create_booking_invalid_email(booking_service, dynamodb_resource, event):
    before = dict(dynamodb_resource.store)

    with pytest.raises(InvalidEmail):
        booking_service.create_booking({"eventId": event.id, "email": "not-an-email"})
    assert dynamodb_resource.store == before


def test_create_booking_unknown_event(booking_service, dynamodb_resource):
    with pytest.raises(DanglingReference):
        booking_service.create_booking(
            {"eventId": "does-not-exist", "email": "dev@example.com"}
        )
    assert dynamodb_resource.store == {}


def test_default_event_service_shares_table(dynamodb_resource, event):
    booking_service = BookingService(dynamodb_resource, TEST_TABLE_NAME)

    result = booking_service.create_booking({"eventId": event.id, "email": "a@b.io"})

    assert result.eventId == event.id


def test_list_bookings_for_event(booking_service, event_service, event, valid_event_data):
    other = event_service.create_event({**valid_event_data, "title": "Other Talk"})
    booking_service.create_booking({"eventId": event.id, "email": "one@example.com"})
    booking_service.create_booking({"eventId": event.id, "email": "two@example.com"})
    booking_service.create_booking({"eventId": other.id, "email": "three@example.com"})

    bookings = booking_service.list_bookings_for_event(event.id)

    assert sorted(b.email for b in bookings) == ["one@example.com", "two@example.com"]
    assert booking_service.list_bookings_for_event("missing") == []
