import logging

from fastapi import APIRouter, Depends, Query
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from app.database.dynamodb import get_db_connection
from app.schemas.booking import BookingCreate
from app.services.booking_service import BookingService
from app.validation import EventValidationError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/bookings", tags=["bookings"])


def get_booking_service():
    """Dependency to get BookingService instance"""
    db = get_db_connection()
    return BookingService(db)


@router.post("/", status_code=201)
async def create_booking(
    booking_data: BookingCreate,
    booking_service: BookingService = Depends(get_booking_service),
):
    """Book a seat for an existing event"""
    try:
        booking = booking_service.create_booking(booking_data.model_dump())
    except EventValidationError as e:
        logger.info("Rejected booking for event %s: %s", booking_data.eventId, e)
        return JSONResponse(
            status_code=400,
            content={"message": "Booking Creation Failed", "error": str(e)},
        )
    except Exception as e:
        logger.exception("Booking creation failed")
        return JSONResponse(
            status_code=500,
            content={"message": "Booking Creation Failed", "error": str(e)},
        )

    return JSONResponse(
        status_code=201,
        content={
            "message": "Booking Created Successfully",
            "booking": jsonable_encoder(booking),
        },
    )


@router.get("/")
async def list_bookings(
    eventId: str = Query(..., description="Event to list bookings for"),
    booking_service: BookingService = Depends(get_booking_service),
):
    try:
        bookings = booking_service.list_bookings_for_event(eventId)
    except Exception as e:
        logger.exception("Booking fetching failed for event %s", eventId)
        return JSONResponse(
            status_code=500,
            content={"message": "Booking fetching failed", "error": str(e)},
        )
    return {"bookings": jsonable_encoder(bookings), "count": len(bookings)}
