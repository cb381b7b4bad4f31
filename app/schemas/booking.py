from pydantic import BaseModel


class BookingCreate(BaseModel):
    # Plain strings: format and reference checks happen in the service so
    # that they raise the booking validation errors.
    eventId: str
    email: str


class BookingOut(BookingCreate):
    id: str
    createdAt: str
    updatedAt: str
