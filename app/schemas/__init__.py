from .event import EventBase, EventUpdate, EventOut, EventItem
from .booking import BookingCreate, BookingOut

__all__ = [
    "EventBase",
    "EventUpdate",
    "EventOut",
    "EventItem",
    "BookingCreate",
    "BookingOut",
]
