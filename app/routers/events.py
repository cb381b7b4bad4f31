import json
import logging

from fastapi import APIRouter, Depends, Request
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from app.constants import EVENTS
from app.database.dynamodb import get_db_connection
from app.schemas.event import EventUpdate
from app.services.event_service import EventService
from app.services.media_service import MediaService
from app.validation import EventValidationError
from app.validation.event_rules import REQUIRED_LIST_FIELDS, REQUIRED_STRING_FIELDS

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/events", tags=["events"])


def get_event_service():
    """Dependency to get EventService instance"""
    db = get_db_connection()
    return EventService(db)


def get_media_service():
    """Dependency to get MediaService instance"""
    return MediaService()


def _list_field(form, field):
    """Read a list field sent either as repeated entries or as a JSON array"""
    values = form.getlist(field)
    if len(values) == 1 and isinstance(values[0], str):
        text = values[0].strip()
        if text.startswith("["):
            try:
                return json.loads(text)
            except json.JSONDecodeError:
                pass
    return values


def form_to_event(form):
    event = {}
    for field in REQUIRED_STRING_FIELDS:
        if field != "image" and field in form:
            event[field] = form.get(field)
    for field in REQUIRED_LIST_FIELDS:
        if field in form:
            event[field] = _list_field(form, field)
    return event


@router.post("/", status_code=201)
async def create_event(
    request: Request,
    event_service: EventService = Depends(get_event_service),
    media_service: MediaService = Depends(get_media_service),
):
    """Create an event from multipart form data, uploading its image first"""
    try:
        try:
            form = await request.form()
        except Exception:
            logger.warning("Rejected unparseable event form", exc_info=True)
            return JSONResponse(
                status_code=400, content={"message": "Invalid form data format"}
            )

        image = form.get("image")
        if image is None or isinstance(image, str) or not image.filename:
            return JSONResponse(status_code=400, content={"message": "Image is required"})

        event_data = form_to_event(form)
        event_data["image"] = media_service.upload_image(
            await image.read(), image.filename, image.content_type
        )

        event = event_service.create_event(event_data)
        return JSONResponse(
            status_code=201,
            content={
                "message": "Event Created Successfully",
                "event": jsonable_encoder(event),
            },
        )
    except Exception as e:
        logger.exception("Event creation failed")
        return JSONResponse(
            status_code=500,
            content={"message": "Event Creation Failed", "error": str(e)},
        )


@router.get("/")
async def list_events(event_service: EventService = Depends(get_event_service)):
    """List all events, newest first"""
    try:
        events = event_service.list_events()
        return {
            "message": "Events fetched successfully",
            "events": jsonable_encoder(events),
        }
    except Exception as e:
        logger.exception("Event fetching failed")
        return JSONResponse(
            status_code=500,
            content={"message": "Event fetching failed", "error": str(e)},
        )


@router.get("/featured")
async def list_featured_events():
    """Static list of highlighted events"""
    return {"events": jsonable_encoder(EVENTS)}


@router.get("/{slug}")
async def get_event(slug: str, event_service: EventService = Depends(get_event_service)):
    try:
        event = event_service.get_event_by_slug(slug)
    except Exception as e:
        logger.exception("Event lookup failed for %s", slug)
        return JSONResponse(
            status_code=500,
            content={"message": "Event fetching failed", "error": str(e)},
        )

    if event is None:
        return JSONResponse(status_code=404, content={"message": "Event not found"})
    return {"message": "Event fetched successfully", "event": jsonable_encoder(event)}


@router.patch("/{event_id}")
async def update_event(
    event_id: str,
    changes: EventUpdate,
    event_service: EventService = Depends(get_event_service),
):
    """Update the supplied fields of an event"""
    try:
        event = event_service.update_event(
            event_id, changes.model_dump(exclude_unset=True)
        )
    except EventValidationError as e:
        logger.info("Rejected update of event %s: %s", event_id, e)
        return JSONResponse(
            status_code=400,
            content={"message": "Event Update Failed", "error": str(e)},
        )
    except Exception as e:
        logger.exception("Event update failed for %s", event_id)
        return JSONResponse(
            status_code=500,
            content={"message": "Event Update Failed", "error": str(e)},
        )

    if event is None:
        return JSONResponse(status_code=404, content={"message": "Event not found"})
    return {"message": "Event Updated Successfully", "event": jsonable_encoder(event)}
