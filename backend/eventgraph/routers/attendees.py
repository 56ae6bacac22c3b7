"""Attendee / RSVP API routes."""
from fastapi import APIRouter, Depends, status

from eventgraph.dependencies import get_store
from eventgraph.schemas.attendee import AttendeeAdd, RemoveResult, RSVPPayload
from eventgraph.schemas.event import EventAttendeeOut
from eventgraph.services import event_service
from eventgraph.services.resolver import attendee_rsvp_out
from eventgraph.store import EntityStore

router = APIRouter()


@router.post("/", response_model=EventAttendeeOut, status_code=status.HTTP_201_CREATED)
def add_attendee(payload: AttendeeAdd, store: EntityStore = Depends(get_store)):
    """Add a person to an event, reusing an existing attendee with the same email."""
    entry = event_service.add_attendee_to_event(
        store,
        event_id=payload.event_id,
        name=payload.name,
        email=payload.email,
    )
    return attendee_rsvp_out(entry)


@router.delete("/{event_id}/{attendee_id}", response_model=RemoveResult)
def remove_attendee(event_id: str, attendee_id: str, store: EntityStore = Depends(get_store)):
    return RemoveResult(success=event_service.remove_attendee_from_event(store, event_id, attendee_id))


@router.post("/rsvp", response_model=EventAttendeeOut)
def set_rsvp(payload: RSVPPayload, store: EntityStore = Depends(get_store)):
    """Set an attendee's RSVP status for an event."""
    entry = event_service.set_rsvp_status(
        store,
        event_id=payload.event_id,
        attendee_id=payload.attendee_id,
        rsvp_status=payload.rsvp_status,
    )
    return attendee_rsvp_out(entry)
