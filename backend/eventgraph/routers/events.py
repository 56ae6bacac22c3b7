"""Event API routes — delegates to event_service for invariant enforcement."""
from fastapi import APIRouter, Depends, status

from eventgraph.dependencies import get_store
from eventgraph.errors import EventNotFound
from eventgraph.schemas.event import EventCreate, EventOut
from eventgraph.services import event_service, resolver
from eventgraph.store import EntityStore

router = APIRouter()


@router.post("/", response_model=EventOut, status_code=status.HTTP_201_CREATED)
def create_event(payload: EventCreate, store: EntityStore = Depends(get_store)):
    """Create a new event after checking its creator and tags."""
    event = event_service.create_event(
        store,
        title=payload.title,
        date=payload.date,
        created_by=payload.created_by,
        tag_ids=payload.tag_ids,
    )
    return resolver.resolve_event(store, event)


@router.get("/", response_model=list[EventOut])
def list_events(store: EntityStore = Depends(get_store)):
    """List events in creation order, fully expanded."""
    return resolver.resolve_events(store, event_service.list_events(store))


@router.get("/{event_id}", response_model=EventOut)
def get_event(event_id: str, store: EntityStore = Depends(get_store)):
    """Fetch a single event with creator, tags and attendees."""
    event = event_service.get_event(store, event_id)
    if not event:
        raise EventNotFound(event_id)
    return resolver.resolve_event(store, event)


@router.get("/{event_id}/attendees/{attendee_id}/rsvp")
def get_rsvp_display_status(event_id: str, attendee_id: str, store: EntityStore = Depends(get_store)):
    """Status to display for one attendee; ``pending`` when not linked yet."""
    return {"rsvp_status": resolver.rsvp_display_status(store, event_id, attendee_id)}
