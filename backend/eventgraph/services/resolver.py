"""Graph resolver: expands a normalized Event into its nested shape.

Dangling references on the read path are dropped rather than raised, so
a single broken record cannot fail a whole list query. Only the mutation
service hard-fails on unresolved ids.
"""
from typing import Iterable, Optional

from eventgraph.errors import AttendeeNotFound, EventNotFound
from eventgraph.models.attendee import PENDING_DISPLAY, AttendeeRSVP
from eventgraph.models.event import Event
from eventgraph.models.tag import Tag
from eventgraph.models.user import User
from eventgraph.schemas.event import AttendeeOut, EventAttendeeOut, EventOut, TagOut, UserOut
from eventgraph.services import lookup
from eventgraph.store import EntityStore


def resolve_created_by(store: EntityStore, event: Event) -> Optional[User]:
    with store.lock:
        return lookup.find_user(store, event.created_by)


def resolve_tags(store: EntityStore, event: Event) -> list[Tag]:
    """Tags in ``tag_ids`` order; ids that no longer resolve are skipped."""
    with store.lock:
        tags = [lookup.find_tag(store, tag_id) for tag_id in event.tag_ids]
    return [tag for tag in tags if tag is not None]


def resolve_attendees(store: EntityStore, event: Event) -> list[AttendeeRSVP]:
    resolved = []
    with store.lock:
        for link in lookup.links_for_event(store, event.id):
            attendee = lookup.find_attendee(store, link.attendee_id)
            if attendee is None:
                continue
            resolved.append(AttendeeRSVP(link_id=link.id, attendee=attendee, rsvp_status=link.rsvp_status))
    return resolved


def resolve_attendee_count(store: EntityStore, event: Event) -> int:
    # Counts links, not resolved attendees.
    with store.lock:
        return len(lookup.links_for_event(store, event.id))


def rsvp_display_status(store: EntityStore, event_id: str, attendee_id: str) -> str:
    """Status to show for an attendee, ``"pending"`` when they have no link.

    Raises ``EventNotFound`` / ``AttendeeNotFound`` for unknown ids; pending
    only describes two real records that are not linked yet.
    """
    with store.lock:
        if lookup.find_event(store, event_id) is None:
            raise EventNotFound(event_id)
        if lookup.find_attendee(store, attendee_id) is None:
            raise AttendeeNotFound(attendee_id)
        link = lookup.link_for(store, event_id, attendee_id)
        if link is None:
            return PENDING_DISPLAY
        return link.rsvp_status.value


def attendee_rsvp_out(entry: AttendeeRSVP) -> EventAttendeeOut:
    return EventAttendeeOut(
        id=entry.link_id,
        attendee=AttendeeOut.model_validate(entry.attendee),
        rsvp_status=entry.rsvp_status.value,
    )


def resolve_event(store: EntityStore, event: Event) -> EventOut:
    """Full nested response for one event, read under the store lock."""
    with store.lock:
        creator = resolve_created_by(store, event)
        return EventOut(
            id=event.id,
            title=event.title,
            date=event.date,
            created_by=UserOut.model_validate(creator) if creator else None,
            tags=[TagOut.model_validate(tag) for tag in resolve_tags(store, event)],
            attendees=[attendee_rsvp_out(entry) for entry in resolve_attendees(store, event)],
            attendee_count=resolve_attendee_count(store, event),
        )


def resolve_events(store: EntityStore, events: Iterable[Event]) -> list[EventOut]:
    return [resolve_event(store, event) for event in events]
