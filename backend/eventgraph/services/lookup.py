"""Read-only finders over the entity store.

No caching: every call reads the store as it is right now.
"""
from typing import Mapping, Optional, TypeVar

from eventgraph.models.attendee import Attendee, EventAttendeeLink
from eventgraph.models.event import Event
from eventgraph.models.tag import Tag
from eventgraph.models.user import User
from eventgraph.store import EntityStore

T = TypeVar("T")


def find_by_id(collection: Mapping[str, T], record_id: Optional[str]) -> Optional[T]:
    if record_id is None:
        return None
    return collection.get(record_id)


def find_user(store: EntityStore, user_id: Optional[str]) -> Optional[User]:
    return find_by_id(store.users, user_id)


def find_tag(store: EntityStore, tag_id: Optional[str]) -> Optional[Tag]:
    return find_by_id(store.tags, tag_id)


def find_event(store: EntityStore, event_id: Optional[str]) -> Optional[Event]:
    return find_by_id(store.events, event_id)


def find_attendee(store: EntityStore, attendee_id: Optional[str]) -> Optional[Attendee]:
    return find_by_id(store.attendees, attendee_id)


def find_attendee_by_email(store: EntityStore, email: str) -> Optional[Attendee]:
    """Return the first attendee whose email matches exactly (case-sensitive)."""
    return next((a for a in store.attendees.values() if a.email == email), None)


def links_for_event(store: EntityStore, event_id: str) -> list[EventAttendeeLink]:
    """All links of one event, in insertion order."""
    return [link for link in store.links.values() if link.event_id == event_id]


def link_for(store: EntityStore, event_id: str, attendee_id: str) -> Optional[EventAttendeeLink]:
    return next(
        (
            link
            for link in store.links.values()
            if link.event_id == event_id and link.attendee_id == attendee_id
        ),
        None,
    )
