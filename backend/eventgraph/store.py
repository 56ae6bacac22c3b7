"""In-memory entity store.

Holds the five normalized collections and hands out identifiers. Every
collection is a dict keyed by id, so lookups by id are O(1) while
iteration keeps insertion order for list endpoints.

Users, tags, attendees and events are append-only. Links support append,
in-place RSVP update and hard delete.

The store does not validate references; that is the job of
``services.event_service``. Writers must hold ``store.lock`` for the whole
validate-then-write sequence.
"""
import threading
import uuid
from typing import Callable, Iterable, Optional

from eventgraph.models.attendee import Attendee, EventAttendeeLink, RSVPStatus
from eventgraph.models.event import Event
from eventgraph.models.tag import Tag
from eventgraph.models.user import User


def _uuid4_str() -> str:
    return str(uuid.uuid4())


class EntityStore:
    """Process-lifetime container for users, tags, attendees, events and links."""

    def __init__(self, id_factory: Optional[Callable[[], str]] = None):
        self.users: dict[str, User] = {}
        self.tags: dict[str, Tag] = {}
        self.attendees: dict[str, Attendee] = {}
        self.events: dict[str, Event] = {}
        self.links: dict[str, EventAttendeeLink] = {}
        self.lock = threading.RLock()
        self._id_factory = id_factory or _uuid4_str

    # ------------------------------------------------------------------
    # Identifiers
    # ------------------------------------------------------------------
    def _collections(self) -> tuple[dict, ...]:
        return (self.users, self.tags, self.attendees, self.events, self.links)

    def new_id(self) -> str:
        """Return an id not used by any record in any collection."""
        while True:
            candidate = self._id_factory()
            if not any(candidate in coll for coll in self._collections()):
                return candidate

    def _claim_id(self, collection: dict, record_id: Optional[str]) -> str:
        if record_id is None:
            return self.new_id()
        if record_id in collection:
            # Only reachable from seeding, which supplies its own ids.
            raise ValueError(f"Duplicate id {record_id!r}")
        return record_id

    # ------------------------------------------------------------------
    # Inserts
    # ------------------------------------------------------------------
    def add_user(self, name: str, email: str, record_id: Optional[str] = None) -> User:
        user = User(id=self._claim_id(self.users, record_id), name=name, email=email)
        self.users[user.id] = user
        return user

    def add_tag(self, name: str, record_id: Optional[str] = None) -> Tag:
        tag = Tag(id=self._claim_id(self.tags, record_id), name=name)
        self.tags[tag.id] = tag
        return tag

    def add_attendee(
        self, name: str, email: Optional[str] = None, record_id: Optional[str] = None
    ) -> Attendee:
        attendee = Attendee(id=self._claim_id(self.attendees, record_id), name=name, email=email)
        self.attendees[attendee.id] = attendee
        return attendee

    def add_event(
        self,
        title: str,
        date: str,
        created_by: str,
        tag_ids: Iterable[str] = (),
        record_id: Optional[str] = None,
    ) -> Event:
        event = Event(
            id=self._claim_id(self.events, record_id),
            title=title,
            date=date,
            created_by=created_by,
            tag_ids=tuple(tag_ids),
        )
        self.events[event.id] = event
        return event

    def add_link(
        self,
        event_id: str,
        attendee_id: str,
        rsvp_status: RSVPStatus = RSVPStatus.yes,
        record_id: Optional[str] = None,
    ) -> EventAttendeeLink:
        link = EventAttendeeLink(
            id=self._claim_id(self.links, record_id),
            event_id=event_id,
            attendee_id=attendee_id,
            rsvp_status=RSVPStatus(rsvp_status),
        )
        self.links[link.id] = link
        return link

    # ------------------------------------------------------------------
    # Link updates
    # ------------------------------------------------------------------
    def update_link_status(self, link_id: str, rsvp_status: RSVPStatus) -> Optional[EventAttendeeLink]:
        link = self.links.get(link_id)
        if link is None:
            return None
        link.rsvp_status = RSVPStatus(rsvp_status)
        return link

    def delete_link(self, link_id: str) -> bool:
        return self.links.pop(link_id, None) is not None

    def counts(self) -> dict[str, int]:
        return {
            "users": len(self.users),
            "tags": len(self.tags),
            "attendees": len(self.attendees),
            "events": len(self.events),
            "links": len(self.links),
        }
