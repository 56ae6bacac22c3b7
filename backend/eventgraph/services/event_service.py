"""Core event service — enforces the reference and association invariants.

Responsibilities:
- Referential checks: creator, tags, event and attendee must exist
- Attendee de-duplication by email (first write wins on the name)
- At most one link per (event, attendee) pair
- RSVP status restricted to yes / no / maybe

Every operation validates all preconditions before its first write and runs
under ``store.lock``, so a failed call leaves the store untouched and no
reader sees a half-applied mutation.
"""
import logging
from typing import Iterable, Optional

from eventgraph.errors import (
    AttendeeNotFound,
    DuplicateAttendee,
    EventNotFound,
    InvalidRSVPStatus,
    LinkNotFound,
    TagNotFound,
    UserNotFound,
)
from eventgraph.models.attendee import AttendeeRSVP, RSVPStatus
from eventgraph.models.event import Event
from eventgraph.models.tag import Tag
from eventgraph.models.user import User
from eventgraph.services import lookup
from eventgraph.store import EntityStore

logger = logging.getLogger(__name__)


def _parse_rsvp_status(value: object) -> RSVPStatus:
    try:
        return RSVPStatus(value)
    except ValueError:
        raise InvalidRSVPStatus(value) from None


def _require_event(store: EntityStore, event_id: str) -> Event:
    event = lookup.find_event(store, event_id)
    if event is None:
        raise EventNotFound(event_id)
    return event


def _require_attendee(store: EntityStore, attendee_id: str) -> None:
    if lookup.find_attendee(store, attendee_id) is None:
        raise AttendeeNotFound(attendee_id)


# ---------------------------------------------------------------------------
# Reads
# ---------------------------------------------------------------------------
def list_events(store: EntityStore) -> list[Event]:
    with store.lock:
        return list(store.events.values())


def get_event(store: EntityStore, event_id: str) -> Optional[Event]:
    return lookup.find_event(store, event_id)


def list_tags(store: EntityStore) -> list[Tag]:
    with store.lock:
        return list(store.tags.values())


def list_users(store: EntityStore) -> list[User]:
    with store.lock:
        return list(store.users.values())


# ---------------------------------------------------------------------------
# Writes
# ---------------------------------------------------------------------------
def create_event(
    store: EntityStore,
    title: str,
    date: str,
    created_by: str,
    tag_ids: Optional[Iterable[str]] = None,
) -> Event:
    """Create an event after checking its creator and every tag."""
    tag_ids = list(tag_ids or [])
    with store.lock:
        if lookup.find_user(store, created_by) is None:
            raise UserNotFound(created_by)
        for tag_id in tag_ids:
            if lookup.find_tag(store, tag_id) is None:
                raise TagNotFound(tag_id)

        event = store.add_event(title=title, date=date, created_by=created_by, tag_ids=tag_ids)
    logger.info("Created event '%s' (%s) by user %s", title, event.id, created_by)
    return event


def add_attendee_to_event(
    store: EntityStore,
    event_id: str,
    name: str,
    email: Optional[str] = None,
) -> AttendeeRSVP:
    """Attach a person to an event with RSVP ``yes``.

    An existing attendee with the same email is reused as-is, even if the
    submitted name differs. A new attendee record is only written once the
    duplicate-link check has passed.
    """
    email = email or None
    with store.lock:
        _require_event(store, event_id)

        attendee = lookup.find_attendee_by_email(store, email) if email else None
        if attendee is not None and lookup.link_for(store, event_id, attendee.id) is not None:
            raise DuplicateAttendee(event_id, attendee.id)

        if attendee is None:
            attendee = store.add_attendee(name=name, email=email)
            logger.info("Created attendee %s (%s)", attendee.id, name)

        link = store.add_link(event_id=event_id, attendee_id=attendee.id)
    logger.info("Added attendee %s to event %s (link %s)", attendee.id, event_id, link.id)
    return AttendeeRSVP(link_id=link.id, attendee=attendee, rsvp_status=link.rsvp_status)


def remove_attendee_from_event(store: EntityStore, event_id: str, attendee_id: str) -> bool:
    """Delete the link between an event and an attendee. Both records survive."""
    with store.lock:
        _require_event(store, event_id)
        _require_attendee(store, attendee_id)
        link = lookup.link_for(store, event_id, attendee_id)
        if link is None:
            raise LinkNotFound(event_id, attendee_id)
        store.delete_link(link.id)
    logger.info("Removed attendee %s from event %s", attendee_id, event_id)
    return True


def set_rsvp_status(
    store: EntityStore,
    event_id: str,
    attendee_id: str,
    rsvp_status: object,
) -> AttendeeRSVP:
    """Update an existing link's status in place; the link id is kept."""
    status = _parse_rsvp_status(rsvp_status)
    with store.lock:
        _require_event(store, event_id)
        _require_attendee(store, attendee_id)
        link = lookup.link_for(store, event_id, attendee_id)
        if link is None:
            raise LinkNotFound(event_id, attendee_id)
        store.update_link_status(link.id, status)
        attendee = lookup.find_attendee(store, attendee_id)
    logger.info("Attendee %s RSVP'd '%s' to event %s", attendee_id, status.value, event_id)
    return AttendeeRSVP(link_id=link.id, attendee=attendee, rsvp_status=link.rsvp_status)
