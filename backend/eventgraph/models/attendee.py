"""Attendee and EventAttendeeLink records."""
import enum
from dataclasses import dataclass
from typing import Optional


class RSVPStatus(str, enum.Enum):
    yes = "yes"
    no = "no"
    maybe = "maybe"


# Shown for an attendee with no link to the event. Never stored.
PENDING_DISPLAY = "pending"


@dataclass(frozen=True)
class Attendee:
    id: str
    name: str
    email: Optional[str] = None


@dataclass
class EventAttendeeLink:
    """One attendee's participation in one event.

    ``rsvp_status`` is the only mutable field; the link id survives
    status changes.
    """

    id: str
    event_id: str
    attendee_id: str
    rsvp_status: RSVPStatus = RSVPStatus.yes


@dataclass(frozen=True)
class AttendeeRSVP:
    """Resolved link: ``(link_id, attendee, rsvp_status)``."""

    link_id: str
    attendee: Attendee
    rsvp_status: RSVPStatus
