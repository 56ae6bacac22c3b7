from eventgraph.models.user import User
from eventgraph.models.tag import Tag
from eventgraph.models.event import Event
from eventgraph.models.attendee import Attendee, AttendeeRSVP, EventAttendeeLink, RSVPStatus

__all__ = [
    "Attendee",
    "AttendeeRSVP",
    "Event",
    "EventAttendeeLink",
    "RSVPStatus",
    "Tag",
    "User",
]
