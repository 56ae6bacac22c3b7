"""Named failures raised by the mutation service.

Every error carries a stable ``code`` and an ``ErrorKind`` so the
transport layers can map the whole family without matching on classes
one by one. None of these are transient; callers should not retry.
"""
import enum


class ErrorKind(str, enum.Enum):
    not_found = "not_found"
    conflict = "conflict"
    invalid_input = "invalid_input"


class EventGraphError(Exception):
    """Base class for all validation failures."""

    kind: ErrorKind = ErrorKind.invalid_input
    code: str = "EVENT_GRAPH_ERROR"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


# ---------------------------------------------------------------------------
# Not found
# ---------------------------------------------------------------------------
class NotFoundError(EventGraphError):
    kind = ErrorKind.not_found
    code = "NOT_FOUND"


class UserNotFound(NotFoundError):
    code = "USER_NOT_FOUND"

    def __init__(self, user_id: str):
        super().__init__("User not found")
        self.user_id = user_id


class EventNotFound(NotFoundError):
    code = "EVENT_NOT_FOUND"

    def __init__(self, event_id: str):
        super().__init__("Event not found")
        self.event_id = event_id


class AttendeeNotFound(NotFoundError):
    code = "ATTENDEE_NOT_FOUND"

    def __init__(self, attendee_id: str):
        super().__init__("Attendee not found")
        self.attendee_id = attendee_id


class TagNotFound(NotFoundError):
    code = "TAG_NOT_FOUND"

    def __init__(self, tag_id: str):
        super().__init__(f"Tag with id {tag_id} not found")
        self.tag_id = tag_id


class LinkNotFound(NotFoundError):
    code = "LINK_NOT_FOUND"

    def __init__(self, event_id: str, attendee_id: str):
        super().__init__("Attendee is not associated with this event")
        self.event_id = event_id
        self.attendee_id = attendee_id


# ---------------------------------------------------------------------------
# Conflict
# ---------------------------------------------------------------------------
class ConflictError(EventGraphError):
    kind = ErrorKind.conflict
    code = "CONFLICT"


class DuplicateAttendee(ConflictError):
    code = "DUPLICATE_ATTENDEE"

    def __init__(self, event_id: str, attendee_id: str):
        super().__init__("Attendee is already added to this event")
        self.event_id = event_id
        self.attendee_id = attendee_id


# ---------------------------------------------------------------------------
# Invalid input
# ---------------------------------------------------------------------------
class InvalidInputError(EventGraphError):
    kind = ErrorKind.invalid_input
    code = "INVALID_INPUT"


class InvalidRSVPStatus(InvalidInputError):
    code = "INVALID_RSVP_STATUS"

    def __init__(self, value: object):
        super().__init__('Invalid RSVP status. Must be "yes", "no", or "maybe"')
        self.value = value
