"""Strawberry object and input types.

Nested fields on ``Event`` are resolved per request from the store in the
GraphQL context, so every query sees the latest mutations.
"""
from typing import Optional

import strawberry
from strawberry.types import Info

from eventgraph.models.attendee import Attendee, AttendeeRSVP
from eventgraph.models.event import Event
from eventgraph.models.tag import Tag
from eventgraph.models.user import User
from eventgraph.services import resolver
from eventgraph.store import EntityStore


def store_from(info: Info) -> EntityStore:
    return info.context["store"]


@strawberry.type(name="User")
class UserType:
    id: strawberry.ID
    name: str
    email: str


@strawberry.type(name="Tag")
class TagType:
    id: strawberry.ID
    name: str


@strawberry.type(name="Attendee")
class AttendeeType:
    id: strawberry.ID
    name: str
    email: Optional[str] = None


@strawberry.type(name="EventAttendee")
class EventAttendeeType:
    id: strawberry.ID
    attendee: AttendeeType
    rsvp_status: str


def user_type(user: User) -> UserType:
    return UserType(id=strawberry.ID(user.id), name=user.name, email=user.email)


def tag_type(tag: Tag) -> TagType:
    return TagType(id=strawberry.ID(tag.id), name=tag.name)


def attendee_type(attendee: Attendee) -> AttendeeType:
    return AttendeeType(id=strawberry.ID(attendee.id), name=attendee.name, email=attendee.email)


def event_attendee_type(entry: AttendeeRSVP) -> EventAttendeeType:
    return EventAttendeeType(
        id=strawberry.ID(entry.link_id),
        attendee=attendee_type(entry.attendee),
        rsvp_status=entry.rsvp_status.value,
    )


@strawberry.type(name="Event")
class EventType:
    id: strawberry.ID
    title: str
    date: str
    record: strawberry.Private[Event]

    @strawberry.field
    def created_by(self, info: Info) -> Optional[UserType]:
        user = resolver.resolve_created_by(store_from(info), self.record)
        return user_type(user) if user else None

    @strawberry.field
    def tags(self, info: Info) -> list[TagType]:
        return [tag_type(tag) for tag in resolver.resolve_tags(store_from(info), self.record)]

    @strawberry.field
    def attendees(self, info: Info) -> list[EventAttendeeType]:
        return [event_attendee_type(e) for e in resolver.resolve_attendees(store_from(info), self.record)]

    @strawberry.field
    def attendee_count(self, info: Info) -> int:
        return resolver.resolve_attendee_count(store_from(info), self.record)


def event_type(event: Event) -> EventType:
    return EventType(id=strawberry.ID(event.id), title=event.title, date=event.date, record=event)


@strawberry.input
class CreateEventInput:
    title: str
    date: str
    created_by: strawberry.ID
    tag_ids: Optional[list[strawberry.ID]] = None


@strawberry.input(name="AddAttendeeInput")
class AddAttendeeInput:
    event_id: strawberry.ID
    name: str
    email: Optional[str] = None


@strawberry.input(name="SetRSVPInput")
class SetRSVPInput:
    event_id: strawberry.ID
    attendee_id: strawberry.ID
    rsvp_status: str
