"""GraphQL schema: Query / Mutation roots mounted on FastAPI.

Service errors are re-raised as ``GraphQLError`` with ``extensions.code``
set to the error's code, so clients can branch on it.
"""
import logging
from typing import Callable, Optional, TypeVar

import strawberry
from fastapi import Depends
from graphql import GraphQLError
from strawberry.fastapi import GraphQLRouter
from strawberry.types import Info

from eventgraph.config import settings
from eventgraph.dependencies import get_store
from eventgraph.errors import EventGraphError
from eventgraph.graphql.types import (
    AddAttendeeInput,
    CreateEventInput,
    EventAttendeeType,
    EventType,
    SetRSVPInput,
    TagType,
    UserType,
    event_attendee_type,
    event_type,
    store_from,
    tag_type,
    user_type,
)
from eventgraph.services import event_service
from eventgraph.store import EntityStore

logger = logging.getLogger(__name__)

R = TypeVar("R")


def _call(operation: Callable[..., R], *args, **kwargs) -> R:
    try:
        return operation(*args, **kwargs)
    except EventGraphError as exc:
        logger.warning("GraphQL %s failed: %s (%s)", operation.__name__, exc.message, exc.code)
        raise GraphQLError(exc.message, extensions={"code": exc.code}) from exc


@strawberry.type
class Query:
    @strawberry.field
    def events(self, info: Info) -> list[EventType]:
        return [event_type(e) for e in event_service.list_events(store_from(info))]

    @strawberry.field
    def event(self, info: Info, id: strawberry.ID) -> Optional[EventType]:
        found = event_service.get_event(store_from(info), id)
        return event_type(found) if found else None

    @strawberry.field
    def tags(self, info: Info) -> list[TagType]:
        return [tag_type(t) for t in event_service.list_tags(store_from(info))]

    @strawberry.field
    def users(self, info: Info) -> list[UserType]:
        return [user_type(u) for u in event_service.list_users(store_from(info))]


# Sync resolvers run on the event loop and may wait on ``store.lock`` held by
# a REST worker thread. Every hold is an in-memory scan or write, never I/O.
@strawberry.type
class Mutation:
    @strawberry.mutation
    def create_event(self, info: Info, input: CreateEventInput) -> EventType:
        event = _call(
            event_service.create_event,
            store_from(info),
            title=input.title,
            date=input.date,
            created_by=input.created_by,
            tag_ids=input.tag_ids,
        )
        return event_type(event)

    @strawberry.mutation
    def add_attendee_to_event(self, info: Info, input: AddAttendeeInput) -> EventAttendeeType:
        entry = _call(
            event_service.add_attendee_to_event,
            store_from(info),
            event_id=input.event_id,
            name=input.name,
            email=input.email,
        )
        return event_attendee_type(entry)

    @strawberry.mutation
    def remove_attendee_from_event(
        self, info: Info, event_id: strawberry.ID, attendee_id: strawberry.ID
    ) -> bool:
        return _call(event_service.remove_attendee_from_event, store_from(info), event_id, attendee_id)

    @strawberry.mutation(name="setRSVPStatus")
    def set_rsvp_status(self, info: Info, input: SetRSVPInput) -> EventAttendeeType:
        entry = _call(
            event_service.set_rsvp_status,
            store_from(info),
            event_id=input.event_id,
            attendee_id=input.attendee_id,
            rsvp_status=input.rsvp_status,
        )
        return event_attendee_type(entry)


schema = strawberry.Schema(query=Query, mutation=Mutation)


def get_context(store: EntityStore = Depends(get_store)) -> dict:
    return {"store": store}


def build_graphql_router() -> GraphQLRouter:
    return GraphQLRouter(
        schema,
        context_getter=get_context,
        graphql_ide="graphiql" if settings.GRAPHQL_IDE else None,
    )
