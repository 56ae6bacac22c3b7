"""FastAPI dependencies shared by the REST and GraphQL routes."""
from fastapi import Request

from eventgraph.store import EntityStore


def get_store(request: Request) -> EntityStore:
    """The store owned by the running app (set in ``create_app``)."""
    return request.app.state.store
