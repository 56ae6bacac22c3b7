"""FastAPI application entry point."""
import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from eventgraph.config import settings
from eventgraph.errors import ErrorKind, EventGraphError
from eventgraph.graphql.schema import build_graphql_router
from eventgraph.logging_config import setup_logging
from eventgraph.routers import attendees, events, tags, users
from eventgraph.seed import seed_store
from eventgraph.store import EntityStore

logger = logging.getLogger(__name__)

STATUS_BY_KIND = {
    ErrorKind.not_found: 404,
    ErrorKind.conflict: 409,
    ErrorKind.invalid_input: 400,
}


async def _event_graph_error_handler(request: Request, exc: EventGraphError) -> JSONResponse:
    logger.warning("%s %s failed: %s (%s)", request.method, request.url.path, exc.message, exc.code)
    return JSONResponse(
        status_code=STATUS_BY_KIND[exc.kind],
        content={"detail": exc.message, "code": exc.code},
    )


def create_app(store: Optional[EntityStore] = None) -> FastAPI:
    """Build the app around ``store``; a seeded store is created when omitted."""
    setup_logging(settings.LOG_LEVEL, settings.LOG_FILE)

    if store is None:
        store = EntityStore()
        if settings.SEED_ON_STARTUP:
            seed_store(store)

    app = FastAPI(
        title=settings.APP_NAME,
        description="Events, attendees and RSVPs served as a queryable graph",
        version="0.1.0",
    )
    app.state.store = store

    # CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS.split(","),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(EventGraphError, _event_graph_error_handler)

    # Register routers
    app.include_router(users.router, prefix="/api/users", tags=["Users"])
    app.include_router(tags.router, prefix="/api/tags", tags=["Tags"])
    app.include_router(events.router, prefix="/api/events", tags=["Events"])
    app.include_router(attendees.router, prefix="/api/attendees", tags=["Attendees"])
    app.include_router(build_graphql_router(), prefix=settings.GRAPHQL_PATH, tags=["GraphQL"])

    @app.get("/api/health")
    def health_check():
        return {"status": "ok"}

    return app


app = create_app()
