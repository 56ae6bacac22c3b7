"""User API routes (read-only; users are seeded)."""
from fastapi import APIRouter, Depends

from eventgraph.dependencies import get_store
from eventgraph.schemas.event import UserOut
from eventgraph.services import event_service
from eventgraph.store import EntityStore

router = APIRouter()


@router.get("/", response_model=list[UserOut])
def list_users(store: EntityStore = Depends(get_store)):
    """List all users."""
    return [UserOut.model_validate(user) for user in event_service.list_users(store)]
