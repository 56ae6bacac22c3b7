"""Tag API routes (read-only; tags are seeded)."""
from fastapi import APIRouter, Depends

from eventgraph.dependencies import get_store
from eventgraph.schemas.event import TagOut
from eventgraph.services import event_service
from eventgraph.store import EntityStore

router = APIRouter()


@router.get("/", response_model=list[TagOut])
def list_tags(store: EntityStore = Depends(get_store)):
    return [TagOut.model_validate(tag) for tag in event_service.list_tags(store)]
