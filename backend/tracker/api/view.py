"""API routes for the active view."""

from fastapi import APIRouter, Depends

from tracker.schemas.common import ViewState
from tracker.store import TrackerStore, get_store

router = APIRouter(prefix="/view", tags=["View"])


@router.get("", response_model=ViewState, summary="Currently active view")
def get_view(store: TrackerStore = Depends(get_store)):
    return ViewState(active_view=store.active_view)


@router.put("", response_model=ViewState, summary="Switch the active view")
def set_view(payload: ViewState, store: TrackerStore = Depends(get_store)):
    store.active_view = payload.active_view
    return ViewState(active_view=store.active_view)
