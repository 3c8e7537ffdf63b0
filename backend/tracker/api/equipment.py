"""API routes for equipment intake and the equipment table."""

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException

from tracker.api.errors import unknown_column, validation_failed
from tracker.models.equipment import Equipment
from tracker.schemas.common import SortStateItem
from tracker.schemas.equipment import EquipmentTableResponse
from tracker.services.intake import FormValidationError, add_equipment
from tracker.services.sorting import (
    EQUIPMENT_COLUMNS,
    UnknownColumnError,
    sort_rows,
    toggle_sort,
)
from tracker.store import TrackerStore, get_store

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/equipment", tags=["Equipment"])


def _table(store: TrackerStore) -> EquipmentTableResponse:
    state = store.equipment_sort
    return EquipmentTableResponse(
        rows=sort_rows(store.equipment, state, EQUIPMENT_COLUMNS),
        sort=SortStateItem(column=state.column, direction=state.direction),
    )


@router.get("", response_model=EquipmentTableResponse, summary="Equipment table")
def list_equipment(store: TrackerStore = Depends(get_store)):
    """All equipment in the table's current sort order."""
    return _table(store)


@router.post(
    "",
    response_model=Equipment,
    status_code=201,
    summary="Add equipment",
)
def create_equipment(
    data: dict[str, Any] = Body(...),
    store: TrackerStore = Depends(get_store),
):
    """
    Validate and append one equipment record. On success the active view
    switches to the equipment table; on failure nothing is stored and a 422
    carries one message per invalid field.
    """
    try:
        return add_equipment(store, data)
    except FormValidationError as exc:
        raise validation_failed(exc)


@router.post(
    "/sort/{column}",
    response_model=EquipmentTableResponse,
    summary="Toggle sorting on a column",
)
def toggle_equipment_sort(column: str, store: TrackerStore = Depends(get_store)):
    try:
        toggle_sort(store.equipment_sort, column, EQUIPMENT_COLUMNS)
        return _table(store)
    except UnknownColumnError as exc:
        raise unknown_column(exc)
    except Exception:
        logger.exception("Sorting equipment by %s failed", column)
        raise HTTPException(status_code=500, detail="Internal server error")
