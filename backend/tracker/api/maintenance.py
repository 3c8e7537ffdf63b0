"""API routes for maintenance intake, the parts editor and the records table."""

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException

from tracker.api.errors import unknown_column, validation_failed
from tracker.models.maintenance import MaintenanceRecord
from tracker.schemas.common import SortStateItem
from tracker.schemas.maintenance import (
    EquipmentOption,
    EquipmentOptionsResponse,
    MaintenanceRow,
    MaintenanceTableResponse,
    PartsDraft,
    PartUpdate,
)
from tracker.services.intake import (
    FormValidationError,
    add_maintenance,
    add_part,
    equipment_options,
    remove_part,
    update_part,
)
from tracker.services.sorting import (
    MAINTENANCE_COLUMNS,
    UnknownColumnError,
    maintenance_rows,
    sort_rows,
    toggle_sort,
)
from tracker.store import TrackerStore, get_store

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/maintenance", tags=["Maintenance"])


def _table(store: TrackerStore) -> MaintenanceTableResponse:
    state = store.maintenance_sort
    rows = sort_rows(
        maintenance_rows(store.maintenance, store.equipment),
        state,
        MAINTENANCE_COLUMNS,
    )
    return MaintenanceTableResponse(
        rows=[
            MaintenanceRow(record=r.record, equipment_name=r.equipment_name)
            for r in rows
        ],
        sort=SortStateItem(column=state.column, direction=state.direction),
    )


# ── Table ───────────────────────────────────────────


@router.get("", response_model=MaintenanceTableResponse, summary="Maintenance records table")
def list_maintenance(store: TrackerStore = Depends(get_store)):
    return _table(store)


@router.post(
    "/sort/{column}",
    response_model=MaintenanceTableResponse,
    summary="Toggle sorting on a column",
)
def toggle_maintenance_sort(column: str, store: TrackerStore = Depends(get_store)):
    try:
        toggle_sort(store.maintenance_sort, column, MAINTENANCE_COLUMNS)
        return _table(store)
    except UnknownColumnError as exc:
        raise unknown_column(exc)
    except Exception:
        logger.exception("Sorting maintenance records by %s failed", column)
        raise HTTPException(status_code=500, detail="Internal server error")


# ── Intake ──────────────────────────────────────────


@router.post(
    "",
    response_model=MaintenanceRecord,
    status_code=201,
    summary="Add a maintenance record",
)
def create_maintenance(
    data: dict[str, Any] = Body(...),
    store: TrackerStore = Depends(get_store),
):
    """
    Validate and append one maintenance record. The equipment id is only
    checked for being non-empty. Without a partsReplaced key the current
    parts draft is used.
    """
    if "partsReplaced" not in data and "parts_replaced" not in data:
        data["partsReplaced"] = list(store.maintenance_form.parts)
    try:
        return add_maintenance(store, data)
    except FormValidationError as exc:
        raise validation_failed(exc)


@router.get(
    "/options",
    response_model=EquipmentOptionsResponse,
    summary="Equipment dropdown entries",
)
def list_equipment_options(store: TrackerStore = Depends(get_store)):
    return EquipmentOptionsResponse(
        options=[EquipmentOption(**o) for o in equipment_options(store)]
    )


# ── Parts editor ────────────────────────────────────


@router.get("/parts", response_model=PartsDraft, summary="Current parts draft")
def get_parts(store: TrackerStore = Depends(get_store)):
    return PartsDraft(parts=store.maintenance_form.parts)


@router.post("/parts", response_model=PartsDraft, summary="Append an empty part")
def append_part(store: TrackerStore = Depends(get_store)):
    return PartsDraft(parts=add_part(store.maintenance_form))


@router.put("/parts/{index}", response_model=PartsDraft, summary="Edit the part at index")
def edit_part(index: int, payload: PartUpdate, store: TrackerStore = Depends(get_store)):
    try:
        return PartsDraft(parts=update_part(store.maintenance_form, index, payload.value))
    except IndexError as exc:
        raise HTTPException(status_code=404, detail=str(exc))


@router.delete("/parts/{index}", response_model=PartsDraft, summary="Remove the part at index")
def delete_part(index: int, store: TrackerStore = Depends(get_store)):
    try:
        return PartsDraft(parts=remove_part(store.maintenance_form, index))
    except IndexError as exc:
        raise HTTPException(status_code=404, detail=str(exc))
