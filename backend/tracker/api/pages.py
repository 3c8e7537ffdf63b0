"""
Server-rendered views.

GET / renders whichever of the five views is active. Every button on the
page is a POST that updates the store and redirects back to /.
"""

import datetime as dt
import logging
from enum import Enum
from pathlib import Path

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import RedirectResponse, Response
from fastapi.templating import Jinja2Templates

from tracker.api.dashboard import ChartName, render_chart
from tracker.config import get_settings
from tracker.models.equipment import Department, Status
from tracker.models.maintenance import CompletionStatus, MaintenanceType, Priority
from tracker.services.dashboard import build_summary
from tracker.services.intake import (
    FormValidationError,
    add_equipment,
    add_maintenance,
    add_part,
    equipment_options,
    remove_part,
)
from tracker.services.sorting import (
    EQUIPMENT_COLUMNS,
    MAINTENANCE_COLUMNS,
    UnknownColumnError,
    maintenance_rows,
    sort_rows,
    toggle_sort,
)
from tracker.store import FormState, TrackerStore, View, get_store

logger = logging.getLogger(__name__)

templates = Jinja2Templates(directory=str(Path(__file__).resolve().parent.parent / "templates"))

router = APIRouter(tags=["Pages"], include_in_schema=False)

VIEW_LABELS = {
    View.equipment_form: "Equipment Form",
    View.equipment_table: "Equipment Table",
    View.maintenance_form: "Maintenance Record Form",
    View.maintenance_table: "Maintenance Records Table",
    View.dashboard: "Dashboard",
}

VIEW_TITLES = {
    View.equipment_form: "Add New Equipment",
    View.equipment_table: "Equipment List",
    View.maintenance_form: "Add New Maintenance Record",
    View.maintenance_table: "Maintenance Records List",
    View.dashboard: "Dashboard",
}

EQUIPMENT_FIELDS = ("name", "location", "department", "model", "serialNumber", "installDate", "status")
MAINTENANCE_FIELDS = (
    "equipmentId", "date", "type", "technician", "hoursSpent",
    "description", "priority", "completionStatus",
)


class TableName(str, Enum):
    equipment = "equipment"
    maintenance = "maintenance"


def _equipment_defaults() -> dict[str, str]:
    return {
        "name": "",
        "location": "",
        "department": Department.Machining.value,
        "model": "",
        "serialNumber": "",
        "installDate": dt.date.today().isoformat(),
        "status": Status.Operational.value,
    }


def _maintenance_defaults() -> dict[str, str]:
    return {
        "equipmentId": "",
        "date": dt.date.today().isoformat(),
        "type": MaintenanceType.Preventive.value,
        "technician": "",
        "hoursSpent": "0",
        "description": "",
        "priority": Priority.Low.value,
        "completionStatus": CompletionStatus.PendingParts.value,
    }


def _redirect_home() -> RedirectResponse:
    return RedirectResponse("/", status_code=303)


async def _read_form(request: Request, fields: tuple[str, ...]) -> tuple[dict[str, str], list[str]]:
    """Scalar field values plus the repeated partsReplaced inputs."""
    form = await request.form()
    values = {name: str(form.get(name, "")) for name in fields}
    parts = [str(p) for p in form.getlist("partsReplaced")]
    return values, parts


def _table_context(rows: list, state, columns) -> dict:
    ordered = sort_rows(rows, state, columns)
    return {
        "columns": list(columns.values()),
        "rows": [[col.value(row) for col in columns.values()] for row in ordered],
        "sort": state,
    }


def _view_context(store: TrackerStore) -> dict:
    view = store.active_view
    if view is View.equipment_form:
        form = store.equipment_form
        return {
            "values": {**_equipment_defaults(), **form.values},
            "errors": form.errors,
            "departments": [d.value for d in Department],
            "statuses": [s.value for s in Status],
        }
    if view is View.equipment_table:
        return {"table": _table_context(store.equipment, store.equipment_sort, EQUIPMENT_COLUMNS)}
    if view is View.maintenance_form:
        form = store.maintenance_form
        return {
            "values": {**_maintenance_defaults(), **form.values},
            "errors": form.errors,
            "parts": form.parts,
            "options": equipment_options(store),
            "types": [t.value for t in MaintenanceType],
            "priorities": [p.value for p in Priority],
            "completion_statuses": [c.value for c in CompletionStatus],
        }
    if view is View.maintenance_table:
        rows = maintenance_rows(store.maintenance, store.equipment)
        return {"table": _table_context(rows, store.maintenance_sort, MAINTENANCE_COLUMNS)}
    return {
        "summary": build_summary(
            store.equipment,
            store.maintenance,
            get_settings().RECENT_ACTIVITY_LIMIT,
        ),
    }


# ── GET / ───────────────────────────────────────────


@router.get("/")
def index(request: Request, store: TrackerStore = Depends(get_store)):
    view = store.active_view
    context = {
        "app_name": get_settings().APP_NAME,
        "active_view": view,
        "view_labels": VIEW_LABELS,
        "view_title": VIEW_TITLES[view],
        **_view_context(store),
    }
    return templates.TemplateResponse(request, f"{view.value}.html", context)


# ── Navigation ──────────────────────────────────────


@router.post("/views/{view}")
def switch_view(view: View, store: TrackerStore = Depends(get_store)):
    store.active_view = view
    return _redirect_home()


# ── Forms ───────────────────────────────────────────


@router.post("/forms/equipment")
async def submit_equipment_form(request: Request, store: TrackerStore = Depends(get_store)):
    values, _ = await _read_form(request, EQUIPMENT_FIELDS)
    try:
        add_equipment(store, values)
    except FormValidationError as exc:
        store.equipment_form = FormState(values=values, errors=exc.errors)
    return _redirect_home()


async def _sync_maintenance_form(request: Request, store: TrackerStore) -> FormState:
    values, parts = await _read_form(request, MAINTENANCE_FIELDS)
    form = store.maintenance_form
    form.values = values
    form.parts = parts
    return form


@router.post("/forms/maintenance")
async def submit_maintenance_form(request: Request, store: TrackerStore = Depends(get_store)):
    form = await _sync_maintenance_form(request, store)
    try:
        add_maintenance(store, {**form.values, "partsReplaced": list(form.parts)})
    except FormValidationError as exc:
        form.errors = exc.errors
    return _redirect_home()


@router.post("/forms/maintenance/parts")
async def add_maintenance_part(request: Request, store: TrackerStore = Depends(get_store)):
    add_part(await _sync_maintenance_form(request, store))
    return _redirect_home()


@router.post("/forms/maintenance/parts/{index}/remove")
async def remove_maintenance_part(index: int, request: Request, store: TrackerStore = Depends(get_store)):
    form = await _sync_maintenance_form(request, store)
    try:
        remove_part(form, index)
    except IndexError as exc:
        raise HTTPException(status_code=404, detail=str(exc))
    return _redirect_home()


# ── Tables ──────────────────────────────────────────


@router.post("/tables/{table}/sort/{column}")
def sort_table(table: TableName, column: str, store: TrackerStore = Depends(get_store)):
    if table is TableName.equipment:
        state, columns = store.equipment_sort, EQUIPMENT_COLUMNS
    else:
        state, columns = store.maintenance_sort, MAINTENANCE_COLUMNS
    try:
        toggle_sort(state, column, columns)
    except UnknownColumnError as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    return _redirect_home()


# ── Charts ──────────────────────────────────────────


@router.get("/charts/{chart}.svg")
def chart_image(chart: ChartName, store: TrackerStore = Depends(get_store)):
    try:
        svg = render_chart(chart, store)
    except Exception:
        logger.exception("Rendering chart %s failed", chart.value)
        raise HTTPException(status_code=500, detail="Internal server error")
    return Response(content=svg, media_type="image/svg+xml")
