"""
Service layer — aggregations for the dashboard.

Pure recomputations over the in-memory lists, run on every render.
Equipment is looked up linearly per maintenance record; the lists are
expected to stay small.
"""

import datetime as dt

from tracker.models.equipment import Equipment
from tracker.models.maintenance import MaintenanceRecord

UNKNOWN_EQUIPMENT = "Unknown Equipment"


def _find_equipment(equipment: list[Equipment], equipment_id: str) -> Equipment | None:
    return next((eq for eq in equipment if eq.id == equipment_id), None)


def format_display_date(value: dt.date) -> str:
    """M/D/YYYY, without zero padding."""
    return f"{value.month}/{value.day}/{value.year}"


def status_counts(equipment: list[Equipment]) -> dict[str, int]:
    """Count equipment per status. Keys appear in first-seen order."""
    counts: dict[str, int] = {}
    for eq in equipment:
        counts[eq.status.value] = counts.get(eq.status.value, 0) + 1
    return counts


def hours_by_department(
    equipment: list[Equipment],
    records: list[MaintenanceRecord],
) -> dict[str, float]:
    """
    Sum hoursSpent per department, joined through equipmentId.
    Records whose equipment is not in the list are skipped.
    """
    hours: dict[str, float] = {}
    for record in records:
        eq = _find_equipment(equipment, record.equipment_id)
        if eq is None:
            continue
        dept = eq.department.value
        hours[dept] = hours.get(dept, 0) + record.hours_spent
    return hours


def recent_activities(
    equipment: list[Equipment],
    records: list[MaintenanceRecord],
    limit: int = 5,
) -> list[dict]:
    """The last `limit` records in the order they were added."""
    if limit <= 0:
        return []
    activities = []
    for record in records[-limit:]:
        eq = _find_equipment(equipment, record.equipment_id)
        activities.append({
            "id": record.id,
            "equipment_name": eq.name if eq else UNKNOWN_EQUIPMENT,
            "date": format_display_date(record.date),
            "description": record.description,
        })
    return activities


def build_summary(
    equipment: list[Equipment],
    records: list[MaintenanceRecord],
    recent_limit: int = 5,
) -> dict:
    """All three dashboard aggregates in one dict."""
    return {
        "total_equipment": len(equipment),
        "total_records": len(records),
        "status_counts": status_counts(equipment),
        "hours_by_department": hours_by_department(equipment, records),
        "recent_activities": recent_activities(equipment, records, recent_limit),
    }
