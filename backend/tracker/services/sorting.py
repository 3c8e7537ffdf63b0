"""
Table columns and single-column toggle sorting.

A header toggle cycles ascending -> descending -> unsorted. Rows are
compared on the column's display string with a locale-aware key:
accents stripped and case folded first, lowercase before uppercase on ties.
"""

import unicodedata
from dataclasses import dataclass
from typing import Any, Callable

from tracker.models.equipment import Equipment
from tracker.store import SortState

ASC = "asc"
DESC = "desc"


class UnknownColumnError(ValueError):
    def __init__(self, column: str):
        super().__init__(f"Unknown column: {column}")
        self.column = column


@dataclass(frozen=True)
class Column:
    key: str
    header: str
    value: Callable[[Any], str]


@dataclass(frozen=True)
class MaintenanceRowView:
    """A record together with the equipment name shown in its first column."""
    record: Any
    equipment_name: str


def format_hours(hours: float) -> str:
    return f"{hours:g}"


EQUIPMENT_COLUMNS: dict[str, Column] = {
    c.key: c
    for c in (
        Column("id", "Equipment ID", lambda eq: eq.id),
        Column("name", "Name", lambda eq: eq.name),
        Column("location", "Location", lambda eq: eq.location),
        Column("department", "Department", lambda eq: eq.department.value),
        Column("model", "Model", lambda eq: eq.model),
        Column("serialNumber", "Serial Number", lambda eq: eq.serial_number),
        Column("installDate", "Install Date", lambda eq: eq.install_date.isoformat()),
        Column("status", "Status", lambda eq: eq.status.value),
    )
}

MAINTENANCE_COLUMNS: dict[str, Column] = {
    c.key: c
    for c in (
        Column("equipmentId", "Equipment", lambda row: row.equipment_name),
        Column("date", "Date", lambda row: row.record.date.isoformat()),
        Column("type", "Type", lambda row: row.record.type.value),
        Column("technician", "Technician", lambda row: row.record.technician),
        Column("hoursSpent", "Hours Spent", lambda row: format_hours(row.record.hours_spent)),
        Column("description", "Description", lambda row: row.record.description),
        Column("partsReplaced", "Parts Replaced", lambda row: ", ".join(row.record.parts_replaced)),
        Column("priority", "Priority", lambda row: row.record.priority.value),
        Column("completionStatus", "Completion Status", lambda row: row.record.completion_status.value),
    )
}

UNKNOWN_EQUIPMENT_CELL = "Unknown"


def locale_key(value: str) -> tuple[str, str]:
    decomposed = unicodedata.normalize("NFKD", value)
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return base.casefold(), value.swapcase()


def toggle_sort(state: SortState, column: str, columns: dict[str, Column]) -> SortState:
    """Advance the sort cycle for `column` in place and return the state."""
    if column not in columns:
        raise UnknownColumnError(column)
    if state.column != column:
        state.column, state.direction = column, ASC
    elif state.direction == ASC:
        state.direction = DESC
    else:
        state.column, state.direction = None, None
    return state


def sort_rows(rows: list, state: SortState, columns: dict[str, Column]) -> list:
    """Return rows in display order; insertion order when unsorted."""
    if state.column is None:
        return list(rows)
    if state.column not in columns:
        raise UnknownColumnError(state.column)
    accessor = columns[state.column].value
    return sorted(
        rows,
        key=lambda row: locale_key(accessor(row)),
        reverse=state.direction == DESC,
    )


def maintenance_rows(records: list, equipment: list[Equipment]) -> list[MaintenanceRowView]:
    """Attach the equipment name to each record ("Unknown" when not found)."""
    names = {}
    for eq in equipment:
        names.setdefault(eq.id, eq.name)
    return [
        MaintenanceRowView(record, names.get(record.equipment_id, UNKNOWN_EQUIPMENT_CELL))
        for record in records
    ]
