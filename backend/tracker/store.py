"""
In-memory session state.

Holds the two record lists, the active view, per-table sort state and the
in-progress form state. Nothing here is persisted: everything is lost when
the process restarts.
"""

from dataclasses import dataclass, field
from enum import Enum

from tracker.models.equipment import Equipment
from tracker.models.maintenance import MaintenanceRecord


class View(str, Enum):
    equipment_form = "equipmentForm"
    equipment_table = "equipmentTable"
    maintenance_form = "maintenanceForm"
    maintenance_table = "maintenanceTable"
    dashboard = "dashboard"


@dataclass
class SortState:
    """Single-column sort; column and direction are both None when unsorted."""
    column: str | None = None
    direction: str | None = None  # "asc" | "desc"


@dataclass
class FormState:
    """Raw field values and per-field error messages of a form being edited."""
    values: dict[str, str] = field(default_factory=dict)
    errors: dict[str, str] = field(default_factory=dict)
    # Parts draft (maintenance form only)
    parts: list[str] = field(default_factory=list)


@dataclass
class TrackerStore:
    equipment: list[Equipment] = field(default_factory=list)
    maintenance: list[MaintenanceRecord] = field(default_factory=list)
    active_view: View = View.equipment_form
    equipment_sort: SortState = field(default_factory=SortState)
    maintenance_sort: SortState = field(default_factory=SortState)
    equipment_form: FormState = field(default_factory=FormState)
    maintenance_form: FormState = field(default_factory=FormState)

    def find_equipment(self, equipment_id: str) -> Equipment | None:
        """Linear lookup by id; first match wins when ids collide."""
        for eq in self.equipment:
            if eq.id == equipment_id:
                return eq
        return None


_store: TrackerStore | None = None


def get_store() -> TrackerStore:
    """Get or create the process-wide store."""
    global _store
    if _store is None:
        _store = TrackerStore()
    return _store


def reset_store() -> None:
    """Drop all state (call on app shutdown and between tests)."""
    global _store
    _store = None
