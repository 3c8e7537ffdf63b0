"""
Service layer — equipment and maintenance intake.

Validates raw field values, assigns a random 6-digit id, appends the record
and switches the active view to the matching table. A failed validation
raises FormValidationError and leaves the store untouched.
"""

import logging
import random

from pydantic import ValidationError

from tracker.models.equipment import Equipment
from tracker.models.maintenance import MaintenanceRecord
from tracker.schemas.common import field_errors
from tracker.schemas.equipment import EquipmentCreate
from tracker.schemas.maintenance import MaintenanceCreate
from tracker.store import FormState, TrackerStore, View

logger = logging.getLogger(__name__)


class FormValidationError(Exception):
    """Raised when submitted fields fail validation; carries {field: message}."""

    def __init__(self, errors: dict[str, str]):
        super().__init__("Validation failed: " + ", ".join(errors))
        self.errors = errors


def generate_id() -> str:
    """Random 6-digit numeral string. No collision check against existing ids."""
    return str(random.randint(100000, 999999))


def add_equipment(store: TrackerStore, data: dict) -> Equipment:
    try:
        payload = EquipmentCreate.model_validate(data)
    except ValidationError as exc:
        errors = field_errors(exc)
        logger.info("Equipment rejected, invalid fields: %s", ", ".join(errors))
        raise FormValidationError(errors) from exc

    equipment = Equipment(id=generate_id(), **payload.model_dump())
    store.equipment.append(equipment)
    store.equipment_form = FormState()
    store.active_view = View.equipment_table
    logger.info("Equipment %s added: %s", equipment.id, equipment.name)
    return equipment


def add_maintenance(store: TrackerStore, data: dict) -> MaintenanceRecord:
    try:
        payload = MaintenanceCreate.model_validate(data)
    except ValidationError as exc:
        errors = field_errors(exc)
        logger.info("Maintenance record rejected, invalid fields: %s", ", ".join(errors))
        raise FormValidationError(errors) from exc

    record = MaintenanceRecord(id=generate_id(), **payload.model_dump())
    store.maintenance.append(record)
    store.maintenance_form = FormState()
    store.active_view = View.maintenance_table
    logger.info(
        "Maintenance record %s added for equipment %s (%.2fh)",
        record.id, record.equipment_id, record.hours_spent,
    )
    return record


# ── Parts editor ────────────────────────────────────


def add_part(form: FormState) -> list[str]:
    """Append an empty entry to the parts draft."""
    form.parts.append("")
    return form.parts


def _check_index(form: FormState, index: int) -> None:
    if not 0 <= index < len(form.parts):
        raise IndexError(f"No part at index {index}")


def update_part(form: FormState, index: int, value: str) -> list[str]:
    _check_index(form, index)
    form.parts[index] = value
    return form.parts


def remove_part(form: FormState, index: int) -> list[str]:
    _check_index(form, index)
    del form.parts[index]
    return form.parts


def equipment_options(store: TrackerStore) -> list[dict]:
    """Dropdown entries for the maintenance form, in insertion order."""
    return [{"id": eq.id, "name": eq.name} for eq in store.equipment]
