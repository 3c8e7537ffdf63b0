"""Pydantic schemas for maintenance intake, the parts editor and the records table."""

import datetime as dt

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

from tracker.models.maintenance import (
    CompletionStatus,
    MaintenanceRecord,
    MaintenanceType,
    Priority,
)
from tracker.schemas.common import SortStateItem, min_length, past_date

MAX_HOURS_SPENT = 24


class MaintenanceCreate(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    equipment_id: str
    date: dt.date
    type: MaintenanceType
    technician: str
    hours_spent: float = Field(allow_inf_nan=False)
    description: str
    parts_replaced: list[str] = Field(default_factory=list)
    priority: Priority
    completion_status: CompletionStatus

    @field_validator("equipment_id")
    @classmethod
    def _equipment_selected(cls, v: str) -> str:
        return min_length(v, 1, "Equipment must be selected")

    @field_validator("date", mode="before")
    @classmethod
    def _date_in_past(cls, v):
        return past_date(v, "Date must be a valid past date")

    @field_validator("technician")
    @classmethod
    def _technician_length(cls, v: str) -> str:
        return min_length(v, 2, "Technician name must be at least 2 characters long")

    @field_validator("hours_spent")
    @classmethod
    def _hours_in_range(cls, v: float) -> float:
        if v <= 0:
            raise PydanticCustomError("greater_than", "Hours spent must be greater than 0")
        if v > MAX_HOURS_SPENT:
            raise PydanticCustomError("less_than_equal", "Hours spent cannot exceed 24")
        return v

    @field_validator("description")
    @classmethod
    def _description_length(cls, v: str) -> str:
        return min_length(v, 10, "Description must be at least 10 characters long")


# ── Parts editor ────────────────────────────────────


class PartsDraft(BaseModel):
    """Current parts list of the maintenance form."""
    parts: list[str]


class PartUpdate(BaseModel):
    value: str


# ── Response: Options / Table ───────────────────────


class EquipmentOption(BaseModel):
    """One entry in the equipment dropdown."""
    id: str
    name: str


class EquipmentOptionsResponse(BaseModel):
    options: list[EquipmentOption]


class MaintenanceRow(BaseModel):
    """A maintenance record plus the looked-up equipment name."""
    record: MaintenanceRecord
    equipment_name: str


class MaintenanceTableResponse(BaseModel):
    rows: list[MaintenanceRow]
    sort: SortStateItem
