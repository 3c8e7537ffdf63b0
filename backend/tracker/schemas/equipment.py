"""Pydantic schemas for equipment intake and the equipment table."""

import datetime as dt
import re

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic.alias_generators import to_camel
from pydantic_core import PydanticCustomError

from tracker.models.equipment import Department, Equipment, Status
from tracker.schemas.common import SortStateItem, min_length, past_date

SERIAL_NUMBER_RE = re.compile(r"^[a-zA-Z0-9]+$")


class EquipmentCreate(BaseModel):
    """Fields accepted from the equipment form (the id is assigned on intake)."""
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        protected_namespaces=(),
    )

    name: str
    location: str
    department: Department
    model: str
    serial_number: str
    install_date: dt.date
    status: Status

    @field_validator("name")
    @classmethod
    def _name_length(cls, v: str) -> str:
        return min_length(v, 3, "Name must be at least 3 characters long")

    @field_validator("serial_number")
    @classmethod
    def _serial_alphanumeric(cls, v: str) -> str:
        if not SERIAL_NUMBER_RE.match(v):
            raise PydanticCustomError(
                "serial_number",
                "Serial Number can only contain alphanumeric characters",
            )
        return v

    @field_validator("install_date", mode="before")
    @classmethod
    def _install_date_in_past(cls, v):
        return past_date(v, "Install date must be a valid past date")


# ── Response: Table ─────────────────────────────────


class EquipmentTableResponse(BaseModel):
    """Response for GET /equipment: rows in current display order."""
    rows: list[Equipment]
    sort: SortStateItem
