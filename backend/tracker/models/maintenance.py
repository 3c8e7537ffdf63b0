"""Maintenance record and its enumerations."""

import datetime as dt
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class MaintenanceType(str, Enum):
    Preventive = "Preventive"
    Repair = "Repair"
    Emergency = "Emergency"


class Priority(str, Enum):
    Low = "Low"
    Medium = "Medium"
    High = "High"


class CompletionStatus(str, Enum):
    Complete = "Complete"
    Incomplete = "Incomplete"
    PendingParts = "Pending Parts"


class MaintenanceRecord(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    # Not checked against the equipment list
    equipment_id: str
    date: dt.date
    type: MaintenanceType
    technician: str
    hours_spent: float
    description: str
    parts_replaced: list[str] = Field(default_factory=list)
    priority: Priority
    completion_status: CompletionStatus

    def __repr__(self) -> str:
        return f"<MaintenanceRecord {self.id} equipment={self.equipment_id} hours={self.hours_spent}>"
