"""Equipment record and its enumerations (in-memory, no table behind it)."""

from datetime import date
from enum import Enum

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class Department(str, Enum):
    Machining = "Machining"
    Assembly = "Assembly"
    Packaging = "Packaging"
    Shipping = "Shipping"


class Status(str, Enum):
    Operational = "Operational"
    Down = "Down"
    Maintenance = "Maintenance"
    Retired = "Retired"


class Equipment(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        protected_namespaces=(),
    )

    id: str
    name: str
    location: str
    department: Department
    model: str
    serial_number: str
    install_date: date
    status: Status

    def __repr__(self) -> str:
        return f"<Equipment {self.name} ({self.department.value}) status={self.status.value}>"
