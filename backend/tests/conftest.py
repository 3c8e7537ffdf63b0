from datetime import date, timedelta

import pytest
from fastapi.testclient import TestClient

from tracker.main import app
from tracker.models.equipment import Department, Equipment, Status
from tracker.models.maintenance import (
    CompletionStatus,
    MaintenanceRecord,
    MaintenanceType,
    Priority,
)
from tracker.store import get_store, reset_store


def days_ago(n: int) -> str:
    return (date.today() - timedelta(days=n)).isoformat()


@pytest.fixture
def store():
    """Fresh in-memory store for each test."""
    reset_store()
    yield get_store()
    reset_store()


@pytest.fixture
def client(store):
    return TestClient(app)


@pytest.fixture
def equipment_data():
    return {
        "name": "CNC Lathe",
        "location": "Hall A",
        "department": "Machining",
        "model": "Haas ST-20",
        "serialNumber": "HST20A118",
        "installDate": days_ago(365),
        "status": "Operational",
    }


@pytest.fixture
def maintenance_data():
    def make(equipment_id: str = "123456", **overrides):
        data = {
            "equipmentId": equipment_id,
            "date": days_ago(3),
            "type": "Preventive",
            "technician": "Dana Ortiz",
            "hoursSpent": 2,
            "description": "Spindle lubrication",
            "partsReplaced": [],
            "priority": "Low",
            "completionStatus": "Complete",
        }
        data.update(overrides)
        return data
    return make


def make_equipment(eq_id, name, **kw):
    fields = dict(
        id=eq_id,
        name=name,
        location="Hall A",
        department=Department.Machining,
        model="M1",
        serial_number="SN1",
        install_date=date(2020, 1, 1),
        status=Status.Operational,
    )
    fields.update(kw)
    return Equipment(**fields)


def make_record(rec_id, equipment_id, technician="Dana", hours=1.0):
    return MaintenanceRecord(
        id=rec_id,
        equipment_id=equipment_id,
        date=date(2024, 1, 1),
        type=MaintenanceType.Repair,
        technician=technician,
        hours_spent=hours,
        description="Routine check of the unit",
        priority=Priority.Low,
        completion_status=CompletionStatus.Complete,
    )
