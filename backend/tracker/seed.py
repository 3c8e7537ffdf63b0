"""
Seed data — populates the in-memory store with a realistic demo set.

8 pieces of equipment across the four departments and a dozen maintenance
records spread over the last few months. Loaded at startup when
SEED_DEMO_DATA is enabled, or on demand:

Usage:
    cd backend
    python -m tracker.seed
"""

import logging
from datetime import date, timedelta

from tracker.models.equipment import Department, Equipment, Status
from tracker.models.maintenance import (
    CompletionStatus,
    MaintenanceRecord,
    MaintenanceType,
    Priority,
)
from tracker.services.intake import generate_id
from tracker.store import TrackerStore, get_store

logger = logging.getLogger(__name__)

# ──────────────────────────────────────────────
# Fixed equipment definitions
# ──────────────────────────────────────────────

EQUIPMENT = [
    # (name, location, department, model, serial, installed days ago, status)
    ("CNC Lathe L1", "Hall A", Department.Machining, "Haas ST-20", "HST20A118", 1460, Status.Operational),
    ("CNC Mill M2", "Hall A", Department.Machining, "DMG Mori CMX 600", "DMG600V77", 980, Status.Down),
    ("Assembly Robot AR1", "Hall B", Department.Assembly, "Fanuc M-20iD", "FM20D5521", 720, Status.Operational),
    ("Torque Station T3", "Hall B", Department.Assembly, "Atlas Copco QST", "AC8812QST", 400, Status.Maintenance),
    ("Case Erector CE1", "Hall C", Department.Packaging, "Wexxar WF20", "WX20F3310", 1100, Status.Operational),
    ("Shrink Tunnel ST2", "Hall C", Department.Packaging, "Lantech SW", "LSW40017", 2200, Status.Retired),
    ("Conveyor Belt CB1", "Dock 1", Department.Shipping, "Dorner 3200", "DR3200X9", 850, Status.Operational),
    ("Pallet Wrapper PW1", "Dock 2", Department.Shipping, "Robopac Rotoplat", "RBP708K2", 530, Status.Operational),
]

# (equipment index, days ago, type, technician, hours, description, parts, priority, completion)
MAINTENANCE = [
    (0, 95, MaintenanceType.Preventive, "Dana Ortiz", 2.5, "Quarterly spindle lubrication and inspection", [], Priority.Low, CompletionStatus.Complete),
    (1, 80, MaintenanceType.Repair, "Sam Keller", 6, "Replaced worn ball screw on Y axis", ["Ball screw", "Bearing kit"], Priority.High, CompletionStatus.Complete),
    (2, 72, MaintenanceType.Preventive, "Lee Park", 3, "Robot joint grease and cable check", [], Priority.Medium, CompletionStatus.Complete),
    (4, 60, MaintenanceType.Repair, "Dana Ortiz", 1.5, "Adjusted flap folder and glue nozzle", ["Glue nozzle"], Priority.Medium, CompletionStatus.Complete),
    (6, 51, MaintenanceType.Emergency, "Chris Novak", 4, "Belt tore during shift, emergency splice", ["Belt section"], Priority.High, CompletionStatus.Complete),
    (3, 40, MaintenanceType.Repair, "Lee Park", 5, "Torque controller calibration drift fixed", [], Priority.Medium, CompletionStatus.Incomplete),
    (1, 33, MaintenanceType.Emergency, "Sam Keller", 8, "Spindle overheating, coolant pump failure", ["Coolant pump"], Priority.High, CompletionStatus.PendingParts),
    (7, 27, MaintenanceType.Preventive, "Chris Novak", 1, "Turntable chain tension and film carriage check", [], Priority.Low, CompletionStatus.Complete),
    (0, 19, MaintenanceType.Preventive, "Dana Ortiz", 2, "Chuck jaw cleaning and hydraulic check", [], Priority.Low, CompletionStatus.Complete),
    (2, 12, MaintenanceType.Repair, "Lee Park", 3.5, "Gripper vacuum leak traced and sealed", ["Vacuum cup", "O-ring"], Priority.Medium, CompletionStatus.Complete),
    (6, 6, MaintenanceType.Preventive, "Chris Novak", 2, "Roller bearing inspection along full length", [], Priority.Low, CompletionStatus.Complete),
    (3, 2, MaintenanceType.Repair, "Sam Keller", 4.5, "Replaced transducer cable on nutrunner", ["Transducer cable"], Priority.High, CompletionStatus.Incomplete),
]


def seed(store: TrackerStore) -> None:
    """Append the demo equipment and maintenance records to the store."""
    today = date.today()

    equipment = []
    for name, location, dept, model, serial, days_ago, status in EQUIPMENT:
        eq = Equipment(
            id=generate_id(),
            name=name,
            location=location,
            department=dept,
            model=model,
            serial_number=serial,
            install_date=today - timedelta(days=days_ago),
            status=status,
        )
        equipment.append(eq)
    store.equipment.extend(equipment)

    for idx, days_ago, mtype, tech, hours, desc, parts, priority, completion in MAINTENANCE:
        store.maintenance.append(MaintenanceRecord(
            id=generate_id(),
            equipment_id=equipment[idx].id,
            date=today - timedelta(days=days_ago),
            type=mtype,
            technician=tech,
            hours_spent=hours,
            description=desc,
            parts_replaced=list(parts),
            priority=priority,
            completion_status=completion,
        ))

    logger.info(
        "Seeded %d equipment and %d maintenance records",
        len(EQUIPMENT), len(MAINTENANCE),
    )


def main():
    logging.basicConfig(level=logging.INFO)
    store = get_store()
    seed(store)
    for eq in store.equipment:
        print(f"  [OK] {eq.name} ({eq.department.value}) - {eq.status.value}")
    print(f"Seed complete: {len(store.equipment)} equipment, {len(store.maintenance)} records")


if __name__ == "__main__":
    main()
