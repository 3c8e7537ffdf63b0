"""Dashboard aggregations and chart rendering."""

from datetime import date

from conftest import make_equipment, make_record
from tracker.models.equipment import Department, Status
from tracker.services.charts import render_hours_bar, render_status_pie
from tracker.services.dashboard import (
    build_summary,
    format_display_date,
    hours_by_department,
    recent_activities,
    status_counts,
)


def test_status_counts():
    equipment = [
        make_equipment("1", "A", status=Status.Operational),
        make_equipment("2", "B", status=Status.Operational),
        make_equipment("3", "C", status=Status.Down),
        make_equipment("4", "D", status=Status.Retired),
    ]
    counts = status_counts(equipment)
    assert counts == {"Operational": 2, "Down": 1, "Retired": 1}
    assert list(counts) == ["Operational", "Down", "Retired"]


def test_status_counts_empty():
    assert status_counts([]) == {}


def test_hours_by_department_joins_through_equipment():
    equipment = [make_equipment("111111", "Lathe", department=Department.Machining)]
    records = [make_record("1", "111111", hours=3), make_record("2", "111111", hours=5)]
    assert hours_by_department(equipment, records) == {"Machining": 8}


def test_hours_by_department_skips_unknown_equipment():
    equipment = [
        make_equipment("111111", "Lathe", department=Department.Machining),
        make_equipment("222222", "Robot", department=Department.Assembly),
    ]
    records = [
        make_record("1", "222222", hours=2.5),
        make_record("2", "999999", hours=7),
        make_record("3", "111111", hours=1),
    ]
    assert hours_by_department(equipment, records) == {"Assembly": 2.5, "Machining": 1}


def test_recent_activities_last_five_in_insertion_order():
    equipment = [make_equipment("111111", "Lathe")]
    records = [make_record(str(i), "111111") for i in range(7)]
    records[-1].equipment_id = "000000"

    activities = recent_activities(equipment, records, limit=5)

    assert [a["id"] for a in activities] == ["2", "3", "4", "5", "6"]
    assert activities[0]["equipment_name"] == "Lathe"
    assert activities[-1]["equipment_name"] == "Unknown Equipment"
    assert activities[0]["date"] == "1/1/2024"
    assert activities[0]["description"] == "Routine check of the unit"


def test_recent_activities_fewer_than_limit():
    records = [make_record("1", "x")]
    assert len(recent_activities([], records, limit=5)) == 1
    assert recent_activities([], records, limit=0) == []


def test_format_display_date():
    assert format_display_date(date(2024, 6, 15)) == "6/15/2024"


def test_build_summary():
    equipment = [make_equipment("111111", "Lathe")]
    records = [make_record("1", "111111", hours=4)]
    summary = build_summary(equipment, records)
    assert summary["total_equipment"] == 1
    assert summary["total_records"] == 1
    assert summary["status_counts"] == {"Operational": 1}
    assert summary["hours_by_department"] == {"Machining": 4}
    assert len(summary["recent_activities"]) == 1


def test_charts_render_svg():
    pie = render_status_pie({"Operational": 2, "Down": 1})
    bar = render_hours_bar({"Machining": 8})
    assert "<svg" in pie and "</svg>" in pie
    assert "<svg" in bar


def test_charts_render_placeholder_when_empty():
    assert "<svg" in render_status_pie({})
    assert "<svg" in render_hours_bar({})
