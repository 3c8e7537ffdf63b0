"""Server-rendered views: navigation, forms, tables and the dashboard."""

from conftest import days_ago
from tracker.store import View


def post(client, url, data=None):
    return client.post(url, data=data, follow_redirects=False)


def test_default_view_is_equipment_form(client):
    response = client.get("/")
    assert response.status_code == 200
    assert "Management" in response.text
    assert "Add New Equipment" in response.text
    assert 'name="serialNumber"' in response.text


def test_navigation_switches_view(client, store):
    response = post(client, "/views/dashboard")
    assert response.status_code == 303
    assert store.active_view is View.dashboard
    assert "Recent Maintenance Activities" in client.get("/").text


def test_equipment_form_submit_shows_table(client, store, equipment_data):
    response = post(client, "/forms/equipment", equipment_data)

    assert response.status_code == 303
    assert len(store.equipment) == 1
    assert store.active_view is View.equipment_table
    page = client.get("/").text
    assert "Equipment List" in page
    assert "HST20A118" in page
    assert 'class="status-Operational"' in page


def test_equipment_form_error_shown_inline(client, store, equipment_data):
    equipment_data["serialNumber"] = "ABC-123"

    post(client, "/forms/equipment", equipment_data)

    assert store.equipment == []
    assert store.active_view is View.equipment_form
    page = client.get("/").text
    assert "Serial Number can only contain alphanumeric characters" in page
    # entered values are kept
    assert 'value="ABC-123"' in page
    assert 'value="CNC Lathe"' in page


def test_maintenance_form_lists_equipment(client, store, equipment_data):
    post(client, "/forms/equipment", equipment_data)
    post(client, "/views/maintenanceForm")

    page = client.get("/").text
    eq_id = store.equipment[0].id
    assert "Select Equipment" in page
    assert f'<option value="{eq_id}"' in page


def test_parts_editor_keeps_entered_values(client, store):
    post(client, "/views/maintenanceForm")
    form = {"technician": "Dana Ortiz", "partsReplaced": ["Belt"]}

    post(client, "/forms/maintenance/parts", form)
    assert store.maintenance_form.parts == ["Belt", ""]
    assert store.maintenance_form.values["technician"] == "Dana Ortiz"

    post(client, "/forms/maintenance/parts/0/remove", {"partsReplaced": ["Belt", "Bearing"]})
    assert store.maintenance_form.parts == ["Bearing"]

    assert post(client, "/forms/maintenance/parts/3/remove", {}).status_code == 404


def test_maintenance_form_submit(client, store, equipment_data):
    post(client, "/forms/equipment", equipment_data)
    eq_id = store.equipment[0].id
    form = {
        "equipmentId": eq_id,
        "date": days_ago(2),
        "type": "Repair",
        "technician": "Sam Keller",
        "hoursSpent": "6",
        "description": "Replaced worn ball screw",
        "partsReplaced": ["Ball screw", "Bearing kit"],
        "priority": "High",
        "completionStatus": "Pending Parts",
    }

    post(client, "/forms/maintenance", form)

    assert store.active_view is View.maintenance_table
    record = store.maintenance[0]
    assert record.parts_replaced == ["Ball screw", "Bearing kit"]
    assert record.hours_spent == 6
    page = client.get("/").text
    assert "Ball screw, Bearing kit" in page
    assert "CNC Lathe" in page


def test_maintenance_form_errors(client, store):
    post(client, "/views/maintenanceForm")
    form = {
        "equipmentId": "",
        "date": days_ago(2),
        "type": "Repair",
        "technician": "Sam",
        "hoursSpent": "25",
        "description": "short",
        "priority": "High",
        "completionStatus": "Complete",
    }

    post(client, "/forms/maintenance", form)

    assert store.maintenance == []
    assert set(store.maintenance_form.errors) == {"equipmentId", "hoursSpent", "description"}
    page = client.get("/").text
    assert "Hours spent cannot exceed 24" in page
    assert "Equipment must be selected" in page


def test_sort_header_toggles(client, store, equipment_data):
    for name in ("Mill", "drill", "Lathe"):
        store.active_view = View.equipment_form
        post(client, "/forms/equipment", {**equipment_data, "name": name})

    post(client, "/tables/equipment/sort/name")
    assert (store.equipment_sort.column, store.equipment_sort.direction) == ("name", "asc")
    page = client.get("/").text
    assert page.index("drill") < page.index("Lathe") < page.index("Mill")
    assert "▲" in page

    post(client, "/tables/equipment/sort/name")
    page = client.get("/").text
    assert page.index("Mill") < page.index("Lathe") < page.index("drill")
    assert "▼" in page

    post(client, "/tables/equipment/sort/name")
    assert store.equipment_sort.column is None


def test_sort_unknown_column(client):
    assert post(client, "/tables/equipment/sort/colour").status_code == 400
    assert post(client, "/tables/furniture/sort/name").status_code == 422


def test_dashboard_view(client, store, equipment_data):
    post(client, "/forms/equipment", equipment_data)
    post(client, "/views/dashboard")

    page = client.get("/").text
    assert "/charts/status.svg" in page
    assert "No maintenance activity yet." in page

    response = client.get("/charts/hours.svg")
    assert response.status_code == 200
    assert "<svg" in response.text
