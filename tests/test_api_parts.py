"""API tests for parts, vehicle-part links and vehicle category records."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from conftest import vehicle_payload

BRAKE_PADS = {
    "part_id": "P100",
    "name": "Brake pads",
    "category": "Brakes",
    "part_number": "BP-4410",
    "price": 89.5,
    "quantity_in_stock": 3,
    "reorder_threshold": 5,
    "reorder_quantity": 20,
    "supplier_id": "SUP1",
}
OIL_FILTER = dict(BRAKE_PADS, part_id="P200", name="Oil filter", quantity_in_stock=40)


class TestParts:
    def test_create_and_get(self, client, admin_headers):
        resp = client.post("/api/parts/add", json=BRAKE_PADS, headers=admin_headers)
        assert resp.status_code == 201
        assert client.get("/api/parts/P100").json()["name"] == "Brake pads"

    def test_duplicate_part_id(self, client, admin_headers):
        client.post("/api/parts/add", json=BRAKE_PADS, headers=admin_headers)
        resp = client.post("/api/parts/add", json=BRAKE_PADS, headers=admin_headers)
        assert resp.status_code == 400

    def test_low_stock_filter(self, client, admin_headers):
        client.post("/api/parts/add", json=BRAKE_PADS, headers=admin_headers)
        client.post("/api/parts/add", json=OIL_FILTER, headers=admin_headers)

        assert len(client.get("/api/parts").json()) == 2
        low = client.get("/api/parts", params={"low_stock": "true"}).json()
        assert [p["part_id"] for p in low] == ["P100"]

    def test_update_and_delete(self, client, admin_headers):
        client.post("/api/parts/add", json=BRAKE_PADS, headers=admin_headers)
        edit = dict(BRAKE_PADS, quantity_in_stock=25)
        del edit["part_id"]
        resp = client.put("/api/parts/edit/P100", json=edit, headers=admin_headers)
        assert resp.json()["quantity_in_stock"] == 25

        resp = client.delete("/api/parts/delete/P100", headers=admin_headers)
        assert resp.json()["part"]["part_id"] == "P100"
        assert client.get("/api/parts/P100").status_code == 404

    def test_customer_cannot_add(self, client, register_customer):
        _, headers = register_customer()
        assert client.post("/api/parts/add", json=BRAKE_PADS, headers=headers).status_code == 403


class TestVehicleParts:
    def test_link_part_to_vehicle(self, client, admin_headers):
        client.post("/api/vehicles/add", json=vehicle_payload(), headers=admin_headers)
        client.post("/api/parts/add", json=BRAKE_PADS, headers=admin_headers)

        resp = client.post("/api/vehicleParts/add",
                           json={"vehicle_id": "V1", "part_id": "P100", "quantity": 4},
                           headers=admin_headers)
        assert resp.status_code == 201
        link = resp.json()
        assert link["quantity"] == 4
        assert link["installed_date"] is None

        links = client.get("/api/vehicleParts", params={"vehicle_id": "V1"}).json()
        assert [l["id"] for l in links] == [link["id"]]
        assert client.get("/api/vehicleParts", params={"vehicle_id": "V2"}).json() == []

    def test_unknown_part(self, client, admin_headers):
        client.post("/api/vehicles/add", json=vehicle_payload(), headers=admin_headers)
        resp = client.post("/api/vehicleParts/add", json={"vehicle_id": "V1", "part_id": "P404"},
                           headers=admin_headers)
        assert resp.status_code == 404
        assert resp.json() == {"error": "Part not found"}


class TestVehicleCategories:
    def test_sedan_record(self, client, admin_headers):
        client.post("/api/vehicles/add", json=vehicle_payload(), headers=admin_headers)
        resp = client.post("/api/sedans/add", json={
            "vehicle_id": "V1", "body_type": "sedan", "fuel_type": "gasoline",
            "transmission": "automatic", "mileage": 12000, "engine_size": 2.5,
            "luxury_level": "premium",
        }, headers=admin_headers)
        assert resp.status_code == 201
        sedan = resp.json()
        assert sedan["luxury_level"] == "premium"

        resp = client.delete(f"/api/sedans/delete/{sedan['id']}", headers=admin_headers)
        assert resp.json()["message"] == "Sedan deleted successfully"
        assert resp.json()["sedan"]["id"] == sedan["id"]

    def test_truck_edit(self, client, admin_headers):
        client.post("/api/vehicles/add", json=vehicle_payload(), headers=admin_headers)
        truck = client.post("/api/trucks/add", json={"vehicle_id": "V1", "towing_capacity": 9000},
                            headers=admin_headers).json()
        resp = client.put(f"/api/trucks/edit/{truck['id']}",
                          json={"vehicle_id": "V1", "towing_capacity": 11000, "cab_type": "crew"},
                          headers=admin_headers)
        assert resp.status_code == 200
        assert client.get(f"/api/trucks/{truck['id']}").json()["towing_capacity"] == 11000

    def test_unknown_vehicle(self, client, admin_headers):
        resp = client.post("/api/suvs/add", json={"vehicle_id": "V9", "seating_capacity": 7},
                           headers=admin_headers)
        assert resp.status_code == 404

    def test_unknown_record(self, client):
        resp = client.get("/api/suvs/99")
        assert resp.status_code == 404
        assert resp.json() == {"error": "SUV not found"}
