"""API tests for registration, login and profile routes."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from conftest import ADMIN_EMAIL, ADMIN_PASSWORD
from dealership.services.security import verify_token

REGISTRATION = {
    "username": "jdoe",
    "first_name": "Jane",
    "last_name": "Doe",
    "email": "jane@example.com",
    "phone": "555-0199",
    "password": "first-pass",
}


class TestRegister:
    def test_register_returns_identity(self, client):
        resp = client.post("/api/user/register", json=REGISTRATION)
        assert resp.status_code == 201
        assert resp.json() == {"customer_id": "C1", "username": "jdoe", "email": "jane@example.com"}

    def test_duplicate_email(self, client):
        client.post("/api/user/register", json=REGISTRATION)
        resp = client.post("/api/user/register", json=dict(REGISTRATION, username="other"))
        assert resp.status_code == 400
        assert resp.json() == {"error": "Email already registered"}

    def test_missing_field(self, client):
        body = dict(REGISTRATION)
        del body["last_name"]
        resp = client.post("/api/user/register", json=body)
        assert resp.status_code == 400
        assert "last_name" in resp.json()["error"]

    def test_ids_increase(self, client):
        client.post("/api/user/register", json=REGISTRATION)
        resp = client.post("/api/user/register", json=dict(REGISTRATION, email="second@example.com"))
        assert resp.json()["customer_id"] == "C2"


class TestLogin:
    def test_admin_login(self, client):
        resp = client.post("/api/user/login", json={"email": ADMIN_EMAIL, "password": ADMIN_PASSWORD})
        assert resp.status_code == 200
        body = resp.json()
        assert body["message"] == "Welcome Admin"
        claims = verify_token(body["token"])
        assert claims.is_admin
        assert claims.customer_id is None

    def test_customer_login(self, client):
        client.post("/api/user/register", json=REGISTRATION)
        resp = client.post("/api/user/login", json={"email": "jane@example.com", "password": "first-pass"})
        assert resp.status_code == 200
        claims = verify_token(resp.json()["token"])
        assert claims.customer_id == "C1"
        assert not claims.is_admin

    def test_wrong_password(self, client):
        client.post("/api/user/register", json=REGISTRATION)
        resp = client.post("/api/user/login", json={"email": "jane@example.com", "password": "nope"})
        assert resp.status_code == 400
        assert resp.json() == {"error": "Invalid email or password"}

    def test_login_with_mixed_case_domain_as_registered(self, client):
        client.post("/api/user/register", json=dict(REGISTRATION, email="Jane@EXAMPLE.com"))
        resp = client.post("/api/user/login", json={"email": "Jane@EXAMPLE.com", "password": "first-pass"})
        assert resp.status_code == 200, resp.text
        assert verify_token(resp.json()["token"]).customer_id == "C1"


class TestProfile:
    def test_read_own_profile(self, client, register_customer):
        customer, headers = register_customer()
        resp = client.get(f"/api/user/{customer['customer_id']}", headers=headers)
        assert resp.status_code == 200
        assert resp.json()["first_name"] == "Dana"
        assert "password_hash" not in resp.json()

    def test_cannot_read_other_customer(self, client, register_customer):
        first, _ = register_customer()
        _, other_headers = register_customer()
        resp = client.get(f"/api/user/{first['customer_id']}", headers=other_headers)
        assert resp.status_code == 403

    def test_token_required(self, client, register_customer):
        customer, _ = register_customer()
        resp = client.get(f"/api/user/{customer['customer_id']}")
        assert resp.status_code == 401
        assert "error" in resp.json()

    def test_garbage_token(self, client, register_customer):
        customer, _ = register_customer()
        resp = client.get(f"/api/user/{customer['customer_id']}",
                          headers={"Authorization": "Bearer garbage"})
        assert resp.status_code == 401

    def test_admin_reads_any_profile(self, client, register_customer, admin_headers):
        customer, _ = register_customer()
        resp = client.get(f"/api/user/{customer['customer_id']}", headers=admin_headers)
        assert resp.status_code == 200

    def test_unknown_customer(self, client, admin_headers):
        resp = client.get("/api/user/C404", headers=admin_headers)
        assert resp.status_code == 404
        assert resp.json() == {"error": "User not found"}

    def test_edit_without_password_keeps_it(self, client):
        client.post("/api/user/register", json=REGISTRATION)
        resp = client.post("/api/user/login", json={"email": "jane@example.com", "password": "first-pass"})
        headers = {"Authorization": f"Bearer {resp.json()['token']}"}

        edit = dict(REGISTRATION, phone="555-0000")
        del edit["password"]
        resp = client.put("/api/user/edit/C1", json=edit, headers=headers)
        assert resp.status_code == 200
        assert resp.json()["phone"] == "555-0000"

        resp = client.post("/api/user/login", json={"email": "jane@example.com", "password": "first-pass"})
        assert resp.status_code == 200

    def test_edit_with_password_changes_it(self, client):
        client.post("/api/user/register", json=REGISTRATION)
        resp = client.post("/api/user/login", json={"email": "jane@example.com", "password": "first-pass"})
        headers = {"Authorization": f"Bearer {resp.json()['token']}"}

        client.put("/api/user/edit/C1", json=dict(REGISTRATION, password="second-pass"), headers=headers)

        old = client.post("/api/user/login", json={"email": "jane@example.com", "password": "first-pass"})
        new = client.post("/api/user/login", json={"email": "jane@example.com", "password": "second-pass"})
        assert old.status_code == 400
        assert new.status_code == 200

    def test_edit_to_taken_email(self, client, register_customer):
        first, headers = register_customer(email="first@example.com")
        register_customer(email="second@example.com")
        edit = dict(REGISTRATION, email="second@example.com")
        resp = client.put(f"/api/user/edit/{first['customer_id']}", json=edit, headers=headers)
        assert resp.status_code == 400

    def test_list_customers_admin_only(self, client, register_customer, admin_headers):
        _, customer_headers = register_customer()
        register_customer()
        assert client.get("/api/user", headers=customer_headers).status_code == 403

        resp = client.get("/api/user", headers=admin_headers)
        assert resp.status_code == 200
        assert [c["customer_id"] for c in resp.json()] == ["C1", "C2"]

    def test_admin_deletes_customer(self, client, register_customer, admin_headers):
        customer, _ = register_customer()
        resp = client.delete(f"/api/user/delete/{customer['customer_id']}", headers=admin_headers)
        assert resp.status_code == 200
        assert resp.json()["user"]["customer_id"] == customer["customer_id"]
        assert client.get(f"/api/user/{customer['customer_id']}", headers=admin_headers).status_code == 404
