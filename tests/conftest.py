"""Shared fixtures: in-memory SQLite database, API client and auth helpers."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

# Must be set before dealership.config is imported
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["JWT_SECRET_KEY"] = "test-signing-key-0123456789abcdef0123456789"
os.environ["ADMIN_EMAIL"] = "admin@example.com"
os.environ["ADMIN_PASSWORD"] = "admin-pass"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

import dealership.models  # noqa: F401  (register every table on Base)
from dealership.database import Base, get_db
from dealership.main import app

ADMIN_EMAIL = "admin@example.com"
ADMIN_PASSWORD = "admin-pass"


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


def login_headers(client, email, password):
    resp = client.post("/api/user/login", json={"email": email, "password": password})
    assert resp.status_code == 200, resp.text
    return {"Authorization": f"Bearer {resp.json()['token']}"}


@pytest.fixture
def admin_headers(client):
    return login_headers(client, ADMIN_EMAIL, ADMIN_PASSWORD)


@pytest.fixture
def register_customer(client):
    """Factory: registers a customer and returns (customer_json, auth_headers)."""
    counter = {"n": 0}

    def _register(email=None, password="secret-pass"):
        counter["n"] += 1
        email = email or f"buyer{counter['n']}@example.com"
        resp = client.post("/api/user/register", json={
            "username": f"buyer{counter['n']}",
            "first_name": "Dana",
            "last_name": "Buyer",
            "email": email,
            "phone": "555-0101",
            "password": password,
        })
        assert resp.status_code == 201, resp.text
        return resp.json(), login_headers(client, email, password)

    return _register


def vehicle_payload(**overrides):
    payload = {
        "make": "Toyota",
        "model": "Camry",
        "year": 2022,
        "vin": "4T1BF1FK5CU123456",
        "purchase_price": 18000,
        "price": 20000,
        "date_acquired": "2024-01-15",
    }
    payload.update(overrides)
    return payload
