import os

# Settings are read at import time, so point them at a throwaway database first
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["ENABLE_SEED_ENDPOINTS"] = "true"

from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from app.core.database import Base, SessionLocal, engine
from app.core.security import CurrentAccount
from app.main import app
from app.models.enums import Role, VehicleStatus
from app.models.vehicle import Vehicle, VehicleImage
from app.services.accounts import register_account
from app.services.seeding import seed_admin


@pytest.fixture(autouse=True)
def reset_database():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.rollback()
        session.close()


@pytest.fixture
def make_vehicle():
    """Insert a vehicle directly and return its id."""
    def _make(**overrides):
        data = {
            "brand": "Toyota",
            "model": "Avanza",
            "year": 2024,
            "price": Decimal("250000000"),
            "fuel_type": "Gasoline",
            "transmission": "Manual",
            "body_type": "MPV",
            "seats": 7,
            "stock": 1,
            "status": VehicleStatus.AVAILABLE,
            "is_featured": False,
        }
        images = overrides.pop("images", [])
        data.update(overrides)
        session = SessionLocal()
        try:
            vehicle = Vehicle(**data)
            vehicle.images = [VehicleImage(**image) for image in images]
            session.add(vehicle)
            session.commit()
            return vehicle.id
        finally:
            session.close()
    return _make


def get_vehicle_row(vehicle_id: int) -> Vehicle:
    session = SessionLocal()
    try:
        vehicle = session.query(Vehicle).filter(Vehicle.id == vehicle_id).first()
        session.expunge(vehicle)
        return vehicle
    finally:
        session.close()


def register(client, email="buyer@example.com", password="secret123", full_name="Buyer One"):
    response = client.post("/api/auth/register", json={
        "full_name": full_name,
        "email": email,
        "password": password,
        "phone_number": "0812000000",
    })
    assert response.status_code == 200, response.text
    return response.json()


def auth_header(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def user_headers(client):
    return auth_header(register(client)["access_token"])


@pytest.fixture
def other_user_headers(client):
    return auth_header(register(client, email="other@example.com", full_name="Other Buyer")["access_token"])


@pytest.fixture
def admin_headers(client):
    session = SessionLocal()
    try:
        seed_admin(session)
    finally:
        session.close()
    response = client.post("/api/auth/admin/login", json={
        "email": "admin@carshowroom.com",
        "password": "Admin123!",
    })
    assert response.status_code == 200, response.text
    return auth_header(response.json()["access_token"])


@pytest.fixture
def buyer(db) -> CurrentAccount:
    """A customer account for calling services directly."""
    account = register_account(db, "Service Buyer", "service@example.com", "secret123")
    return CurrentAccount(id=account.id, email=account.email, role=Role.USER)
