from conftest import register

from app.core.config import Settings, settings
from app.core.database import SessionLocal
from app.core.security import get_password_hash
from app.models.account import Account
from app.services.seeding import SAMPLE_VEHICLES


def test_seed_admin_is_idempotent(client):
    first = client.post("/api/seed/admin")
    second = client.post("/api/seed/admin")

    assert first.json() == {"message": "Admin account created successfully", "email": settings.SEED_ADMIN_EMAIL}
    assert second.json()["message"] == "Admin already exists"

    login = client.post("/api/auth/admin/login", json={
        "email": settings.SEED_ADMIN_EMAIL,
        "password": settings.SEED_ADMIN_PASSWORD,
    })
    assert login.status_code == 200


def test_reset_admin_recreates_account(client):
    client.post("/api/seed/admin")

    response = client.post("/api/seed/admin/reset")

    assert response.status_code == 200
    assert response.json()["message"] == "Admin account reset successfully"
    assert client.post("/api/seed/admin").json()["message"] == "Admin already exists"


def test_seed_vehicles_only_into_empty_catalog(client):
    first = client.post("/api/seed/vehicles").json()
    second = client.post("/api/seed/vehicles").json()

    assert first == {"message": "Sample vehicles seeded successfully", "count": len(SAMPLE_VEHICLES)}
    assert second["message"] == "Vehicles already exist in database"
    assert len(client.get("/api/vehicles").json()) == len(SAMPLE_VEHICLES)


def test_seed_endpoints_can_be_switched_off(client, monkeypatch):
    monkeypatch.setattr(settings, "ENABLE_SEED_ENDPOINTS", False)

    assert client.post("/api/seed/admin").status_code == 404
    assert client.post("/api/seed/vehicles").status_code == 404


def test_health(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_seed_endpoints_are_off_unless_configured(monkeypatch):
    monkeypatch.delenv("ENABLE_SEED_ENDPOINTS", raising=False)

    assert Settings(_env_file=None).ENABLE_SEED_ENDPOINTS is False


def test_reset_keeps_admin_id_for_issued_tokens(client, admin_headers, user_headers, make_vehicle):
    vehicle_id = make_vehicle()
    test_drive = client.post("/api/test-drives", json={
        "vehicle_id": vehicle_id, "requested_date": "2026-11-02", "requested_time": "10:00",
    }, headers=user_headers).json()
    inquiry = client.post("/api/inquiries", json={
        "vehicle_id": vehicle_id, "subject": "Price", "message": "Any discount?",
    }, headers=user_headers).json()
    admin_id = client.get("/api/auth/me", headers=admin_headers).json()["id"]
    # A later account takes the next id, so a recreated admin could not reuse the old one
    register(client, email="later@example.com", full_name="Later Buyer")

    assert client.post("/api/seed/admin/reset").status_code == 200

    approved = client.put(
        f"/api/test-drives/{test_drive['id']}/status",
        json={"status": "Approved"},
        headers=admin_headers,
    )
    assert approved.status_code == 200
    assert approved.json()["approved_by"] == admin_id

    answered = client.put(
        f"/api/inquiries/{inquiry['id']}/response",
        json={"admin_response": "Five percent off", "status": "Responded"},
        headers=admin_headers,
    )
    assert answered.status_code == 200
    assert answered.json()["responded_by"] == admin_id
    assert client.get("/api/auth/me", headers=admin_headers).json()["id"] == admin_id


def test_reset_restores_password_and_active_flag(client, admin_headers):
    session = SessionLocal()
    try:
        admin = session.query(Account).filter(Account.email == settings.SEED_ADMIN_EMAIL).first()
        admin.password_hash = get_password_hash("changed-elsewhere")
        admin.is_active = False
        session.commit()
    finally:
        session.close()

    client.post("/api/seed/admin/reset")

    login = client.post("/api/auth/admin/login", json={
        "email": settings.SEED_ADMIN_EMAIL,
        "password": settings.SEED_ADMIN_PASSWORD,
    })
    assert login.status_code == 200
