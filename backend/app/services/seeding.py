"""Default admin account and sample catalog for fresh databases."""
import logging
from decimal import Decimal
from typing import Tuple

from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.security import get_password_hash
from app.models.account import Account
from app.models.enums import Role, VehicleStatus
from app.models.vehicle import Vehicle
from app.services.accounts import find_account, register_account

logger = logging.getLogger(__name__)

SAMPLE_VEHICLES = [
    {
        "brand": "Toyota", "model": "Avanza", "year": 2024, "price": Decimal("250000000"),
        "color": "Silver", "fuel_type": "Gasoline", "transmission": "Manual", "mileage": 0,
        "engine_capacity": "1500cc", "seats": 7, "body_type": "MPV",
        "description": "Toyota Avanza 2024 - comfortable, fuel-efficient family MPV with a modern design",
        "features": "AC, Power Steering, Power Window, Central Lock, Audio System, Airbags",
        "stock": 5, "is_featured": True,
    },
    {
        "brand": "Honda", "model": "CR-V", "year": 2024, "price": Decimal("550000000"),
        "color": "Black", "fuel_type": "Gasoline", "transmission": "CVT", "mileage": 0,
        "engine_capacity": "1500cc", "seats": 5, "body_type": "SUV",
        "description": "Honda CR-V 2024 - premium SUV with current technology and strong performance",
        "features": "AC, Power Steering, Power Window, Central Lock, Audio System, Sunroof, Leather Seats, Cruise Control, Honda Sensing",
        "stock": 3, "is_featured": True,
    },
    {
        "brand": "Mitsubishi", "model": "Xpander", "year": 2024, "price": Decimal("280000000"),
        "color": "White", "fuel_type": "Gasoline", "transmission": "Automatic", "mileage": 0,
        "engine_capacity": "1500cc", "seats": 7, "body_type": "MPV",
        "description": "Mitsubishi Xpander 2024 - stylish MPV with a roomy cabin",
        "features": "AC, Power Steering, Power Window, Central Lock, Audio System, Touchscreen Display, Rear Camera",
        "stock": 4, "is_featured": True,
    },
    {
        "brand": "Suzuki", "model": "Ertiga", "year": 2024, "price": Decimal("230000000"),
        "color": "Blue", "fuel_type": "Gasoline", "transmission": "Manual", "mileage": 0,
        "engine_capacity": "1500cc", "seats": 7, "body_type": "MPV",
        "description": "Suzuki Ertiga 2024 - economical family MPV with excellent fuel efficiency",
        "features": "AC, Power Steering, Power Window, Central Lock, Audio System",
        "stock": 6, "is_featured": False,
    },
    {
        "brand": "Daihatsu", "model": "Terios", "year": 2024, "price": Decimal("270000000"),
        "color": "Red", "fuel_type": "Gasoline", "transmission": "Automatic", "mileage": 0,
        "engine_capacity": "1500cc", "seats": 7, "body_type": "SUV",
        "description": "Daihatsu Terios 2024 - rugged family SUV with high ground clearance",
        "features": "AC, Power Steering, Power Window, Central Lock, Audio System, Fog Lamp, Roof Rack",
        "stock": 3, "is_featured": False,
    },
    {
        "brand": "Toyota", "model": "Fortuner", "year": 2024, "price": Decimal("650000000"),
        "color": "White", "fuel_type": "Diesel", "transmission": "Automatic", "mileage": 0,
        "engine_capacity": "2400cc", "seats": 7, "body_type": "SUV",
        "description": "Toyota Fortuner 2024 - premium diesel SUV with a luxurious interior",
        "features": "AC, Power Steering, Power Window, Central Lock, Audio System, Leather Seats, Sunroof, 4WD, Hill Start Assist",
        "stock": 2, "is_featured": True,
    },
]


def seed_admin(db: Session, reset: bool = False) -> Tuple[Account, bool]:
    """Ensure the default admin exists. Returns the account and whether it was created or reset.

    A reset rewrites the existing row in place and keeps its id.
    """
    existing = find_account(db, settings.SEED_ADMIN_EMAIL, Role.ADMIN)
    if existing is not None:
        if not reset:
            return existing, False
        existing.full_name = settings.SEED_ADMIN_NAME
        existing.password_hash = get_password_hash(settings.SEED_ADMIN_PASSWORD)
        existing.is_active = True
        db.commit()
        db.refresh(existing)
        logger.warning(f"Reset admin account {existing.id}")
        return existing, True

    admin = register_account(
        db,
        full_name=settings.SEED_ADMIN_NAME,
        email=settings.SEED_ADMIN_EMAIL,
        password=settings.SEED_ADMIN_PASSWORD,
        role=Role.ADMIN,
    )
    logger.info(f"Seeded admin account {admin.email}")
    return admin, True


def seed_vehicles(db: Session) -> Tuple[int, bool]:
    """Insert the sample catalog into an empty vehicles table.

    Returns the number of vehicles in the catalog and whether anything was inserted.
    """
    count = db.query(Vehicle).count()
    if count:
        return count, False

    db.add_all(Vehicle(status=VehicleStatus.AVAILABLE, **data) for data in SAMPLE_VEHICLES)
    db.commit()
    logger.info(f"Seeded {len(SAMPLE_VEHICLES)} sample vehicles")
    return len(SAMPLE_VEHICLES), True
