"""Seeding endpoints for fresh installs. Enabled with ENABLE_SEED_ENDPOINTS=true."""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.database import get_db
from app.core.exceptions import NotFoundError
from app.services.seeding import seed_admin, seed_vehicles


def seeding_enabled():
    if not settings.ENABLE_SEED_ENDPOINTS:
        raise NotFoundError()


router = APIRouter(dependencies=[Depends(seeding_enabled)])


@router.post("/admin")
def create_default_admin(db: Session = Depends(get_db)):
    admin, created = seed_admin(db)
    message = "Admin account created successfully" if created else "Admin already exists"
    return {"message": message, "email": admin.email}


@router.post("/admin/reset")
def reset_default_admin(db: Session = Depends(get_db)):
    admin, _ = seed_admin(db, reset=True)
    return {"message": "Admin account reset successfully", "email": admin.email}


@router.post("/vehicles")
def create_sample_vehicles(db: Session = Depends(get_db)):
    count, created = seed_vehicles(db)
    message = "Sample vehicles seeded successfully" if created else "Vehicles already exist in database"
    return {"message": message, "count": count}
