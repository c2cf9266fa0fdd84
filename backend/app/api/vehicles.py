import logging
from decimal import Decimal
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session, selectinload

from app.core.database import get_db
from app.core.exceptions import VehicleImageNotFound, VehicleNotFound
from app.core.security import CurrentAccount, require_admin
from app.models.enums import VehicleStatus
from app.models.vehicle import Vehicle, VehicleImage
from app.schemas.common import MessageResponse
from app.schemas.vehicle import (
    VehicleCreate,
    VehicleImageCreate,
    VehicleImageResponse,
    VehicleResponse,
    VehicleUpdate,
)

logger = logging.getLogger(__name__)

router = APIRouter()

SORT_COLUMNS = {
    "price": Vehicle.price,
    "year": Vehicle.year,
    "brand": Vehicle.brand,
    "created_at": Vehicle.created_at,
}


def get_vehicle_or_404(db: Session, vehicle_id: int) -> Vehicle:
    vehicle = (
        db.query(Vehicle)
        .options(selectinload(Vehicle.images))
        .filter(Vehicle.id == vehicle_id)
        .first()
    )
    if not vehicle:
        raise VehicleNotFound()
    return vehicle


@router.get("", response_model=List[VehicleResponse])
def list_vehicles(
    brand: Optional[str] = None,
    body_type: Optional[str] = None,
    fuel_type: Optional[str] = None,
    transmission: Optional[str] = None,
    min_price: Optional[Decimal] = None,
    max_price: Optional[Decimal] = None,
    min_year: Optional[int] = None,
    max_year: Optional[int] = None,
    is_featured: Optional[bool] = None,
    sort_by: str = Query("created_at", pattern="^(price|year|brand|created_at)$"),
    sort_order: str = Query("desc", pattern="^(asc|desc)$"),
    db: Session = Depends(get_db),
):
    """List available vehicles matching every given filter."""
    query = (
        db.query(Vehicle)
        .options(selectinload(Vehicle.images))
        .filter(Vehicle.status == VehicleStatus.AVAILABLE)
    )

    if brand:
        query = query.filter(Vehicle.brand.icontains(brand, autoescape=True))
    if body_type:
        query = query.filter(Vehicle.body_type == body_type)
    if fuel_type:
        query = query.filter(Vehicle.fuel_type == fuel_type)
    if transmission:
        query = query.filter(Vehicle.transmission == transmission)
    if min_price is not None:
        query = query.filter(Vehicle.price >= min_price)
    if max_price is not None:
        query = query.filter(Vehicle.price <= max_price)
    if min_year is not None:
        query = query.filter(Vehicle.year >= min_year)
    if max_year is not None:
        query = query.filter(Vehicle.year <= max_year)
    if is_featured is not None:
        query = query.filter(Vehicle.is_featured == is_featured)

    column = SORT_COLUMNS[sort_by]
    if sort_order == "asc":
        query = query.order_by(column.asc(), Vehicle.id.asc())
    else:
        query = query.order_by(column.desc(), Vehicle.id.desc())

    return query.all()


@router.get("/{vehicle_id}", response_model=VehicleResponse)
def get_vehicle(vehicle_id: int, db: Session = Depends(get_db)):
    """Get a vehicle whatever its status."""
    return get_vehicle_or_404(db, vehicle_id)


@router.post("", response_model=VehicleResponse, status_code=status.HTTP_201_CREATED)
def create_vehicle(
    vehicle: VehicleCreate,
    db: Session = Depends(get_db),
    admin: CurrentAccount = Depends(require_admin),
):
    data = vehicle.model_dump(exclude={"images"})
    db_vehicle = Vehicle(**data, status=VehicleStatus.AVAILABLE)
    db_vehicle.images = [VehicleImage(**image.model_dump()) for image in vehicle.images]
    db.add(db_vehicle)
    db.commit()
    logger.info(f"Admin {admin.id} created vehicle {db_vehicle.id}")
    return get_vehicle_or_404(db, db_vehicle.id)


@router.put("/{vehicle_id}", response_model=VehicleResponse)
def update_vehicle(
    vehicle_id: int,
    vehicle: VehicleUpdate,
    db: Session = Depends(get_db),
    admin: CurrentAccount = Depends(require_admin),
):
    """Update only the fields that were sent with a value.

    Stock and status are written as given; nothing here keeps them in step.
    """
    db_vehicle = get_vehicle_or_404(db, vehicle_id)

    update_data = {key: value for key, value in vehicle.model_dump(exclude_unset=True).items() if value is not None}
    for key, value in update_data.items():
        setattr(db_vehicle, key, value)

    db.commit()
    return get_vehicle_or_404(db, vehicle_id)


@router.delete("/{vehicle_id}", response_model=MessageResponse)
def delete_vehicle(
    vehicle_id: int,
    db: Session = Depends(get_db),
    admin: CurrentAccount = Depends(require_admin),
):
    db_vehicle = get_vehicle_or_404(db, vehicle_id)
    db.delete(db_vehicle)
    db.commit()
    logger.warning(f"Admin {admin.id} deleted vehicle {vehicle_id} with its requests and orders")
    return {"message": "Vehicle deleted successfully"}


@router.post("/{vehicle_id}/images", response_model=VehicleImageResponse, status_code=status.HTTP_201_CREATED)
def add_vehicle_image(
    vehicle_id: int,
    image: VehicleImageCreate,
    db: Session = Depends(get_db),
    admin: CurrentAccount = Depends(require_admin),
):
    get_vehicle_or_404(db, vehicle_id)
    db_image = VehicleImage(vehicle_id=vehicle_id, **image.model_dump())
    db.add(db_image)
    db.commit()
    db.refresh(db_image)
    return db_image


@router.delete("/{vehicle_id}/images/{image_id}", response_model=MessageResponse)
def delete_vehicle_image(
    vehicle_id: int,
    image_id: int,
    db: Session = Depends(get_db),
    admin: CurrentAccount = Depends(require_admin),
):
    db_image = (
        db.query(VehicleImage)
        .filter(VehicleImage.id == image_id, VehicleImage.vehicle_id == vehicle_id)
        .first()
    )
    if not db_image:
        raise VehicleImageNotFound()
    db.delete(db_image)
    db.commit()
    return {"message": "Vehicle image deleted successfully"}
