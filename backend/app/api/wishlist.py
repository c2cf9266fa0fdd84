from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, joinedload, selectinload

from app.core.database import get_db
from app.core.exceptions import AlreadyInWishlist, NotInWishlist, VehicleNotFound
from app.core.security import CurrentAccount, require_user
from app.models.engagement import WishlistEntry
from app.models.vehicle import Vehicle
from app.schemas.common import MessageResponse
from app.schemas.engagement import WishlistCheckResponse
from app.schemas.vehicle import VehicleResponse

router = APIRouter()


def _find_entry(db: Session, account_id: int, vehicle_id: int):
    return (
        db.query(WishlistEntry)
        .filter(WishlistEntry.account_id == account_id, WishlistEntry.vehicle_id == vehicle_id)
        .first()
    )


@router.get("", response_model=List[VehicleResponse])
def get_wishlist(db: Session = Depends(get_db), user: CurrentAccount = Depends(require_user)):
    """Vehicles on the caller's wishlist, most recently added first."""
    entries = (
        db.query(WishlistEntry)
        .options(joinedload(WishlistEntry.vehicle).selectinload(Vehicle.images))
        .filter(WishlistEntry.account_id == user.id)
        .order_by(WishlistEntry.created_at.desc(), WishlistEntry.id.desc())
        .all()
    )
    return [entry.vehicle for entry in entries]


@router.post("/{vehicle_id}", response_model=MessageResponse)
def add_to_wishlist(vehicle_id: int, db: Session = Depends(get_db), user: CurrentAccount = Depends(require_user)):
    if db.query(Vehicle.id).filter(Vehicle.id == vehicle_id).first() is None:
        raise VehicleNotFound()

    if _find_entry(db, user.id, vehicle_id) is not None:
        raise AlreadyInWishlist()

    db.add(WishlistEntry(account_id=user.id, vehicle_id=vehicle_id))
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise AlreadyInWishlist()
    return {"message": "Vehicle added to wishlist successfully"}


@router.delete("/{vehicle_id}", response_model=MessageResponse)
def remove_from_wishlist(vehicle_id: int, db: Session = Depends(get_db), user: CurrentAccount = Depends(require_user)):
    entry = _find_entry(db, user.id, vehicle_id)
    if entry is None:
        raise NotInWishlist()

    db.delete(entry)
    db.commit()
    return {"message": "Vehicle removed from wishlist successfully"}


@router.get("/check/{vehicle_id}", response_model=WishlistCheckResponse)
def check_wishlist(vehicle_id: int, db: Session = Depends(get_db), user: CurrentAccount = Depends(require_user)):
    return WishlistCheckResponse(in_wishlist=_find_entry(db, user.id, vehicle_id) is not None)
