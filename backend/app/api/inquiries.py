import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session, joinedload

from app.core.database import get_db
from app.core.exceptions import Forbidden, InquiryNotFound, VehicleNotFound
from app.core.security import CurrentAccount, get_current_account, require_admin, require_user
from app.models.engagement import Inquiry
from app.models.enums import InquiryStatus
from app.models.vehicle import Vehicle
from app.schemas.common import MessageResponse
from app.schemas.engagement import InquiryCreate, InquiryRespond, InquiryResponse
from app.services.transitions import INQUIRY_ADMIN_TRANSITIONS, ensure_transition

logger = logging.getLogger(__name__)

router = APIRouter()


def _query(db: Session):
    return db.query(Inquiry).options(joinedload(Inquiry.account), joinedload(Inquiry.vehicle))


def _get_or_404(db: Session, inquiry_id: int) -> Inquiry:
    inquiry = _query(db).filter(Inquiry.id == inquiry_id).first()
    if not inquiry:
        raise InquiryNotFound()
    return inquiry


def to_response(inquiry: Inquiry) -> InquiryResponse:
    return InquiryResponse(
        id=inquiry.id,
        user_id=inquiry.account_id,
        user_name=inquiry.account.full_name,
        user_email=inquiry.account.email,
        vehicle_id=inquiry.vehicle_id,
        vehicle_brand=inquiry.vehicle.brand,
        vehicle_model=inquiry.vehicle.model,
        subject=inquiry.subject,
        message=inquiry.message,
        status=inquiry.status,
        admin_response=inquiry.admin_response,
        responded_by=inquiry.responded_by,
        created_at=inquiry.created_at,
        updated_at=inquiry.updated_at,
    )


@router.get("", response_model=List[InquiryResponse])
def get_my_inquiries(db: Session = Depends(get_db), user: CurrentAccount = Depends(require_user)):
    inquiries = (
        _query(db)
        .filter(Inquiry.account_id == user.id)
        .order_by(Inquiry.created_at.desc(), Inquiry.id.desc())
        .all()
    )
    return [to_response(i) for i in inquiries]


@router.get("/all", response_model=List[InquiryResponse])
def get_all_inquiries(
    status: Optional[InquiryStatus] = None,
    db: Session = Depends(get_db),
    admin: CurrentAccount = Depends(require_admin),
):
    query = _query(db)
    if status:
        query = query.filter(Inquiry.status == status)
    inquiries = query.order_by(Inquiry.created_at.desc(), Inquiry.id.desc()).all()
    return [to_response(i) for i in inquiries]


@router.get("/{inquiry_id}", response_model=InquiryResponse)
def get_inquiry(
    inquiry_id: int,
    db: Session = Depends(get_db),
    current: CurrentAccount = Depends(get_current_account),
):
    inquiry = _get_or_404(db, inquiry_id)
    if not current.can_access(inquiry.account_id):
        raise Forbidden()
    return to_response(inquiry)


@router.post("", response_model=InquiryResponse, status_code=status.HTTP_201_CREATED)
def create_inquiry(
    request: InquiryCreate,
    db: Session = Depends(get_db),
    user: CurrentAccount = Depends(require_user),
):
    if db.query(Vehicle.id).filter(Vehicle.id == request.vehicle_id).first() is None:
        raise VehicleNotFound()

    inquiry = Inquiry(
        account_id=user.id,
        vehicle_id=request.vehicle_id,
        subject=request.subject,
        message=request.message,
        status=InquiryStatus.PENDING,
    )
    db.add(inquiry)
    db.commit()
    return to_response(_get_or_404(db, inquiry.id))


@router.put("/{inquiry_id}/response", response_model=InquiryResponse)
def respond_to_inquiry(
    inquiry_id: int,
    request: InquiryRespond,
    db: Session = Depends(get_db),
    admin: CurrentAccount = Depends(require_admin),
):
    """Store the admin's answer and move the inquiry to the given status."""
    inquiry = _get_or_404(db, inquiry_id)
    ensure_transition(INQUIRY_ADMIN_TRANSITIONS, inquiry.status, request.status)

    inquiry.admin_response = request.admin_response
    inquiry.status = request.status
    inquiry.responded_by = admin.id
    db.commit()
    logger.info(f"Admin {admin.id} responded to inquiry {inquiry_id} ({request.status.value})")
    return to_response(_get_or_404(db, inquiry_id))


@router.delete("/{inquiry_id}", response_model=MessageResponse)
def delete_inquiry(
    inquiry_id: int,
    db: Session = Depends(get_db),
    admin: CurrentAccount = Depends(require_admin),
):
    inquiry = _get_or_404(db, inquiry_id)
    db.delete(inquiry)
    db.commit()
    return {"message": "Inquiry deleted successfully"}
