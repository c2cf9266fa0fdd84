import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session, joinedload

from app.core.database import get_db
from app.core.exceptions import Forbidden, TestDriveNotFound, VehicleNotFound
from app.core.security import CurrentAccount, get_current_account, require_admin, require_user
from app.models.engagement import TestDrive
from app.models.enums import TestDriveStatus
from app.models.vehicle import Vehicle
from app.schemas.engagement import TestDriveCreate, TestDriveResponse, TestDriveStatusUpdate
from app.services.transitions import (
    TEST_DRIVE_ADMIN_TRANSITIONS,
    TEST_DRIVE_OWNER_TRANSITIONS,
    ensure_transition,
)

logger = logging.getLogger(__name__)

router = APIRouter()


def _query(db: Session):
    return db.query(TestDrive).options(joinedload(TestDrive.account), joinedload(TestDrive.vehicle))


def _get_or_404(db: Session, test_drive_id: int) -> TestDrive:
    test_drive = _query(db).filter(TestDrive.id == test_drive_id).first()
    if not test_drive:
        raise TestDriveNotFound()
    return test_drive


def to_response(test_drive: TestDrive) -> TestDriveResponse:
    return TestDriveResponse(
        id=test_drive.id,
        user_id=test_drive.account_id,
        user_name=test_drive.account.full_name,
        user_email=test_drive.account.email,
        user_phone=test_drive.account.phone_number,
        vehicle_id=test_drive.vehicle_id,
        vehicle_brand=test_drive.vehicle.brand,
        vehicle_model=test_drive.vehicle.model,
        requested_date=test_drive.requested_date,
        requested_time=test_drive.requested_time,
        status=test_drive.status,
        notes=test_drive.notes,
        admin_notes=test_drive.admin_notes,
        approved_by=test_drive.approved_by,
        created_at=test_drive.created_at,
        updated_at=test_drive.updated_at,
    )


@router.get("", response_model=List[TestDriveResponse])
def get_my_test_drives(db: Session = Depends(get_db), user: CurrentAccount = Depends(require_user)):
    test_drives = (
        _query(db)
        .filter(TestDrive.account_id == user.id)
        .order_by(TestDrive.created_at.desc(), TestDrive.id.desc())
        .all()
    )
    return [to_response(td) for td in test_drives]


@router.get("/all", response_model=List[TestDriveResponse])
def get_all_test_drives(
    status: Optional[TestDriveStatus] = None,
    db: Session = Depends(get_db),
    admin: CurrentAccount = Depends(require_admin),
):
    query = _query(db)
    if status:
        query = query.filter(TestDrive.status == status)
    test_drives = query.order_by(TestDrive.created_at.desc(), TestDrive.id.desc()).all()
    return [to_response(td) for td in test_drives]


@router.get("/{test_drive_id}", response_model=TestDriveResponse)
def get_test_drive(
    test_drive_id: int,
    db: Session = Depends(get_db),
    current: CurrentAccount = Depends(get_current_account),
):
    test_drive = _get_or_404(db, test_drive_id)
    if not current.can_access(test_drive.account_id):
        raise Forbidden()
    return to_response(test_drive)


@router.post("", response_model=TestDriveResponse, status_code=status.HTTP_201_CREATED)
def create_test_drive(
    request: TestDriveCreate,
    db: Session = Depends(get_db),
    user: CurrentAccount = Depends(require_user),
):
    if db.query(Vehicle.id).filter(Vehicle.id == request.vehicle_id).first() is None:
        raise VehicleNotFound()

    test_drive = TestDrive(
        account_id=user.id,
        vehicle_id=request.vehicle_id,
        requested_date=request.requested_date,
        requested_time=request.requested_time,
        notes=request.notes,
        status=TestDriveStatus.PENDING,
    )
    db.add(test_drive)
    db.commit()
    logger.info(f"Account {user.id} requested test drive {test_drive.id} for vehicle {request.vehicle_id}")
    return to_response(_get_or_404(db, test_drive.id))


@router.put("/{test_drive_id}/status", response_model=TestDriveResponse)
def update_test_drive_status(
    test_drive_id: int,
    request: TestDriveStatusUpdate,
    db: Session = Depends(get_db),
    admin: CurrentAccount = Depends(require_admin),
):
    test_drive = _get_or_404(db, test_drive_id)
    ensure_transition(TEST_DRIVE_ADMIN_TRANSITIONS, test_drive.status, request.status)

    test_drive.status = request.status
    test_drive.admin_notes = request.admin_notes
    test_drive.approved_by = admin.id
    db.commit()
    logger.info(f"Admin {admin.id} set test drive {test_drive_id} to {request.status.value}")
    return to_response(_get_or_404(db, test_drive_id))


@router.delete("/{test_drive_id}", response_model=TestDriveResponse)
def cancel_test_drive(
    test_drive_id: int,
    db: Session = Depends(get_db),
    user: CurrentAccount = Depends(require_user),
):
    """Cancel the caller's own test drive unless it already took place."""
    test_drive = _get_or_404(db, test_drive_id)
    if test_drive.account_id != user.id:
        raise Forbidden()

    ensure_transition(
        TEST_DRIVE_OWNER_TRANSITIONS,
        test_drive.status,
        TestDriveStatus.CANCELLED,
        message="Cannot cancel completed test drive",
    )

    test_drive.status = TestDriveStatus.CANCELLED
    db.commit()
    return to_response(_get_or_404(db, test_drive_id))
