from typing import List, Optional

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.exceptions import Forbidden
from app.core.security import CurrentAccount, get_current_account, require_admin, require_user
from app.models.enums import TransactionStatus
from app.models.transaction import Transaction
from app.schemas.transaction import (
    PaymentProofUpload,
    PaymentResponse,
    TransactionCreate,
    TransactionResponse,
    TransactionStatusUpdate,
)
from app.services import orders

router = APIRouter()


def to_response(transaction: Transaction) -> TransactionResponse:
    return TransactionResponse(
        id=transaction.id,
        user_id=transaction.account_id,
        user_name=transaction.account.full_name,
        user_email=transaction.account.email,
        vehicle_id=transaction.vehicle_id,
        vehicle_brand=transaction.vehicle.brand,
        vehicle_model=transaction.vehicle.model,
        vehicle_year=transaction.vehicle.year,
        total_price=transaction.total_price,
        payment_method=transaction.payment_method,
        status=transaction.status,
        transaction_date=transaction.transaction_date,
        admin_notes=transaction.admin_notes,
        created_at=transaction.created_at,
        payment=PaymentResponse.model_validate(transaction.payment) if transaction.payment else None,
    )


@router.post("", response_model=TransactionResponse, status_code=status.HTTP_201_CREATED)
def create_transaction(
    request: TransactionCreate,
    db: Session = Depends(get_db),
    user: CurrentAccount = Depends(require_user),
):
    """Buy one unit of a vehicle by cash or bank transfer."""
    transaction = orders.create_purchase(db, user, request.vehicle_id, request.payment_method)
    return to_response(transaction)


@router.get("", response_model=List[TransactionResponse])
def get_my_transactions(db: Session = Depends(get_db), user: CurrentAccount = Depends(require_user)):
    return [to_response(t) for t in orders.list_transactions(db, account_id=user.id)]


@router.get("/all", response_model=List[TransactionResponse])
def get_all_transactions(
    status: Optional[TransactionStatus] = None,
    db: Session = Depends(get_db),
    admin: CurrentAccount = Depends(require_admin),
):
    return [to_response(t) for t in orders.list_transactions(db, status=status)]


@router.get("/{transaction_id}", response_model=TransactionResponse)
def get_transaction(
    transaction_id: int,
    db: Session = Depends(get_db),
    current: CurrentAccount = Depends(get_current_account),
):
    transaction = orders.get_transaction(db, transaction_id)
    if not current.can_access(transaction.account_id):
        raise Forbidden()
    return to_response(transaction)


@router.put("/{transaction_id}/status", response_model=TransactionResponse)
def update_transaction_status(
    transaction_id: int,
    request: TransactionStatusUpdate,
    db: Session = Depends(get_db),
    admin: CurrentAccount = Depends(require_admin),
):
    transaction = orders.update_transaction_status(db, transaction_id, request.status, request.admin_notes)
    return to_response(transaction)


@router.post("/{transaction_id}/payment-proof", response_model=TransactionResponse)
def upload_payment_proof(
    transaction_id: int,
    request: PaymentProofUpload,
    db: Session = Depends(get_db),
    user: CurrentAccount = Depends(require_user),
):
    transaction = orders.upload_payment_proof(db, user, transaction_id, request.payment_proof_url)
    return to_response(transaction)
