"""Purchase flow: transactions, their payment record, and vehicle stock.

Stock moves exactly once per completed sale and once back per reversal. Each
transaction remembers whether it currently holds a unit (``stock_adjusted``),
so repeated or out-of-order admin updates cannot take or return a unit twice.
The vehicle row is locked while its stock changes.
"""
import logging
from datetime import datetime
from typing import List, Optional

from sqlalchemy.orm import Session, joinedload

from app.core.exceptions import (
    InvalidPaymentMethod,
    InvalidStatus,
    NotPending,
    OutOfStock,
    PaymentRecordMissing,
    TransactionNotFound,
    VehicleNotFound,
)
from app.core.security import CurrentAccount
from app.models.enums import PaymentMethod, PaymentStatus, TransactionStatus, VehicleStatus
from app.models.transaction import Payment, Transaction
from app.models.vehicle import Vehicle
from app.services.transitions import PAYMENT_STATUS_FOR_TRANSACTION, TRANSACTION_ADMIN_TARGETS

logger = logging.getLogger(__name__)


def _lock_vehicle(db: Session, vehicle_id: int) -> Optional[Vehicle]:
    return db.query(Vehicle).filter(Vehicle.id == vehicle_id).with_for_update().first()


def _take_unit(vehicle: Vehicle, transaction: Transaction) -> None:
    if vehicle.stock <= 0:
        raise OutOfStock()
    vehicle.stock -= 1
    if vehicle.stock == 0:
        vehicle.status = VehicleStatus.SOLD
    transaction.stock_adjusted = True
    logger.info(f"Vehicle {vehicle.id} stock -> {vehicle.stock} (transaction {transaction.id})")


def _return_unit(vehicle: Vehicle, transaction: Transaction) -> None:
    vehicle.stock += 1
    if vehicle.status == VehicleStatus.SOLD:
        vehicle.status = VehicleStatus.AVAILABLE
    transaction.stock_adjusted = False
    logger.info(f"Vehicle {vehicle.id} restocked -> {vehicle.stock} (transaction {transaction.id})")


def _parse_payment_method(value: str) -> PaymentMethod:
    try:
        return PaymentMethod(value)
    except ValueError:
        raise InvalidPaymentMethod()


def _parse_admin_status(value: str) -> TransactionStatus:
    try:
        status = TransactionStatus(value)
    except ValueError:
        raise InvalidStatus()
    if status not in TRANSACTION_ADMIN_TARGETS:
        raise InvalidStatus()
    return status


def _transaction_query(db: Session):
    return db.query(Transaction).options(
        joinedload(Transaction.account),
        joinedload(Transaction.vehicle),
        joinedload(Transaction.payment),
    )


def create_purchase(db: Session, account: CurrentAccount, vehicle_id: int, payment_method: str) -> Transaction:
    """Create a transaction and its payment in one commit.

    Cash sales complete at once and take a unit of stock. Bank transfers stay
    pending, with stock untouched, until an admin approves them.
    """
    vehicle = _lock_vehicle(db, vehicle_id)
    if vehicle is None:
        raise VehicleNotFound()

    if vehicle.stock <= 0:
        raise OutOfStock()

    method = _parse_payment_method(payment_method)
    now = datetime.utcnow()
    is_cash = method == PaymentMethod.CASH

    transaction = Transaction(
        account_id=account.id,
        vehicle_id=vehicle.id,
        total_price=vehicle.price,
        payment_method=method,
        status=TransactionStatus.COMPLETED if is_cash else TransactionStatus.PENDING,
        stock_adjusted=False,
        transaction_date=now,
    )
    transaction.payment = Payment(
        payment_method=method,
        amount=vehicle.price,
        status=PaymentStatus.VERIFIED if is_cash else PaymentStatus.PENDING,
        payment_date=now if is_cash else None,
    )
    db.add(transaction)
    db.flush()

    if is_cash:
        _take_unit(vehicle, transaction)

    db.commit()
    logger.info(f"Account {account.id} purchased vehicle {vehicle.id} by {method.value} (transaction {transaction.id})")
    return get_transaction(db, transaction.id)


def get_transaction(db: Session, transaction_id: int) -> Transaction:
    transaction = _transaction_query(db).filter(Transaction.id == transaction_id).first()
    if transaction is None:
        raise TransactionNotFound()
    return transaction


def list_transactions(db: Session, account_id: Optional[int] = None, status: Optional[TransactionStatus] = None) -> List[Transaction]:
    query = _transaction_query(db)
    if account_id is not None:
        query = query.filter(Transaction.account_id == account_id)
    if status:
        query = query.filter(Transaction.status == status)
    return query.order_by(Transaction.created_at.desc(), Transaction.id.desc()).all()


def upload_payment_proof(db: Session, account: CurrentAccount, transaction_id: int, proof_url: str) -> Transaction:
    """Attach a proof URL to the caller's own pending transaction."""
    transaction = (
        db.query(Transaction)
        .filter(Transaction.id == transaction_id, Transaction.account_id == account.id)
        .first()
    )
    if transaction is None:
        raise TransactionNotFound()

    if transaction.status != TransactionStatus.PENDING:
        raise NotPending()

    if transaction.payment is None:
        raise PaymentRecordMissing()

    transaction.payment.payment_proof_url = proof_url
    db.commit()
    logger.info(f"Payment proof uploaded for transaction {transaction.id}")
    return get_transaction(db, transaction.id)


def update_transaction_status(db: Session, transaction_id: int, status: str, admin_notes: Optional[str] = None) -> Transaction:
    """Apply an admin decision and reconcile payment and stock with it."""
    transaction = db.query(Transaction).filter(Transaction.id == transaction_id).with_for_update().first()
    if transaction is None:
        raise TransactionNotFound()

    new_status = _parse_admin_status(status)
    old_status = transaction.status

    # Stock first, so an approval with nothing left fails before anything changes
    vehicle = _lock_vehicle(db, transaction.vehicle_id)
    if new_status == TransactionStatus.COMPLETED and not transaction.stock_adjusted:
        _take_unit(vehicle, transaction)
    elif new_status in (TransactionStatus.REJECTED, TransactionStatus.CANCELLED) and transaction.stock_adjusted:
        _return_unit(vehicle, transaction)

    transaction.status = new_status
    transaction.admin_notes = admin_notes

    payment = transaction.payment
    if payment is not None and new_status in PAYMENT_STATUS_FOR_TRANSACTION:
        payment.status = PAYMENT_STATUS_FOR_TRANSACTION[new_status]
        payment.admin_notes = admin_notes
        if new_status == TransactionStatus.COMPLETED:
            payment.payment_date = datetime.utcnow()

    db.commit()
    logger.info(f"Transaction {transaction.id} status {old_status.value} -> {new_status.value}")
    return get_transaction(db, transaction.id)
