"""Status transition tables for requests and orders.

Admin-driven moves for test drives and inquiries allow any status to follow
any other.
"""
from typing import Dict, FrozenSet, Mapping, Type, TypeVar

from app.core.exceptions import InvalidTransition, ShowroomError
from app.models.enums import (
    InquiryStatus,
    PaymentStatus,
    TestDriveStatus,
    TransactionStatus,
)

S = TypeVar("S")


def _any_to_any(states) -> Dict:
    return {state: frozenset(states) for state in states}


TEST_DRIVE_ADMIN_TRANSITIONS: Mapping[TestDriveStatus, FrozenSet[TestDriveStatus]] = _any_to_any(TestDriveStatus)

# Owners may cancel from every state except Completed
TEST_DRIVE_OWNER_TRANSITIONS: Mapping[TestDriveStatus, FrozenSet[TestDriveStatus]] = {
    state: frozenset() if state == TestDriveStatus.COMPLETED else frozenset({TestDriveStatus.CANCELLED})
    for state in TestDriveStatus
}

INQUIRY_ADMIN_TRANSITIONS: Mapping[InquiryStatus, FrozenSet[InquiryStatus]] = _any_to_any(InquiryStatus)

# Pending is only ever an initial state for orders
TRANSACTION_ADMIN_TARGETS: FrozenSet[TransactionStatus] = frozenset({
    TransactionStatus.COMPLETED,
    TransactionStatus.REJECTED,
    TransactionStatus.CANCELLED,
})

# Cancelled leaves the payment record as it was
PAYMENT_STATUS_FOR_TRANSACTION: Mapping[TransactionStatus, PaymentStatus] = {
    TransactionStatus.COMPLETED: PaymentStatus.VERIFIED,
    TransactionStatus.REJECTED: PaymentStatus.REJECTED,
}


def ensure_transition(
    table: Mapping[S, FrozenSet[S]],
    current: S,
    target: S,
    error: Type[ShowroomError] = InvalidTransition,
    message: str = None,
) -> None:
    """Raise ``error`` unless ``table`` allows ``current`` -> ``target``."""
    if target not in table.get(current, frozenset()):
        raise error(message)
