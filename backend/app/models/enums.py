from enum import Enum
from sqlalchemy import Enum as SAEnum


class Role(str, Enum):
    USER = "User"
    ADMIN = "Admin"


class VehicleStatus(str, Enum):
    AVAILABLE = "Available"
    SOLD = "Sold"
    RESERVED = "Reserved"


class TestDriveStatus(str, Enum):
    PENDING = "Pending"
    APPROVED = "Approved"
    REJECTED = "Rejected"
    COMPLETED = "Completed"
    CANCELLED = "Cancelled"


class InquiryStatus(str, Enum):
    PENDING = "Pending"
    RESPONDED = "Responded"
    RESOLVED = "Resolved"
    CLOSED = "Closed"


class PaymentMethod(str, Enum):
    CASH = "Cash"
    BANK_TRANSFER = "BankTransfer"


class TransactionStatus(str, Enum):
    PENDING = "Pending"
    COMPLETED = "Completed"
    REJECTED = "Rejected"
    CANCELLED = "Cancelled"


class PaymentStatus(str, Enum):
    PENDING = "Pending"
    VERIFIED = "Verified"
    REJECTED = "Rejected"


def db_enum(enum_cls, length: int = 50) -> SAEnum:
    """Column type that stores the member value as a plain string."""
    return SAEnum(
        enum_cls,
        native_enum=False,
        values_callable=lambda e: [m.value for m in e],
        length=length,
        validate_strings=True,
    )
