from app.schemas.common import Money, MessageResponse
from app.schemas.account import RegisterRequest, LoginRequest, AuthResponse, AccountResponse
from app.schemas.vehicle import (
    VehicleImageCreate, VehicleImageResponse,
    VehicleCreate, VehicleUpdate, VehicleResponse,
)
from app.schemas.engagement import (
    WishlistCheckResponse,
    TestDriveCreate, TestDriveStatusUpdate, TestDriveResponse,
    InquiryCreate, InquiryRespond, InquiryResponse,
)
from app.schemas.transaction import (
    TransactionCreate, TransactionStatusUpdate, PaymentProofUpload,
    PaymentResponse, TransactionResponse,
)

__all__ = [
    "Money", "MessageResponse",
    "RegisterRequest", "LoginRequest", "AuthResponse", "AccountResponse",
    "VehicleImageCreate", "VehicleImageResponse",
    "VehicleCreate", "VehicleUpdate", "VehicleResponse",
    "WishlistCheckResponse",
    "TestDriveCreate", "TestDriveStatusUpdate", "TestDriveResponse",
    "InquiryCreate", "InquiryRespond", "InquiryResponse",
    "TransactionCreate", "TransactionStatusUpdate", "PaymentProofUpload",
    "PaymentResponse", "TransactionResponse",
]
