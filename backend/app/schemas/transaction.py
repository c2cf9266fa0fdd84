from pydantic import BaseModel, Field
from datetime import datetime
from typing import Optional

from app.models.enums import PaymentMethod, PaymentStatus, TransactionStatus
from app.schemas.common import Money


class TransactionCreate(BaseModel):
    vehicle_id: int
    # Checked against PaymentMethod by the order service so the caller gets a 400
    payment_method: str


class TransactionStatusUpdate(BaseModel):
    status: str
    admin_notes: Optional[str] = None


class PaymentProofUpload(BaseModel):
    payment_proof_url: str = Field(..., min_length=1, max_length=1000)


class PaymentResponse(BaseModel):
    id: int
    transaction_id: int
    payment_method: PaymentMethod
    amount: Money
    payment_proof_url: Optional[str] = None
    payment_date: Optional[datetime] = None
    status: PaymentStatus
    admin_notes: Optional[str] = None
    created_at: datetime

    class Config:
        from_attributes = True


class TransactionResponse(BaseModel):
    id: int
    user_id: int
    user_name: str
    user_email: str
    vehicle_id: int
    vehicle_brand: str
    vehicle_model: str
    vehicle_year: int
    total_price: Money
    payment_method: PaymentMethod
    status: TransactionStatus
    transaction_date: datetime
    admin_notes: Optional[str] = None
    created_at: datetime
    payment: Optional[PaymentResponse] = None
