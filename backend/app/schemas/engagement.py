from pydantic import BaseModel, Field
from datetime import date, datetime
from typing import Optional

from app.models.enums import TestDriveStatus, InquiryStatus


class WishlistCheckResponse(BaseModel):
    in_wishlist: bool


class TestDriveCreate(BaseModel):
    vehicle_id: int
    requested_date: date
    requested_time: str = Field(..., min_length=1, max_length=20)
    notes: Optional[str] = None


class TestDriveStatusUpdate(BaseModel):
    status: TestDriveStatus
    admin_notes: Optional[str] = None


class TestDriveResponse(BaseModel):
    id: int
    user_id: int
    user_name: str
    user_email: str
    user_phone: Optional[str] = None
    vehicle_id: int
    vehicle_brand: str
    vehicle_model: str
    requested_date: date
    requested_time: str
    status: TestDriveStatus
    notes: Optional[str] = None
    admin_notes: Optional[str] = None
    approved_by: Optional[int] = None
    created_at: datetime
    updated_at: Optional[datetime] = None


class InquiryCreate(BaseModel):
    vehicle_id: int
    subject: str = Field(..., min_length=1, max_length=200)
    message: str = Field(..., min_length=1)


class InquiryRespond(BaseModel):
    admin_response: str = Field(..., min_length=1)
    status: InquiryStatus


class InquiryResponse(BaseModel):
    id: int
    user_id: int
    user_name: str
    user_email: str
    vehicle_id: int
    vehicle_brand: str
    vehicle_model: str
    subject: str
    message: str
    status: InquiryStatus
    admin_response: Optional[str] = None
    responded_by: Optional[int] = None
    created_at: datetime
    updated_at: Optional[datetime] = None
