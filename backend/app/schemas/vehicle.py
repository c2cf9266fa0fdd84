from pydantic import BaseModel, Field
from datetime import datetime
from typing import List, Optional

from app.models.enums import VehicleStatus
from app.schemas.common import Money


class VehicleImageBase(BaseModel):
    image_url: str = Field(..., min_length=1, max_length=500)
    is_primary: bool = False
    display_order: int = 0


class VehicleImageCreate(VehicleImageBase):
    pass


class VehicleImageResponse(VehicleImageBase):
    id: int

    class Config:
        from_attributes = True


class VehicleBase(BaseModel):
    brand: str = Field(..., min_length=1, max_length=100)
    model: str = Field(..., min_length=1, max_length=100)
    year: int = Field(..., ge=1900, le=2100)
    price: Money = Field(..., ge=0)
    color: Optional[str] = Field(None, max_length=50)
    fuel_type: Optional[str] = Field(None, max_length=50)
    transmission: Optional[str] = Field(None, max_length=50)
    mileage: Optional[int] = Field(None, ge=0)
    engine_capacity: Optional[str] = Field(None, max_length=20)
    seats: Optional[int] = Field(None, ge=1)
    body_type: Optional[str] = Field(None, max_length=50)
    description: Optional[str] = None
    features: Optional[str] = None


class VehicleCreate(VehicleBase):
    stock: int = Field(1, ge=0)
    is_featured: bool = False
    images: List[VehicleImageCreate] = []


class VehicleUpdate(BaseModel):
    """Partial update: fields left out or sent as null keep their stored value."""
    brand: Optional[str] = Field(None, min_length=1, max_length=100)
    model: Optional[str] = Field(None, min_length=1, max_length=100)
    year: Optional[int] = Field(None, ge=1900, le=2100)
    price: Optional[Money] = Field(None, ge=0)
    color: Optional[str] = Field(None, max_length=50)
    fuel_type: Optional[str] = Field(None, max_length=50)
    transmission: Optional[str] = Field(None, max_length=50)
    mileage: Optional[int] = Field(None, ge=0)
    engine_capacity: Optional[str] = Field(None, max_length=20)
    seats: Optional[int] = Field(None, ge=1)
    body_type: Optional[str] = Field(None, max_length=50)
    description: Optional[str] = None
    features: Optional[str] = None
    stock: Optional[int] = Field(None, ge=0)
    status: Optional[VehicleStatus] = None
    is_featured: Optional[bool] = None


class VehicleResponse(VehicleBase):
    id: int
    stock: int
    status: VehicleStatus
    is_featured: bool
    created_at: datetime
    updated_at: Optional[datetime] = None
    images: List[VehicleImageResponse] = []

    class Config:
        from_attributes = True
