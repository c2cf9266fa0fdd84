from sqlalchemy import Column, Integer, String, Numeric, DateTime, Boolean, Text, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from app.core.database import Base
from app.models.enums import VehicleStatus, db_enum


class Vehicle(Base):
    __tablename__ = "vehicles"

    id = Column(Integer, primary_key=True, index=True)
    brand = Column(String(100), nullable=False, index=True)
    model = Column(String(100), nullable=False)
    year = Column(Integer, nullable=False)
    price = Column(Numeric(18, 2), nullable=False)

    # Specs
    color = Column(String(50))
    fuel_type = Column(String(50))  # Gasoline, Diesel, Hybrid, Electric
    transmission = Column(String(50))  # Manual, Automatic, CVT
    mileage = Column(Integer)  # km
    engine_capacity = Column(String(20))  # e.g. "1500cc"
    seats = Column(Integer)
    body_type = Column(String(50))  # Sedan, SUV, Hatchback, MPV, ...
    description = Column(Text)
    features = Column(Text)  # comma-separated

    # Inventory
    stock = Column(Integer, nullable=False, default=1)
    status = Column(db_enum(VehicleStatus), nullable=False, default=VehicleStatus.AVAILABLE, index=True)
    is_featured = Column(Boolean, nullable=False, default=False)

    # Timestamps
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    images = relationship(
        "VehicleImage",
        back_populates="vehicle",
        order_by="VehicleImage.display_order",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
    # Deleting a vehicle removes every request and order that references it
    wishlist_entries = relationship("WishlistEntry", back_populates="vehicle", cascade="all, delete-orphan", passive_deletes=True)
    test_drives = relationship("TestDrive", back_populates="vehicle", cascade="all, delete-orphan", passive_deletes=True)
    inquiries = relationship("Inquiry", back_populates="vehicle", cascade="all, delete-orphan", passive_deletes=True)
    transactions = relationship("Transaction", back_populates="vehicle", cascade="all, delete-orphan", passive_deletes=True)


class VehicleImage(Base):
    __tablename__ = "vehicle_images"

    id = Column(Integer, primary_key=True, index=True)
    vehicle_id = Column(Integer, ForeignKey("vehicles.id", ondelete="CASCADE"), nullable=False, index=True)
    image_url = Column(String(500), nullable=False)
    is_primary = Column(Boolean, nullable=False, default=False)
    display_order = Column(Integer, nullable=False, default=0)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    vehicle = relationship("Vehicle", back_populates="images")
