from sqlalchemy import Column, Integer, String, Date, DateTime, Text, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from app.core.database import Base
from app.models.enums import TestDriveStatus, InquiryStatus, db_enum


class WishlistEntry(Base):
    __tablename__ = "wishlist_entries"
    __table_args__ = (UniqueConstraint("account_id", "vehicle_id", name="uq_wishlist_account_vehicle"),)

    id = Column(Integer, primary_key=True, index=True)
    account_id = Column(Integer, ForeignKey("accounts.id", ondelete="CASCADE"), nullable=False, index=True)
    vehicle_id = Column(Integer, ForeignKey("vehicles.id", ondelete="CASCADE"), nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    account = relationship("Account", back_populates="wishlist_entries")
    vehicle = relationship("Vehicle", back_populates="wishlist_entries")


class TestDrive(Base):
    __tablename__ = "test_drives"

    id = Column(Integer, primary_key=True, index=True)
    account_id = Column(Integer, ForeignKey("accounts.id", ondelete="CASCADE"), nullable=False, index=True)
    vehicle_id = Column(Integer, ForeignKey("vehicles.id", ondelete="CASCADE"), nullable=False)

    requested_date = Column(Date, nullable=False)
    requested_time = Column(String(20), nullable=False)  # free-form slot, e.g. "09:00"
    notes = Column(Text)
    admin_notes = Column(Text)
    status = Column(db_enum(TestDriveStatus), nullable=False, default=TestDriveStatus.PENDING, index=True)
    approved_by = Column(Integer, ForeignKey("accounts.id", ondelete="SET NULL"))

    # Timestamps
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    account = relationship("Account", back_populates="test_drives", foreign_keys=[account_id])
    vehicle = relationship("Vehicle", back_populates="test_drives")


class Inquiry(Base):
    __tablename__ = "inquiries"

    id = Column(Integer, primary_key=True, index=True)
    account_id = Column(Integer, ForeignKey("accounts.id", ondelete="CASCADE"), nullable=False, index=True)
    vehicle_id = Column(Integer, ForeignKey("vehicles.id", ondelete="CASCADE"), nullable=False)

    subject = Column(String(200), nullable=False)
    message = Column(Text, nullable=False)
    admin_response = Column(Text)
    status = Column(db_enum(InquiryStatus), nullable=False, default=InquiryStatus.PENDING, index=True)
    responded_by = Column(Integer, ForeignKey("accounts.id", ondelete="SET NULL"))

    # Timestamps
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    account = relationship("Account", back_populates="inquiries", foreign_keys=[account_id])
    vehicle = relationship("Vehicle", back_populates="inquiries")
