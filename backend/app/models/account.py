from sqlalchemy import Column, Integer, String, DateTime, Boolean, UniqueConstraint
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from app.core.database import Base
from app.models.enums import Role, db_enum


class Account(Base):
    __tablename__ = "accounts"
    __table_args__ = (UniqueConstraint("email", "role", name="uq_accounts_email_role"),)

    id = Column(Integer, primary_key=True, index=True)
    role = Column(db_enum(Role, length=20), nullable=False, default=Role.USER)

    full_name = Column(String(100), nullable=False)
    email = Column(String(100), nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    phone_number = Column(String(20))
    address = Column(String(200))
    is_active = Column(Boolean, nullable=False, default=True)

    # Timestamps
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    # Owned history is wiped together with the account
    wishlist_entries = relationship("WishlistEntry", back_populates="account", cascade="all, delete-orphan", passive_deletes=True)
    test_drives = relationship("TestDrive", back_populates="account", foreign_keys="TestDrive.account_id", cascade="all, delete-orphan", passive_deletes=True)
    inquiries = relationship("Inquiry", back_populates="account", foreign_keys="Inquiry.account_id", cascade="all, delete-orphan", passive_deletes=True)
    transactions = relationship("Transaction", back_populates="account", cascade="all, delete-orphan", passive_deletes=True)
