from sqlalchemy import Column, Integer, Numeric, DateTime, Boolean, Text, String, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from app.core.database import Base
from app.models.enums import PaymentMethod, PaymentStatus, TransactionStatus, db_enum


class Transaction(Base):
    __tablename__ = "transactions"

    id = Column(Integer, primary_key=True, index=True)
    account_id = Column(Integer, ForeignKey("accounts.id", ondelete="CASCADE"), nullable=False, index=True)
    vehicle_id = Column(Integer, ForeignKey("vehicles.id", ondelete="CASCADE"), nullable=False, index=True)

    total_price = Column(Numeric(18, 2), nullable=False)  # vehicle price at purchase time
    payment_method = Column(db_enum(PaymentMethod), nullable=False)
    status = Column(db_enum(TransactionStatus), nullable=False, default=TransactionStatus.PENDING, index=True)
    # True while this order holds one unit of the vehicle's stock
    stock_adjusted = Column(Boolean, nullable=False, default=False)
    transaction_date = Column(DateTime(timezone=True), nullable=False)
    admin_notes = Column(Text)

    # Timestamps
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    account = relationship("Account", back_populates="transactions")
    vehicle = relationship("Vehicle", back_populates="transactions")
    payment = relationship(
        "Payment",
        back_populates="transaction",
        uselist=False,
        cascade="all, delete-orphan",
        passive_deletes=True,
    )


class Payment(Base):
    __tablename__ = "payments"

    id = Column(Integer, primary_key=True, index=True)
    transaction_id = Column(Integer, ForeignKey("transactions.id", ondelete="CASCADE"), nullable=False, unique=True)

    payment_method = Column(db_enum(PaymentMethod), nullable=False)
    amount = Column(Numeric(18, 2), nullable=False)
    payment_proof_url = Column(String(1000))
    payment_date = Column(DateTime(timezone=True))
    status = Column(db_enum(PaymentStatus), nullable=False, default=PaymentStatus.PENDING)
    admin_notes = Column(Text)

    # Timestamps
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), onupdate=func.now())

    transaction = relationship("Transaction", back_populates="payment")
