"""
Rent Payment Model
"""
from datetime import date
from enum import Enum
import uuid

from sqlalchemy import String, Float, Date, Enum as SQLEnum, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base, TimestampMixin


class PaymentStatus(str, Enum):
    """Payment status enum"""
    PAID = "Paid"
    OVERDUE = "Overdue"
    PENDING = "Pending"


class Payment(Base, TimestampMixin):
    """Rent payment received (or owed) from a tenant"""
    __tablename__ = "payments"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)

    # Copied from the tenant at creation; kept after the tenant is deleted
    # so payment history survives the lease
    tenant_id: Mapped[uuid.UUID] = mapped_column(Uuid, nullable=False, index=True)
    property_id: Mapped[uuid.UUID] = mapped_column(Uuid, nullable=False, index=True)
    unit_id: Mapped[str] = mapped_column(String(64), nullable=False)

    amount: Mapped[float] = mapped_column(Float, nullable=False)
    payment_date: Mapped[date] = mapped_column(Date, nullable=False)
    status: Mapped[PaymentStatus] = mapped_column(
        SQLEnum(PaymentStatus, values_callable=lambda e: [m.value for m in e], native_enum=False),
        default=PaymentStatus.PENDING,
        nullable=False,
        index=True,
    )
    method: Mapped[str] = mapped_column(String(50), nullable=False)

    def __repr__(self):
        return f"<Payment {self.amount} {self.status.value} ({self.id})>"
