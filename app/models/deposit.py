"""
Rental Deposit Model
"""
from datetime import date
from enum import Enum
import uuid

from sqlalchemy import String, Float, Date, Enum as SQLEnum, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from app.db.base import Base, TimestampMixin


class DepositStatus(str, Enum):
    HELD = "Held"
    PARTIALLY_REFUNDED = "Partially Refunded"
    REFUNDED = "Refunded"


class Deposit(Base, TimestampMixin):
    """
    Security deposit a landlord holds for a tenant.

    Held --refund(part)--> Partially Refunded --refund(rest)--> Refunded
    Held --refund(all)---> Refunded

    Like payments, the tenant and property references are copied values so the
    record outlives the tenancy.
    """
    __tablename__ = "deposits"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    tenant_id: Mapped[uuid.UUID] = mapped_column(Uuid, nullable=False, index=True)
    landlord_id: Mapped[str] = mapped_column(String(64), nullable=False, index=True)
    property_id: Mapped[uuid.UUID] = mapped_column(Uuid, nullable=False, index=True)

    amount: Mapped[float] = mapped_column(Float, nullable=False)
    refunded_amount: Mapped[float] = mapped_column(Float, default=0.0, nullable=False)
    deposit_date: Mapped[date] = mapped_column(Date, nullable=False)
    status: Mapped[DepositStatus] = mapped_column(
        SQLEnum(DepositStatus, values_callable=lambda e: [m.value for m in e], native_enum=False),
        default=DepositStatus.HELD,
        nullable=False,
        index=True,
    )

    @property
    def held_amount(self) -> float:
        return (self.amount or 0.0) - (self.refunded_amount or 0.0)

    def __repr__(self):
        return f"<Deposit {self.amount} {self.status.value} ({self.id})>"
