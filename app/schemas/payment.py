"""
Payment & Expense Schemas
"""
from __future__ import annotations

from datetime import date, datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, field_validator

from app.models.payment import PaymentStatus


def _positive(v: Optional[float]) -> Optional[float]:
    if v is not None and v <= 0:
        raise ValueError("amount must be greater than zero")
    return v


# ─────────────────── Payments ───────────────────

class PaymentCreate(BaseModel):
    tenant_id: UUID
    amount: float
    payment_date: date
    status: PaymentStatus = PaymentStatus.PENDING
    method: str = "M-PESA"

    @field_validator("amount")
    @classmethod
    def _positive_amount(cls, v: Optional[float]) -> Optional[float]:
        return _positive(v)


class PaymentUpdate(BaseModel):
    amount: Optional[float] = None
    payment_date: Optional[date] = None
    status: Optional[PaymentStatus] = None
    method: Optional[str] = None

    @field_validator("amount")
    @classmethod
    def _positive_amount(cls, v: Optional[float]) -> Optional[float]:
        return _positive(v)


class PaymentResponse(BaseModel):
    id: UUID
    tenant_id: UUID
    property_id: UUID
    unit_id: str
    amount: float
    payment_date: date
    status: PaymentStatus
    method: str
    created_at: datetime

    class Config:
        from_attributes = True


# ─────────────────── Expenses ───────────────────

class ExpenseCreate(BaseModel):
    property_id: UUID
    category: str
    description: str
    amount: float
    expense_date: date

    @field_validator("amount")
    @classmethod
    def _positive_amount(cls, v: Optional[float]) -> Optional[float]:
        return _positive(v)

    @field_validator("category", "description")
    @classmethod
    def _not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be blank")
        return v.strip()


class ExpenseUpdate(BaseModel):
    category: Optional[str] = None
    description: Optional[str] = None
    amount: Optional[float] = None
    expense_date: Optional[date] = None

    @field_validator("amount")
    @classmethod
    def _positive_amount(cls, v: Optional[float]) -> Optional[float]:
        return _positive(v)

    @field_validator("category", "description")
    @classmethod
    def _not_blank(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and not v.strip():
            raise ValueError("must not be blank")
        return v.strip() if v is not None else v


class ExpenseResponse(BaseModel):
    id: UUID
    property_id: UUID
    category: str
    description: str
    amount: float
    expense_date: date
    created_at: datetime

    class Config:
        from_attributes = True
