"""
Rental Deposit Schemas
"""
from __future__ import annotations

from datetime import date, datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, field_validator

from app.models.deposit import DepositStatus
from app.schemas.payment import _positive


class DepositCreate(BaseModel):
    tenant_id: UUID
    amount: float
    deposit_date: date

    @field_validator("amount")
    @classmethod
    def _positive_amount(cls, v: Optional[float]) -> Optional[float]:
        return _positive(v)


class DepositRefund(BaseModel):
    # None refunds the whole held balance
    amount: Optional[float] = None

    @field_validator("amount")
    @classmethod
    def _positive_amount(cls, v: Optional[float]) -> Optional[float]:
        return _positive(v)


class DepositResponse(BaseModel):
    id: UUID
    tenant_id: UUID
    landlord_id: str
    property_id: UUID
    amount: float
    refunded_amount: float
    held_amount: float
    deposit_date: date
    status: DepositStatus
    created_at: datetime

    class Config:
        from_attributes = True

