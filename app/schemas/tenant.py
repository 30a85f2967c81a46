"""
Tenant Pydantic Schemas - API Request/Response Models
"""
from datetime import date, datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel


class TenantCreate(BaseModel):
    # Presence and format are checked by TenantService so every missing
    # field is reported together
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    lease_start: Optional[date] = None
    lease_end: Optional[date] = None
    property_id: Optional[UUID] = None
    unit_id: Optional[str] = None


class TenantUpdate(BaseModel):
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    lease_start: Optional[date] = None
    lease_end: Optional[date] = None
    property_id: Optional[UUID] = None
    unit_id: Optional[str] = None


class TenantResponse(BaseModel):
    id: UUID
    name: str
    email: str
    phone: str
    lease_start: date
    lease_end: date
    property_id: UUID
    unit_id: str
    lease_status: str = "N/A"
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
