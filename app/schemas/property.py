from pydantic import BaseModel
from uuid import UUID
from datetime import datetime
from typing import Optional, List

from app.models.property import UnitType


class UnitIn(BaseModel):
    """Unit as submitted by the landlord. Occupancy is never accepted here."""
    id: Optional[str] = None
    name: Optional[str] = None
    unit_type: UnitType = UnitType.SINGLE
    rent: Optional[float] = None


class UnitResponse(BaseModel):
    id: str
    name: str
    unit_type: UnitType
    rent: float
    tenant_id: Optional[UUID] = None
    is_occupied: bool

    class Config:
        from_attributes = True


class PropertyCreate(BaseModel):
    landlord_id: Optional[str] = None
    name: Optional[str] = None
    location: Optional[str] = None
    units: List[UnitIn] = []


class PropertyUpdate(BaseModel):
    name: Optional[str] = None
    location: Optional[str] = None
    units: Optional[List[UnitIn]] = None
    # Accepted for payload compatibility; ownership never changes
    landlord_id: Optional[str] = None


class PropertyResponse(BaseModel):
    id: UUID
    landlord_id: str
    name: str
    location: str
    units: List[UnitResponse] = []
    occupancy_rate: float = 0.0
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
