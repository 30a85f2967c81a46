"""
Dashboard report schemas (landlord and tax officer views)

Occupancy rates are fractions from 0.0 to 1.0 everywhere.
"""
from __future__ import annotations

from typing import Dict, List
from uuid import UUID

from pydantic import BaseModel


class PropertyPerformance(BaseModel):
    property_id: UUID
    name: str
    location: str
    total_units: int
    occupied_units: int
    occupancy_rate: float
    potential_monthly_income: float
    income_received: float


class PropertyIncome(BaseModel):
    property_id: UUID
    name: str
    income: float


class LandlordSummary(BaseModel):
    landlord_id: str
    total_income: float
    overdue_rent: float
    total_expenses: float
    net_income: float
    deposits_held: float = 0.0
    total_units: int
    occupied_units: int
    occupancy_rate: float
    properties: List[PropertyPerformance] = []
    expenses_by_category: Dict[str, float] = {}
    lease_status_counts: Dict[str, int] = {}


class TaxSummary(BaseModel):
    landlord_id: str
    gross_rental_income: float
    total_expenses: float
    net_taxable_income: float
    tax_rate: float
    estimated_tax: float
    deposits_held: float = 0.0
    income_by_property: List[PropertyIncome] = []
    expenses_by_category: Dict[str, float] = {}
