"""
Dashboard Report Routes
Landlord overview and the read-only tax officer view.
"""
from fastapi import APIRouter, Depends

from app.dependencies import get_report_service
from app.schemas.reports import LandlordSummary, TaxSummary
from app.services.report_service import ReportService

router = APIRouter()


@router.get("/landlord/{landlord_id}", response_model=LandlordSummary)
def landlord_summary(landlord_id: str, service: ReportService = Depends(get_report_service)):
    """Income, expenses, occupancy and lease status for a landlord's portfolio"""
    return service.landlord_summary(landlord_id)


@router.get("/tax/{landlord_id}", response_model=TaxSummary)
def tax_summary(landlord_id: str, service: ReportService = Depends(get_report_service)):
    """Net taxable rental income and estimated tax liability"""
    return service.tax_summary(landlord_id)
