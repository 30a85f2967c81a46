"""
Dashboard reports for landlords and tax officers.
Loads the landlord's records once and derives everything with analytics_service.
"""
import logging
from datetime import date
from typing import Optional

from app.core.config import settings
from app.models.payment import PaymentStatus
from app.schemas.reports import LandlordSummary, PropertyIncome, PropertyPerformance, TaxSummary
from app.services import analytics_service as analytics
from app.services.base_service import DatabaseService
from app.services.deposit_service import DepositService
from app.services.ledger_service import ExpenseService, PaymentService
from app.services.property_service import PropertyService
from app.services.tax_service import estimate_rental_tax
from app.services.tenant_service import TenantService

logger = logging.getLogger(__name__)


class ReportService(DatabaseService):

    def _load(self, landlord_id: str):
        properties = PropertyService(self.db).list_properties(landlord_id)
        tenants = TenantService(self.db).list_tenants(landlord_id)
        payments = PaymentService(self.db).list_payments(landlord_id)
        expenses = ExpenseService(self.db).list_expenses(landlord_id)
        return properties, tenants, payments, expenses

    def _deposits_held(self, landlord_id: str) -> float:
        return sum(d.held_amount for d in DepositService(self.db).list_deposits(landlord_id))

    def landlord_summary(self, landlord_id: str, now: Optional[date] = None) -> LandlordSummary:
        properties, tenants, payments, expenses = self._load(landlord_id)

        paid = [p for p in payments if p.status == PaymentStatus.PAID]
        total_income = sum(p.amount for p in paid)
        overdue_rent = sum(p.amount for p in payments if p.status == PaymentStatus.OVERDUE)
        total_expenses = sum(e.amount for e in expenses)

        income_by_property = analytics.aggregate_by(paid, lambda p: p.property_id, lambda p: p.amount)

        rows = []
        total_units = 0
        occupied_units = 0
        for prop in properties:
            occupied = len(prop.occupied_units)
            total_units += len(prop.units)
            occupied_units += occupied
            rows.append(PropertyPerformance(
                property_id=prop.id,
                name=prop.name,
                location=prop.location,
                total_units=len(prop.units),
                occupied_units=occupied,
                occupancy_rate=analytics.occupancy_rate(prop),
                potential_monthly_income=analytics.potential_rent(prop),
                income_received=income_by_property.get(prop.id, 0.0),
            ))

        status_counts = analytics.aggregate_by(
            tenants,
            lambda t: analytics.lease_status(
                t.lease_end, now, settings.LEASE_ENDING_SOON_DAYS
            ).value,
            lambda t: 1,
        )

        return LandlordSummary(
            landlord_id=landlord_id,
            total_income=total_income,
            overdue_rent=overdue_rent,
            total_expenses=total_expenses,
            net_income=total_income - total_expenses,
            deposits_held=self._deposits_held(landlord_id),
            total_units=total_units,
            occupied_units=occupied_units,
            occupancy_rate=(occupied_units / total_units) if total_units else 0.0,
            properties=rows,
            expenses_by_category=dict(
                analytics.aggregate_by(expenses, lambda e: e.category, lambda e: e.amount)
            ),
            lease_status_counts={status: int(count) for status, count in status_counts.items()},
        )

    def tax_summary(self, landlord_id: str) -> TaxSummary:
        properties, _, payments, expenses = self._load(landlord_id)

        paid = [p for p in payments if p.status == PaymentStatus.PAID]
        estimate = estimate_rental_tax(
            gross_income=sum(p.amount for p in paid),
            total_expenses=sum(e.amount for e in expenses),
        )
        logger.info(
            f"[TAX] Landlord {landlord_id}: net {estimate['net_taxable_income']:,.2f}, "
            f"tax {estimate['estimated_tax']:,.2f}"
        )

        income_by_property = analytics.aggregate_by(paid, lambda p: p.property_id, lambda p: p.amount)
        return TaxSummary(
            landlord_id=landlord_id,
            gross_rental_income=estimate["gross_rental_income"],
            total_expenses=estimate["total_expenses"],
            net_taxable_income=estimate["net_taxable_income"],
            tax_rate=estimate["tax_rate"],
            estimated_tax=estimate["estimated_tax"],
            deposits_held=self._deposits_held(landlord_id),
            income_by_property=[
                PropertyIncome(property_id=prop.id, name=prop.name, income=income_by_property.get(prop.id, 0.0))
                for prop in properties
            ],
            expenses_by_category=dict(
                analytics.aggregate_by(expenses, lambda e: e.category, lambda e: e.amount)
            ),
        )
