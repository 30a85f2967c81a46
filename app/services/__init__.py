from app.services.occupancy_service import OccupancyCoordinator
from app.services.property_service import PropertyService
from app.services.tenant_service import TenantService
from app.services.ledger_service import PaymentService, ExpenseService
from app.services.deposit_service import DepositService
from app.services.audit_service import AuditService
from app.services.report_service import ReportService

__all__ = [
    "OccupancyCoordinator",
    "PropertyService",
    "TenantService",
    "PaymentService",
    "ExpenseService",
    "DepositService",
    "AuditService",
    "ReportService",
]
