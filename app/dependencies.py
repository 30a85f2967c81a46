"""
Request-scoped service factories.
Each request gets its own Session and services bound to it.
"""
from fastapi import Depends
from sqlalchemy.orm import Session

from app.database import get_db
from app.services import (
    AuditService,
    DepositService,
    ExpenseService,
    PaymentService,
    PropertyService,
    ReportService,
    TenantService,
)


def get_property_service(db: Session = Depends(get_db)) -> PropertyService:
    return PropertyService(db)


def get_tenant_service(db: Session = Depends(get_db)) -> TenantService:
    return TenantService(db)


def get_payment_service(db: Session = Depends(get_db)) -> PaymentService:
    return PaymentService(db)


def get_expense_service(db: Session = Depends(get_db)) -> ExpenseService:
    return ExpenseService(db)


def get_report_service(db: Session = Depends(get_db)) -> ReportService:
    return ReportService(db)


def get_deposit_service(db: Session = Depends(get_db)) -> DepositService:
    return DepositService(db)


def get_audit_service(db: Session = Depends(get_db)) -> AuditService:
    return AuditService(db)
