# Import all models in correct order so relationship strings resolve
from app.models.property import Property, Unit, UnitType
from app.models.tenant import Tenant
from app.models.payment import Payment, PaymentStatus
from app.models.expense import Expense
from app.models.deposit import Deposit, DepositStatus
from app.models.audit import AuditLogEntry

__all__ = [
    "Property",
    "Unit",
    "UnitType",
    "Tenant",
    "Payment",
    "PaymentStatus",
    "Expense",
    "Deposit",
    "DepositStatus",
    "AuditLogEntry",
]
