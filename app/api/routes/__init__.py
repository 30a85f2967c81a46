from app.api.routes.properties import router as properties_router
from app.api.routes.tenants import router as tenants_router
from app.api.routes.payments import router as payments_router
from app.api.routes.expenses import router as expenses_router
from app.api.routes.deposits import router as deposits_router
from app.api.routes.reports import router as reports_router
from app.api.routes.audit import router as audit_router

__all__ = [
    "properties_router",
    "tenants_router",
    "payments_router",
    "expenses_router",
    "deposits_router",
    "reports_router",
    "audit_router",
]
