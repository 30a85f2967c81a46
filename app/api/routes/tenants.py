"""
Tenant Routes
Create/move/remove tenants; occupancy of units follows automatically.
"""
from fastapi import APIRouter, Depends, status
from typing import List, Optional
from uuid import UUID
import logging

from app.core.config import settings
from app.dependencies import get_tenant_service
from app.models.tenant import Tenant
from app.schemas.tenant import TenantCreate, TenantResponse, TenantUpdate
from app.services.analytics_service import lease_status
from app.services.tenant_service import TenantService

router = APIRouter()
logger = logging.getLogger(__name__)


def to_response(tenant: Tenant) -> TenantResponse:
    response = TenantResponse.model_validate(tenant)
    response.lease_status = lease_status(
        tenant.lease_end, ending_soon_days=settings.LEASE_ENDING_SOON_DAYS
    ).value
    return response


@router.get("", response_model=List[TenantResponse])
@router.get("/", response_model=List[TenantResponse], include_in_schema=False)
def list_tenants(
    landlord_id: Optional[str] = None,
    service: TenantService = Depends(get_tenant_service),
):
    """List tenants, optionally only those in a landlord's properties"""
    return [to_response(t) for t in service.list_tenants(landlord_id)]


@router.get("/{tenant_id}", response_model=TenantResponse)
def get_tenant(
    tenant_id: UUID,
    service: TenantService = Depends(get_tenant_service),
):
    """Get tenant details"""
    return to_response(service.get_tenant(tenant_id))


@router.post("", response_model=TenantResponse, status_code=status.HTTP_201_CREATED)
@router.post("/", response_model=TenantResponse, status_code=status.HTTP_201_CREATED, include_in_schema=False)
def create_tenant(
    tenant_in: TenantCreate,
    service: TenantService = Depends(get_tenant_service),
):
    """Create a tenant and mark the unit occupied"""
    logger.info(f"[CREATE_TENANT] property={tenant_in.property_id}, unit={tenant_in.unit_id}")
    return to_response(service.create_tenant(tenant_in))


@router.put("/{tenant_id}", response_model=TenantResponse)
def update_tenant(
    tenant_id: UUID,
    tenant_update: TenantUpdate,
    service: TenantService = Depends(get_tenant_service),
):
    """Update tenant information; changing the unit moves the tenant"""
    return to_response(service.update_tenant(tenant_id, tenant_update))


@router.delete("/{tenant_id}")
def delete_tenant(
    tenant_id: UUID,
    service: TenantService = Depends(get_tenant_service),
):
    """Delete tenant and vacate their unit"""
    service.delete_tenant(tenant_id)
    return {"success": True, "message": "Tenant deleted"}
