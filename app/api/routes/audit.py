"""
Audit Log Routes (read-only)
"""
from fastapi import APIRouter, Depends, Query
from typing import List, Optional

from app.dependencies import get_audit_service
from app.schemas.audit import AuditLogResponse
from app.services.audit_service import AuditService

router = APIRouter()


@router.get("", response_model=List[AuditLogResponse])
@router.get("/", response_model=List[AuditLogResponse], include_in_schema=False)
def list_audit_log(
    landlord_id: Optional[str] = None,
    limit: int = Query(100, ge=1, le=500),
    service: AuditService = Depends(get_audit_service),
):
    """Most recent actions first"""
    return service.list_entries(landlord_id, limit)
