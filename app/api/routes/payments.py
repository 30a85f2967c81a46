from fastapi import APIRouter, Depends, status
from typing import List, Optional
from uuid import UUID

from app.dependencies import get_payment_service
from app.schemas.payment import PaymentCreate, PaymentResponse, PaymentUpdate
from app.services.ledger_service import PaymentService

router = APIRouter()


@router.get("", response_model=List[PaymentResponse])
@router.get("/", response_model=List[PaymentResponse], include_in_schema=False)
def list_payments(
    landlord_id: Optional[str] = None,
    tenant_id: Optional[UUID] = None,
    service: PaymentService = Depends(get_payment_service),
):
    """Payments, newest first; tenant_id narrows to one tenant's history"""
    return service.list_payments(landlord_id, tenant_id)


@router.get("/{payment_id}", response_model=PaymentResponse)
def get_payment(payment_id: UUID, service: PaymentService = Depends(get_payment_service)):
    return service.get_payment(payment_id)


@router.post("", response_model=PaymentResponse, status_code=status.HTTP_201_CREATED)
@router.post("/", response_model=PaymentResponse, status_code=status.HTTP_201_CREATED, include_in_schema=False)
def create_payment(payment_in: PaymentCreate, service: PaymentService = Depends(get_payment_service)):
    """Record a rent payment from an existing tenant"""
    return service.create_payment(payment_in)


@router.put("/{payment_id}", response_model=PaymentResponse)
def update_payment(
    payment_id: UUID,
    payment_update: PaymentUpdate,
    service: PaymentService = Depends(get_payment_service),
):
    return service.update_payment(payment_id, payment_update)


@router.delete("/{payment_id}")
def delete_payment(payment_id: UUID, service: PaymentService = Depends(get_payment_service)):
    service.delete_payment(payment_id)
    return {"success": True, "message": "Payment deleted"}
