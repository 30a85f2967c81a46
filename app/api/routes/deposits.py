"""
Rental Deposit Routes
"""
from fastapi import APIRouter, Depends, Query, status
from typing import List, Optional
from uuid import UUID

from app.dependencies import get_deposit_service
from app.models.deposit import DepositStatus
from app.schemas.deposit import DepositCreate, DepositRefund, DepositResponse
from app.services.deposit_service import DepositService

router = APIRouter()


@router.get("", response_model=List[DepositResponse])
@router.get("/", response_model=List[DepositResponse], include_in_schema=False)
def list_deposits(
    landlord_id: Optional[str] = None,
    tenant_id: Optional[UUID] = None,
    deposit_status: Optional[DepositStatus] = Query(None, alias="status"),
    service: DepositService = Depends(get_deposit_service),
):
    """Deposits, newest first, filtered by landlord, tenant or status"""
    return service.list_deposits(landlord_id, tenant_id, deposit_status)


@router.get("/{deposit_id}", response_model=DepositResponse)
def get_deposit(deposit_id: UUID, service: DepositService = Depends(get_deposit_service)):
    return service.get_deposit(deposit_id)


@router.post("", response_model=DepositResponse, status_code=status.HTTP_201_CREATED)
@router.post("/", response_model=DepositResponse, status_code=status.HTTP_201_CREATED, include_in_schema=False)
def create_deposit(deposit_in: DepositCreate, service: DepositService = Depends(get_deposit_service)):
    """Record a deposit held for an existing tenant"""
    return service.create_deposit(deposit_in)


@router.post("/{deposit_id}/refund", response_model=DepositResponse)
def refund_deposit(
    deposit_id: UUID,
    refund: Optional[DepositRefund] = None,
    service: DepositService = Depends(get_deposit_service),
):
    """Refund the held balance, or part of it when an amount is given"""
    return service.refund_deposit(deposit_id, refund)


@router.delete("/{deposit_id}")
def delete_deposit(deposit_id: UUID, service: DepositService = Depends(get_deposit_service)):
    service.delete_deposit(deposit_id)
    return {"success": True, "message": "Deposit deleted"}
