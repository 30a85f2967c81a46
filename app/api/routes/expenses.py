from fastapi import APIRouter, Depends, status
from typing import List, Optional
from uuid import UUID

from app.dependencies import get_expense_service
from app.schemas.payment import ExpenseCreate, ExpenseResponse, ExpenseUpdate
from app.services.ledger_service import ExpenseService

router = APIRouter()


@router.get("", response_model=List[ExpenseResponse])
@router.get("/", response_model=List[ExpenseResponse], include_in_schema=False)
def list_expenses(
    landlord_id: Optional[str] = None,
    service: ExpenseService = Depends(get_expense_service),
):
    """Expenses, newest first"""
    return service.list_expenses(landlord_id)


@router.get("/{expense_id}", response_model=ExpenseResponse)
def get_expense(expense_id: UUID, service: ExpenseService = Depends(get_expense_service)):
    return service.get_expense(expense_id)


@router.post("", response_model=ExpenseResponse, status_code=status.HTTP_201_CREATED)
@router.post("/", response_model=ExpenseResponse, status_code=status.HTTP_201_CREATED, include_in_schema=False)
def create_expense(expense_in: ExpenseCreate, service: ExpenseService = Depends(get_expense_service)):
    """Record an expense against a property"""
    return service.create_expense(expense_in)


@router.put("/{expense_id}", response_model=ExpenseResponse)
def update_expense(
    expense_id: UUID,
    expense_update: ExpenseUpdate,
    service: ExpenseService = Depends(get_expense_service),
):
    return service.update_expense(expense_id, expense_update)


@router.delete("/{expense_id}")
def delete_expense(expense_id: UUID, service: ExpenseService = Depends(get_expense_service)):
    service.delete_expense(expense_id)
    return {"success": True, "message": "Expense deleted successfully"}
