"""
Payment & Expense ledgers - the records behind the income/expense rollups.
"""
import logging
import uuid
from typing import List, Optional

from sqlalchemy import select

from app.core.exceptions import NotFoundError
from app.models.expense import Expense
from app.models.payment import Payment
from app.models.property import Property
from app.models.tenant import Tenant
from app.schemas.payment import ExpenseCreate, ExpenseUpdate, PaymentCreate, PaymentUpdate
from app.services.base_service import DatabaseService
from app.services.occupancy_service import IdLike, as_uuid

logger = logging.getLogger(__name__)


class PaymentService(DatabaseService):

    def _landlord_of(self, property_id) -> Optional[str]:
        prop = self.db.get(Property, property_id)
        return prop.landlord_id if prop is not None else None

    def list_payments(
        self,
        landlord_id: Optional[str] = None,
        tenant_id: Optional[IdLike] = None,
    ) -> List[Payment]:
        """Newest first; landlord filter goes through the property the payment was made for."""
        stmt = select(Payment).order_by(Payment.payment_date.desc(), Payment.created_at.desc())
        if landlord_id:
            stmt = stmt.join(Property, Property.id == Payment.property_id).where(
                Property.landlord_id == landlord_id
            )
        if tenant_id is not None:
            stmt = stmt.where(Payment.tenant_id == as_uuid(tenant_id))
        return list(self.db.scalars(stmt))

    def get_payment(self, payment_id: IdLike) -> Payment:
        payment = self.db.get(Payment, as_uuid(payment_id))
        if payment is None:
            raise NotFoundError("Payment", payment_id)
        return payment

    def create_payment(self, data: PaymentCreate) -> Payment:
        tenant = self.db.get(Tenant, data.tenant_id)
        if tenant is None:
            raise NotFoundError("Tenant", data.tenant_id)

        payment = Payment(
            id=uuid.uuid4(),
            tenant_id=tenant.id,
            property_id=tenant.property_id,
            unit_id=tenant.unit_id,
            amount=data.amount,
            payment_date=data.payment_date,
            status=data.status,
            method=data.method,
        )
        self.db.add(payment)
        self._audit(
            "payment.recorded",
            f"Recorded new payment for tenant {tenant.name} - KES {payment.amount:,.0f}",
            self._landlord_of(tenant.property_id),
            payment.id,
        )
        self._commit("record payment")
        self.db.refresh(payment)
        logger.info(f"[PAYMENT] {payment.status.value} {payment.amount:,.2f} from tenant {tenant.id}")
        return payment

    def update_payment(self, payment_id: IdLike, data: PaymentUpdate) -> Payment:
        payment = self.get_payment(payment_id)
        for key, value in data.model_dump(exclude_unset=True, exclude_none=True).items():
            setattr(payment, key, value)
        self._audit(
            "payment.updated",
            f"Updated payment {payment.id} - KES {payment.amount:,.0f}",
            self._landlord_of(payment.property_id),
            payment.id,
        )
        self._commit("update payment")
        self.db.refresh(payment)
        return payment

    def delete_payment(self, payment_id: IdLike) -> None:
        payment = self.get_payment(payment_id)
        self._audit(
            "payment.deleted",
            f"Deleted payment {payment.id} - KES {payment.amount:,.0f}",
            self._landlord_of(payment.property_id),
            payment.id,
        )
        self.db.delete(payment)
        self._commit("delete payment")


class ExpenseService(DatabaseService):

    def list_expenses(self, landlord_id: Optional[str] = None) -> List[Expense]:
        stmt = select(Expense).order_by(Expense.expense_date.desc(), Expense.created_at.desc())
        if landlord_id:
            stmt = stmt.join(Property, Property.id == Expense.property_id).where(
                Property.landlord_id == landlord_id
            )
        return list(self.db.scalars(stmt))

    def get_expense(self, expense_id: IdLike) -> Expense:
        expense = self.db.get(Expense, as_uuid(expense_id))
        if expense is None:
            raise NotFoundError("Expense", expense_id)
        return expense

    def create_expense(self, data: ExpenseCreate) -> Expense:
        prop = self.db.get(Property, data.property_id)
        if prop is None:
            raise NotFoundError("Property", data.property_id)

        expense = Expense(id=uuid.uuid4(), **data.model_dump())
        self.db.add(expense)
        self._audit(
            "expense.recorded",
            f'Logged new expense for property "{prop.name}": {expense.description} - KES {expense.amount:,.0f}',
            prop.landlord_id,
            expense.id,
        )
        self._commit("record expense")
        self.db.refresh(expense)
        logger.info(f"[EXPENSE] {expense.category} {expense.amount:,.2f} on property {expense.property_id}")
        return expense

    def update_expense(self, expense_id: IdLike, data: ExpenseUpdate) -> Expense:
        expense = self.get_expense(expense_id)
        for key, value in data.model_dump(exclude_unset=True, exclude_none=True).items():
            setattr(expense, key, value)
        self._audit(
            "expense.updated",
            f'Updated expense for property "{expense.property.name}": {expense.description}',
            expense.property.landlord_id,
            expense.id,
        )
        self._commit("update expense")
        self.db.refresh(expense)
        return expense

    def delete_expense(self, expense_id: IdLike) -> None:
        expense = self.get_expense(expense_id)
        self._audit(
            "expense.deleted",
            f'Deleted expense for property "{expense.property.name}": {expense.description}',
            expense.property.landlord_id,
            expense.id,
        )
        self.db.delete(expense)
        self._commit("delete expense")
