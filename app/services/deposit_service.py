"""
Rental Deposit Service
Deposits are taken against an existing tenant and refunded in one or more steps.
"""
import logging
import uuid
from typing import List, Optional

from sqlalchemy import select

from app.core.exceptions import ConflictError, NotFoundError, ValidationError
from app.models.deposit import Deposit, DepositStatus
from app.models.property import Property
from app.models.tenant import Tenant
from app.schemas.deposit import DepositCreate, DepositRefund
from app.services.base_service import DatabaseService
from app.services.occupancy_service import IdLike, as_uuid

logger = logging.getLogger(__name__)


class DepositService(DatabaseService):

    def list_deposits(
        self,
        landlord_id: Optional[str] = None,
        tenant_id: Optional[IdLike] = None,
        status: Optional[DepositStatus] = None,
    ) -> List[Deposit]:
        stmt = select(Deposit).order_by(Deposit.deposit_date.desc(), Deposit.created_at.desc())
        if landlord_id:
            stmt = stmt.where(Deposit.landlord_id == landlord_id)
        if tenant_id is not None:
            stmt = stmt.where(Deposit.tenant_id == as_uuid(tenant_id))
        if status is not None:
            stmt = stmt.where(Deposit.status == status)
        return list(self.db.scalars(stmt))

    def get_deposit(self, deposit_id: IdLike) -> Deposit:
        deposit = self.db.get(Deposit, as_uuid(deposit_id))
        if deposit is None:
            raise NotFoundError("Deposit", deposit_id)
        return deposit

    def create_deposit(self, data: DepositCreate) -> Deposit:
        tenant = self.db.get(Tenant, data.tenant_id)
        if tenant is None:
            raise NotFoundError("Tenant", data.tenant_id)
        prop = self.db.get(Property, tenant.property_id)

        deposit = Deposit(
            id=uuid.uuid4(),
            tenant_id=tenant.id,
            landlord_id=prop.landlord_id,
            property_id=prop.id,
            amount=data.amount,
            refunded_amount=0.0,
            deposit_date=data.deposit_date,
            status=DepositStatus.HELD,
        )
        self.db.add(deposit)
        self._audit(
            "deposit.received",
            f"Received deposit of KES {deposit.amount:,.0f} from tenant {tenant.name}",
            prop.landlord_id,
            deposit.id,
        )
        self._commit("record deposit")
        self.db.refresh(deposit)
        logger.info(f"[DEPOSIT] Held {deposit.amount:,.2f} for tenant {tenant.id}")
        return deposit

    def refund_deposit(self, deposit_id: IdLike, data: Optional[DepositRefund] = None) -> Deposit:
        """
        Refund part or all of the held balance.
        A fully refunded deposit cannot be refunded again (ConflictError).
        """
        deposit = self.get_deposit(deposit_id)
        if deposit.status == DepositStatus.REFUNDED:
            raise ConflictError("Deposit has already been refunded")

        balance = deposit.held_amount
        amount = data.amount if data is not None and data.amount is not None else balance
        if amount > balance:
            raise ValidationError.from_fields(
                {"amount": f"Refund exceeds the held balance of KES {balance:,.2f}"}
            )

        deposit.refunded_amount = (deposit.refunded_amount or 0.0) + amount
        deposit.status = (
            DepositStatus.REFUNDED if deposit.held_amount <= 0 else DepositStatus.PARTIALLY_REFUNDED
        )

        tenant = self.db.get(Tenant, deposit.tenant_id)
        tenant_name = tenant.name if tenant is not None else str(deposit.tenant_id)
        self._audit(
            "deposit.refunded",
            f"Processed refund of KES {amount:,.0f} for tenant {tenant_name}.",
            deposit.landlord_id,
            deposit.id,
        )
        self._commit("refund deposit")
        self.db.refresh(deposit)
        logger.info(f"[DEPOSIT] Refunded {amount:,.2f} of {deposit.id} -> {deposit.status.value}")
        return deposit

    def delete_deposit(self, deposit_id: IdLike) -> None:
        deposit = self.get_deposit(deposit_id)
        self._audit(
            "deposit.deleted",
            f"Deleted deposit of KES {deposit.amount:,.0f}",
            deposit.landlord_id,
            deposit.id,
        )
        self.db.delete(deposit)
        self._commit("delete deposit")
