"""
Occupancy Coordinator

The only code allowed to write Unit.tenant_id. Keeps the unit's occupant
reference and the tenant's (property_id, unit_id) pointing at each other.

Unit slot state machine:
    Vacant --assign--> Occupied --release--> Vacant

The coordinator never commits. Callers (TenantService) run it inside the
same transaction as the tenant write, so either both records change or
neither does.
"""
import logging
import uuid
from typing import Optional, Union

from sqlalchemy.orm import Session

from app.core.exceptions import NotFoundError, UnitOccupiedError
from app.models.property import Property, Unit

logger = logging.getLogger(__name__)

IdLike = Union[uuid.UUID, str]


def as_uuid(value: IdLike) -> uuid.UUID:
    if isinstance(value, uuid.UUID):
        return value
    try:
        return uuid.UUID(str(value))
    except (ValueError, AttributeError, TypeError):
        raise NotFoundError("Record", value)


class OccupancyCoordinator:

    def __init__(self, db: Session):
        self.db = db

    def _find_unit(self, property_id: IdLike, unit_id: str) -> Optional[Unit]:
        prop = self.db.get(Property, as_uuid(property_id))
        if prop is None:
            return None
        return prop.get_unit(unit_id)

    def _require_unit(self, property_id: IdLike, unit_id: str) -> Unit:
        prop = self.db.get(Property, as_uuid(property_id))
        if prop is None:
            raise NotFoundError("Property", property_id)
        unit = prop.get_unit(unit_id)
        if unit is None:
            raise NotFoundError("Unit", unit_id)
        return unit

    def occupant_of(self, property_id: IdLike, unit_id: str) -> Optional[uuid.UUID]:
        """Tenant currently holding the unit, None when vacant"""
        unit = self._require_unit(property_id, unit_id)
        return unit.tenant_id

    def check_assignable(self, tenant_id: IdLike, property_id: IdLike, unit_id: str) -> Unit:
        """
        Return the target unit if `tenant_id` may hold it: the unit is vacant
        or already held by the same tenant.
        """
        tenant_id = as_uuid(tenant_id)
        unit = self._require_unit(property_id, unit_id)
        if unit.tenant_id is not None and unit.tenant_id != tenant_id:
            logger.warning(
                f"[ASSIGN] Rejected: unit {unit_id} of property {property_id} "
                f"is held by tenant {unit.tenant_id}"
            )
            raise UnitOccupiedError(
                "Unit already has an active tenant",
                property_id=unit.property_id,
                unit_id=unit.id,
                occupant_id=unit.tenant_id,
            )
        return unit

    def assign(self, tenant_id: IdLike, property_id: IdLike, unit_id: str) -> Unit:
        """Mark the unit occupied by tenant_id. Re-assigning the same tenant is a no-op."""
        tenant_id = as_uuid(tenant_id)
        unit = self.check_assignable(tenant_id, property_id, unit_id)
        if unit.tenant_id == tenant_id:
            logger.debug(f"[ASSIGN] Unit {unit_id} already held by tenant {tenant_id}")
            return unit

        unit.tenant_id = tenant_id
        logger.info(f"[ASSIGN] Tenant {tenant_id} -> unit {unit_id} of property {property_id}")
        return unit

    def release(self, tenant_id: IdLike, property_id: IdLike, unit_id: str) -> bool:
        """
        Vacate the unit if tenant_id holds it. Anything else (unit missing,
        already vacant, held by someone else) leaves state untouched.
        """
        tenant_id = as_uuid(tenant_id)
        unit = self._find_unit(property_id, unit_id)
        if unit is None or unit.tenant_id != tenant_id:
            logger.debug(f"[RELEASE] Nothing to release for tenant {tenant_id} on unit {unit_id}")
            return False

        unit.tenant_id = None
        logger.info(f"[RELEASE] Tenant {tenant_id} vacated unit {unit_id} of property {property_id}")
        return True

    def move(
        self,
        tenant_id: IdLike,
        old_property_id: IdLike,
        old_unit_id: str,
        new_property_id: IdLike,
        new_unit_id: str,
    ) -> Unit:
        """
        Release the old unit and assign the new one. The target is checked
        first, so a rejected move leaves the old assignment in place.
        """
        self.check_assignable(tenant_id, new_property_id, new_unit_id)
        self.release(tenant_id, old_property_id, old_unit_id)
        unit = self.assign(tenant_id, new_property_id, new_unit_id)
        logger.info(
            f"[MOVE] Tenant {tenant_id}: {old_property_id}/{old_unit_id} -> "
            f"{new_property_id}/{new_unit_id}"
        )
        return unit
