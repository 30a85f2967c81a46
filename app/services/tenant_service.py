"""
Tenant Lifecycle Service
Validation -> occupancy coordination -> persistence for tenant create/update/delete.

Each operation runs the coordinator and the tenant write in one transaction,
so a unit is never left pointing at a tenant that was not saved.
"""
import logging
import uuid
from datetime import date
from typing import Any, Dict, List, Optional

from email_validator import EmailNotValidError, validate_email
from sqlalchemy import select

from app.core.exceptions import NotFoundError, ValidationError
from app.models.property import Property
from app.models.tenant import Tenant
from app.schemas.tenant import TenantCreate, TenantUpdate
from app.services.base_service import DatabaseService
from app.services.occupancy_service import IdLike, OccupancyCoordinator, as_uuid

logger = logging.getLogger(__name__)

TENANT_FIELDS = ("name", "email", "phone", "lease_start", "lease_end", "property_id", "unit_id")


def validate_tenant_fields(fields: Dict[str, Any]) -> Dict[str, Any]:
    """
    Check a complete tenant record and return it normalised.
    Raises ValidationError listing every offending field.
    """
    errors: Dict[str, str] = {}
    cleaned: Dict[str, Any] = {}

    for field in TENANT_FIELDS:
        value = fields.get(field)
        if isinstance(value, str):
            value = value.strip()
        if value is None or value == "":
            errors[field] = "This field is required"
        cleaned[field] = value

    email = cleaned.get("email")
    if email and "email" not in errors:
        try:
            cleaned["email"] = validate_email(email, check_deliverability=False).normalized.lower()
        except EmailNotValidError as e:
            errors["email"] = str(e)

    start: Optional[date] = cleaned.get("lease_start")
    end: Optional[date] = cleaned.get("lease_end")
    if start and end and start >= end:
        errors["lease_end"] = "Lease end must be after lease start"

    if errors:
        raise ValidationError.from_fields(errors)
    return cleaned


class TenantService(DatabaseService):

    def __init__(self, db):
        super().__init__(db)
        self.occupancy = OccupancyCoordinator(db)

    def _landlord_of(self, property_id: IdLike) -> Optional[str]:
        prop = self.db.get(Property, as_uuid(property_id))
        return prop.landlord_id if prop is not None else None

    def list_tenants(self, landlord_id: Optional[str] = None) -> List[Tenant]:
        stmt = select(Tenant).order_by(Tenant.created_at)
        if landlord_id:
            stmt = stmt.join(Property, Property.id == Tenant.property_id).where(
                Property.landlord_id == landlord_id
            )
        return list(self.db.scalars(stmt))

    def get_tenant(self, tenant_id: IdLike) -> Tenant:
        tenant = self.db.get(Tenant, as_uuid(tenant_id))
        if tenant is None:
            raise NotFoundError("Tenant", tenant_id)
        return tenant

    def create_tenant(self, data: TenantCreate) -> Tenant:
        fields = validate_tenant_fields(data.model_dump())

        tenant_id = uuid.uuid4()
        # Rejects an occupied unit before anything is written
        unit = self.occupancy.assign(tenant_id, fields["property_id"], fields["unit_id"])

        tenant = Tenant(id=tenant_id, **fields)
        self.db.add(tenant)
        self._audit(
            "tenant.created",
            f"Added new tenant: {tenant.name} on unit {unit.name}",
            landlord_id=unit.property.landlord_id,
            entity_id=tenant_id,
        )
        self._commit("create tenant")
        self.db.refresh(tenant)

        logger.info(f"[TENANT] Created {tenant.id} on unit {tenant.unit_id} of property {tenant.property_id}")
        return tenant

    def update_tenant(self, tenant_id: IdLike, data: TenantUpdate) -> Tenant:
        tenant = self.get_tenant(tenant_id)

        merged = {field: getattr(tenant, field) for field in TENANT_FIELDS}
        merged.update(data.model_dump(exclude_unset=True))
        fields = validate_tenant_fields(merged)

        old_location = (tenant.property_id, tenant.unit_id)
        new_location = (as_uuid(fields["property_id"]), fields["unit_id"])
        moved = new_location != old_location
        if moved:
            unit = self.occupancy.move(tenant.id, *old_location, *new_location)
        else:
            unit = self.occupancy.assign(tenant.id, *new_location)

        for field, value in fields.items():
            setattr(tenant, field, value)

        if moved:
            self._audit(
                "tenant.moved",
                f"Moved tenant {tenant.name} to unit {unit.name}",
                landlord_id=unit.property.landlord_id,
                entity_id=tenant.id,
            )
        else:
            self._audit(
                "tenant.updated",
                f"Updated tenant: {tenant.name}",
                landlord_id=unit.property.landlord_id,
                entity_id=tenant.id,
            )
        self._commit("update tenant")
        self.db.refresh(tenant)
        logger.info(f"[TENANT] Updated {tenant.id}")
        return tenant

    def delete_tenant(self, tenant_id: IdLike) -> None:
        tenant = self.get_tenant(tenant_id)

        self.occupancy.release(tenant.id, tenant.property_id, tenant.unit_id)
        self._audit(
            "tenant.deleted",
            f"Deleted tenant: {tenant.name}",
            landlord_id=self._landlord_of(tenant.property_id),
            entity_id=tenant.id,
        )
        self.db.delete(tenant)
        self._commit("delete tenant")
        logger.info(f"[TENANT] Deleted {tenant_id}")
