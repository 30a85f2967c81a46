"""
Property Store - properties and their nested units, scoped per landlord.

Unit occupancy is read-only here: existing units keep their tenant_id
across updates and new units start vacant.
"""
import logging
import uuid
from typing import Dict, List, Optional

from sqlalchemy import select

from app.core.exceptions import NotFoundError, UnitOccupiedError, ValidationError
from app.models.property import Property, Unit
from app.schemas.property import PropertyCreate, PropertyUpdate, UnitIn
from app.services.base_service import DatabaseService
from app.services.occupancy_service import IdLike, as_uuid

logger = logging.getLogger(__name__)


def _blank(value: Optional[str]) -> bool:
    return value is None or not str(value).strip()


def _clean_units(units: List[UnitIn], errors: Dict[str, str]) -> List[dict]:
    """Validate submitted units, assigning ids to the ones without."""
    cleaned = []
    seen = set()
    for index, unit in enumerate(units):
        prefix = f"units[{index}]"
        unit_id = (unit.id or "").strip() or uuid.uuid4().hex
        if unit_id in seen:
            errors[f"{prefix}.id"] = f"Duplicate unit id '{unit_id}'"
        seen.add(unit_id)

        if _blank(unit.name):
            errors[f"{prefix}.name"] = "Unit name is required"
        if unit.rent is None:
            errors[f"{prefix}.rent"] = "Rent is required"
        elif unit.rent < 0:
            errors[f"{prefix}.rent"] = "Rent must be non-negative"

        cleaned.append({
            "id": unit_id,
            "name": (unit.name or "").strip(),
            "unit_type": unit.unit_type,
            "rent": unit.rent,
            "position": index,
        })
    return cleaned


class PropertyService(DatabaseService):

    def list_properties(self, landlord_id: str) -> List[Property]:
        stmt = (
            select(Property)
            .where(Property.landlord_id == landlord_id)
            .order_by(Property.created_at)
        )
        return list(self.db.scalars(stmt))

    def get_property(self, property_id: IdLike) -> Property:
        prop = self.db.get(Property, as_uuid(property_id))
        if prop is None:
            raise NotFoundError("Property", property_id)
        return prop

    def create_property(self, data: PropertyCreate) -> Property:
        errors: Dict[str, str] = {}
        for field in ("landlord_id", "name", "location"):
            if _blank(getattr(data, field)):
                errors[field] = "This field is required"
        units = _clean_units(data.units, errors)
        if errors:
            raise ValidationError.from_fields(errors)

        prop = Property(
            id=uuid.uuid4(),
            landlord_id=data.landlord_id.strip(),
            name=data.name.strip(),
            location=data.location.strip(),
        )
        prop.units = [Unit(tenant_id=None, **unit) for unit in units]
        self.db.add(prop)
        self._audit("property.created", f"Added property: {prop.name} ({len(units)} units)", prop.landlord_id, prop.id)
        self._commit("create property")
        self.db.refresh(prop)

        logger.info(f"[PROPERTY] Created {prop.id} '{prop.name}' with {len(units)} units")
        return prop

    def update_property(self, property_id: IdLike, data: PropertyUpdate) -> Property:
        prop = self.get_property(property_id)
        changes = data.model_dump(exclude_unset=True)

        errors: Dict[str, str] = {}
        for field in ("name", "location"):
            if field in changes and _blank(changes[field]):
                errors[field] = "This field must not be empty"

        new_units = None
        if data.units is not None:
            new_units = _clean_units(data.units, errors)
        if errors:
            raise ValidationError.from_fields(errors)

        if new_units is not None:
            keep_ids = {u["id"] for u in new_units}
            for unit in prop.units:
                if unit.id not in keep_ids and unit.is_occupied:
                    logger.warning(f"[PROPERTY] Refusing to remove occupied unit {unit.id} of {prop.id}")
                    raise UnitOccupiedError(
                        f"Unit '{unit.name}' is occupied and cannot be removed",
                        property_id=prop.id,
                        unit_id=unit.id,
                        occupant_id=unit.tenant_id,
                    )

        if "name" in changes:
            prop.name = changes["name"].strip()
        if "location" in changes:
            prop.location = changes["location"].strip()

        if new_units is not None:
            existing = {unit.id: unit for unit in prop.units}
            ordered = []
            for wanted in new_units:
                unit = existing.get(wanted["id"])
                if unit is None:
                    unit = Unit(tenant_id=None, **wanted)
                else:
                    unit.name = wanted["name"]
                    unit.unit_type = wanted["unit_type"]
                    unit.rent = wanted["rent"]
                    unit.position = wanted["position"]
                ordered.append(unit)
            prop.units = ordered

        self._audit("property.updated", f"Updated property: {prop.name}", prop.landlord_id, prop.id)
        self._commit("update property")
        self.db.refresh(prop)
        logger.info(f"[PROPERTY] Updated {prop.id}")
        return prop

    def delete_property(self, property_id: IdLike) -> None:
        """Delete a property with its units and expenses. Occupied properties are refused."""
        prop = self.get_property(property_id)
        occupied = prop.occupied_units
        if occupied:
            logger.warning(f"[PROPERTY] Refusing to delete {prop.id}: {len(occupied)} occupied units")
            raise UnitOccupiedError(
                f"Property has {len(occupied)} occupied unit(s); remove their tenants first",
                property_id=prop.id,
            )

        self._audit("property.deleted", f"Deleted property: {prop.name}", prop.landlord_id, prop.id)
        self.db.delete(prop)
        self._commit("delete property")
        logger.info(f"[PROPERTY] Deleted {property_id}")
