"""
Property & Unit Models
A property owns an ordered list of units; each unit holds at most one tenant.
"""
from enum import Enum
from typing import List, Optional
import uuid

from sqlalchemy import String, Float, Integer, ForeignKey, Enum as SQLEnum, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.base import Base, TimestampMixin


class UnitType(str, Enum):
    SINGLE = "Single"
    DOUBLE = "Double"
    BEDSITTER = "Bedsitter"
    ONE_BEDROOM = "1 Bedroom"
    TWO_BEDROOM = "2 Bedroom"
    THREE_BEDROOM = "3 Bedroom"


class Property(Base, TimestampMixin):
    __tablename__ = "properties"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    landlord_id: Mapped[str] = mapped_column(String(64), nullable=False, index=True)

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    location: Mapped[str] = mapped_column(String(500), nullable=False)

    # Relationships
    units: Mapped[List["Unit"]] = relationship(
        "Unit",
        back_populates="property",
        cascade="all, delete-orphan",
        order_by="Unit.position",
    )
    expenses = relationship("Expense", back_populates="property", cascade="all, delete-orphan")

    def get_unit(self, unit_id: str) -> Optional["Unit"]:
        for unit in self.units:
            if unit.id == unit_id:
                return unit
        return None

    @property
    def occupied_units(self) -> List["Unit"]:
        return [u for u in self.units if u.is_occupied]

    def __repr__(self):
        return f"<Property {self.name} ({self.id})>"


class Unit(Base):
    """
    Rentable space inside a property.

    `id` is unique within the owning property only. `tenant_id` is the
    occupant reference and is written exclusively by OccupancyCoordinator.
    """
    __tablename__ = "units"

    property_id: Mapped[uuid.UUID] = mapped_column(
        Uuid, ForeignKey("properties.id", ondelete="CASCADE"), primary_key=True
    )
    id: Mapped[str] = mapped_column(String(64), primary_key=True)

    name: Mapped[str] = mapped_column(String(100), nullable=False)
    unit_type: Mapped[UnitType] = mapped_column(
        SQLEnum(UnitType, values_callable=lambda e: [m.value for m in e], native_enum=False),
        default=UnitType.SINGLE,
        nullable=False,
    )
    rent: Mapped[float] = mapped_column(Float, nullable=False)
    tenant_id: Mapped[Optional[uuid.UUID]] = mapped_column(Uuid, nullable=True, index=True)
    position: Mapped[int] = mapped_column(Integer, default=0, nullable=False)

    @property
    def is_occupied(self) -> bool:
        return self.tenant_id is not None

    # Declared after is_occupied: the attribute name shadows the builtin
    property: Mapped["Property"] = relationship("Property", back_populates="units")

    def __repr__(self):
        return f"<Unit {self.name} ({self.property_id}/{self.id})>"
