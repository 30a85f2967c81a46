"""
Tenant Model - one active lease on one unit
"""
from datetime import date
import uuid

from sqlalchemy import String, Date, ForeignKeyConstraint, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.base import Base, TimestampMixin


class Tenant(Base, TimestampMixin):
    """
    Tenant holding the lease on (property_id, unit_id).
    The unit's tenant_id points back at this record while the lease exists.
    """
    __tablename__ = "tenants"
    __table_args__ = (
        ForeignKeyConstraint(
            ["property_id", "unit_id"],
            ["units.property_id", "units.id"],
            name="fk_tenants_unit",
        ),
    )

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)

    # Tenant details
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    phone: Mapped[str] = mapped_column(String(20), nullable=False)

    # Lease details
    lease_start: Mapped[date] = mapped_column(Date, nullable=False)
    lease_end: Mapped[date] = mapped_column(Date, nullable=False)

    # Property/Unit relationship
    property_id: Mapped[uuid.UUID] = mapped_column(Uuid, nullable=False, index=True)
    unit_id: Mapped[str] = mapped_column(String(64), nullable=False)

    unit = relationship("Unit", viewonly=True)

    def __repr__(self):
        return f"<Tenant {self.name} ({self.id})>"
