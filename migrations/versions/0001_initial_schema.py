"""Create properties, units, tenants, payments and expenses

Revision ID: 0001_initial_schema
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '0001_initial_schema'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

UNIT_TYPES = ('Single', 'Double', 'Bedsitter', '1 Bedroom', '2 Bedroom', '3 Bedroom')
PAYMENT_STATUSES = ('Paid', 'Overdue', 'Pending')


def _timestamps():
    return [
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
    ]


def upgrade() -> None:
    op.create_table(
        'properties',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('landlord_id', sa.String(64), nullable=False),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('location', sa.String(500), nullable=False),
        *_timestamps(),
    )
    op.create_index('ix_properties_landlord_id', 'properties', ['landlord_id'])

    op.create_table(
        'units',
        sa.Column('property_id', sa.Uuid(), sa.ForeignKey('properties.id', ondelete='CASCADE'), primary_key=True),
        sa.Column('id', sa.String(64), primary_key=True),
        sa.Column('name', sa.String(100), nullable=False),
        sa.Column('unit_type', sa.Enum(*UNIT_TYPES, name='unittype', native_enum=False), nullable=False),
        sa.Column('rent', sa.Float(), nullable=False),
        sa.Column('tenant_id', sa.Uuid(), nullable=True),
        sa.Column('position', sa.Integer(), nullable=False, server_default='0'),
    )
    op.create_index('ix_units_tenant_id', 'units', ['tenant_id'])

    op.create_table(
        'tenants',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('email', sa.String(255), nullable=False),
        sa.Column('phone', sa.String(20), nullable=False),
        sa.Column('lease_start', sa.Date(), nullable=False),
        sa.Column('lease_end', sa.Date(), nullable=False),
        sa.Column('property_id', sa.Uuid(), nullable=False),
        sa.Column('unit_id', sa.String(64), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(
            ['property_id', 'unit_id'], ['units.property_id', 'units.id'], name='fk_tenants_unit'
        ),
    )
    op.create_index('ix_tenants_email', 'tenants', ['email'])
    op.create_index('ix_tenants_property_id', 'tenants', ['property_id'])

    op.create_table(
        'payments',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('tenant_id', sa.Uuid(), nullable=False),
        sa.Column('property_id', sa.Uuid(), nullable=False),
        sa.Column('unit_id', sa.String(64), nullable=False),
        sa.Column('amount', sa.Float(), nullable=False),
        sa.Column('payment_date', sa.Date(), nullable=False),
        sa.Column('status', sa.Enum(*PAYMENT_STATUSES, name='paymentstatus', native_enum=False), nullable=False),
        sa.Column('method', sa.String(50), nullable=False),
        *_timestamps(),
    )
    op.create_index('ix_payments_tenant_id', 'payments', ['tenant_id'])
    op.create_index('ix_payments_property_id', 'payments', ['property_id'])
    op.create_index('ix_payments_status', 'payments', ['status'])

    op.create_table(
        'expenses',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('property_id', sa.Uuid(), sa.ForeignKey('properties.id', ondelete='CASCADE'), nullable=False),
        sa.Column('category', sa.String(100), nullable=False),
        sa.Column('description', sa.Text(), nullable=False),
        sa.Column('amount', sa.Float(), nullable=False),
        sa.Column('expense_date', sa.Date(), nullable=False),
        *_timestamps(),
    )
    op.create_index('ix_expenses_property_id', 'expenses', ['property_id'])
    op.create_index('ix_expenses_category', 'expenses', ['category'])


def downgrade() -> None:
    op.drop_table('expenses')
    op.drop_table('payments')
    op.drop_table('tenants')
    op.drop_table('units')
    op.drop_table('properties')
