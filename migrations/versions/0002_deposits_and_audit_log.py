"""Add deposits and audit_log

Revision ID: 0002_deposits_and_audit_log
Revises: 0001_initial_schema
Create Date: 2026-10-19 15:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '0002_deposits_and_audit_log'
down_revision: Union[str, None] = '0001_initial_schema'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

DEPOSIT_STATUSES = ('Held', 'Partially Refunded', 'Refunded')


def upgrade() -> None:
    op.create_table(
        'deposits',
        sa.Column('id', sa.Uuid(), primary_key=True),
        sa.Column('tenant_id', sa.Uuid(), nullable=False),
        sa.Column('landlord_id', sa.String(64), nullable=False),
        sa.Column('property_id', sa.Uuid(), nullable=False),
        sa.Column('amount', sa.Float(), nullable=False),
        sa.Column('refunded_amount', sa.Float(), nullable=False, server_default='0'),
        sa.Column('deposit_date', sa.Date(), nullable=False),
        sa.Column('status', sa.Enum(*DEPOSIT_STATUSES, name='depositstatus', native_enum=False), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index('ix_deposits_tenant_id', 'deposits', ['tenant_id'])
    op.create_index('ix_deposits_landlord_id', 'deposits', ['landlord_id'])
    op.create_index('ix_deposits_property_id', 'deposits', ['property_id'])
    op.create_index('ix_deposits_status', 'deposits', ['status'])

    op.create_table(
        'audit_log',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('timestamp', sa.DateTime(timezone=True), nullable=False),
        sa.Column('landlord_id', sa.String(64), nullable=True),
        sa.Column('action', sa.String(50), nullable=False),
        sa.Column('entity_id', sa.String(64), nullable=True),
        sa.Column('message', sa.Text(), nullable=False),
    )
    op.create_index('ix_audit_log_timestamp', 'audit_log', ['timestamp'])
    op.create_index('ix_audit_log_landlord_id', 'audit_log', ['landlord_id'])


def downgrade() -> None:
    op.drop_table('audit_log')
    op.drop_table('deposits')
