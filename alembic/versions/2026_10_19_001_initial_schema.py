"""Initial schema: tenants, users, subscriptions, notes

Revision ID: 001_initial_schema
Revises:
Create Date: 2026-10-19

"""
from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

# revision identifiers
revision = '001_initial_schema'
down_revision = None

tenant_plan = sa.Enum('FREE', 'PRO', name='tenantplan')
user_role = sa.Enum('ADMIN', 'MEMBER', name='userrole')
subscription_status = sa.Enum('ACTIVE', 'PAST_DUE', 'CANCELED', name='subscriptionstatus')


def upgrade():
    op.create_table(
        'tenants',
        sa.Column('id', postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('slug', sa.String(100), nullable=False),
        sa.Column('plan', tenant_plan, nullable=False, server_default='FREE'),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.current_timestamp()),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index('ix_tenants_slug', 'tenants', ['slug'], unique=True)

    op.create_table(
        'users',
        sa.Column('id', postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column('tenant_id', postgresql.UUID(as_uuid=True), sa.ForeignKey('tenants.id'), nullable=False),
        sa.Column('email', sa.String(255), nullable=False),
        sa.Column('password_hash', sa.String(), nullable=False),
        sa.Column('role', user_role, nullable=False, server_default='MEMBER'),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.current_timestamp()),
    )
    op.create_index('ix_users_email', 'users', ['email'], unique=True)
    op.create_index('ix_users_tenant_id', 'users', ['tenant_id'])

    op.create_table(
        'subscriptions',
        sa.Column('id', postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column('tenant_id', postgresql.UUID(as_uuid=True), sa.ForeignKey('tenants.id'), nullable=False, unique=True),
        sa.Column('plan', tenant_plan, nullable=False, server_default='FREE'),
        sa.Column('status', subscription_status, nullable=False, server_default='ACTIVE'),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.current_timestamp()),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True),
    )

    op.create_table(
        'notes',
        sa.Column('id', postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column('tenant_id', postgresql.UUID(as_uuid=True), sa.ForeignKey('tenants.id'), nullable=False),
        sa.Column('user_id', postgresql.UUID(as_uuid=True), sa.ForeignKey('users.id'), nullable=False),
        sa.Column('title', sa.Text(), nullable=False),
        sa.Column('content', sa.Text(), nullable=False, server_default=''),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.current_timestamp()),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=True),
    )
    op.create_index('ix_notes_tenant_id', 'notes', ['tenant_id'])
    op.create_index('ix_notes_user_id', 'notes', ['user_id'])
    op.create_index('ix_notes_created_at', 'notes', ['created_at'])


def downgrade():
    op.drop_index('ix_notes_created_at', 'notes')
    op.drop_index('ix_notes_user_id', 'notes')
    op.drop_index('ix_notes_tenant_id', 'notes')
    op.drop_table('notes')

    op.drop_table('subscriptions')

    op.drop_index('ix_users_tenant_id', 'users')
    op.drop_index('ix_users_email', 'users')
    op.drop_table('users')

    op.drop_index('ix_tenants_slug', 'tenants')
    op.drop_table('tenants')

    subscription_status.drop(op.get_bind(), checkfirst=True)
    user_role.drop(op.get_bind(), checkfirst=True)
    tenant_plan.drop(op.get_bind(), checkfirst=True)
