"""create drivers and works tables

Revision ID: drivers_works_001
Revises:
Create Date: 2024-11-30 00:00:00.000000

"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = 'drivers_works_001'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'drivers',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('name', sa.String(255), nullable=False),
        sa.Column('phone', sa.String(50), nullable=True),
        sa.Column('address', sa.Text(), nullable=True),
        sa.Column('license_no', sa.String(100), nullable=True),
        sa.Column('license_expiry', sa.String(50), nullable=True),
        sa.Column('aadhaar', sa.String(50), nullable=True),
        sa.Column('profile_photo', sa.String(500), nullable=True),
        sa.Column('status', sa.String(50), nullable=False, server_default='active'),
        sa.Column('assigned_vehicle', sa.String(100), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
    )

    op.create_table(
        'works',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('driver_id', sa.Integer(), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('machine', sa.String(100), nullable=True),
        sa.Column('start_time', sa.String(5), nullable=True),
        sa.Column('end_time', sa.String(5), nullable=True),
        sa.Column('odometer_start', sa.Float(), nullable=True),
        sa.Column('odometer_end', sa.Float(), nullable=True),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('location', sa.String(255), nullable=True),
        sa.Column('total_hours', sa.Float(), nullable=True),
        sa.Column('total_km', sa.Float(), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now()),
    )
    op.create_index('ix_works_driver_id', 'works', ['driver_id'])
    op.create_index('ix_works_date', 'works', ['date'])
    op.create_index('ix_works_machine', 'works', ['machine'])


def downgrade():
    op.drop_index('ix_works_machine', table_name='works')
    op.drop_index('ix_works_date', table_name='works')
    op.drop_index('ix_works_driver_id', table_name='works')
    op.drop_table('works')
    op.drop_table('drivers')
