"""Add biometric_records and training_sessions tables

Revision ID: 001
Revises:
Create Date: 2026-10-18 09:00:00.000000

"""
from typing import Sequence, Union

import sqlalchemy as sa
import sqlmodel
from alembic import op

# revision identifiers, used by Alembic.
revision: str = '001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create biometric_records and training_sessions tables."""
    op.create_table('biometric_records', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('hrv', sa.Float(), nullable=False),
        sa.Column('resting_heart_rate', sa.Float(), nullable=False),
        sa.Column('sleep_hours', sa.Float(), nullable=False),
        sa.Column('body_mass_kg', sa.Float(), nullable=False),
        sa.Column('readiness_score', sa.Float(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('(CURRENT_TIMESTAMP)')),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('(CURRENT_TIMESTAMP)')),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('date', name='uq_biometric_date'))
    op.create_index(op.f('ix_biometric_records_date'), 'biometric_records', ['date'], unique=False)

    op.create_table('training_sessions', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('discipline', sqlmodel.sql.sqltypes.AutoString(length=32), nullable=False),
        sa.Column('duration_minutes', sa.Float(), nullable=False),
        sa.Column('distance_km', sa.Float(), nullable=False),
        sa.Column('average_heart_rate', sa.Float(), nullable=False),
        sa.Column('subjective_effort', sa.Integer(), nullable=False),
        sa.Column('average_power', sa.Float(), nullable=True),
        sa.Column('notes', sqlmodel.sql.sqltypes.AutoString(length=1000), nullable=True),
        sa.Column('equipment_synced', sa.Boolean(), nullable=False, server_default='false'),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('(CURRENT_TIMESTAMP)')),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('(CURRENT_TIMESTAMP)')),
        sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_training_sessions_date'), 'training_sessions', ['date'], unique=False)
    op.create_index(op.f('ix_training_sessions_discipline'), 'training_sessions', ['discipline'], unique=False)


def downgrade() -> None:
    """Drop biometric_records and training_sessions tables."""
    op.drop_index(op.f('ix_training_sessions_discipline'), table_name='training_sessions')
    op.drop_index(op.f('ix_training_sessions_date'), table_name='training_sessions')
    op.drop_table('training_sessions')
    op.drop_index(op.f('ix_biometric_records_date'), table_name='biometric_records')
    op.drop_table('biometric_records')
