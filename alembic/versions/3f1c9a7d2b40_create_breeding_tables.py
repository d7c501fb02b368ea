"""Create animals, events, custom_event_types and breeding_config tables

Revision ID: 3f1c9a7d2b40
Revises:
Create Date: 2026-10-19 09:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '3f1c9a7d2b40'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create the herd and breeding calendar tables."""

    # --- animals ---
    op.create_table(
        'animals',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('tag', sa.String(length=128), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=True),
        sa.Column('gender', sa.String(length=6), nullable=False),
        sa.Column('category', sa.String(length=8), server_default='adult', nullable=False),
        sa.Column('birth_date', sa.Date(), nullable=True),
        sa.Column('breed', sa.String(length=255), nullable=True),
        sa.Column('weight', sa.Numeric(8, 2), nullable=True),
        sa.Column('body_condition_score', sa.Numeric(3, 1), nullable=True),
        sa.Column('acquisition_date', sa.Date(), nullable=True),
        sa.Column('acquisition_type', sa.String(length=32), nullable=True),
        sa.Column('mothers_tag', sa.String(length=128), nullable=True),
        sa.Column('fathers_tag', sa.String(length=128), nullable=True),
        sa.Column('location', sa.String(length=255), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('reproductive_status', sa.String(length=32), server_default='not bred', nullable=False),
        sa.Column('last_heat_day', sa.DateTime(timezone=True), nullable=True),
        sa.Column('last_insemination_date', sa.DateTime(timezone=True), nullable=True),
        sa.Column('last_health_check_date', sa.DateTime(timezone=True), nullable=True),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint('id', name='pk_animals'),
        sa.UniqueConstraint('tag', name='ux_animals_tag'),
    )

    # --- events ---
    op.create_table(
        'events',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('animal_id', sa.Uuid(), nullable=False),
        sa.Column('event_type', sa.String(length=100), nullable=False),
        sa.Column('title', sa.String(length=255), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('status', sa.String(length=16), server_default='Pending', nullable=False),
        sa.Column('priority', sa.String(length=8), server_default='Medium', nullable=False),
        sa.Column('scheduled_date', sa.DateTime(timezone=True), nullable=False),
        sa.Column('completed_date', sa.DateTime(timezone=True), nullable=True),
        sa.Column('result', sa.String(length=16), nullable=True),
        sa.Column('notes', sa.Text(), nullable=True),
        sa.Column('semen_details', sa.JSON(), nullable=True),
        sa.Column('reminder_time', sa.JSON(), nullable=True),
        sa.Column('location', sa.String(length=255), nullable=True),
        sa.Column('associated_events', sa.JSON(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint('id', name='pk_events'),
    )
    op.create_index(
        'ix_events_animal_type_status', 'events', ['animal_id', 'event_type', 'status'],
        unique=False,
    )
    op.create_index(
        'ix_events_type_status_completed', 'events', ['event_type', 'status', 'completed_date'],
        unique=False,
    )
    op.create_index('ix_events_scheduled_date', 'events', ['scheduled_date'], unique=False)

    # --- custom_event_types ---
    op.create_table(
        'custom_event_types',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('description', sa.String(length=500), nullable=True),
        sa.Column('default_priority', sa.String(length=8), server_default='Medium', nullable=False),
        sa.Column('reminder_value', sa.Integer(), nullable=False),
        sa.Column('reminder_unit', sa.String(length=8), nullable=False),
        sa.Column('animal_categories', sa.JSON(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint('id', name='pk_custom_event_types'),
        sa.UniqueConstraint('name', name='ux_custom_event_types_name'),
    )

    # --- breeding_config (single row) ---
    op.create_table(
        'breeding_config',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('pregnancy_length_days', sa.Integer(), nullable=False),
        sa.Column('dry_off_days_before_calving', sa.Integer(), nullable=False),
        sa.Column('insemination_to_pregnancy_check_days', sa.Integer(), nullable=False),
        sa.Column('health_check_interval_days', sa.Integer(), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint('id', name='pk_breeding_config'),
    )


def downgrade() -> None:
    """Drop the herd and breeding calendar tables."""
    op.drop_table('breeding_config')
    op.drop_table('custom_event_types')
    op.drop_index('ix_events_scheduled_date', table_name='events')
    op.drop_index('ix_events_type_status_completed', table_name='events')
    op.drop_index('ix_events_animal_type_status', table_name='events')
    op.drop_table('events')
    op.drop_table('animals')
