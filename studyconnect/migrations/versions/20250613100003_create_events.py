"""Create events table.

Revision ID: 20250613100003_create_events
Revises: 20250613100002_create_user_study_rooms
Create Date: 2025-06-13
"""

import sqlalchemy as sa
from alembic import op

from studyconnect.migrations import helpers

revision = '20250613100003_create_events'
down_revision = '20250613100002_create_user_study_rooms'
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'events',
        helpers.uuid_pk(),
        sa.Column('title', sa.String(100), nullable=False),
        sa.Column('description', sa.Text()),
        sa.Column('date', sa.DateTime(), nullable=False),
        sa.Column('duration', sa.Integer(), server_default=sa.text('60')),
        helpers.fk('room_id', 'study_rooms'),
        helpers.fk('created_by', 'users'),
        *helpers.timestamps()
    )


def downgrade():
    op.drop_table('events')
