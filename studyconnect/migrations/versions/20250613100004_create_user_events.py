"""Create user_events RSVP table.

Revision ID: 20250613100004_create_user_events
Revises: 20250613100003_create_events
Create Date: 2025-06-13
"""

import sqlalchemy as sa
from alembic import op

from studyconnect.migrations import helpers

revision = '20250613100004_create_user_events'
down_revision = '20250613100003_create_events'
branch_labels = None
depends_on = None

STATUSES = ('attending', 'maybe', 'declined')


def upgrade():
    op.create_table(
        'user_events',
        helpers.uuid_pk(),
        helpers.fk('user_id', 'users'),
        helpers.fk('event_id', 'events'),
        sa.Column('status', helpers.enum('enum_user_events_status', STATUSES), server_default='attending'),
        *helpers.timestamps(),
        sa.UniqueConstraint('user_id', 'event_id', name='unique_user_event')
    )


def downgrade():
    op.drop_table('user_events')
    helpers.drop_enum_type('enum_user_events_status')
