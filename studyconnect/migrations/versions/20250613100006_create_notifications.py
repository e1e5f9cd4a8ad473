"""Create notifications table.

Revision ID: 20250613100006_create_notifications
Revises: 20250613100005_create_resources
Create Date: 2025-06-13
"""

import sqlalchemy as sa
from alembic import op

from studyconnect.migrations import helpers

revision = '20250613100006_create_notifications'
down_revision = '20250613100005_create_resources'
branch_labels = None
depends_on = None

TYPES = ('info', 'success', 'warning', 'error')


def upgrade():
    op.create_table(
        'notifications',
        helpers.uuid_pk(),
        helpers.fk('user_id', 'users'),
        sa.Column('message', sa.String(255), nullable=False),
        sa.Column('type', helpers.enum('enum_notifications_type', TYPES), server_default='info'),
        sa.Column('link', sa.String(255)),
        sa.Column('is_read', sa.Boolean(), server_default=sa.false()),
        sa.Column('related_id', sa.Uuid()),
        sa.Column('related_type', sa.String(50)),
        *helpers.timestamps()
    )


def downgrade():
    op.drop_table('notifications')
    helpers.drop_enum_type('enum_notifications_type')
