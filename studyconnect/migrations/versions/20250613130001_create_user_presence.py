"""Create user_presence table.

Revision ID: 20250613130001_create_user_presence
Revises: 20250613120001_create_messages
Create Date: 2025-06-13
"""

import sqlalchemy as sa
from alembic import op

from studyconnect.migrations import helpers

revision = '20250613130001_create_user_presence'
down_revision = '20250613120001_create_messages'
branch_labels = None
depends_on = None

STATUSES = ('active', 'away', 'busy')


def upgrade():
    op.create_table(
        'user_presence',
        helpers.uuid_pk(),
        helpers.fk('user_id', 'users'),
        helpers.fk('room_id', 'study_rooms'),
        sa.Column('is_online', sa.Boolean(), server_default=sa.true()),
        sa.Column('last_active', sa.DateTime(), server_default=sa.func.now()),
        sa.Column('status', helpers.enum('enum_user_presence_status', STATUSES), server_default='active'),
        *helpers.timestamps()
    )
    op.create_index('user_presence_user_id_room_id', 'user_presence', ['user_id', 'room_id'], unique=True)
    op.create_index('user_presence_room_id_is_online', 'user_presence', ['room_id', 'is_online'])


def downgrade():
    op.drop_index('user_presence_room_id_is_online', table_name='user_presence')
    op.drop_index('user_presence_user_id_room_id', table_name='user_presence')
    op.drop_table('user_presence')
    helpers.drop_enum_type('enum_user_presence_status')
