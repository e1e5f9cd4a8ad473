"""Create user_study_rooms membership table.

Revision ID: 20250613100002_create_user_study_rooms
Revises: 20250613100001_create_study_rooms
Create Date: 2025-06-13
"""

import sqlalchemy as sa
from alembic import op

from studyconnect.migrations import helpers

revision = '20250613100002_create_user_study_rooms'
down_revision = '20250613100001_create_study_rooms'
branch_labels = None
depends_on = None

ROLES = ('owner', 'moderator', 'member')


def upgrade():
    op.create_table(
        'user_study_rooms',
        helpers.uuid_pk(),
        helpers.fk('user_id', 'users'),
        helpers.fk('room_id', 'study_rooms'),
        sa.Column('role', helpers.enum('enum_user_study_rooms_role', ROLES), server_default='member'),
        sa.Column('joined_at', sa.DateTime(), server_default=sa.func.now()),
        sa.Column('last_active', sa.DateTime(), server_default=sa.func.now()),
        *helpers.timestamps(),
        sa.UniqueConstraint('user_id', 'room_id', name='unique_user_study_room')
    )


def downgrade():
    op.drop_table('user_study_rooms')
    helpers.drop_enum_type('enum_user_study_rooms_role')
