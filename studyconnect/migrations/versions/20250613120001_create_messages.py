"""Create messages table.

Revision ID: 20250613120001_create_messages
Revises: 20250613100006_create_notifications
Create Date: 2025-06-13
"""

import sqlalchemy as sa
from alembic import op

from studyconnect.migrations import helpers

revision = '20250613120001_create_messages'
down_revision = '20250613100006_create_notifications'
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'messages',
        helpers.uuid_pk(),
        sa.Column('content', sa.Text(), nullable=False),
        helpers.fk('room_id', 'study_rooms'),
        helpers.fk('sender_id', 'users'),
        sa.Column('is_system', sa.Boolean(), server_default=sa.false()),
        *helpers.timestamps()
    )
    op.create_index('ix_messages_room_id', 'messages', ['room_id'])
    op.create_index('ix_messages_sender_id', 'messages', ['sender_id'])


def downgrade():
    op.drop_index('ix_messages_sender_id', table_name='messages')
    op.drop_index('ix_messages_room_id', table_name='messages')
    op.drop_table('messages')
