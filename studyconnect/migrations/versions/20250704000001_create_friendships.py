"""Create friendships table.

Revision ID: 20250704000001_create_friendships
Revises: 20250704000000_create_direct_messages
Create Date: 2025-07-04
"""

import sqlalchemy as sa
from alembic import op

from studyconnect.migrations import helpers

revision = '20250704000001_create_friendships'
down_revision = '20250704000000_create_direct_messages'
branch_labels = None
depends_on = None

STATUSES = ('pending', 'accepted', 'rejected')


def upgrade():
    op.create_table(
        'friendships',
        helpers.uuid_pk(),
        helpers.fk('sender_id', 'users'),
        helpers.fk('receiver_id', 'users'),
        sa.Column('status', helpers.enum('enum_friendships_status', STATUSES), server_default='pending'),
        sa.Column('requested_at', sa.DateTime(), server_default=sa.func.now()),
        *helpers.timestamps()
    )
    op.create_index(
        'friendships_sender_id_receiver_id', 'friendships', ['sender_id', 'receiver_id'], unique=True
    )


def downgrade():
    op.drop_index('friendships_sender_id_receiver_id', table_name='friendships')
    op.drop_table('friendships')
    helpers.drop_enum_type('enum_friendships_status')
