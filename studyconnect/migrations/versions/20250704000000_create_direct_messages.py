"""Create direct_messages table.

Revision ID: 20250704000000_create_direct_messages
Revises: 20250703000001_create_user_card_progress
Create Date: 2025-07-04
"""

import sqlalchemy as sa
from alembic import op

from studyconnect.migrations import helpers

revision = '20250704000000_create_direct_messages'
down_revision = '20250703000001_create_user_card_progress'
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'direct_messages',
        helpers.uuid_pk(),
        sa.Column('content', sa.Text(), nullable=False),
        helpers.fk('sender_id', 'users'),
        helpers.fk('receiver_id', 'users'),
        sa.Column('is_read', sa.Boolean(), server_default=sa.false()),
        *helpers.timestamps()
    )


def downgrade():
    op.drop_table('direct_messages')
