"""Create flashcard_decks table.

Revision ID: 20250702000000_create_flashcard_decks
Revises: 20250701000001_add_interests_to_users
Create Date: 2025-07-02
"""

import sqlalchemy as sa
from alembic import op

from studyconnect.migrations import helpers

revision = '20250702000000_create_flashcard_decks'
down_revision = '20250701000001_add_interests_to_users'
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'flashcard_decks',
        helpers.uuid_pk(),
        sa.Column('title', sa.String(100), nullable=False),
        sa.Column('description', sa.Text()),
        sa.Column('subject', sa.String(100)),
        sa.Column('card_count', sa.Integer(), server_default=sa.text('0')),
        sa.Column('last_studied', sa.DateTime()),
        sa.Column('mastery', sa.Integer(), server_default=sa.text('0')),
        sa.Column('is_public', sa.Boolean(), server_default=sa.false()),
        helpers.fk('user_id', 'users'),
        *helpers.timestamps()
    )


def downgrade():
    op.drop_table('flashcard_decks')
