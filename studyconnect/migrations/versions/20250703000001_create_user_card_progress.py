"""Create user_card_progress table.

Revision ID: 20250703000001_create_user_card_progress
Revises: 20250703000001_add_sharing_token_to_shared_decks
Create Date: 2025-07-03
"""

import sqlalchemy as sa
from alembic import op

from studyconnect.migrations import helpers

revision = '20250703000001_create_user_card_progress'
down_revision = '20250703000001_add_sharing_token_to_shared_decks'
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'user_card_progress',
        helpers.uuid_pk(),
        helpers.fk('user_id', 'users'),
        helpers.fk('card_id', 'flashcard_cards'),
        helpers.fk('deck_id', 'flashcard_decks'),
        sa.Column('mastered', sa.Boolean(), server_default=sa.false()),
        sa.Column('last_reviewed', sa.DateTime()),
        sa.Column('review_count', sa.Integer(), server_default=sa.text('0')),
        *helpers.timestamps()
    )
    op.create_index(
        'user_card_progress_user_card_unique', 'user_card_progress', ['user_id', 'card_id'], unique=True
    )


def downgrade():
    op.drop_index('user_card_progress_user_card_unique', table_name='user_card_progress')
    op.drop_table('user_card_progress')
