"""Create flashcard_cards table.

Revision ID: 20250702000001_create_flashcard_cards
Revises: 20250702000000_create_flashcard_decks
Create Date: 2025-07-02
"""

import sqlalchemy as sa
from alembic import op

from studyconnect.migrations import helpers

revision = '20250702000001_create_flashcard_cards'
down_revision = '20250702000000_create_flashcard_decks'
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'flashcard_cards',
        helpers.uuid_pk(),
        sa.Column('question', sa.Text(), nullable=False),
        sa.Column('answer', sa.Text(), nullable=False),
        sa.Column('mastered', sa.Boolean(), server_default=sa.false()),
        sa.Column('last_reviewed', sa.DateTime()),
        sa.Column('review_count', sa.Integer(), server_default=sa.text('0')),
        helpers.fk('deck_id', 'flashcard_decks'),
        *helpers.timestamps()
    )


def downgrade():
    op.drop_table('flashcard_cards')
