"""Create shared_flashcard_decks table.

Revision ID: 20250702000002_create_shared_flashcard_decks
Revises: 20250702000001_create_flashcard_cards
Create Date: 2025-07-02
"""

import sqlalchemy as sa
from alembic import op

from studyconnect.migrations import helpers

revision = '20250702000002_create_shared_flashcard_decks'
down_revision = '20250702000001_create_flashcard_cards'
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'shared_flashcard_decks',
        helpers.uuid_pk(),
        helpers.fk('deck_id', 'flashcard_decks'),
        helpers.fk('shared_with_id', 'users'),
        helpers.fk('shared_by_id', 'users'),
        sa.Column('can_edit', sa.Boolean(), server_default=sa.false()),
        *helpers.timestamps(),
        sa.UniqueConstraint('deck_id', 'shared_with_id', name='unique_shared_deck')
    )


def downgrade():
    op.drop_table('shared_flashcard_decks')
