"""Add sharing_token to shared_flashcard_decks.

Revision ID: 20250703000001_add_sharing_token_to_shared_decks
Revises: 20250703000000_add_subject_id_to_flashcard_decks
Create Date: 2025-07-03
"""

import sqlalchemy as sa
from alembic import op

revision = '20250703000001_add_sharing_token_to_shared_decks'
down_revision = '20250703000000_add_subject_id_to_flashcard_decks'
branch_labels = None
depends_on = None


def upgrade():
    op.add_column('shared_flashcard_decks', sa.Column('sharing_token', sa.String(255)))


def downgrade():
    with op.batch_alter_table('shared_flashcard_decks') as batch_op:
        batch_op.drop_column('sharing_token')
