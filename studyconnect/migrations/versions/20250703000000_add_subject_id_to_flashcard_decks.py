"""Link flashcard decks to subjects.

Revision ID: 20250703000000_add_subject_id_to_flashcard_decks
Revises: 20250702000002_create_shared_flashcard_decks
Create Date: 2025-07-03
"""

from alembic import op

from studyconnect.migrations import helpers

revision = '20250703000000_add_subject_id_to_flashcard_decks'
down_revision = '20250702000002_create_shared_flashcard_decks'
branch_labels = None
depends_on = None


def upgrade():
    with op.batch_alter_table('flashcard_decks') as batch_op:
        batch_op.add_column(helpers.fk(
            'subject_id', 'subjects', ondelete='SET NULL', nullable=True,
            constraint_name='fk_flashcard_decks_subject_id',
        ))


def downgrade():
    with op.batch_alter_table('flashcard_decks') as batch_op:
        batch_op.drop_column('subject_id')
