"""Create user_subjects join table.

Revision ID: 20250613000004_create_user_subjects
Revises: 20250613000002_create_user_preferences
Create Date: 2025-06-13
"""

import sqlalchemy as sa
from alembic import op

from studyconnect.migrations import helpers

revision = '20250613000004_create_user_subjects'
down_revision = '20250613000002_create_user_preferences'
branch_labels = None
depends_on = None

LEVELS = ('beginner', 'intermediate', 'advanced', 'expert')


def upgrade():
    op.create_table(
        'user_subjects',
        helpers.uuid_pk(),
        helpers.fk('user_id', 'users'),
        helpers.fk('subject_id', 'subjects'),
        sa.Column(
            'proficiency_level',
            helpers.enum('enum_user_subjects_proficiency_level', LEVELS),
            server_default='beginner',
        ),
        sa.Column('is_teaching', sa.Boolean(), server_default=sa.false()),
        *helpers.timestamps(),
        sa.UniqueConstraint('user_id', 'subject_id', name='unique_user_subject')
    )


def downgrade():
    op.drop_table('user_subjects')
    helpers.drop_enum_type('enum_user_subjects_proficiency_level')
