"""Create user_preferences table.

Revision ID: 20250613000002_create_user_preferences
Revises: 20240613000003_create_subjects
Create Date: 2025-06-13

One-row-per-user is added separately by 20250704000002.
"""

import sqlalchemy as sa
from alembic import op

from studyconnect.migrations import helpers

revision = '20250613000002_create_user_preferences'
down_revision = '20240613000003_create_subjects'
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'user_preferences',
        helpers.uuid_pk(),
        helpers.fk('user_id', 'users'),
        sa.Column('notification_email', sa.Boolean(), server_default=sa.true()),
        sa.Column('notification_push', sa.Boolean(), server_default=sa.true()),
        sa.Column('theme', sa.String(50), server_default='light'),
        sa.Column('language', sa.String(50), server_default='en'),
        sa.Column('timezone', sa.String(100), server_default='UTC'),
        *helpers.timestamps()
    )


def downgrade():
    op.drop_table('user_preferences')
