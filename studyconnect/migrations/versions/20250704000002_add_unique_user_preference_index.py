"""Allow at most one preference row per user.

Revision ID: 20250704000002_add_unique_user_preference_index
Revises: 20250704000001_create_friendships
Create Date: 2025-07-04

Fails if a user already has more than one preference row; remove the
duplicates first.
"""

from alembic import op

revision = '20250704000002_add_unique_user_preference_index'
down_revision = '20250704000001_create_friendships'
branch_labels = None
depends_on = None


def upgrade():
    op.create_index('unique_user_preference', 'user_preferences', ['user_id'], unique=True)


def downgrade():
    op.drop_index('unique_user_preference', table_name='user_preferences')
