"""Add interests to users.

Revision ID: 20250701000001_add_interests_to_users
Revises: 20250628000000_create_study_tasks
Create Date: 2025-07-01
"""

import sqlalchemy as sa
from alembic import op

revision = '20250701000001_add_interests_to_users'
down_revision = '20250628000000_create_study_tasks'
branch_labels = None
depends_on = None


def upgrade():
    op.add_column('users', sa.Column('interests', sa.JSON(), server_default=sa.text("'[]'")))


def downgrade():
    with op.batch_alter_table('users') as batch_op:
        batch_op.drop_column('interests')
