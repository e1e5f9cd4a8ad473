"""Create subjects table.

Revision ID: 20240613000003_create_subjects
Revises: 20240613000001_create_users
Create Date: 2024-06-13
"""

import sqlalchemy as sa
from alembic import op

from studyconnect.migrations import helpers

revision = '20240613000003_create_subjects'
down_revision = '20240613000001_create_users'
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'subjects',
        helpers.uuid_pk(),
        sa.Column('name', sa.String(100), unique=True, nullable=False),
        sa.Column('category', sa.String(100), nullable=False),
        sa.Column('description', sa.Text()),
        sa.Column('icon', sa.String(255)),
        *helpers.timestamps()
    )


def downgrade():
    op.drop_table('subjects')
