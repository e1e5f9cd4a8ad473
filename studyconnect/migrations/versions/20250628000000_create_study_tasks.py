"""Create study_tasks table.

Revision ID: 20250628000000_create_study_tasks
Revises: 20250627000000_add_approval_fields_to_resources
Create Date: 2025-06-28
"""

import sqlalchemy as sa
from alembic import op

from studyconnect.migrations import helpers

revision = '20250628000000_create_study_tasks'
down_revision = '20250627000000_add_approval_fields_to_resources'
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'study_tasks',
        helpers.uuid_pk(),
        helpers.fk('user_id', 'users'),
        sa.Column('title', sa.String(255), nullable=False),
        sa.Column('description', sa.Text()),
        sa.Column('completed', sa.Boolean(), server_default=sa.false()),
        sa.Column('due_date', sa.DateTime()),
        sa.Column('priority', sa.String(255)),
        sa.Column('estimated_time', sa.Integer()),
        sa.Column('actual_time', sa.Integer()),
        *helpers.timestamps()
    )


def downgrade():
    op.drop_table('study_tasks')
