"""Create study_rooms table.

Revision ID: 20250613100001_create_study_rooms
Revises: 20250613000004_create_user_subjects
Create Date: 2025-06-13
"""

import sqlalchemy as sa
from alembic import op

from studyconnect.migrations import helpers

revision = '20250613100001_create_study_rooms'
down_revision = '20250613000004_create_user_subjects'
branch_labels = None
depends_on = None


def upgrade():
    op.create_table(
        'study_rooms',
        helpers.uuid_pk(),
        sa.Column('name', sa.String(100), nullable=False),
        sa.Column('description', sa.Text()),
        sa.Column('image', sa.String(255)),
        sa.Column('total_members', sa.Integer(), server_default=sa.text('1')),
        sa.Column('active_members', sa.Integer(), server_default=sa.text('0')),
        sa.Column('last_active', sa.DateTime(), server_default=sa.func.now()),
        sa.Column('is_active', sa.Boolean(), server_default=sa.true()),
        helpers.fk('created_by', 'users'),
        helpers.fk('subject_id', 'subjects', ondelete='SET NULL', nullable=True),
        *helpers.timestamps()
    )


def downgrade():
    op.drop_table('study_rooms')
