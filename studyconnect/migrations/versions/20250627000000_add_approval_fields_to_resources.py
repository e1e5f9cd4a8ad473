"""Add review workflow fields to resources.

Revision ID: 20250627000000_add_approval_fields_to_resources
Revises: 20250621125559_fix_resource_types
Create Date: 2025-06-27
"""

import sqlalchemy as sa
from alembic import op

from studyconnect.migrations import helpers

revision = '20250627000000_add_approval_fields_to_resources'
down_revision = '20250621125559_fix_resource_types'
branch_labels = None
depends_on = None

STATUSES = ('pending', 'approved', 'rejected')


def upgrade():
    helpers.create_enum_type('enum_resources_status', STATUSES)
    with op.batch_alter_table('resources') as batch_op:
        batch_op.add_column(sa.Column(
            'status', helpers.enum('enum_resources_status', STATUSES),
            server_default='pending', nullable=False,
        ))
        batch_op.add_column(helpers.fk(
            'reviewed_by', 'users', ondelete='SET NULL', nullable=True,
            constraint_name='fk_resources_reviewed_by',
        ))
        batch_op.add_column(sa.Column('reviewed_at', sa.DateTime()))
        batch_op.add_column(sa.Column('review_notes', sa.Text()))


def downgrade():
    with op.batch_alter_table('resources') as batch_op:
        batch_op.drop_column('review_notes')
        batch_op.drop_column('reviewed_at')
        batch_op.drop_column('reviewed_by')
        batch_op.drop_column('status')
    helpers.drop_enum_type('enum_resources_status')
