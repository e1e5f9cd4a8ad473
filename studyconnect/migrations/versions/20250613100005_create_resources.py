"""Create resources table.

Revision ID: 20250613100005_create_resources
Revises: 20250613100004_create_user_events
Create Date: 2025-06-13
"""

import sqlalchemy as sa
from alembic import op

from studyconnect.migrations import helpers

revision = '20250613100005_create_resources'
down_revision = '20250613100004_create_user_events'
branch_labels = None
depends_on = None

TYPES = ('PDF', 'Document', 'Link', 'Image', 'Video', 'Other')


def upgrade():
    op.create_table(
        'resources',
        helpers.uuid_pk(),
        sa.Column('title', sa.String(100), nullable=False),
        sa.Column('description', sa.Text()),
        sa.Column('type', helpers.enum('enum_resources_type', TYPES), server_default='Other'),
        sa.Column('url', sa.String(255)),
        sa.Column('file_path', sa.String(255)),
        sa.Column('file_size', sa.Integer()),
        helpers.fk('uploaded_by', 'users'),
        helpers.fk('subject_id', 'subjects', ondelete='SET NULL', nullable=True),
        helpers.fk('room_id', 'study_rooms', ondelete='SET NULL', nullable=True),
        *helpers.timestamps()
    )


def downgrade():
    op.drop_table('resources')
    helpers.drop_enum_type('enum_resources_type')
