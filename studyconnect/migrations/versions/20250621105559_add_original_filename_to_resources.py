"""Add original_filename to resources and widen the resource type domain.

Revision ID: 20250621105559_add_original_filename_to_resources
Revises: 20250613130001_create_user_presence
Create Date: 2025-06-21

Not invertible: dropping the new type values would orphan rows using them.
"""

import sqlalchemy as sa
from alembic import op

from studyconnect.migrations import helpers

revision = '20250621105559_add_original_filename_to_resources'
down_revision = '20250613130001_create_user_presence'
branch_labels = None
depends_on = None
invertible = False

OLD_TYPES = ('PDF', 'Document', 'Link', 'Image', 'Video', 'Other')
NEW_TYPES = (
    'PDF', 'Document', 'Link', 'Image', 'Video', 'Spreadsheet',
    'Presentation', 'Archive', 'Text', 'Code', 'Audio', 'Other',
)


def upgrade():
    op.add_column('resources', sa.Column('original_filename', sa.String(255)))
    helpers.widen_enum('resources', 'type', 'enum_resources_type', OLD_TYPES, NEW_TYPES, server_default='Other')


def downgrade():
    helpers.irreversible(revision, 'the resource type domain cannot be narrowed')
