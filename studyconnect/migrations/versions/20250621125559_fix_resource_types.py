"""Mark resources that carry a URL as links.

Revision ID: 20250621125559_fix_resource_types
Revises: 20250621105559_add_original_filename_to_resources
Create Date: 2025-06-21

Runs ResourceTypeCorrection. Not invertible: the previous types are not kept.
"""

from alembic import op

from studyconnect.migrations import helpers
from studyconnect.repairs import ResourceTypeCorrection

revision = '20250621125559_fix_resource_types'
down_revision = '20250621105559_add_original_filename_to_resources'
branch_labels = None
depends_on = None
invertible = False


def upgrade():
    ResourceTypeCorrection().run(op.get_bind())


def downgrade():
    helpers.irreversible(revision, 'previous resource types were not recorded')
