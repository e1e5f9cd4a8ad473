"""Create users table.

Revision ID: 20240613000001_create_users
Revises: None
Create Date: 2024-06-13
"""

import sqlalchemy as sa
from alembic import op

from studyconnect.migrations import helpers

revision = '20240613000001_create_users'
down_revision = None
branch_labels = None
depends_on = None

ROLES = ('student', 'teacher', 'admin')


def upgrade():
    op.create_table(
        'users',
        helpers.uuid_pk(),
        sa.Column('first_name', sa.String(100), nullable=False),
        sa.Column('last_name', sa.String(100), nullable=False),
        sa.Column('email', sa.String(255), unique=True, nullable=False),
        sa.Column('password', sa.String(255), nullable=False),
        sa.Column('role', helpers.enum('enum_users_role', ROLES), server_default='student'),
        sa.Column('avatar', sa.String(255)),
        sa.Column('bio', sa.Text()),
        sa.Column('institution', sa.String(255)),
        sa.Column('major', sa.String(100)),
        sa.Column('year_of_study', sa.String(50)),
        sa.Column('email_verified', sa.Boolean(), server_default=sa.false()),
        sa.Column('is_active', sa.Boolean(), server_default=sa.true()),
        sa.Column('last_login', sa.DateTime()),
        *helpers.timestamps()
    )


def downgrade():
    op.drop_table('users')
    helpers.drop_enum_type('enum_users_role')
