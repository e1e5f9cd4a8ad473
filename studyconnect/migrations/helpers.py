"""
Migration Helpers

Column builders and enum-domain operations shared by the revision files.
Revisions freeze their own enum value lists instead of importing the model
enums, so a later change to a model never rewrites history.
"""

import logging

import sqlalchemy as sa
from alembic import op

from ..utils.errors import EnumNarrowingError, IrreversibleMigrationError

logger = logging.getLogger(__name__)


def uuid_pk():
    return sa.Column('id', sa.Uuid(), primary_key=True)


def timestamps():
    return [
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
    ]


def fk(name, target, ondelete='CASCADE', nullable=False, constraint_name=None):
    """
    UUID column referencing `target`.id

    Columns added through batch_alter_table need `constraint_name`: SQLite
    batch mode cannot recreate an unnamed foreign key.
    """
    return sa.Column(
        name, sa.Uuid(),
        sa.ForeignKey(f'{target}.id', ondelete=ondelete, name=constraint_name),
        nullable=nullable,
    )


def enum(name, values):
    return sa.Enum(*values, name=name)


def _is_postgresql():
    return op.get_bind().dialect.name == 'postgresql'


def create_enum_type(name, values):
    """Create a named enum type ahead of add_column (PostgreSQL only)"""
    if _is_postgresql():
        enum(name, values).create(op.get_bind(), checkfirst=True)


def drop_enum_type(name):
    """Drop a named enum type once no column uses it (PostgreSQL only)"""
    if _is_postgresql():
        op.execute(sa.text(f'DROP TYPE IF EXISTS {name}'))


def widen_enum(table, column, name, old_values, new_values, server_default=None):
    """
    Grow the value domain of an enum column.

    Args:
        table: table holding the column
        column: enum column name
        name: storage name of the enum domain
        old_values: current domain
        new_values: domain after the change, a superset of old_values
        server_default: the column's unchanged server default

    Raises:
        EnumNarrowingError: if a current value is missing from new_values
    """
    removed = set(old_values) - set(new_values)
    if removed:
        raise EnumNarrowingError(name, removed)

    added = [value for value in new_values if value not in old_values]
    if not added:
        return

    if _is_postgresql():
        for value in added:
            op.execute(sa.text(f"ALTER TYPE {name} ADD VALUE IF NOT EXISTS '{value}'"))
    else:
        with op.batch_alter_table(table) as batch_op:
            batch_op.alter_column(
                column,
                existing_type=enum(name, old_values),
                type_=enum(name, new_values),
                existing_nullable=True,
                existing_server_default=server_default,
            )
    logger.info('Widened %s with %s', name, ', '.join(added))


def irreversible(revision, reason):
    """Body of a downgrade that must not run"""
    raise IrreversibleMigrationError(revision, reason)
