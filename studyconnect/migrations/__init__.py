"""
Schema Migration Log

An ordered, append-only sequence of Alembic revisions under versions/, applied
one step at a time by the runner.
"""

from .runner import (
    MIGRATIONS_DIR,
    MigrationStep,
    current_revision,
    downgrade,
    history,
    pending_revisions,
    upgrade,
)

__all__ = [
    'MIGRATIONS_DIR',
    'MigrationStep',
    'current_revision',
    'downgrade',
    'history',
    'pending_revisions',
    'upgrade',
]
