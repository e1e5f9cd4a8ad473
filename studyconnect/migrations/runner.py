"""
Migration Runner

FLOW OVERVIEW
- The schema history is an Alembic script directory (this package). Revisions
  form one linear chain; revision ids are sortable timestamp-prefixed names.
- upgrade(bind, target='head')
  • Reads the current revision, then applies each pending step separately,
    oldest first, each inside its own transaction.
  • A failing step is rolled back and re-raised as MigrationError naming it;
    later steps are not attempted.
- downgrade(bind, target)
  • Reverts steps newest first down to (excluding) target, or to 'base'.
  • A step declaring `invertible = False` raises IrreversibleMigrationError
    before anything is touched.
- current_revision / pending_revisions / history: read-only views.

`bind` is an Engine or a Connection. With a Connection that already has a
transaction open, each step runs in a savepoint and the caller commits.
"""

import logging
import os
from contextlib import contextmanager
from dataclasses import dataclass

from alembic import command
from alembic.config import Config as AlembicConfig
from alembic.runtime.migration import MigrationContext
from alembic.script import ScriptDirectory
from sqlalchemy.engine import Connection

from ..utils.errors import IrreversibleMigrationError, MigrationError

logger = logging.getLogger(__name__)

MIGRATIONS_DIR = os.path.dirname(os.path.abspath(__file__))


@dataclass(frozen=True)
class MigrationStep:
    revision: str
    description: str
    invertible: bool


def _alembic_config(connection=None):
    cfg = AlembicConfig()
    cfg.set_main_option('script_location', MIGRATIONS_DIR)
    if connection is not None:
        cfg.attributes['connection'] = connection
    return cfg


def _scripts():
    """Revision scripts, oldest first"""
    script_dir = ScriptDirectory.from_config(_alembic_config())
    return list(reversed(list(script_dir.walk_revisions())))


def _is_invertible(script):
    return bool(getattr(script.module, 'invertible', True))


def _describe(script):
    return MigrationStep(script.revision, (script.doc or '').strip(), _is_invertible(script))


def _position(scripts, revision):
    """Index of `revision` in the chain; -1 for base"""
    if revision in (None, 'base'):
        return -1
    if revision == 'head':
        return len(scripts) - 1
    for index, script in enumerate(scripts):
        if script.revision == revision:
            return index
    raise MigrationError(revision, 'unknown revision')


@contextmanager
def _connect(bind):
    if isinstance(bind, Connection):
        yield bind
    else:
        with bind.connect() as connection:
            yield connection


def _read_revision(connection):
    started = not connection.in_transaction()
    revision = MigrationContext.configure(connection).get_current_revision()
    if started and connection.in_transaction():
        connection.rollback()
    return revision


@contextmanager
def _sqlite_table_rebuilds(connection):
    """
    Turn SQLite foreign key enforcement off around the run.

    Batch operations rebuild a table by copy, drop and rename; with enforcement
    on, dropping the old table would fire ON DELETE actions of the tables that
    reference it. The pragma is ignored inside a transaction, so a Connection
    handed in mid-transaction is left as it is.
    """
    if connection.dialect.name != 'sqlite' or connection.in_transaction():
        yield
        return
    connection.exec_driver_sql('PRAGMA foreign_keys=OFF')
    connection.commit()
    try:
        yield
    finally:
        if connection.in_transaction():
            connection.rollback()
        connection.exec_driver_sql('PRAGMA foreign_keys=ON')
        connection.commit()


def _run_step(connection, revision, operation, destination):
    begin = connection.begin_nested if connection.in_transaction() else connection.begin
    try:
        with begin():
            operation(_alembic_config(connection), destination)
    except MigrationError:
        logger.error('Migration %s failed', revision)
        raise
    except Exception as e:
        logger.error('Migration %s failed: %s', revision, e)
        raise MigrationError(revision, e) from e


def history():
    """Every step of the log, oldest first"""
    return [_describe(script) for script in _scripts()]


def current_revision(bind):
    """Revision id the database is at, or None for an empty schema"""
    with _connect(bind) as connection:
        return _read_revision(connection)


def pending_revisions(bind, target='head'):
    """Steps not yet applied, oldest first"""
    scripts = _scripts()
    with _connect(bind) as connection:
        current = _read_revision(connection)
    start = _position(scripts, current) + 1
    end = _position(scripts, target) + 1
    return [_describe(script) for script in scripts[start:end]]


def upgrade(bind, target='head'):
    """
    Apply pending steps up to and including `target`.

    Returns:
        list: revision ids applied, in order
    """
    scripts = _scripts()
    applied = []
    with _connect(bind) as connection, _sqlite_table_rebuilds(connection):
        current = _read_revision(connection)
        start = _position(scripts, current) + 1
        end = _position(scripts, target) + 1
        for script in scripts[start:end]:
            logger.info('Applying %s: %s', script.revision, (script.doc or '').strip())
            _run_step(connection, script.revision, command.upgrade, script.revision)
            applied.append(script.revision)
    if not applied:
        logger.info('Schema already at %s', target)
    return applied


def downgrade(bind, target):
    """
    Revert applied steps newest first until the schema is at `target`.

    Returns:
        list: revision ids reverted, in order
    """
    scripts = _scripts()
    reverted = []
    with _connect(bind) as connection, _sqlite_table_rebuilds(connection):
        current = _read_revision(connection)
        stop = _position(scripts, target)
        for script in reversed(scripts[stop + 1:_position(scripts, current) + 1]):
            if not _is_invertible(script):
                logger.error('Migration %s is not invertible', script.revision)
                raise IrreversibleMigrationError(script.revision, 'declared non-invertible')
            logger.info('Reverting %s', script.revision)
            _run_step(connection, script.revision, command.downgrade, script.down_revision or 'base')
            reverted.append(script.revision)
    return reverted
