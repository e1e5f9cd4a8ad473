"""
Alembic environment for the StudyConnect schema.

The runner hands in an open connection through config.attributes; the
`alembic` command line falls back to sqlalchemy.url, then to Config().
"""

from alembic import context
from sqlalchemy import create_engine

from studyconnect.config import Config
from studyconnect.models import db

config = context.config
target_metadata = db.metadata


def _database_url():
    return config.get_main_option('sqlalchemy.url') or Config().SQLALCHEMY_DATABASE_URI


def _configure(connection):
    context.configure(
        connection=connection,
        target_metadata=target_metadata,
        transaction_per_migration=True,
        render_as_batch=connection.dialect.name == 'sqlite',
        compare_type=True,
    )
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_offline():
    context.configure(
        url=_database_url(),
        target_metadata=target_metadata,
        literal_binds=True,
        dialect_opts={'paramstyle': 'named'},
    )
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online():
    connection = config.attributes.get('connection')
    if connection is not None:
        _configure(connection)
        return

    engine = create_engine(_database_url())
    try:
        with engine.connect() as connection:
            _configure(connection)
    finally:
        engine.dispose()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
