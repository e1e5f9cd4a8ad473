"""
Test configuration and shared fixtures for StudyConnect tests.

This file contains:
- Centralized test configuration
- Shared fixtures used across multiple test files
- A reflected-schema snapshot used by the migration tests
"""

import pytest
from datetime import datetime, timedelta
from sqlalchemy import create_engine, inspect

from studyconnect import create_app
from studyconnect.models import db, User, Subject, StudyRoom


# Centralized test configuration
TEST_CONFIG = {
    'TESTING': True,
    'SQLALCHEMY_DATABASE_URI': 'sqlite:///:memory:',
    'SQLALCHEMY_TRACK_MODIFICATIONS': False,
    'ADMIN_EMAIL': 'admin@studyconnect.com',
    'ADMIN_PASSWORD': 'password123',
    'BCRYPT_ROUNDS': 4,
    'LOG_LEVEL': 'WARNING',
}


@pytest.fixture
def app():
    """Create and configure a new app instance for each test."""
    app = create_app(TEST_CONFIG)
    return app


@pytest.fixture
def app_context(app):
    """Create an application context for database operations."""
    with app.app_context():
        yield


@pytest.fixture
def db_session(app_context):
    """Create a database session and clean up after tests."""
    db.create_all()
    yield db.session
    db.session.remove()
    db.drop_all()


def make_user(email, first_name='Test', last_name='User', password='TestPass123!'):
    user = User(first_name=first_name, last_name=last_name, email=email)
    user.set_password(password, rounds=4)
    return user


@pytest.fixture
def test_user(db_session):
    """Create a test user for testing."""
    user = make_user('test@example.com')
    db_session.add(user)
    db_session.commit()
    return user


@pytest.fixture
def other_user(db_session):
    """Create a second user for two-party tests."""
    user = make_user('other@example.com', first_name='Other')
    db_session.add(user)
    db_session.commit()
    return user


@pytest.fixture
def user_factory(db_session):
    """Return a function creating committed users."""
    def _create(email, **kwargs):
        user = make_user(email, **kwargs)
        db_session.add(user)
        db_session.commit()
        return user
    return _create


@pytest.fixture
def test_subject(db_session):
    subject = Subject(name='Mathematics', category='Science')
    db_session.add(subject)
    db_session.commit()
    return subject


@pytest.fixture
def test_room(db_session, test_user, test_subject):
    room = StudyRoom(name='Calculus', created_by=test_user.id, subject_id=test_subject.id)
    db_session.add(room)
    db_session.commit()
    return room


@pytest.fixture
def event_date():
    return datetime.utcnow() + timedelta(days=1)


@pytest.fixture
def migration_engine(tmp_path):
    """Empty file-backed SQLite database for migration runs."""
    engine = create_engine(f"sqlite:///{tmp_path / 'migrations.db'}")
    yield engine
    engine.dispose()


@pytest.fixture
def model_engine(tmp_path):
    """File-backed SQLite database built straight from the models."""
    engine = create_engine(f"sqlite:///{tmp_path / 'models.db'}")
    db.metadata.create_all(engine)
    yield engine
    engine.dispose()


def snapshot_schema(engine):
    """
    Reflect the parts of a schema both build paths must agree on.

    Column defaults are left out: SQLite reports them as raw SQL text.
    """
    inspector = inspect(engine)
    schema = {}
    for table in sorted(inspector.get_table_names()):
        if table == 'alembic_version':
            continue
        schema[table] = {
            'columns': {
                column['name']: (str(column['type']), column['nullable'])
                for column in inspector.get_columns(table)
            },
            'primary_key': tuple(inspector.get_pk_constraint(table)['constrained_columns']),
            'foreign_keys': sorted(
                (
                    tuple(fk['constrained_columns']),
                    fk['referred_table'],
                    tuple(fk['referred_columns']),
                    (fk.get('options') or {}).get('ondelete'),
                )
                for fk in inspector.get_foreign_keys(table)
            ),
            'unique_constraints': sorted(
                (uc['name'] or '', tuple(uc['column_names']))
                for uc in inspector.get_unique_constraints(table)
            ),
            'indexes': sorted(
                (ix['name'], tuple(ix['column_names']), bool(ix['unique']))
                for ix in inspector.get_indexes(table)
            ),
        }
    return schema


@pytest.fixture
def schema_snapshot():
    return snapshot_schema
