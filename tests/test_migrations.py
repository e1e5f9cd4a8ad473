"""
Tests for the schema migration log and its runner

Each test runs against a fresh file-backed SQLite database.
"""

import uuid
from datetime import datetime

import pytest
import sqlalchemy as sa
from sqlalchemy import inspect

from studyconnect.migrations import helpers, runner
from studyconnect.models import User, UserPreference
from studyconnect.utils.errors import EnumNarrowingError, IrreversibleMigrationError, MigrationError

HEAD = '20250704000002_add_unique_user_preference_index'
WIDEN_TYPES = '20250621105559_add_original_filename_to_resources'
FIX_TYPES = '20250621125559_fix_resource_types'
BEFORE_WIDEN = '20250613130001_create_user_presence'
FRIENDSHIPS = '20250704000001_create_friendships'
SUBJECT_ON_DECKS = '20250703000000_add_subject_id_to_flashcard_decks'

# Tables as they stand before the approval fields and interests exist
users = sa.table(
    'users',
    sa.column('id', sa.Uuid()),
    sa.column('first_name', sa.String()),
    sa.column('last_name', sa.String()),
    sa.column('email', sa.String()),
    sa.column('password', sa.String()),
    sa.column('created_at', sa.DateTime()),
    sa.column('updated_at', sa.DateTime()),
)
resources = sa.table(
    'resources',
    sa.column('id', sa.Uuid()),
    sa.column('title', sa.String()),
    sa.column('type', sa.String()),
    sa.column('url', sa.String()),
    sa.column('uploaded_by', sa.Uuid()),
    sa.column('created_at', sa.DateTime()),
    sa.column('updated_at', sa.DateTime()),
)


class TestHistory:
    """Test the ordered log itself"""

    def test_revisions_are_ordered_by_timestamp(self):
        revisions = [step.revision for step in runner.history()]
        assert revisions[0] == '20240613000001_create_users'
        assert revisions[-1] == HEAD
        assert revisions == sorted(revisions)
        assert len(revisions) == len(set(revisions))

    def test_only_the_domain_widening_and_data_repair_are_irreversible(self):
        irreversible = [step.revision for step in runner.history() if not step.invertible]
        assert irreversible == [WIDEN_TYPES, FIX_TYPES]

    def test_descriptions(self):
        steps = {step.revision: step for step in runner.history()}
        assert steps['20250704000001_create_friendships'].description == 'Create friendships table.'


class TestUpgrade:
    """Test forward application"""

    def test_empty_database_has_no_revision(self, migration_engine):
        assert runner.current_revision(migration_engine) is None
        assert len(runner.pending_revisions(migration_engine)) == len(runner.history())

    def test_head_matches_model_schema(self, migration_engine, model_engine, schema_snapshot):
        applied = runner.upgrade(migration_engine)

        assert applied == [step.revision for step in runner.history()]
        assert runner.current_revision(migration_engine) == HEAD
        assert runner.pending_revisions(migration_engine) == []
        assert schema_snapshot(migration_engine) == schema_snapshot(model_engine)

    def test_upgrade_is_resumable(self, migration_engine):
        runner.upgrade(migration_engine, BEFORE_WIDEN)
        assert runner.current_revision(migration_engine) == BEFORE_WIDEN

        pending = [step.revision for step in runner.pending_revisions(migration_engine)]
        assert pending[0] == WIDEN_TYPES

        applied = runner.upgrade(migration_engine)
        assert applied == pending
        assert runner.upgrade(migration_engine) == []

    def test_unknown_target(self, migration_engine):
        with pytest.raises(MigrationError) as exc_info:
            runner.upgrade(migration_engine, 'not-a-revision')
        assert exc_info.value.revision == 'not-a-revision'

    def test_failed_step_halts_and_rolls_back(self, migration_engine):
        runner.upgrade(migration_engine, FRIENDSHIPS)
        user_id = uuid.uuid4()
        now = datetime.utcnow()
        with migration_engine.begin() as connection:
            connection.execute(User.__table__.insert().values(
                id=user_id, first_name='A', last_name='B', email='a@example.com', password='x',
                created_at=now, updated_at=now,
            ))
            for _ in range(2):
                connection.execute(UserPreference.__table__.insert().values(
                    id=uuid.uuid4(), user_id=user_id, created_at=now, updated_at=now,
                ))

        with pytest.raises(MigrationError) as exc_info:
            runner.upgrade(migration_engine)

        assert exc_info.value.revision == HEAD
        assert runner.current_revision(migration_engine) == FRIENDSHIPS

    def test_columns_added_in_batch_keep_their_foreign_keys(self, migration_engine):
        runner.upgrade(migration_engine, SUBJECT_ON_DECKS)

        inspector = inspect(migration_engine)
        resource_fks = {fk['constrained_columns'][0]: fk for fk in inspector.get_foreign_keys('resources')}
        deck_fks = {fk['constrained_columns'][0]: fk for fk in inspector.get_foreign_keys('flashcard_decks')}
        assert resource_fks['reviewed_by']['referred_table'] == 'users'
        assert resource_fks['reviewed_by']['options']['ondelete'] == 'SET NULL'
        assert deck_fks['subject_id']['referred_table'] == 'subjects'
        assert deck_fks['subject_id']['options']['ondelete'] == 'SET NULL'

    def test_resource_type_repair_step(self, migration_engine):
        runner.upgrade(migration_engine, WIDEN_TYPES)
        user_id = uuid.uuid4()
        now = datetime.utcnow()
        rows = {
            'pdf_url': ('PDF', 'https://example.com/a.pdf'),
            'link': ('Link', 'https://example.com'),
            'empty': ('Video', ''),
            'no_url': ('Code', None),
        }
        with migration_engine.begin() as connection:
            connection.execute(users.insert().values(
                id=user_id, first_name='A', last_name='B', email='a@example.com', password='x',
                created_at=now, updated_at=now,
            ))
            for title, (kind, url) in rows.items():
                connection.execute(resources.insert().values(
                    id=uuid.uuid4(), title=title, type=kind, url=url, uploaded_by=user_id,
                    created_at=now, updated_at=now,
                ))

        assert runner.upgrade(migration_engine, FIX_TYPES) == [FIX_TYPES]

        with migration_engine.connect() as connection:
            types = dict(connection.execute(sa.select(resources.c.title, resources.c.type)).all())
        assert types == {'pdf_url': 'Link', 'link': 'Link', 'empty': 'Video', 'no_url': 'Code'}


class TestDowngrade:
    """Test reverse application"""

    def test_every_invertible_step_round_trips(self, migration_engine, schema_snapshot):
        mismatched = []
        for step in runner.history():
            before = schema_snapshot(migration_engine)
            runner.upgrade(migration_engine, step.revision)
            if not step.invertible:
                continue
            previous = runner.current_revision(migration_engine)
            assert previous == step.revision

            runner.downgrade(migration_engine, _down_revision(step.revision))
            if schema_snapshot(migration_engine) != before:
                mismatched.append(step.revision)
            runner.upgrade(migration_engine, step.revision)

        assert mismatched == []
        assert runner.current_revision(migration_engine) == HEAD

    @pytest.mark.parametrize('revision', [WIDEN_TYPES, FIX_TYPES])
    def test_irreversible_steps_raise(self, migration_engine, revision):
        runner.upgrade(migration_engine, revision)

        with pytest.raises(IrreversibleMigrationError) as exc_info:
            runner.downgrade(migration_engine, _down_revision(revision))

        assert exc_info.value.revision == revision
        assert runner.current_revision(migration_engine) == revision

    def test_downgrade_to_base_halts_at_data_repair(self, migration_engine):
        runner.upgrade(migration_engine)

        with pytest.raises(IrreversibleMigrationError):
            runner.downgrade(migration_engine, 'base')

        assert runner.current_revision(migration_engine) == FIX_TYPES

    def test_downgrade_to_base_before_irreversible_steps(self, migration_engine, schema_snapshot):
        runner.upgrade(migration_engine, BEFORE_WIDEN)
        reverted = runner.downgrade(migration_engine, 'base')

        assert reverted[0] == BEFORE_WIDEN
        assert reverted[-1] == '20240613000001_create_users'
        assert runner.current_revision(migration_engine) is None
        assert schema_snapshot(migration_engine) == {}


def _down_revision(revision):
    revisions = [step.revision for step in runner.history()]
    index = revisions.index(revision)
    return revisions[index - 1] if index else 'base'


class TestHelpers:

    def test_widen_enum_refuses_to_drop_values(self):
        with pytest.raises(EnumNarrowingError) as exc_info:
            helpers.widen_enum('resources', 'type', 'enum_resources_type',
                               ('PDF', 'Link', 'Video'), ('PDF', 'Link'))
        assert exc_info.value.removed == ['Video']
        assert exc_info.value.enum_name == 'enum_resources_type'

    def test_widen_enum_with_same_domain_is_a_no_op(self):
        assert helpers.widen_enum('resources', 'type', 'enum_resources_type', ('PDF',), ('PDF',)) is None

    def test_irreversible(self):
        with pytest.raises(IrreversibleMigrationError, match='cannot be reverted: no prior state'):
            helpers.irreversible(FIX_TYPES, 'no prior state')
