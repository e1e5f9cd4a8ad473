"""
Tests for the seed bootstrap
"""

import pytest
from sqlalchemy.exc import IntegrityError

from studyconnect.models import (
    AttendanceStatus, Event, MembershipRole, Notification, NotificationType, Resource, ResourceType,
    StudyRoom, Subject, User, UserEvent, UserPreference, UserRole, UserStudyRoom,
)
from studyconnect.seeders import SEEDERS, run_seeders, undo_seeders
from studyconnect.seeders import (
    admin_user, sample_events, sample_notifications, sample_resources, sample_study_rooms, subjects,
)

ADMIN_EMAIL = 'admin@studyconnect.com'


class TestAdminSeeder:
    """Test the administrator account seeder"""

    def test_creates_admin_with_preferences(self, db_session):
        run_seeders(['admin-user'])

        admin = User.query.filter_by(email=ADMIN_EMAIL).one()
        assert admin.role == UserRole.ADMIN
        assert admin.email_verified is True
        assert admin.is_active is True
        assert admin.check_password('password123')
        assert admin.password != 'password123'

        preference = UserPreference.query.filter_by(user_id=admin.id).one()
        assert preference.theme == 'light'
        assert preference.language == 'en'
        assert preference.timezone == 'UTC'

    def test_seeding_twice_violates_unique_email(self, db_session):
        run_seeders(['admin-user'])

        with pytest.raises(IntegrityError):
            run_seeders(['admin-user'])

        assert User.query.filter_by(email=ADMIN_EMAIL).count() == 1

    def test_undo_removes_admin_and_preferences(self, db_session):
        run_seeders(['admin-user'])

        assert undo_seeders(['admin-user']) == ['admin-user']

        assert User.query.count() == 0
        assert UserPreference.query.count() == 0

    def test_admin_email_comes_from_config(self, app, db_session):
        app.config['ADMIN_EMAIL'] = 'root@studyconnect.com'
        run_seeders(['admin-user'])
        assert User.query.filter_by(email='root@studyconnect.com').count() == 1


class TestSampleStudyRooms:

    def test_skipped_without_admin(self, db_session):
        assert run_seeders(['sample-study-rooms']) == ['sample-study-rooms']
        assert StudyRoom.query.count() == 0

    def test_admin_owns_every_room(self, db_session):
        run_seeders(['admin-user', 'sample-study-rooms'])
        admin = User.query.filter_by(email=ADMIN_EMAIL).one()

        rooms = StudyRoom.query.all()
        assert {room.name for room in rooms} == {values['name'] for values in sample_study_rooms.ROOMS}
        for room in rooms:
            assert room.created_by == admin.id
            membership = UserStudyRoom.query.filter_by(room_id=room.id).one()
            assert membership.user_id == admin.id
            assert membership.role == MembershipRole.OWNER


class TestSampleContent:
    """Events, resources and notifications hang off the admin and sample rooms"""

    def test_events_skipped_without_admin(self, db_session):
        assert run_seeders(['sample-events']) == ['sample-events']
        assert Event.query.count() == 0

    def test_events_skipped_without_rooms(self, db_session):
        run_seeders(['admin-user', 'sample-events'])
        assert Event.query.count() == 0

    def test_one_event_per_room_with_admin_attending(self, db_session):
        run_seeders(['admin-user', 'sample-study-rooms', 'sample-events'])
        admin = User.query.filter_by(email=ADMIN_EMAIL).one()

        events = Event.query.order_by(Event.date).all()
        assert [event.title for event in events] == [entry[0] for entry in sample_events.EVENTS]
        assert len({event.room_id for event in events}) == 3
        assert [event.duration for event in events] == [120, 90, 60]
        for event in events:
            assert event.created_by == admin.id
            response = UserEvent.query.filter_by(event_id=event.id).one()
            assert response.user_id == admin.id
            assert response.status == AttendanceStatus.ATTENDING

    def test_undo_events_removes_responses(self, db_session):
        run_seeders(['admin-user', 'sample-study-rooms', 'sample-events'])
        undo_seeders(['sample-events'])
        assert Event.query.count() == 0
        assert UserEvent.query.count() == 0
        assert StudyRoom.query.count() == 3

    def test_resources_skipped_without_admin(self, db_session):
        run_seeders(['sample-resources'])
        assert Resource.query.count() == 0

    def test_resources_filed_under_subjects_and_rooms(self, db_session):
        run_seeders(['admin-user', 'subjects', 'sample-study-rooms', 'sample-resources'])

        resources = {resource.title: resource for resource in Resource.query.all()}
        assert set(resources) == {values['title'] for values in sample_resources.RESOURCES}
        cheat_sheet = resources['Calculus Cheat Sheet']
        assert cheat_sheet.type == ResourceType.PDF
        assert cheat_sheet.subject.name == 'Mathematics'
        assert cheat_sheet.room.name == sample_study_rooms.ROOMS[0]['name']
        assert resources['Programming Basics'].subject.name == 'Computer Science'

    def test_resources_without_rooms_or_subjects(self, db_session):
        run_seeders(['admin-user', 'sample-resources'])
        assert Resource.query.count() == 3
        assert Resource.query.filter(Resource.room_id.isnot(None)).count() == 0
        assert Resource.query.filter(Resource.subject_id.isnot(None)).count() == 0

    def test_notifications_skipped_without_admin(self, db_session):
        run_seeders(['sample-notifications'])
        assert Notification.query.count() == 0

    def test_notifications_point_at_related_rows(self, db_session):
        run_seeders()
        admin = User.query.filter_by(email=ADMIN_EMAIL).one()

        notifications = Notification.unread_for(admin.id)
        assert [n.message for n in notifications] == [entry[0] for entry in sample_notifications.NOTIFICATIONS]
        assert [n.related_type for n in notifications] == ['resource', 'studyRoom', 'event']
        assert notifications[1].type == NotificationType.SUCCESS
        for notification in notifications:
            assert notification.related_id is not None
            assert notification.link.endswith(str(notification.related_id))

    def test_notifications_without_related_rows(self, db_session):
        run_seeders(['admin-user', 'sample-notifications'])
        notifications = Notification.query.all()
        assert len(notifications) == 3
        assert all(n.related_id is None and n.link is None for n in notifications)


class TestRunSeeders:

    def test_runs_everything_in_order(self, db_session):
        ran = run_seeders()

        assert ran == [
            admin_user.name, subjects.name, sample_study_rooms.name,
            sample_events.name, sample_resources.name, sample_notifications.name,
        ]
        assert User.query.count() == 1
        assert Subject.query.count() == len(subjects.CATALOGUE) == 11
        assert StudyRoom.query.count() == 3
        assert UserStudyRoom.query.count() == 3
        assert Event.query.count() == 3
        assert UserEvent.query.count() == 3
        assert Resource.query.count() == 3
        assert Notification.query.count() == 3

    def test_order_follows_registry_not_arguments(self, db_session):
        ran = run_seeders(['sample-study-rooms', 'admin-user'])
        assert ran == ['admin-user', 'sample-study-rooms']
        assert StudyRoom.query.count() == 3

    def test_undo_reverts_in_reverse_order(self, db_session):
        run_seeders()

        undone = undo_seeders()

        assert undone == [seeder.name for seeder in reversed(SEEDERS)]
        assert User.query.count() == 0
        assert Subject.query.count() == 0
        assert StudyRoom.query.count() == 0
        assert UserStudyRoom.query.count() == 0
        assert Event.query.count() == 0
        assert Resource.query.count() == 0
        assert Notification.query.count() == 0

    def test_unknown_seeder(self, db_session):
        with pytest.raises(ValueError, match='Unknown seeder'):
            run_seeders(['nope'])
