"""
Sample Notification Seeder

Three unread notifications for the admin account, each pointing at a sample
resource, room or event when one exists. Skipped with a warning when the admin
account is missing.
"""

import logging
from datetime import datetime, timedelta

from ..models import Event, Notification, NotificationType, Resource, StudyRoom, User
from .admin_user import admin_email

logger = logging.getLogger(__name__)

name = 'sample-notifications'

# (message, type, related model, related type, link prefix, hours ago)
NOTIFICATIONS = [
    ('Alex commented on your note', NotificationType.INFO,
     Resource, 'resource', '/dashboard/resources', 2),
    ('New resource added to Physics 101', NotificationType.SUCCESS,
     StudyRoom, 'studyRoom', '/dashboard/groups', 5),
    ('Study session scheduled for tomorrow', NotificationType.INFO,
     Event, 'event', '/dashboard/events', 24),
]


def up(session):
    admin = User.query.filter_by(email=admin_email()).first()
    if admin is None:
        logger.warning('Admin user not found, skipping sample notifications')
        return []

    now = datetime.utcnow()
    notifications = []
    for message, kind, model, related_type, prefix, hours_ago in NOTIFICATIONS:
        related = model.query.order_by(model.created_at).first()
        created = now - timedelta(hours=hours_ago)
        notification = Notification(
            user_id=admin.id,
            message=message,
            type=kind,
            is_read=False,
            related_id=related.id if related else None,
            related_type=related_type if related else None,
            link=f'{prefix}/{related.id}' if related else None,
            created_at=created,
            updated_at=created,
        )
        session.add(notification)
        notifications.append(notification)
    session.flush()
    logger.info('Created %d sample notifications', len(notifications))
    return notifications


def down(session):
    messages = [entry[0] for entry in NOTIFICATIONS]
    deleted = Notification.query.filter(Notification.message.in_(messages)).delete(synchronize_session=False)
    logger.info('Removed %d sample notifications', deleted)
    return deleted
