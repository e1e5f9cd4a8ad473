"""
Sample Study Room Seeder

Creates three rooms owned by the admin account, with the admin as owner
member of each. Skipped with a warning when the admin account is missing.
"""

import logging
from datetime import datetime

from ..models import MembershipRole, StudyRoom, User, UserStudyRoom
from .admin_user import admin_email

logger = logging.getLogger(__name__)

name = 'sample-study-rooms'

ROOMS = [
    {
        'name': 'Advanced Calculus Study Group',
        'description': 'A group dedicated to mastering advanced calculus concepts including '
                       'multivariable calculus, vector analysis, and differential equations.',
        'image': 'https://images.unsplash.com/photo-1635070041078-e363dbe005cb?auto=format&fit=crop&w=200&h=200&q=80',
        'total_members': 12,
        'active_members': 3,
    },
    {
        'name': 'Physics 101 Lab Prep',
        'description': 'Prepare for physics lab sessions, discuss experimental methods, '
                       'and collaborate on lab reports.',
        'image': 'https://images.unsplash.com/photo-1636466497217-26a8cbeaf0aa?auto=format&fit=crop&w=200&h=200&q=80',
        'total_members': 8,
        'active_members': 5,
    },
    {
        'name': 'Computer Science Projects',
        'description': 'Collaborate on programming projects, share code, and discuss '
                       'software development best practices.',
        'image': 'https://images.unsplash.com/photo-1517694712202-14dd9538aa97?auto=format&fit=crop&w=200&h=200&q=80',
        'total_members': 15,
        'active_members': 7,
    },
]


def up(session):
    admin = User.query.filter_by(email=admin_email()).first()
    if admin is None:
        logger.warning('Admin user not found, skipping sample study rooms')
        return []

    now = datetime.utcnow()
    rooms = []
    for values in ROOMS:
        room = StudyRoom(created_by=admin.id, last_active=now, is_active=True, **values)
        session.add(room)
        session.add(UserStudyRoom(
            user_id=admin.id,
            room=room,
            role=MembershipRole.OWNER,
            joined_at=now,
            last_active=now,
        ))
        rooms.append(room)
    session.flush()
    logger.info('Created %d sample study rooms', len(rooms))
    return rooms


def down(session):
    names = [values['name'] for values in ROOMS]
    deleted = StudyRoom.query.filter(StudyRoom.name.in_(names)).delete(synchronize_session=False)
    logger.info('Removed %d sample study rooms', deleted)
    return deleted
