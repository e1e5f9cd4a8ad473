"""
Sample Event Seeder

Schedules one upcoming event in each sample study room, created by the admin
account, with the admin attending. Skipped with a warning when the admin
account or the sample rooms are missing.
"""

import logging
from datetime import datetime, timedelta

from ..models import AttendanceStatus, Event, StudyRoom, User, UserEvent
from .admin_user import admin_email
from .sample_study_rooms import ROOMS

logger = logging.getLogger(__name__)

name = 'sample-events'

# (title, description, days ahead, hour, minute, duration in minutes)
EVENTS = [
    ('Calculus Study Session',
     'Group session to review calculus problems and prepare for the upcoming exam.',
     1, 14, 0, 120),
    ('Physics Lab Prep',
     'Prepare for the upcoming physics lab experiment on mechanics.',
     7, 10, 30, 90),
    ('Group Project Meeting',
     'Team meeting to discuss progress on the semester project and assign tasks.',
     14, 15, 0, 60),
]


def sample_rooms():
    """The seeded sample rooms, in ROOMS order"""
    names = [values['name'] for values in ROOMS]
    rooms = {room.name: room for room in StudyRoom.query.filter(StudyRoom.name.in_(names))}
    return [rooms[room_name] for room_name in names if room_name in rooms]


def up(session):
    admin = User.query.filter_by(email=admin_email()).first()
    if admin is None:
        logger.warning('Admin user not found, skipping sample events')
        return []
    rooms = sample_rooms()
    if not rooms:
        logger.warning('No study rooms found, skipping sample events')
        return []

    today = datetime.utcnow()
    events = []
    for room, (title, description, days, hour, minute, duration) in zip(rooms, EVENTS):
        date = (today + timedelta(days=days)).replace(hour=hour, minute=minute, second=0, microsecond=0)
        event = Event(title=title, description=description, date=date, duration=duration,
                      room_id=room.id, created_by=admin.id)
        session.add(event)
        session.add(UserEvent(user_id=admin.id, event=event, status=AttendanceStatus.ATTENDING))
        events.append(event)
    session.flush()
    logger.info('Created %d sample events', len(events))
    return events


def down(session):
    """Remove the sample events; attendance rows go with them by cascade"""
    titles = [entry[0] for entry in EVENTS]
    deleted = Event.query.filter(Event.title.in_(titles)).delete(synchronize_session=False)
    logger.info('Removed %d sample events', deleted)
    return deleted
