"""
Sample Resource Seeder

Uploads three resources as the admin account, filed under the first sample
subjects and rooms when those exist. Skipped with a warning when the admin
account is missing.
"""

import logging

from ..models import Resource, ResourceType, Subject, User
from .admin_user import admin_email
from .sample_events import sample_rooms

logger = logging.getLogger(__name__)

name = 'sample-resources'

RESOURCES = [
    {
        'title': 'Calculus Cheat Sheet',
        'description': 'A comprehensive cheat sheet covering all major calculus formulas and theorems.',
        'type': ResourceType.PDF,
        'url': 'https://example.com/resources/calculus-cheat-sheet.pdf',
        'file_path': '/uploads/resources/calculus-cheat-sheet.pdf',
        'file_size': 2048,
        'subject': 'Mathematics',
    },
    {
        'title': 'Physics Formulas',
        'description': 'A collection of essential physics formulas organized by topic.',
        'type': ResourceType.DOCUMENT,
        'url': 'https://example.com/resources/physics-formulas.docx',
        'file_path': '/uploads/resources/physics-formulas.docx',
        'file_size': 1536,
        'subject': 'Physics',
    },
    {
        'title': 'Programming Basics',
        'description': 'A beginner-friendly guide to programming fundamentals with examples in Python.',
        'type': ResourceType.LINK,
        'url': 'https://example.com/resources/programming-basics',
        'subject': 'Computer Science',
    },
]


def up(session):
    admin = User.query.filter_by(email=admin_email()).first()
    if admin is None:
        logger.warning('Admin user not found, skipping sample resources')
        return []

    subjects = {subject.name: subject for subject in Subject.query.filter(
        Subject.name.in_([values['subject'] for values in RESOURCES]))}
    rooms = sample_rooms()

    resources = []
    for index, values in enumerate(RESOURCES):
        values = dict(values)
        subject = subjects.get(values.pop('subject'))
        room = rooms[index] if index < len(rooms) else None
        resource = Resource(
            uploaded_by=admin.id,
            subject_id=subject.id if subject else None,
            room_id=room.id if room else None,
            **values
        )
        session.add(resource)
        resources.append(resource)
    session.flush()
    logger.info('Created %d sample resources', len(resources))
    return resources


def down(session):
    titles = [values['title'] for values in RESOURCES]
    deleted = Resource.query.filter(Resource.title.in_(titles)).delete(synchronize_session=False)
    logger.info('Removed %d sample resources', deleted)
    return deleted
