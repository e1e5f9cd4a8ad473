"""
Seed Bootstrap Package

FLOW OVERVIEW
- SEEDERS lists the seed modules in the order they must run. Each module has
  a `name`, `up(session)` and `down(session)`.
- run_seeders(): up() of each seeder in order, committing after each one.
- undo_seeders(): down() of each seeder in reverse order.
- Both must be called inside an application context.
"""

import logging

from ..models import db
from . import (
    admin_user, sample_events, sample_notifications, sample_resources, sample_study_rooms, subjects,
)

logger = logging.getLogger(__name__)

SEEDERS = [
    admin_user,
    subjects,
    sample_study_rooms,
    sample_events,
    sample_resources,
    sample_notifications,
]


def _select(names):
    if not names:
        return list(SEEDERS)
    known = {seeder.name: seeder for seeder in SEEDERS}
    unknown = [n for n in names if n not in known]
    if unknown:
        raise ValueError(f"Unknown seeder(s): {', '.join(unknown)}")
    return [seeder for seeder in SEEDERS if seeder.name in names]


def run_seeders(names=None, session=None):
    """Run seeders in order; an exception rolls back the failing seeder and stops"""
    session = session or db.session
    ran = []
    for seeder in _select(names):
        logger.info('Seeding %s', seeder.name)
        try:
            seeder.up(session)
            session.commit()
        except Exception:
            session.rollback()
            logger.error('Seeder %s failed', seeder.name)
            raise
        ran.append(seeder.name)
    return ran


def undo_seeders(names=None, session=None):
    """Revert seeders in reverse order"""
    session = session or db.session
    undone = []
    for seeder in reversed(_select(names)):
        logger.info('Reverting seed %s', seeder.name)
        seeder.down(session)
        session.commit()
        undone.append(seeder.name)
    return undone


__all__ = ['SEEDERS', 'run_seeders', 'undo_seeders']
