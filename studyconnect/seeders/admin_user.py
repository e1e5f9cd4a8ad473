"""
Administrator Account Seeder

up() inserts exactly one admin account and its preference row. It is not
guarded: running it twice without down() in between violates the email
uniqueness constraint and the IntegrityError reaches the caller.
"""

import logging

from flask import current_app

from ..models import User, UserPreference, UserRole

logger = logging.getLogger(__name__)

name = 'admin-user'

DEFAULT_ADMIN_EMAIL = 'admin@studyconnect.com'
DEFAULT_ADMIN_PASSWORD = 'password123'


def admin_email():
    return current_app.config.get('ADMIN_EMAIL', DEFAULT_ADMIN_EMAIL)


def up(session):
    admin = User(
        first_name='Admin',
        last_name='User',
        email=admin_email(),
        role=UserRole.ADMIN,
        email_verified=True,
        is_active=True,
    )
    admin.set_password(
        current_app.config.get('ADMIN_PASSWORD', DEFAULT_ADMIN_PASSWORD),
        rounds=current_app.config.get('BCRYPT_ROUNDS'),
    )
    session.add(admin)
    session.add(UserPreference(
        user=admin,
        notification_email=True,
        notification_push=True,
        theme='light',
        language='en',
        timezone='UTC',
    ))
    session.flush()
    logger.info('Created admin account %s', admin.email)
    return admin


def down(session):
    """Remove the admin account; its preference row goes with it by cascade"""
    deleted = User.query.filter_by(email=admin_email()).delete(synchronize_session=False)
    logger.info('Removed %d admin account(s)', deleted)
    return deleted
