"""
User Models

This module contains the User and UserPreference models.
"""

from datetime import datetime

from sqlalchemy import false, true, text
from sqlalchemy.orm import validates

from .base import BaseModel
from .database import db
from .enums import UserRole, enum_type
from .registry import Cardinality as C, OnDelete, Relation, register
from ..utils.auth_utils import hash_password, verify_password
from ..utils.validators import require, validate_email

MIN_PASSWORD_LENGTH = 6
MAX_PASSWORD_LENGTH = 100


@register
class User(BaseModel, db.Model):
    """Student, teacher or administrator account"""
    __tablename__ = 'users'

    first_name = db.Column(db.String(100), nullable=False)
    last_name = db.Column(db.String(100), nullable=False)
    email = db.Column(db.String(255), unique=True, nullable=False)
    password = db.Column(db.String(255), nullable=False)  # bcrypt hash
    role = db.Column(enum_type(UserRole), default=UserRole.STUDENT, server_default=UserRole.STUDENT.value)
    avatar = db.Column(db.String(255))
    bio = db.Column(db.Text)
    institution = db.Column(db.String(255))
    major = db.Column(db.String(100))
    year_of_study = db.Column(db.String(50))
    interests = db.Column(db.JSON, default=list, server_default=text("'[]'"))
    email_verified = db.Column(db.Boolean, default=False, server_default=false())
    is_active = db.Column(db.Boolean, default=True, server_default=true())
    last_login = db.Column(db.DateTime)

    __relations__ = (
        Relation('preferences', 'UserPreference', C.ONE_TO_ONE, 'user_id', back_populates='user'),
        Relation('subject_links', 'UserSubject', C.ONE_TO_MANY, 'user_id', back_populates='user'),
        Relation('subjects', 'Subject', C.MANY_TO_MANY, 'user_id',
                 secondary='user_subjects', secondary_key='subject_id'),
        Relation('owned_rooms', 'StudyRoom', C.ONE_TO_MANY, 'created_by', back_populates='creator'),
        Relation('room_memberships', 'UserStudyRoom', C.ONE_TO_MANY, 'user_id', back_populates='user'),
        Relation('joined_rooms', 'StudyRoom', C.MANY_TO_MANY, 'user_id',
                 secondary='user_study_rooms', secondary_key='room_id'),
        Relation('presences', 'UserPresence', C.ONE_TO_MANY, 'user_id', back_populates='user'),
        Relation('messages', 'Message', C.ONE_TO_MANY, 'sender_id', back_populates='sender'),
        Relation('sent_direct_messages', 'DirectMessage', C.ONE_TO_MANY, 'sender_id', back_populates='sender'),
        Relation('received_direct_messages', 'DirectMessage', C.ONE_TO_MANY, 'receiver_id',
                 back_populates='receiver'),
        Relation('created_events', 'Event', C.ONE_TO_MANY, 'created_by', back_populates='creator'),
        Relation('event_responses', 'UserEvent', C.ONE_TO_MANY, 'user_id', back_populates='user'),
        Relation('events', 'Event', C.MANY_TO_MANY, 'user_id',
                 secondary='user_events', secondary_key='event_id'),
        Relation('notifications', 'Notification', C.ONE_TO_MANY, 'user_id', back_populates='user',
                 order_by='created_at'),
        Relation('study_tasks', 'StudyTask', C.ONE_TO_MANY, 'user_id', back_populates='user'),
        Relation('resources', 'Resource', C.ONE_TO_MANY, 'uploaded_by', back_populates='uploader'),
        Relation('reviewed_resources', 'Resource', C.ONE_TO_MANY, 'reviewed_by', back_populates='reviewer',
                 on_delete=OnDelete.SET_NULL),
        Relation('flashcard_decks', 'FlashcardDeck', C.ONE_TO_MANY, 'user_id', back_populates='owner'),
        Relation('shared_decks_received', 'SharedFlashcardDeck', C.ONE_TO_MANY, 'shared_with_id',
                 back_populates='shared_with'),
        Relation('shared_decks_sent', 'SharedFlashcardDeck', C.ONE_TO_MANY, 'shared_by_id',
                 back_populates='shared_by'),
        Relation('card_progress', 'UserCardProgress', C.ONE_TO_MANY, 'user_id', back_populates='user'),
        Relation('sent_friend_requests', 'Friendship', C.ONE_TO_MANY, 'sender_id', back_populates='sender'),
        Relation('received_friend_requests', 'Friendship', C.ONE_TO_MANY, 'receiver_id',
                 back_populates='receiver'),
        # Accepted friendships, seen from either end
        Relation('friends', 'User', C.MANY_TO_MANY, 'sender_id',
                 secondary='friendships', secondary_key='receiver_id',
                 secondary_filter=(('status', 'accepted'),)),
        Relation('friends_of', 'User', C.MANY_TO_MANY, 'receiver_id',
                 secondary='friendships', secondary_key='sender_id',
                 secondary_filter=(('status', 'accepted'),)),
    )

    @validates('first_name')
    def _validate_first_name(self, key, value):
        return require(key, value, 'First name is required')

    @validates('last_name')
    def _validate_last_name(self, key, value):
        return require(key, value, 'Last name is required')

    @validates('email')
    def _validate_email(self, key, value):
        require(key, value, 'Email is required')
        result = validate_email(value)
        if not result.is_valid:
            raise ValueError(result.error_message)
        return result.sanitized_value

    def set_password(self, raw_password, rounds=None):
        """Hash and store a new password"""
        require('password', raw_password, 'Password is required')
        if not MIN_PASSWORD_LENGTH <= len(raw_password) <= MAX_PASSWORD_LENGTH:
            raise ValueError('Password must be at least 6 characters long')
        self.password = hash_password(raw_password, rounds=rounds)

    def check_password(self, raw_password):
        return verify_password(raw_password, self.password)

    @property
    def full_name(self):
        return f'{self.first_name} {self.last_name}'

    def all_friends(self):
        """Accepted friends regardless of who sent the request"""
        seen = {}
        for friend in list(self.friends) + list(self.friends_of):
            seen[friend.id] = friend
        return list(seen.values())

    def update_last_login(self):
        """Update the last login timestamp"""
        self.last_login = datetime.utcnow()

    def to_dict(self):
        """Convert model to dictionary; the password hash is never included."""
        return {
            'id': str(self.id),
            'first_name': self.first_name,
            'last_name': self.last_name,
            'email': self.email,
            'role': UserRole(self.role).value if self.role else None,
            'avatar': self.avatar,
            'bio': self.bio,
            'institution': self.institution,
            'major': self.major,
            'year_of_study': self.year_of_study,
            'interests': self.interests or [],
            'email_verified': self.email_verified,
            'is_active': self.is_active,
            'last_login': self._iso(self.last_login),
            'created_at': self._iso(self.created_at),
            'updated_at': self._iso(self.updated_at),
        }


@register
class UserPreference(BaseModel, db.Model):
    """Per-user notification and display settings, one row per user"""
    __tablename__ = 'user_preferences'

    user_id = db.Column(db.Uuid, db.ForeignKey('users.id', ondelete='CASCADE'), nullable=False)
    notification_email = db.Column(db.Boolean, default=True, server_default=true())
    notification_push = db.Column(db.Boolean, default=True, server_default=true())
    theme = db.Column(db.String(50), default='light', server_default='light')
    language = db.Column(db.String(50), default='en', server_default='en')
    timezone = db.Column(db.String(100), default='UTC', server_default='UTC')

    __table_args__ = (
        db.Index('unique_user_preference', 'user_id', unique=True),
    )

    __relations__ = (
        Relation('user', 'User', C.MANY_TO_ONE, 'user_id', back_populates='preferences'),
    )
