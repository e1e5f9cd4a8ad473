"""
Event Models

Scheduled room events and the per-user RSVP join (UserEvent).
"""

from sqlalchemy import text
from sqlalchemy.orm import validates

from .base import BaseModel
from .database import db
from .enums import AttendanceStatus, enum_type
from .registry import Cardinality as C, Relation, register
from ..utils.validators import require


@register
class Event(BaseModel, db.Model):
    __tablename__ = 'events'

    title = db.Column(db.String(100), nullable=False)
    description = db.Column(db.Text)
    date = db.Column(db.DateTime, nullable=False)
    duration = db.Column(db.Integer, default=60, server_default=text('60'))  # minutes
    room_id = db.Column(db.Uuid, db.ForeignKey('study_rooms.id', ondelete='CASCADE'), nullable=False)
    created_by = db.Column(db.Uuid, db.ForeignKey('users.id', ondelete='CASCADE'), nullable=False)

    __relations__ = (
        Relation('room', 'StudyRoom', C.MANY_TO_ONE, 'room_id', back_populates='events'),
        Relation('creator', 'User', C.MANY_TO_ONE, 'created_by', back_populates='created_events'),
        Relation('responses', 'UserEvent', C.ONE_TO_MANY, 'event_id', back_populates='event'),
        Relation('participants', 'User', C.MANY_TO_MANY, 'event_id',
                 secondary='user_events', secondary_key='user_id'),
    )

    @validates('title')
    def _validate_title(self, key, value):
        return require(key, value, 'Event title is required')

    @validates('date')
    def _validate_date(self, key, value):
        return require(key, value, 'Event date is required')


@register
class UserEvent(BaseModel, db.Model):
    """A user's response to an event"""
    __tablename__ = 'user_events'

    user_id = db.Column(db.Uuid, db.ForeignKey('users.id', ondelete='CASCADE'), nullable=False)
    event_id = db.Column(db.Uuid, db.ForeignKey('events.id', ondelete='CASCADE'), nullable=False)
    status = db.Column(enum_type(AttendanceStatus), default=AttendanceStatus.ATTENDING,
                       server_default=AttendanceStatus.ATTENDING.value)

    __table_args__ = (
        db.UniqueConstraint('user_id', 'event_id', name='unique_user_event'),
    )

    __relations__ = (
        Relation('user', 'User', C.MANY_TO_ONE, 'user_id', back_populates='event_responses'),
        Relation('event', 'Event', C.MANY_TO_ONE, 'event_id', back_populates='responses'),
    )
