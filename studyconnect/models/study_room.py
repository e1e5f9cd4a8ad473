"""
Study Room Models

StudyRoom, its membership join (UserStudyRoom) and per-room presence
(UserPresence).
"""

from datetime import datetime

from sqlalchemy import func, true, text
from sqlalchemy.orm import validates

from .base import BaseModel
from .database import db
from .enums import MembershipRole, PresenceStatus, enum_type
from .registry import Cardinality as C, OnDelete, Relation, register
from ..utils.validators import require


@register
class StudyRoom(BaseModel, db.Model):
    __tablename__ = 'study_rooms'

    name = db.Column(db.String(100), nullable=False)
    description = db.Column(db.Text)
    image = db.Column(db.String(255))
    total_members = db.Column(db.Integer, default=1, server_default=text('1'))
    active_members = db.Column(db.Integer, default=0, server_default=text('0'))
    last_active = db.Column(db.DateTime, default=datetime.utcnow, server_default=func.now())
    is_active = db.Column(db.Boolean, default=True, server_default=true())
    created_by = db.Column(db.Uuid, db.ForeignKey('users.id', ondelete='CASCADE'), nullable=False)
    subject_id = db.Column(db.Uuid, db.ForeignKey('subjects.id', ondelete='SET NULL'))

    __relations__ = (
        Relation('creator', 'User', C.MANY_TO_ONE, 'created_by', back_populates='owned_rooms'),
        Relation('subject', 'Subject', C.MANY_TO_ONE, 'subject_id', back_populates='study_rooms'),
        Relation('memberships', 'UserStudyRoom', C.ONE_TO_MANY, 'room_id', back_populates='room'),
        Relation('members', 'User', C.MANY_TO_MANY, 'room_id',
                 secondary='user_study_rooms', secondary_key='user_id'),
        Relation('presences', 'UserPresence', C.ONE_TO_MANY, 'room_id', back_populates='room'),
        Relation('messages', 'Message', C.ONE_TO_MANY, 'room_id', back_populates='room',
                 order_by='created_at'),
        Relation('events', 'Event', C.ONE_TO_MANY, 'room_id', back_populates='room', order_by='date'),
        Relation('resources', 'Resource', C.ONE_TO_MANY, 'room_id', back_populates='room',
                 on_delete=OnDelete.SET_NULL),
    )

    @validates('name')
    def _validate_name(self, key, value):
        return require(key, value, 'Study room name is required')


@register
class UserStudyRoom(BaseModel, db.Model):
    """Membership of a user in a study room"""
    __tablename__ = 'user_study_rooms'

    user_id = db.Column(db.Uuid, db.ForeignKey('users.id', ondelete='CASCADE'), nullable=False)
    room_id = db.Column(db.Uuid, db.ForeignKey('study_rooms.id', ondelete='CASCADE'), nullable=False)
    role = db.Column(enum_type(MembershipRole), default=MembershipRole.MEMBER,
                     server_default=MembershipRole.MEMBER.value)
    joined_at = db.Column(db.DateTime, default=datetime.utcnow, server_default=func.now())
    last_active = db.Column(db.DateTime, default=datetime.utcnow, server_default=func.now())

    __table_args__ = (
        db.UniqueConstraint('user_id', 'room_id', name='unique_user_study_room'),
    )

    __relations__ = (
        Relation('user', 'User', C.MANY_TO_ONE, 'user_id', back_populates='room_memberships'),
        Relation('room', 'StudyRoom', C.MANY_TO_ONE, 'room_id', back_populates='memberships'),
    )


@register
class UserPresence(BaseModel, db.Model):
    """Online state of a user inside one room"""
    __tablename__ = 'user_presence'

    user_id = db.Column(db.Uuid, db.ForeignKey('users.id', ondelete='CASCADE'), nullable=False)
    room_id = db.Column(db.Uuid, db.ForeignKey('study_rooms.id', ondelete='CASCADE'), nullable=False)
    is_online = db.Column(db.Boolean, default=True, server_default=true())
    last_active = db.Column(db.DateTime, default=datetime.utcnow, server_default=func.now())
    status = db.Column(enum_type(PresenceStatus), default=PresenceStatus.ACTIVE,
                       server_default=PresenceStatus.ACTIVE.value)

    __table_args__ = (
        db.Index('user_presence_user_id_room_id', 'user_id', 'room_id', unique=True),
        db.Index('user_presence_room_id_is_online', 'room_id', 'is_online'),
    )

    __relations__ = (
        Relation('user', 'User', C.MANY_TO_ONE, 'user_id', back_populates='presences'),
        Relation('room', 'StudyRoom', C.MANY_TO_ONE, 'room_id', back_populates='presences'),
    )

    def touch(self, status=None):
        """Mark the user as seen now, optionally changing status"""
        self.last_active = datetime.utcnow()
        self.is_online = True
        if status is not None:
            self.status = status
