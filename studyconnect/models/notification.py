"""
Notification Model

Stored notifications only; delivery happens elsewhere. related_id/related_type
point loosely at the record the notification is about (no foreign key).
"""

from sqlalchemy import false

from .base import BaseModel
from .database import db
from .enums import NotificationType, enum_type
from .registry import Cardinality as C, Relation, register


@register
class Notification(BaseModel, db.Model):
    __tablename__ = 'notifications'

    user_id = db.Column(db.Uuid, db.ForeignKey('users.id', ondelete='CASCADE'), nullable=False)
    message = db.Column(db.String(255), nullable=False)
    type = db.Column(enum_type(NotificationType), default=NotificationType.INFO,
                     server_default=NotificationType.INFO.value)
    link = db.Column(db.String(255))
    is_read = db.Column(db.Boolean, default=False, server_default=false())
    related_id = db.Column(db.Uuid)
    related_type = db.Column(db.String(50))

    __relations__ = (
        Relation('user', 'User', C.MANY_TO_ONE, 'user_id', back_populates='notifications'),
    )

    @classmethod
    def unread_for(cls, user_id):
        """Unread notifications of a user, newest first"""
        return cls.query.filter_by(user_id=user_id, is_read=False).order_by(cls.created_at.desc()).all()

    def to_dict(self):
        return {
            'id': str(self.id),
            'user_id': str(self.user_id),
            'message': self.message,
            'type': NotificationType(self.type).value if self.type else None,
            'link': self.link,
            'is_read': self.is_read,
            'related_id': str(self.related_id) if self.related_id else None,
            'related_type': self.related_type,
            'created_at': self._iso(self.created_at),
        }
