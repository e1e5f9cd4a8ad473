"""
Friendship Model

FLOW OVERVIEW
- A friendship is a directed request from sender to receiver with a status.
- (sender_id, receiver_id) is unique as an ordered pair; the reverse pair is a
  separate row.
- between(a, b): look up the request in either direction.
"""

from datetime import datetime

from sqlalchemy import func, or_, and_

from .base import BaseModel
from .database import db
from .enums import FriendshipStatus, enum_type
from .registry import Cardinality as C, Relation, register


@register
class Friendship(BaseModel, db.Model):
    __tablename__ = 'friendships'

    sender_id = db.Column(db.Uuid, db.ForeignKey('users.id', ondelete='CASCADE'), nullable=False)
    receiver_id = db.Column(db.Uuid, db.ForeignKey('users.id', ondelete='CASCADE'), nullable=False)
    status = db.Column(enum_type(FriendshipStatus), default=FriendshipStatus.PENDING,
                       server_default=FriendshipStatus.PENDING.value)
    requested_at = db.Column(db.DateTime, default=datetime.utcnow, server_default=func.now())

    __table_args__ = (
        db.Index('friendships_sender_id_receiver_id', 'sender_id', 'receiver_id', unique=True),
    )

    __relations__ = (
        Relation('sender', 'User', C.MANY_TO_ONE, 'sender_id', back_populates='sent_friend_requests'),
        Relation('receiver', 'User', C.MANY_TO_ONE, 'receiver_id', back_populates='received_friend_requests'),
    )

    def __repr__(self):
        return f'<Friendship {self.sender_id} -> {self.receiver_id} {self.status}>'

    @classmethod
    def between(cls, user_a_id, user_b_id):
        """Friendship row linking two users in either direction, or None"""
        return cls.query.filter(
            or_(
                and_(cls.sender_id == user_a_id, cls.receiver_id == user_b_id),
                and_(cls.sender_id == user_b_id, cls.receiver_id == user_a_id),
            )
        ).first()

    def to_dict(self):
        return {
            'id': str(self.id),
            'sender_id': str(self.sender_id),
            'receiver_id': str(self.receiver_id),
            'status': FriendshipStatus(self.status).value if self.status else None,
            'requested_at': self._iso(self.requested_at),
            'updated_at': self._iso(self.updated_at),
        }
