"""
Message Models

Room messages (Message) and one-to-one messages between users (DirectMessage).
"""

from sqlalchemy import false

from .base import BaseModel
from .database import db
from .registry import Cardinality as C, Relation, register


@register
class Message(BaseModel, db.Model):
    __tablename__ = 'messages'

    content = db.Column(db.Text, nullable=False)
    room_id = db.Column(db.Uuid, db.ForeignKey('study_rooms.id', ondelete='CASCADE'), nullable=False)
    sender_id = db.Column(db.Uuid, db.ForeignKey('users.id', ondelete='CASCADE'), nullable=False)
    is_system = db.Column(db.Boolean, default=False, server_default=false())

    __table_args__ = (
        db.Index('ix_messages_room_id', 'room_id'),
        db.Index('ix_messages_sender_id', 'sender_id'),
    )

    __relations__ = (
        Relation('sender', 'User', C.MANY_TO_ONE, 'sender_id', back_populates='messages'),
        Relation('room', 'StudyRoom', C.MANY_TO_ONE, 'room_id', back_populates='messages'),
    )


@register
class DirectMessage(BaseModel, db.Model):
    __tablename__ = 'direct_messages'

    content = db.Column(db.Text, nullable=False)
    sender_id = db.Column(db.Uuid, db.ForeignKey('users.id', ondelete='CASCADE'), nullable=False)
    receiver_id = db.Column(db.Uuid, db.ForeignKey('users.id', ondelete='CASCADE'), nullable=False)
    is_read = db.Column(db.Boolean, default=False, server_default=false())

    __relations__ = (
        Relation('sender', 'User', C.MANY_TO_ONE, 'sender_id', back_populates='sent_direct_messages'),
        Relation('receiver', 'User', C.MANY_TO_ONE, 'receiver_id', back_populates='received_direct_messages'),
    )

    def mark_read(self):
        self.is_read = True
