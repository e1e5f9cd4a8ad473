"""
Resource Model

Shared study material: an uploaded file or an external link, with a review
workflow (pending / approved / rejected).
"""

from datetime import datetime

from sqlalchemy.orm import validates

from .base import BaseModel
from .database import db
from .enums import ResourceStatus, ResourceType, enum_type
from .registry import Cardinality as C, Relation, register
from ..utils.validators import require


@register
class Resource(BaseModel, db.Model):
    __tablename__ = 'resources'

    title = db.Column(db.String(100), nullable=False)
    description = db.Column(db.Text)
    type = db.Column(enum_type(ResourceType), default=ResourceType.OTHER, server_default=ResourceType.OTHER.value)
    url = db.Column(db.String(255))
    file_path = db.Column(db.String(255))
    file_size = db.Column(db.Integer)
    original_filename = db.Column(db.String(255))
    uploaded_by = db.Column(db.Uuid, db.ForeignKey('users.id', ondelete='CASCADE'), nullable=False)
    subject_id = db.Column(db.Uuid, db.ForeignKey('subjects.id', ondelete='SET NULL'))
    room_id = db.Column(db.Uuid, db.ForeignKey('study_rooms.id', ondelete='SET NULL'))
    status = db.Column(enum_type(ResourceStatus), default=ResourceStatus.PENDING,
                       server_default=ResourceStatus.PENDING.value, nullable=False)
    reviewed_by = db.Column(db.Uuid, db.ForeignKey('users.id', ondelete='SET NULL'))
    reviewed_at = db.Column(db.DateTime)
    review_notes = db.Column(db.Text)

    __relations__ = (
        Relation('uploader', 'User', C.MANY_TO_ONE, 'uploaded_by', back_populates='resources'),
        Relation('reviewer', 'User', C.MANY_TO_ONE, 'reviewed_by', back_populates='reviewed_resources'),
        Relation('subject', 'Subject', C.MANY_TO_ONE, 'subject_id', back_populates='resources'),
        Relation('room', 'StudyRoom', C.MANY_TO_ONE, 'room_id', back_populates='resources'),
    )

    @validates('title')
    def _validate_title(self, key, value):
        return require(key, value, 'Resource title is required')

    @property
    def is_link(self):
        return bool(self.url and self.url.strip())

    def review(self, reviewer, status, notes=None):
        """Record a review decision"""
        self.status = ResourceStatus(status)
        self.reviewed_by = reviewer.id
        self.reviewed_at = datetime.utcnow()
        self.review_notes = notes
