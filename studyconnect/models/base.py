"""
Model Mixins

Every table carries a client-generated UUID primary key and created_at /
updated_at timestamps.
"""

import uuid
from datetime import datetime

from .database import db


class UUIDPrimaryKeyMixin:
    id = db.Column(db.Uuid, primary_key=True, default=uuid.uuid4)


class TimestampMixin:
    created_at = db.Column(db.DateTime, default=datetime.utcnow, nullable=False)
    updated_at = db.Column(db.DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)


class BaseModel(UUIDPrimaryKeyMixin, TimestampMixin):
    """Common columns and helpers for StudyConnect models"""

    def __repr__(self):
        return f'<{type(self).__name__} {self.id}>'

    def _iso(self, value):
        return value.isoformat() if value else None
