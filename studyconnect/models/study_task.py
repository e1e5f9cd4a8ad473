"""
Study Task Model
"""

from sqlalchemy import false

from .base import BaseModel
from .database import db
from .registry import Cardinality as C, Relation, register


@register
class StudyTask(BaseModel, db.Model):
    """Personal to-do item; times are in minutes"""
    __tablename__ = 'study_tasks'

    user_id = db.Column(db.Uuid, db.ForeignKey('users.id', ondelete='CASCADE'), nullable=False)
    title = db.Column(db.String(255), nullable=False)
    description = db.Column(db.Text)
    completed = db.Column(db.Boolean, default=False, server_default=false())
    due_date = db.Column(db.DateTime)
    priority = db.Column(db.String(255))
    estimated_time = db.Column(db.Integer)
    actual_time = db.Column(db.Integer)

    __relations__ = (
        Relation('user', 'User', C.MANY_TO_ONE, 'user_id', back_populates='study_tasks'),
    )
