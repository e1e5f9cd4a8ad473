"""
Subject Models

Subjects form the catalogue users study or teach. UserSubject links a user to a
subject with a proficiency level.
"""

from sqlalchemy import false
from sqlalchemy.orm import validates

from .base import BaseModel
from .database import db
from .enums import ProficiencyLevel, enum_type
from .registry import Cardinality as C, OnDelete, Relation, register
from ..utils.validators import require


@register
class Subject(BaseModel, db.Model):
    __tablename__ = 'subjects'

    name = db.Column(db.String(100), unique=True, nullable=False)
    category = db.Column(db.String(100), nullable=False)
    description = db.Column(db.Text)
    icon = db.Column(db.String(255))

    __relations__ = (
        Relation('user_links', 'UserSubject', C.ONE_TO_MANY, 'subject_id', back_populates='subject'),
        Relation('users', 'User', C.MANY_TO_MANY, 'subject_id',
                 secondary='user_subjects', secondary_key='user_id'),
        Relation('study_rooms', 'StudyRoom', C.ONE_TO_MANY, 'subject_id', back_populates='subject',
                 on_delete=OnDelete.SET_NULL),
        Relation('flashcard_decks', 'FlashcardDeck', C.ONE_TO_MANY, 'subject_id',
                 back_populates='subject_detail', on_delete=OnDelete.SET_NULL),
        Relation('resources', 'Resource', C.ONE_TO_MANY, 'subject_id', back_populates='subject',
                 on_delete=OnDelete.SET_NULL),
    )

    @validates('name')
    def _validate_name(self, key, value):
        return require(key, value, 'Subject name is required')

    def to_dict(self):
        return {
            'id': str(self.id),
            'name': self.name,
            'category': self.category,
            'description': self.description,
            'icon': self.icon,
        }


@register
class UserSubject(BaseModel, db.Model):
    __tablename__ = 'user_subjects'

    user_id = db.Column(db.Uuid, db.ForeignKey('users.id', ondelete='CASCADE'), nullable=False)
    subject_id = db.Column(db.Uuid, db.ForeignKey('subjects.id', ondelete='CASCADE'), nullable=False)
    proficiency_level = db.Column(
        enum_type(ProficiencyLevel),
        default=ProficiencyLevel.BEGINNER,
        server_default=ProficiencyLevel.BEGINNER.value,
    )
    is_teaching = db.Column(db.Boolean, default=False, server_default=false())

    __table_args__ = (
        db.UniqueConstraint('user_id', 'subject_id', name='unique_user_subject'),
    )

    __relations__ = (
        Relation('user', 'User', C.MANY_TO_ONE, 'user_id', back_populates='subject_links'),
        Relation('subject', 'Subject', C.MANY_TO_ONE, 'subject_id', back_populates='user_links'),
    )
