"""
Database Models Package

FLOW OVERVIEW
- Centralizes the SQLAlchemy DB instance and model imports.
- Importing the package imports every model module, then resolves the
  relationship registry exactly once.
- Exposes: db, every entity, the enumerated domains and the registry.
"""

from .database import db
from .enums import (
    ENUM_DOMAINS,
    AttendanceStatus,
    FriendshipStatus,
    MembershipRole,
    NotificationType,
    PresenceStatus,
    ProficiencyLevel,
    ResourceStatus,
    ResourceType,
    UserRole,
)
from .user import User, UserPreference
from .subject import Subject, UserSubject
from .study_room import StudyRoom, UserStudyRoom, UserPresence
from .message import Message, DirectMessage
from .event import Event, UserEvent
from .friendship import Friendship
from .notification import Notification
from .study_task import StudyTask
from .resource import Resource
from .flashcard import FlashcardDeck, FlashcardCard, SharedFlashcardDeck, UserCardProgress
from .registry import Cardinality, OnDelete, Relation, relations

relations.resolve()

__all__ = [
    'db',
    'relations',
    'Relation',
    'Cardinality',
    'OnDelete',
    'ENUM_DOMAINS',
    'UserRole',
    'ProficiencyLevel',
    'MembershipRole',
    'AttendanceStatus',
    'FriendshipStatus',
    'NotificationType',
    'PresenceStatus',
    'ResourceType',
    'ResourceStatus',
    'User',
    'UserPreference',
    'Subject',
    'UserSubject',
    'StudyRoom',
    'UserStudyRoom',
    'UserPresence',
    'Message',
    'DirectMessage',
    'Event',
    'UserEvent',
    'Friendship',
    'Notification',
    'StudyTask',
    'Resource',
    'FlashcardDeck',
    'FlashcardCard',
    'SharedFlashcardDeck',
    'UserCardProgress',
]
