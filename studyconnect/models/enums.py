"""
Enumerated Domains

FLOW OVERVIEW
- Each enumerated column has a closed str-valued Enum here. The member value IS
  the stored string; `stored_values()` is the mapping used by the column type.
- `enum_type(cls)` builds the column type under its fixed storage name
  (native ENUM on PostgreSQL, VARCHAR sized to the longest value elsewhere).
- ENUM_DOMAINS lists every storage name with its Enum. Adding a member here
  without a migration that widens the stored domain is a schema drift that the
  schema tests report.

Domains only ever grow. Dropping a value needs a widen / migrate data / narrow
sequence of migrations, never a direct narrow.
"""

import enum

from .database import db


class UserRole(str, enum.Enum):
    STUDENT = 'student'
    TEACHER = 'teacher'
    ADMIN = 'admin'


class ProficiencyLevel(str, enum.Enum):
    BEGINNER = 'beginner'
    INTERMEDIATE = 'intermediate'
    ADVANCED = 'advanced'
    EXPERT = 'expert'


class MembershipRole(str, enum.Enum):
    OWNER = 'owner'
    MODERATOR = 'moderator'
    MEMBER = 'member'


class AttendanceStatus(str, enum.Enum):
    ATTENDING = 'attending'
    MAYBE = 'maybe'
    DECLINED = 'declined'


class FriendshipStatus(str, enum.Enum):
    PENDING = 'pending'
    ACCEPTED = 'accepted'
    REJECTED = 'rejected'


class NotificationType(str, enum.Enum):
    INFO = 'info'
    SUCCESS = 'success'
    WARNING = 'warning'
    ERROR = 'error'


class PresenceStatus(str, enum.Enum):
    ACTIVE = 'active'
    AWAY = 'away'
    BUSY = 'busy'


class ResourceType(str, enum.Enum):
    PDF = 'PDF'
    DOCUMENT = 'Document'
    LINK = 'Link'
    IMAGE = 'Image'
    VIDEO = 'Video'
    SPREADSHEET = 'Spreadsheet'
    PRESENTATION = 'Presentation'
    ARCHIVE = 'Archive'
    TEXT = 'Text'
    CODE = 'Code'
    AUDIO = 'Audio'
    OTHER = 'Other'


class ResourceStatus(str, enum.Enum):
    PENDING = 'pending'
    APPROVED = 'approved'
    REJECTED = 'rejected'


# storage name -> Enum
ENUM_DOMAINS = {
    'enum_users_role': UserRole,
    'enum_user_subjects_proficiency_level': ProficiencyLevel,
    'enum_user_study_rooms_role': MembershipRole,
    'enum_user_events_status': AttendanceStatus,
    'enum_friendships_status': FriendshipStatus,
    'enum_notifications_type': NotificationType,
    'enum_user_presence_status': PresenceStatus,
    'enum_resources_type': ResourceType,
    'enum_resources_status': ResourceStatus,
}

_STORAGE_NAMES = {enum_cls: name for name, enum_cls in ENUM_DOMAINS.items()}


def stored_values(enum_cls):
    """Stored string for every member, in declaration order"""
    return [member.value for member in enum_cls]


def enum_type(enum_cls):
    """Column type for an enumerated domain"""
    return db.Enum(
        enum_cls,
        name=_STORAGE_NAMES[enum_cls],
        values_callable=stored_values,
        validate_strings=True,
    )
