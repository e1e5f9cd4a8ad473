"""
Error Types

FLOW OVERVIEW
- Constraint violations (unique, foreign key, not-null) are NOT wrapped: callers
  receive sqlalchemy.exc.IntegrityError exactly as the engine reported it.
- RequiredFieldError: raised by model validators with a fixed message per field.
- MigrationError / IrreversibleMigrationError / EnumNarrowingError: raised by the
  migration log and its runner; a failed step halts the run.
- RelationshipResolutionError: raised while wiring the relationship registry.
"""


class StudyConnectError(Exception):
    """Base class for all data-layer errors"""


class RequiredFieldError(StudyConnectError, ValueError):
    """A required field was missing or empty"""

    def __init__(self, field, message):
        super().__init__(message)
        self.field = field
        self.message = message


class MigrationError(StudyConnectError):
    """A migration step failed; the run stopped at `revision`"""

    def __init__(self, revision, cause):
        super().__init__(f"Migration {revision} failed: {cause}")
        self.revision = revision
        self.cause = cause


class IrreversibleMigrationError(MigrationError):
    """Raised by the downgrade of a step that cannot be safely inverted"""

    def __init__(self, revision, reason):
        super().__init__(revision, f"cannot be reverted: {reason}")
        self.reason = reason


class EnumNarrowingError(StudyConnectError):
    """An enum domain change would drop existing values"""

    def __init__(self, enum_name, removed):
        removed = sorted(removed)
        super().__init__(
            f"Enum {enum_name} may only be widened; refusing to drop {', '.join(removed)}"
        )
        self.enum_name = enum_name
        self.removed = removed


class RelationshipResolutionError(StudyConnectError):
    """A declared relationship could not be wired"""
