"""
Input Validation Utilities

FLOW OVERVIEW
- validate_required(value)
  • Reject None, empty or whitespace-only strings, empty collections.
- validate_email(email)
  • Syntax checks; returns a trimmed, lowercased value.
- require(field, value, message)
  • Model-side helper: raise RequiredFieldError(field, message) when validate_required fails.

Results are returned as ValidationResult so callers outside the models can report
errors without exceptions; the models use require() and raise.
"""

import re
from typing import Any, Optional
from dataclasses import dataclass

from .errors import RequiredFieldError


@dataclass
class ValidationResult:
    """Result of validation operation"""
    is_valid: bool
    error_message: Optional[str] = None
    sanitized_value: Any = None


EMAIL_PATTERN = re.compile(
    r'^[a-zA-Z0-9.!#$%&\'*+/=?^_`{|}~-]+@[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?(?:\.[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?)*$'
)


def validate_required(value, message='This field is required') -> ValidationResult:
    """Check that a value is present and not empty"""
    if value is None:
        return ValidationResult(False, message)
    if isinstance(value, str):
        if value.strip() == '':
            return ValidationResult(False, message)
        return ValidationResult(True, sanitized_value=value)
    if isinstance(value, (list, tuple, dict, set)) and len(value) == 0:
        return ValidationResult(False, message)
    return ValidationResult(True, sanitized_value=value)


def validate_email(email) -> ValidationResult:
    """
    Validate an email address

    Args:
        email: Email address to validate

    Returns:
        ValidationResult with validation status and the lowercased address
    """
    if not email or not isinstance(email, str):
        return ValidationResult(False, "Email is required")

    email = email.strip()
    if email == "":
        return ValidationResult(False, "Email is required")

    # RFC 5321 limit
    if len(email) > 254:
        return ValidationResult(False, "Email address too long (max 254 characters)")

    if not EMAIL_PATTERN.match(email) or '..' in email:
        return ValidationResult(False, "Please provide a valid email address")

    return ValidationResult(True, sanitized_value=email.lower())


def require(field, value, message):
    """Return value unchanged or raise RequiredFieldError with the field's fixed message"""
    result = validate_required(value, message)
    if not result.is_valid:
        raise RequiredFieldError(field, result.error_message)
    return value
