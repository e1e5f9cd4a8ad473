"""
Tests for Input Validation and Password Utilities
"""

import pytest

from studyconnect.utils.auth_utils import hash_password, verify_password
from studyconnect.utils.errors import RequiredFieldError
from studyconnect.utils.validators import ValidationResult, require, validate_email, validate_required


class TestEmailValidation:
    """Test email validation"""

    def test_valid_emails(self):
        """Test that valid email addresses pass validation"""
        valid_emails = [
            "test@example.com",
            "user.name@domain.co.uk",
            "user+tag@example.org",
            "user-name@subdomain.example.com",
            "user_name@example.com",
            "user123@example.com",
            "a@b.c",  # Minimal valid email
        ]

        for email in valid_emails:
            result = validate_email(email)
            assert result.is_valid, f"Email '{email}' should be valid: {result.error_message}"
            assert result.sanitized_value == email.lower()

    def test_invalid_emails(self):
        """Test that invalid email addresses fail validation"""
        invalid_emails = [
            "invalid-email",  # No @
            "@example.com",  # No local part
            "user@",  # No domain
            "user@.com",  # No domain name
            "user name@example.com",  # Space in local part
            "user@example..com",  # Double dots
            "user@-example.com",  # Leading dash in domain
            "user@example-.com",  # Trailing dash in domain
        ]

        for email in invalid_emails:
            result = validate_email(email)
            assert not result.is_valid, f"Email '{email}' should be invalid"
            assert result.error_message == "Please provide a valid email address"

    @pytest.mark.parametrize('email', [None, '', '   ', 42])
    def test_missing_email(self, email):
        result = validate_email(email)
        assert not result.is_valid
        assert result.error_message == "Email is required"

    def test_email_length_limit(self):
        result = validate_email('a' * 64 + '@' + 'b' * 63 + '.' + 'c' * 63 + '.' + 'd' * 63 + '.com')
        assert not result.is_valid
        assert 'too long' in result.error_message

    def test_email_normalization(self):
        result = validate_email('  Test.User@Example.COM ')
        assert result.is_valid
        assert result.sanitized_value == 'test.user@example.com'


class TestRequired:

    @pytest.mark.parametrize('value', [None, '', '  \t', [], {}])
    def test_missing_values(self, value):
        result = validate_required(value, 'Name is required')
        assert result == ValidationResult(False, 'Name is required')

    @pytest.mark.parametrize('value', ['x', 0, False, [1]])
    def test_present_values(self, value):
        result = validate_required(value)
        assert result.is_valid
        assert result.sanitized_value == value

    def test_require_raises_with_field_and_message(self):
        with pytest.raises(RequiredFieldError) as exc_info:
            require('title', ' ', 'Title is required')
        assert exc_info.value.field == 'title'
        assert str(exc_info.value) == 'Title is required'
        # still a ValueError for callers that only know the builtin
        assert isinstance(exc_info.value, ValueError)

    def test_require_returns_value_untouched(self):
        assert require('title', '  Algebra ', 'Title is required') == '  Algebra '


class TestPasswordHashing:

    def test_hash_and_verify(self):
        hashed = hash_password('TestPass123!', rounds=4)
        assert hashed != 'TestPass123!'
        assert hashed.startswith('$2')
        assert verify_password('TestPass123!', hashed)
        assert not verify_password('wrong', hashed)

    def test_salted(self):
        assert hash_password('same', rounds=4) != hash_password('same', rounds=4)

    @pytest.mark.parametrize('password,hashed', [
        ('', '$2b$04$abcdefghijklmnopqrstuu'),
        ('secret', ''),
        ('secret', None),
        ('secret', 'not-a-bcrypt-hash'),
    ])
    def test_verify_rejects_bad_input(self, password, hashed):
        assert verify_password(password, hashed) is False
