"""
Authentication Utilities

Password hashing for stored credentials. Hashes are bcrypt, matching the rows
already in the users table, so existing accounts keep verifying.
"""

import bcrypt

DEFAULT_ROUNDS = 12


def hash_password(password, rounds=None):
    """Hash a password using bcrypt"""
    salt = bcrypt.gensalt(rounds=rounds or DEFAULT_ROUNDS)
    return bcrypt.hashpw(password.encode('utf-8'), salt).decode('utf-8')


def verify_password(password, password_hash):
    """Verify a password against its hash"""
    if not password or not password_hash:
        return False
    try:
        return bcrypt.checkpw(password.encode('utf-8'), password_hash.encode('utf-8'))
    except ValueError:
        # Stored value is not a bcrypt hash
        return False
