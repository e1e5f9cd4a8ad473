"""
Utilities Package

This package contains utility functions and helper modules.
"""

from . import auth_utils
from . import validators
from . import errors
from . import logging_utils

__all__ = [
    'auth_utils',
    'validators',
    'errors',
    'logging_utils'
]
