"""
Core module for exceptions and config validation
"""
from .exceptions import (
    ConfigurationError,
    HostRotationError,
    SelectionExhaustionError,
    UnknownMemberError,
)

__all__ = [
    'ConfigurationError',
    'HostRotationError',
    'SelectionExhaustionError',
    'UnknownMemberError',
]
