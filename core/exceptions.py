"""
Custom exceptions for the application
"""
from typing import Optional


class HostRotationError(Exception):
    """Base exception for the hosting rotation bot"""

    def __init__(self, message: str, error_code: Optional[str] = None):
        self.message = message
        self.error_code = error_code
        super().__init__(self.message)


class ConfigurationError(HostRotationError):
    """Configuration error"""
    pass


class SelectionExhaustionError(HostRotationError):
    """Every member declined within the same round"""

    def __init__(self, message: str = "Every member declined this round"):
        super().__init__(message, error_code="selection_exhausted")


class UnknownMemberError(HostRotationError):
    """Member is not part of the configured roster"""

    def __init__(self, username: str):
        self.username = username
        super().__init__(f"Member @{username} is not in the roster", error_code="unknown_member")
