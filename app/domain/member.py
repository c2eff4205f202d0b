"""Member model for the hosting rotation."""

from dataclasses import dataclass
from typing import Any, Dict, Optional


def handle_key(username: Optional[str]) -> str:
    """Comparable form of a Telegram handle (case-insensitive, no '@')."""
    return (username or "").strip().lstrip("@").lower()


@dataclass(frozen=True)
class Member:
    """A roster member identified by their Telegram username."""

    username: str

    @property
    def key(self) -> str:
        return handle_key(self.username)

    @property
    def mention(self) -> str:
        return f"@{self.username}"

    def matches(self, username: Optional[str]) -> bool:
        """Check whether an incoming sender handle is this member."""
        return bool(username) and handle_key(username) == self.key


@dataclass
class LedgerEntry:
    """Hosting history of a single member."""

    member: Member
    weeks_since_hosted: int = 0

    def to_dict(self) -> Dict[str, Any]:
        """Convert entry to dictionary."""
        return {
            "username": self.member.username,
            "weeks_since_hosted": self.weeks_since_hosted,
        }
