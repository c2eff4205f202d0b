"""Classify chat replies to a hosting prompt."""

from typing import Optional

from app.domain.reply import ReplyKind

YES_I_CAN = "Yes I can host the group"
NO_I_CAN_NOT = "No I can not host this week"

_REPLIES = {
    YES_I_CAN.lower(): ReplyKind.ACCEPT,
    NO_I_CAN_NOT.lower(): ReplyKind.DECLINE,
}


def classify_reply(text: Optional[str]) -> ReplyKind:
    """Map a message to accept/decline; anything else is OTHER."""
    if not text:
        return ReplyKind.OTHER
    normalized = " ".join(text.split()).lower()
    return _REPLIES.get(normalized, ReplyKind.OTHER)
