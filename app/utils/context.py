"""Context extraction utilities."""

from typing import Optional, Tuple

from aiogram import types


def extract_context(msg: types.Message) -> Tuple[int, Optional[int]]:
    """Extract chat_id and topic_id from message."""
    return msg.chat.id, getattr(msg, "message_thread_id", None)


def extract_username(msg: types.Message) -> Optional[str]:
    """Telegram username of the sender, if they have one."""
    user = msg.from_user
    return user.username if user else None
