"""Telegram adapter for Notifier interface."""

import logging
from typing import Any, List, Optional

from aiogram import Bot

from app.domain.member import LedgerEntry, Member
from app.keyboards import build_answer_keyboard, remove_answer_keyboard
from app.ports.notifier import Notifier
from app.utils.telegram import safe_call

logger = logging.getLogger(__name__)


class TelegramNotifier(Notifier):
    """Telegram implementation of Notifier.

    Messages go to the bound group chat (and forum topic, if any). Until a
    chat is bound, messages are dropped with a warning.
    """

    def __init__(self, bot: Bot, chat_id: Optional[int] = None, topic_id: Optional[int] = None):
        self.bot = bot
        self.chat_id = chat_id
        self.topic_id = topic_id

    @property
    def is_bound(self) -> bool:
        return self.chat_id is not None

    def bind_chat(self, chat_id: int, topic_id: Optional[int] = None) -> None:
        """Use this chat/topic for all further messages."""
        self.chat_id = chat_id
        self.topic_id = topic_id

    async def send_message(
        self,
        text: str,
        reply_markup: Optional[Any] = None,
        parse_mode: Optional[str] = None,
    ) -> Optional[Any]:
        """Send text message to the bound chat."""
        if self.chat_id is None:
            logger.warning("NOTIFIER: no chat bound, dropping message %r", text)
            return None
        try:
            kwargs = dict(
                chat_id=self.chat_id,
                text=text,
                reply_markup=reply_markup,
                parse_mode=parse_mode,
            )
            if self.topic_id is not None:
                kwargs["message_thread_id"] = self.topic_id
            return await safe_call(self.bot.send_message, **kwargs)
        except Exception as exc:
            logger.warning("NOTIFIER: failed to send to chat %s: %s", self.chat_id, exc)
            return None

    async def send_prompt(self, candidate: Member) -> Optional[Any]:
        return await self.send_message(
            f"This week it is supposed to be at {candidate.mention}. Is that possible?",
            reply_markup=build_answer_keyboard(),
        )

    async def send_confirmation(self, host: Member) -> Optional[Any]:
        return await self.send_message(
            f"Location selected! This week is hosted by {host.mention}",
            reply_markup=remove_answer_keyboard(),
        )

    async def send_rebuff(self) -> Optional[Any]:
        return await self.send_message("Oh you are trying to be smart. Yeahh no.")

    async def send_no_host(self) -> Optional[Any]:
        return await self.send_message(
            "Nobody can host this week. I will ask again at the next round.",
            reply_markup=remove_answer_keyboard(),
        )

    async def send_standings(
        self, entries: List[LedgerEntry], candidate: Optional[Member] = None
    ) -> Optional[Any]:
        lines = ["Weeks since hosting:"]
        for entry in entries:
            lines.append(f"{entry.member.mention}: {entry.weeks_since_hosted}")
        if candidate is not None:
            lines.append("")
            lines.append(f"Waiting for an answer from {candidate.mention}")
        return await self.send_message("\n".join(lines))
