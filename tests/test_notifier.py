"""Tests for the Telegram notifier adapter."""

from unittest.mock import AsyncMock, MagicMock

import pytest
from aiogram import types

from app.adapters.telegram_notifier import TelegramNotifier
from app.domain.member import LedgerEntry, Member


class TestTelegramNotifier:
    """Tests for TelegramNotifier."""

    def setup_method(self):
        """Setup test fixtures."""
        self.bot = MagicMock()
        self.bot.send_message = AsyncMock(return_value="sent")

    @pytest.mark.asyncio
    async def test_unbound_notifier_drops_messages(self):
        notifier = TelegramNotifier(self.bot)
        assert notifier.is_bound is False
        assert await notifier.send_rebuff() is None
        self.bot.send_message.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_prompt_mentions_candidate_with_keyboard(self):
        notifier = TelegramNotifier(self.bot, chat_id=-100)
        assert await notifier.send_prompt(Member("alice")) == "sent"

        kwargs = self.bot.send_message.await_args.kwargs
        assert kwargs["chat_id"] == -100
        assert "@alice" in kwargs["text"]
        assert isinstance(kwargs["reply_markup"], types.ReplyKeyboardMarkup)
        assert "message_thread_id" not in kwargs

    @pytest.mark.asyncio
    async def test_confirmation_removes_keyboard_in_topic(self):
        notifier = TelegramNotifier(self.bot)
        notifier.bind_chat(-100, topic_id=7)
        await notifier.send_confirmation(Member("bob"))

        kwargs = self.bot.send_message.await_args.kwargs
        assert kwargs["message_thread_id"] == 7
        assert "hosted by @bob" in kwargs["text"]
        assert isinstance(kwargs["reply_markup"], types.ReplyKeyboardRemove)

    @pytest.mark.asyncio
    async def test_delivery_failure_is_swallowed(self):
        self.bot.send_message = AsyncMock(side_effect=RuntimeError("network down"))
        notifier = TelegramNotifier(self.bot, chat_id=-100)
        assert await notifier.send_no_host() is None

    @pytest.mark.asyncio
    async def test_standings_lists_members_in_order(self):
        notifier = TelegramNotifier(self.bot, chat_id=-100)
        entries = [LedgerEntry(Member("alice"), 2), LedgerEntry(Member("bob"), 0)]
        await notifier.send_standings(entries, candidate=Member("alice"))

        text = self.bot.send_message.await_args.kwargs["text"]
        assert text.index("@alice: 2") < text.index("@bob: 0")
        assert "Waiting for an answer from @alice" in text
