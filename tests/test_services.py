"""Tests for services and use cases."""

import logging
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest

from app.adapters.metrics_log import LoggingMetricsRepository
from app.domain.member import Member
from app.domain.reply import ReplyKind, ReplyOutcome
from app.providers import DIContainer
from app.services.reply_parser import NO_I_CAN_NOT, YES_I_CAN, classify_reply
from app.usecases.answer_prompt import AnswerPromptUseCase
from app.usecases.show_standings import ShowStandingsUseCase
from app.usecases.start_round import StartRoundUseCase
from config import MemberConfig, RotationConfig


class TestReplyParser:
    """Tests for classify_reply."""

    def test_keyboard_answers(self):
        assert classify_reply(YES_I_CAN) is ReplyKind.ACCEPT
        assert classify_reply(NO_I_CAN_NOT) is ReplyKind.DECLINE

    def test_case_and_whitespace_ignored(self):
        assert classify_reply("  yes i can  host the GROUP ") is ReplyKind.ACCEPT

    def test_other_text(self):
        assert classify_reply("yes") is ReplyKind.OTHER
        assert classify_reply("") is ReplyKind.OTHER
        assert classify_reply(None) is ReplyKind.OTHER


class TestStartRoundUseCase:
    """Tests for StartRoundUseCase."""

    @pytest.mark.asyncio
    async def test_records_started_and_skipped(self, negotiation):
        metrics = AsyncMock()
        use_case = StartRoundUseCase(negotiation, metrics)

        assert await use_case.execute(trigger="schedule", chat_id=-1) is True
        assert await use_case.execute(trigger="manual", chat_id=-1) is False

        events = [call.kwargs["event"] for call in metrics.record_event.await_args_list]
        assert events == ["round_started", "round_start_skipped"]
        first = metrics.record_event.await_args_list[0].kwargs
        assert first["username"] == "alice"
        assert first["payload"] == {"trigger": "schedule"}


class TestAnswerPromptUseCase:
    """Tests for AnswerPromptUseCase."""

    @pytest.mark.asyncio
    async def test_routes_accept_and_decline(self, negotiation, ledger):
        use_case = AnswerPromptUseCase(negotiation, LoggingMetricsRepository())
        await negotiation.start_round()

        assert await use_case.execute("alice", ReplyKind.DECLINE) is ReplyOutcome.REPROMPTED
        assert await use_case.execute("bob", ReplyKind.ACCEPT) is ReplyOutcome.CONFIRMED
        assert ledger.weeks_since(Member("bob")) == 0

    @pytest.mark.asyncio
    async def test_other_is_ignored_without_metrics(self, negotiation, notifier):
        metrics = AsyncMock()
        use_case = AnswerPromptUseCase(negotiation, metrics)

        assert await use_case.execute("alice", ReplyKind.OTHER) is None
        metrics.record_event.assert_not_awaited()
        assert notifier.sent == []

    @pytest.mark.asyncio
    async def test_exhaustion_recorded_as_error(self, negotiation):
        metrics = AsyncMock()
        use_case = AnswerPromptUseCase(negotiation, metrics)
        await negotiation.start_round()

        for username in ("alice", "bob", "carol"):
            outcome = await use_case.execute(username, ReplyKind.DECLINE)

        assert outcome is ReplyOutcome.EXHAUSTED
        last = metrics.record_event.await_args_list[-1].kwargs
        assert last["status"] == "error"
        assert last["payload"] == {"outcome": "exhausted"}


class TestShowStandingsUseCase:
    """Tests for ShowStandingsUseCase."""

    @pytest.mark.asyncio
    async def test_sends_standings_with_candidate(self, negotiation, notifier):
        await negotiation.start_round()
        await ShowStandingsUseCase(negotiation).execute()

        kind, (entries, candidate) = notifier.sent[-1]
        assert kind == "standings"
        assert [e["username"] for e in entries] == ["alice", "bob", "carol"]
        assert candidate == Member("alice")


class TestLoggingMetricsRepository:
    """Tests for LoggingMetricsRepository."""

    @pytest.mark.asyncio
    async def test_events_are_logged(self, caplog):
        repo = LoggingMetricsRepository()
        with caplog.at_level(logging.INFO, logger="metrics"):
            await repo.record_event(
                "round_started", chat_id=-1, username="alice", payload={"trigger": "manual"}
            )
            await repo.record_event("reply_decline", status="error", payload={"outcome": "exhausted"})

        ok, failed = caplog.records
        assert ok.levelno == logging.INFO
        assert "round_started" in ok.getMessage()
        assert "@alice" in ok.getMessage()
        assert '"trigger": "manual"' in ok.getMessage()
        assert failed.levelno == logging.WARNING
        assert "exhausted" in failed.getMessage()

    @pytest.mark.asyncio
    async def test_container_logs_round_events_by_default(self, notifier, caplog):
        container = DIContainer(
            bot=MagicMock(),
            rotation_config=RotationConfig(
                bot_token="t", members=[MemberConfig("alice")], source=Path("config.json")
            ),
            notifier=notifier,
        )
        assert isinstance(container.metrics, LoggingMetricsRepository)

        with caplog.at_level(logging.INFO, logger="metrics"):
            await container.start_round.execute(trigger="schedule", chat_id=-100123)
        assert any("round_started" in r.getMessage() for r in caplog.records)
