"""Dependency injection container."""

from typing import Optional

from aiogram import Bot

from app.adapters.metrics_log import LoggingMetricsRepository
from app.adapters.telegram_notifier import TelegramNotifier
from app.domain.ledger import RotationLedger
from app.ports.metrics_repository import MetricsRepository
from app.ports.notifier import Notifier
from app.services.negotiation_service import NegotiationSession
from app.usecases.answer_prompt import AnswerPromptUseCase
from app.usecases.show_standings import ShowStandingsUseCase
from app.usecases.start_round import StartRoundUseCase
from config import ROTATION_CHAT_ID, ROTATION_TOPIC_ID, RotationConfig


class DIContainer:
    """Dependency injection container."""

    def __init__(
        self,
        bot: Bot,
        rotation_config: RotationConfig,
        notifier: Optional[Notifier] = None,
        metrics_repo: Optional[MetricsRepository] = None,
    ):
        self._ledger = RotationLedger(
            [(m.username, m.weeks_since_hosted) for m in rotation_config.members]
        )
        self._notifier = notifier or TelegramNotifier(
            bot, chat_id=ROTATION_CHAT_ID, topic_id=ROTATION_TOPIC_ID
        )
        # a chat given at startup stays put
        self._chat_pinned = getattr(self._notifier, "chat_id", None) is not None
        self._metrics = metrics_repo or LoggingMetricsRepository()
        self._negotiation = NegotiationSession(self._ledger, self._notifier)

        # Use cases
        self.start_round = StartRoundUseCase(self._negotiation, self._metrics)
        self.answer_prompt = AnswerPromptUseCase(self._negotiation, self._metrics)
        self.show_standings = ShowStandingsUseCase(self._negotiation)

    @property
    def ledger(self) -> RotationLedger:
        """Get rotation ledger."""
        return self._ledger

    @property
    def negotiation(self) -> NegotiationSession:
        """Get negotiation session."""
        return self._negotiation

    @property
    def notifier(self) -> Notifier:
        """Get notifier."""
        return self._notifier

    @property
    def metrics(self) -> MetricsRepository:
        """Get metrics repository."""
        return self._metrics

    @property
    def chat_id(self) -> Optional[int]:
        """Chat the rotation talks to, None until bound."""
        return getattr(self._notifier, "chat_id", None)

    def bind_chat(self, chat_id: int, topic_id: Optional[int] = None) -> None:
        """Point the notifier at the chat where /start was sent."""
        if hasattr(self._notifier, "bind_chat"):
            self._notifier.bind_chat(chat_id, topic_id)

    def can_bind_chat(self, chat_id: int, topic_id: Optional[int] = None) -> bool:
        """Moving to another chat is refused while pinned or mid-round."""
        if self.chat_id is None or self.is_rotation_chat(chat_id, topic_id):
            return True
        return not (self._chat_pinned or self._negotiation.searching)

    def is_rotation_chat(self, chat_id: int, topic_id: Optional[int]) -> bool:
        """Check whether an update comes from the bound chat/topic."""
        bound_chat = getattr(self._notifier, "chat_id", None)
        if bound_chat is None or bound_chat != chat_id:
            return False
        bound_topic = getattr(self._notifier, "topic_id", None)
        return bound_topic is None or bound_topic == topic_id

    async def cleanup(self) -> None:
        """Cleanup resources."""
        if hasattr(self._metrics, "close"):
            await self._metrics.close()
