"""Use case for answering a hosting prompt."""

from typing import Optional

from app.domain.reply import ReplyKind, ReplyOutcome
from app.ports.metrics_repository import MetricsRepository
from app.services.negotiation_service import NegotiationSession


class AnswerPromptUseCase:
    """Use case for routing a yes/no reply into the current round."""

    def __init__(self, negotiation: NegotiationSession, metrics: MetricsRepository):
        self.negotiation = negotiation
        self.metrics = metrics

    async def execute(
        self,
        username: Optional[str],
        kind: ReplyKind,
        chat_id: Optional[int] = None,
    ) -> Optional[ReplyOutcome]:
        """Apply reply. Returns None for messages that are not an answer."""
        if kind is ReplyKind.ACCEPT:
            outcome = await self.negotiation.on_accept(username)
        elif kind is ReplyKind.DECLINE:
            outcome = await self.negotiation.on_decline(username)
        else:
            return None

        await self.metrics.record_event(
            event=f"reply_{kind.value}",
            chat_id=chat_id,
            username=username,
            status="error" if outcome is ReplyOutcome.EXHAUSTED else "ok",
            payload={"outcome": outcome.value},
        )
        return outcome
