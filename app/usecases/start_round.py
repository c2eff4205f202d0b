"""Use case for starting a hosting round."""

from typing import Optional

from app.ports.metrics_repository import MetricsRepository
from app.services.negotiation_service import NegotiationSession


class StartRoundUseCase:
    """Use case for asking the longest-waiting member to host."""

    def __init__(self, negotiation: NegotiationSession, metrics: MetricsRepository):
        self.negotiation = negotiation
        self.metrics = metrics

    async def execute(self, trigger: str = "schedule", chat_id: Optional[int] = None) -> bool:
        """Start a round. Returns False if one is already in progress."""
        started = await self.negotiation.start_round()
        candidate = self.negotiation.candidate
        await self.metrics.record_event(
            event="round_started" if started else "round_start_skipped",
            chat_id=chat_id,
            username=candidate.username if candidate else None,
            payload={"trigger": trigger},
        )
        return started
