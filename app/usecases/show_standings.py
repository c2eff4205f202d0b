"""Use case for showing the rotation standings."""

from app.services.negotiation_service import NegotiationSession


class ShowStandingsUseCase:
    """Use case for posting weeks since hosted per member."""

    def __init__(self, negotiation: NegotiationSession):
        self.negotiation = negotiation

    async def execute(self) -> None:
        entries = self.negotiation.ledger.standings()
        await self.negotiation.notifier.send_standings(entries, self.negotiation.candidate)
