"""Notifier interface for talking to the group."""

from abc import ABC, abstractmethod
from typing import Any, List, Optional

from app.domain.member import LedgerEntry, Member


class Notifier(ABC):
    """Interface for the messages a negotiation round sends.

    All methods are fire-and-forget: delivery failures are the
    implementation's concern and must not propagate into the round.
    """

    @abstractmethod
    async def send_prompt(self, candidate: Member) -> Optional[Any]:
        """Ask the candidate whether they can host this week."""
        pass

    @abstractmethod
    async def send_confirmation(self, host: Member) -> Optional[Any]:
        """Announce who hosts this week."""
        pass

    @abstractmethod
    async def send_rebuff(self) -> Optional[Any]:
        """Answer a reply that arrived while nobody was asked."""
        pass

    @abstractmethod
    async def send_no_host(self) -> Optional[Any]:
        """Announce that every member declined this round."""
        pass

    @abstractmethod
    async def send_standings(
        self, entries: List[LedgerEntry], candidate: Optional[Member] = None
    ) -> Optional[Any]:
        """Show weeks since hosted per member."""
        pass
