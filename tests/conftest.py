"""Shared fixtures."""

from typing import Any, List, Optional, Tuple

import pytest

from app.domain.ledger import RotationLedger
from app.domain.member import LedgerEntry, Member
from app.ports.notifier import Notifier
from app.services.negotiation_service import NegotiationSession


class RecordingNotifier(Notifier):
    """Notifier that keeps every message instead of sending it."""

    def __init__(self, chat_id: Optional[int] = None, topic_id: Optional[int] = None):
        self.chat_id = chat_id
        self.topic_id = topic_id
        self.sent: List[Tuple[str, Any]] = []

    def bind_chat(self, chat_id: int, topic_id: Optional[int] = None) -> None:
        self.chat_id = chat_id
        self.topic_id = topic_id

    @property
    def prompts(self) -> List[str]:
        return [payload.username for kind, payload in self.sent if kind == "prompt"]

    async def send_prompt(self, candidate: Member) -> None:
        self.sent.append(("prompt", candidate))

    async def send_confirmation(self, host: Member) -> None:
        self.sent.append(("confirmation", host))

    async def send_rebuff(self) -> None:
        self.sent.append(("rebuff", None))

    async def send_no_host(self) -> None:
        self.sent.append(("no_host", None))

    async def send_standings(
        self, entries: List[LedgerEntry], candidate: Optional[Member] = None
    ) -> None:
        self.sent.append(("standings", ([e.to_dict() for e in entries], candidate)))


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier(chat_id=-100123)


@pytest.fixture
def ledger() -> RotationLedger:
    return RotationLedger.from_usernames(["alice", "bob", "carol"])


@pytest.fixture
def negotiation(ledger: RotationLedger, notifier: RecordingNotifier) -> NegotiationSession:
    return NegotiationSession(ledger, notifier)
