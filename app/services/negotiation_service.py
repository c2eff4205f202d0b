"""Negotiation round: ask, handle yes/no, fall back to the next member."""

import asyncio
import logging
from typing import Optional, Set

from app.domain.ledger import RotationLedger
from app.domain.member import Member
from app.domain.reply import ReplyOutcome, RoundState
from app.ports.notifier import Notifier
from core.exceptions import SelectionExhaustionError

logger = logging.getLogger(__name__)


class NegotiationSession:
    """Per-round state machine driving the rotation ledger.

    IDLE --start_round--> AWAITING_REPLY(candidate)
    AWAITING_REPLY --accept--> IDLE
    AWAITING_REPLY --decline--> AWAITING_REPLY(next) or IDLE when exhausted

    Ticks and replies are serialized with a single lock because both read and
    write the same session and ledger state.
    """

    def __init__(self, ledger: RotationLedger, notifier: Notifier):
        self.ledger = ledger
        self.notifier = notifier
        self.state = RoundState.IDLE
        self.candidate: Optional[Member] = None
        self.excluded: Set[Member] = set()
        self._lock = asyncio.Lock()

    @property
    def searching(self) -> bool:
        return self.state is RoundState.AWAITING_REPLY

    def _reset(self) -> None:
        self.state = RoundState.IDLE
        self.candidate = None
        self.excluded = set()

    async def _ask(self, candidate: Member) -> None:
        self.candidate = candidate
        self.state = RoundState.AWAITING_REPLY
        logger.info(
            "ROUND: asking %s (weeks since hosted: %d, declined so far: %d)",
            candidate.mention,
            self.ledger.weeks_since(candidate),
            len(self.excluded),
        )
        await self.notifier.send_prompt(candidate)

    async def start_round(self) -> bool:
        """Start a round unless one is already in progress."""
        async with self._lock:
            if self.searching:
                logger.info("ROUND: start skipped, still waiting on %s", self.candidate.mention)
                return False

            self._reset()
            await self._ask(self.ledger.select_candidate(self.excluded))
            return True

    async def on_accept(self, username: Optional[str]) -> ReplyOutcome:
        """Handle a 'yes' from ``username``."""
        async with self._lock:
            outcome = await self._check_sender(username)
            if outcome is not None:
                return outcome

            host = self.candidate
            self.ledger.confirm_host(host)
            self._reset()
            logger.info("ROUND: %s hosts this week", host.mention)
            await self.notifier.send_confirmation(host)
            return ReplyOutcome.CONFIRMED

    async def on_decline(self, username: Optional[str]) -> ReplyOutcome:
        """Handle a 'no' from ``username`` and ask the next member."""
        async with self._lock:
            outcome = await self._check_sender(username)
            if outcome is not None:
                return outcome

            self.excluded.add(self.candidate)
            logger.info("ROUND: %s declined", self.candidate.mention)
            try:
                next_candidate = self.ledger.select_candidate(self.excluded)
            except SelectionExhaustionError as exc:
                declined = len(self.excluded)
                self._reset()
                logger.error("ROUND: aborted, %s (%d declined)", exc.message, declined)
                await self.notifier.send_no_host()
                return ReplyOutcome.EXHAUSTED

            await self._ask(next_candidate)
            return ReplyOutcome.REPROMPTED

    async def _check_sender(self, username: Optional[str]) -> Optional[ReplyOutcome]:
        """Return an outcome when the reply must not touch the round."""
        if not self.searching:
            logger.info("ROUND: reply from @%s while idle", username)
            await self.notifier.send_rebuff()
            return ReplyOutcome.REBUFFED

        if not self.candidate.matches(username):
            logger.debug(
                "ROUND: ignoring reply from @%s, waiting on %s", username, self.candidate.mention
            )
            return ReplyOutcome.IGNORED

        return None
