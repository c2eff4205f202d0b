"""Rotation ledger: who has gone longest without hosting."""

from typing import Iterable, List, Optional, Sequence, Tuple

from app.domain.member import LedgerEntry, Member, handle_key
from core.exceptions import SelectionExhaustionError, UnknownMemberError


class RotationLedger:
    """Weeks-since-hosted counters for the roster, in configuration order.

    The ledger is the only place the counters change: ``confirm_host`` resets
    the host and ages everybody else by one week.
    """

    def __init__(self, entries: Sequence[Tuple[str, int]]):
        if not entries:
            raise ValueError("Roster cannot be empty")

        self._entries: List[LedgerEntry] = []
        seen = set()
        for username, weeks in entries:
            member = Member(username=username)
            if member.key in seen:
                raise ValueError(f"Duplicate member {member.mention}")
            if weeks < 0:
                raise ValueError(f"Negative weeks for {member.mention}")
            seen.add(member.key)
            self._entries.append(LedgerEntry(member=member, weeks_since_hosted=weeks))

    @classmethod
    def from_usernames(cls, usernames: Iterable[str]) -> "RotationLedger":
        """Create a ledger where nobody has hosted yet."""
        return cls([(username, 0) for username in usernames])

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def members(self) -> List[Member]:
        return [entry.member for entry in self._entries]

    def find(self, username: Optional[str]) -> Optional[Member]:
        """Look up a roster member by handle."""
        key = handle_key(username)
        for entry in self._entries:
            if entry.member.key == key:
                return entry.member
        return None

    def weeks_since(self, member: Member) -> int:
        return self._entry_for(member).weeks_since_hosted

    def standings(self) -> List[LedgerEntry]:
        """Snapshot of the ledger in roster order."""
        return [LedgerEntry(e.member, e.weeks_since_hosted) for e in self._entries]

    def select_candidate(self, excluded: Iterable[Member] = ()) -> Member:
        """Return the member waiting longest, skipping ``excluded``.

        Ties go to the member listed first: the leader is only replaced by a
        strictly greater count.
        """
        skip = {member.key for member in excluded}
        leader: Optional[LedgerEntry] = None
        for entry in self._entries:
            if entry.member.key in skip:
                continue
            if leader is None or entry.weeks_since_hosted > leader.weeks_since_hosted:
                leader = entry

        if leader is None:
            raise SelectionExhaustionError()
        return leader.member

    def confirm_host(self, member: Member) -> None:
        """Record that ``member`` hosts this week."""
        host = self._entry_for(member)
        for entry in self._entries:
            if entry is host:
                entry.weeks_since_hosted = 0
            else:
                entry.weeks_since_hosted += 1

    def _entry_for(self, member: Member) -> LedgerEntry:
        for entry in self._entries:
            if entry.member.key == member.key:
                return entry
        raise UnknownMemberError(member.username)
