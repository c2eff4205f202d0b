"""Domain models and business rules."""

from app.domain.ledger import RotationLedger
from app.domain.member import LedgerEntry, Member
from app.domain.reply import ReplyKind, ReplyOutcome, RoundState

__all__ = ["LedgerEntry", "Member", "ReplyKind", "ReplyOutcome", "RotationLedger", "RoundState"]
