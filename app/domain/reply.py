"""Enums describing a negotiation round."""

from enum import Enum


class RoundState(Enum):
    IDLE = "idle"
    AWAITING_REPLY = "awaiting_reply"


class ReplyKind(Enum):
    ACCEPT = "accept"
    DECLINE = "decline"
    OTHER = "other"


class ReplyOutcome(Enum):
    """What a reply did to the round."""

    IGNORED = "ignored"          # sender is not the current candidate
    REBUFFED = "rebuffed"        # no round in progress
    CONFIRMED = "confirmed"      # candidate accepted, round over
    REPROMPTED = "reprompted"    # candidate declined, next one asked
    EXHAUSTED = "exhausted"      # everybody declined, round aborted
