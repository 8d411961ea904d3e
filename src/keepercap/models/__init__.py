"""Typed records for players, roster decisions and settlement output."""

from .player import DRAFT_ROUNDS, Player, PlayerKeeper, PlayerRoster, RookieDraftInfo
from .roster import Decision, RosterEntry, RosterSummary, ValidationFinding

__all__ = [
    "DRAFT_ROUNDS",
    "Decision",
    "Player",
    "PlayerKeeper",
    "PlayerRoster",
    "RookieDraftInfo",
    "RosterEntry",
    "RosterSummary",
    "ValidationFinding",
]
