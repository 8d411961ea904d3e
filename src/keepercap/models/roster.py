"""Roster decisions and the derived per-team settlement snapshot."""

from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict

from .player import DRAFT_ROUNDS


Decision = Literal["KEEP", "REDSHIRT", "INT_STASH", "DROP"]


class RosterEntry(BaseModel):
    """A team's decision about one player for a season.

    ``base_round`` is the round the player would occupy absent collisions.
    ``keeper_round`` is written by round assignment and is only ever set on
    ``KEEP`` entries.
    """

    player_id: str = Field(..., min_length=1)
    decision: Decision
    base_round: Optional[int] = Field(default=None, ge=1, le=DRAFT_ROUNDS)
    priority: Optional[int] = None
    keeper_round: Optional[int] = Field(default=None, ge=1, le=DRAFT_ROUNDS)
    locked: bool = False
    notes: Optional[str] = None

    model_config = ConfigDict(frozen=True)

    @property
    def is_keeper(self) -> bool:
        return self.decision == "KEEP"


class RosterSummary(BaseModel):
    keepers_count: int
    drafted_count: int
    redshirts_count: int
    int_stash_count: int
    cap_used: int
    cap_base: int
    cap_trade_delta: int
    cap_effective: int
    over_second_apron_by_m: int
    penalty_dues: float
    franchise_tags: int
    franchise_tag_dues: float
    redshirt_dues: float
    first_apron_fee: float
    activation_dues: float = 0
    total_fees: float

    model_config = ConfigDict(frozen=True)


class ValidationFinding(BaseModel):
    """Single roster validation result; ``error`` findings block submission."""

    type: Literal["error", "warning"]
    field: str
    message: str
    player_id: Optional[str] = None

    model_config = ConfigDict(frozen=True)
