"""Canonical player models shared across ingestion, stacking and settlement."""

from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


DRAFT_ROUNDS = 13


class RookieDraftInfo(BaseModel):
    """Where a rookie was taken in the league's rookie draft."""

    round: int = Field(..., ge=1, le=3)
    pick: int = Field(..., ge=1)
    redshirt_eligible: bool = False
    redshirted_last_year: Optional[bool] = None
    int_eligible: bool = False

    model_config = ConfigDict(frozen=True)


class PlayerRoster(BaseModel):
    is_rookie: bool = False
    is_international_stash: bool = False
    on_ir: bool = False
    rookie_draft_info: Optional[RookieDraftInfo] = None

    model_config = ConfigDict(frozen=True)


class PlayerKeeper(BaseModel):
    prior_year_round: Optional[int] = Field(default=None, ge=1, le=DRAFT_ROUNDS)

    model_config = ConfigDict(frozen=True)


class Player(BaseModel):
    """Player catalog record; salaries are whole dollars."""

    player_id: str = Field(..., min_length=1)
    name: str
    salary: int = Field(default=0, ge=0)
    position: str = ""
    nba_team: str = ""
    roster: PlayerRoster = Field(default_factory=PlayerRoster)
    keeper: Optional[PlayerKeeper] = None
    metadata: Dict[str, Any] = Field(default_factory=dict)

    model_config = ConfigDict(frozen=True)
