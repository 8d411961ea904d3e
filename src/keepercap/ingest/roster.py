"""Helpers to load roster decisions and player catalogs into canonical records."""

from __future__ import annotations

import csv
import json
import logging
import re
from decimal import Decimal
from pathlib import Path
from typing import Dict, List, Mapping, Optional

from pydantic import BaseModel

from keepercap.models import Player, PlayerKeeper, PlayerRoster, RookieDraftInfo, RosterEntry


logger = logging.getLogger(__name__)


DEFAULT_ENTRY_MAPPING = {
    "player_id": "player_id",
    "decision": "decision",
    "base_round": "base_round",
    "priority": "priority",
    "keeper_round": "keeper_round",
    "notes": "notes",
}

DEFAULT_PLAYER_MAPPING = {
    "player_id": "player_id",
    "name": "name",
    "salary": "salary",
    "position": "position",
    "nba_team": "nba_team",
    "is_rookie": "is_rookie",
    "is_international_stash": "is_international_stash",
    "rookie_round": "rookie_round",
    "rookie_pick": "rookie_pick",
    "redshirt_eligible": "redshirt_eligible",
    "int_eligible": "int_eligible",
    "prior_year_round": "prior_year_round",
}


def _extract(row: Mapping[str, str], mapping: Mapping[str, str], key: str) -> Optional[str]:
    column = mapping.get(key)
    if column is None:
        return None
    value = row.get(column)
    return value.strip() if value is not None else None


class EntryRow(BaseModel):
    raw_player_id: str
    raw_decision: str
    raw_base_round: Optional[str] = None
    raw_priority: Optional[str] = None
    raw_keeper_round: Optional[str] = None
    raw_notes: Optional[str] = None

    @classmethod
    def from_mapping(cls, row: Mapping[str, str], mapping: Mapping[str, str]) -> "EntryRow":
        return cls(
            raw_player_id=_extract(row, mapping, "player_id") or "",
            raw_decision=_extract(row, mapping, "decision") or "",
            raw_base_round=_extract(row, mapping, "base_round"),
            raw_priority=_extract(row, mapping, "priority"),
            raw_keeper_round=_extract(row, mapping, "keeper_round"),
            raw_notes=_extract(row, mapping, "notes"),
        )

    def to_entry(self) -> RosterEntry:
        return RosterEntry(
            player_id=self.raw_player_id,
            decision=self.raw_decision.upper(),
            base_round=_parse_int(self.raw_base_round),
            priority=_parse_int(self.raw_priority),
            keeper_round=_parse_int(self.raw_keeper_round),
            notes=self.raw_notes or None,
        )


class PlayerRow(BaseModel):
    raw_player_id: str
    raw_name: str
    raw_salary: Optional[str] = None
    raw_position: Optional[str] = None
    raw_nba_team: Optional[str] = None
    raw_is_rookie: Optional[str] = None
    raw_is_international_stash: Optional[str] = None
    raw_rookie_round: Optional[str] = None
    raw_rookie_pick: Optional[str] = None
    raw_redshirt_eligible: Optional[str] = None
    raw_int_eligible: Optional[str] = None
    raw_prior_year_round: Optional[str] = None

    @classmethod
    def from_mapping(cls, row: Mapping[str, str], mapping: Mapping[str, str]) -> "PlayerRow":
        data = {f"raw_{key}": _extract(row, mapping, key) for key in DEFAULT_PLAYER_MAPPING}
        data["raw_player_id"] = data["raw_player_id"] or ""
        data["raw_name"] = data["raw_name"] or ""
        return cls(**data)

    def to_player(self) -> Player:
        rookie_round = _parse_int(self.raw_rookie_round)
        rookie_pick = _parse_int(self.raw_rookie_pick)
        draft_info = None
        if rookie_round is not None and rookie_pick is not None:
            draft_info = RookieDraftInfo(
                round=rookie_round,
                pick=rookie_pick,
                redshirt_eligible=bool(_parse_flag(self.raw_redshirt_eligible)),
                int_eligible=bool(_parse_flag(self.raw_int_eligible)),
            )
        prior_year_round = _parse_int(self.raw_prior_year_round)
        return Player(
            player_id=self.raw_player_id,
            name=self.raw_name,
            salary=_parse_dollars(self.raw_salary),
            position=self.raw_position or "",
            nba_team=(self.raw_nba_team or "").upper(),
            roster=PlayerRoster(
                is_rookie=bool(_parse_flag(self.raw_is_rookie)),
                is_international_stash=bool(_parse_flag(self.raw_is_international_stash)),
                rookie_draft_info=draft_info,
            ),
            keeper=PlayerKeeper(prior_year_round=prior_year_round) if prior_year_round else None,
        )


_DOLLARS = re.compile(r"^\$?(?P<amount>\d+(?:\.\d+)?)(?P<unit>[mk])?$", re.IGNORECASE)
_UNITS = {"": 1, "K": 1_000, "M": 1_000_000}


def _parse_dollars(raw: Optional[str]) -> int:
    """Parse ``$4,250,000``, ``4250000`` or ``38.5M`` into whole dollars; blank is 0."""

    text = (raw or "").replace(",", "").replace(" ", "")
    if not text:
        return 0
    match = _DOLLARS.match(text)
    if match is None:
        raise ValueError(f"salary '{raw}' is not a dollar amount")
    amount = Decimal(match.group("amount")) * _UNITS[(match.group("unit") or "").upper()]
    return int(amount.to_integral_value())


def _parse_int(raw: Optional[str]) -> Optional[int]:
    if raw is None:
        return None
    text = raw.strip()
    if not text:
        return None
    try:
        return int(text)
    except ValueError:
        raise ValueError(f"value '{raw}' is not an integer") from None


def _parse_flag(value: Optional[str]) -> Optional[bool]:
    if value is None:
        return None
    text = value.strip().lower()
    if not text:
        return None
    if text in {"1", "true", "t", "yes", "y"}:
        return True
    if text in {"0", "false", "f", "no", "n"}:
        return False
    return None


def load_entries_csv(path: Path, *, mapping: Mapping[str, str] | None = None) -> List[RosterEntry]:
    mapping = mapping or DEFAULT_ENTRY_MAPPING
    with path.open(newline="", encoding="utf-8") as f:
        reader = csv.DictReader(f)
        rows = [EntryRow.from_mapping(row, mapping) for row in reader]
    entries = [row.to_entry() for row in rows]
    logger.info("Loaded %s roster entries from %s", len(entries), path)
    return entries


def load_players_csv(path: Path, *, mapping: Mapping[str, str] | None = None) -> Dict[str, Player]:
    mapping = mapping or DEFAULT_PLAYER_MAPPING
    with path.open(newline="", encoding="utf-8") as f:
        reader = csv.DictReader(f)
        rows = [PlayerRow.from_mapping(row, mapping) for row in reader]

    players: Dict[str, Player] = {}
    for row in rows:
        player = row.to_player()
        if player.player_id in players:
            logger.warning("Duplicate player id %s in %s; keeping the last row", player.player_id, path)
        players[player.player_id] = player
    logger.info("Loaded %s players from %s", len(players), path)
    return players


def load_players_json(path: Path) -> Dict[str, Player]:
    data = json.loads(path.read_text(encoding="utf-8"))
    if isinstance(data, dict):
        data = data.get("players", [])
    players = [Player.model_validate(item) for item in data]
    return {player.player_id: player for player in players}


def load_players(path: Path) -> Dict[str, Player]:
    """Load a player catalog from CSV or JSON based on the file suffix."""

    if path.suffix.lower() == ".json":
        return load_players_json(path)
    return load_players_csv(path)
