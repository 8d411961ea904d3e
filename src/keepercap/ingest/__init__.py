"""Input adapters that normalize raw roster and player data."""

from .roster import (
    EntryRow,
    PlayerRow,
    load_entries_csv,
    load_players,
    load_players_csv,
    load_players_json,
)

__all__ = [
    "EntryRow",
    "PlayerRow",
    "load_entries_csv",
    "load_players",
    "load_players_csv",
    "load_players_json",
]
