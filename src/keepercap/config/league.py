"""League cap and fee rules for supported league presets."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Dict, Iterable


logger = logging.getLogger(__name__)

_LEAGUE_ENV = "KEEPERCAP_LEAGUE"
_DEFAULT_KEY = "STANDARD"


@dataclass(frozen=True)
class LeagueCapRules:
    key: str
    base_cap: int = 225_000_000
    cap_floor: int = 170_000_000
    cap_max: int = 255_000_000
    penalty_start: int = 225_000_000
    penalty_rate_per_m: float = 2
    first_apron: int = 195_000_000
    first_apron_fee: float = 50
    redshirt_fee: float = 10
    franchise_tag_fee: float = 15
    max_keepers: int = 8


_LEAGUE_RULES: Dict[str, LeagueCapRules] = {
    "STANDARD": LeagueCapRules(key="STANDARD"),
    "LEGACY": LeagueCapRules(
        key="LEGACY",
        base_cap=210_000_000,
        cap_max=250_000_000,
        penalty_start=210_000_000,
        first_apron=170_000_000,
    ),
}


def iter_rules() -> Iterable[LeagueCapRules]:
    """Return an iterator of all configured league presets."""

    return _LEAGUE_RULES.values()


def get_rules(key: str) -> LeagueCapRules:
    """Fetch a league preset by key, raising KeyError if missing."""

    normalized = key.strip().upper()
    if normalized not in _LEAGUE_RULES:
        raise KeyError(f"No league rules configured for key={key!r}")
    return _LEAGUE_RULES[normalized]


def default_rules() -> LeagueCapRules:
    raw = os.getenv(_LEAGUE_ENV)
    if raw is None or not raw.strip():
        return _LEAGUE_RULES[_DEFAULT_KEY]
    try:
        return get_rules(raw)
    except KeyError:
        logger.warning("Unknown league preset for %s: %s; using %s", _LEAGUE_ENV, raw, _DEFAULT_KEY)
        return _LEAGUE_RULES[_DEFAULT_KEY]
