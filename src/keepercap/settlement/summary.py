"""Cap usage, apron penalties and fee totals for one team's roster."""

from __future__ import annotations

import logging
import math
from typing import Iterable, Mapping, Optional, Sequence

from keepercap.config import LeagueCapRules, get_rules
from keepercap.models import Player, RosterEntry, RosterSummary


logger = logging.getLogger(__name__)

_ONE_MILLION = 1_000_000


def _salary_of(player_id: str, all_players: Mapping[str, Player]) -> int:
    player = all_players.get(player_id)
    if player is None:
        logger.warning("No salary record for kept player %s; counting $0 against the cap", player_id)
        return 0
    return player.salary


def effective_cap(base_cap: int, trade_delta: int, rules: LeagueCapRules) -> int:
    return max(rules.cap_floor, min(rules.cap_max, base_cap + trade_delta))


def over_by_millions(cap_used: int, threshold: int) -> int:
    """Whole millions over ``threshold``; any partial million counts as a full one."""

    over_by = max(0, cap_used - threshold)
    return math.ceil(over_by / _ONE_MILLION)


def compute_summary(
    *,
    entries: Sequence[RosterEntry],
    all_players: Mapping[str, Player],
    franchise_tags: int,
    trade_delta: int = 0,
    drafted_players: Iterable[Player] = (),
    rules: Optional[LeagueCapRules] = None,
    base_cap: Optional[int] = None,
    penalty_start: Optional[int] = None,
    penalty_rate_per_m: Optional[float] = None,
    redshirt_fee: Optional[float] = None,
    franchise_tag_fee: Optional[float] = None,
) -> RosterSummary:
    """Settle a roster into cap figures and fees.

    Only ``KEEP`` entries and already-drafted players count against the cap.
    Explicit constants override the league ``rules``.
    """

    rules = rules or get_rules("STANDARD")
    base_cap = rules.base_cap if base_cap is None else base_cap
    penalty_start = rules.penalty_start if penalty_start is None else penalty_start
    penalty_rate_per_m = rules.penalty_rate_per_m if penalty_rate_per_m is None else penalty_rate_per_m
    redshirt_fee = rules.redshirt_fee if redshirt_fee is None else redshirt_fee
    franchise_tag_fee = rules.franchise_tag_fee if franchise_tag_fee is None else franchise_tag_fee

    kept_ids = [entry.player_id for entry in entries if entry.decision == "KEEP"]
    redshirt_count = sum(1 for entry in entries if entry.decision == "REDSHIRT")
    int_stash_count = sum(1 for entry in entries if entry.decision == "INT_STASH")
    drafted = list(drafted_players)

    cap_used = sum(_salary_of(player_id, all_players) for player_id in kept_ids)
    cap_used += sum(player.salary for player in drafted)

    cap_effective = effective_cap(base_cap, trade_delta, rules)

    over_by_m = over_by_millions(cap_used, penalty_start)
    penalty_dues = over_by_m * penalty_rate_per_m
    franchise_tag_dues = franchise_tags * franchise_tag_fee
    redshirt_dues = redshirt_count * redshirt_fee
    first_apron_fee = rules.first_apron_fee if cap_used > rules.first_apron else 0
    total_fees = penalty_dues + franchise_tag_dues + redshirt_dues + first_apron_fee

    logger.debug(
        "Cap used %s of %s effective; %s over penalty start; fees %s",
        cap_used,
        cap_effective,
        over_by_m,
        total_fees,
    )

    return RosterSummary(
        keepers_count=len(kept_ids),
        drafted_count=len(drafted),
        redshirts_count=redshirt_count,
        int_stash_count=int_stash_count,
        cap_used=cap_used,
        cap_base=base_cap,
        cap_trade_delta=trade_delta,
        cap_effective=cap_effective,
        over_second_apron_by_m=over_by_m,
        penalty_dues=penalty_dues,
        franchise_tags=franchise_tags,
        franchise_tag_dues=franchise_tag_dues,
        redshirt_dues=redshirt_dues,
        first_apron_fee=first_apron_fee,
        activation_dues=0,
        total_fees=total_fees,
    )
