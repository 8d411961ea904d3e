"""Before/after cap impact of a proposed trade for every team involved."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List, Literal, Mapping, Optional, Sequence

from keepercap.config import LeagueCapRules, get_rules
from keepercap.models import DRAFT_ROUNDS, Decision, Player, RosterEntry, RosterSummary
from keepercap.stacking import assign_rounds

from .summary import compute_summary, over_by_millions


logger = logging.getLogger(__name__)

AssetType = Literal["keeper", "redshirt", "int_stash", "rookie_pick"]

_INCOMING_DECISIONS: Mapping[str, Decision] = {
    "keeper": "KEEP",
    "redshirt": "REDSHIRT",
    "int_stash": "INT_STASH",
}


@dataclass(frozen=True)
class TradeAsset:
    type: AssetType
    asset_id: str
    salary: int
    from_team_id: str
    to_team_id: str

    @property
    def moves_salary(self) -> bool:
        return self.type != "rookie_pick"


@dataclass(frozen=True)
class TeamCapImpact:
    team_id: str
    team_name: str
    before: RosterSummary
    after: RosterSummary
    salary_in: int
    salary_out: int
    warnings: List[str]


def _settle(
    entries: Sequence[RosterEntry],
    players: Mapping[str, Player],
    trade_delta: int,
    rules: LeagueCapRules,
) -> RosterSummary:
    stacked = assign_rounds(entries)
    return compute_summary(
        entries=stacked.entries,
        all_players=players,
        franchise_tags=stacked.franchise_tags,
        trade_delta=trade_delta,
        rules=rules,
    )


def _millions(amount: int) -> str:
    return f"${amount // 1_000_000}M"


def _cap_warnings(before: RosterSummary, after: RosterSummary, rules: LeagueCapRules) -> List[str]:
    warnings: List[str] = []
    first_apron = rules.first_apron
    second_apron = rules.penalty_start

    if after.cap_used > first_apron >= before.cap_used:
        warnings.append(
            f"Crosses first apron ({_millions(first_apron)}) - ${rules.first_apron_fee:g} one-time fee"
        )
    if after.cap_used > second_apron >= before.cap_used:
        warnings.append(
            f"Crosses second apron ({_millions(second_apron)}) - "
            f"${rules.penalty_rate_per_m:g}/M penalty applies"
        )
    if after.cap_used > second_apron and before.cap_used > second_apron:
        before_over = over_by_millions(before.cap_used, second_apron)
        after_over = over_by_millions(after.cap_used, second_apron)
        if after_over > before_over:
            warnings.append(
                "Increases second apron penalty from "
                f"${before_over * rules.penalty_rate_per_m:g} to ${after_over * rules.penalty_rate_per_m:g}"
            )
    if after.cap_used > rules.cap_max:
        warnings.append(f"Exceeds hard cap ceiling ({_millions(rules.cap_max)})")
    return warnings


def compute_trade_cap_impact(
    *,
    assets: Sequence[TradeAsset],
    rosters: Mapping[str, Sequence[RosterEntry]],
    players: Mapping[str, Player],
    trade_deltas: Mapping[str, int],
    team_names: Mapping[str, str],
    rules: Optional[LeagueCapRules] = None,
) -> List[TeamCapImpact]:
    """Compare each involved team's settlement before and after the trade.

    Incoming players join as keepers in the last round (or as redshirt /
    international stash for those asset types). Rookie picks carry no
    salary and do not change any roster.
    """

    rules = rules or get_rules("STANDARD")

    team_ids: Dict[str, None] = {}
    for asset in assets:
        team_ids.setdefault(asset.from_team_id)
        team_ids.setdefault(asset.to_team_id)

    results: List[TeamCapImpact] = []
    for team_id in team_ids:
        current = list(rosters.get(team_id, ()))
        delta = trade_deltas.get(team_id, 0)

        outgoing = [a for a in assets if a.from_team_id == team_id and a.moves_salary]
        incoming = [a for a in assets if a.to_team_id == team_id and a.moves_salary]
        outgoing_ids = {asset.asset_id for asset in outgoing}

        after_entries = [entry for entry in current if entry.player_id not in outgoing_ids]
        for asset in incoming:
            after_entries.append(
                RosterEntry(
                    player_id=asset.asset_id,
                    decision=_INCOMING_DECISIONS[asset.type],
                    base_round=DRAFT_ROUNDS,
                )
            )

        before = _settle(current, players, delta, rules)
        after = _settle(after_entries, players, delta, rules)
        warnings = _cap_warnings(before, after, rules)
        if warnings:
            logger.info("Trade cap warnings for %s: %s", team_id, "; ".join(warnings))

        results.append(
            TeamCapImpact(
                team_id=team_id,
                team_name=team_names.get(team_id, team_id),
                before=before,
                after=after,
                salary_in=sum(asset.salary for asset in incoming),
                salary_out=sum(asset.salary for asset in outgoing),
                warnings=warnings,
            )
        )

    return results
