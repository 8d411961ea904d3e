"""Pre-submission checks for one team's keeper decisions."""

from __future__ import annotations

from collections import Counter
from typing import List, Mapping, Sequence

from keepercap.models import Player, RosterEntry, ValidationFinding


def _redshirt_findings(player: Player) -> List[ValidationFinding]:
    info = player.roster.rookie_draft_info
    if info is not None:
        if info.redshirt_eligible:
            return []
        message = f"{player.name} is not eligible for redshirt."
    elif not player.roster.is_rookie:
        message = f"{player.name} is not a rookie and cannot be redshirted."
    else:
        return []
    return [
        ValidationFinding(
            type="error",
            field="redshirtEligibility",
            message=message,
            player_id=player.player_id,
        )
    ]


def _int_stash_findings(player: Player) -> List[ValidationFinding]:
    info = player.roster.rookie_draft_info
    if info is not None:
        if info.int_eligible:
            return []
        message = f"{player.name} is not eligible for international stash."
    elif not player.roster.is_international_stash:
        message = f"{player.name} is not an international stash player."
    else:
        return []
    return [
        ValidationFinding(
            type="error",
            field="intStashEligibility",
            message=message,
            player_id=player.player_id,
        )
    ]


def validate_roster(
    entries: Sequence[RosterEntry],
    all_players: Mapping[str, Player],
    max_keepers: int = 8,
) -> List[ValidationFinding]:
    """Run every roster check and return findings in a fixed order.

    Order: keeper count, redshirt eligibility, international stash
    eligibility, round collisions, keepers missing a round. Entries are
    never modified and nothing is raised; callers decide what to block on.
    """

    findings: List[ValidationFinding] = []
    keepers = [entry for entry in entries if entry.decision == "KEEP"]

    if len(keepers) > max_keepers:
        findings.append(
            ValidationFinding(
                type="error",
                field="keepersCount",
                message=f"Cannot keep more than {max_keepers} players. You have {len(keepers)} keepers.",
            )
        )

    for entry in entries:
        if entry.decision != "REDSHIRT":
            continue
        player = all_players.get(entry.player_id)
        if player is not None:
            findings.extend(_redshirt_findings(player))

    for entry in entries:
        if entry.decision != "INT_STASH":
            continue
        player = all_players.get(entry.player_id)
        if player is not None:
            findings.extend(_int_stash_findings(player))

    round_counts = Counter(
        entry.keeper_round for entry in keepers if entry.keeper_round is not None
    )
    for keeper_round, count in round_counts.items():
        if count > 1:
            findings.append(
                ValidationFinding(
                    type="error",
                    field="roundCollisions",
                    message=f"Round {keeper_round} has {count} keepers. Resolve the collision before submitting.",
                )
            )

    for entry in keepers:
        if entry.keeper_round is not None:
            continue
        player = all_players.get(entry.player_id)
        label = player.name if player is not None else entry.player_id
        findings.append(
            ValidationFinding(
                type="warning",
                field="missingRounds",
                message=f"{label} is marked as KEEP but has no keeper round assigned.",
                player_id=entry.player_id,
            )
        )

    return findings


def has_blocking_errors(findings: Sequence[ValidationFinding]) -> bool:
    return any(finding.type == "error" for finding in findings)
