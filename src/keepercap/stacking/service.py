"""Keeper round stacking: assign every kept player a unique draft round."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from itertools import groupby
from typing import Dict, List, Literal, Mapping, Optional, Sequence, Set, Tuple

from keepercap.models import DRAFT_ROUNDS, Player, RosterEntry


logger = logging.getLogger(__name__)

FRANCHISE_ROUND = 1

# Rookie draft slot -> base keeper round, for first-round rookie picks.
_ROOKIE_FIRST_ROUND_SLOTS: Tuple[Tuple[int, int, int], ...] = (
    (1, 3, 5),
    (4, 6, 6),
    (7, 9, 7),
    (10, 12, 8),
)

# (input index, entry, base round)
_Keeper = Tuple[int, RosterEntry, int]


@dataclass(frozen=True)
class StackingResult:
    entries: List[RosterEntry]
    franchise_tags: int


def base_keeper_round(player: Player) -> Optional[int]:
    """Derive a player's pre-stacking round, or None when it needs manual review."""

    roster = player.roster
    info = roster.rookie_draft_info
    if roster.is_rookie and info is not None:
        if info.round == 1:
            for first_pick, last_pick, base_round in _ROOKIE_FIRST_ROUND_SLOTS:
                if first_pick <= info.pick <= last_pick:
                    return base_round
        else:
            return DRAFT_ROUNDS

    if player.keeper is not None and player.keeper.prior_year_round:
        return max(1, player.keeper.prior_year_round - 1)

    return None


def derive_base_rounds(
    entries: Sequence[RosterEntry],
    players: Mapping[str, Player],
) -> List[RosterEntry]:
    """Fill in missing base rounds from the player catalog."""

    derived: List[RosterEntry] = []
    for entry in entries:
        player = players.get(entry.player_id)
        if entry.base_round is not None or player is None:
            derived.append(entry)
            continue
        base_round = base_keeper_round(player)
        if base_round is None:
            logger.debug("No base round derivable for %s", entry.player_id)
            derived.append(entry)
            continue
        derived.append(entry.model_copy(update={"base_round": base_round}))
    return derived


def _order_by_priority(group: Sequence[_Keeper], *, descending: bool = False) -> List[_Keeper]:
    """Sort ranked entries among the slots they hold; unranked entries stay put."""

    slots = [pos for pos, item in enumerate(group) if item[1].priority is not None]
    ranked = sorted(
        (group[pos] for pos in slots),
        key=lambda item: item[1].priority,
        reverse=descending,
    )
    ordered = list(group)
    for pos, item in zip(slots, ranked):
        ordered[pos] = item
    return ordered


def _order_by_base_round(keepers: Sequence[_Keeper], *, descending: bool) -> List[_Keeper]:
    by_round = sorted(keepers, key=lambda item: item[2], reverse=descending)
    ordered: List[_Keeper] = []
    for _, group in groupby(by_round, key=lambda item: item[2]):
        ordered.extend(_order_by_priority(list(group), descending=descending))
    return ordered


def _claim_round(target: int, occupied: Set[int], floor: int) -> Optional[int]:
    if target not in occupied:
        return target
    for candidate in range(target - 1, floor - 1, -1):
        if candidate not in occupied:
            return candidate
    for candidate in range(target + 1, DRAFT_ROUNDS + 1):
        if candidate not in occupied:
            return candidate
    return None


def _place(
    keepers: Sequence[_Keeper],
    occupied: Set[int],
    rounds: Dict[int, int],
    *,
    floor: int,
) -> None:
    for index, entry, base_round in keepers:
        claimed = _claim_round(base_round, occupied, floor)
        if claimed is None:
            logger.warning(
                "No open round for %s (base round %s); falling back to round %s",
                entry.player_id,
                base_round,
                DRAFT_ROUNDS,
            )
            claimed = DRAFT_ROUNDS
        elif claimed != base_round:
            logger.debug("%s moved from round %s to %s", entry.player_id, base_round, claimed)
        rounds[index] = claimed
        occupied.add(claimed)


def assign_rounds(entries: Sequence[RosterEntry]) -> StackingResult:
    """Assign keeper rounds for one team's entries.

    Only ``KEEP`` entries with a base round take part. The first round-1
    keeper (by priority) keeps round 1 for free; every other round-1 keeper
    is franchise tagged and stacked into rounds 2, 3, ... before the rest
    are resolved. Collisions probe backward toward round 1 first, then
    forward toward the last round. Entries without a priority hold their
    input position among same-round entries. Returns new entries; the
    input is not modified.
    """

    keepers: List[_Keeper] = [
        (index, entry, entry.base_round)
        for index, entry in enumerate(entries)
        if entry.is_keeper and entry.base_round is not None
    ]
    cohort = [item for item in keepers if item[2] == FRANCHISE_ROUND]
    others = [item for item in keepers if item[2] != FRANCHISE_ROUND]

    rounds: Dict[int, int] = {}
    occupied: Set[int] = set()
    franchise_tags = 0

    if cohort:
        cohort = _order_by_priority(cohort)
        free_index = cohort[0][0]
        rounds[free_index] = FRANCHISE_ROUND
        occupied.add(FRANCHISE_ROUND)

        tagged = cohort[1:]
        franchise_tags = len(tagged)
        for offset, (index, entry, _) in enumerate(tagged, start=FRANCHISE_ROUND + 1):
            if offset > DRAFT_ROUNDS:
                logger.warning(
                    "Franchise tag for %s overflows the draft; falling back to round %s",
                    entry.player_id,
                    DRAFT_ROUNDS,
                )
                offset = DRAFT_ROUNDS
            rounds[index] = offset
            occupied.add(offset)

        _place(_order_by_base_round(others, descending=False), occupied, rounds, floor=FRANCHISE_ROUND + 1)
    else:
        _place(_order_by_base_round(others, descending=True), occupied, rounds, floor=FRANCHISE_ROUND)

    stacked: List[RosterEntry] = []
    for index, entry in enumerate(entries):
        if not entry.is_keeper:
            if entry.keeper_round is not None:
                entry = entry.model_copy(update={"keeper_round": None})
        elif index in rounds:
            entry = entry.model_copy(update={"keeper_round": rounds[index]})
        stacked.append(entry)

    if keepers:
        logger.info(
            "Stacked %s keepers into rounds %s (%s franchise tags)",
            len(keepers),
            sorted(rounds.values()),
            franchise_tags,
        )
    return StackingResult(entries=stacked, franchise_tags=franchise_tags)


def move_priority(
    entries: Sequence[RosterEntry],
    player_id: str,
    direction: Literal["up", "down"],
) -> List[RosterEntry]:
    """Swap a player with its neighbour inside its base-round group.

    Priorities of the whole group are renumbered from 0 in the new order.
    Entries are returned unchanged when the player is unknown, has no
    base round, or is already at the edge of its group.
    """

    target = next((entry for entry in entries if entry.player_id == player_id), None)
    if target is None or target.base_round is None:
        return list(entries)

    group = [
        entry
        for entry in entries
        if entry.base_round == target.base_round and entry.decision != "DROP"
    ]
    if len(group) <= 1:
        return list(entries)

    # Unranked entries trail the ranked ones here so they can be moved up.
    group.sort(key=lambda entry: (entry.priority is None, entry.priority or 0))
    current = next(idx for idx, entry in enumerate(group) if entry.player_id == player_id)
    new_index = current - 1 if direction == "up" else current + 1
    if new_index < 0 or new_index >= len(group):
        return list(entries)

    group[current], group[new_index] = group[new_index], group[current]
    new_priority = {entry.player_id: idx for idx, entry in enumerate(group)}

    return [
        entry.model_copy(update={"priority": new_priority[entry.player_id]})
        if entry.player_id in new_priority
        else entry
        for entry in entries
    ]
