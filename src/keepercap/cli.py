"""Command-line interface for stacking and settling a keeper roster."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path

from keepercap.config import default_rules, get_rules
from keepercap.config_loader import LeagueProfile
from keepercap.ingest import load_entries_csv, load_players
from keepercap.stacking import assign_rounds, derive_base_rounds
from keepercap.settlement import compute_summary
from keepercap.validation import has_blocking_errors, validate_roster


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Assign keeper rounds and settle cap fees for one team")
    parser.add_argument("entries", type=Path, help="Path to roster entries CSV")
    parser.add_argument("--players", type=Path, required=True, help="Player catalog (CSV or JSON)")
    parser.add_argument("--league", default=None, help="League preset key (e.g., STANDARD, LEGACY)")
    parser.add_argument("--league-profile", type=Path, default=None, help="League override JSON")
    parser.add_argument("--trade-delta", type=int, default=0, help="Cap adjustment from trades, in dollars")
    parser.add_argument(
        "--drafted",
        nargs="*",
        default=None,
        help="Player IDs already drafted in the live draft",
    )
    parser.add_argument("--max-keepers", type=int, default=None, help="Override the league keeper limit")
    parser.add_argument("--output", type=Path, default=None, help="Optional path to write the result JSON")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.league_profile:
        rules = LeagueProfile.load(args.league_profile).resolve()
    else:
        rules = get_rules(args.league) if args.league else default_rules()

    players = load_players(args.players)
    entries = derive_base_rounds(load_entries_csv(args.entries), players)

    stacked = assign_rounds(entries)
    drafted = [players[player_id] for player_id in (args.drafted or []) if player_id in players]
    summary = compute_summary(
        entries=stacked.entries,
        all_players=players,
        franchise_tags=stacked.franchise_tags,
        trade_delta=args.trade_delta,
        drafted_players=drafted,
        rules=rules,
    )
    max_keepers = args.max_keepers if args.max_keepers is not None else rules.max_keepers
    findings = validate_roster(stacked.entries, players, max_keepers)

    for entry in stacked.entries:
        if entry.keeper_round is None:
            continue
        name = players[entry.player_id].name if entry.player_id in players else entry.player_id
        print(f"Round {entry.keeper_round:>2}: {name}")
    print(
        f"Cap used ${summary.cap_used:,} of ${summary.cap_effective:,}; "
        f"franchise tags {summary.franchise_tags}; total fees ${summary.total_fees:g}"
    )
    for finding in findings:
        print(f"[{finding.type}] {finding.message}")

    if args.output:
        payload = {
            "entries": [entry.model_dump() for entry in stacked.entries],
            "summary": summary.model_dump(),
            "findings": [finding.model_dump() for finding in findings],
        }
        args.output.write_text(json.dumps(payload, indent=2), encoding="utf-8")
        print(f"Wrote result to {args.output}")

    if has_blocking_errors(findings):
        raise SystemExit(1)


if __name__ == "__main__":
    main()
