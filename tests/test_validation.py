from keepercap.models import Player, PlayerRoster, RookieDraftInfo, RosterEntry
from keepercap.validation import has_blocking_errors, validate_roster


def _keep(player_id: str, keeper_round: int | None = None) -> RosterEntry:
    return RosterEntry(player_id=player_id, decision="KEEP", keeper_round=keeper_round)


def _player(player_id: str, *, is_rookie: bool = False, stash: bool = False, draft_info=None) -> Player:
    return Player(
        player_id=player_id,
        name=f"Player {player_id}",
        roster=PlayerRoster(
            is_rookie=is_rookie,
            is_international_stash=stash,
            rookie_draft_info=draft_info,
        ),
    )


def test_round_collision_reports_one_error_per_round():
    entries = [_keep("a", 4), _keep("b", 4), _keep("c", 6)]

    findings = validate_roster(entries, {})

    assert len(findings) == 1
    finding = findings[0]
    assert finding.type == "error"
    assert finding.field == "roundCollisions"
    assert "Round 4 has 2 keepers" in finding.message


def test_each_colliding_round_is_reported_once():
    entries = [_keep("a", 4), _keep("b", 4), _keep("c", 7), _keep("d", 7), _keep("e", 7)]

    findings = validate_roster(entries, {})

    assert [f.field for f in findings] == ["roundCollisions", "roundCollisions"]
    assert "Round 4 has 2 keepers" in findings[0].message
    assert "Round 7 has 3 keepers" in findings[1].message


def test_too_many_keepers():
    entries = [_keep(f"p{idx}", idx) for idx in range(1, 10)]

    findings = validate_roster(entries, {})

    assert [f.field for f in findings] == ["keepersCount"]
    assert "more than 8" in findings[0].message
    assert "9 keepers" in findings[0].message
    assert validate_roster(entries, {}, max_keepers=9) == []


def test_redshirt_eligibility():
    players = {
        "blocked": _player("blocked", is_rookie=True, draft_info=RookieDraftInfo(round=1, pick=3)),
        "vet": _player("vet"),
        "ok": _player("ok", is_rookie=True, draft_info=RookieDraftInfo(round=2, pick=1, redshirt_eligible=True)),
        "undrafted": _player("undrafted", is_rookie=True),
    }
    entries = [
        RosterEntry(player_id=player_id, decision="REDSHIRT")
        for player_id in ("blocked", "vet", "ok", "undrafted", "unknown")
    ]

    findings = validate_roster(entries, players)

    assert [(f.player_id, f.message) for f in findings] == [
        ("blocked", "Player blocked is not eligible for redshirt."),
        ("vet", "Player vet is not a rookie and cannot be redshirted."),
    ]
    assert all(f.type == "error" and f.field == "redshirtEligibility" for f in findings)


def test_int_stash_eligibility():
    players = {
        "drafted_no": _player("drafted_no", is_rookie=True, draft_info=RookieDraftInfo(round=1, pick=9)),
        "drafted_yes": _player(
            "drafted_yes", is_rookie=True, draft_info=RookieDraftInfo(round=3, pick=2, int_eligible=True)
        ),
        "domestic": _player("domestic"),
        "overseas": _player("overseas", stash=True),
    }
    entries = [
        RosterEntry(player_id=player_id, decision="INT_STASH")
        for player_id in ("drafted_no", "drafted_yes", "domestic", "overseas")
    ]

    findings = validate_roster(entries, players)

    assert [f.player_id for f in findings] == ["drafted_no", "domestic"]
    assert findings[1].message == "Player domestic is not an international stash player."


def test_preflight_warns_for_every_unassigned_keeper():
    players = {"a": _player("a")}
    entries = [_keep("a"), _keep("ghost"), RosterEntry(player_id="x", decision="DROP")]

    findings = validate_roster(entries, players)

    assert [(f.type, f.field, f.player_id) for f in findings] == [
        ("warning", "missingRounds", "a"),
        ("warning", "missingRounds", "ghost"),
    ]
    assert findings[0].message.startswith("Player a is marked as KEEP")
    assert findings[1].message.startswith("ghost is marked as KEEP")
    assert not has_blocking_errors(findings)


def test_findings_follow_check_order():
    players = {"vet": _player("vet"), "home": _player("home")}
    entries = [_keep("k1", 2), _keep("k2", 2), _keep("k3")]
    entries += [RosterEntry(player_id="home", decision="INT_STASH")]
    entries += [RosterEntry(player_id="vet", decision="REDSHIRT")]

    findings = validate_roster(entries, players, max_keepers=2)

    assert [f.field for f in findings] == [
        "keepersCount",
        "redshirtEligibility",
        "intStashEligibility",
        "roundCollisions",
        "missingRounds",
    ]
    assert has_blocking_errors(findings)


def test_validate_roster_does_not_modify_entries():
    entries = [_keep("a", 3), _keep("b", 3)]
    snapshot = [entry.model_copy() for entry in entries]

    validate_roster(entries, {})

    assert entries == snapshot
