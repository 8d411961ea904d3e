from keepercap.models import Player, RosterEntry
from keepercap.settlement import TradeAsset, compute_trade_cap_impact


def _player(player_id: str, salary: int) -> Player:
    return Player(player_id=player_id, name=player_id.upper(), salary=salary)


def _keep(player_id: str, base_round: int) -> RosterEntry:
    return RosterEntry(player_id=player_id, decision="KEEP", base_round=base_round)


def _by_team(impacts):
    return {impact.team_id: impact for impact in impacts}


def test_trade_crossing_first_apron_warns_receiver():
    players = {
        "a1": _player("a1", 150_000_000),
        "a2": _player("a2", 30_000_000),
        "b1": _player("b1", 50_000_000),
        "b2": _player("b2", 180_000_000),
    }
    rosters = {
        "A": [_keep("a1", 3), _keep("a2", 5)],
        "B": [_keep("b1", 4), _keep("b2", 2)],
    }
    assets = [
        TradeAsset(type="keeper", asset_id="b1", salary=50_000_000, from_team_id="B", to_team_id="A"),
        TradeAsset(type="keeper", asset_id="a2", salary=30_000_000, from_team_id="A", to_team_id="B"),
        TradeAsset(type="rookie_pick", asset_id="2026-1-A", salary=0, from_team_id="A", to_team_id="B"),
    ]

    impacts = compute_trade_cap_impact(
        assets=assets,
        rosters=rosters,
        players=players,
        trade_deltas={},
        team_names={"A": "Alphas"},
    )

    assert [impact.team_id for impact in impacts] == ["B", "A"]
    team_a = _by_team(impacts)["A"]
    assert team_a.team_name == "Alphas"
    assert team_a.before.cap_used == 180_000_000
    assert team_a.after.cap_used == 200_000_000
    assert team_a.after.keepers_count == 2
    assert team_a.salary_in == 50_000_000
    assert team_a.salary_out == 30_000_000
    assert team_a.warnings == ["Crosses first apron ($195M) - $50 one-time fee"]

    team_b = _by_team(impacts)["B"]
    assert team_b.team_name == "B"
    assert team_b.before.cap_used == 230_000_000
    assert team_b.after.cap_used == 210_000_000
    assert team_b.warnings == []


def test_trade_deepening_second_apron_and_hard_cap():
    players = {
        "c1": _player("c1", 230_000_000),
        "d1": _player("d1", 30_000_000),
        "d2": _player("d2", 100_000_000),
    }
    rosters = {
        "C": [_keep("c1", 2)],
        "D": [_keep("d1", 6), _keep("d2", 3)],
    }
    assets = [
        TradeAsset(type="keeper", asset_id="d1", salary=30_000_000, from_team_id="D", to_team_id="C"),
    ]

    impacts = _by_team(
        compute_trade_cap_impact(
            assets=assets,
            rosters=rosters,
            players=players,
            trade_deltas={"C": 10_000_000},
            team_names={},
        )
    )

    team_c = impacts["C"]
    assert team_c.after.cap_used == 260_000_000
    assert team_c.after.cap_effective == 235_000_000
    assert team_c.warnings == [
        "Increases second apron penalty from $10 to $70",
        "Exceeds hard cap ceiling ($255M)",
    ]
    assert impacts["D"].warnings == []


def test_incoming_redshirt_stays_off_the_cap():
    players = {
        "e1": _player("e1", 100_000_000),
        "rook": _player("rook", 8_000_000),
    }
    rosters = {
        "E": [_keep("e1", 4)],
        "F": [RosterEntry(player_id="rook", decision="REDSHIRT")],
    }
    assets = [
        TradeAsset(type="redshirt", asset_id="rook", salary=8_000_000, from_team_id="F", to_team_id="E"),
    ]

    impacts = _by_team(
        compute_trade_cap_impact(
            assets=assets,
            rosters=rosters,
            players=players,
            trade_deltas={},
            team_names={},
        )
    )

    assert impacts["E"].after.cap_used == 100_000_000
    assert impacts["E"].after.redshirts_count == 1
    assert impacts["E"].after.redshirt_dues == 10
    assert impacts["F"].after.redshirts_count == 0


def test_trade_thresholds_ignore_league_environment(monkeypatch):
    monkeypatch.setenv("KEEPERCAP_LEAGUE", "LEGACY")
    players = {"a1": _player("a1", 180_000_000), "b1": _player("b1", 20_000_000)}
    assets = [TradeAsset(type="keeper", asset_id="b1", salary=20_000_000, from_team_id="B", to_team_id="A")]

    impacts = compute_trade_cap_impact(
        assets=assets,
        rosters={"A": [_keep("a1", 3)], "B": [_keep("b1", 6)]},
        players=players,
        trade_deltas={},
        team_names={},
    )

    team_a = _by_team(impacts)["A"]
    assert team_a.after.cap_base == 225_000_000
    assert team_a.warnings == ["Crosses first apron ($195M) - $50 one-time fee"]
