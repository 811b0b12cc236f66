"""Tests for the game impact score and MVP selection."""

import pytest

from hoops_digest.models.boxscore import TeamBoxscore
from hoops_digest.models.player import PlayerLine, PlayerStats
from hoops_digest.transform.impact import calculate_gis, round_gis, select_game_mvp


def _line(name, team_id, athlete_id=None, did_not_play=False, **stats):
    return PlayerLine(
        athlete_id=athlete_id or name,
        name=name,
        team_id=team_id,
        did_not_play=did_not_play,
        stats=PlayerStats(**stats),
    )


def _team(team_id, *players):
    return TeamBoxscore(team_id=team_id, abbreviation=team_id, bench=list(players))


def test_calculate_gis_weights():
    stats = PlayerStats(points=20, rebounds=10, assists=10, steals=2, blocks=1, turnovers=4)

    assert calculate_gis(stats) == pytest.approx(20 + 12 + 15 + 6 + 3 - 4)


@pytest.mark.parametrize(
    "value,expected",
    [(16.9, 16.9), (16.94, 16.9), (10.25, 10.3), (10.24, 10.2), (63.5, 63.5)],
)
def test_round_gis_half_up(value, expected):
    assert round_gis(value) == pytest.approx(expected)


def test_mvp_restricted_to_winning_team():
    winners = _team("A", _line("Role Player", "A", points=12))
    losers = _team("B", _line("Superstar", "B", points=50, rebounds=15))

    mvp = select_game_mvp([winners, losers], winner_team_id="A")

    assert mvp.name == "Role Player"
    assert mvp.team_id == "A"


def test_mvp_pool_widens_when_winner_has_no_eligible_players():
    winners = _team("A", _line("Benched", "A", did_not_play=True))
    losers = _team("B", _line("Superstar", "B", points=50))

    mvp = select_game_mvp([winners, losers], winner_team_id="A")

    assert mvp.name == "Superstar"
    assert mvp.team_id == "B"


def test_mvp_excludes_did_not_play():
    team = _team(
        "A",
        _line("Out", "A", did_not_play=True, points=99),
        _line("Played", "A", points=5),
    )

    assert select_game_mvp([team], winner_team_id="A").name == "Played"


def test_mvp_tie_break_prefers_points_then_name():
    # 20 points vs 14 points + 5 rebounds: both 20.0
    team = _team(
        "A",
        _line("Zed", "A", points=14, rebounds=5),
        _line("Young", "A", points=20),
        _line("Adams", "A", points=20),
    )

    assert select_game_mvp([team], "A").name == "Adams"
    reversed_team = _team("A", *reversed(team.bench))
    assert select_game_mvp([reversed_team], "A").name == "Adams"


def test_mvp_none_when_nobody_played():
    team = _team("A", _line("Out", "A", did_not_play=True))

    assert select_game_mvp([team], "A") is None
    assert select_game_mvp([]) is None


def test_mvp_carries_rounded_score_and_team_identity():
    team = TeamBoxscore(
        team_id="A",
        team_name="Boston Celtics",
        abbreviation="BOS",
        logo="logo.png",
        starters=[_line("Payton Pritchard", "A", points=11, rebounds=2, assists=3, turnovers=1)],
    )

    mvp = select_game_mvp([team], "A")

    assert mvp.gis == 16.9
    assert mvp.team_abbreviation == "BOS"
    assert mvp.team_name == "Boston Celtics"
    assert mvp.team_logo == "logo.png"
    assert mvp.stats.points == 11
