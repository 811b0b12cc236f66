"""Tests for team statistics aggregation."""

import pytest

from hoops_digest.models.team import Team
from hoops_digest.transform.boxscore import assemble_boxscore
from hoops_digest.transform.exceptions import ContractViolationError
from hoops_digest.transform.team_stats import (
    aggregate_from_players,
    aggregate_teams,
    build_team_statistics,
    flatten_totals,
)


def _team(team_id, abbreviation, score=None):
    return Team(team_id=team_id, name=abbreviation, city="", abbreviation=abbreviation, logo="",
                score=score)


def test_flatten_splits_compound_entries_positionally():
    flat = flatten_totals(
        [
            {"name": "fieldGoalsMade-fieldGoalsAttempted", "displayValue": "11-23"},
            {"name": "assists", "displayValue": "7"},
        ]
    )

    assert flat == {"fieldGoalsMade": "11", "fieldGoalsAttempted": "23", "assists": "7"}


def test_flatten_drops_mismatched_compound_values():
    flat = flatten_totals([{"name": "freeThrowsMade-freeThrowsAttempted", "displayValue": "--"}])

    assert "freeThrowsMade" not in flat


def test_aggregate_empty_team_list_is_contract_violation():
    with pytest.raises(ContractViolationError):
        aggregate_teams([])


def test_upstream_totals_preferred(boxscore_payload):
    boxscore = assemble_boxscore(boxscore_payload, "2")
    stats = build_team_statistics(boxscore_payload, boxscore, _team("2", "BOS", 112), _team("13", "LAL", 104))

    home = stats.home
    assert home.source == "team_totals"
    assert (home.field_goals_made, home.field_goals_attempted) == (41, 85)
    assert (home.three_pointers_made, home.three_pointers_attempted) == (15, 38)
    assert (home.free_throws_made, home.free_throws_attempted) == (15, 18)
    assert home.field_goal_pct == 48.2
    assert home.rebounds == 45
    assert home.turnovers == 12
    assert home.points == 112
    assert home.points_in_paint == 44
    assert home.lead_percentage == 78.0
    assert stats.away.points == 104
    assert stats.away.turnovers == 13


def test_percentages_stay_none_when_not_supplied():
    [stats] = aggregate_teams(
        [{"team": {"id": "2"}, "statistics": [{"name": "fieldGoalsMade-fieldGoalsAttempted", "displayValue": "0-10"}]}]
    )

    assert stats.field_goals_attempted == 10
    assert stats.field_goal_pct is None
    assert stats.three_point_pct is None
    assert stats.lead_percentage is None


def test_player_lines_used_when_totals_absent(boxscore_payload):
    for entry in boxscore_payload["teams"]:
        entry["statistics"] = []
    boxscore = assemble_boxscore(boxscore_payload, "2")

    stats = build_team_statistics(boxscore_payload, boxscore, _team("2", "BOS"), _team("13", "LAL"))

    home = stats.home
    assert home.source == "player_lines"
    assert home.points == 34 + 23 + 11
    assert (home.field_goals_made, home.field_goals_attempted) == (25, 48)
    assert home.rebounds == 17
    assert home.field_goal_pct is None


def test_aggregate_from_players_direct(boxscore_payload):
    boxscore = assemble_boxscore(boxscore_payload)

    stats = aggregate_from_players(boxscore.team("13"))

    assert stats.points == 36 + 16 + 3
    assert stats.three_pointers_made == 6
    assert stats.assists == 15


def test_unmatched_teams_omit_statistics(boxscore_payload):
    boxscore = assemble_boxscore(boxscore_payload)

    assert build_team_statistics(boxscore_payload, boxscore, _team("2", "BOS"), _team("99", "XXX")) is None


def test_missing_teams_omit_statistics():
    assert build_team_statistics({}, None, _team("2", "BOS"), _team("13", "LAL")) is None
    assert build_team_statistics({"teams": [{"team": {"id": ""}}]}, None, _team("", ""), _team("13", "LAL")) is None
