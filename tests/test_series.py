"""Tests for season series reconciliation."""

from hoops_digest.models.game import Game
from hoops_digest.models.team import Team
from hoops_digest.transform.series import build_season_series, parse_series_event, series_summary


def _game(game_id="401700", home_id="2", away_id="13"):
    return Game(
        game_id=game_id,
        home_team=Team(team_id=home_id, name="Celtics", city="Boston", abbreviation="BOS", logo=""),
        away_team=Team(team_id=away_id, name="Lakers", city="Los Angeles", abbreviation="LAL", logo=""),
    )


def _event(event_id, home_id, away_id, winner_id=None, completed=False, date=None):
    event = {
        "id": event_id,
        "statusType": {"completed": completed},
        "competitors": [
            {"homeAway": "home", "winner": winner_id == home_id, "team": {"id": home_id}},
            {"homeAway": "away", "winner": winner_id == away_id, "team": {"id": away_id}},
        ],
    }
    if date is not None:
        event["date"] = date
    return event


def test_recomputes_counts_from_completed_games(series_payload):
    series = build_season_series(series_payload, _game())

    assert series.home_wins == 2
    assert series.away_wins == 0
    assert series.completed_games == 2
    assert series.total_games == 3
    assert series.summary == "BOS leads series 2-0"
    assert series.title == "Regular Season Series"


def test_current_game_pinned_first_then_chronological(series_payload):
    series = build_season_series(series_payload, _game())

    assert [e.event_id for e in series.events] == ["401700", "401600", "401800"]
    assert series.events[0].is_current is True
    assert not any(e.is_current for e in series.events[1:])


def test_other_matchups_filtered_out(series_payload):
    series = build_season_series(series_payload, _game())

    assert "401650" not in {e.event_id for e in series.events}


def test_winner_from_flag_and_scheduled_ignored():
    payload = {
        "totalCompetitions": 4,
        "events": [
            _event("1", "2", "13", winner_id="13", completed=True, date="2025-11-01T00:00Z"),
            _event("2", "13", "2", date="2026-02-01T00:00Z"),
        ],
    }

    series = build_season_series(payload, _game(game_id="999"))

    assert series.away_wins == 1
    assert series.home_wins == 0
    assert series.total_games == 4
    assert series.summary == "LAL leads series 1-0"


def test_completed_without_winner_flag_not_counted():
    payload = {"events": [_event("1", "2", "13", completed=True), _event("2", "2", "13", winner_id="2")]}

    series = build_season_series(payload, _game(game_id="999"))

    assert series.home_wins + series.away_wins == 0
    assert series.total_games == 2
    assert series.summary == "Series tied 0-0"


def test_win_counts_never_exceed_resolvable_events(series_payload):
    series = build_season_series(series_payload, _game())
    resolvable = [e for e in series.events if e.completed and e.winner_team_id]

    assert series.home_wins + series.away_wins <= len(resolvable)


def test_upstream_summary_string_ignored(series_payload):
    series_payload[0]["summary"] = "LAL leads series 3-0"

    assert build_season_series(series_payload, _game()).summary == "BOS leads series 2-0"


def test_no_matching_events_returns_none(series_payload):
    assert build_season_series(series_payload, _game(home_id="7", away_id="8")) is None
    assert build_season_series(None, _game()) is None
    assert build_season_series([], _game()) is None


def test_completed_from_state_post():
    event = _event("1", "2", "13", winner_id="2")
    event["statusType"] = {"state": "post"}

    assert parse_series_event(event).completed is True


def test_event_without_two_competitors_skipped():
    assert parse_series_event({"id": "1", "competitors": [{"team": {"id": "2"}}]}) is None


def test_series_summary_tied():
    assert series_summary("BOS", "LAL", 1, 1) == "Series tied 1-1"
