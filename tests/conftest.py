"""Pytest configuration and fixtures.

Payload fixtures mirror the upstream scoreboard and game summary shapes: a
Celtics (home, id 2) win over the Lakers (away, id 13), 112-104.
"""

import copy

import pytest

BOX_KEYS = [
    "minutes",
    "fieldGoalsMade-fieldGoalsAttempted",
    "threePointFieldGoalsMade-threePointFieldGoalsAttempted",
    "freeThrowsMade-freeThrowsAttempted",
    "offensiveRebounds",
    "defensiveRebounds",
    "rebounds",
    "assists",
    "steals",
    "blocks",
    "turnovers",
    "fouls",
    "plusMinus",
    "points",
]

CELTICS = {
    "id": "2",
    "abbreviation": "BOS",
    "displayName": "Boston Celtics",
    "shortDisplayName": "Celtics",
    "name": "Celtics",
    "location": "Boston",
    "logo": "https://a.espncdn.com/i/teamlogos/nba/500/bos.png",
}

LAKERS = {
    "id": "13",
    "abbreviation": "LAL",
    "displayName": "Los Angeles Lakers",
    "shortDisplayName": "Lakers",
    "name": "Lakers",
    "location": "Los Angeles",
    "logo": "https://a.espncdn.com/i/teamlogos/nba/500/lal.png",
}


def _athlete(athlete_id, name, stats, starter=False, did_not_play=False, reason=None):
    entry = {
        "athlete": {
            "id": athlete_id,
            "displayName": name,
            "shortName": f"{name[0]}. {name.split()[-1]}",
            "jersey": "0",
            "position": {"abbreviation": "F"},
            "headshot": {"href": f"https://example.test/{athlete_id}.png"},
        },
        "starter": starter,
        "didNotPlay": did_not_play,
        "stats": stats,
    }
    if reason is not None:
        entry["reason"] = reason
    return entry


def _leaders(name, points, rebounds, assists):
    return [
        {"name": "points", "displayName": "Points", "leaders": [{"value": points, "athlete": {"displayName": name}}]},
        {"name": "rebounds", "displayName": "Rebounds", "leaders": [{"value": rebounds, "athlete": {"displayName": name}}]},
        {"name": "assists", "displayName": "Assists", "leaders": [{"value": assists, "athlete": {"displayName": name}}]},
    ]


@pytest.fixture
def make_competitor():
    """Factory for scoreboard competitor payloads."""

    def _make(team, home_away, score=None, linescores=None, record="10-5", leaders=None):
        competitor = {
            "homeAway": home_away,
            "team": copy.deepcopy(team),
            "records": [{"type": "total", "summary": record}],
        }
        if score is not None:
            competitor["score"] = str(score)
        if linescores is not None:
            competitor["linescores"] = [{"value": value} for value in linescores]
        if leaders is not None:
            competitor["leaders"] = leaders
        return competitor

    return _make


@pytest.fixture
def make_event(make_competitor):
    """Factory for scoreboard events between two teams."""

    def _make(
        event_id="401700",
        home=CELTICS,
        away=LAKERS,
        home_score=None,
        away_score=None,
        status_name="STATUS_SCHEDULED",
        completed=False,
        period=0,
        description="Scheduled",
        home_linescores=None,
        away_linescores=None,
        home_leaders=None,
        away_leaders=None,
    ):
        return {
            "id": event_id,
            "date": "2025-12-25T20:00Z",
            "shortName": f"{away['abbreviation']} @ {home['abbreviation']}",
            "status": {
                "period": period,
                "displayClock": "0.0",
                "type": {
                    "name": status_name,
                    "completed": completed,
                    "description": description,
                    "shortDetail": description,
                },
            },
            "competitions": [
                {
                    "competitors": [
                        make_competitor(home, "home", home_score, home_linescores, leaders=home_leaders),
                        make_competitor(away, "away", away_score, away_linescores, "8-7", away_leaders),
                    ]
                }
            ],
        }

    return _make


@pytest.fixture
def final_event(make_event):
    """Final: Celtics 112, Lakers 104, regulation."""
    return make_event(
        home_score=112,
        away_score=104,
        status_name="STATUS_FINAL",
        completed=True,
        period=4,
        description="Final",
        home_linescores=[30, 25, 28, 29],
        away_linescores=[24, 30, 26, 24],
        home_leaders=_leaders("Jayson Tatum", 34.0, 10.0, 6.0),
        away_leaders=_leaders("LeBron James", 36.0, 10.0, 9.0),
    )


@pytest.fixture
def boxscore_payload():
    """Upstream boxscore with team totals and player keys/values."""
    home_players = [
        _athlete("4065648", "Jayson Tatum",
                 ["38", "12-22", "4-9", "6-7", "1", "9", "10", "6", "2", "1", "3", "2", "+10", "34"],
                 starter=True),
        _athlete("3917376", "Jaylen Brown",
                 ["35", "9-18", "2-6", "3-4", "1", "4", "5", "4", "1", "0", "2", "3", "+6", "23"],
                 starter=True),
        _athlete("4066354", "Payton Pritchard",
                 ["24", "4-8", "3-6", "0-0", "0", "2", "2", "3", "0", "0", "1", "1", "+4", "11"]),
        _athlete("4397424", "Neemias Queta", [], did_not_play=True, reason="COACH'S DECISION"),
    ]
    away_players = [
        _athlete("1966", "LeBron James",
                 ["37", "14-25", "3-7", "5-6", "2", "8", "10", "9", "1", "1", "4", "1", "-6", "36"],
                 starter=True),
        _athlete("4066457", "Austin Reaves",
                 ["34", "6-14", "2-7", "2-2", "0", "3", "3", "5", "1", "0", "2", "2", "-8", "16"],
                 starter=True),
        _athlete("3137259", "Gabe Vincent",
                 ["12", "1-4", "1-3", "0-0", "0", "1", "1", "1", "0", "0", "0", "1", "-2", "3"]),
    ]
    return {
        "teams": [
            {
                "team": copy.deepcopy(CELTICS),
                "homeAway": "home",
                "statistics": [
                    {"name": "fieldGoalsMade-fieldGoalsAttempted", "displayValue": "41-85"},
                    {"name": "fieldGoalPct", "displayValue": "48.2"},
                    {"name": "threePointFieldGoalsMade-threePointFieldGoalsAttempted", "displayValue": "15-38"},
                    {"name": "threePointFieldGoalPct", "displayValue": "39.5"},
                    {"name": "freeThrowsMade-freeThrowsAttempted", "displayValue": "15-18"},
                    {"name": "freeThrowPct", "displayValue": "83.3"},
                    {"name": "totalRebounds", "displayValue": "45"},
                    {"name": "offensiveRebounds", "displayValue": "9"},
                    {"name": "defensiveRebounds", "displayValue": "36"},
                    {"name": "assists", "displayValue": "25"},
                    {"name": "steals", "displayValue": "7"},
                    {"name": "blocks", "displayValue": "5"},
                    {"name": "turnovers", "displayValue": "11"},
                    {"name": "totalTurnovers", "displayValue": "12"},
                    {"name": "fouls", "displayValue": "18"},
                    {"name": "pointsInPaint", "displayValue": "44"},
                    {"name": "fastBreakPoints", "displayValue": "12"},
                    {"name": "turnoverPoints", "displayValue": "16"},
                    {"name": "largestLead", "displayValue": "14"},
                    {"name": "leadChanges", "displayValue": "6"},
                    {"name": "leadPercentage", "displayValue": "78"},
                ],
            },
            {
                "team": copy.deepcopy(LAKERS),
                "homeAway": "away",
                "statistics": [
                    {"name": "fieldGoalsMade-fieldGoalsAttempted", "displayValue": "38-90"},
                    {"name": "fieldGoalPct", "displayValue": "42.2"},
                    {"name": "threePointFieldGoalsMade-threePointFieldGoalsAttempted", "displayValue": "9-30"},
                    {"name": "threePointFieldGoalPct", "displayValue": "30.0"},
                    {"name": "freeThrowsMade-freeThrowsAttempted", "displayValue": "19-22"},
                    {"name": "freeThrowPct", "displayValue": "86.4"},
                    {"name": "totalRebounds", "displayValue": "40"},
                    {"name": "offensiveRebounds", "displayValue": "10"},
                    {"name": "defensiveRebounds", "displayValue": "30"},
                    {"name": "assists", "displayValue": "22"},
                    {"name": "steals", "displayValue": "6"},
                    {"name": "blocks", "displayValue": "3"},
                    {"name": "totalTurnovers", "displayValue": "13"},
                    {"name": "fouls", "displayValue": "17"},
                    {"name": "pointsInPaint", "displayValue": "50"},
                    {"name": "fastBreakPoints", "displayValue": "10"},
                    {"name": "turnoverPoints", "displayValue": "14"},
                    {"name": "largestLead", "displayValue": "4"},
                    {"name": "leadChanges", "displayValue": "6"},
                    {"name": "leadPercentage", "displayValue": "15"},
                ],
            },
        ],
        "players": [
            {
                "team": copy.deepcopy(CELTICS),
                "statistics": [{"keys": list(BOX_KEYS), "athletes": home_players}],
            },
            {
                "team": copy.deepcopy(LAKERS),
                "statistics": [{"keys": list(BOX_KEYS), "athletes": away_players}],
            },
        ],
    }


@pytest.fixture
def series_payload():
    """Season series: an earlier Celtics win, the current game, a future game and a stray event."""

    def event(event_id, date, home_id, away_id, home_score, away_score, winner_id, completed):
        return {
            "id": event_id,
            "date": date,
            "statusType": {
                "completed": completed,
                "state": "post" if completed else "pre",
                "shortDetail": "Final" if completed else "Scheduled",
            },
            "competitors": [
                {"homeAway": "home", "winner": winner_id == home_id, "team": {"id": home_id}, "score": home_score},
                {"homeAway": "away", "winner": winner_id == away_id, "team": {"id": away_id}, "score": away_score},
            ],
        }

    return [
        {
            "type": "season",
            "title": "Regular Season Series",
            "summary": "Series tied 1-1",
            "totalCompetitions": 3,
            "events": [
                event("401800", "2026-03-08T20:30Z", "13", "2", None, None, None, False),
                event("401600", "2025-11-01T23:30Z", "13", "2", "99", "105", "2", True),
                event("401700", "2025-12-25T20:00Z", "2", "13", "112", "104", "2", True),
                event("401650", "2025-11-20T23:30Z", "2", "5", "120", "101", "2", True),
            ],
        }
    ]


@pytest.fixture
def injuries_payload():
    return [
        {
            "team": {"id": "2", "abbreviation": "BOS"},
            "injuries": [
                {
                    "athlete": {"id": "3102531", "displayName": "Kristaps Porzingis", "position": {"abbreviation": "C"}},
                    "status": "Out",
                    "details": {
                        "type": "Out",
                        "location": "Leg",
                        "detail": "Ankle",
                        "side": "Left",
                        "returnDate": "2026-01-05",
                    },
                }
            ],
        },
        {
            "team": {"id": "13", "abbreviation": "LAL"},
            "injuries": [
                {
                    "athlete": {"id": "3136776", "displayName": "Jarred Vanderbilt", "position": {"abbreviation": "F"}},
                    "status": "Day-To-Day",
                }
            ],
        },
        {
            "team": {"id": "5", "abbreviation": "CLE"},
            "injuries": [{"athlete": {"id": "1", "displayName": "Someone Else"}, "status": "Out"}],
        },
    ]


@pytest.fixture
def summary_payload(boxscore_payload, series_payload, injuries_payload):
    return {
        "boxscore": boxscore_payload,
        "seasonseries": series_payload,
        "injuries": injuries_payload,
    }


@pytest.fixture
def sample_settings(tmp_path):
    """Sample settings for testing."""
    from hoops_digest.utils.config import Settings

    return Settings(
        cache_enabled=True,
        log_level="DEBUG",
        log_format="console",
        log_dir=str(tmp_path / "logs"),
    )


@pytest.fixture
def celtics():
    """Bare upstream team object for the home side."""
    return copy.deepcopy(CELTICS)


@pytest.fixture
def lakers():
    """Bare upstream team object for the away side."""
    return copy.deepcopy(LAKERS)
