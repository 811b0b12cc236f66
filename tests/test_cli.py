"""Tests for CLI commands."""

import json
from unittest.mock import patch

from typer.testing import CliRunner

runner = CliRunner()


def _write(tmp_path, name, payload):
    path = tmp_path / name
    path.write_text(json.dumps(payload), encoding="utf-8")
    return str(path)


# ---------------------------------------------------------------------------
# scoreboard
# ---------------------------------------------------------------------------


def test_scoreboard(tmp_path, final_event):
    from hoops_digest.cli import app

    path = _write(tmp_path, "scoreboard.json", {"day": {"date": "2025-12-25"}, "events": [final_event]})

    result = runner.invoke(app, ["scoreboard", path])

    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert data["date"] == "2025-12-25"
    assert data["total_games"] == 1
    assert data["games"][0]["competitiveness"]["type"] == "comfortable"


def test_scoreboard_featured_only(tmp_path, final_event):
    from hoops_digest.cli import app

    path = _write(tmp_path, "scoreboard.json", {"events": [final_event]})

    result = runner.invoke(app, ["scoreboard", path, "--featured"])

    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert set(data) == {"featured", "other"}
    assert data["other"][0]["game_id"] == "401700"


def test_scoreboard_missing_file(tmp_path):
    from hoops_digest.cli import app

    result = runner.invoke(app, ["scoreboard", str(tmp_path / "missing.json")])

    assert result.exit_code == 1
    assert "FAIL" in result.output


def test_scoreboard_invalid_json(tmp_path):
    from hoops_digest.cli import app

    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")

    result = runner.invoke(app, ["scoreboard", str(path)])

    assert result.exit_code == 1
    assert "FAIL" in result.output


# ---------------------------------------------------------------------------
# game / facts / story
# ---------------------------------------------------------------------------


def test_game_with_summary(tmp_path, final_event, summary_payload):
    from hoops_digest.cli import app

    event = _write(tmp_path, "event.json", final_event)
    summary = _write(tmp_path, "summary.json", summary_payload)

    result = runner.invoke(app, ["game", event, "--summary-file", summary])

    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert data["boxscore"]["game_mvp"]["name"] == "Jayson Tatum"
    assert data["season_series"]["summary"] == "BOS leads series 2-0"


def test_game_without_competition(tmp_path):
    from hoops_digest.cli import app

    result = runner.invoke(app, ["game", _write(tmp_path, "event.json", {"id": "1"})])

    assert result.exit_code == 1
    assert "FAIL" in result.output


def test_facts(tmp_path, final_event, summary_payload):
    from hoops_digest.cli import app

    event = _write(tmp_path, "event.json", final_event)
    summary = _write(tmp_path, "summary.json", summary_payload)

    result = runner.invoke(app, ["facts", event, summary])

    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert data["q1"] == "30-24"
    assert data["winner"] == "home"


def test_facts_without_team_statistics(tmp_path, final_event):
    from hoops_digest.cli import app

    event = _write(tmp_path, "event.json", final_event)
    summary = _write(tmp_path, "summary.json", {"injuries": []})

    result = runner.invoke(app, ["facts", event, summary])

    assert result.exit_code == 1
    assert "FAIL" in result.output


def test_story(tmp_path, final_event, summary_payload):
    from hoops_digest.cli import app

    event = _write(tmp_path, "event.json", final_event)
    summary = _write(tmp_path, "summary.json", summary_payload)

    result = runner.invoke(app, ["story", event, summary])

    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert data["source"] == "fallback"
    assert data["summary"].startswith("Celtics beat Lakers 112-104")


def test_story_for_live_game_fails(tmp_path, make_event, summary_payload):
    from hoops_digest.cli import app

    event = _write(
        tmp_path,
        "event.json",
        make_event(home_score=50, away_score=48, status_name="STATUS_IN_PROGRESS", period=2),
    )
    summary = _write(tmp_path, "summary.json", summary_payload)

    result = runner.invoke(app, ["story", event, summary])

    assert result.exit_code == 1
    assert "FAIL" in result.output


def test_story_failure_from_service(tmp_path, final_event, summary_payload):
    from hoops_digest.cli import app
    from hoops_digest.transform.exceptions import SummaryUnavailableError

    event = _write(tmp_path, "event.json", final_event)
    summary = _write(tmp_path, "summary.json", summary_payload)

    with patch(
        "hoops_digest.cli.games.GameSummaryService.summarize",
        side_effect=SummaryUnavailableError("no fallback"),
    ):
        result = runner.invoke(app, ["story", event, summary])

    assert result.exit_code == 1
    assert "no fallback" in result.output
