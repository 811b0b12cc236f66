"""Game commands: scoreboard, game, facts, story."""

import json
from pathlib import Path
from typing import Any

import structlog
import typer

from hoops_digest.models.game import Game
from hoops_digest.services.games import GameService
from hoops_digest.services.summary import GameSummaryService
from hoops_digest.transform.exceptions import TransformError
from hoops_digest.transform.narrative import build_game_facts
from hoops_digest.utils.cache import ResponseCache

logger = structlog.get_logger(__name__)


def load_json(path: Path) -> Any:
    """Read a JSON payload, exiting with a failure message when it cannot be read."""
    try:
        with path.open(encoding="utf-8") as f:
            return json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        logger.error("Cannot read payload", path=str(path), error=str(e))
        typer.echo(f"[FAIL] Cannot read {path}: {e}", err=True)
        raise typer.Exit(code=1) from e


def _load_game(event_file: Path, summary_file: Path | None) -> Game:
    event = load_json(event_file)
    summary = load_json(summary_file) if summary_file is not None else None
    game = GameService().game_details(event, summary)
    if game is None:
        typer.echo(f"[FAIL] No game found in {event_file}", err=True)
        raise typer.Exit(code=1)
    return game


def scoreboard(
    file: Path = typer.Argument(..., help="Scoreboard JSON payload"),
    featured: bool = typer.Option(
        False,
        "--featured",
        "-f",
        help="Print only the featured/other ranking",
    ),
) -> None:
    """Transform and rank a day's scoreboard."""
    result = GameService().scoreboard(load_json(file))
    logger.info("Scoreboard transformed", date=result.date, total_games=result.total_games)
    if featured:
        typer.echo(result.ranked.model_dump_json(indent=2, include={"featured", "other"}))
    else:
        typer.echo(result.model_dump_json(indent=2))


def game(
    event_file: Path = typer.Argument(..., help="Scoreboard event JSON payload"),
    summary_file: Path = typer.Option(
        None,
        "--summary-file",
        "-s",
        help="Game summary JSON payload (boxscore, season series, injuries)",
    ),
) -> None:
    """Print a game with every available detail section."""
    typer.echo(_load_game(event_file, summary_file).model_dump_json(indent=2))


def facts(
    event_file: Path = typer.Argument(..., help="Scoreboard event JSON payload"),
    summary_file: Path = typer.Argument(..., help="Game summary JSON payload"),
) -> None:
    """Print the GameFacts snapshot handed to narrative generators."""
    snapshot = build_game_facts(_load_game(event_file, summary_file))
    if snapshot is None:
        typer.echo("[FAIL] Team statistics unavailable for this game", err=True)
        raise typer.Exit(code=1)
    typer.echo(snapshot.model_dump_json(indent=2))


def story(
    event_file: Path = typer.Argument(..., help="Scoreboard event JSON payload"),
    summary_file: Path = typer.Argument(..., help="Game summary JSON payload"),
) -> None:
    """Print the summary of a final game."""
    service = GameSummaryService(cache=ResponseCache())
    try:
        summary = service.summarize(_load_game(event_file, summary_file))
    except TransformError as e:
        logger.error("Summary unavailable", error=str(e))
        typer.echo(f"[FAIL] {e}", err=True)
        raise typer.Exit(code=1) from e
    typer.echo(summary.model_dump_json(indent=2))
