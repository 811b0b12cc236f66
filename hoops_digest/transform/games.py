"""Event to Game assembly plus scoreboard and game-detail orchestration."""

from __future__ import annotations

from typing import Any

import structlog

from hoops_digest.models.config import TransformConfig
from hoops_digest.models.game import Game, GameCard, GameStatus, MaxLead, Scoreboard, TeamCard
from hoops_digest.models.team import Team
from hoops_digest.transform.boxscore import assemble_boxscore
from hoops_digest.transform.features import classify, rank_games
from hoops_digest.transform.injuries import build_injury_report
from hoops_digest.transform.narrative import generate_game_story
from hoops_digest.transform.parsing import as_dict, as_list, dig, to_int, to_str
from hoops_digest.transform.series import build_season_series
from hoops_digest.transform.status import reconcile_status
from hoops_digest.transform.team_stats import build_team_statistics
from hoops_digest.transform.teams import extract_game_leaders, normalize_team

logger = structlog.get_logger(__name__)


def _competitor(competitors: list[Any], side: str) -> dict[str, Any]:
    for competitor in competitors:
        competitor = as_dict(competitor)
        if competitor.get("homeAway") == side:
            return competitor
    return {}


def calculate_max_lead(home: Team, away: Team) -> MaxLead | None:
    """
    Largest lead at the end of any period, from cumulative period scores.

    Periods are paired by position; the first period reaching the largest lead
    wins. None when either side lacks period data or nobody ever led.
    """
    if not home.periods or not away.periods:
        return None

    home_total = away_total = 0
    best: tuple[int, str, int] | None = None
    for index, (home_period, away_period) in enumerate(
        zip(home.periods, away.periods, strict=False), start=1
    ):
        home_total += home_period.score or 0
        away_total += away_period.score or 0
        lead = abs(home_total - away_total)
        if lead > 0 and (best is None or lead > best[0]):
            side = "home" if home_total > away_total else "away"
            best = (lead, side, home_period.period or index)

    if best is None:
        return None
    points, side, period = best
    leader = home if side == "home" else away
    return MaxLead(
        side=side,
        points=points,
        period=period,
        team_id=leader.team_id,
        team_abbreviation=leader.abbreviation,
    )


def build_game(event: Any, config: TransformConfig | None = None) -> Game | None:
    """
    Build a canonical Game from an upstream scoreboard event.

    Status is reconciled against the scores, both teams are normalized, and
    every derived flag is computed once before the frozen Game is created.

    Args:
        event: Upstream event with ``competitions[0].competitors``.
        config: Marquee lists and logo template.

    Returns:
        Game, or None when the event has no competition.
    """
    event = as_dict(event)
    competition = as_dict(dig(event, "competitions", 0))
    if not competition:
        logger.debug("Event has no competition", event_id=event.get("id"))
        return None

    status = as_dict(event.get("status")) or as_dict(competition.get("status"))
    status_type = as_dict(status.get("type"))
    competitors = as_list(competition.get("competitors"))
    home_competitor = _competitor(competitors, "home")
    away_competitor = _competitor(competitors, "away")

    home = normalize_team(home_competitor, config)
    away = normalize_team(away_competitor, config)
    completed = status_type.get("completed") is True or status.get("completed") is True
    game_status = reconcile_status(status_type.get("name"), home.score, away.score, completed)

    period = max(to_int(status.get("period")) or 0, 0)
    status_text = to_str(
        status_type.get("description") or status_type.get("shortDetail"), "Scheduled"
    )
    features = classify(game_status, period, status_text, home, away, config)

    return Game(
        game_id=to_str(event.get("id")),
        game_code=to_str(event.get("shortName")),
        status=game_status,
        status_text=status_text,
        period=period,
        clock=to_str(status.get("displayClock")),
        scheduled_at=to_str(event.get("date")) or None,
        home_team=home,
        away_team=away,
        leaders=extract_game_leaders(home_competitor, away_competitor),
        is_overtime=features.is_overtime,
        is_closest=features.is_closest,
        is_marquee=features.is_marquee,
        score_difference=features.score_difference,
        competitiveness=features.competitiveness,
        max_lead=calculate_max_lead(home, away),
    )


def _team_card(team: Team) -> TeamCard:
    return TeamCard(
        name=team.name,
        city=team.city,
        abbreviation=team.abbreviation,
        logo=team.logo,
        wins=team.wins,
        losses=team.losses,
        score=team.score,
    )


def to_game_card(game: Game) -> GameCard:
    """Minimized representation for list views."""
    return GameCard(
        game_id=game.game_id,
        status=game.status,
        status_text=game.status_text,
        scheduled_at=game.scheduled_at,
        period=game.period,
        home_team=_team_card(game.home_team),
        away_team=_team_card(game.away_team),
    )


def build_scoreboard(payload: Any, config: TransformConfig | None = None) -> Scoreboard:
    """
    Transform a scoreboard payload into games and their display ranking.

    Args:
        payload: Upstream scoreboard with ``events`` and ``day.date``.
        config: Marquee lists and logo template.

    Returns:
        Scoreboard; events without a competition are skipped.
    """
    payload = as_dict(payload)
    games = [
        game
        for game in (build_game(event, config) for event in as_list(payload.get("events")))
        if game is not None
    ]
    date = to_str(dig(payload, "day", "date"))
    if not date and games and games[0].scheduled_at:
        date = games[0].scheduled_at[:10]
    logger.debug("Built scoreboard", date=date, total_games=len(games))
    return Scoreboard(date=date, total_games=len(games), games=games, ranked=rank_games(games))


def _winner_team_id(game: Game) -> str | None:
    if game.status != GameStatus.FINAL:
        return None
    winner = game.winner
    return winner.team_id if winner is not None and winner.team_id else None


def build_game_details(
    event: Any, summary: Any = None, config: TransformConfig | None = None
) -> Game | None:
    """
    Build a Game with every detail section the summary payload supports.

    Boxscore (with MVP), team statistics, game story, season series and
    injuries are each attached independently; a section whose data is missing
    or cannot be matched to the game's teams is left as None.

    Args:
        event: Upstream scoreboard event.
        summary: Upstream game summary with ``boxscore``, ``seasonseries`` and
            ``injuries``.
        config: Marquee lists and logo template.

    Returns:
        Game, or None when the event has no competition.
    """
    game = build_game(event, config)
    if game is None:
        return None
    summary = as_dict(summary)
    if not summary:
        return game

    sections: dict[str, Any] = {}
    boxscore_payload = summary.get("boxscore")
    boxscore = None
    if boxscore_payload:
        boxscore = assemble_boxscore(boxscore_payload, _winner_team_id(game), config)
        sections["boxscore"] = boxscore
        team_statistics = build_team_statistics(
            boxscore_payload, boxscore, game.home_team, game.away_team
        )
        sections["team_statistics"] = team_statistics
        if team_statistics is not None and game.status == GameStatus.FINAL:
            sections["game_story"] = generate_game_story(
                game.home_team,
                game.away_team,
                team_statistics.home,
                team_statistics.away,
                boxscore.game_mvp if boxscore is not None else None,
            )

    if summary.get("seasonseries"):
        sections["season_series"] = build_season_series(summary["seasonseries"], game)
    if summary.get("injuries"):
        sections["injuries"] = build_injury_report(
            summary["injuries"], game.home_team, game.away_team
        )

    return game.model_copy(update=sections)
