"""Game Impact Score (GIS) and game MVP selection.

GIS = PTS + 1.2 x REB + 1.5 x AST + 3 x STL + 3 x BLK - TOV
"""

from __future__ import annotations

import math

import structlog

from hoops_digest.models.boxscore import TeamBoxscore
from hoops_digest.models.player import GameMVP, PlayerLine, PlayerStats

logger = structlog.get_logger(__name__)

GIS_WEIGHTS: dict[str, float] = {
    "points": 1.0,
    "rebounds": 1.2,
    "assists": 1.5,
    "steals": 3.0,
    "blocks": 3.0,
    "turnovers": -1.0,
}


def calculate_gis(stats: PlayerStats) -> float:
    """Unrounded game impact score of a stat line."""
    return sum(weight * getattr(stats, stat) for stat, weight in GIS_WEIGHTS.items())


def round_gis(value: float) -> float:
    """Round to one decimal with halves rounded up."""
    return math.floor(value * 10 + 0.5) / 10


def _ranking_key(player: PlayerLine) -> tuple[float, int, str, str]:
    # Highest score, then most points, then name and id ascending.
    return (
        -calculate_gis(player.stats),
        -player.stats.points,
        player.name,
        player.athlete_id or "",
    )


def select_game_mvp(
    teams: list[TeamBoxscore], winner_team_id: str | None = None
) -> GameMVP | None:
    """
    Pick the single standout player of a game.

    The pool is the winning team's players who played. With no winner (tie or
    unknown), or when the winner has no eligible players, the pool widens to
    everyone who played.

    Args:
        teams: Assembled team boxscores.
        winner_team_id: Team ID of the strict winner, if any.

    Returns:
        GameMVP, or None when nobody played.
    """
    eligible = [(team, p) for team in teams for p in team.players if not p.did_not_play]
    pool = eligible
    if winner_team_id:
        winners = [(team, p) for team, p in eligible if team.team_id == winner_team_id]
        if winners:
            pool = winners
        else:
            logger.debug("Winning team has no eligible players", winner_team_id=winner_team_id)

    if not pool:
        return None

    team, player = min(pool, key=lambda entry: _ranking_key(entry[1]))
    return GameMVP(
        athlete_id=player.athlete_id,
        name=player.name,
        short_name=player.short_name,
        jersey=player.jersey,
        position=player.position,
        headshot=player.headshot,
        team_id=team.team_id,
        team_abbreviation=team.abbreviation,
        team_name=team.team_name,
        team_logo=team.logo,
        gis=round_gis(calculate_gis(player.stats)),
        stats=player.stats,
    )
