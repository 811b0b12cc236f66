"""Boxscore assembly.

Upstream boxscores carry, per team, a ``keys`` array of stat names and one
``stats`` array per athlete aligned positionally with ``keys``. Each athlete
is zipped into a PlayerLine and sorted into starters, bench or did-not-play.
"""

from __future__ import annotations

from typing import Any

import structlog

from hoops_digest.models.boxscore import Boxscore, TeamBoxscore, TopPerformers
from hoops_digest.models.config import TransformConfig
from hoops_digest.models.player import PlayerLine, PlayerStats
from hoops_digest.transform.impact import select_game_mvp
from hoops_digest.transform.parsing import as_dict, as_list, dig, to_float, to_int, to_str
from hoops_digest.transform.teams import fallback_logo

logger = structlog.get_logger(__name__)

NUMERIC_KEYS: dict[str, str] = {
    "points": "points",
    "rebounds": "rebounds",
    "offensiveRebounds": "offensive_rebounds",
    "defensiveRebounds": "defensive_rebounds",
    "assists": "assists",
    "steals": "steals",
    "blocks": "blocks",
    "turnovers": "turnovers",
    "fouls": "fouls",
    "plusMinus": "plus_minus",
}

PAIR_KEYS: dict[str, str] = {
    "fieldGoalsMade-fieldGoalsAttempted": "field_goals",
    "threePointFieldGoalsMade-threePointFieldGoalsAttempted": "three_pointers",
    "freeThrowsMade-freeThrowsAttempted": "free_throws",
}

PERCENT_KEYS: dict[str, str] = {
    "fieldGoalPct": "field_goal_pct",
    "threePointFieldGoalPct": "three_point_pct",
    "freeThrowPct": "free_throw_pct",
}

TOP_PERFORMER_CATEGORIES = ("points", "rebounds", "assists", "plus_minus", "steals", "blocks")
TOP_PERFORMER_LIMIT = 3


def zip_stats(keys: list[Any], values: list[Any]) -> dict[str, Any]:
    """Pair stat names with an athlete's values, skipping null positions."""
    return {
        to_str(key): value
        for key, value in zip(keys, values, strict=False)
        if value is not None
    }


def build_player_stats(stat_map: dict[str, Any]) -> PlayerStats:
    """Map a zipped stat dict onto PlayerStats, defaulting missing values."""
    fields: dict[str, Any] = {"minutes": to_str(stat_map.get("minutes")) or "0"}
    for key, field in NUMERIC_KEYS.items():
        fields[field] = to_int(stat_map.get(key)) or 0
    for key, field in PAIR_KEYS.items():
        fields[field] = to_str(stat_map.get(key)) or "0-0"
    for key, field in PERCENT_KEYS.items():
        fields[field] = to_float(stat_map.get(key))
    return PlayerStats(**fields)


def build_player_line(
    athlete_entry: dict[str, Any], keys: list[Any], team: dict[str, Any]
) -> PlayerLine:
    athlete = as_dict(athlete_entry.get("athlete"))
    position = as_dict(athlete.get("position"))
    athlete_id = athlete.get("id")
    return PlayerLine(
        athlete_id=to_str(athlete_id) if athlete_id is not None else None,
        name=to_str(athlete.get("displayName") or athlete.get("shortName")),
        short_name=to_str(athlete.get("shortName")),
        jersey=to_str(athlete.get("jersey")),
        position=to_str(position.get("abbreviation") or position.get("name")),
        headshot=dig(athlete, "headshot", "href"),
        team_id=to_str(team.get("id")),
        team_abbreviation=to_str(team.get("abbreviation")),
        starter=bool(athlete_entry.get("starter")),
        did_not_play=bool(athlete_entry.get("didNotPlay")),
        reason=to_str(athlete_entry.get("reason")) or None,
        stats=build_player_stats(zip_stats(as_list(keys), as_list(athlete_entry.get("stats")))),
    )


def top_performers(players: list[PlayerLine], limit: int = TOP_PERFORMER_LIMIT) -> TopPerformers:
    """Best ``limit`` players per category, descending; ties keep input order."""
    return TopPerformers(
        **{
            category: sorted(players, key=lambda p, c=category: getattr(p.stats, c), reverse=True)[
                :limit
            ]
            for category in TOP_PERFORMER_CATEGORIES
        }
    )


def _player_lines(player_block: dict[str, Any], team: dict[str, Any]) -> list[PlayerLine]:
    statistics = as_list(player_block.get("statistics"))
    stats_block = as_dict(statistics[0]) if statistics else {}
    athletes = stats_block.get("athletes")
    if not isinstance(athletes, list):
        logger.debug("Team boxscore has no athlete list", team_id=team.get("id"))
        return []
    keys = as_list(stats_block.get("keys"))
    return [build_player_line(as_dict(entry), keys, team) for entry in athletes]


def assemble_team(
    team_entry: dict[str, Any],
    player_block: dict[str, Any] | None,
    config: TransformConfig | None = None,
) -> TeamBoxscore:
    """Build one team's boxscore; a missing player block yields empty partitions."""
    team = as_dict(team_entry.get("team"))
    players = _player_lines(player_block, team) if player_block else []
    played = [p for p in players if not p.did_not_play]
    abbreviation = to_str(team.get("abbreviation"))
    return TeamBoxscore(
        team_id=to_str(team.get("id")),
        team_name=to_str(team.get("displayName") or team.get("name")),
        abbreviation=abbreviation,
        logo=to_str(team.get("logo")) or fallback_logo(abbreviation, config),
        home_away=to_str(team_entry.get("homeAway")) or None,
        starters=[p for p in played if p.starter],
        bench=[p for p in played if not p.starter],
        did_not_play=[p for p in players if p.did_not_play],
        top_performers=top_performers(played),
    )


def assemble_boxscore(
    payload: Any,
    winner_team_id: str | None = None,
    config: TransformConfig | None = None,
) -> Boxscore | None:
    """
    Assemble an upstream boxscore into per-team partitions plus the game MVP.

    Args:
        payload: Upstream ``boxscore`` object with ``teams`` and ``players``.
        winner_team_id: Winning team, restricting the MVP pool when known.
        config: Supplies the fallback logo template.

    Returns:
        Boxscore, or None when the payload lists no teams at all.
    """
    payload = as_dict(payload)
    team_entries = [as_dict(t) for t in as_list(payload.get("teams"))]
    player_blocks = [as_dict(p) for p in as_list(payload.get("players"))]
    if not team_entries:
        # Older payloads only list teams inside the player blocks.
        team_entries = [{"team": p.get("team"), "homeAway": p.get("homeAway")} for p in player_blocks]
    if not team_entries:
        return None

    blocks_by_team = {to_str(dig(block, "team", "id")): block for block in player_blocks}
    teams = [
        assemble_team(entry, blocks_by_team.get(to_str(dig(entry, "team", "id"))), config)
        for entry in team_entries
    ]
    return Boxscore(teams=teams, game_mvp=select_game_mvp(teams, winner_team_id))
