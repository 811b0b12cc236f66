"""Team statistics aggregation.

Upstream team totals are a flat list of ``{"name", "displayValue"}`` entries.
Compound entries encode a made-attempted pair in both the name and the value,
e.g. ``fieldGoalsMade-fieldGoalsAttempted`` / ``"41-88"``, and are split
positionally. Only when a team has no totals at all are its PlayerLines
summed instead.
"""

from __future__ import annotations

from typing import Any

import structlog

from hoops_digest.models.boxscore import Boxscore, TeamBoxscore
from hoops_digest.models.stats import GameTeamStatistics, TeamStatistics
from hoops_digest.models.team import Team
from hoops_digest.transform.exceptions import ContractViolationError
from hoops_digest.transform.parsing import as_dict, as_list, dig, to_float, to_int, to_str

logger = structlog.get_logger(__name__)

# Field -> upstream stat names, most preferred first.
COUNT_SOURCES: dict[str, tuple[str, ...]] = {
    "field_goals_made": ("fieldGoalsMade",),
    "field_goals_attempted": ("fieldGoalsAttempted",),
    "three_pointers_made": ("threePointFieldGoalsMade",),
    "three_pointers_attempted": ("threePointFieldGoalsAttempted",),
    "free_throws_made": ("freeThrowsMade",),
    "free_throws_attempted": ("freeThrowsAttempted",),
    "rebounds": ("totalRebounds", "rebounds"),
    "offensive_rebounds": ("offensiveRebounds",),
    "defensive_rebounds": ("defensiveRebounds",),
    "assists": ("assists",),
    "steals": ("steals",),
    "blocks": ("blocks",),
    "turnovers": ("totalTurnovers", "turnovers"),
    "fouls": ("fouls",),
    "points_in_paint": ("pointsInPaint",),
    "fast_break_points": ("fastBreakPoints",),
    "turnover_points": ("turnoverPoints",),
    "largest_lead": ("largestLead",),
    "lead_changes": ("leadChanges",),
    "technical_fouls": ("totalTechnicalFouls", "technicalFouls"),
}

PERCENT_SOURCES: dict[str, tuple[str, ...]] = {
    "field_goal_pct": ("fieldGoalPct",),
    "three_point_pct": ("threePointFieldGoalPct",),
    "free_throw_pct": ("freeThrowPct",),
    "lead_percentage": ("leadPercentage",),
}


def flatten_totals(statistics: Any) -> dict[str, str]:
    """
    Flatten upstream stat entries into ``{stat name: raw value}``.

    A hyphenated name with a hyphenated value is split positionally, so
    ``fieldGoalsMade-fieldGoalsAttempted: "41-88"`` becomes
    ``{"fieldGoalsMade": "41", "fieldGoalsAttempted": "88"}``. A compound name
    whose value does not split into the same number of parts is dropped.
    """
    flat: dict[str, str] = {}
    for entry in as_list(statistics):
        entry = as_dict(entry)
        name = to_str(entry.get("name"))
        if not name:
            continue
        value = to_str(entry.get("displayValue", entry.get("value")))
        if "-" in name:
            names = name.split("-")
            values = value.split("-")
            if len(names) == len(values):
                flat.update(zip(names, values, strict=True))
            continue
        flat[name] = value
    return flat


def _first(flat: dict[str, str], names: tuple[str, ...]) -> str | None:
    for name in names:
        if name in flat:
            return flat[name]
    return None


def aggregate_from_totals(
    team_id: str, abbreviation: str, statistics: Any, points: int | None = None
) -> TeamStatistics:
    """Build TeamStatistics from upstream team totals."""
    flat = flatten_totals(statistics)
    counts = {field: to_int(_first(flat, names)) or 0 for field, names in COUNT_SOURCES.items()}
    percents = {field: to_float(_first(flat, names)) for field, names in PERCENT_SOURCES.items()}
    upstream_points = to_int(flat.get("points"), default=None)
    return TeamStatistics(
        team_id=team_id,
        abbreviation=abbreviation,
        points=upstream_points if upstream_points is not None else (points or 0),
        source="team_totals",
        **counts,
        **percents,
    )


def aggregate_from_players(team: TeamBoxscore) -> TeamStatistics:
    """Sum a team's PlayerLines; percentages stay None."""
    totals: dict[str, int] = dict.fromkeys(
        (
            "field_goals_made",
            "field_goals_attempted",
            "three_pointers_made",
            "three_pointers_attempted",
            "free_throws_made",
            "free_throws_attempted",
            "rebounds",
            "offensive_rebounds",
            "defensive_rebounds",
            "assists",
            "steals",
            "blocks",
            "turnovers",
            "fouls",
            "points",
        ),
        0,
    )
    for player in team.players:
        stats = player.stats
        fg_made, fg_attempted = stats.field_goals_made_attempted
        three_made, three_attempted = stats.three_pointers_made_attempted
        ft_made, ft_attempted = stats.free_throws_made_attempted
        totals["field_goals_made"] += fg_made
        totals["field_goals_attempted"] += fg_attempted
        totals["three_pointers_made"] += three_made
        totals["three_pointers_attempted"] += three_attempted
        totals["free_throws_made"] += ft_made
        totals["free_throws_attempted"] += ft_attempted
        for field in (
            "rebounds",
            "offensive_rebounds",
            "defensive_rebounds",
            "assists",
            "steals",
            "blocks",
            "turnovers",
            "fouls",
            "points",
        ):
            totals[field] += getattr(stats, field)
    return TeamStatistics(
        team_id=team.team_id, abbreviation=team.abbreviation, source="player_lines", **totals
    )


def aggregate_teams(
    team_entries: list[dict[str, Any]],
    boxscore: Boxscore | None = None,
    scores: dict[str, int | None] | None = None,
) -> list[TeamStatistics]:
    """
    Aggregate statistics for every listed team.

    Args:
        team_entries: Upstream boxscore ``teams`` entries (``team`` + ``statistics``).
        boxscore: Assembled boxscore used when a team has no upstream totals.
        scores: Final or current score per team ID, used for ``points``.

    Returns:
        One TeamStatistics per entry, in input order.

    Raises:
        ContractViolationError: If ``team_entries`` is empty.
    """
    if not team_entries:
        raise ContractViolationError("Cannot aggregate team statistics from an empty team list")

    scores = scores or {}
    results = []
    for entry in team_entries:
        team_id = to_str(dig(entry, "team", "id"))
        abbreviation = to_str(dig(entry, "team", "abbreviation"))
        statistics = as_list(entry.get("statistics"))
        team_box = boxscore.team(team_id) if boxscore is not None else None
        if statistics:
            points = scores.get(team_id)
            if points is None and team_box is not None:
                points = sum(p.stats.points for p in team_box.players)
            results.append(aggregate_from_totals(team_id, abbreviation, statistics, points))
        elif team_box is not None:
            logger.debug("No upstream team totals; summing player lines", team_id=team_id)
            results.append(aggregate_from_players(team_box))
        else:
            results.append(
                TeamStatistics(
                    team_id=team_id,
                    abbreviation=abbreviation,
                    points=scores.get(team_id) or 0,
                )
            )
    return results


def build_team_statistics(
    payload: Any, boxscore: Boxscore | None, home: Team, away: Team
) -> GameTeamStatistics | None:
    """
    Team statistics for both sides of a game.

    Args:
        payload: Upstream ``boxscore`` object.
        boxscore: Assembled boxscore for the player-line fallback.
        home: Canonical home team.
        away: Canonical away team.

    Returns:
        GameTeamStatistics, or None when the boxscore teams cannot be matched
        to the game's two teams.
    """
    if not home.team_id or not away.team_id:
        return None
    team_entries = [as_dict(t) for t in as_list(as_dict(payload).get("teams"))]
    if not team_entries and boxscore is not None:
        team_entries = [
            {"team": {"id": t.team_id, "abbreviation": t.abbreviation}} for t in boxscore.teams
        ]
    if not team_entries:
        return None

    by_id = {
        stats.team_id: stats
        for stats in aggregate_teams(
            team_entries, boxscore, {home.team_id: home.score, away.team_id: away.score}
        )
    }
    home_stats, away_stats = by_id.get(home.team_id), by_id.get(away.team_id)
    if home_stats is None or away_stats is None:
        logger.debug(
            "Boxscore teams do not match game teams; omitting team statistics",
            home_team_id=home.team_id,
            away_team_id=away.team_id,
            boxscore_team_ids=sorted(by_id),
        )
        return None
    return GameTeamStatistics(home=home_stats, away=away_stats)
