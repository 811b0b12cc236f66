"""Deterministic game story and the GameFacts snapshot.

The story is the fallback used whenever an external narrative generator is
unavailable. GameFacts is the only input such a generator receives.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Literal

import structlog

from hoops_digest.models.boxscore import Boxscore
from hoops_digest.models.game import Game
from hoops_digest.models.player import GameMVP, PlayerLine
from hoops_digest.models.stats import GameFacts, GameStory, OvertimePeriod, TeamStatistics
from hoops_digest.models.team import REGULATION_PERIODS, Team
from hoops_digest.transform.features import classify_margin
from hoops_digest.transform.impact import calculate_gis
from hoops_digest.transform.parsing import percentage

logger = structlog.get_logger(__name__)

SHOOTING_GAP = 5.0
THREES_GAP = 3
TURNOVER_GAP = 5
REBOUND_GAP = 10
MVP_GIS_THRESHOLD = 30.0
MAX_INSIGHTS = 3

FILLER_INSIGHT = "Both teams stayed even across the major statistical categories."

SUMMARY_TEMPLATES: dict[str, str] = {
    "classic": "{winner} edged {loser} {winner_points}-{loser_points} in a finish decided by {margin}.",
    "close": "{winner} held off {loser} {winner_points}-{loser_points}.",
    "comfortable": "{winner} beat {loser} {winner_points}-{loser_points} and controlled most of the night.",
    "blowout": "{winner} routed {loser} {winner_points}-{loser_points}.",
}


class _Side:
    """A team's identity paired with its aggregated statistics."""

    def __init__(self, team: Team, stats: TeamStatistics):
        self.team = team
        self.stats = stats

    @property
    def name(self) -> str:
        return self.team.name or self.team.abbreviation or "Team"


def _fg_pct(stats: TeamStatistics) -> float | None:
    if stats.field_goal_pct is not None:
        return stats.field_goal_pct
    return percentage(stats.field_goals_made, stats.field_goals_attempted)


def _points_word(margin: int) -> str:
    return "1 point" if margin == 1 else f"{margin} points"


def summary_sentence(winner: _Side, loser: _Side) -> str:
    margin = winner.stats.points - loser.stats.points
    return SUMMARY_TEMPLATES[classify_margin(margin)].format(
        winner=winner.name,
        loser=loser.name,
        winner_points=winner.stats.points,
        loser_points=loser.stats.points,
        margin=_points_word(margin),
    )


def shooting_insight(winner: _Side, loser: _Side) -> str | None:
    ours, theirs = _fg_pct(winner.stats), _fg_pct(loser.stats)
    if ours is None or theirs is None or abs(ours - theirs) <= SHOOTING_GAP:
        return None
    better, worse = (winner, loser) if ours > theirs else (loser, winner)
    high, low = max(ours, theirs), min(ours, theirs)
    return f"{better.name} shot {high:.1f}% from the field compared to {low:.1f}% for {worse.name}."


def threes_insight(winner: _Side, loser: _Side) -> str | None:
    gap = winner.stats.three_pointers_made - loser.stats.three_pointers_made
    if abs(gap) <= THREES_GAP:
        return None
    more, fewer = (winner, loser) if gap > 0 else (loser, winner)
    return (
        f"{more.name} made {more.stats.three_pointers_made} three-pointers, "
        f"{abs(gap)} more than {fewer.name}."
    )


def turnover_insight(winner: _Side, loser: _Side) -> str | None:
    gap = winner.stats.turnovers - loser.stats.turnovers
    if abs(gap) <= TURNOVER_GAP:
        return None
    careless, careful = (winner, loser) if gap > 0 else (loser, winner)
    return (
        f"{careless.name} committed {careless.stats.turnovers} turnovers, "
        f"{abs(gap)} more than {careful.name}."
    )


def rebound_insight(winner: _Side, loser: _Side) -> str | None:
    gap = winner.stats.rebounds - loser.stats.rebounds
    if abs(gap) <= REBOUND_GAP:
        return None
    better, worse = (winner, loser) if gap > 0 else (loser, winner)
    return (
        f"{better.name} won the rebounding battle "
        f"{better.stats.rebounds}-{worse.stats.rebounds}."
    )


def mvp_insight(mvp: GameMVP | None) -> str | None:
    if mvp is None or calculate_gis(mvp.stats) <= MVP_GIS_THRESHOLD:
        return None
    stats = mvp.stats
    if stats.points < 30 and stats.rebounds < 10 and stats.assists < 10:
        return None
    return (
        f"{mvp.name} led the way with {stats.points} points, {stats.rebounds} rebounds "
        f"and {stats.assists} assists (impact score {mvp.gis:.1f})."
    )


_TEAM_INSIGHTS: tuple[Callable[[_Side, _Side], str | None], ...] = (
    shooting_insight,
    threes_insight,
    turnover_insight,
    rebound_insight,
)


def generate_game_story(
    home: Team,
    away: Team,
    home_stats: TeamStatistics,
    away_stats: TeamStatistics,
    mvp: GameMVP | None = None,
) -> GameStory | None:
    """
    Build the templated summary and up to three insights.

    The winner is decided from the aggregated points; tied totals produce no
    story. Insights are evaluated in a fixed order (shooting, threes,
    turnovers, rebounds, MVP) and only emitted above their thresholds. When
    none qualifies a single filler insight is returned.

    Args:
        home: Canonical home team.
        away: Canonical away team.
        home_stats: Aggregated home statistics.
        away_stats: Aggregated away statistics.
        mvp: Selected game MVP, if any.

    Returns:
        GameStory, or None for a tie.
    """
    if home_stats.points == away_stats.points:
        logger.debug("Tied totals; no game story", home=home.abbreviation, away=away.abbreviation)
        return None

    home_side, away_side = _Side(home, home_stats), _Side(away, away_stats)
    winner, loser = (
        (home_side, away_side) if home_stats.points > away_stats.points else (away_side, home_side)
    )

    insights = [text for check in _TEAM_INSIGHTS if (text := check(winner, loser)) is not None]
    if (text := mvp_insight(mvp)) is not None:
        insights.append(text)
    if not insights:
        insights = [FILLER_INSIGHT]

    return GameStory(summary=summary_sentence(winner, loser), insights=insights[:MAX_INSIGHTS])


def _period_score(team: Team, number: int) -> int | None:
    for period in team.periods:
        if period.period == number:
            return period.score
    return None


def _quarter_line(home: Team, away: Team, number: int) -> str:
    home_score, away_score = _period_score(home, number), _period_score(away, number)
    if home_score is None or away_score is None:
        return "-"
    return f"{home_score}-{away_score}"


def _compare(home: int, away: int) -> Literal["home", "away", "tie"]:
    if home == away:
        return "tie"
    return "home" if home > away else "away"


def _top_scorer(boxscore: Boxscore | None, team_id: str) -> PlayerLine | None:
    team = boxscore.team(team_id) if boxscore is not None else None
    if team is None:
        return None
    played = [p for p in team.players if not p.did_not_play]
    if not played:
        return None
    return max(played, key=lambda p: (p.stats.points, calculate_gis(p.stats)))


def build_game_facts(
    game: Game, team_statistics: tuple[TeamStatistics, TeamStatistics] | None = None
) -> GameFacts | None:
    """
    Flatten a game into the snapshot consumed by narrative generators.

    Args:
        game: Game with both teams and, ideally, its boxscore.
        team_statistics: ``(home, away)`` statistics; defaults to the game's.

    Returns:
        GameFacts, or None when team statistics are unavailable.
    """
    if team_statistics is None:
        if game.team_statistics is None:
            return None
        team_statistics = (game.team_statistics.home, game.team_statistics.away)
    home_stats, away_stats = team_statistics
    home, away = game.home_team, game.away_team

    home_score = home.score if home.score is not None else home_stats.points
    away_score = away.score if away.score is not None else away_stats.points
    home_half = sum(_period_score(home, n) or 0 for n in (1, 2))
    away_half = sum(_period_score(away, n) or 0 for n in (1, 2))

    overtime_numbers = sorted(
        {p.period for p in (*home.periods, *away.periods) if p.period > REGULATION_PERIODS}
    )
    overtime_periods = [
        OvertimePeriod(period=n - REGULATION_PERIODS, score=_quarter_line(home, away, n))
        for n in overtime_numbers
    ]

    home_top = _top_scorer(game.boxscore, home.team_id)
    away_top = _top_scorer(game.boxscore, away.team_id)

    return GameFacts(
        home_team=home.display_name or home.abbreviation,
        away_team=away.display_name or away.abbreviation,
        home_score=home_score,
        away_score=away_score,
        home_half=home_half,
        away_half=away_half,
        q1=_quarter_line(home, away, 1),
        q2=_quarter_line(home, away, 2),
        q3=_quarter_line(home, away, 3),
        q4=_quarter_line(home, away, 4),
        has_overtime=bool(overtime_periods) or game.is_overtime,
        overtime_periods=overtime_periods,
        halftime_leader=_compare(home_half, away_half),
        winner=_compare(home_score, away_score),
        fg_home_made=home_stats.field_goals_made,
        fg_home_attempted=home_stats.field_goals_attempted,
        fg_home_percent=_fg_pct(home_stats),
        fg_away_made=away_stats.field_goals_made,
        fg_away_attempted=away_stats.field_goals_attempted,
        fg_away_percent=_fg_pct(away_stats),
        three_home_made=home_stats.three_pointers_made,
        three_home_attempted=home_stats.three_pointers_attempted,
        three_home_percent=home_stats.three_point_pct
        if home_stats.three_point_pct is not None
        else percentage(home_stats.three_pointers_made, home_stats.three_pointers_attempted),
        three_away_made=away_stats.three_pointers_made,
        three_away_attempted=away_stats.three_pointers_attempted,
        three_away_percent=away_stats.three_point_pct
        if away_stats.three_point_pct is not None
        else percentage(away_stats.three_pointers_made, away_stats.three_pointers_attempted),
        ft_home_made=home_stats.free_throws_made,
        ft_home_attempted=home_stats.free_throws_attempted,
        ft_home_percent=home_stats.free_throw_pct
        if home_stats.free_throw_pct is not None
        else percentage(home_stats.free_throws_made, home_stats.free_throws_attempted),
        ft_away_made=away_stats.free_throws_made,
        ft_away_attempted=away_stats.free_throws_attempted,
        ft_away_percent=away_stats.free_throw_pct
        if away_stats.free_throw_pct is not None
        else percentage(away_stats.free_throws_made, away_stats.free_throws_attempted),
        to_home=home_stats.turnovers,
        to_away=away_stats.turnovers,
        reb_home=home_stats.rebounds,
        reb_home_offensive=home_stats.offensive_rebounds,
        reb_home_defensive=home_stats.defensive_rebounds,
        reb_away=away_stats.rebounds,
        reb_away_offensive=away_stats.offensive_rebounds,
        reb_away_defensive=away_stats.defensive_rebounds,
        largest_lead_home=home_stats.largest_lead,
        largest_lead_away=away_stats.largest_lead,
        foul_home=home_stats.fouls,
        foul_away=away_stats.fouls,
        points_in_paint_home=home_stats.points_in_paint,
        points_in_paint_away=away_stats.points_in_paint,
        fast_break_points_home=home_stats.fast_break_points,
        fast_break_points_away=away_stats.fast_break_points,
        turnover_points_home=home_stats.turnover_points,
        turnover_points_away=away_stats.turnover_points,
        top_scorer_home=home_top.name if home_top else None,
        top_scorer_away=away_top.name if away_top else None,
        top_points_home=home_top.stats.points if home_top else None,
        top_points_away=away_top.stats.points if away_top else None,
    )
