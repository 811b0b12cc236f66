"""Per-game feature flags and display priority ranking.

Priorities (lower sorts first):

    1  live marquee        5  closest (any status)
    2  live closest        6  overtime (any status)
    3  live overtime       7  scheduled
    4  live (other)        8  final (other)

Within a priority, games sort by ascending score difference and games with no
defined difference (0-0 or missing scores) go after those with one. This gives
a total order instead of keeping upstream order for mixed groups; ties keep
input order.
"""

from __future__ import annotations

import re
from typing import Literal, NamedTuple

from hoops_digest.models.config import TransformConfig
from hoops_digest.models.game import (
    Competitiveness,
    CompetitivenessType,
    FeaturedGame,
    Game,
    GameStatus,
    RankedGames,
)
from hoops_digest.models.team import REGULATION_PERIODS, Team

CLOSEST_MARGIN = 5
FEATURED_PRIORITIES = frozenset({1, 2, 3, 5, 6})
FEATURED_LIMIT = 3
OTHER_LIMIT = 4

# Upper bound (inclusive) of the final margin for each band.
COMPETITIVENESS_BANDS: tuple[tuple[int, CompetitivenessType], ...] = (
    (3, "classic"),
    (7, "close"),
    (15, "comfortable"),
)

_OVERTIME_TEXT = re.compile(r"overtime|\b\d*OT\b", re.IGNORECASE)

_DEFAULT_CONFIG = TransformConfig()


class GameFeatures(NamedTuple):
    """Derived flags of one game."""

    is_overtime: bool
    is_marquee: bool
    is_closest: bool
    score_difference: int | None
    competitiveness: Competitiveness | None


def is_overtime(period: int, status_text: str = "") -> bool:
    """Past regulation, or the status text names an overtime (``Final/OT``, ``2OT``)."""
    return period > REGULATION_PERIODS or bool(_OVERTIME_TEXT.search(status_text or ""))


def is_marquee(
    away_abbreviation: str, home_abbreviation: str, config: TransformConfig | None = None
) -> bool:
    """Either franchise is always marquee, or the unordered pair is a listed matchup."""
    config = config or _DEFAULT_CONFIG
    away, home = away_abbreviation.upper(), home_abbreviation.upper()
    if not away or not home:
        return False
    if away in config.marquee_franchises or home in config.marquee_franchises:
        return True
    return frozenset({away, home}) in config.marquee_matchups


def score_difference(status: GameStatus, home: Team, away: Team) -> int | None:
    """Absolute margin; None before tip-off or while both scores are still 0."""
    if status == GameStatus.SCHEDULED:
        return None
    if home.score is None or away.score is None:
        return None
    if home.score == 0 and away.score == 0:
        return None
    return abs(away.score - home.score)


def classify_margin(margin: int, overtime: bool = False) -> CompetitivenessType:
    """Band a final margin; overtime games are always classic."""
    if overtime:
        return "classic"
    for upper, label in COMPETITIVENESS_BANDS:
        if margin <= upper:
            return label
    return "blowout"


def competitiveness(
    status: GameStatus, home: Team, away: Team, overtime: bool
) -> Competitiveness | None:
    """Classification of a final game with both scores reported."""
    if status != GameStatus.FINAL or home.score is None or away.score is None:
        return None
    margin = abs(away.score - home.score)
    kind = classify_margin(margin, overtime)
    return Competitiveness(type=kind, label=kind.capitalize(), final_margin=margin)


def classify(
    status: GameStatus,
    period: int,
    status_text: str,
    home: Team,
    away: Team,
    config: TransformConfig | None = None,
) -> GameFeatures:
    """Compute every derived flag of a game from its base fields."""
    overtime = is_overtime(period, status_text)
    difference = score_difference(status, home, away)
    return GameFeatures(
        is_overtime=overtime,
        is_marquee=is_marquee(away.abbreviation, home.abbreviation, config),
        is_closest=difference is not None and difference <= CLOSEST_MARGIN,
        score_difference=difference,
        competitiveness=competitiveness(status, home, away, overtime),
    )


def game_priority(game: Game) -> int:
    """Display priority of a game; see the module docstring for the table."""
    live = game.status == GameStatus.LIVE
    if live and game.is_marquee:
        return 1
    if live and game.is_closest:
        return 2
    if live and game.is_overtime:
        return 3
    if live:
        return 4
    if game.is_closest:
        return 5
    if game.is_overtime:
        return 6
    if game.status == GameStatus.SCHEDULED:
        return 7
    return 8


def featured_reason(game: Game) -> Literal["marquee", "closest", "overtime"] | None:
    """Why a game is featured, or None when it is not."""
    priority = game_priority(game)
    if priority not in FEATURED_PRIORITIES:
        return None
    if priority == 1:
        return "marquee"
    if priority in (2, 5):
        return "closest"
    return "overtime"


def _sort_key(game: Game) -> tuple[int, bool, int]:
    difference = game.score_difference
    return (game_priority(game), difference is None, difference or 0)


def sort_games(games: list[Game]) -> list[Game]:
    """Stable sort by priority, then ascending score difference where defined."""
    return sorted(games, key=_sort_key)


def rank_games(games: list[Game]) -> RankedGames:
    """
    Rank games for display and split them into featured and other.

    Args:
        games: Games in upstream order.

    Returns:
        RankedGames with up to 3 featured, up to 4 other and the full ranking.
    """
    ranked = sort_games(games)
    featured: list[FeaturedGame] = []
    other: list[Game] = []
    for game in ranked:
        reason = featured_reason(game)
        if reason is None:
            other.append(game)
        else:
            featured.append(FeaturedGame(game=game, priority=game_priority(game), reason=reason))
    return RankedGames(featured=featured[:FEATURED_LIMIT], other=other[:OTHER_LIMIT], games=ranked)
