"""Season series reconciliation.

Upstream series blocks carry a pre-aggregated ``summary`` string ("Series tied
1-1") that is frequently stale. Win counts are recomputed here from each
event's own winner flags, counting completed games only.
"""

from __future__ import annotations

from typing import Any

import structlog

from hoops_digest.models.game import Game
from hoops_digest.models.series import SeasonSeries, SeriesEvent
from hoops_digest.transform.parsing import as_dict, as_list, dig, to_int, to_str

logger = structlog.get_logger(__name__)


def _series_block(payload: Any) -> dict[str, Any]:
    """Pick the season series block out of a list or single-dict payload."""
    if isinstance(payload, list):
        blocks = [as_dict(b) for b in payload if isinstance(b, dict)]
        for block in blocks:
            if to_str(block.get("type")).lower() == "season":
                return block
        return blocks[0] if blocks else {}
    return as_dict(payload)


def _is_completed(event: dict[str, Any]) -> bool:
    status_type = as_dict(event.get("statusType")) or as_dict(dig(event, "status", "type"))
    if status_type.get("completed") is True:
        return True
    if event.get("completed") is True:
        return True
    return to_str(status_type.get("state")).lower() == "post"


def _status_text(event: dict[str, Any]) -> str:
    status_type = as_dict(event.get("statusType")) or as_dict(dig(event, "status", "type"))
    return to_str(status_type.get("shortDetail") or status_type.get("detail") or status_type.get("description"))


def _competitor_team_id(competitor: dict[str, Any]) -> str:
    return to_str(dig(competitor, "team", "id") or competitor.get("id"))


def parse_series_event(event: Any, current_game_id: str = "") -> SeriesEvent | None:
    """Parse one head-to-head event; None when it lacks a home and away competitor."""
    event = as_dict(event)
    competitors = [as_dict(c) for c in as_list(event.get("competitors"))]
    home = next((c for c in competitors if c.get("homeAway") == "home"), None)
    away = next((c for c in competitors if c.get("homeAway") == "away"), None)
    if home is None or away is None:
        if len(competitors) != 2:
            return None
        # No orientation flags; upstream lists home first.
        home, away = competitors
    home_id, away_id = _competitor_team_id(home), _competitor_team_id(away)
    if not home_id or not away_id:
        return None

    winner_id = None
    if home.get("winner") is True:
        winner_id = home_id
    elif away.get("winner") is True:
        winner_id = away_id

    event_id = to_str(event.get("id"))
    return SeriesEvent(
        event_id=event_id,
        date=to_str(event.get("date")) or None,
        completed=_is_completed(event),
        status_text=_status_text(event),
        home_team_id=home_id,
        away_team_id=away_id,
        home_score=to_int(home.get("score"), default=None),
        away_score=to_int(away.get("score"), default=None),
        winner_team_id=winner_id,
        is_current=bool(event_id) and event_id == current_game_id,
    )


def series_summary(
    home_abbreviation: str, away_abbreviation: str, home_wins: int, away_wins: int
) -> str:
    """Status line from recomputed counts, e.g. ``"BOS leads series 2-1"``."""
    if home_wins == away_wins:
        return f"Series tied {home_wins}-{away_wins}"
    if home_wins > away_wins:
        return f"{home_abbreviation or 'Home'} leads series {home_wins}-{away_wins}"
    return f"{away_abbreviation or 'Away'} leads series {away_wins}-{home_wins}"


def build_season_series(payload: Any, game: Game) -> SeasonSeries | None:
    """
    Reconcile the head-to-head history of the game's two teams.

    Args:
        payload: Upstream ``seasonseries`` value (list of blocks or one block).
        game: The game being viewed.

    Returns:
        SeasonSeries with the current game pinned first, or None when no event
        matches the two teams.
    """
    home_id, away_id = game.home_team.team_id, game.away_team.team_id
    if not home_id or not away_id:
        return None

    block = _series_block(payload)
    matchup = frozenset({home_id, away_id})
    events = []
    for raw in as_list(block.get("events")):
        event = parse_series_event(raw, game.game_id)
        if event is None:
            continue
        if frozenset({event.home_team_id, event.away_team_id}) != matchup:
            continue
        events.append(event)

    if not events:
        logger.debug("No season series events match the game's teams", game_id=game.game_id)
        return None

    resolved = [e for e in events if e.completed and e.winner_team_id in matchup]
    home_wins = sum(1 for e in resolved if e.winner_team_id == home_id)
    away_wins = len(resolved) - home_wins

    # Stable sort keeps upstream order among events without a date.
    chronological = sorted(events, key=lambda e: (e.date is None, e.date or ""))
    ordered = [e for e in chronological if e.is_current] + [
        e for e in chronological if not e.is_current
    ]

    declared_total = to_int(block.get("totalCompetitions"), default=None)
    return SeasonSeries(
        title=to_str(block.get("title")) or "Season Series",
        home_team_id=home_id,
        away_team_id=away_id,
        home_wins=home_wins,
        away_wins=away_wins,
        total_games=declared_total if declared_total is not None and declared_total >= 0 else len(events),
        completed_games=sum(1 for e in events if e.completed),
        summary=series_summary(
            game.home_team.abbreviation, game.away_team.abbreviation, home_wins, away_wins
        ),
        events=ordered,
    )
