"""Game status reconciliation.

Upstream status enumerations lag behind the score: a scheduled code can
persist after scoring begins, and a final code can appear before the
completed flag is set. Scores are used as evidence to correct the state.
"""

from __future__ import annotations

from typing import Any

import structlog

from hoops_digest.models.game import GameStatus

logger = structlog.get_logger(__name__)

STATUS_MAP: dict[str, GameStatus] = {
    "STATUS_SCHEDULED": GameStatus.SCHEDULED,
    "STATUS_IN_PROGRESS": GameStatus.LIVE,
    "STATUS_FINAL": GameStatus.FINAL,
    "STATUS_FINAL_OVERTIME": GameStatus.FINAL,
    "STATUS_DELAYED": GameStatus.SCHEDULED,
    "STATUS_POSTPONED": GameStatus.SCHEDULED,
    "STATUS_SUSPENDED": GameStatus.LIVE,
    "STATUS_HALFTIME": GameStatus.LIVE,
    "STATUS_END_PERIOD": GameStatus.LIVE,
}


def map_status(status_name: Any) -> GameStatus:
    """Map an upstream status name to a GameStatus; unknown names are Scheduled."""
    if not isinstance(status_name, str):
        return GameStatus.SCHEDULED
    return STATUS_MAP.get(status_name.strip().upper(), GameStatus.SCHEDULED)


def reconcile_status(
    status_name: Any,
    home_score: int | None,
    away_score: int | None,
    completed: bool = False,
) -> GameStatus:
    """
    Correct an upstream status against score evidence.

    When both scores are present and at least one is nonzero the game has
    started, so it is Final if the completed flag is set and Live otherwise.
    A 0-0 score is ambiguous between "not started" and a genuine 0-0, so the
    upstream status is trusted verbatim.

    Args:
        status_name: Upstream status name, e.g. ``"STATUS_IN_PROGRESS"``.
        home_score: Reported home score, None if not reported.
        away_score: Reported away score, None if not reported.
        completed: Upstream completed flag.

    Returns:
        The reconciled GameStatus.
    """
    mapped = map_status(status_name)
    if home_score is None or away_score is None:
        return mapped
    if home_score == 0 and away_score == 0:
        return mapped

    reconciled = GameStatus.FINAL if completed else GameStatus.LIVE
    if reconciled != mapped:
        logger.debug(
            "Status corrected from score evidence",
            upstream=status_name,
            reconciled=reconciled.label,
            home_score=home_score,
            away_score=away_score,
        )
    return reconciled
