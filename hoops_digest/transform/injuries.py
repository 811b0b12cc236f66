"""Injury grouping by side of the current game."""

from __future__ import annotations

from typing import Any

import structlog

from hoops_digest.models.injury import Injury, InjuryReport
from hoops_digest.models.team import Team
from hoops_digest.transform.parsing import as_dict, as_list, dig, to_str

logger = structlog.get_logger(__name__)


def status_detail(entry: dict[str, Any]) -> str:
    """
    Human-readable status built from the structured ``details`` fields.

    ``{"type": "Out", "location": "Leg", "detail": "Ankle", "side": "Left",
    "returnDate": "2025-11-01"}`` becomes
    ``"Out - Left Ankle (Leg), est. return 2025-11-01"``. Without details the
    bare status code is returned.
    """
    status = to_str(entry.get("status"))
    details = as_dict(entry.get("details"))
    if not details:
        return status

    kind = to_str(details.get("type")) or status
    side = to_str(details.get("side"))
    detail = to_str(details.get("detail"))
    location = to_str(details.get("location"))
    if side.lower() == "not specified":
        side = ""

    injury = " ".join(part for part in (side, detail or location) if part)
    if detail and location and location != detail:
        injury = f"{injury} ({location})"

    text = f"{kind} - {injury}" if kind and injury else kind or injury
    return_date = to_str(details.get("returnDate"))
    if return_date:
        text = f"{text}, est. return {return_date}" if text else f"est. return {return_date}"
    return text or status


def _flatten(payload: Any) -> list[tuple[dict[str, Any], dict[str, Any]]]:
    """Pair each injury entry with its team object.

    Accepts per-team blocks (``[{"team": {...}, "injuries": [...]}]``) or a
    flat list of entries that each carry their own ``team``.
    """
    pairs = []
    for block in as_list(payload):
        block = as_dict(block)
        if isinstance(block.get("injuries"), list):
            team = as_dict(block.get("team"))
            pairs.extend((as_dict(entry), team) for entry in block["injuries"])
        elif block:
            pairs.append((block, as_dict(block.get("team"))))
    return pairs


def parse_injury(entry: dict[str, Any], team: dict[str, Any]) -> Injury:
    athlete = as_dict(entry.get("athlete"))
    athlete_id = athlete.get("id")
    return Injury(
        athlete_id=to_str(athlete_id) if athlete_id is not None else None,
        name=to_str(athlete.get("displayName") or athlete.get("shortName")),
        position=to_str(dig(athlete, "position", "abbreviation")),
        status=to_str(entry.get("status")),
        status_detail=status_detail(entry),
        team_id=to_str(team.get("id")),
        team_abbreviation=to_str(team.get("abbreviation")),
    )


def build_injury_report(payload: Any, home: Team, away: Team) -> InjuryReport | None:
    """
    Group injuries into home and away, discarding other teams.

    Args:
        payload: Upstream ``injuries`` value.
        home: Canonical home team.
        away: Canonical away team.

    Returns:
        InjuryReport, or None when neither side has injuries.
    """
    grouped: dict[str, list[Injury]] = {"home": [], "away": []}
    for entry, team in _flatten(payload):
        injury = parse_injury(entry, team)
        if home.team_id and injury.team_id == home.team_id:
            grouped["home"].append(injury)
        elif away.team_id and injury.team_id == away.team_id:
            grouped["away"].append(injury)
        else:
            logger.debug("Discarding injury for another team", team_id=injury.team_id)

    if not grouped["home"] and not grouped["away"]:
        return None
    return InjuryReport(home=grouped["home"], away=grouped["away"])
