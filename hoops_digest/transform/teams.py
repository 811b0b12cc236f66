"""Team normalization.

Upstream team data arrives in three shapes, each with its own adapter:

- ``competitor``: a scoreboard competitor wrapping a nested ``team`` object
  plus score, records and line scores.
- ``team``: a bare upstream team object (boxscore, season series, injuries).
- ``canonical``: a Team already normalized, or its ``model_dump()``.

``normalize_team`` picks the adapter from the shape; every adapter returns the
canonical Team, and normalizing a canonical Team again is a no-op.
"""

from __future__ import annotations

import re
from collections.abc import Callable
from typing import Any, Literal

from hoops_digest.models.config import TransformConfig
from hoops_digest.models.team import REGULATION_PERIODS, GameLeaders, Period, Team, TeamLeaders
from hoops_digest.transform.parsing import as_dict, as_list, to_float, to_int, to_str

TeamVariant = Literal["competitor", "team", "canonical", "empty"]

_RECORD = re.compile(r"^\s*(\d+)\s*-\s*(\d+)\s*$")

_DEFAULT_CONFIG = TransformConfig()


def parse_record(summary: Any) -> tuple[int, int]:
    """Parse a ``"W-L"`` record string; malformed input is ``(0, 0)``."""
    if not isinstance(summary, str):
        return 0, 0
    match = _RECORD.match(summary)
    if match is None:
        return 0, 0
    return int(match.group(1)), int(match.group(2))


def split_display_name(display_name: str, location: str = "") -> tuple[str, str]:
    """
    Split a display name into ``(city, name)``.

    The last whitespace-delimited token is the name, everything before it the
    city: ``"Oklahoma City Thunder"`` -> ``("Oklahoma City", "Thunder")``. A
    single-token name takes its city from ``location``.
    """
    parts = display_name.split()
    if not parts:
        return location, ""
    city = " ".join(parts[:-1])
    return city or location, parts[-1]


def fallback_logo(abbreviation: str, config: TransformConfig | None = None) -> str:
    """Deterministic CDN logo path keyed by lower-cased abbreviation."""
    config = config or _DEFAULT_CONFIG
    return config.logo_url_template.format(abbreviation=abbreviation.lower())


def make_period(number: int, score: int | None) -> Period:
    return Period(
        period=number,
        score=score,
        period_type="REGULAR" if number <= REGULATION_PERIODS else "OVERTIME",
    )


def parse_periods(linescores: Any) -> list[Period]:
    """Build Period entries from upstream line scores, numbering by position when absent."""
    periods = []
    for index, line in enumerate(as_list(linescores), start=1):
        line = as_dict(line)
        number = to_int(line.get("period"), default=None)
        if number is None or number < 1:
            number = index
        score = to_int(line.get("value", line.get("displayValue")), default=None)
        periods.append(make_period(number, score))
    return periods


def _total_record(competitor: dict[str, Any]) -> Any:
    for key in ("records", "record"):
        for record in as_list(competitor.get(key)):
            record = as_dict(record)
            if record.get("type") == "total":
                return record.get("summary")
    return None


def _team_fields(team: dict[str, Any], config: TransformConfig) -> dict[str, Any]:
    display_name = to_str(team.get("displayName"))
    city, name = split_display_name(display_name, to_str(team.get("location")))
    if not name:
        name = to_str(team.get("name") or team.get("shortDisplayName"))
    abbreviation = to_str(team.get("abbreviation"))
    return {
        "team_id": to_str(team.get("id")),
        "name": name,
        "city": city,
        "abbreviation": abbreviation,
        "logo": to_str(team.get("logo")) or fallback_logo(abbreviation, config),
    }


def from_competitor(competitor: dict[str, Any], config: TransformConfig | None = None) -> Team:
    """Adapter for scoreboard competitors (``{"team": {...}, "score": ...}``)."""
    config = config or _DEFAULT_CONFIG
    wins, losses = parse_record(_total_record(competitor))
    return Team(
        **_team_fields(as_dict(competitor.get("team")), config),
        wins=wins,
        losses=losses,
        score=to_int(competitor.get("score"), default=None),
        periods=parse_periods(competitor.get("linescores")),
    )


def from_team_object(team: dict[str, Any], config: TransformConfig | None = None) -> Team:
    """Adapter for bare upstream team objects (no score or line score)."""
    config = config or _DEFAULT_CONFIG
    wins, losses = parse_record(team.get("recordSummary"))
    return Team(**_team_fields(team, config), wins=wins, losses=losses)


def from_canonical(payload: dict[str, Any], config: TransformConfig | None = None) -> Team:
    """Adapter for already-normalized teams."""
    config = config or _DEFAULT_CONFIG
    abbreviation = to_str(payload.get("abbreviation"))
    periods = []
    for line in as_list(payload.get("periods")):
        line = as_dict(line)
        number = to_int(line.get("period"), default=None)
        if number is not None and number >= 1:
            periods.append(make_period(number, to_int(line.get("score"), default=None)))
    return Team(
        team_id=to_str(payload.get("team_id")),
        name=to_str(payload.get("name")),
        city=to_str(payload.get("city")),
        abbreviation=abbreviation,
        logo=to_str(payload.get("logo")) or fallback_logo(abbreviation, config),
        wins=max(to_int(payload.get("wins")) or 0, 0),
        losses=max(to_int(payload.get("losses")) or 0, 0),
        score=to_int(payload.get("score"), default=None),
        periods=periods,
    )


def empty_team(config: TransformConfig | None = None) -> Team:
    """Placeholder for a side the upstream payload did not describe."""
    return Team(team_id="", name="", city="", abbreviation="", logo=fallback_logo("", config))


def detect_variant(payload: Any) -> TeamVariant:
    """Classify an upstream team payload into one of the known shapes."""
    if isinstance(payload, Team):
        return "canonical"
    if not isinstance(payload, dict) or not payload:
        return "empty"
    if isinstance(payload.get("team"), dict):
        return "competitor"
    if "team_id" in payload:
        return "canonical"
    return "team"


_ADAPTERS: dict[TeamVariant, Callable[[dict[str, Any], TransformConfig | None], Team]] = {
    "competitor": from_competitor,
    "team": from_team_object,
    "canonical": from_canonical,
}


def normalize_team(payload: Any, config: TransformConfig | None = None) -> Team:
    """
    Normalize any supported team shape into the canonical Team.

    Args:
        payload: Competitor, bare team, canonical dict or Team instance.
        config: Supplies the fallback logo template.

    Returns:
        Canonical Team; an empty placeholder when the payload is missing.
    """
    if isinstance(payload, Team):
        return payload
    variant = detect_variant(payload)
    if variant == "empty":
        return empty_team(config)
    return _ADAPTERS[variant](payload, config)


def extract_team_leaders(competitor: Any) -> TeamLeaders | None:
    """
    Summarize a competitor's ``leaders`` categories.

    The first category with a leader sets the name; points, rebounds and
    assists values are picked up by category name.
    """
    name = None
    values: dict[str, float | None] = {"points": None, "rebounds": None, "assists": None}
    aliases = {"points": "points", "pts": "points", "rebounds": "rebounds", "reb": "rebounds",
               "assists": "assists", "ast": "assists"}

    for category in as_list(as_dict(competitor).get("leaders")):
        category = as_dict(category)
        leaders = as_list(category.get("leaders"))
        leader = as_dict(leaders[0]) if leaders else {}
        athlete = as_dict(leader.get("athlete"))
        if not athlete:
            continue
        if name is None:
            name = to_str(athlete.get("displayName") or athlete.get("shortName")) or None
        key = aliases.get(to_str(category.get("displayName") or category.get("name")).lower())
        if key is not None:
            values[key] = to_float(leader.get("value"))

    if name is None:
        return None
    return TeamLeaders(name=name, **values)


def extract_game_leaders(home_competitor: Any, away_competitor: Any) -> GameLeaders | None:
    home = extract_team_leaders(home_competitor)
    away = extract_team_leaders(away_competitor)
    if home is None and away is None:
        return None
    return GameLeaders(home=home, away=away)
