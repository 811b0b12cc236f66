"""Safe coercion helpers for loosely-typed upstream values."""

from __future__ import annotations

import math
import re
from typing import Any

_MADE_ATTEMPTED = re.compile(r"^\s*(\d+)\s*-\s*(\d+)\s*$")


def to_int(val: Any, default: int | None = 0) -> int | None:
    """Coerce ``val`` to int; ``default`` for None, empty, or unparseable values.

    Accepts ints, floats (truncated), and numeric strings such as ``"24"``,
    ``"+5"`` or ``"28.0"``.
    """
    if val is None or val == "" or isinstance(val, bool):
        return default
    if isinstance(val, int):
        return val
    if isinstance(val, float):
        return int(val) if math.isfinite(val) else default
    try:
        return int(str(val).strip())
    except ValueError:
        pass
    try:
        number = float(str(val).strip())
    except ValueError:
        return default
    return int(number) if math.isfinite(number) else default


def to_float(val: Any) -> float | None:
    """Coerce ``val`` to float; None when missing or unparseable."""
    if val is None or val == "" or isinstance(val, bool):
        return None
    try:
        return float(str(val).strip().rstrip("%"))
    except ValueError:
        return None


def to_str(val: Any, default: str = "") -> str:
    """Stringify ``val``; ``default`` for None."""
    if val is None:
        return default
    return str(val)


def split_made_attempted(val: Any) -> tuple[int, int]:
    """Split a ``"M-A"`` pair into its two integers; ``(0, 0)`` if malformed."""
    match = _MADE_ATTEMPTED.match(to_str(val))
    if match is None:
        return 0, 0
    return int(match.group(1)), int(match.group(2))


def made_attempted(made: int, attempted: int) -> str:
    """Format a made/attempted pair as ``"M-A"``."""
    return f"{made}-{attempted}"


def percentage(made: int, attempted: int) -> float | None:
    """Shooting percentage on a 0-100 scale, one decimal; None with no attempts."""
    if attempted <= 0:
        return None
    return round(made / attempted * 100, 1)


def dig(data: Any, *path: str | int) -> Any:
    """Follow ``path`` through nested dicts/lists, returning None on any miss."""
    current = data
    for key in path:
        if isinstance(key, int):
            if not isinstance(current, list) or not -len(current) <= key < len(current):
                return None
            current = current[key]
        else:
            if not isinstance(current, dict):
                return None
            current = current.get(key)
        if current is None:
            return None
    return current


def as_list(val: Any) -> list[Any]:
    """Return ``val`` if it is a list, else an empty list."""
    return val if isinstance(val, list) else []


def as_dict(val: Any) -> dict[str, Any]:
    """Return ``val`` if it is a dict, else an empty dict."""
    return val if isinstance(val, dict) else {}
