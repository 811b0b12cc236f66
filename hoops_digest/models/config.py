"""Editorial configuration consumed by the transformation pipeline."""

from pydantic import BaseModel, Field

DEFAULT_LOGO_URL_TEMPLATE = "https://a.espncdn.com/i/teamlogos/nba/500/{abbreviation}.png"

DEFAULT_MARQUEE_FRANCHISES: frozenset[str] = frozenset({"GS"})

DEFAULT_MARQUEE_MATCHUPS: list[tuple[str, str]] = [
    ("BOS", "LAL"),
    ("MIA", "LAL"),
    ("BOS", "MIA"),
    ("PHX", "LAL"),
    ("MIL", "BOS"),
    ("DEN", "LAL"),
]


class TransformConfig(BaseModel):
    """Injectable editorial lists and templates.

    Matchups are stored as unordered pairs, so ``{"BOS", "LAL"}`` matches both
    BOS at LAL and LAL at BOS.
    """

    marquee_franchises: frozenset[str] = Field(
        default=DEFAULT_MARQUEE_FRANCHISES,
        description="Abbreviations whose games are always marquee",
    )
    marquee_matchups: frozenset[frozenset[str]] = Field(
        default=frozenset(frozenset(pair) for pair in DEFAULT_MARQUEE_MATCHUPS),
        description="Unordered abbreviation pairs considered marquee",
    )
    logo_url_template: str = Field(
        default=DEFAULT_LOGO_URL_TEMPLATE,
        description="Fallback logo URL template keyed by lower-cased abbreviation",
    )

    class Config:
        """Pydantic configuration."""

        frozen = True
