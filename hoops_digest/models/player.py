"""Player stat line models."""

from pydantic import BaseModel, Field

from hoops_digest.transform.parsing import split_made_attempted


class PlayerStats(BaseModel):
    """A single player's box score line.

    Made-attempted pairs are kept as ``"M-A"`` strings; percentages are only
    present when upstream supplied them.
    """

    minutes: str = Field(default="0")
    points: int = Field(default=0)
    rebounds: int = Field(default=0)
    offensive_rebounds: int = Field(default=0)
    defensive_rebounds: int = Field(default=0)
    assists: int = Field(default=0)
    steals: int = Field(default=0)
    blocks: int = Field(default=0)
    turnovers: int = Field(default=0)
    fouls: int = Field(default=0)
    plus_minus: int = Field(default=0)
    field_goals: str = Field(default="0-0")
    field_goal_pct: float | None = Field(None)
    three_pointers: str = Field(default="0-0")
    three_point_pct: float | None = Field(None)
    free_throws: str = Field(default="0-0")
    free_throw_pct: float | None = Field(None)

    @property
    def field_goals_made_attempted(self) -> tuple[int, int]:
        return split_made_attempted(self.field_goals)

    @property
    def three_pointers_made_attempted(self) -> tuple[int, int]:
        return split_made_attempted(self.three_pointers)

    @property
    def free_throws_made_attempted(self) -> tuple[int, int]:
        return split_made_attempted(self.free_throws)

    class Config:
        """Pydantic configuration."""

        frozen = True


class PlayerLine(BaseModel):
    """A player's identity, role flags and stat line for one game."""

    athlete_id: str | None = Field(None, description="Upstream athlete ID")
    name: str = Field(default="")
    short_name: str = Field(default="")
    jersey: str = Field(default="")
    position: str = Field(default="")
    headshot: str | None = Field(None)
    team_id: str = Field(..., description="Team the line belongs to")
    team_abbreviation: str = Field(default="")
    starter: bool = Field(default=False)
    did_not_play: bool = Field(default=False)
    reason: str | None = Field(None, description="Why the player did not play")
    stats: PlayerStats = Field(default_factory=PlayerStats)

    class Config:
        """Pydantic configuration."""

        frozen = True


class GameMVP(BaseModel):
    """The single standout player of a game by impact score."""

    athlete_id: str | None = Field(None)
    name: str = Field(default="")
    short_name: str = Field(default="")
    jersey: str = Field(default="")
    position: str = Field(default="")
    headshot: str | None = Field(None)
    team_id: str = Field(...)
    team_abbreviation: str = Field(default="")
    team_name: str = Field(default="")
    team_logo: str = Field(default="")
    gis: float = Field(..., description="Game impact score rounded to one decimal")
    stats: PlayerStats = Field(...)

    class Config:
        """Pydantic configuration."""

        frozen = True
