"""Injury models."""

from pydantic import BaseModel, Field


class Injury(BaseModel):
    """One injured player on either team of a game."""

    athlete_id: str | None = Field(None)
    name: str = Field(default="")
    position: str = Field(default="")
    status: str = Field(default="", description="Status code, e.g. 'Out'")
    status_detail: str = Field(default="", description="Human-readable status")
    team_id: str = Field(...)
    team_abbreviation: str = Field(default="")

    class Config:
        """Pydantic configuration."""

        frozen = True


class InjuryReport(BaseModel):
    """Injuries grouped by side of the current game."""

    home: list[Injury] = Field(default_factory=list)
    away: list[Injury] = Field(default_factory=list)

    class Config:
        """Pydantic configuration."""

        frozen = True
