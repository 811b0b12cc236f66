"""Team models."""

from typing import Literal

from pydantic import BaseModel, Field

REGULATION_PERIODS = 4


class Period(BaseModel):
    """One period of a team's line score."""

    period: int = Field(..., ge=1, description="Period number (1-4 regulation, 5+ overtime)")
    score: int | None = Field(None, description="Points scored in the period")
    period_type: Literal["REGULAR", "OVERTIME"] = Field(..., description="REGULAR or OVERTIME")

    class Config:
        """Pydantic configuration."""

        frozen = True


class Team(BaseModel):
    """Canonical team shape shared by every downstream consumer."""

    team_id: str = Field(..., description="Upstream team ID")
    name: str = Field(..., description="Team nickname, e.g. 'Thunder'")
    city: str = Field(..., description="City or location, e.g. 'Oklahoma City'")
    abbreviation: str = Field(..., description="Team abbreviation, e.g. 'OKC'")
    logo: str = Field(..., description="Logo URL")
    wins: int = Field(default=0, ge=0, description="Wins from the W-L record")
    losses: int = Field(default=0, ge=0, description="Losses from the W-L record")
    score: int | None = Field(None, description="Current score, None until reported")
    periods: list[Period] = Field(default_factory=list, description="Line score by period")

    @property
    def display_name(self) -> str:
        return f"{self.city} {self.name}".strip()

    @property
    def record(self) -> str:
        return f"{self.wins}-{self.losses}"

    class Config:
        """Pydantic configuration."""

        frozen = True


class TeamLeaders(BaseModel):
    """Per-team leader summary from the scoreboard."""

    name: str = Field(..., description="First leader listed (usually the points leader)")
    points: float | None = Field(None)
    rebounds: float | None = Field(None)
    assists: float | None = Field(None)

    class Config:
        """Pydantic configuration."""

        frozen = True


class GameLeaders(BaseModel):
    """Leader summaries for both sides; either may be missing."""

    home: TeamLeaders | None = Field(None)
    away: TeamLeaders | None = Field(None)

    class Config:
        """Pydantic configuration."""

        frozen = True
