"""Season series models."""

from pydantic import BaseModel, Field


class SeriesEvent(BaseModel):
    """One head-to-head game of the season series."""

    event_id: str = Field(...)
    date: str | None = Field(None, description="ISO timestamp of the game")
    completed: bool = Field(default=False)
    status_text: str = Field(default="")
    home_team_id: str = Field(...)
    away_team_id: str = Field(...)
    home_score: int | None = Field(None)
    away_score: int | None = Field(None)
    winner_team_id: str | None = Field(None, description="From the recorded winner flag")
    is_current: bool = Field(default=False, description="The game being viewed")

    class Config:
        """Pydantic configuration."""

        frozen = True


class SeasonSeries(BaseModel):
    """Head-to-head record recomputed from completed games only."""

    title: str = Field(default="Season Series")
    home_team_id: str = Field(...)
    away_team_id: str = Field(...)
    home_wins: int = Field(default=0, ge=0)
    away_wins: int = Field(default=0, ge=0)
    total_games: int = Field(default=0, ge=0, description="Upstream-declared competitions")
    completed_games: int = Field(default=0, ge=0)
    summary: str = Field(default="", description="e.g. 'BOS leads series 2-1'")
    events: list[SeriesEvent] = Field(default_factory=list)

    class Config:
        """Pydantic configuration."""

        frozen = True
