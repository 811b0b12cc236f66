"""Team statistics, game facts and game story models."""

from typing import Literal

from pydantic import BaseModel, Field


class TeamStatistics(BaseModel):
    """Aggregated team totals for one game.

    Percentages stay None unless upstream supplied them, so "0% on attempts"
    and "no data" remain distinguishable.
    """

    team_id: str = Field(...)
    abbreviation: str = Field(default="")
    field_goals_made: int = Field(default=0)
    field_goals_attempted: int = Field(default=0)
    field_goal_pct: float | None = Field(None)
    three_pointers_made: int = Field(default=0)
    three_pointers_attempted: int = Field(default=0)
    three_point_pct: float | None = Field(None)
    free_throws_made: int = Field(default=0)
    free_throws_attempted: int = Field(default=0)
    free_throw_pct: float | None = Field(None)
    rebounds: int = Field(default=0)
    offensive_rebounds: int = Field(default=0)
    defensive_rebounds: int = Field(default=0)
    assists: int = Field(default=0)
    steals: int = Field(default=0)
    blocks: int = Field(default=0)
    turnovers: int = Field(default=0)
    fouls: int = Field(default=0)
    points: int = Field(default=0)
    points_in_paint: int = Field(default=0)
    fast_break_points: int = Field(default=0)
    turnover_points: int = Field(default=0)
    largest_lead: int = Field(default=0)
    lead_changes: int = Field(default=0)
    lead_percentage: float | None = Field(None)
    technical_fouls: int = Field(default=0)
    source: Literal["team_totals", "player_lines"] = Field(
        default="team_totals", description="Where the totals came from"
    )

    class Config:
        """Pydantic configuration."""

        frozen = True


class GameTeamStatistics(BaseModel):
    """Team statistics for both sides of a game."""

    home: TeamStatistics
    away: TeamStatistics

    class Config:
        """Pydantic configuration."""

        frozen = True


class OvertimePeriod(BaseModel):
    """Score line of one overtime period, numbered from 1."""

    period: int
    score: str

    class Config:
        """Pydantic configuration."""

        frozen = True


class GameFacts(BaseModel):
    """Flattened, unit-normalized snapshot handed to narrative generators.

    Scores are ``"home-away"`` strings, percentages are on a 0-100 scale and
    missing values are ``"-"`` or None. Holds no prose.
    """

    home_team: str
    away_team: str
    home_score: int
    away_score: int
    home_half: int
    away_half: int
    q1: str
    q2: str
    q3: str
    q4: str
    has_overtime: bool
    overtime_periods: list[OvertimePeriod] = Field(default_factory=list)
    halftime_leader: Literal["home", "away", "tie"]
    winner: Literal["home", "away", "tie"]
    fg_home_made: int
    fg_home_attempted: int
    fg_home_percent: float | None
    fg_away_made: int
    fg_away_attempted: int
    fg_away_percent: float | None
    three_home_made: int
    three_home_attempted: int
    three_home_percent: float | None
    three_away_made: int
    three_away_attempted: int
    three_away_percent: float | None
    ft_home_made: int
    ft_home_attempted: int
    ft_home_percent: float | None
    ft_away_made: int
    ft_away_attempted: int
    ft_away_percent: float | None
    to_home: int
    to_away: int
    reb_home: int
    reb_home_offensive: int
    reb_home_defensive: int
    reb_away: int
    reb_away_offensive: int
    reb_away_defensive: int
    largest_lead_home: int
    largest_lead_away: int
    foul_home: int
    foul_away: int
    points_in_paint_home: int
    points_in_paint_away: int
    fast_break_points_home: int
    fast_break_points_away: int
    turnover_points_home: int
    turnover_points_away: int
    top_scorer_home: str | None = None
    top_scorer_away: str | None = None
    top_points_home: int | None = None
    top_points_away: int | None = None

    class Config:
        """Pydantic configuration."""

        frozen = True


class GameStory(BaseModel):
    """Deterministic summary sentence plus up to three insights."""

    summary: str = Field(...)
    insights: list[str] = Field(..., min_length=1, max_length=3)

    class Config:
        """Pydantic configuration."""

        frozen = True
