"""Game models."""

from __future__ import annotations

from datetime import datetime
from enum import IntEnum
from typing import Literal

from pydantic import BaseModel, Field

from hoops_digest.models.boxscore import Boxscore
from hoops_digest.models.injury import InjuryReport
from hoops_digest.models.series import SeasonSeries
from hoops_digest.models.stats import GameStory, GameTeamStatistics
from hoops_digest.models.team import GameLeaders, Team


class GameStatus(IntEnum):
    """Canonical game state; values match the numeric codes clients expect."""

    SCHEDULED = 1
    LIVE = 2
    FINAL = 3

    @property
    def label(self) -> str:
        return self.name.capitalize()


CompetitivenessType = Literal["classic", "close", "comfortable", "blowout"]


class Competitiveness(BaseModel):
    """Margin classification of a final game."""

    type: CompetitivenessType
    label: str
    final_margin: int = Field(..., ge=0)

    class Config:
        """Pydantic configuration."""

        frozen = True


class MaxLead(BaseModel):
    """Largest cumulative lead at the end of any period."""

    side: Literal["home", "away"]
    points: int = Field(..., gt=0)
    period: int = Field(..., ge=1)
    team_id: str
    team_abbreviation: str = ""

    class Config:
        """Pydantic configuration."""

        frozen = True


class Game(BaseModel):
    """Canonical game record.

    ``is_overtime``, ``is_closest``, ``is_marquee``, ``score_difference`` and
    ``competitiveness`` are derived from the other fields when the game is
    built (see ``hoops_digest.transform.games.build_game``); models are frozen
    so they cannot drift afterwards.
    """

    game_id: str = Field(...)
    game_code: str = Field(default="")
    status: GameStatus = Field(default=GameStatus.SCHEDULED)
    status_text: str = Field(default="Scheduled")
    period: int = Field(default=0, ge=0)
    clock: str = Field(default="")
    scheduled_at: str | None = Field(None, description="ISO timestamp of tip-off")
    home_team: Team
    away_team: Team
    leaders: GameLeaders | None = Field(None)
    is_overtime: bool = Field(default=False)
    is_closest: bool = Field(default=False)
    is_marquee: bool = Field(default=False)
    score_difference: int | None = Field(None)
    competitiveness: Competitiveness | None = Field(None)
    max_lead: MaxLead | None = Field(None)
    boxscore: Boxscore | None = Field(None)
    team_statistics: GameTeamStatistics | None = Field(None)
    game_story: GameStory | None = Field(None)
    season_series: SeasonSeries | None = Field(None)
    injuries: InjuryReport | None = Field(None)

    @property
    def winner_side(self) -> Literal["home", "away"] | None:
        """Side with the strictly higher score, None on ties or missing scores."""
        home, away = self.home_team.score, self.away_team.score
        if home is None or away is None or home == away:
            return None
        return "home" if home > away else "away"

    @property
    def winner(self) -> Team | None:
        side = self.winner_side
        if side is None:
            return None
        return self.home_team if side == "home" else self.away_team

    class Config:
        """Pydantic configuration."""

        frozen = True


class FeaturedGame(BaseModel):
    """A ranked game promoted to the featured strip."""

    game: Game
    priority: int = Field(..., ge=1, le=8)
    reason: Literal["marquee", "closest", "overtime"]

    class Config:
        """Pydantic configuration."""

        frozen = True


class RankedGames(BaseModel):
    """Featured (max 3), other (max 4) and the full ranked list."""

    featured: list[FeaturedGame] = Field(default_factory=list)
    other: list[Game] = Field(default_factory=list)
    games: list[Game] = Field(default_factory=list)

    class Config:
        """Pydantic configuration."""

        frozen = True


class TeamCard(BaseModel):
    """Team fields shown on a game list card."""

    name: str
    city: str
    abbreviation: str
    logo: str
    wins: int
    losses: int
    score: int | None

    class Config:
        """Pydantic configuration."""

        frozen = True


class GameCard(BaseModel):
    """Minimized game representation for list views."""

    game_id: str
    status: GameStatus
    status_text: str
    scheduled_at: str | None
    period: int
    home_team: TeamCard
    away_team: TeamCard

    class Config:
        """Pydantic configuration."""

        frozen = True


class Scoreboard(BaseModel):
    """All games of one day with their display ranking."""

    date: str
    total_games: int = Field(..., ge=0)
    games: list[Game] = Field(default_factory=list)
    ranked: RankedGames = Field(default_factory=RankedGames)

    class Config:
        """Pydantic configuration."""

        frozen = True


class GameSummary(BaseModel):
    """Summary text for a final game and where it came from."""

    game_id: str
    summary: str
    source: Literal["ai", "fallback"]
    generated_at: datetime

    class Config:
        """Pydantic configuration."""

        frozen = True
