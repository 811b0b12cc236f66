"""Pydantic models for the canonical game domain."""

from hoops_digest.models.boxscore import Boxscore, TeamBoxscore, TopPerformers
from hoops_digest.models.config import TransformConfig
from hoops_digest.models.game import (
    Competitiveness,
    FeaturedGame,
    Game,
    GameCard,
    GameStatus,
    GameSummary,
    MaxLead,
    RankedGames,
    Scoreboard,
    TeamCard,
)
from hoops_digest.models.injury import Injury, InjuryReport
from hoops_digest.models.player import GameMVP, PlayerLine, PlayerStats
from hoops_digest.models.series import SeasonSeries, SeriesEvent
from hoops_digest.models.stats import (
    GameFacts,
    GameStory,
    GameTeamStatistics,
    OvertimePeriod,
    TeamStatistics,
)
from hoops_digest.models.team import GameLeaders, Period, Team, TeamLeaders

__all__ = [
    "Boxscore",
    "Competitiveness",
    "FeaturedGame",
    "Game",
    "GameCard",
    "GameFacts",
    "GameLeaders",
    "GameMVP",
    "GameStatus",
    "GameStory",
    "GameSummary",
    "GameTeamStatistics",
    "Injury",
    "InjuryReport",
    "MaxLead",
    "OvertimePeriod",
    "Period",
    "PlayerLine",
    "PlayerStats",
    "RankedGames",
    "Scoreboard",
    "SeasonSeries",
    "SeriesEvent",
    "Team",
    "TeamBoxscore",
    "TeamCard",
    "TeamLeaders",
    "TeamStatistics",
    "TopPerformers",
    "TransformConfig",
]
