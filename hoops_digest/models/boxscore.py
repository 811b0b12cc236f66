"""Boxscore models."""

from pydantic import BaseModel, Field

from hoops_digest.models.player import GameMVP, PlayerLine


class TopPerformers(BaseModel):
    """Top players of one team per stat category, best first."""

    points: list[PlayerLine] = Field(default_factory=list)
    rebounds: list[PlayerLine] = Field(default_factory=list)
    assists: list[PlayerLine] = Field(default_factory=list)
    plus_minus: list[PlayerLine] = Field(default_factory=list)
    steals: list[PlayerLine] = Field(default_factory=list)
    blocks: list[PlayerLine] = Field(default_factory=list)

    class Config:
        """Pydantic configuration."""

        frozen = True


class TeamBoxscore(BaseModel):
    """One team's players split into starters, bench and did-not-play."""

    team_id: str = Field(...)
    team_name: str = Field(default="")
    abbreviation: str = Field(default="")
    logo: str = Field(default="")
    home_away: str | None = Field(None, description="'home' or 'away' when known")
    starters: list[PlayerLine] = Field(default_factory=list)
    bench: list[PlayerLine] = Field(default_factory=list)
    did_not_play: list[PlayerLine] = Field(default_factory=list)
    top_performers: TopPerformers = Field(default_factory=TopPerformers)

    @property
    def players(self) -> list[PlayerLine]:
        """All lines in starters, bench, did-not-play order."""
        return [*self.starters, *self.bench, *self.did_not_play]

    class Config:
        """Pydantic configuration."""

        frozen = True


class Boxscore(BaseModel):
    """Assembled boxscore for a game."""

    teams: list[TeamBoxscore] = Field(default_factory=list)
    game_mvp: GameMVP | None = Field(None)

    def team(self, team_id: str) -> TeamBoxscore | None:
        for team in self.teams:
            if team.team_id == team_id:
                return team
        return None

    class Config:
        """Pydantic configuration."""

        frozen = True
