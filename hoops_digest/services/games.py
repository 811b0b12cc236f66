"""Cached scoreboard and game-detail transforms."""

from typing import Any

import structlog

from hoops_digest.models.config import TransformConfig
from hoops_digest.models.game import Game, GameStatus, Scoreboard
from hoops_digest.transform.games import build_game_details, build_scoreboard
from hoops_digest.transform.parsing import as_dict, to_str
from hoops_digest.utils.cache import ResponseCache
from hoops_digest.utils.config import get_settings

logger = structlog.get_logger(__name__)


class GameService:
    """Runs the transformation core and caches its results by game state."""

    def __init__(self, cache: ResponseCache | None = None, config: TransformConfig | None = None):
        """
        Initialize service.

        Args:
            cache: Response cache. If None, results are not cached.
            config: Transform configuration. If None, built from settings.
        """
        settings = get_settings()
        self.cache = cache
        self.config = config or settings.transform_config()
        self.live_ttl = settings.cache_ttl_live_seconds
        self.final_ttl = settings.cache_ttl_final_seconds

    def ttl_for(self, games: list[Game]) -> int:
        """Short TTL while any game can still change, long once all are final."""
        if games and all(game.status == GameStatus.FINAL for game in games):
            return self.final_ttl
        return self.live_ttl

    def scoreboard(self, payload: Any) -> Scoreboard:
        """Transform a scoreboard payload, reusing a cached result for its date."""
        date = to_str(as_dict(as_dict(payload).get("day")).get("date"))
        key = f"scoreboard_{date}"
        cache = self.cache if date else None
        if cache is None and self.cache is not None:
            logger.debug("Scoreboard has no date, skipping cache")
        if cache is not None:
            cached = cache.get(key)
            if cached is not None:
                return cached

        scoreboard = build_scoreboard(payload, self.config)
        if cache is not None:
            cache.set(key, scoreboard, ttl=self.ttl_for(scoreboard.games))
        return scoreboard

    def game_details(self, event: Any, summary: Any = None) -> Game | None:
        """Transform one game with its detail sections, cached per game ID."""
        key = f"game_details_{to_str(as_dict(event).get('id'))}"
        if self.cache is not None:
            cached = self.cache.get(key)
            if cached is not None:
                return cached

        game = build_game_details(event, summary, self.config)
        if game is None:
            logger.info("Event could not be transformed", key=key)
            return None
        if self.cache is not None:
            self.cache.set(key, game, ttl=self.ttl_for([game]))
        return game
