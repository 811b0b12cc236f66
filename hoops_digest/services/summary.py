"""Game summary service with deterministic fallback."""

from abc import ABC, abstractmethod
from datetime import UTC, datetime

import structlog

from hoops_digest.models.game import Game, GameStatus, GameSummary
from hoops_digest.models.stats import GameFacts
from hoops_digest.transform.exceptions import SummaryUnavailableError
from hoops_digest.transform.narrative import build_game_facts
from hoops_digest.utils.cache import ResponseCache
from hoops_digest.utils.config import get_settings

logger = structlog.get_logger(__name__)


class NarrativeGenerator(ABC):
    """
    Collaborator that turns a GameFacts snapshot into free text.

    Implementations may call an external completion service and should raise
    NarrativeGeneratorError when they cannot produce text.
    """

    @abstractmethod
    def generate(self, facts: GameFacts) -> str:
        """
        Generate summary text.

        Args:
            facts: Snapshot of the game; the generator's only input.

        Returns:
            Summary text.
        """
        pass


class GameSummaryService:
    """Summaries for final games, from a generator when available."""

    def __init__(
        self,
        generator: NarrativeGenerator | None = None,
        cache: ResponseCache | None = None,
        ttl: float | None = None,
    ):
        """
        Initialize service.

        Args:
            generator: Narrative generator. If None, only the fallback story is used.
            cache: Summary cache. If None, summaries are not cached.
            ttl: Cache TTL in seconds. If None, uses ``summary_cache_ttl_seconds``.
        """
        self.generator = generator
        self.cache = cache
        self.ttl = get_settings().summary_cache_ttl_seconds if ttl is None else ttl

    @staticmethod
    def cache_key(game_id: str) -> str:
        return f"game_summary_{game_id}"

    def summarize(self, game: Game) -> GameSummary:
        """
        Summarize a final game.

        The generator is tried first with the game's GameFacts; any failure,
        or a blank result, falls back to the deterministic game story.

        Args:
            game: Game built with its detail sections.

        Returns:
            GameSummary with ``source`` "ai" or "fallback".

        Raises:
            SummaryUnavailableError: If the game is not final, or neither the
                generator nor the game story yields text.
        """
        if game.status != GameStatus.FINAL:
            raise SummaryUnavailableError(
                f"Summary is only available for finished games (game {game.game_id} "
                f"is {game.status.label})"
            )

        key = self.cache_key(game.game_id)
        if self.cache is not None:
            cached = self.cache.get(key)
            if cached is not None:
                return cached

        summary = self._from_generator(game)
        if summary is None:
            summary = self._from_story(game)

        if self.cache is not None:
            self.cache.set(key, summary, ttl=self.ttl)
        return summary

    def _from_generator(self, game: Game) -> GameSummary | None:
        if self.generator is None:
            return None
        facts = build_game_facts(game)
        if facts is None:
            logger.info("No game facts; skipping narrative generator", game_id=game.game_id)
            return None
        try:
            text = self.generator.generate(facts)
        except Exception as e:
            logger.warning("Narrative generator failed, using fallback", game_id=game.game_id, error=str(e))
            return None
        if not text or not text.strip():
            logger.warning("Narrative generator returned no text, using fallback", game_id=game.game_id)
            return None
        return GameSummary(
            game_id=game.game_id,
            summary=text.strip(),
            source="ai",
            generated_at=datetime.now(UTC),
        )

    def _from_story(self, game: Game) -> GameSummary:
        if game.game_story is None:
            raise SummaryUnavailableError(
                f"Summary generation failed and no fallback story exists for game {game.game_id}"
            )
        return GameSummary(
            game_id=game.game_id,
            summary=game.game_story.summary,
            source="fallback",
            generated_at=datetime.now(UTC),
        )
