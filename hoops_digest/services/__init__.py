"""Services layered over the transformation core."""

from hoops_digest.services.games import GameService
from hoops_digest.services.summary import GameSummaryService, NarrativeGenerator

__all__ = ["GameService", "GameSummaryService", "NarrativeGenerator"]
