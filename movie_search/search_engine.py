"""
Search engine module.
Validates queries and runs the hybrid ranker over the loaded catalog.
"""

from typing import Any, List, Optional  # type annotations for clarity

# Import project modules for data structures and components
from .models import MovieCandidate, ScoredResult  # core data classes
from .ranking import HybridRanker, RankingConfig  # hybrid ranking logic
from .exceptions import InvalidQueryError  # blank-query precondition

# Import loguru for console logging
from loguru import logger  # simple structured logger


class SearchEngine:
	"""
	High-level search API over an in-memory candidate catalog.
	The catalog is read-only after construction, so concurrent searches need no locking.
	Result order among equal scores follows catalog order, so callers that need
	deterministic ties must load the catalog in a stable order.
	"""
	def __init__(
		self,
		candidates: List[MovieCandidate],  # catalog of movies to rank
		config: Optional[RankingConfig] = None,  # ranking weights and thresholds
	):
		self.candidates = list(candidates)  # keep own copy of the catalog
		self.ranker = HybridRanker(config)  # ranker instance
		logger.info(f"[Engine] Ready with {len(self.candidates)} candidates")

	def size(self) -> int:
		return len(self.candidates)

	def search(self, query: str, limit: Any = None) -> List[ScoredResult]:
		"""Rank the catalog for `query`; raises InvalidQueryError for an empty query."""
		if query is None or not query.strip():  # empty input guard
			raise InvalidQueryError("Query cannot be empty")

		logger.debug(f"[Engine] Searching {len(self.candidates)} candidates for '{query}' (limit={limit})")
		results = self.ranker.rank(self.candidates, query, limit)  # filter + sort + truncate
		logger.info(f"[Engine] Returning {len(results)} ranked results for '{query}'")
		return results
