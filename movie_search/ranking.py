"""
Ranking module.
Combines fuzzy text similarity with rating and popularity signals to produce a final score,
then gates, sorts and truncates a candidate set.
"""

import math
from dataclasses import dataclass
from typing import Any, Iterable, List, Optional

from loguru import logger

from .models import MovieCandidate, ScoredResult
from .similarity import similarity


@dataclass(frozen=True)
class RankingConfig:
	"""
	Tuning knobs for the hybrid score.
	The defaults are product-tuned values; change them here, not in the scoring code.
	"""
	similarity_weight: float = 0.5
	rating_weight: float = 0.3
	popularity_weight: float = 0.2
	popularity_anchor: float = 10000  # watch count that maps to a popularity of 1.0
	similarity_threshold: float = 0.4  # candidates at or below this similarity are dropped
	default_limit: int = 10

	def __post_init__(self):
		for name in ('similarity_weight', 'rating_weight', 'popularity_weight'):
			if getattr(self, name) < 0:
				raise ValueError(f"{name} must be non-negative, got {getattr(self, name)}")
		if self.popularity_anchor <= 1:
			raise ValueError(f"popularity_anchor must be greater than 1, got {self.popularity_anchor}")
		if not 0.0 <= self.similarity_threshold <= 1.0:
			raise ValueError(f"similarity_threshold must be within [0, 1], got {self.similarity_threshold}")
		if self.default_limit < 1:
			raise ValueError(f"default_limit must be positive, got {self.default_limit}")


def _finite_non_negative(value: Any) -> Optional[float]:
	# Absent, negative, NaN/inf and non-numeric values all collapse to None
	if value is None or isinstance(value, bool):
		return None
	try:
		number = float(value)
	except (TypeError, ValueError):
		return None
	if not math.isfinite(number) or number < 0:
		return None
	return number


def normalize_rating(rating: Any) -> float:
	"""Rating 0..10 to 0..1; out-of-range highs clamp to 1, junk becomes 0."""
	number = _finite_non_negative(rating)
	if number is None:
		return 0.0
	return min(number / 10.0, 1.0)


def normalize_popularity(watch_count: Any, anchor: float = 10000) -> float:
	"""
	Log-scaled watch count in [0..1].
	View counts are heavy tailed, so log(count + 1) / log(anchor) keeps a few blockbusters
	from swamping the term. The anchor is fixed rather than derived from the candidate set,
	so a movie's popularity score does not change between queries.
	"""
	number = _finite_non_negative(watch_count)
	if number is None:
		return 0.0
	return min(math.log(number + 1) / math.log(anchor), 1.0)


def coerce_limit(limit: Any, default: int = 10) -> int:
	"""Turn a caller-supplied limit into a positive int, falling back to `default`."""
	if limit is None or isinstance(limit, bool):
		return default
	try:
		# "3.0" and 3.0 truncate alike; NaN/inf raise and fall through to the default
		value = int(float(limit.strip())) if isinstance(limit, str) else int(limit)
	except (TypeError, ValueError, OverflowError):
		return default
	return value if value > 0 else default


def title_similarity(candidate: MovieCandidate, query: str) -> float:
	return similarity(query, candidate.title)


def cast_director_score(candidate: MovieCandidate, query: str) -> float:
	"""
	Best match between the query and any single cast member or director.
	Max rather than mean, so one strong hit is not diluted by a long cast list.
	"""
	best = 0.0
	for name in list(candidate.cast or []) + list(candidate.directors or []):
		best = max(best, similarity(query, name))
	return best


class HybridRanker:
	"""
	Computes final ranking scores from three signals:
	- similarity: best of title similarity and cast/director similarity (0..1)
	- rating: normalized 0..10 rating
	- popularity: log-normalized watch count
	Holds nothing but its immutable config, so one instance can serve concurrent requests.
	"""

	def __init__(self, config: Optional[RankingConfig] = None):
		self.config = config or RankingConfig()

	def candidate_similarity(self, candidate: MovieCandidate, query: str) -> float:
		return max(title_similarity(candidate, query), cast_director_score(candidate, query))

	def hybrid_score(self, candidate: MovieCandidate, query: str) -> float:
		"""Weighted combination of similarity, rating and popularity."""
		return self._combine(candidate, self.candidate_similarity(candidate, query))

	def _combine(self, candidate: MovieCandidate, sim: float) -> float:
		cfg = self.config
		return (
			cfg.similarity_weight * sim +
			cfg.rating_weight * normalize_rating(candidate.rating) +
			cfg.popularity_weight * normalize_popularity(candidate.watch_count, cfg.popularity_anchor)
		)

	def rank(self, candidates: Iterable[MovieCandidate], query: str, limit: Any = None) -> List[ScoredResult]:
		"""
		Score every candidate, drop weak textual matches, sort by hybrid score and keep the top `limit`.
		The similarity gate is hard: rating and popularity cannot rescue a poor match.
		Equal scores keep their input order.
		"""
		top_k = coerce_limit(limit, self.config.default_limit)
		if not query or not query.strip():
			logger.debug("[Ranker] Blank query, nothing to rank")
			return []

		threshold = self.config.similarity_threshold
		results: List[ScoredResult] = []
		total = 0
		for candidate in candidates:
			total += 1
			sim = self.candidate_similarity(candidate, query)
			if sim <= threshold:
				continue
			score = self._combine(candidate, sim)
			logger.debug(f"[Ranker] Candidate kept | movie={candidate.title} ({candidate.id}) | sim={sim:.3f} | score={score:.3f}")
			results.append(ScoredResult(movie=candidate, similarity=sim, hybrid_score=score))

		# list.sort is stable, including with reverse=True
		results.sort(key=lambda r: r.hybrid_score, reverse=True)
		logger.debug(f"[Ranker] {len(results)} of {total} candidates cleared similarity > {threshold}; returning top {top_k}")
		return results[:top_k]
