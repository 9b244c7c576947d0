"""
Data models for the movie search service.
Defines the candidate records handed to the ranker and the scored results it returns.
"""

# Import dataclass to define simple "record-like" classes without boilerplate
from dataclasses import dataclass, field  # auto-generates __init__, __repr__, etc.
# Import typing helpers for precise and self-documenting types
from typing import List, Optional  # lists and optional values


@dataclass(frozen=True)
class MovieCandidate:
	"""
	Read-only view of one catalog movie, holding only the fields the ranker needs.
	Display fields (year, genres) are carried along untouched for the response.
	"""
	id: str  # opaque identifier, passed through unmodified
	title: str = ''  # movie title as stored (case is folded only while scoring)
	cast: List[str] = field(default_factory=list)  # actor names in billing order
	directors: List[str] = field(default_factory=list)  # director names
	rating: Optional[float] = None  # average rating on a 0-10 scale, None when unknown
	watch_count: Optional[int] = None  # number of recorded views, None when unknown
	year: Optional[int] = None  # release year, display only
	genres: List[str] = field(default_factory=list)  # genre labels, display only


@dataclass(frozen=True)
class ScoredResult:
	"""
	A candidate together with the scores computed for one query.
	Values are full precision; rounding is left to the presentation layer.
	"""
	movie: MovieCandidate  # the ranked candidate
	similarity: float  # best textual match over title, cast and directors (0..1)
	hybrid_score: float  # weighted combination of similarity, rating and popularity
