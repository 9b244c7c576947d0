"""
String similarity module.
Typo-tolerant closeness score between a query and a text, built on Levenshtein edit distance.
"""

from typing import Optional

from rapidfuzz.distance import Levenshtein  # edit distance


def levenshtein_distance(a: str, b: str) -> int:
	"""
	Minimum number of single-character insertions, deletions and substitutions
	needed to turn `a` into `b`. Comparison is case-insensitive.
	"""
	return Levenshtein.distance(a.lower(), b.lower())


def similarity(query: str, text: Optional[str]) -> float:
	"""
	Score in [0..1] describing how well `query` matches `text`.

	A case-insensitive substring hit counts as a perfect match (1.0). Otherwise the
	edit distance is scaled by the longer of the two strings and inverted, so that
	one typo in a short title still scores high.
	"""
	if not text:
		return 0.0

	q = (query or '').lower().strip()
	t = text.lower().strip()

	# Exact or partial match
	if q in t:
		return 1.0

	distance = levenshtein_distance(q, t)
	max_length = max(len(q), len(t))
	return max(0.0, 1.0 - distance / max_length)
