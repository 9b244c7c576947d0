"""
Exception types raised by the movie search service.
"""


class MovieSearchError(Exception):
	"""Base exception for the service"""
	pass


class InvalidQueryError(MovieSearchError, ValueError):
	"""Query is empty or whitespace only; callers must reject it before ranking."""
	pass


class CatalogError(MovieSearchError):
	"""The movie catalog could not be loaded."""
	pass
