"""
Data loading module.
Reads movie documents from a JSON Lines catalog and turns them into ranker candidates.
"""

# Standard libs for JSON parsing, typing, and paths
import json  # read JSON lines
from typing import Any, Dict, List, Optional  # type hints
from pathlib import Path  # filesystem-safe paths

# Import the candidate data class and the loader's error type
from .models import MovieCandidate  # ranker input record
from .exceptions import CatalogError  # raised when the catalog is unusable

# Console logging
from loguru import logger  # console logger


class DataLoader:
	"""
	Handles loading and light cleaning of catalog movie documents.
	Documents follow the shape kept in the movies collection: _id, title, cast,
	directors, rating, watch_count, year, genres.
	"""

	def load_candidates_from_jsonl(self, filepath: str) -> List[MovieCandidate]:
		"""
		Load candidates from a JSON Lines (JSONL) file where each line is one movie document.
		Invalid lines are skipped with a warning; a missing file or one with no usable records raises CatalogError.
		"""
		candidates = []  # accumulator for parsed candidates
		filepath = Path(filepath)  # normalize path

		# Validate the file presence early to give clear error messages
		if not filepath.exists():
			raise CatalogError(f"Movie catalog file not found: {filepath}")

		logger.info(f"[DataLoader] Loading movies from {filepath}...")  # log action

		# Read line-by-line so large catalogs are never fully held as raw text
		with open(filepath, 'r', encoding='utf-8') as f:
			for line_num, line in enumerate(f, 1):  # keep track of line number for diagnostics
				line = line.strip()
				if not line:  # tolerate blank lines
					continue
				try:
					data = json.loads(line)  # parse JSON object per line
				except json.JSONDecodeError as e:
					logger.warning(f"[DataLoader] Skipping invalid JSON at line {line_num}: {e}")  # malformed line
					continue  # move on
				if not isinstance(data, dict):
					logger.warning(f"[DataLoader] Skipping non-object record at line {line_num}")
					continue
				candidates.append(self.parse_candidate(data))  # convert dict -> MovieCandidate

		if not candidates:  # nothing usable, fail loudly instead of serving empty results
			raise CatalogError(f"Movie catalog holds no usable records: {filepath}")

		logger.info(f"[DataLoader] Successfully loaded {len(candidates)} movies.")  # summary
		return candidates  # return list

	def parse_candidate(self, data: Dict[str, Any]) -> MovieCandidate:
		"""
		Convert a raw movie document into a MovieCandidate.
		Unparseable numbers become None so the ranker scores them as 0.
		"""
		watch_count = data.get('watch_count', data.get('watchCount'))  # both spellings occur
		return MovieCandidate(
			id=self._parse_id(data),  # stringified identifier
			title=str(data.get('title') or ''),  # raw title, case kept for display
			cast=self._parse_comma_separated(data.get('cast')),  # list of actors
			directors=self._parse_comma_separated(data.get('directors')),  # list of directors
			rating=self._parse_number(data.get('rating'), float),  # optional float
			watch_count=self._parse_number(watch_count, int),  # optional int
			year=self._parse_number(data.get('year'), int),  # optional int
			genres=self._parse_comma_separated(data.get('genres')),  # display genres
		)

	def _parse_id(self, data: Dict[str, Any]) -> str:
		"""Prefer `_id` (including extended-JSON {"$oid": ...}) and fall back to `id`."""
		raw = data.get('_id') if data.get('_id') is not None else data.get('id')
		if raw is None:  # neither key usable
			return ''
		if isinstance(raw, dict) and '$oid' in raw:  # mongoexport style object id
			raw = raw['$oid']
		return str(raw)

	def _parse_comma_separated(self, value) -> List[str]:
		"""
		Normalize a value that may be None, a list, or a comma-separated string
		into a list of clean strings.
		"""
		if value is None:  # missing field
			return []  # treat as empty list
		if isinstance(value, list):  # already a list
			return [str(item).strip() for item in value if item]  # clean each
		if isinstance(value, str):  # comma-separated string
			return [item.strip() for item in value.split(',') if item.strip()]  # split/trim
		return []  # any other type becomes empty

	def _parse_number(self, value, cast) -> Optional[Any]:
		if value is None or value == '' or isinstance(value, bool):
			return None
		try:
			return cast(float(value)) if cast is int else cast(value)
		except (TypeError, ValueError, OverflowError):
			return None
