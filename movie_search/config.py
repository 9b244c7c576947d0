"""
Configuration and logging setup.
Settings come from environment variables prefixed with MOVIE_SEARCH_ (or a .env file).
"""

import sys
from functools import lru_cache

from loguru import logger
from pydantic_settings import BaseSettings, SettingsConfigDict

from .ranking import RankingConfig


class Settings(BaseSettings):
	model_config = SettingsConfigDict(env_prefix="MOVIE_SEARCH_", env_file=".env", extra="ignore")

	catalog_path: str = "data/movies.jsonl"  # JSON Lines file with one movie document per line
	log_level: str = "INFO"

	# Ranking knobs; defaults mirror RankingConfig
	similarity_weight: float = 0.5
	rating_weight: float = 0.3
	popularity_weight: float = 0.2
	popularity_anchor: float = 10000
	similarity_threshold: float = 0.4
	default_limit: int = 10

	def ranking_config(self) -> RankingConfig:
		return RankingConfig(
			similarity_weight=self.similarity_weight,
			rating_weight=self.rating_weight,
			popularity_weight=self.popularity_weight,
			popularity_anchor=self.popularity_anchor,
			similarity_threshold=self.similarity_threshold,
			default_limit=self.default_limit,
		)


@lru_cache()
def get_settings() -> Settings:
	return Settings()


def configure_logging(level: str = "INFO") -> None:
	"""Replace loguru's default sink with a single stderr sink at `level`."""
	logger.remove()
	logger.add(sys.stderr, level=level.upper())
	logger.debug(f"[Config] Logging configured at level {level.upper()}")
