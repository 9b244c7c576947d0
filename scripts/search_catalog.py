"""
Rank a query against a movie catalog from the command line.

This script:
1) Loads movies from a JSONL catalog (default: MOVIE_SEARCH_CATALOG_PATH or data/movies.jsonl)
2) Runs the hybrid ranker for the query
3) Prints the ranked results with their scores

Usage:
    python -m scripts.search_catalog "godfather" --limit 5
"""

import argparse  # command-line parsing
import time  # measure step timings
from typing import List, Optional

from loguru import logger  # console logging

from movie_search.config import configure_logging, get_settings  # env-driven settings
from movie_search.data_loader import DataLoader  # catalog ingestion
from movie_search.exceptions import CatalogError, InvalidQueryError
from movie_search.search_engine import SearchEngine  # validation + ranking


def build_parser() -> argparse.ArgumentParser:
	parser = argparse.ArgumentParser(description="Rank movies in a catalog for a free-text query")
	parser.add_argument("query", help="title, actor or director to search for")
	parser.add_argument("--limit", default=None, help="maximum number of results (default 10)")
	parser.add_argument("--catalog", default=None, help="path to the JSONL movie catalog")
	parser.add_argument("--log-level", default=None, help="loguru level, e.g. DEBUG")
	return parser


def main(argv: Optional[List[str]] = None) -> int:
	args = build_parser().parse_args(argv)
	settings = get_settings()
	configure_logging(args.log_level or settings.log_level)
	catalog_path = args.catalog or settings.catalog_path

	try:
		candidates = DataLoader().load_candidates_from_jsonl(catalog_path)  # read dataset
	except CatalogError as e:
		logger.error(f"[CLI] {e}")
		return 1

	engine = SearchEngine(candidates, config=settings.ranking_config())
	start = time.time()  # start timer
	try:
		results = engine.search(args.query, limit=args.limit)
	except InvalidQueryError as e:
		logger.error(f"[CLI] {e}")
		return 2
	elapsed_ms = (time.time() - start) * 1000

	print(f"Query: {args.query} | {len(results)} results in {elapsed_ms:.2f} ms")
	for i, r in enumerate(results, 1):
		m = r.movie
		year = f" ({m.year})" if m.year else ""
		print(f"  {i}. [score {r.hybrid_score:.2f} | sim {r.similarity:.2f}] {m.title}{year}")
	return 0


if __name__ == '__main__':
	raise SystemExit(main())
