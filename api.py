"""
FastAPI server exposing the movie search API.
Endpoints:
- GET /: service info and endpoint listing
- GET /health: basic health check
- GET /api/movies/search?query=...&limit=10: returns ranked results with scores and metadata

Startup loads the movie catalog from the configured JSONL file (MOVIE_SEARCH_CATALOG_PATH).
"""

# Import standard library for timing
import time  # measure startup and request latencies
from typing import List, Optional  # precise typing for clarity

# Import FastAPI for building the web API and Pydantic for response models
from fastapi import FastAPI, HTTPException, Query  # FastAPI primitives
from fastapi.responses import JSONResponse  # raw JSON bodies for error responses
from pydantic import BaseModel  # response schema definitions

# Import our internal modules for configuration, data loading and search
from movie_search.config import configure_logging, get_settings  # env-driven settings
from movie_search.data_loader import DataLoader  # loads catalog documents
from movie_search.exceptions import CatalogError, InvalidQueryError  # loader failure, blank-query precondition
from movie_search.search_engine import SearchEngine  # core search engine

# Import loguru for simple, structured console logging
from loguru import logger  # convenient console logger

# Instantiate the FastAPI application with metadata
app = FastAPI(title="Movie Search API", version="1.0.0")  # web app

# Globals that hold the search engine instance and measured startup time
ENGINE: Optional[SearchEngine] = None  # will point to the initialized engine
STARTUP_TIME_S: float = 0.0  # measures how long startup took


# Pydantic model that describes a single ranked movie in responses
class MovieResult(BaseModel):
	id: str  # opaque identifier from the catalog
	title: str  # human-readable title
	year: Optional[int] = None  # release year if known
	genres: List[str]  # list of genres
	cast: List[str]  # actor names
	directors: List[str]  # director names
	rating: Optional[float] = None  # average rating
	watch_count: Optional[int] = None  # recorded views
	similarity: float  # best textual match, 2 decimals
	hybrid_score: float  # final ranking score, 2 decimals


# Pydantic model for the complete search response payload
class SearchResponse(BaseModel):
	query: str  # original query string
	total_results: int  # number of results returned
	elapsed_ms: float  # server-side search time in ms
	results: List[MovieResult]  # ranked items


# FastAPI startup hook to initialize the search engine once
@app.on_event("startup")
async def startup_event():
	"""Load the catalog and build the search engine."""
	global ENGINE, STARTUP_TIME_S  # refer to module-level globals
	settings = get_settings()  # env-driven configuration
	configure_logging(settings.log_level)  # single stderr sink at configured level
	start = time.time()  # start timer for startup latency

	logger.info(f"[API] Startup: loading catalog from '{settings.catalog_path}'...")  # log intent
	try:
		candidates = DataLoader().load_candidates_from_jsonl(settings.catalog_path)  # read dataset
	except CatalogError as e:
		# Keep serving /health; searches answer 503 until the catalog is fixed
		logger.error(f"[API] Catalog unavailable, search disabled: {e}")
		return
	ENGINE = SearchEngine(candidates, config=settings.ranking_config())  # create engine

	STARTUP_TIME_S = time.time() - start  # elapsed seconds
	logger.info(f"[API] Startup complete in {STARTUP_TIME_S:.2f}s with {ENGINE.size()} movies.")  # summary log


@app.get("/")
async def root():
	"""Describe the service and list its endpoints."""
	return {
		"message": "Movie Search API",
		"version": app.version,
		"endpoints": {
			"health": "GET /health",
			"search": "GET /api/movies/search?query=...&limit=10",
		},
	}


# Simple health endpoint for readiness checks
@app.get("/health")
async def health():
	"""Return minimal health info for liveness/readiness probes."""
	return {
		"status": "ok",  # constant indicator
		"engine_ready": ENGINE is not None,  # True if engine initialized
		"catalog_size": ENGINE.size() if ENGINE is not None else 0,  # loaded movies
		"startup_seconds": round(STARTUP_TIME_S, 2)  # startup latency
	}


# Main search endpoint that accepts a free-text query
@app.get("/api/movies/search", response_model=SearchResponse)
async def search(
	query: Optional[str] = Query(None, description="Free-text title, actor or director query"),
	limit: Optional[str] = Query(None, description="Maximum number of results (defaults to 10)"),
):
	"""Rank the catalog for the query and return the top results."""
	if ENGINE is None:  # engine must be ready to serve
		logger.warning("[API] Search requested but engine not initialized")  # guard log
		raise HTTPException(status_code=503, detail="Search engine not initialized")

	# Time the search for latency insight
	start = time.time()  # start timer
	logger.debug(f"[API] /api/movies/search query='{query}' limit={limit}")  # debug log of input

	try:
		results = ENGINE.search(query or '', limit=limit)  # run search; limit coerced by the ranker
	except InvalidQueryError:
		return JSONResponse(status_code=400, content={"error": "Query parameter is required"})
	except Exception as e:
		logger.exception(f"[API] Search failed for query='{query}'")
		return JSONResponse(status_code=500, content={"error": "Search failed", "message": str(e)})
	elapsed_ms = (time.time() - start) * 1000  # compute ms
	logger.info(f"[API] /api/movies/search served {len(results)} results in {elapsed_ms:.2f} ms")  # summary

	# Convert engine results to response schema
	items: List[MovieResult] = []  # accumulator
	for r in results:  # iterate ranked results
		m = r.movie  # candidate object
		items.append(  # append converted item
			MovieResult(
				id=m.id,
				title=m.title,
				year=m.year,
				genres=m.genres,
				cast=m.cast,
				directors=m.directors,
				rating=m.rating,
				watch_count=m.watch_count,
				similarity=round(r.similarity, 2),
				hybrid_score=round(r.hybrid_score, 2),
			)
		)

	# Return structured response with timing
	return SearchResponse(query=query, total_results=len(items), elapsed_ms=round(elapsed_ms, 2), results=items)
