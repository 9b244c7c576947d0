"""
API tests using FastAPI's TestClient.
"""

import pytest
from fastapi.testclient import TestClient

import api
from movie_search.config import get_settings
from movie_search.models import MovieCandidate
from movie_search.search_engine import SearchEngine


@pytest.fixture
def client(monkeypatch, catalog):
	monkeypatch.setattr(api, "ENGINE", SearchEngine(catalog))
	return TestClient(api.app)


def test_root_lists_endpoints(client):
	body = client.get("/").json()
	assert body["endpoints"]["search"].startswith("GET /api/movies/search")


def test_health(client):
	body = client.get("/health").json()
	assert body["status"] == "ok"
	assert body["engine_ready"] is True
	assert body["catalog_size"] == 6


def test_search_returns_rounded_scores(client):
	resp = client.get("/api/movies/search", params={"query": "Godfather", "limit": 5})
	assert resp.status_code == 200
	body = resp.json()
	assert body["query"] == "Godfather"
	assert body["total_results"] == 2
	top = body["results"][0]
	assert top["id"] == "1"
	assert top["title"] == "The Godfather"
	assert top["similarity"] == 1.0
	assert top["hybrid_score"] == 0.94
	assert top["cast"] == ["Marlon Brando", "Al Pacino"]


def test_missing_query_is_400(client):
	resp = client.get("/api/movies/search")
	assert resp.status_code == 400
	assert resp.json() == {"error": "Query parameter is required"}


def test_blank_query_is_400(client):
	assert client.get("/api/movies/search", params={"query": "   "}).status_code == 400


def test_bad_limit_falls_back_to_default(client):
	resp = client.get("/api/movies/search", params={"query": "the", "limit": "abc"})
	assert resp.status_code == 200


def test_limit_truncates(client):
	body = client.get("/api/movies/search", params={"query": "godfather", "limit": "1"}).json()
	assert body["total_results"] == 1


def test_engine_not_ready(monkeypatch):
	monkeypatch.setattr(api, "ENGINE", None)
	resp = TestClient(api.app).get("/api/movies/search", params={"query": "heat"})
	assert resp.status_code == 503


def test_unexpected_error_is_500(client, monkeypatch):
	def boom(query, limit=None):
		raise RuntimeError("catalog exploded")

	monkeypatch.setattr(api.ENGINE, "search", boom)
	resp = client.get("/api/movies/search", params={"query": "heat"})
	assert resp.status_code == 500
	assert resp.json() == {"error": "Search failed", "message": "catalog exploded"}


def test_startup_loads_catalog(monkeypatch, catalog_file):
	monkeypatch.setenv("MOVIE_SEARCH_CATALOG_PATH", str(catalog_file))
	monkeypatch.setattr(api, "ENGINE", None)
	get_settings.cache_clear()
	try:
		with TestClient(api.app) as client:
			body = client.get("/health").json()
			assert body["engine_ready"] is True
			assert body["catalog_size"] == 3
	finally:
		get_settings.cache_clear()


def test_decimal_limit_string_truncates(monkeypatch):
	movies = [MovieCandidate(id=str(i), title=f"Alien {i}") for i in range(15)]
	monkeypatch.setattr(api, "ENGINE", SearchEngine(movies))
	body = TestClient(api.app).get("/api/movies/search", params={"query": "alien", "limit": "3.0"}).json()
	assert body["total_results"] == 3


def test_missing_catalog_leaves_engine_unset(monkeypatch, tmp_path):
	monkeypatch.setenv("MOVIE_SEARCH_CATALOG_PATH", str(tmp_path / "missing.jsonl"))
	monkeypatch.setattr(api, "ENGINE", None)
	get_settings.cache_clear()
	try:
		with TestClient(api.app) as client:
			assert client.get("/health").json()["engine_ready"] is False
			assert client.get("/api/movies/search", params={"query": "heat"}).status_code == 503
	finally:
		get_settings.cache_clear()
