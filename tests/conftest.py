import json

import pytest

from movie_search.models import MovieCandidate


@pytest.fixture
def catalog():
	return [
		MovieCandidate(id="1", title="The Godfather", cast=["Marlon Brando", "Al Pacino"], directors=["Francis Ford Coppola"], rating=9.2, watch_count=1523, year=1972),
		MovieCandidate(id="2", title="The Godfather: Part II", cast=["Al Pacino", "Robert De Niro"], directors=["Francis Ford Coppola"], rating=9.0, watch_count=1102, year=1974),
		MovieCandidate(id="3", title="Big", cast=["Tom Hanks", "Elizabeth Perkins"], directors=["Penny Marshall"], rating=7.3, watch_count=312, year=1988),
		MovieCandidate(id="4", title="Cast Away", cast=["Tom Hanks", "Helen Hunt"], directors=["Robert Zemeckis"], rating=7.8, watch_count=905, year=2000),
		MovieCandidate(id="5", title="Pulp Fiction", cast=["John Travolta", "Samuel L. Jackson"], directors=["Quentin Tarantino"], rating=8.9, watch_count=3120, year=1994),
		MovieCandidate(id="6", title="The Matrix", cast=["Keanu Reeves"], directors=["Lana Wachowski", "Lilly Wachowski"], rating=8.7, watch_count=4011, year=1999),
	]


@pytest.fixture
def catalog_file(tmp_path):
	docs = [
		{"_id": {"$oid": "65a1"}, "title": "The Godfather", "year": 1972, "genres": ["Crime", "Drama"], "cast": ["Marlon Brando", "Al Pacino"], "directors": ["Francis Ford Coppola"], "rating": 9.2, "watch_count": 1523},
		{"_id": "65a2", "title": "Forrest Gump", "year": 1994, "genres": ["Drama"], "cast": ["Tom Hanks"], "directors": ["Robert Zemeckis"], "rating": 8.8, "watch_count": 2210},
		{"id": 3, "title": "Inception", "year": 2010, "genres": "Action, Sci-Fi", "cast": "Leonardo DiCaprio, Elliot Page", "directors": ["Christopher Nolan"], "rating": "8.8", "watchCount": "5230"},
	]
	path = tmp_path / "movies.jsonl"
	path.write_text("\n".join(json.dumps(d) for d in docs) + "\n", encoding="utf-8")
	return path
