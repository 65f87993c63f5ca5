import pytest

from catalog.models import Country, Film, Genre
from catalog.search.fuzzy_search import FilmSearcher

FILMS = [
    Film("Inception", Genre.SCIENCE_FICTION, Country.UNITED_STATES, "Christopher Nolan", 2010),
    Film("Incendies", Genre.ACTION, Country.CANADA, "Denis Villeneuve", 2010),
    Film("Amélie", Genre.ROMANCE, Country.FRANCE, "Jean-Pierre Jeunet", 2001),
    Film("Spirited Away", Genre.ADVENTURE, Country.JAPAN, "Hayao Miyazaki", 2001),
]


def test_search_exact_title():
    searcher = FilmSearcher(FILMS)
    result = searcher.search("Spirited Away", limit=1)
    assert result == [FILMS[3]]


def test_search_accents_are_ignored():
    searcher = FilmSearcher(FILMS)
    result = searcher.search("amelie", limit=1)
    assert result[0].name == "Amélie"


def test_search_limit():
    searcher = FilmSearcher(FILMS)
    assert len(searcher.search("inc", limit=2)) == 2
    assert len(searcher.search("inc", limit=100)) == len(FILMS)


def test_search_empty_query():
    searcher = FilmSearcher(FILMS)
    with pytest.raises(ValueError):
        searcher.search("")


def test_searcher_len():
    searcher = FilmSearcher(FILMS)
    assert len(searcher) == len(FILMS)
    assert len(FilmSearcher([])) == 0
