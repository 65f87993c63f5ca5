"""
In-memory registry of films with secondary indexes by name, genre and country.

Films are stored in an arena addressed by integer handles. The indexes only
hold handles, so removing a film never leaves a stale reference behind.
"""

import dataclasses
from collections import defaultdict
from typing import Iterable, Iterator, Optional

from catalog.logger import logger
from catalog.models import Country, Film, Genre
from catalog.parsing import load_records, parse_film_line, read_lines
from catalog.search.fuzzy_search import FilmSearcher
from catalog.utils import timed


class FilmRegistry:
    def __init__(self):
        self._films: dict[int, Film] = {}
        self._next_handle = 0
        self._by_name: dict[str, int] = {}
        self._by_genre: defaultdict[Genre, list[int]] = defaultdict(list)
        self._by_country: defaultdict[Country, list[int]] = defaultdict(list)
        self._searcher: Optional[FilmSearcher] = None

    def add(self, film: Film) -> bool:
        if film.name in self._by_name:
            return False
        handle = self._next_handle
        self._next_handle += 1
        self._films[handle] = film
        self._by_name[film.name] = handle
        self._by_genre[film.genre].append(handle)
        self._by_country[film.country].append(handle)
        self._searcher = None
        return True

    def remove(self, name: str) -> bool:
        handle = self._by_name.pop(name, None)
        if handle is None:
            return False
        film = self._films[handle]
        _remove_handle(self._by_genre, film.genre, handle)
        _remove_handle(self._by_country, film.country, handle)
        del self._films[handle]
        self._searcher = None
        return True

    def count(self) -> int:
        return len(self._films)

    def find_by_name(self, name: str) -> Optional[Film]:
        handle = self._by_name.get(name)
        if handle is None:
            return None
        return self._films[handle]

    def by_genre(self, genre: Genre) -> list[Film]:
        return self._resolve(self._by_genre.get(genre, []))

    def by_country(self, country: Country) -> list[Film]:
        return self._resolve(self._by_country.get(country, []))

    def between(self, year_start: int, year_end: int) -> list[Film]:
        """Films released between the two years, both included."""
        return [film for film in self._films.values() if year_start <= film.year <= year_end]

    def search(self, query: str, limit: int = 10) -> list[Film]:
        """Films whose title is closest to `query`, best match first."""
        if self._searcher is None:
            self._searcher = FilmSearcher(self._films.values())
        return self._searcher.search(query, limit=limit)

    def genres(self) -> Iterator[tuple[Genre, list[Film]]]:
        for genre, handles in self._by_genre.items():
            yield genre, self._resolve(handles)

    def copy(self) -> "FilmRegistry":
        """Copy owning its own films, with every index rebuilt from scratch."""
        other = FilmRegistry()
        for film in self._films.values():
            other.add(dataclasses.replace(film))
        return other

    __copy__ = copy

    def __deepcopy__(self, memo):
        return self.copy()

    def clear(self) -> None:
        self._films.clear()
        self._by_name.clear()
        self._by_genre.clear()
        self._by_country.clear()
        self._searcher = None

    @timed
    def load_from_file(self, path) -> bool:
        try:
            lines = read_lines(path)
        except OSError as exc:
            logger.error(f"films file {path} could not be read: {exc}")
            return False
        return self.load_lines(lines)

    def load_lines(self, lines: Iterable[str]) -> bool:
        """Replace the registry content with the films described by `lines`."""
        self.clear()
        return load_records(
            lines, parse_film_line, lambda record: self.add(record.to_film()), "films"
        )

    def _resolve(self, handles: list[int]) -> list[Film]:
        return [self._films[handle] for handle in handles]

    def __len__(self):
        return len(self._films)

    def __iter__(self) -> Iterator[Film]:
        return iter(self._films.values())

    def __contains__(self, name: str) -> bool:
        return name in self._by_name


def _remove_handle(index: dict, key, handle: int) -> None:
    bucket = index[key]
    bucket.remove(handle)
    if not bucket:
        del index[key]
